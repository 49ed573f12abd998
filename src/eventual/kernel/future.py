"""Future monad - eager, push-based asynchronous results."""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import logging
from collections.abc import Awaitable, Callable, Generator, Sequence
from functools import reduce
from typing import Any, Generic, TypeVar

from eventual.errors import NoSuchElementError
from eventual.kernel.builder import FutureBuilder2
from eventual.kernel.env import Env, get_default_env
from eventual.kernel.optional import Nothing, Optional, Some
from eventual.kernel.ports import DiagnosticPort
from eventual.kernel.result import Failure, Result, Success

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


def outcome_of(handle: asyncio.Future[A]) -> Result[A]:
    """Read the terminal outcome of a done handle as a Result."""
    if handle.cancelled():
        return Failure(asyncio.CancelledError())
    error = handle.exception()
    if error is not None:
        return Failure(error)
    return Success(handle.result())


def settle(handle: asyncio.Future[A], result: Result[A]) -> bool:
    """Complete a pending handle with ``result``.

    Returns:
        False if the handle was already done and nothing changed
    """
    if handle.done():
        return False
    result = storable(result)
    if result.is_success:
        handle.set_result(result.get())
    else:
        handle.set_exception(result.get_error())
    return True


def storable(result: Result[A]) -> Result[A]:
    """Return ``result`` in a form an ``asyncio.Future`` can hold.

    A Failure holding StopIteration is wrapped in RuntimeError, and one
    holding a non-exception becomes TypeError. Anything else is returned as is.
    """
    if result.is_success:
        return result
    error = result.get_error()
    if not isinstance(error, BaseException):
        return Failure(TypeError(f"Failure must hold an exception, got {type(error).__name__}"))
    if isinstance(error, StopIteration):
        # asyncio refuses to store StopIteration on a future
        wrapped = RuntimeError(f"{type(error).__name__} raised inside a future")
        wrapped.__cause__ = error
        return Failure(wrapped)
    return result


def to_future(value: Any) -> Future[Any]:
    """Coerce the return value of a user function into a Future.

    Futures pass through; awaitables and ``concurrent.futures.Future`` are
    wrapped with ``Future.from_handle``.

    Raises:
        TypeError: If ``value`` is none of the above.
    """
    if isinstance(value, Future):
        return value
    if inspect.isawaitable(value) or isinstance(value, concurrent.futures.Future):
        return Future.from_handle(value)
    raise TypeError(f"Expected a Future or an awaitable, got {type(value).__name__}")


class Future(Generic[A]):
    """A value, or an exception, that becomes available asynchronously.

    Each Future wraps exactly one ``asyncio.Future`` (its handle) and caches
    the handle's terminal outcome as ``Optional[Result[A]]``. The cache starts
    as ``Nothing()`` and is filled exactly once, when the event loop runs the
    handle's done callbacks.

    Combinators never raise because of user code. An exception raised by a
    user-supplied function is captured and becomes the failure of the derived
    future. Derived futures own a fresh handle that settles only after the
    upstream settles and the function has run.

    Pre-settled futures (``unit``, ``successful``, ``failed``, ``from_result``)
    fill their cache at construction and need no event loop until their
    handle is first accessed.
    """

    def __init__(self, handle: asyncio.Future[A] | None = None, already: Result[A] | None = None) -> None:
        if handle is None and already is None:
            raise ValueError("Future requires a handle or an already known result")
        self._handle = handle
        self._presettled = already is not None
        self._value: Optional[Result[A]] = Nothing()
        if already is not None:
            self._value = Some(storable(already))
        if handle is not None:
            handle.add_done_callback(self._on_settled)

    def _on_settled(self, handle: asyncio.Future[A]) -> None:
        # Also marks the handle's exception as retrieved.
        result = outcome_of(handle)
        if self._value.is_empty:
            self._value = Some(result)

    def __repr__(self) -> str:
        state = self._value.fold("pending", repr)
        return f"Future({state})"

    def __await__(self) -> Generator[Any, None, A]:
        return self.handle.__await__()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of(computation: Callable[[], A | Awaitable[A]] | Awaitable[A]) -> Future[A]:
        """Start a computation and return its Future.

        A zero-argument callable is invoked immediately. If it raises, the
        future fails with that exception; if it returns an awaitable, the
        awaitable is wrapped; otherwise the return value is the success.
        An awaitable passed directly is wrapped as with ``from_handle``.

        The outcome of a synchronous computation is published through the
        event loop, so ``is_completed()`` is False until the loop runs.

        Raises:
            RuntimeError: If no event loop is available. The callable is not invoked.
        """
        if isinstance(computation, Future):
            return computation
        if inspect.isawaitable(computation) or isinstance(computation, concurrent.futures.Future):
            return Future.from_handle(computation)
        loop = get_default_env().get_loop()
        try:
            value = computation()  # type: ignore[operator]
        except Exception as exc:
            result: Result[A] = Failure(exc)
        else:
            if inspect.isawaitable(value):
                return Future.from_handle(value)
            result = Success(value)
        handle = loop.create_future()
        settle(handle, result)
        return Future(handle)

    @staticmethod
    def from_handle(handle: Awaitable[A] | concurrent.futures.Future[A]) -> Future[A]:
        """Wrap an existing asyncio future, task, coroutine or thread-pool future."""
        loop = get_default_env().loop
        if isinstance(handle, concurrent.futures.Future):
            return Future(asyncio.wrap_future(handle, loop=loop))
        return Future(asyncio.ensure_future(handle, loop=loop))

    @staticmethod
    def unit() -> Future[None]:
        return Future(already=Success(None))

    @staticmethod
    def successful(value: A) -> Future[A]:
        return Future(already=Success(value))

    @staticmethod
    def failed(error: BaseException) -> Future[Any]:
        return Future(already=Failure(error))

    @staticmethod
    def from_result(result: Result[A]) -> Future[A]:
        return result.fold(Future.failed, Future.successful)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def handle(self) -> asyncio.Future[A]:
        """The underlying ``asyncio.Future``.

        Pre-settled futures create it on first access, already resolved, and
        create a fresh one when accessed from a different event loop.
        """
        if self._handle is None or (self._presettled and self._handle.get_loop() is not self._loop()):
            # the cached outcome is already known, so any loop may publish it
            handle = self._loop().create_future()
            settle(handle, self._value.get())
            handle.add_done_callback(self._on_settled)
            self._handle = handle
        return self._handle

    def is_completed(self) -> bool:
        """Whether the outcome is known yet. Non-deterministic while pending."""
        return self._value.non_empty

    def value(self) -> Optional[Result[A]]:
        """The cached outcome: ``Nothing()`` while pending, ``Some(result)`` afterwards."""
        return self._value

    def on_complete(self, f: Callable[[Result[A]], Any]) -> None:
        """Run ``f`` with the terminal Result once it is known.

        ``f`` always runs from the event loop, never inline, even when the
        future has already completed. Callbacks run in registration order.
        The return value of ``f`` is discarded.
        """

        def _dispatch(handle: asyncio.Future[A]) -> None:
            f(self._value.get_or_else(lambda: outcome_of(handle)))

        self.handle.add_done_callback(_dispatch)

    def foreach(self, f: Callable[[A], Any], env: Env | None = None) -> None:
        """Run ``f`` with the value on success. Exceptions from ``f`` go to the diagnostic sink."""
        sink = (env or get_default_env()).sink

        def _run(result: Result[A]) -> None:
            try:
                result.foreach(f)
            except Exception as exc:
                _report(sink, "foreach", exc, {"result": result})

        self.on_complete(_run)

    def failed_projection(self) -> Future[BaseException]:
        """Succeed with the original exception if this future fails.

        If this future succeeds, the returned future fails with
        ``NoSuchElementError``.
        """
        return self.transform(
            lambda result: result.fold(
                Success,
                lambda _: Failure(NoSuchElementError("Future.failed not completed with an exception")),
            )
        )

    # ------------------------------------------------------------------
    # Transform algebra
    # ------------------------------------------------------------------

    def _loop(self) -> asyncio.AbstractEventLoop:
        if self._handle is not None and not self._presettled:
            return self._handle.get_loop()
        return get_default_env().get_loop()

    def transform(self, f: Callable[[Result[A]], Result[B]]) -> Future[B]:
        """Derive a future by mapping this future's terminal Result through ``f``.

        ``f`` sees successes and failures alike. If ``f`` raises, or returns
        something that is not a Result, the derived future fails with that
        exception.
        """
        target: asyncio.Future[B] = self._loop().create_future()

        def _apply(result: Result[A]) -> None:
            try:
                derived = f(result)
                if not isinstance(derived, Result):
                    raise TypeError(f"transform function must return a Result, got {type(derived).__name__}")
            except Exception as exc:
                derived = Failure(exc)
            settle(target, derived)

        self.on_complete(_apply)
        return Future(target)

    def transform_both(
        self,
        on_success: Callable[[A], B],
        on_failure: Callable[[BaseException], BaseException],
    ) -> Future[B]:
        """Map the value with ``on_success`` or the exception with ``on_failure``."""
        return self.transform(
            lambda result: result.fold(
                lambda error: Failure(on_failure(error)),
                lambda value: Result.attempt(lambda: on_success(value)),
            )
        )

    def transform_with(self, f: Callable[[Result[A]], Future[B] | Awaitable[B]]) -> Future[B]:
        """Derive a future from the future (or awaitable) ``f`` returns.

        The derived future settles when the returned one does. If ``f`` raises
        before returning, the derived future fails with that exception.
        """
        target: asyncio.Future[B] = self._loop().create_future()

        def _apply(result: Result[A]) -> None:
            try:
                inner = to_future(f(result))
            except Exception as exc:
                settle(target, Failure(exc))
                return
            inner.on_complete(lambda outcome: settle(target, outcome))

        self.on_complete(_apply)
        return Future(target)

    def map(self, f: Callable[[A], B]) -> Future[B]:
        return self.transform(lambda result: result.map(f))

    def flat_map(self, f: Callable[[A], Future[B] | Awaitable[B]]) -> Future[B]:
        """Chain dependent asynchronous work. ``f`` is not called if this future fails."""
        return self.transform_with(lambda result: result.fold(Future.failed, f))

    def filter(self, predicate: Callable[[A], bool]) -> Future[A]:
        """Keep the value if ``predicate`` holds, otherwise fail with ``NoSuchElementError``."""

        def _check(value: A) -> A:
            if predicate(value):
                return value
            raise NoSuchElementError("Future.filter predicate is not satisfied")

        return self.map(_check)

    def recover(self, f: Callable[[BaseException], Optional[B]]) -> Future[A | B]:
        """Replace a failure with a value when ``f`` returns ``Some``.

        ``Nothing()`` keeps the original failure.
        """
        return self.transform(lambda result: result.recover(f))

    def recover_with(self, f: Callable[[BaseException], Optional[Future[B]]]) -> Future[A | B]:
        """Replace a failure with another future when ``f`` returns ``Some``."""

        def _substitute(error: BaseException) -> Future[Any]:
            return f(error).fold(Future.failed(error), lambda replacement: replacement)

        return self.transform_with(lambda result: result.fold(_substitute, Future.successful))

    def and_then(self, f: Callable[[Result[A]], Any], env: Env | None = None) -> Future[A]:
        """Run ``f`` for its side effect and keep this future's outcome.

        Exceptions raised by ``f`` are swallowed and reported to the
        environment's diagnostic sink. Every ``and_then`` in a chain observes
        the original outcome.
        """
        sink = (env or get_default_env()).sink

        def _side_effect(result: Result[A]) -> Result[A]:
            try:
                f(result)
            except Exception as exc:
                _report(sink, "and_then", exc, {"result": result})
            return result

        return self.transform(_side_effect)

    # ------------------------------------------------------------------
    # Combine algebra
    # ------------------------------------------------------------------

    def zip(self, other: Future[B]) -> Future[tuple[A, B]]:
        """Pair both values. If this future fails, its exception wins."""
        return self.zip_with(other, lambda a, b: (a, b))

    def zip_with(self, other: Future[B], f: Callable[[A, B], C]) -> Future[C]:
        return self.flat_map(lambda a: other.map(lambda b: f(a, b)))

    def fallback_to(self, other: Future[B]) -> Future[A | B]:
        """Use ``other`` if this future fails.

        If both fail, the result carries this future's original exception.
        """
        return self.recover_with(lambda _: Some(other)).recover_with(lambda _: Some(self))

    def apply_n(self, others: Sequence[Future[Any]], f: Callable[..., R]) -> Future[R]:
        """Combine this future with ``others`` through ``f(a, *rest)``.

        Values are collected left to right by nested ``flat_map``; the first
        failing future in that order determines the failure.
        """
        collected = reduce(
            lambda acc, fut: acc.zip_with(fut, lambda values, value: (*values, value)),
            others,
            self.map(lambda a: (a,)),
        )
        return collected.map(lambda values: f(*values))

    def apply1(self, ob: Future[B], f: Callable[[A, B], R]) -> Future[R]:
        return self.apply_n((ob,), f)

    def apply2(self, ob: Future[B], oc: Future[C], f: Callable[[A, B, C], R]) -> Future[R]:
        return self.apply_n((ob, oc), f)

    def apply3(
        self, ob: Future[B], oc: Future[C], od: Future[D], f: Callable[[A, B, C, D], R]
    ) -> Future[R]:
        return self.apply_n((ob, oc, od), f)

    def apply4(
        self,
        ob: Future[B],
        oc: Future[C],
        od: Future[D],
        oe: Future[E],
        f: Callable[[A, B, C, D, E], R],
    ) -> Future[R]:
        return self.apply_n((ob, oc, od, oe), f)

    def apply5(
        self,
        ob: Future[B],
        oc: Future[C],
        od: Future[D],
        oe: Future[E],
        of: Future[F],
        f: Callable[[A, B, C, D, E, F], R],
    ) -> Future[R]:
        return self.apply_n((ob, oc, od, oe, of), f)

    def chain(self, other: Future[B]) -> FutureBuilder2[A, B]:
        """Start a fluent builder: ``a.chain(b).chain(c).run(f)``."""
        return FutureBuilder2(self, other)


def _report(sink: DiagnosticPort, action: str, error: Exception, info: dict[str, Any]) -> None:
    try:
        sink.report(action, error, info)
    except Exception:
        logger.exception("diagnostic sink failed while reporting %s error", action)
