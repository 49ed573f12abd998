"""Fluent builders for combining a fixed number of independent futures.

``a.chain(b).chain(c).run(f)`` is equivalent to
``a.flat_map(lambda x: b.flat_map(lambda y: c.map(lambda z: f(x, y, z))))``:
values are collected in declaration order and the first failing future in
that order determines the failure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from eventual.errors import InvalidArityError

if TYPE_CHECKING:
    from eventual.kernel.future import Future

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")

MAX_ARITY = 6


class _FutureBuilder:
    def __init__(self, *futures: Future[Any]) -> None:
        self._futures = futures

    @property
    def arity(self) -> int:
        return len(self._futures)

    def _run(self, f: Callable[..., R]) -> Future[R]:
        head, *rest = self._futures
        return head.apply_n(rest, f)


class FutureBuilder2(_FutureBuilder, Generic[A, B]):
    def __init__(self, oa: Future[A], ob: Future[B]) -> None:
        super().__init__(oa, ob)

    def run(self, f: Callable[[A, B], R]) -> Future[R]:
        return self._run(f)

    def chain(self, oc: Future[C]) -> FutureBuilder3[A, B, C]:
        return FutureBuilder3(*self._futures, oc)


class FutureBuilder3(_FutureBuilder, Generic[A, B, C]):
    def __init__(self, oa: Future[A], ob: Future[B], oc: Future[C]) -> None:
        super().__init__(oa, ob, oc)

    def run(self, f: Callable[[A, B, C], R]) -> Future[R]:
        return self._run(f)

    def chain(self, od: Future[D]) -> FutureBuilder4[A, B, C, D]:
        return FutureBuilder4(*self._futures, od)


class FutureBuilder4(_FutureBuilder, Generic[A, B, C, D]):
    def __init__(self, oa: Future[A], ob: Future[B], oc: Future[C], od: Future[D]) -> None:
        super().__init__(oa, ob, oc, od)

    def run(self, f: Callable[[A, B, C, D], R]) -> Future[R]:
        return self._run(f)

    def chain(self, oe: Future[E]) -> FutureBuilder5[A, B, C, D, E]:
        return FutureBuilder5(*self._futures, oe)


class FutureBuilder5(_FutureBuilder, Generic[A, B, C, D, E]):
    def __init__(self, oa: Future[A], ob: Future[B], oc: Future[C], od: Future[D], oe: Future[E]) -> None:
        super().__init__(oa, ob, oc, od, oe)

    def run(self, f: Callable[[A, B, C, D, E], R]) -> Future[R]:
        return self._run(f)

    def chain(self, of: Future[F]) -> FutureBuilder6[A, B, C, D, E, F]:
        return FutureBuilder6(*self._futures, of)


class FutureBuilder6(_FutureBuilder, Generic[A, B, C, D, E, F]):
    def __init__(
        self,
        oa: Future[A],
        ob: Future[B],
        oc: Future[C],
        od: Future[D],
        oe: Future[E],
        of: Future[F],
    ) -> None:
        super().__init__(oa, ob, oc, od, oe, of)

    def run(self, f: Callable[[A, B, C, D, E, F], R]) -> Future[R]:
        return self._run(f)

    def chain(self, other: Future[Any]) -> Any:
        """Builders stop at six futures.

        Raises:
            InvalidArityError: Always.
        """
        raise InvalidArityError(
            f"chain supports at most {MAX_ARITY} futures",
            arity=MAX_ARITY + 1,
        )
