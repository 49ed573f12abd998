"""Result - the outcome of a computation that may raise."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from eventual.errors import NoSuchElementError
from eventual.kernel.optional import Nothing, Optional, Some

A = TypeVar("A")
B = TypeVar("B")


class Result(ABC, Generic[A]):
    """
    A container for the outcome of a computation.

    Variants:
    - Success: the computation returned a value
    - Failure: the computation raised; the exception is kept, not re-raised

    Operations that take user functions catch ``Exception`` raised by those
    functions and turn it into a ``Failure``, so a pipeline of results never
    raises part-way through.
    """

    @staticmethod
    def attempt(thunk: Callable[[], A]) -> Result[A]:
        """Run ``thunk`` and capture either its return value or its exception."""
        try:
            return Success(thunk())
        except Exception as exc:
            return Failure(exc)

    @property
    @abstractmethod
    def is_success(self) -> bool:
        pass

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @abstractmethod
    def get(self) -> A:
        """Return the value, or raise the held exception for a Failure."""
        pass

    @abstractmethod
    def get_error(self) -> BaseException:
        """Return the held exception.

        Raises:
            NoSuchElementError: If this is a Success.
        """
        pass

    def fold(self, on_error: Callable[[BaseException], B], on_success: Callable[[A], B]) -> B:
        if self.is_failure:
            return on_error(self.get_error())
        return on_success(self.get())

    def get_or_else(self, default: Callable[[], A]) -> A:
        return default() if self.is_failure else self.get()

    def or_else(self, other: Result[A]) -> Result[A]:
        return other if self.is_failure else self

    def foreach(self, f: Callable[[A], Any]) -> None:
        if self.is_success:
            f(self.get())

    def to_optional(self) -> Optional[A]:
        return Some(self.get()) if self.is_success else Nothing()

    def transform(
        self,
        on_success: Callable[[A], Result[B]],
        on_failure: Callable[[BaseException], Result[B]],
    ) -> Result[B]:
        try:
            if self.is_success:
                return on_success(self.get())
            return on_failure(self.get_error())
        except Exception as exc:
            return Failure(exc)

    @abstractmethod
    def map(self, f: Callable[[A], B]) -> Result[B]:
        pass

    @abstractmethod
    def flat_map(self, f: Callable[[A], Result[B]]) -> Result[B]:
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[A], bool]) -> Result[A]:
        pass

    @abstractmethod
    def failed(self) -> Result[BaseException]:
        """Invert the result: a Failure becomes a Success holding its exception."""
        pass

    @abstractmethod
    def recover(self, f: Callable[[BaseException], Optional[A]]) -> Result[A]:
        pass

    @abstractmethod
    def recover_with(self, f: Callable[[BaseException], Optional[Result[A]]]) -> Result[A]:
        pass


@dataclass(frozen=True)
class Success(Result[A]):
    value: A

    @property
    def is_success(self) -> bool:
        return True

    def get(self) -> A:
        return self.value

    def get_error(self) -> BaseException:
        raise NoSuchElementError("Success.get_error")

    def map(self, f: Callable[[A], B]) -> Result[B]:
        return Result.attempt(lambda: f(self.value))

    def flat_map(self, f: Callable[[A], Result[B]]) -> Result[B]:
        try:
            return f(self.value)
        except Exception as exc:
            return Failure(exc)

    def filter(self, predicate: Callable[[A], bool]) -> Result[A]:
        try:
            if predicate(self.value):
                return self
            return Failure(NoSuchElementError(f"Predicate does not hold for {self.value!r}"))
        except Exception as exc:
            return Failure(exc)

    def failed(self) -> Result[BaseException]:
        return Failure(NoSuchElementError("Success.failed"))

    def recover(self, f: Callable[[BaseException], Optional[A]]) -> Result[A]:
        return self

    def recover_with(self, f: Callable[[BaseException], Optional[Result[A]]]) -> Result[A]:
        return self


@dataclass(frozen=True)
class Failure(Result[Any]):
    error: BaseException

    @property
    def is_success(self) -> bool:
        return False

    def get(self) -> Any:
        raise self.error

    def get_error(self) -> BaseException:
        return self.error

    def map(self, f: Callable[[Any], B]) -> Result[B]:
        return self

    def flat_map(self, f: Callable[[Any], Result[B]]) -> Result[B]:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Result[Any]:
        return self

    def failed(self) -> Result[BaseException]:
        return Success(self.error)

    def recover(self, f: Callable[[BaseException], Optional[Any]]) -> Result[Any]:
        try:
            return f(self.error).fold(self, Success)
        except Exception as exc:
            return Failure(exc)

    def recover_with(self, f: Callable[[BaseException], Optional[Result[Any]]]) -> Result[Any]:
        try:
            return f(self.error).fold(self, lambda replacement: replacement)
        except Exception as exc:
            return Failure(exc)
