"""Optional - presence or absence of a value."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from eventual.errors import NoSuchElementError

A = TypeVar("A")
B = TypeVar("B")


class Optional(ABC, Generic[A]):
    """A value that is either ``Some(value)`` or ``Nothing()``.

    ``Nothing`` takes the place of an empty optional since ``None`` is
    reserved in Python; ``Optional.of`` maps a plain ``None`` onto it.
    """

    @staticmethod
    def of(value: A | None) -> Optional[A]:
        """Wrap a possibly-``None`` value."""
        return Nothing() if value is None else Some(value)

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @property
    def non_empty(self) -> bool:
        return not self.is_empty

    @abstractmethod
    def get(self) -> A:
        """Return the held value.

        Raises:
            NoSuchElementError: If the optional is empty.
        """
        pass

    def get_or_else(self, default: Callable[[], A]) -> A:
        return default() if self.is_empty else self.get()

    def fold(self, default: B, f: Callable[[A], B]) -> B:
        return default if self.is_empty else f(self.get())

    def map(self, f: Callable[[A], B]) -> Optional[B]:
        return Nothing() if self.is_empty else Some(f(self.get()))

    def flat_map(self, f: Callable[[A], Optional[B]]) -> Optional[B]:
        return Nothing() if self.is_empty else f(self.get())

    def filter(self, predicate: Callable[[A], bool]) -> Optional[A]:
        if self.non_empty and predicate(self.get()):
            return self
        return Nothing()

    def contains(self, value: Any) -> bool:
        return self.non_empty and self.get() == value

    def foreach(self, f: Callable[[A], Any]) -> None:
        if self.non_empty:
            f(self.get())


@dataclass(frozen=True)
class Some(Optional[A]):
    value: A

    @property
    def is_empty(self) -> bool:
        return False

    def get(self) -> A:
        return self.value


@dataclass(frozen=True)
class Nothing(Optional[Any]):
    @property
    def is_empty(self) -> bool:
        return True

    def get(self) -> Any:
        raise NoSuchElementError("Nothing.get")
