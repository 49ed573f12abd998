"""Error types raised by eventual."""

from __future__ import annotations


class FutureError(Exception):
    """Base class for errors produced by the library itself."""


class NoSuchElementError(FutureError, LookupError):
    """Raised when a value is requested from something that does not hold one.

    Used by ``Optional.get`` on an empty optional, by ``Future.filter`` when
    the predicate rejects the value, and by ``Future.failed_projection`` when
    the original future succeeded.
    """


class InvalidArityError(FutureError, ValueError):
    """Raised when a fluent builder is asked to hold more futures than it supports."""

    def __init__(self, message: str, arity: int) -> None:
        self.arity = arity
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidArityError({super().__repr__()}, arity={self.arity!r})"
