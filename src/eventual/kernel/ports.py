"""Port protocols for eventual - pure abstractions."""

from __future__ import annotations

from typing import Any, Protocol


class DiagnosticPort(Protocol):
    """Best-effort side channel for errors the library deliberately swallows.

    Implementations must not raise; whatever they do, the outcome of the
    future that reported the error is unaffected.
    """

    def report(self, action: str, error: BaseException, info: dict[str, Any] | None = None) -> None:
        """Report a swallowed error.

        Args:
            action: What was running when the error was raised (e.g. "and_then")
            error: The swallowed exception
            info: Additional context. The library passes the observed Result under "result".
        """
        ...
