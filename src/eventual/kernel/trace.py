"""In-memory diagnostic trace.

Trace is runtime infrastructure: it collects the errors futures swallow so
they can be inspected after the fact. It never influences a future's outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single swallowed error captured at runtime."""

    action: str
    error: BaseException
    id: int = 0
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)


class Trace:
    """Diagnostic sink that keeps every report as ``Evidence``.

    Reports are appended in the order the event loop runs the failing
    callbacks. Safe for single-threaded (async) use.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0

    def report(self, action: str, error: BaseException, info: dict[str, Any] | None = None) -> None:
        self.record(action, error, info)

    def record(
        self,
        action: str,
        error: BaseException,
        info: dict[str, Any] | None = None,
    ) -> int | None:
        """Record a swallowed error.

        Returns:
            Event ID, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                error=error,
                id=event_id,
                timestamp=datetime.now(UTC),
                info=info or {},
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: str) -> list[Evidence]:
        return [ev for ev in self._events if ev.action == action]

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
