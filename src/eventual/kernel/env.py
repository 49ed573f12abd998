"""Environment for eventual - runtime ports and their defaults."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import Any

from eventual.kernel.ports import DiagnosticPort

logger = logging.getLogger(__name__)


class NullSink:
    """Diagnostic sink that discards every report."""

    def report(self, action: str, error: BaseException, info: dict[str, Any] | None = None) -> None:
        pass


class LoggingSink:
    """Diagnostic sink that forwards reports to a ``logging`` logger."""

    def __init__(self, log: logging.Logger | None = None, level: int = logging.ERROR) -> None:
        self.log = log or logger
        self.level = level

    def report(self, action: str, error: BaseException, info: dict[str, Any] | None = None) -> None:
        self.log.log(
            self.level,
            "swallowed exception in %s: %r",
            action,
            error,
            exc_info=(type(error), error, error.__traceback__),
            extra={"diagnostic_info": info or {}},
        )


@dataclass
class Env:
    """Environment aggregation - combines the ports futures consult at runtime.

    Attributes:
        sink: Receives errors swallowed by ``Future.and_then``.
        loop: Event loop that owns new handles; the running loop when unset.
    """

    sink: DiagnosticPort = field(default_factory=NullSink)
    loop: asyncio.AbstractEventLoop | None = None

    def with_sink(self, sink: DiagnosticPort) -> Env:
        return replace(self, sink=sink)

    def get_loop(self) -> asyncio.AbstractEventLoop:
        """Return the configured loop, falling back to the running one.

        Raises:
            RuntimeError: If no loop is configured and none is running.
        """
        if self.loop is not None:
            return self.loop
        return asyncio.get_running_loop()


_default_env = Env()


def get_default_env() -> Env:
    return _default_env


def set_default_env(env: Env) -> Env:
    """Install ``env`` as the process-wide default and return the previous one."""
    global _default_env
    previous = _default_env
    _default_env = env
    return previous
