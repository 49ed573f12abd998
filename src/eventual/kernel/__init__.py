"""Kernel layer - the Future monad and the value holders it is built on."""

from eventual.kernel.builder import (
    FutureBuilder2,
    FutureBuilder3,
    FutureBuilder4,
    FutureBuilder5,
    FutureBuilder6,
)
from eventual.kernel.env import Env, LoggingSink, NullSink, get_default_env, set_default_env
from eventual.kernel.future import Future
from eventual.kernel.optional import Nothing, Optional, Some
from eventual.kernel.ports import DiagnosticPort
from eventual.kernel.result import Failure, Result, Success
from eventual.kernel.trace import Evidence, Trace

__all__ = [
    "Future",
    "FutureBuilder2",
    "FutureBuilder3",
    "FutureBuilder4",
    "FutureBuilder5",
    "FutureBuilder6",
    # Value holders
    "Result",
    "Success",
    "Failure",
    "Optional",
    "Some",
    "Nothing",
    # Env & diagnostics
    "Env",
    "get_default_env",
    "set_default_env",
    "DiagnosticPort",
    "NullSink",
    "LoggingSink",
    "Trace",
    "Evidence",
]
