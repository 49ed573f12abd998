from .combinators import find, first_completed_of, fold_left, sequence, traverse
from .errors import FutureError, InvalidArityError, NoSuchElementError
from .kernel import (
    DiagnosticPort,
    Env,
    Evidence,
    Failure,
    Future,
    LoggingSink,
    Nothing,
    NullSink,
    Optional,
    Result,
    Some,
    Success,
    Trace,
    get_default_env,
    set_default_env,
)

__all__ = [
    # Core
    "Future",
    "Result",
    "Success",
    "Failure",
    "Optional",
    "Some",
    "Nothing",
    # Collections
    "sequence",
    "first_completed_of",
    "find",
    "fold_left",
    "traverse",
    # Environment
    "Env",
    "get_default_env",
    "set_default_env",
    "DiagnosticPort",
    "NullSink",
    "LoggingSink",
    # Tracing
    "Trace",
    "Evidence",
    # Errors
    "FutureError",
    "NoSuchElementError",
    "InvalidArityError",
]
