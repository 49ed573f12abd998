"""Combinators - aggregate operations over collections of futures."""

from eventual.combinators.ops import find, first_completed_of, fold_left, sequence, traverse

__all__ = [
    "sequence",
    "first_completed_of",
    "find",
    "fold_left",
    "traverse",
]
