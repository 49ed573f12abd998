"""Collection combinators: sequence, first_completed_of, find, fold_left, traverse."""

# The combinators satisfy the following laws:
#
# 1. sequence([]) == Future.successful([])
#    Aggregating nothing succeeds immediately
#
# 2. fold_left([], zero, f) == Future.successful(zero)
#    Folding nothing yields the seed
#
# 3. traverse(xs, Future.successful) == sequence([Future.successful(x) for x in xs])
#    Traversal with a pure lift is aggregation
#
# 4. find(fs, p) never waits on a future after the first match
#    Search is sequential and short-circuits


from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from eventual.kernel.env import get_default_env
from eventual.kernel.future import Future, settle, to_future
from eventual.kernel.optional import Nothing, Optional, Some
from eventual.kernel.result import Result

A = TypeVar("A")
B = TypeVar("B")


def sequence(futures: Iterable[Future[A]]) -> Future[list[A]]:
    """Collect the values of all futures, in input order.

    Semantics:
        - All inputs run concurrently; the result waits for all of them
        - Succeeds with the values in input order
        - Fails as soon as any input fails. When several inputs fail, the
          exception reported is the first one ``asyncio.gather`` observes,
          which follows completion order, not input order

    Args:
        futures: Futures to aggregate.

    Returns:
        Future[list[A]]: The ordered values.
    """
    handles = [fut.handle for fut in futures]
    if not handles:
        return Future.successful([])
    return Future.from_handle(asyncio.gather(*handles))


def first_completed_of(futures: Iterable[Future[A]]) -> Future[A]:
    """Settle with whichever input settles first, success or failure.

    Semantics:
        - Inputs that settle later are ignored
        - Inputs already completed win in input order
        - An empty input never settles
    """
    target: asyncio.Future[A] = get_default_env().get_loop().create_future()

    def _first(result: Result[A]) -> None:
        settle(target, result)

    for fut in futures:
        fut.on_complete(_first)
    return Future(target)


def find(futures: Iterable[Future[A]], predicate: Callable[[A], bool]) -> Future[Optional[A]]:
    """Return the first value, in input order, that satisfies ``predicate``.

    Semantics:
        - Futures are examined one at a time, in input order
        - A failed input counts as a non-match; its exception is dropped
        - Futures after the first match are not examined
        - Succeeds with ``Nothing()`` when the input is empty or nothing matches
        - An exception raised by ``predicate`` fails the search

    Args:
        futures: Candidates to search.
        predicate: Test applied to each successful value.

    Returns:
        Future[Optional[A]]: ``Some(value)`` for the first match.
    """
    pending = list(futures)

    def _search(index: int) -> Future[Optional[A]]:
        if index == len(pending):
            return Future.successful(Nothing())

        def _step(result: Result[A]) -> Future[Optional[A]]:
            return result.fold(
                lambda _: _search(index + 1),
                lambda value: Future.successful(Some(value)) if predicate(value) else _search(index + 1),
            )

        return pending[index].transform_with(_step)

    return _search(0)


def fold_left(futures: Iterable[Future[A]], zero: B, f: Callable[[B, A], B]) -> Future[B]:
    """Fold the values of ``futures`` left to right into ``zero``.

    Each future is waited on in turn. The first failure, in input order,
    fails the fold and the remaining futures are not consulted.
    """
    pending = list(futures)

    def _fold(index: int, acc: B) -> Future[B]:
        if index == len(pending):
            return Future.successful(acc)
        return pending[index].flat_map(lambda value: _fold(index + 1, f(acc, value)))

    return _fold(0, zero)


def traverse(items: Iterable[A], f: Callable[[A], Future[B] | Awaitable[B]]) -> Future[list[B]]:
    """Map every item through ``f`` and collect the results in input order.

    ``f`` is applied to every item up front, so the resulting futures run
    concurrently. Results are then aggregated left to right; the first
    failure in that order fails the whole traversal. An exception raised
    directly by ``f`` counts as that item's failure.
    """
    return reduce(
        lambda acc, item: acc.zip_with(_lift(f, item), lambda values, value: [*values, value]),
        items,
        Future.successful([]),
    )


def _lift(f: Callable[[A], Any], item: A) -> Future[Any]:
    try:
        return to_future(f(item))
    except Exception as exc:
        return Future.failed(exc)
