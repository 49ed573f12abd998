import asyncio

import pytest

from eventual import Failure, Future, InvalidArityError, Success
from fakes import delayed, delayed_error, outcome


def test_zip() -> None:
    async def run():
        return await outcome(Future.of(lambda: 1).zip(Future.of(lambda: 2)))

    assert asyncio.run(run()) == Success((1, 2))


def test_zip_reports_this_failure_first() -> None:
    async def run():
        e1, e2 = ValueError("e1"), ValueError("e2")
        both = await outcome(Future.failed(e1).zip(Future.failed(e2)))
        # e1 is observed even though it settles after e2
        slow_left = await outcome(Future.of(delayed_error(e1, 0.02)).zip(Future.failed(e2)))
        right_only = await outcome(Future.successful(1).zip(Future.failed(e2)))
        return e1, e2, both, slow_left, right_only

    e1, e2, both, slow_left, right_only = asyncio.run(run())
    assert both == Failure(e1)
    assert slow_left == Failure(e1)
    assert right_only == Failure(e2)


def test_zip_with() -> None:
    async def run():
        error = ValueError("err")
        ok = await outcome(Future.of(lambda: 1).zip_with(Future.of(lambda: 2), lambda a, b: a + b))
        failed = await outcome(Future.successful(1).zip_with(Future.failed(error), lambda a, b: a + b))
        return error, ok, failed

    error, ok, failed = asyncio.run(run())
    assert ok == Success(3)
    assert failed == Failure(error)


def test_fallback_to() -> None:
    async def run():
        e1, e2 = ValueError("e1"), ValueError("e2")
        primary = await outcome(Future.of(lambda: 1).fallback_to(Future.of(lambda: 2)))
        secondary = await outcome(Future.failed(e1).fallback_to(Future.of(lambda: 2)))
        both_fail = await outcome(Future.failed(e1).fallback_to(Future.failed(e2)))
        return e1, primary, secondary, both_fail

    e1, primary, secondary, both_fail = asyncio.run(run())
    assert primary == Success(1)
    assert secondary == Success(2)
    assert both_fail == Failure(e1)


def test_apply_family() -> None:
    async def run():
        one, two, three = Future.successful(1), Future.successful(2), Future.successful(3)
        return [
            await outcome(one.apply1(two, lambda a, b: a + b)),
            await outcome(one.apply2(two, three, lambda a, b, c: a + b + c)),
            await outcome(one.apply3(two, three, one, lambda *xs: sum(xs))),
            await outcome(one.apply4(two, three, one, two, lambda *xs: sum(xs))),
            await outcome(one.apply5(two, three, one, two, three, lambda *xs: sum(xs))),
        ]

    assert asyncio.run(run()) == [Success(3), Success(6), Success(7), Success(9), Success(12)]


def test_apply_fails_with_leftmost_failure() -> None:
    async def run():
        e1, e2 = ValueError("e1"), ValueError("e2")
        result = await outcome(
            Future.successful(1).apply2(
                Future.of(delayed_error(e1, 0.02)),
                Future.failed(e2),
                lambda a, b, c: a + b + c,
            )
        )
        return e1, result

    e1, result = asyncio.run(run())
    assert result == Failure(e1)


def test_chain_runs_in_declaration_order() -> None:
    async def run():
        two = await outcome(Future.of(lambda: 1).chain(Future.of(lambda: 2)).run(lambda a, b: a + b))
        three = await outcome(
            Future.of(lambda: 1).chain(Future.of(lambda: 2)).chain(Future.of(delayed(3))).run(
                lambda a, b, c: (a, b, c)
            )
        )
        six = await outcome(
            Future.successful("a")
            .chain(Future.successful("b"))
            .chain(Future.successful("c"))
            .chain(Future.successful("d"))
            .chain(Future.successful("e"))
            .chain(Future.successful("f"))
            .run(lambda *letters: "".join(letters))
        )
        return two, three, six

    two, three, six = asyncio.run(run())
    assert two == Success(3)
    assert three == Success((1, 2, 3))
    assert six == Success("abcdef")


def test_chain_failure() -> None:
    async def run():
        error = ValueError("err")
        result = await outcome(
            Future.of(lambda: 1).chain(Future.failed(error)).chain(Future.of(lambda: 1)).run(
                lambda a, b, c: a + b + c
            )
        )
        return error, result

    error, result = asyncio.run(run())
    assert result == Failure(error)


def test_chain_is_bounded() -> None:
    builder = Future.successful(0)
    for i in range(1, 6):
        builder = builder.chain(Future.successful(i))
    assert builder.arity == 6
    with pytest.raises(InvalidArityError) as info:
        builder.chain(Future.successful(6))
    assert info.value.arity == 7
