import pytest

from eventual import Failure, NoSuchElementError, Nothing, Result, Some, Success
from fakes import boom


def test_attempt_captures_value_and_exception() -> None:
    assert Result.attempt(lambda: 1) == Success(1)
    failure = Result.attempt(boom)
    assert failure.is_failure
    assert isinstance(failure.get_error(), ValueError)


def test_get_and_get_error() -> None:
    error = ValueError("err")
    assert Success(1).get() == 1
    assert Failure(error).get_error() is error
    with pytest.raises(ValueError):
        Failure(error).get()
    with pytest.raises(NoSuchElementError):
        Success(1).get_error()


def test_fold() -> None:
    assert Success(1).fold(lambda e: -1, lambda a: a + 1) == 2
    assert Failure(ValueError()).fold(lambda e: -1, lambda a: a + 1) == -1


def test_map_and_flat_map() -> None:
    error = ValueError("err")
    assert Success(1).map(lambda a: a + 1) == Success(2)
    assert Failure(error).map(lambda a: a + 1) == Failure(error)
    assert Success(1).map(lambda _: boom()).is_failure
    assert Success(1).flat_map(lambda a: Success(a * 3)) == Success(3)
    assert Success(1).flat_map(lambda _: boom()).is_failure
    assert Failure(error).flat_map(lambda a: Success(a)) == Failure(error)


def test_filter() -> None:
    assert Success(2).filter(lambda a: a == 2) == Success(2)
    assert isinstance(Success(3).filter(lambda a: a == 2).get_error(), NoSuchElementError)


def test_recover() -> None:
    error = ValueError("err")
    assert Failure(error).recover(lambda _: Some(0)) == Success(0)
    assert Failure(error).recover(lambda _: Nothing()) == Failure(error)
    assert Success(1).recover(lambda _: Some(0)) == Success(1)
    assert str(Failure(error).recover(lambda _: boom("again")).get_error()) == "again"
    assert Failure(error).recover_with(lambda _: Some(Success(5))) == Success(5)
    assert Failure(error).recover_with(lambda _: Nothing()) == Failure(error)


def test_failed_inverts() -> None:
    error = ValueError("err")
    assert Failure(error).failed() == Success(error)
    assert Success(1).failed().is_failure


def test_transform_and_conversions() -> None:
    error = ValueError("err")
    assert Success(1).transform(lambda a: Success(a + 1), lambda e: Failure(e)) == Success(2)
    assert Failure(error).transform(lambda a: Success(a), lambda e: Success(0)) == Success(0)
    assert Success(1).transform(lambda _: boom(), lambda e: Failure(e)).is_failure
    assert Success(1).to_optional() == Some(1)
    assert Failure(error).to_optional() == Nothing()
    assert Failure(error).get_or_else(lambda: 7) == 7
    assert Failure(error).or_else(Success(8)) == Success(8)
    assert Success(1).or_else(Success(8)) == Success(1)


def test_foreach() -> None:
    seen = []
    Success(1).foreach(seen.append)
    Failure(ValueError()).foreach(seen.append)
    assert seen == [1]
