import asyncio
import logging

import pytest

from eventual import Env, Future, LoggingSink, NullSink, Success, Trace, get_default_env, set_default_env
from fakes import boom, outcome


def test_default_env_uses_null_sink() -> None:
    env = Env()
    assert isinstance(env.sink, NullSink)
    assert env.loop is None


def test_with_sink_returns_copy() -> None:
    env = Env()
    trace = Trace()
    traced = env.with_sink(trace)
    assert traced.sink is trace
    assert isinstance(env.sink, NullSink)


def test_get_loop_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        Env().get_loop()


def test_set_default_env_routes_and_then_errors() -> None:
    trace = Trace()
    previous = set_default_env(Env(sink=trace))
    try:
        async def run():
            return await outcome(Future.successful(1).and_then(lambda _: boom("default sink")))

        result = asyncio.run(run())
    finally:
        set_default_env(previous)

    assert result == Success(1)
    assert [str(ev.error) for ev in trace.find_all("and_then")] == ["default sink"]
    assert isinstance(get_default_env().sink, NullSink)


def test_logging_sink_logs_swallowed_exception(caplog: pytest.LogCaptureFixture) -> None:
    async def run():
        env = Env(sink=LoggingSink())
        return await outcome(Future.successful(1).and_then(lambda _: boom("logged"), env=env))

    with caplog.at_level(logging.ERROR, logger="eventual"):
        result = asyncio.run(run())

    assert result == Success(1)
    records = [r for r in caplog.records if r.name == "eventual.kernel.env"]
    assert len(records) == 1
    assert "and_then" in records[0].getMessage()
    assert records[0].exc_info is not None
    assert records[0].diagnostic_info == {"result": Success(1)}


def test_trace_disabled_records_nothing() -> None:
    trace = Trace(enabled=False)
    assert trace.record("and_then", ValueError("err")) is None
    assert len(trace) == 0


def test_trace_clear() -> None:
    trace = Trace()
    assert trace.record("and_then", ValueError("a")) == 0
    assert trace.record("foreach", ValueError("b")) == 1
    assert [ev.action for ev in trace.get_events()] == ["and_then", "foreach"]
    trace.clear()
    assert len(trace) == 0
    assert trace.record("and_then", ValueError("c")) == 0
