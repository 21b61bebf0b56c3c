import asyncio

import pytest

from wealthchat.responders.errors import (
    ResponderAuthError,
    ResponderError,
    ResponderRateLimited,
    ResponderTimeout,
    TransientResponderError,
)
from wealthchat.responders.retry import call_with_retry


class Recorder:
    """Stands in for asyncio.sleep and records the requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


def _failing(exc, calls, succeed_on=None):
    async def call():
        calls.append(1)
        if succeed_on is not None and len(calls) >= succeed_on:
            return "ok"
        raise exc
    return call


def test_transient_failures_follow_backoff_schedule():
    sleep, calls = Recorder(), []
    with pytest.raises(TransientResponderError):
        asyncio.run(call_with_retry(_failing(TransientResponderError("503"), calls), sleep=sleep))
    assert len(calls) == 4
    assert sleep.delays == [1.0, 2.0, 4.0]


def test_success_after_retries():
    sleep, calls = Recorder(), []
    out = asyncio.run(call_with_retry(_failing(TransientResponderError("x"), calls, succeed_on=3), sleep=sleep))
    assert out == "ok"
    assert sleep.delays == [1.0, 2.0]


@pytest.mark.parametrize("exc", [ResponderRateLimited("429"), ResponderAuthError("401"), ResponderError("400")])
def test_non_retryable_errors_surface_immediately(exc):
    sleep, calls = Recorder(), []
    with pytest.raises(type(exc)):
        asyncio.run(call_with_retry(_failing(exc, calls), sleep=sleep))
    assert len(calls) == 1
    assert sleep.delays == []


def test_unexpected_exception_is_wrapped():
    sleep, calls = Recorder(), []
    with pytest.raises(ResponderError) as e:
        asyncio.run(call_with_retry(_failing(KeyError("boom"), calls), sleep=sleep))
    assert isinstance(e.value.__cause__, KeyError)
    assert len(calls) == 1


def test_timeouts_are_retried_then_reported():
    sleep, calls = Recorder(), []

    async def slow():
        calls.append(1)
        await asyncio.sleep(1)

    with pytest.raises(ResponderTimeout):
        asyncio.run(call_with_retry(slow, timeout=0.01, max_retries=2, base_delay=0.5, sleep=sleep))
    assert len(calls) == 3
    assert sleep.delays == [0.5, 1.0]


def test_zero_retries_means_single_attempt():
    sleep, calls = Recorder(), []
    with pytest.raises(TransientResponderError):
        asyncio.run(call_with_retry(_failing(TransientResponderError("503"), calls), max_retries=0, sleep=sleep))
    assert len(calls) == 1
    assert sleep.delays == []
