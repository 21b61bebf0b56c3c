"""
Retry with exponential backoff for responder calls.

PURPOSE:
- Give every attempt its own timeout (asyncio.wait_for).
- Retry transient failures and timeouts, sleeping base, 2*base, 4*base, ...
- Surface rate-limit and credential failures after a single attempt.

CONTEXT:
- Stop/wait/retry policy comes from tenacity; the sleep function is injectable
  so tests can record the schedule instead of waiting.
"""

from __future__ import annotations
import asyncio
from typing import Awaitable, Callable, TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from wealthchat.responders.errors import (
    ResponderError,
    ResponderTimeout,
    TransientResponderError,
)

T = TypeVar("T")

log = structlog.get_logger(__name__)


async def _attempt(call: Callable[[], Awaitable[T]], timeout: float) -> T:
    """One timed attempt; every failure leaves as a ResponderError subclass."""
    try:
        return await asyncio.wait_for(call(), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise ResponderTimeout(f"no response within {timeout}s") from e
    except ResponderError:
        raise
    except Exception as e:
        raise ResponderError(f"responder failed: {type(e).__name__}") from e


def _log_retry(retry_state) -> None:
    error = retry_state.outcome.exception()
    log.info(
        "responder.retry",
        attempt=retry_state.attempt_number,
        delay_s=retry_state.next_action.sleep,
        category=getattr(error, "category", "generic"),
    )


async def call_with_retry(
    call: Callable[[], Awaitable[T]],
    *,
    timeout: float = 30.0,
    max_retries: int = 3,
    base_delay: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Await call() until it succeeds or the failure is final.

    parameters:
    - call: zero-argument coroutine factory; a fresh coroutine is created per attempt.
    - timeout: float – seconds allowed per attempt.
    - max_retries: int – retries after the first attempt (3 means 4 attempts total).
    - base_delay: float – delay before the first retry; doubles each retry.
    - sleep: awaitable sleep, replaced in tests.

    returns:
    - whatever call() returns.

    raises:
    - ResponderTimeout / TransientResponderError – once retries are exhausted.
    - ResponderRateLimited / ResponderAuthError / ResponderError – immediately.
    """
    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_exponential(multiplier=base_delay),
        retry=retry_if_exception_type(TransientResponderError),
        sleep=sleep,
        before_sleep=_log_retry,
        reraise=True,
    )
    try:
        async for attempt in retrying:
            with attempt:
                return await _attempt(call, timeout)
    except TransientResponderError as e:
        log.warning("responder.retries_exhausted", attempts=max_retries + 1, category=e.category)
        raise
