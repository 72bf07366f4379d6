"""Opt-in backoff policy for callers.

The client never retries on its own. Wrap a call with this policy when a
throttled or flaky request should be tried again:

    stops = await call_with_backoff(lta.download_bus_stops)

    @with_backoff(attempts=5)
    async def refresh():
        return await lta.download_passenger_volume_by_bus_stop()

Only errors flagged `retryable` (RateLimitedError, NetworkError) are retried.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from lta_datamall.errors import LandTransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, LandTransportError) and exc.retryable


def with_backoff(
    *,
    attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 30.0,
):
    """Decorator: retry transient DataMall errors with exponential backoff."""
    return retry(
        retry=retry_if_exception(is_retryable),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        stop=stop_after_attempt(attempts),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


async def call_with_backoff(
    fn: Callable[..., Awaitable[T]],
    *args: Any,
    attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 30.0,
    **kwargs: Any,
) -> T:
    """Call `fn(*args, **kwargs)` under the with_backoff policy."""
    wrapped = with_backoff(attempts=attempts, min_wait=min_wait, max_wait=max_wait)(fn)
    return await wrapped(*args, **kwargs)
