"""Retry with exponential backoff for transient q-alloc errors."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar

from q_alloc.config.domain.execution import RetryConfig
from q_alloc.core.errors import QAllocError, UpstreamError

T = TypeVar("T")

RetryHook: TypeAlias = Callable[[int, QAllocError, float], None]


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    retry: RetryConfig,
    on_retry: RetryHook | None = None,
) -> T:
    """Await operation(), retrying retriable QAllocErrors with exponential backoff.

    Non-retriable errors, and the last error once max_attempts is reached,
    propagate unchanged. on_retry receives (attempt, error, backoff_seconds)
    before each sleep.
    """
    backoff = float(retry.initial_backoff_seconds)
    for attempt in range(1, retry.max_attempts + 1):
        try:
            return await operation()
        except QAllocError as exc:
            if not exc.retriable or attempt == retry.max_attempts:
                raise
            if on_retry is not None:
                on_retry(attempt, exc, backoff)
        await asyncio.sleep(backoff)
        backoff *= retry.backoff_multiplier
    raise AssertionError("unreachable: max_attempts >= 1")


async def call_with_timeout(
    operation: Callable[[], Awaitable[T]],
    timeout_seconds: float,
    description: str,
    retry_on_timeout: bool = True,
) -> T:
    """Await operation() bounded by timeout_seconds.

    A timeout is reported as an UpstreamError naming description, e.g.
    ``"Failed to query question pool: timed out after 5.0s"``. It is retriable
    unless retry_on_timeout is False, for operations whose side effect may
    still complete after being cancelled (an SMTP send running in a thread).
    """
    try:
        async with asyncio.timeout(timeout_seconds):
            return await operation()
    except TimeoutError as exc:
        raise UpstreamError(
            operation=description,
            reason=f"timed out after {timeout_seconds}s",
            retriable=retry_on_timeout,
        ) from exc
