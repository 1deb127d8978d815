"""Tests for call_with_retry and call_with_timeout."""

import asyncio

import pytest

from q_alloc.config.domain.execution import RetryConfig
from q_alloc.core.errors import QAllocError, UpstreamError
from q_alloc.core.retry import call_with_retry, call_with_timeout


class _Flaky:
    """Raises the queued errors in order, then returns ``value``."""

    def __init__(self, errors: list[Exception], value: str = "ok") -> None:
        self._errors = list(errors)
        self._value = value
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self._errors:
            raise self._errors.pop(0)
        return self._value


def _retry(max_attempts: int) -> RetryConfig:
    return RetryConfig(
        max_attempts=max_attempts, initial_backoff_seconds=0, backoff_multiplier=2
    )


class TestCallWithRetry:
    async def test_returns_first_success(self) -> None:
        operation = _Flaky(errors=[])
        assert await call_with_retry(operation=operation, retry=_retry(3)) == "ok"
        assert operation.calls == 1

    async def test_retriable_error_is_retried(self) -> None:
        operation = _Flaky(errors=[UpstreamError(operation="x", reason="flaky")])
        hooks: list[int] = []

        result = await call_with_retry(
            operation=operation,
            retry=_retry(3),
            on_retry=lambda attempt, exc, backoff: hooks.append(attempt),
        )

        assert result == "ok"
        assert operation.calls == 2
        assert hooks == [1]

    async def test_non_retriable_error_is_raised_immediately(self) -> None:
        operation = _Flaky(errors=[QAllocError("Failed to do x", retriable=False)])

        with pytest.raises(QAllocError):
            await call_with_retry(operation=operation, retry=_retry(3))

        assert operation.calls == 1

    async def test_last_error_is_raised_after_max_attempts(self) -> None:
        errors: list[Exception] = [
            UpstreamError(operation="x", reason=f"attempt {n}") for n in range(1, 4)
        ]
        operation = _Flaky(errors=errors)

        with pytest.raises(UpstreamError) as exc_info:
            await call_with_retry(operation=operation, retry=_retry(3))

        assert exc_info.value.reason == "attempt 3"
        assert operation.calls == 3

    async def test_backoff_grows_by_multiplier(self) -> None:
        operation = _Flaky(
            errors=[UpstreamError(operation="x", reason="a"), UpstreamError(operation="x", reason="b")]
        )
        backoffs: list[float] = []
        retry = RetryConfig(max_attempts=3, initial_backoff_seconds=0.001, backoff_multiplier=3)

        await call_with_retry(
            operation=operation,
            retry=retry,
            on_retry=lambda attempt, exc, backoff: backoffs.append(backoff),
        )

        assert backoffs == pytest.approx([0.001, 0.003])

    async def test_other_exceptions_propagate_unretried(self) -> None:
        operation = _Flaky(errors=[ValueError("bug")])

        with pytest.raises(ValueError):
            await call_with_retry(operation=operation, retry=_retry(3))

        assert operation.calls == 1


class TestCallWithTimeout:
    async def test_fast_operation_returns_value(self) -> None:
        async def _fast() -> int:
            return 7

        assert await call_with_timeout(operation=_fast, timeout_seconds=1, description="x") == 7

    async def test_slow_operation_raises_retriable_upstream_error(self) -> None:
        async def _slow() -> None:
            await asyncio.sleep(1)

        with pytest.raises(UpstreamError) as exc_info:
            await call_with_timeout(
                operation=_slow, timeout_seconds=0.01, description="render assignment"
            )

        assert exc_info.value.retriable is True
        assert str(exc_info.value) == "Failed to render assignment: timed out after 0.01s"

    async def test_timeout_can_be_marked_final(self) -> None:
        async def _slow() -> None:
            await asyncio.sleep(1)

        with pytest.raises(UpstreamError) as exc_info:
            await call_with_timeout(
                operation=_slow,
                timeout_seconds=0.01,
                description="send email",
                retry_on_timeout=False,
            )

        assert exc_info.value.retriable is False
        assert str(exc_info.value) == "Failed to send email: timed out after 0.01s"
