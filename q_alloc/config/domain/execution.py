"""Execution configuration models."""

from pydantic import BaseModel, Field


class RetryConfig(BaseModel, frozen=True):
    max_attempts: int = Field(default=3, ge=1)
    initial_backoff_seconds: float = Field(default=0.5, ge=0)
    backoff_multiplier: float = Field(default=2.0, ge=1)


class ExecutionConfig(BaseModel, frozen=True):
    """Bounds applied to every per-student operation."""

    timeout_seconds: float = Field(default=30.0, gt=0)
    retry: RetryConfig = RetryConfig()
