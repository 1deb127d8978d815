"""DeliveryReport — per-student outcome of an email-all pass."""

from enum import StrEnum

from pydantic import BaseModel, Field


class DeliveryStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"


class DeliveryResult(BaseModel, frozen=True):
    student_id: str
    student_name: str
    email: str
    status: DeliveryStatus
    error: str | None = None


class DeliveryReport(BaseModel, frozen=True):
    """One DeliveryResult per enrolled student, in roster order."""

    assignment_id: str = Field(min_length=1)
    results: list[DeliveryResult]

    @property
    def sent(self) -> list[DeliveryResult]:
        return [r for r in self.results if r.status is DeliveryStatus.SUCCESS]

    @property
    def failed(self) -> list[DeliveryResult]:
        return [r for r in self.results if r.status is DeliveryStatus.FAILED]
