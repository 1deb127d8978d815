"""BatchReport — the outcome of one batch allocation pass."""

from pydantic import BaseModel, Field


class StudentFailure(BaseModel, frozen=True):
    """Why allocation failed for one student."""

    student_id: str
    reason: str
    error_type: str


class BatchReport(BaseModel, frozen=True):
    """Immutable summary returned when a batch pass completes.

    ``allocated`` lists, in roster order, every student who holds an allocation
    after the pass (newly created or already present). ``failures`` lists the
    students who do not.
    """

    batch_id: str = Field(min_length=1)
    assignment_id: str = Field(min_length=1)
    allocated: list[str]
    failures: list[StudentFailure]

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def failed_student_ids(self) -> list[str]:
        return [f.student_id for f in self.failures]
