"""AssignmentDraft — what a teacher submits to create an assignment."""

from datetime import date

from pydantic import BaseModel, Field

from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.quota import QuotaRequest
from q_alloc.batch.domain.report import BatchReport


class AssignmentDraft(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    due_date: date
    course_id: str = Field(min_length=1)
    total_marks: int = Field(gt=0)
    quota: QuotaRequest


class CreateAssignmentResult(BaseModel, frozen=True):
    """The created assignment and the report of its initial batch allocation.

    A non-empty ``report.failures`` is a warning, not an error: the assignment
    exists and the listed students are allocated lazily later.
    """

    assignment: Assignment
    report: BatchReport
