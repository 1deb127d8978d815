"""Assignment aggregate — quota, ownership and the student allocation mapping."""

from datetime import date
from typing import TypeAlias

from pydantic import BaseModel, Field

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.quota import QuotaRequest

AssignmentId: TypeAlias = str
StudentId: TypeAlias = str


class Assignment(BaseModel):
    """An assignment handed out to every student of one course.

    ``students`` only ever grows: entries are added by batch allocation or by
    lazy single-student allocation, never removed or replaced. Mutation goes
    through ``add_allocation``.
    """

    id: AssignmentId = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    due_date: date
    course_id: str = Field(min_length=1)
    teacher_id: str = Field(min_length=1)
    total_marks: int = Field(gt=0)
    quota: QuotaRequest
    students: dict[StudentId, Allocation] = Field(default_factory=dict)

    def allocation_for(self, student_id: StudentId) -> Allocation | None:
        return self.students.get(student_id)

    def add_allocation(self, student_id: StudentId, allocation: Allocation) -> Allocation:
        """Record allocation for student_id unless one exists; return the stored one."""
        existing = self.students.get(student_id)
        if existing is not None:
            return existing
        self.students[student_id] = allocation
        return allocation
