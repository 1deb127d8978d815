"""DocumentRenderer Protocol — turns a student's questions into a document."""

from typing import Protocol

from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.question.domain.question import Question
from q_alloc.roster.domain.models import Course, Student


class DocumentRenderer(Protocol):
    """Renders one student's personalized assignment.

    Only called once an allocation exists; questions arrive in allocation order.
    """

    async def render(
        self,
        assignment: Assignment,
        course: Course,
        student: Student,
        questions: list[Question],
    ) -> bytes: ...
