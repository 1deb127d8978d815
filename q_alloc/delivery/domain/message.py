"""Assignment email composition."""

from dataclasses import dataclass
from datetime import date

from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.roster.domain.models import Course, Student, Teacher


@dataclass(frozen=True)
class AssignmentEmail:
    subject: str
    body: str
    attachment_name: str


def format_due_date(due: date) -> str:
    """Return e.g. ``"Friday, March 15, 2024"``."""
    return f"{due:%A}, {due:%B} {due.day}, {due.year}"


def compose_assignment_email(
    assignment: Assignment,
    course: Course,
    student: Student,
    teacher: Teacher,
) -> AssignmentEmail:
    body = (
        f"Dear {student.name},\n\n"
        f"Please find attached your personalized assignment for {course.name}.\n\n"
        f"Assignment: {assignment.name}\n"
        f"Due Date: {format_due_date(assignment.due_date)}\n\n"
        "Please submit your completed assignment by the due date.\n\n"
        "Best regards,\n"
        f"{teacher.name}\n"
    )
    return AssignmentEmail(
        subject=f"{course.name}: {assignment.name}",
        body=body,
        attachment_name=f"{course.name}_{assignment.name}_{student.name}.pdf",
    )
