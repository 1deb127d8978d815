"""Tests for assignment email composition."""

from datetime import date

from q_alloc.delivery.domain.message import compose_assignment_email, format_due_date
from q_alloc.roster.domain.models import Course, Student, Teacher
from tests.allocation.builders import make_assignment


def _compose() -> tuple[str, str, str]:
    email = compose_assignment_email(
        assignment=make_assignment(),
        course=Course(id="c1", name="Algorithms", teacher_id="t1"),
        student=Student(id="s1", name="Bob", email="bob@example.edu"),
        teacher=Teacher(id="t1", name="Ada Lovelace", email="ada@example.edu"),
    )
    return email.subject, email.body, email.attachment_name


class TestFormatDueDate:
    def test_long_form_with_weekday(self) -> None:
        assert format_due_date(date(2024, 3, 15)) == "Friday, March 15, 2024"

    def test_day_has_no_leading_zero(self) -> None:
        assert format_due_date(date(2024, 4, 1)) == "Monday, April 1, 2024"


class TestComposeAssignmentEmail:
    def test_subject_names_course_and_assignment(self) -> None:
        subject, _, _ = _compose()
        assert subject == "Algorithms: Week 3"

    def test_attachment_name_names_course_assignment_and_student(self) -> None:
        _, _, attachment_name = _compose()
        assert attachment_name == "Algorithms_Week 3_Bob.pdf"

    def test_body_greets_student_and_signs_with_teacher(self) -> None:
        _, body, _ = _compose()
        assert body.startswith("Dear Bob,\n")
        assert "Assignment: Week 3" in body
        assert "Due Date: Friday, March 15, 2024" in body
        assert body.endswith("Best regards,\nAda Lovelace\n")
