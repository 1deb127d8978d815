"""InMemoryRosterRepository — RosterRepository over in-memory dictionaries."""

from q_alloc.roster.domain.errors import (
    CourseNotFoundError,
    StudentNotFoundError,
    TeacherNotFoundError,
)
from q_alloc.roster.domain.models import Course, Student, Teacher


class InMemoryRosterRepository:
    """Satisfies the RosterRepository protocol."""

    def __init__(
        self,
        teachers: list[Teacher] | None = None,
        courses: list[Course] | None = None,
        students: list[Student] | None = None,
    ) -> None:
        self._teachers = {t.id: t for t in teachers or []}
        self._courses = {c.id: c for c in courses or []}
        self._students = {s.id: s for s in students or []}

    async def load_course(self, course_id: str) -> Course:
        course = self._courses.get(course_id)
        if course is None:
            raise CourseNotFoundError(course_id=course_id)
        return course

    async def load_student(self, student_id: str) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(student_id=student_id)
        return student

    async def load_teacher(self, teacher_id: str) -> Teacher:
        teacher = self._teachers.get(teacher_id)
        if teacher is None:
            raise TeacherNotFoundError(teacher_id=teacher_id)
        return teacher
