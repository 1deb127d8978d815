"""RosterRepository Protocol — read access to teachers, courses and students."""

from typing import Protocol

from q_alloc.roster.domain.models import Course, Student, Teacher


class RosterRepository(Protocol):
    async def load_course(self, course_id: str) -> Course: ...

    async def load_student(self, student_id: str) -> Student: ...

    async def load_teacher(self, teacher_id: str) -> Teacher: ...
