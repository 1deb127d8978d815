"""Roster value objects — teachers, students and the courses that group them."""

from pydantic import BaseModel, Field


class Teacher(BaseModel, frozen=True):
    """Owner of questions and courses; also the sender of assignment emails."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class Student(BaseModel, frozen=True):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    roll_number: str = ""


class Course(BaseModel, frozen=True):
    """A course taught by one teacher. ``student_ids`` is the ordered roster."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    teacher_id: str = Field(min_length=1)
    student_ids: tuple[str, ...] = ()

    def is_enrolled(self, student_id: str) -> bool:
        return student_id in self.student_ids
