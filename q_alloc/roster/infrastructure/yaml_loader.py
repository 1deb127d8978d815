"""YAML roster loader — builds an InMemoryRosterRepository from a roster file.

Expected layout::

    teachers:
      - {id: t1, name: Ada, email: ada@example.edu}
    students:
      - {id: s1, name: Bob, email: bob@example.edu, roll_number: "21CS001"}
    courses:
      - {id: c1, name: Algorithms, teacher_id: t1, student_ids: [s1]}
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from q_alloc.roster.domain.models import Course, Student, Teacher
from q_alloc.roster.infrastructure.errors import RosterLoadError
from q_alloc.roster.infrastructure.memory_repository import InMemoryRosterRepository


class _RosterDocument(BaseModel, frozen=True):
    teachers: list[Teacher] = []
    students: list[Student] = []
    courses: list[Course] = []


def load_roster(path: Path) -> InMemoryRosterRepository:
    """
    Load teachers, students and courses from path.

    Raises:
        RosterLoadError: if the file is missing, not valid YAML, violates the
            schema, or a course references an unknown teacher or student.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw: Any = yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        raise RosterLoadError(f"file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise RosterLoadError(f"invalid YAML: {exc}") from exc

    try:
        document = _RosterDocument.model_validate(raw)
    except ValidationError as exc:
        raise RosterLoadError(str(exc)) from exc

    teacher_ids = {t.id for t in document.teachers}
    student_ids = {s.id for s in document.students}
    problems: list[str] = []
    for course in document.courses:
        if course.teacher_id not in teacher_ids:
            problems.append(
                f"course '{course.id}' references unknown teacher '{course.teacher_id}'"
            )
        for student_id in course.student_ids:
            if student_id not in student_ids:
                problems.append(
                    f"course '{course.id}' references unknown student '{student_id}'"
                )
    if problems:
        raise RosterLoadError("; ".join(problems))

    return InMemoryRosterRepository(
        teachers=document.teachers,
        courses=document.courses,
        students=document.students,
    )
