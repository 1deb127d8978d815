"""Tests for the YAML roster loader."""

from pathlib import Path

import pytest

from q_alloc.roster.domain.errors import CourseNotFoundError, StudentNotFoundError
from q_alloc.roster.infrastructure.errors import RosterLoadError
from q_alloc.roster.infrastructure.yaml_loader import load_roster

_ROSTER = """\
teachers:
  - {id: t1, name: Ada Lovelace, email: ada@example.edu}
students:
  - {id: s1, name: Bob, email: bob@example.edu, roll_number: "21CS001"}
  - {id: s2, name: Cara, email: cara@example.edu}
courses:
  - {id: c1, name: Algorithms, teacher_id: t1, student_ids: [s2, s1]}
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "roster.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadRosterValid:
    async def test_loads_course_with_ordered_roster(self, tmp_path: Path) -> None:
        roster = load_roster(_write(tmp_path, _ROSTER))

        course = await roster.load_course(course_id="c1")

        assert course.teacher_id == "t1"
        assert course.student_ids == ("s2", "s1")
        assert course.is_enrolled("s1")
        assert not course.is_enrolled("s9")

    async def test_loads_students_and_teachers(self, tmp_path: Path) -> None:
        roster = load_roster(_write(tmp_path, _ROSTER))

        student = await roster.load_student(student_id="s1")
        teacher = await roster.load_teacher(teacher_id="t1")

        assert student.roll_number == "21CS001"
        assert (await roster.load_student(student_id="s2")).roll_number == ""
        assert teacher.email == "ada@example.edu"

    async def test_unknown_ids_raise_not_found(self, tmp_path: Path) -> None:
        roster = load_roster(_write(tmp_path, _ROSTER))

        with pytest.raises(CourseNotFoundError):
            await roster.load_course(course_id="c9")
        with pytest.raises(StudentNotFoundError):
            await roster.load_student(student_id="s9")


class TestLoadRosterInvalid:
    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RosterLoadError, match="file not found"):
            load_roster(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RosterLoadError, match="invalid YAML"):
            load_roster(_write(tmp_path, "teachers: [unclosed\n"))

    def test_unknown_references_are_all_reported(self, tmp_path: Path) -> None:
        text = _ROSTER.replace("teacher_id: t1", "teacher_id: t9").replace(
            "[s2, s1]", "[s2, s7]"
        )

        with pytest.raises(RosterLoadError) as exc_info:
            load_roster(_write(tmp_path, text))

        message = str(exc_info.value)
        assert "unknown teacher 't9'" in message
        assert "unknown student 's7'" in message

    def test_schema_violation_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RosterLoadError):
            load_roster(_write(tmp_path, "students:\n  - {id: s1}\n"))
