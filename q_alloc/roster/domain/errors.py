"""Error types raised when roster lookups fail."""

from q_alloc.core.errors import QAllocError


class CourseNotFoundError(QAllocError):
    def __init__(self, course_id: str) -> None:
        self.course_id = course_id
        super().__init__(f"Failed to load course: '{course_id}' not found")


class StudentNotFoundError(QAllocError):
    def __init__(self, student_id: str) -> None:
        self.student_id = student_id
        super().__init__(f"Failed to load student: '{student_id}' not found")


class TeacherNotFoundError(QAllocError):
    def __init__(self, teacher_id: str) -> None:
        self.teacher_id = teacher_id
        super().__init__(f"Failed to load teacher: '{teacher_id}' not found")
