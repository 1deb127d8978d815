"""Error types raised by the assignment delivery flows."""

from q_alloc.core.errors import QAllocError


class NotAuthorizedError(QAllocError):
    """Raised when a teacher acts on a course or assignment they do not own."""

    def __init__(self, teacher_id: str, course_id: str) -> None:
        self.teacher_id = teacher_id
        self.course_id = course_id
        super().__init__(
            f"Failed to authorize teacher '{teacher_id}': course '{course_id}'"
            f" belongs to another teacher"
        )


class StudentNotEnrolledError(QAllocError):
    def __init__(self, student_id: str, course_id: str) -> None:
        self.student_id = student_id
        self.course_id = course_id
        super().__init__(
            f"Failed to find student '{student_id}' in course '{course_id}':"
            f" student is not enrolled"
        )


class MissingQuestionsError(QAllocError):
    """Raised when an allocation references questions no longer in the question bank."""

    def __init__(self, student_id: str, question_ids: list[str]) -> None:
        self.student_id = student_id
        self.question_ids = question_ids
        super().__init__(
            f"Failed to resolve questions for student '{student_id}':"
            f" missing {', '.join(question_ids)}"
        )


class NotifierUnavailableError(QAllocError):
    def __init__(self) -> None:
        super().__init__("Failed to email assignment: no notifier is configured")
