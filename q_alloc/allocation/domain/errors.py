"""Error types raised by the allocation domain."""

from q_alloc.core.errors import QAllocError
from q_alloc.question.domain.difficulty import Difficulty


class InsufficientPoolError(QAllocError):
    """Raised when a difficulty pool holds fewer questions than the quota requires."""

    def __init__(self, level: Difficulty, required: int, available: int) -> None:
        self.level = level
        self.required = required
        self.available = available
        super().__init__(
            f"Failed to allocate questions: not enough {level.value} questions."
            f" Required: {required}, Available: {available}"
        )


class DuplicateQuestionError(QAllocError):
    """Raised when a question pool contains the same question id more than once."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(
            f"Failed to allocate questions: pool contains question '{question_id}'"
            f" more than once"
        )


class RaceConflictError(QAllocError):
    """Raised by storage when another writer already inserted the student's allocation."""

    def __init__(self, assignment_id: str, student_id: str) -> None:
        self.assignment_id = assignment_id
        self.student_id = student_id
        super().__init__(
            f"Failed to insert allocation: assignment '{assignment_id}' already holds"
            f" an allocation for student '{student_id}'"
        )


class AssignmentNotFoundError(QAllocError):
    """Raised when an assignment id does not resolve to a stored assignment."""

    def __init__(self, assignment_id: str) -> None:
        self.assignment_id = assignment_id
        super().__init__(f"Failed to load assignment: '{assignment_id}' not found")
