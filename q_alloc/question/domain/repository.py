"""QuestionRepository Protocol — read access to the question bank."""

from typing import Protocol

from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question


class QuestionRepository(Protocol):
    """Structural interface for any question bank backend.

    Implementations must return fully materialized lists (no live cursors) so
    that a pool has a fixed size for the duration of one shuffle.
    """

    async def find_by_teacher_and_difficulty(
        self, teacher_id: str, difficulty: Difficulty
    ) -> list[Question]: ...

    async def find_by_ids(self, question_ids: list[str]) -> list[Question]: ...
