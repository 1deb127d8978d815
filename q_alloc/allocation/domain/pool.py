"""QuestionPool — one teacher's questions, materialized and split by difficulty."""

from collections.abc import Mapping

from pydantic import BaseModel

from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question
from q_alloc.question.domain.repository import QuestionRepository


class QuestionPool(BaseModel, frozen=True):
    """Immutable snapshot of the questions available per difficulty level."""

    easy: tuple[Question, ...] = ()
    medium: tuple[Question, ...] = ()
    hard: tuple[Question, ...] = ()

    def for_level(self, level: Difficulty) -> tuple[Question, ...]:
        match level:
            case Difficulty.EASY:
                return self.easy
            case Difficulty.MEDIUM:
                return self.medium
            case Difficulty.HARD:
                return self.hard

    @classmethod
    def from_mapping(cls, buckets: Mapping[Difficulty, list[Question]]) -> "QuestionPool":
        return cls(
            easy=tuple(buckets.get(Difficulty.EASY, [])),
            medium=tuple(buckets.get(Difficulty.MEDIUM, [])),
            hard=tuple(buckets.get(Difficulty.HARD, [])),
        )

    @classmethod
    async def fetch(
        cls, repository: QuestionRepository, teacher_id: str
    ) -> "QuestionPool":
        """Query every difficulty bucket for teacher_id and freeze the result."""
        buckets: dict[Difficulty, list[Question]] = {}
        for level in Difficulty:
            buckets[level] = list(
                await repository.find_by_teacher_and_difficulty(
                    teacher_id=teacher_id, difficulty=level
                )
            )
        return cls.from_mapping(buckets=buckets)
