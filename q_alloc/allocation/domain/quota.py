"""QuotaRequest value object — requested question count per difficulty."""

from pydantic import BaseModel, Field

from q_alloc.question.domain.difficulty import Difficulty


class QuotaRequest(BaseModel, frozen=True):
    """Immutable per-difficulty question counts requested for an assignment."""

    easy: int = Field(ge=0)
    medium: int = Field(ge=0)
    hard: int = Field(ge=0)

    @property
    def total(self) -> int:
        return self.easy + self.medium + self.hard

    def for_level(self, level: Difficulty) -> int:
        match level:
            case Difficulty.EASY:
                return self.easy
            case Difficulty.MEDIUM:
                return self.medium
            case Difficulty.HARD:
                return self.hard
