"""Question value object — one entry of a teacher's question bank."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from q_alloc.question.domain.difficulty import Difficulty

QuestionId: TypeAlias = str
TeacherId: TypeAlias = str


class Question(BaseModel, frozen=True):
    """Immutable question as read from the question bank.

    The allocation engine only reads questions; it never creates or edits them.
    """

    id: QuestionId = Field(min_length=1)
    teacher_id: TeacherId = Field(min_length=1)
    name: str = Field(min_length=1)
    topic: str = ""
    difficulty: Difficulty
    marks: int = Field(ge=0)
    source: str | None = None
    description: str
    input_format: str
    output_format: str
    constraints: str
    sample_inputs: tuple[str, ...] = ()
    sample_outputs: tuple[str, ...] = ()
