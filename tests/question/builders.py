"""Builders for Question objects and in-memory question banks used across tests."""

from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question
from q_alloc.question.infrastructure.memory_repository import InMemoryQuestionRepository


def make_question(
    question_id: str,
    difficulty: Difficulty = Difficulty.EASY,
    teacher_id: str = "t1",
    marks: int = 10,
) -> Question:
    return Question(
        id=question_id,
        teacher_id=teacher_id,
        name=f"Question {question_id}",
        topic="arrays",
        difficulty=difficulty,
        marks=marks,
        description=f"Solve problem {question_id}.",
        input_format="A single integer n.",
        output_format="A single integer.",
        constraints="1 <= n <= 100",
        sample_inputs=("3",),
        sample_outputs=("6",),
    )


def make_questions(
    easy: int, medium: int, hard: int, teacher_id: str = "t1"
) -> list[Question]:
    """Return easy, medium and hard questions with ids like ``t1-easy-0``."""
    questions: list[Question] = []
    for level, count in (
        (Difficulty.EASY, easy),
        (Difficulty.MEDIUM, medium),
        (Difficulty.HARD, hard),
    ):
        for i in range(count):
            questions.append(
                make_question(
                    question_id=f"{teacher_id}-{level.value}-{i}",
                    difficulty=level,
                    teacher_id=teacher_id,
                )
            )
    return questions


def make_bank(easy: int, medium: int, hard: int, teacher_id: str = "t1") -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository(
        questions=make_questions(easy=easy, medium=medium, hard=hard, teacher_id=teacher_id)
    )
