"""InMemoryQuestionRepository — QuestionRepository backed by a list of questions."""

from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question


class InMemoryQuestionRepository:
    """Satisfies the QuestionRepository protocol over an in-memory question list.

    Insertion order is preserved, so the pool for a (teacher, difficulty) pair
    is always returned in the same order.
    """

    def __init__(self, questions: list[Question] | None = None) -> None:
        self._questions: dict[str, Question] = {}
        for question in questions or []:
            self.add(question=question)

    def add(self, question: Question) -> None:
        self._questions[question.id] = question

    async def find_by_teacher_and_difficulty(
        self, teacher_id: str, difficulty: Difficulty
    ) -> list[Question]:
        return [
            q
            for q in self._questions.values()
            if q.teacher_id == teacher_id and q.difficulty == difficulty
        ]

    async def find_by_ids(self, question_ids: list[str]) -> list[Question]:
        """Return the questions for question_ids in the given order, skipping unknown ids."""
        return [self._questions[qid] for qid in question_ids if qid in self._questions]
