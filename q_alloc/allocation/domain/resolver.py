"""Quota resolution — pick each student's questions from the pool."""

from q_alloc.allocation.domain.errors import DuplicateQuestionError, InsufficientPoolError
from q_alloc.allocation.domain.pool import QuestionPool
from q_alloc.allocation.domain.quota import QuotaRequest
from q_alloc.allocation.domain.seed import level_seed
from q_alloc.allocation.domain.shuffle import deterministic_shuffle
from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question


def check_pool(pool: QuestionPool, quota: QuotaRequest) -> None:
    """Raise if any level cannot satisfy the quota or repeats a question id.

    Raises:
        InsufficientPoolError: for the first level (easy, medium, hard) whose pool
            is smaller than its quota.
        DuplicateQuestionError: if a question id appears twice across the pool.
    """
    for level in Difficulty:
        available = len(pool.for_level(level))
        required = quota.for_level(level)
        if available < required:
            raise InsufficientPoolError(
                level=level, required=required, available=available
            )

    seen: set[str] = set()
    for level in Difficulty:
        for question in pool.for_level(level):
            if question.id in seen:
                raise DuplicateQuestionError(question_id=question.id)
            seen.add(question.id)


def resolve_quota(
    pool: QuestionPool, quota: QuotaRequest, base_seed: str
) -> list[Question]:
    """Return the questions selected for one student.

    The whole pool is checked before anything is selected, so a shortfall at
    any level produces no partial result. Each level is shuffled with its own
    seed and truncated to its quota; the selections are concatenated easy,
    medium, hard. The pool is never mutated.
    """
    check_pool(pool=pool, quota=quota)

    selected: list[Question] = []
    for level in Difficulty:
        shuffled = deterministic_shuffle(
            items=pool.for_level(level),
            seed=level_seed(base_seed=base_seed, level=level),
        )
        selected.extend(shuffled[: quota.for_level(level)])
    return selected
