"""Fake repositories that wrap real in-memory ones to inject failures and delays."""

import asyncio
from typing import TypeAlias

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.infrastructure.memory_repository import InMemoryAssignmentRepository
from q_alloc.question.domain.difficulty import Difficulty
from q_alloc.question.domain.question import Question
from q_alloc.question.infrastructure.memory_repository import InMemoryQuestionRepository

SideEffect: TypeAlias = Exception | float | list[Question]


async def _apply(effects: list[SideEffect]) -> list[Question] | None:
    """Consume the next effect: raise it, sleep for it, or return it as the result."""
    if not effects:
        return None
    effect = effects.pop(0)
    if isinstance(effect, Exception):
        raise effect
    if isinstance(effect, list):
        return effect
    await asyncio.sleep(effect)
    return None


class ScriptedQuestionRepository:
    """Satisfies the QuestionRepository protocol on top of an in-memory bank.

    Each pool query first consumes the next entry of ``side_effects``: an
    Exception is raised, a float is slept for in seconds, and a list of
    questions replaces the pool returned by that query. ``lookup_side_effects``
    does the same for find_by_ids. Once exhausted, calls behave like the
    wrapped repository.
    """

    def __init__(
        self,
        inner: InMemoryQuestionRepository,
        side_effects: list[SideEffect] | None = None,
        lookup_side_effects: list[SideEffect] | None = None,
    ) -> None:
        self._inner = inner
        self._side_effects: list[SideEffect] = list(side_effects or [])
        self._lookup_side_effects: list[SideEffect] = list(lookup_side_effects or [])
        self.queries: list[tuple[str, Difficulty]] = []
        self.lookups: list[list[str]] = []

    async def find_by_teacher_and_difficulty(
        self, teacher_id: str, difficulty: Difficulty
    ) -> list[Question]:
        self.queries.append((teacher_id, difficulty))
        replaced = await _apply(self._side_effects)
        if replaced is not None:
            return replaced
        return await self._inner.find_by_teacher_and_difficulty(
            teacher_id=teacher_id, difficulty=difficulty
        )

    async def find_by_ids(self, question_ids: list[str]) -> list[Question]:
        self.lookups.append(list(question_ids))
        replaced = await _apply(self._lookup_side_effects)
        if replaced is not None:
            return replaced
        return await self._inner.find_by_ids(question_ids=question_ids)


class RacingAssignmentRepository(InMemoryAssignmentRepository):
    """Simulates another process winning the insert for the given students.

    Before delegating an insert for a student in ``rivals``, the rival's
    allocation is stored first, so the real insert raises RaceConflictError.
    """

    def __init__(self, rivals: dict[str, Allocation]) -> None:
        super().__init__()
        self._rivals = dict(rivals)
        self.inserts: list[str] = []

    async def insert_allocation_if_absent(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation:
        self.inserts.append(student_id)
        rival = self._rivals.pop(student_id, None)
        if rival is not None:
            await super().insert_allocation_if_absent(
                assignment_id=assignment_id, student_id=student_id, allocation=rival
            )
        return await super().insert_allocation_if_absent(
            assignment_id=assignment_id, student_id=student_id, allocation=allocation
        )


class ScriptedAssignmentRepository(InMemoryAssignmentRepository):
    """In-memory assignment storage with scripted load failures and slow inserts.

    Each load first raises the next exception in ``load_failures``. Inserts for
    a student in ``slow_inserts`` are stored, then stall for the mapped number
    of seconds, like a write whose acknowledgement arrives too late.
    """

    def __init__(
        self,
        load_failures: list[Exception] | None = None,
        slow_inserts: dict[str, float] | None = None,
    ) -> None:
        super().__init__()
        self._load_failures = list(load_failures or [])
        self._slow_inserts = dict(slow_inserts or {})
        self.loads = 0

    async def load(self, assignment_id: str) -> Assignment:
        self.loads += 1
        if self._load_failures:
            raise self._load_failures.pop(0)
        return await super().load(assignment_id=assignment_id)

    async def insert_allocation_if_absent(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation:
        stored = await super().insert_allocation_if_absent(
            assignment_id=assignment_id, student_id=student_id, allocation=allocation
        )
        delay = self._slow_inserts.pop(student_id, None)
        if delay is not None:
            await asyncio.sleep(delay)
        return stored


async def stored_assignment(
    repository: InMemoryAssignmentRepository, assignment: Assignment
) -> Assignment:
    """Save assignment into repository and return it, for one-line test setup."""
    await repository.save(assignment)
    return assignment
