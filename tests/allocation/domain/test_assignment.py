"""Tests for the Assignment aggregate and QuestionPool."""

import pytest
from pydantic import ValidationError

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.pool import QuestionPool
from q_alloc.question.domain.difficulty import Difficulty
from tests.allocation.builders import make_assignment
from tests.question.builders import make_bank


class TestAssignmentAllocations:
    """Entries in Assignment.students are added once and never replaced."""

    def test_new_assignment_has_no_allocations(self) -> None:
        assignment = make_assignment()
        assert assignment.students == {}
        assert assignment.allocation_for("s1") is None

    def test_add_allocation_stores_and_returns_it(self) -> None:
        assignment = make_assignment()
        allocation = Allocation(question_ids=("q1", "q2"), seed="42-s1")

        stored = assignment.add_allocation(student_id="s1", allocation=allocation)

        assert stored == allocation
        assert assignment.allocation_for("s1") == allocation

    def test_add_allocation_keeps_existing_entry(self) -> None:
        assignment = make_assignment()
        first = Allocation(question_ids=("q1",), seed="1-s1")
        second = Allocation(question_ids=("q2",), seed="2-s1")

        assignment.add_allocation(student_id="s1", allocation=first)
        stored = assignment.add_allocation(student_id="s1", allocation=second)

        assert stored == first
        assert assignment.allocation_for("s1") == first

    def test_total_marks_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Assignment.model_validate({**make_assignment().model_dump(), "total_marks": 0})


class TestAllocation:
    def test_seed_must_be_non_empty(self) -> None:
        with pytest.raises(ValidationError):
            Allocation(question_ids=("q1",), seed="")

    def test_is_frozen(self) -> None:
        allocation = Allocation(question_ids=("q1",), seed="1-s1")
        with pytest.raises(ValidationError):
            allocation.seed = "other"  # type: ignore[misc]


class TestQuestionPoolFetch:
    """QuestionPool.fetch queries every level for one teacher_id."""

    async def test_fetch_splits_by_difficulty(self) -> None:
        pool = await QuestionPool.fetch(
            repository=make_bank(easy=3, medium=2, hard=1), teacher_id="t1"
        )

        assert len(pool.for_level(Difficulty.EASY)) == 3
        assert len(pool.for_level(Difficulty.MEDIUM)) == 2
        assert len(pool.for_level(Difficulty.HARD)) == 1

    async def test_fetch_ignores_other_teachers(self) -> None:
        pool = await QuestionPool.fetch(
            repository=make_bank(easy=3, medium=2, hard=1), teacher_id="t2"
        )
        assert pool == QuestionPool()
