"""Tests for InMemoryAssignmentRepository."""

import pytest

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.errors import AssignmentNotFoundError, RaceConflictError
from q_alloc.allocation.infrastructure.memory_repository import InMemoryAssignmentRepository
from tests.allocation.builders import make_assignment


class TestInMemoryAssignmentRepository:
    async def test_load_unknown_id_raises(self) -> None:
        repository = InMemoryAssignmentRepository()
        with pytest.raises(AssignmentNotFoundError):
            await repository.load(assignment_id="missing")

    async def test_load_returns_copy(self) -> None:
        repository = InMemoryAssignmentRepository()
        await repository.save(make_assignment())

        loaded = await repository.load(assignment_id="a1")
        loaded.add_allocation(student_id="s1", allocation=Allocation(question_ids=(), seed="1-s1"))

        assert (await repository.load(assignment_id="a1")).students == {}

    async def test_insert_stores_allocation(self) -> None:
        repository = InMemoryAssignmentRepository()
        await repository.save(make_assignment())
        allocation = Allocation(question_ids=("q1",), seed="1-s1")

        await repository.insert_allocation_if_absent(
            assignment_id="a1", student_id="s1", allocation=allocation
        )

        assert (await repository.load(assignment_id="a1")).allocation_for("s1") == allocation

    async def test_second_insert_raises_race_conflict(self) -> None:
        repository = InMemoryAssignmentRepository()
        await repository.save(make_assignment())
        await repository.insert_allocation_if_absent(
            assignment_id="a1",
            student_id="s1",
            allocation=Allocation(question_ids=("q1",), seed="1-s1"),
        )

        with pytest.raises(RaceConflictError):
            await repository.insert_allocation_if_absent(
                assignment_id="a1",
                student_id="s1",
                allocation=Allocation(question_ids=("q2",), seed="2-s1"),
            )

    async def test_insert_into_unknown_assignment_raises(self) -> None:
        repository = InMemoryAssignmentRepository()
        with pytest.raises(AssignmentNotFoundError):
            await repository.insert_allocation_if_absent(
                assignment_id="missing",
                student_id="s1",
                allocation=Allocation(question_ids=(), seed="1-s1"),
            )

    async def test_save_keeps_stored_allocations(self) -> None:
        repository = InMemoryAssignmentRepository()
        stale = make_assignment()
        await repository.save(stale)
        stored = Allocation(question_ids=("q1",), seed="1-s1")
        await repository.insert_allocation_if_absent(
            assignment_id="a1", student_id="s1", allocation=stored
        )
        stale.add_allocation(
            student_id="s1", allocation=Allocation(question_ids=("q2",), seed="2-s1")
        )

        await repository.save(stale)

        assert (await repository.load(assignment_id="a1")).allocation_for("s1") == stored
