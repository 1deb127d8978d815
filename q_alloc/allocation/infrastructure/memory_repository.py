"""InMemoryAssignmentRepository — AssignmentRepository kept in process memory."""

import asyncio

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.errors import AssignmentNotFoundError, RaceConflictError


class InMemoryAssignmentRepository:
    """Satisfies the AssignmentRepository protocol with deep-copied documents.

    Loads return copies, so callers observe the same isolation they would get
    from a real database: mutations are visible only after save or insert.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Assignment] = {}
        self._lock = asyncio.Lock()

    async def load(self, assignment_id: str) -> Assignment:
        async with self._lock:
            stored = self._documents.get(assignment_id)
            if stored is None:
                raise AssignmentNotFoundError(assignment_id=assignment_id)
            return stored.model_copy(deep=True)

    async def save(self, assignment: Assignment) -> None:
        """Store assignment, keeping any allocation already stored for a student."""
        async with self._lock:
            merged = assignment.model_copy(deep=True)
            current = self._documents.get(assignment.id)
            if current is not None:
                merged.students.update(current.students)
            self._documents[assignment.id] = merged

    async def insert_allocation_if_absent(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation:
        async with self._lock:
            stored = self._documents.get(assignment_id)
            if stored is None:
                raise AssignmentNotFoundError(assignment_id=assignment_id)
            if student_id in stored.students:
                raise RaceConflictError(
                    assignment_id=assignment_id, student_id=student_id
                )
            stored.students[student_id] = allocation
            return allocation
