"""AssignmentRepository Protocol — persistence port for assignments and allocations."""

from typing import Protocol

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment


class AssignmentRepository(Protocol):
    """Structural interface for any assignment storage backend.

    ``insert_allocation_if_absent`` must be atomic with respect to every other
    writer of the same assignment: it stores allocation for student_id only if
    no allocation exists yet, and raises RaceConflictError otherwise.
    """

    async def load(self, assignment_id: str) -> Assignment: ...

    async def save(self, assignment: Assignment) -> None: ...

    async def insert_allocation_if_absent(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation: ...
