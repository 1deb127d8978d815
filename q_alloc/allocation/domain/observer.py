"""Observer port for the allocation domain — defines events in domain language."""

from typing import Protocol


class AllocationObserver(Protocol):
    """Observer port emitting structured events while allocating one student.

    Implementations may log to structlog or record for tests.
    """

    def allocation_reused(self, assignment_id: str, student_id: str) -> None: ...

    def allocation_created(
        self,
        assignment_id: str,
        student_id: str,
        seed: str,
        num_questions: int,
    ) -> None: ...

    def allocation_race_resolved(self, assignment_id: str, student_id: str) -> None: ...

    def allocation_retry(
        self,
        assignment_id: str,
        student_id: str,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None: ...
