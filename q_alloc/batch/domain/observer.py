"""Observer port for the batch domain — defines events in domain language."""

from typing import Protocol


class BatchObserver(Protocol):
    """Observer port emitting structured events during a batch allocation pass.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def batch_started(self, batch_id: str, assignment_id: str, total_students: int) -> None: ...

    def batch_completed(
        self,
        batch_id: str,
        assignment_id: str,
        total_allocated: int,
        total_failed: int,
        elapsed_seconds: float,
    ) -> None: ...

    def student_started(self, batch_id: str, student_id: str) -> None: ...

    def student_completed(self, batch_id: str, student_id: str) -> None: ...

    def student_failed(self, batch_id: str, student_id: str, reason: str) -> None: ...
