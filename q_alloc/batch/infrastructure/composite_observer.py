"""CompositeBatchObserver — fans out all events to a list of observers."""

from q_alloc.batch.domain.observer import BatchObserver


class CompositeBatchObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[BatchObserver]) -> None:
        self._observers = observers

    def batch_started(self, batch_id: str, assignment_id: str, total_students: int) -> None:
        for obs in self._observers:
            obs.batch_started(
                batch_id=batch_id,
                assignment_id=assignment_id,
                total_students=total_students,
            )

    def batch_completed(
        self,
        batch_id: str,
        assignment_id: str,
        total_allocated: int,
        total_failed: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.batch_completed(
                batch_id=batch_id,
                assignment_id=assignment_id,
                total_allocated=total_allocated,
                total_failed=total_failed,
                elapsed_seconds=elapsed_seconds,
            )

    def student_started(self, batch_id: str, student_id: str) -> None:
        for obs in self._observers:
            obs.student_started(batch_id=batch_id, student_id=student_id)

    def student_completed(self, batch_id: str, student_id: str) -> None:
        for obs in self._observers:
            obs.student_completed(batch_id=batch_id, student_id=student_id)

    def student_failed(self, batch_id: str, student_id: str, reason: str) -> None:
        for obs in self._observers:
            obs.student_failed(batch_id=batch_id, student_id=student_id, reason=reason)
