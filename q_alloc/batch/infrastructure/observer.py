"""StructlogBatchObserver — production observer that delegates to structlog."""

import structlog


class StructlogBatchObserver:
    """Logs batch domain events to structlog.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(self, batch_id: str, assignment_id: str, total_students: int) -> None:
        self._log.info(
            "batch.started",
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
        self._log.info(
            "batch.completed",
            batch_id=batch_id,
            assignment_id=assignment_id,
            total_allocated=total_allocated,
            total_failed=total_failed,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def student_started(self, batch_id: str, student_id: str) -> None:
        self._log.debug("batch.student.started", batch_id=batch_id, student_id=student_id)

    def student_completed(self, batch_id: str, student_id: str) -> None:
        self._log.info(
            "batch.student.completed", batch_id=batch_id, student_id=student_id
        )

    def student_failed(self, batch_id: str, student_id: str, reason: str) -> None:
        self._log.error(
            "batch.student.failed",
            batch_id=batch_id,
            student_id=student_id,
            reason=reason,
        )
