"""StructlogAllocationObserver — production observer that delegates to structlog."""

import structlog


class StructlogAllocationObserver:
    """Logs allocation domain events to structlog.

    Does NOT inherit from AllocationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def allocation_reused(self, assignment_id: str, student_id: str) -> None:
        self._log.debug(
            "allocation.reused",
            assignment_id=assignment_id,
            student_id=student_id,
        )

    def allocation_created(
        self,
        assignment_id: str,
        student_id: str,
        seed: str,
        num_questions: int,
    ) -> None:
        self._log.info(
            "allocation.created",
            assignment_id=assignment_id,
            student_id=student_id,
            seed=seed,
            num_questions=num_questions,
        )

    def allocation_race_resolved(self, assignment_id: str, student_id: str) -> None:
        self._log.warning(
            "allocation.race_resolved",
            assignment_id=assignment_id,
            student_id=student_id,
        )

    def allocation_retry(
        self,
        assignment_id: str,
        student_id: str,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None:
        self._log.warning(
            "allocation.retry",
            assignment_id=assignment_id,
            student_id=student_id,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )
