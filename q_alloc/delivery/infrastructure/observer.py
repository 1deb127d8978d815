"""Structlog implementation of the DeliveryObserver port."""

import structlog


class StructlogDeliveryObserver:
    """Delegates delivery domain events to structlog.

    Satisfies the DeliveryObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def assignment_created(
        self, assignment_id: str, course_id: str, total_students: int
    ) -> None:
        self._log.info(
            "delivery.assignment_created",
            assignment_id=assignment_id,
            course_id=course_id,
            total_students=total_students,
        )

    def preview_rendered(
        self, assignment_id: str, student_id: str, num_bytes: int
    ) -> None:
        self._log.info(
            "delivery.preview_rendered",
            assignment_id=assignment_id,
            student_id=student_id,
            num_bytes=num_bytes,
        )

    def email_sent(self, assignment_id: str, student_id: str, email: str) -> None:
        self._log.info(
            "delivery.email_sent",
            assignment_id=assignment_id,
            student_id=student_id,
            email=email,
        )

    def email_failed(
        self, assignment_id: str, student_id: str, email: str, reason: str
    ) -> None:
        self._log.error(
            "delivery.email_failed",
            assignment_id=assignment_id,
            student_id=student_id,
            email=email,
            reason=reason,
        )

    def delivery_retry(
        self,
        assignment_id: str,
        student_id: str | None,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None:
        self._log.warning(
            "delivery.retry",
            assignment_id=assignment_id,
            student_id=student_id,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )
