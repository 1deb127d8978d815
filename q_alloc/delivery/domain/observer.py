"""Observer port for the delivery domain — defines events in domain language."""

from typing import Protocol


class DeliveryObserver(Protocol):
    def assignment_created(
        self, assignment_id: str, course_id: str, total_students: int
    ) -> None: ...

    def preview_rendered(
        self, assignment_id: str, student_id: str, num_bytes: int
    ) -> None: ...

    def email_sent(self, assignment_id: str, student_id: str, email: str) -> None: ...

    def email_failed(
        self, assignment_id: str, student_id: str, email: str, reason: str
    ) -> None: ...

    def delivery_retry(
        self,
        assignment_id: str,
        student_id: str | None,
        attempt: int,
        reason: str,
        backoff_seconds: float,
    ) -> None: ...
