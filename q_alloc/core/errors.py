"""Base exception class for all q-alloc-specific errors."""


class QAllocError(Exception):
    """Base class for all q-alloc errors.

    ``retriable`` marks transient failures (pool queries, persistence, rendering,
    sending) that callers may attempt again before reporting them.
    """

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable


class UpstreamError(QAllocError):
    """Raised when an external collaborator (storage, renderer, mail transport) fails."""

    def __init__(self, operation: str, reason: str, retriable: bool = True) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Failed to {operation}: {reason}", retriable=retriable)
