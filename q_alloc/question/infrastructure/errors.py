"""Error types raised by question bank infrastructure."""

from q_alloc.core.errors import QAllocError


class QuestionBankLoadError(QAllocError):
    """Raised when a JSONL question bank cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load question bank: {reason}")
