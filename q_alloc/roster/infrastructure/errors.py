"""Error types raised by roster infrastructure."""

from q_alloc.core.errors import QAllocError


class RosterLoadError(QAllocError):
    """Raised when a roster YAML file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load roster: {reason}")
