"""Clock Protocol — source of the coarse timestamp that seeds are derived from."""

import time
from typing import Protocol


class Clock(Protocol):
    def now_millis(self) -> int: ...


class SystemClock:
    """Wall-clock milliseconds since the epoch. Satisfies the Clock protocol."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000
