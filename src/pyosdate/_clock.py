"""Clock sources for the time service."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of current time and the timestamp difference primitive."""

    @abstractmethod
    def now(self) -> int: ...

    @abstractmethod
    def elapsed(self) -> float: ...

    def difference(self, t1: int, t2: int) -> float:
        """Seconds from ``t2`` to ``t1``."""
        return float(t1 - t2)


class SystemClock(Clock):
    """Clock backed by the interpreter's wall and CPU timers."""

    def now(self) -> int:
        return int(time.time())

    def elapsed(self) -> float:
        return time.process_time()
