"""Abstract base class for calendar breakdown primitives."""

from __future__ import annotations

import enum
import time
from abc import ABC, abstractmethod


class BreakdownName(enum.StrEnum):
    REENTRANT = "reentrant"
    SERIALIZED = "serialized"


class BreakdownPrimitive(ABC):
    """Platform primitive splitting epoch seconds into calendar fields.

    Implementations raise OverflowError, OSError or ValueError when the
    timestamp cannot be represented; callers translate that into an
    invalid result.
    """

    @abstractmethod
    def localtime(self, t: int) -> time.struct_time: ...

    @abstractmethod
    def gmtime(self, t: int) -> time.struct_time: ...

    def breakdown(self, t: int, utc: bool) -> time.struct_time:
        return self.gmtime(t) if utc else self.localtime(t)
