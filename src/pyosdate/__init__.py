"""pyosdate - Timestamp breakdown, composition and strftime-style formatting."""

from __future__ import annotations

__version__ = "0.1.0"

from collections.abc import Mapping
from typing import Any

from pyosdate._buffer import ScratchBuffer
from pyosdate._clock import Clock, SystemClock
from pyosdate._codec import CalendarCodec
from pyosdate._engine import FormatEngine, Formatter, Record, Rendered, StrftimeFormatter, Text
from pyosdate._errors import (
    CallerError,
    InvalidArgumentError,
    MissingFieldError,
    TimeServiceError,
)
from pyosdate._pattern import PatternInfo, estimate_capacity, scan_pattern
from pyosdate._service import TimeService
from pyosdate.breakdown import (
    BreakdownPrimitive,
    ReentrantBreakdown,
    SerializedBreakdown,
    get_breakdown,
)
from pyosdate.record import CalendarRecord

__all__ = [
    "now",
    "elapsed_wall",
    "format_time",
    "decompose",
    "to_timestamp",
    "difference",
    "estimate_capacity",
    "scan_pattern",
    "get_breakdown",
    "BreakdownPrimitive",
    "CalendarCodec",
    "CalendarRecord",
    "CallerError",
    "Clock",
    "FormatEngine",
    "Formatter",
    "InvalidArgumentError",
    "MissingFieldError",
    "PatternInfo",
    "ReentrantBreakdown",
    "Record",
    "Rendered",
    "ScratchBuffer",
    "SerializedBreakdown",
    "StrftimeFormatter",
    "SystemClock",
    "Text",
    "TimeService",
    "TimeServiceError",
]


# Module-level helpers use a fresh session per call so no scratch buffer
# is shared between callers.


def now() -> int:
    """Current wall-clock time in epoch seconds."""
    return TimeService().now()


def elapsed_wall() -> float:
    """Processor time used by this process, in seconds."""
    return TimeService().elapsed_wall()


def format_time(
    pattern: str | None = None,
    timestamp: Any = None,
    utc: bool = False,
) -> Rendered | None:
    """Format a timestamp (default now) with a strftime-style pattern.

    See TimeService.format_time.
    """
    return TimeService().format_time(pattern, timestamp, utc)


def decompose(timestamp: Any = None, utc: bool = False) -> CalendarRecord | None:
    """Break a timestamp (default now) down into a calendar record."""
    return TimeService().decompose(timestamp, utc)


def to_timestamp(
    record: CalendarRecord | Mapping[str, Any] | None = None,
    utc: bool = False,
) -> int | None:
    """Compose a timestamp from a calendar record. See TimeService.to_timestamp."""
    return TimeService().to_timestamp(record, utc)


def difference(t1: Any, t2: Any = 0) -> float:
    """Seconds elapsed from ``t2`` to ``t1``."""
    return TimeService().difference(t1, t2)
