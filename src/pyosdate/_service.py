"""TimeService facade composing the codec, format engine and clock."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pyosdate._buffer import ScratchBuffer
from pyosdate._clock import Clock, SystemClock
from pyosdate._codec import CalendarCodec
from pyosdate._constants import DEFAULT_PATTERN, MAX_FORMAT_ATTEMPTS, UTC_MARKER
from pyosdate._engine import FormatEngine, Formatter, Rendered
from pyosdate._errors import (
    ERR_MSG_INVALID_RECORD,
    ERR_MSG_PATTERN_TYPE,
    InvalidArgumentError,
)
from pyosdate._utils import check_timestamp
from pyosdate.breakdown import BreakdownPrimitive, get_breakdown
from pyosdate.record import CalendarRecord


class TimeService:
    """A date/time session.

    The session owns its scratch buffer. Use one service per thread, or
    serialize access to a shared one.
    """

    def __init__(
        self,
        *,
        breakdown: BreakdownPrimitive | str | None = None,
        formatter: Formatter | None = None,
        clock: Clock | None = None,
        buffer: ScratchBuffer | None = None,
        default_pattern: str | None = None,
        max_format_attempts: int | None = None,
    ) -> None:
        if isinstance(breakdown, str):
            breakdown = get_breakdown(breakdown)
        self._codec = CalendarCodec(breakdown)
        self._engine = FormatEngine(
            formatter,
            max_format_attempts if max_format_attempts is not None else MAX_FORMAT_ATTEMPTS,
        )
        self._clock = clock if clock is not None else SystemClock()
        self._buffer = buffer if buffer is not None else ScratchBuffer()
        self._default_pattern = default_pattern if default_pattern is not None else DEFAULT_PATTERN

    @property
    def codec(self) -> CalendarCodec:
        return self._codec

    @property
    def engine(self) -> FormatEngine:
        return self._engine

    @property
    def buffer(self) -> ScratchBuffer:
        return self._buffer

    def now(self) -> int:
        """Current wall-clock time in epoch seconds."""
        return self._clock.now()

    def elapsed_wall(self) -> float:
        """Processor time used so far, in seconds."""
        return self._clock.elapsed()

    def format_time(
        self,
        pattern: str | None = None,
        timestamp: Any = None,
        utc: bool = False,
    ) -> Rendered | None:
        """Format a timestamp.

        Args:
            pattern: strftime-style pattern. Defaults to the preferred
                date and time representation. A leading ``!`` forces UTC;
                ``*t`` returns the calendar record instead of text.
            timestamp: Epoch seconds. Defaults to now.
            utc: Break the timestamp down as UTC instead of local time.

        Returns:
            Text or Record, or None if the timestamp cannot be broken down.

        Raises:
            InvalidArgumentError: If the pattern or timestamp has the wrong type.
        """
        if pattern is None:
            pattern = self._default_pattern
        elif not isinstance(pattern, str):
            raise InvalidArgumentError(
                ERR_MSG_PATTERN_TYPE,
                f"pattern has type {type(pattern).__name__}",
            )
        t = self._resolve_timestamp(timestamp)

        if pattern.startswith(UTC_MARKER):
            pattern = pattern[len(UTC_MARKER):]
            utc = True

        record = self._codec.breakdown(t, utc)
        if record is None:
            return None
        return self._engine.render(pattern, record, self._buffer)

    def decompose(self, timestamp: Any = None, utc: bool = False) -> CalendarRecord | None:
        """Break a timestamp (default now) down into a calendar record."""
        return self._codec.breakdown(self._resolve_timestamp(timestamp), utc)

    def to_timestamp(
        self,
        record: CalendarRecord | Mapping[str, Any] | None = None,
        utc: bool = False,
    ) -> int | None:
        """Compose a timestamp from a calendar record.

        Without a record this is the current time. Mappings need ``day``,
        ``month`` and ``year``; ``sec``, ``min``, ``hour`` and ``isdst``
        are optional.

        Returns:
            Epoch seconds, or None if the platform cannot represent the date.

        Raises:
            MissingFieldError: If a required field is absent.
            InvalidArgumentError: If the record is neither a CalendarRecord
                nor a mapping.
        """
        if record is None:
            return self.now()
        if isinstance(record, Mapping):
            record = CalendarRecord.from_mapping(record)
        elif not isinstance(record, CalendarRecord):
            raise InvalidArgumentError(
                ERR_MSG_INVALID_RECORD,
                f"record has type {type(record).__name__}",
            )
        return self._codec.compose(record, utc)

    def difference(self, t1: Any, t2: Any = 0) -> float:
        """Seconds elapsed from ``t2`` to ``t1``."""
        return self._clock.difference(check_timestamp(t1, "t1"), check_timestamp(t2, "t2"))

    def _resolve_timestamp(self, timestamp: Any) -> int:
        if timestamp is None:
            return self.now()
        return check_timestamp(timestamp)
