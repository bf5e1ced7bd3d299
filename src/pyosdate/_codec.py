"""Conversion between epoch timestamps and calendar records."""

from __future__ import annotations

import logging
import time

from pyosdate._constants import INVALID_TIMESTAMP
from pyosdate.breakdown import BreakdownPrimitive, ReentrantBreakdown
from pyosdate.record import CalendarRecord

logger = logging.getLogger(__name__)


class CalendarCodec:
    """Breaks timestamps down into records and composes them back.

    Range failures are reported as None rather than raised.
    """

    def __init__(self, primitive: BreakdownPrimitive | None = None) -> None:
        self._primitive = primitive if primitive is not None else ReentrantBreakdown()

    @property
    def primitive(self) -> BreakdownPrimitive:
        return self._primitive

    def breakdown(self, t: int, utc: bool = False) -> CalendarRecord | None:
        """Split ``t`` into calendar fields, in UTC or local time."""
        try:
            st = self._primitive.breakdown(t, utc)
        except (OverflowError, OSError, ValueError) as e:
            logger.debug("breakdown of %r (utc=%s) failed: %s", t, utc, e)
            return None
        return CalendarRecord.from_struct_time(st)

    def compose(self, record: CalendarRecord, utc: bool = False) -> int | None:
        """Compose a timestamp from the record's date and time fields.

        Out-of-range fields roll over into neighbouring units. ``weekday``
        and ``yearday`` are ignored.
        """
        try:
            if utc:
                t = _compose_utc(record)
                # Only results the UTC breakdown can represent are valid.
                self._primitive.gmtime(t)
            else:
                t = int(time.mktime((
                    record.year, record.month, record.day,
                    record.hour, record.minute, record.second,
                    0, 0, -1 if record.isdst is None else int(record.isdst),
                )))
        except (OverflowError, OSError, ValueError) as e:
            logger.debug("composition of %r (utc=%s) failed: %s", record, utc, e)
            return None
        if t == INVALID_TIMESTAMP:
            logger.debug("composition of %r hit the error sentinel", record)
            return None
        return t


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 in the proleptic Gregorian calendar."""
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def _compose_utc(record: CalendarRecord) -> int:
    # Month overflow carries into the year; the remaining fields roll over
    # through plain second arithmetic.
    year, month_index = divmod(record.month - 1, 12)
    days = _days_from_civil(record.year + year, month_index + 1, 1) + record.day - 1
    return days * 86400 + record.hour * 3600 + record.minute * 60 + record.second
