"""Calendar record value type."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pyosdate._constants import (
    DEFAULT_HOUR,
    DEFAULT_MINUTE,
    DEFAULT_SECOND,
    REQUIRED_FIELDS,
)
from pyosdate._errors import MissingFieldError
from pyosdate._utils import to_integer


def _weekday_from_struct(tm_wday: int) -> int:
    # struct_time counts from Monday = 0; records count from Sunday = 1.
    return (tm_wday + 1) % 7 + 1


def _weekday_to_struct(weekday: int) -> int:
    return (weekday - 2) % 7


@dataclass(frozen=True)
class CalendarRecord:
    """Broken-down calendar time.

    ``weekday`` (Sunday = 1) and ``yearday`` are filled in by a breakdown
    and ignored when composing a timestamp. ``isdst`` is None when DST is
    unknown.
    """

    year: int
    month: int
    day: int
    hour: int = DEFAULT_HOUR
    minute: int = DEFAULT_MINUTE
    second: int = DEFAULT_SECOND
    weekday: int | None = None
    yearday: int | None = None
    isdst: bool | None = None
    zone: str | None = field(default=None, compare=False, repr=False)
    gmtoff: int | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> CalendarRecord:
        return cls(
            year=st.tm_year,
            month=st.tm_mon,
            day=st.tm_mday,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
            weekday=_weekday_from_struct(st.tm_wday),
            yearday=st.tm_yday,
            isdst=None if st.tm_isdst < 0 else bool(st.tm_isdst),
            zone=st.tm_zone,
            gmtoff=st.tm_gmtoff,
        )

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> CalendarRecord:
        """Build a record for composition from a partially populated mapping.

        ``sec`` and ``min`` default to 0 and ``hour`` to 12; non-numeric
        values for these fall back to the default. ``day``, ``month`` and
        ``year`` are required and checked in that order. ``isdst`` is
        unknown when absent or None. ``weekday`` and ``yearday`` are ignored.

        Raises:
            MissingFieldError: If a required field is absent or not numeric.
        """
        required: dict[str, int] = {}
        for name in REQUIRED_FIELDS:
            value = to_integer(fields.get(name))
            if value is None:
                raise MissingFieldError(
                    name,
                    f"required field {name!r} has value {fields.get(name)!r}",
                )
            required[name] = value

        isdst = fields.get("isdst")
        return cls(
            year=required["year"],
            month=required["month"],
            day=required["day"],
            hour=_optional_field(fields, "hour", DEFAULT_HOUR),
            minute=_optional_field(fields, "min", DEFAULT_MINUTE),
            second=_optional_field(fields, "sec", DEFAULT_SECOND),
            isdst=None if isdst is None else bool(isdst),
        )

    def to_mapping(self) -> dict[str, Any]:
        """Export the named fields; ``isdst`` is omitted when unknown."""
        result: dict[str, Any] = {
            "sec": self.second,
            "min": self.minute,
            "hour": self.hour,
            "day": self.day,
            "month": self.month,
            "year": self.year,
            "weekday": self.weekday,
            "yearday": self.yearday,
        }
        if self.isdst is not None:
            result["isdst"] = self.isdst
        return result

    def to_struct_time(self) -> time.struct_time:
        """Convert to a struct_time suitable for the platform formatter."""
        wday = 0 if self.weekday is None else _weekday_to_struct(self.weekday)
        yday = 1 if self.yearday is None else self.yearday
        isdst = -1 if self.isdst is None else int(self.isdst)
        return time.struct_time((
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            wday, yday, isdst,
            self.zone, self.gmtoff,
        ))


def _optional_field(fields: Mapping[str, Any], name: str, default: int) -> int:
    value = to_integer(fields.get(name))
    return default if value is None else value
