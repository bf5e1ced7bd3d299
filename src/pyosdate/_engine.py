"""Format engine - renders calendar records through a strftime-style formatter."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pyosdate._buffer import ScratchBuffer
from pyosdate._constants import MAX_FORMAT_ATTEMPTS, RECORD_PATTERN
from pyosdate._pattern import estimate_capacity
from pyosdate.record import CalendarRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    """Rendered text."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Record:
    """Calendar record returned for the ``*t`` pattern."""

    value: CalendarRecord


Rendered = Text | Record


class Formatter(ABC):
    """Locale-aware formatter writing into a caller-sized buffer."""

    @abstractmethod
    def format_into(self, buf: bytearray, pattern: str, st: time.struct_time) -> int:
        """Write the expansion of ``pattern`` into ``buf``.

        Returns the number of bytes written, or 0 when the expansion plus
        a terminator does not fit in ``len(buf)`` bytes. An empty
        expansion, or a pattern the platform rejects, also returns 0.
        """


class StrftimeFormatter(Formatter):
    """Formatter backed by the platform ``strftime``."""

    def format_into(self, buf: bytearray, pattern: str, st: time.struct_time) -> int:
        try:
            text = time.strftime(pattern, st)
        except ValueError as e:
            logger.debug("strftime rejected pattern %r: %s", pattern, e)
            return 0
        data = text.encode("utf-8", "surrogateescape")
        if len(data) + 1 > len(buf):
            return 0
        buf[:len(data)] = data
        return len(data)


class FormatEngine:
    """Renders records with bounded buffer growth.

    A zero-length formatter result is ambiguous between an empty expansion
    and a buffer that is too small. The engine grows the buffer and
    retries a fixed number of times, then settles on an empty string.
    """

    def __init__(
        self,
        formatter: Formatter | None = None,
        max_attempts: int = MAX_FORMAT_ATTEMPTS,
    ) -> None:
        self._formatter = formatter if formatter is not None else StrftimeFormatter()
        self._max_attempts = max_attempts

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def render(
        self,
        pattern: str,
        record: CalendarRecord,
        buffer: ScratchBuffer | None = None,
    ) -> Rendered:
        # Patterns end at the first NUL, as C strings do.
        pattern = pattern.split("\0", 1)[0]
        if pattern == RECORD_PATTERN:
            return Record(record)
        if not pattern:
            return Text("")

        if buffer is None:
            buffer = ScratchBuffer()
        st = record.to_struct_time()
        size = estimate_capacity(pattern)
        for attempt in range(1, self._max_attempts + 1):
            buf = buffer.need(size)
            length = self._formatter.format_into(buf, pattern, st)
            if length:
                return Text(buffer.text(length))
            logger.debug(
                "attempt %d/%d for %r produced no output at capacity %d",
                attempt, self._max_attempts, pattern, len(buf),
            )
            size += max(size, 1)

        # Known approximation: a still-too-small buffer reads as empty output.
        logger.debug("treating %r as an empty expansion", pattern)
        return Text("")
