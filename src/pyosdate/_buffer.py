"""Growable scratch buffer for formatter output."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ScratchBuffer:
    """Byte buffer reused across renders within one session.

    Not synchronized: a buffer belongs to a single caller at a time.
    Growing relocates the storage; content from before the relocation is
    not preserved.
    """

    def __init__(self, initial_size: int = 0) -> None:
        self._data = bytearray(initial_size)
        self.relocations = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def need(self, size: int) -> bytearray:
        """Return storage holding at least ``size`` bytes."""
        if size > len(self._data):
            new_size = max(size, 2 * len(self._data))
            logger.debug("scratch buffer relocating %d -> %d bytes", len(self._data), new_size)
            self._data = bytearray(new_size)
            self.relocations += 1
        return self._data

    def text(self, length: int) -> str:
        """Decode the first ``length`` bytes written by the formatter."""
        return self._data[:length].decode("utf-8", "surrogateescape")
