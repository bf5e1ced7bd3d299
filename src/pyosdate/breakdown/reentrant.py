"""Reentrant breakdown using the interpreter's time functions."""

from __future__ import annotations

import time

from pyosdate.breakdown._base import BreakdownPrimitive


class ReentrantBreakdown(BreakdownPrimitive):
    """Breakdown safe for concurrent callers.

    ``time.localtime`` and ``time.gmtime`` write into per-call storage
    (``localtime_r``/``gmtime_r`` on POSIX), so no locking is needed.
    """

    def localtime(self, t: int) -> time.struct_time:
        return time.localtime(t)

    def gmtime(self, t: int) -> time.struct_time:
        return time.gmtime(t)
