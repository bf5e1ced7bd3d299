"""Breakdown wrapper serializing access to a non-reentrant primitive."""

from __future__ import annotations

import threading
import time

from pyosdate.breakdown._base import BreakdownPrimitive
from pyosdate.breakdown.reentrant import ReentrantBreakdown


class SerializedBreakdown(BreakdownPrimitive):
    """Guards an inner primitive with a lock held only for the breakdown call.

    Use this around primitives backed by shared static storage when the
    host calls the service from several threads.
    """

    def __init__(self, inner: BreakdownPrimitive | None = None) -> None:
        self._inner = inner if inner is not None else ReentrantBreakdown()
        self._lock = threading.Lock()

    @property
    def inner(self) -> BreakdownPrimitive:
        return self._inner

    def localtime(self, t: int) -> time.struct_time:
        with self._lock:
            return self._inner.localtime(t)

    def gmtime(self, t: int) -> time.struct_time:
        with self._lock:
            return self._inner.gmtime(t)
