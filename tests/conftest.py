"""Shared test fixtures."""

import os
import time

import pytest

from pyosdate import Clock, Formatter, StrftimeFormatter


class FakeClock(Clock):
    def __init__(self, now=86400, elapsed=1.5):
        self._now = now
        self._elapsed = elapsed

    def now(self):
        return self._now

    def elapsed(self):
        return self._elapsed


class CountingFormatter(Formatter):
    """Records the buffer capacity seen by each call to the wrapped formatter."""

    def __init__(self, inner):
        self.inner = inner
        self.capacities = []

    @property
    def calls(self):
        return len(self.capacities)

    def format_into(self, buf, pattern, st):
        self.capacities.append(len(buf))
        return self.inner.format_into(buf, pattern, st)


class FixedFormatter(Formatter):
    """Expands every pattern to the same output, honouring the buffer contract."""

    def __init__(self, output):
        self.output = output.encode()

    def format_into(self, buf, pattern, st):
        if not self.output or len(self.output) + 1 > len(buf):
            return 0
        buf[:len(self.output)] = self.output
        return len(self.output)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def strftime_counter():
    return CountingFormatter(StrftimeFormatter())


@pytest.fixture
def fixed_counter():
    def make(output):
        return CountingFormatter(FixedFormatter(output))
    return make


@pytest.fixture
def set_tz():
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")
    original = os.environ.get("TZ")

    def apply(name):
        os.environ["TZ"] = name
        time.tzset()

    yield apply
    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()


@pytest.fixture
def utc_local(set_tz):
    set_tz("UTC0")


US_EASTERN = "EST5EDT,M3.2.0,M11.1.0"
"""POSIX TZ rule for US Eastern time; needs no zoneinfo database."""


@pytest.fixture
def eastern_local(set_tz):
    set_tz(US_EASTERN)
