"""Formatting limits and calendar field defaults."""

SPECIFIER_WEIGHT = 30
"""Capacity reserved per '%' marker; covers full month/weekday names."""

LITERAL_WEIGHT = 1
"""Capacity reserved per literal pattern character."""

MAX_FORMAT_ATTEMPTS = 4
"""Formatter invocations per render before a zero length is taken as empty."""

DEFAULT_PATTERN = "%c"
"""Platform preferred date and time representation."""

UTC_MARKER = "!"
"""Leading pattern character forcing UTC breakdown."""

RECORD_PATTERN = "*t"
"""Pattern that returns the calendar record instead of text."""

DEFAULT_SECOND = 0
DEFAULT_MINUTE = 0
DEFAULT_HOUR = 12
"""Noon keeps composed dates clear of DST transitions."""

REQUIRED_FIELDS = ("day", "month", "year")
"""Fields without a default, in the order they are checked."""

INVALID_TIMESTAMP = -1
"""Error sentinel returned by the platform mktime."""
