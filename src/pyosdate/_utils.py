"""Argument coercion helpers."""

from __future__ import annotations

import math
from typing import Any

from pyosdate._errors import (
    ERR_MSG_INVALID_TIMESTAMP,
    ERR_MSG_NON_FINITE_TIMESTAMP,
    InvalidArgumentError,
)


def to_integer(value: Any) -> int | None:
    """Convert a numeric value to an int, truncating toward zero.

    Accepts ints, finite floats and numeric strings. Returns None for
    anything else, including bools.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    return None


def check_timestamp(value: Any, name: str = "timestamp") -> int:
    """Validate a caller-supplied timestamp and truncate it to whole seconds."""
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(
            ERR_MSG_NON_FINITE_TIMESTAMP,
            f"{name} is {value!r}",
        )
    result = to_integer(value)
    if result is None:
        raise InvalidArgumentError(
            ERR_MSG_INVALID_TIMESTAMP,
            f"{name} has unsupported value {value!r} ({type(value).__name__})",
        )
    return result
