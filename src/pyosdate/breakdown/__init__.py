"""Calendar breakdown primitives."""

from pyosdate.breakdown._base import BreakdownName, BreakdownPrimitive
from pyosdate.breakdown.reentrant import ReentrantBreakdown
from pyosdate.breakdown.serialized import SerializedBreakdown

__all__ = [
    "BreakdownName",
    "BreakdownPrimitive",
    "ReentrantBreakdown",
    "SerializedBreakdown",
    "get_breakdown",
]

_REGISTRY: dict[str, type[BreakdownPrimitive]] = {
    BreakdownName.REENTRANT: ReentrantBreakdown,
    BreakdownName.SERIALIZED: SerializedBreakdown,
}


def get_breakdown(name: str) -> BreakdownPrimitive:
    """Get a breakdown primitive instance by name.

    Args:
        name: Primitive name ("reentrant" or "serialized").

    Returns:
        A BreakdownPrimitive instance.

    Raises:
        ValueError: If the primitive name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown breakdown primitive: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
