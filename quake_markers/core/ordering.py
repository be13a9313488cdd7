"""Marker ordering - Pure functions.

Markers are displayed largest magnitude first. Anything exposing a
`magnitude` attribute (EventAttributes, markers) can be ordered.
"""

from typing import Protocol, Sequence, TypeVar


class HasMagnitude(Protocol):
    magnitude: float


T = TypeVar("T", bound=HasMagnitude)


def compare_magnitude(a: HasMagnitude, b: HasMagnitude) -> int:
    """Compare two items for a descending-magnitude sort.

    Pure function. This is the inverse of natural numeric order: the
    larger magnitude sorts first.

    Args:
        a: First item
        b: Second item

    Returns:
        -1 if a sorts before b, 1 if after, 0 for equal magnitudes
    """
    if a.magnitude == b.magnitude:
        return 0
    elif a.magnitude < b.magnitude:
        return 1
    return -1


def magnitude_key(item: HasMagnitude) -> float:
    """Sort key equivalent to compare_magnitude."""
    return -item.magnitude


def sort_by_magnitude(items: Sequence[T]) -> list[T]:
    """Return items sorted by magnitude, largest first.

    Pure function. sorted() is stable, so items with equal magnitude keep
    their input (feed) order.
    """
    return sorted(items, key=magnitude_key)


def largest(items: Sequence[T], count: int) -> list[T]:
    """Return the `count` largest items, largest first.

    Pure function. A non-positive count yields an empty list; a count
    larger than the input yields every item.
    """
    if count <= 0:
        return []
    return sort_by_magnitude(items)[:count]
