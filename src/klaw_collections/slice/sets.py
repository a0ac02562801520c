"""Set algebra over sequences, preserving first-occurrence order.

Every function takes an optional `eq(a, b) -> bool`. Without it, `==` is used
and hashable elements are matched through a hash set; unhashable elements
(lists, dicts) fall back to a linear scan, with identical results.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from klaw_collections.slice._membership import Eq, Membership

__all__ = [
    'difference',
    'intersection',
    'union',
    'unique',
    'without',
]


def unique[T](items: Iterable[T], *, eq: Eq[T] | None = None) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each value.

    Example:
        >>> unique([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    seen: Membership[T] = Membership(eq=eq)
    out: list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def difference[T](items: Sequence[T], other: Iterable[T], *, eq: Eq[T] | None = None) -> list[T]:
    """Return the elements of items not present in other, in items' order.

    Duplicates in items are kept.
    """
    excluded = Membership(other, eq=eq)
    return [item for item in items if item not in excluded]


def without[T](items: Sequence[T], *values: T, eq: Eq[T] | None = None) -> list[T]:
    """Return items with every element equal to one of values removed."""
    if not values:
        return list(items)
    return difference(items, values, eq=eq)


def union[T](*sequences: Iterable[T], eq: Eq[T] | None = None) -> list[T]:
    """Concatenate all sequences and remove duplicates, first occurrence wins.

    Example:
        >>> union([1, 2], [2, 3], [3, 4])
        [1, 2, 3, 4]
    """
    return unique((item for sequence in sequences for item in sequence), eq=eq)


def intersection[T](*sequences: Iterable[T], eq: Eq[T] | None = None) -> list[T]:
    """Return the unique elements present in every sequence, in the first one's order.

    Returns an empty list when called without sequences.

    Example:
        >>> intersection([3, 1, 2, 1], [1, 2], [2, 1, 5])
        [1, 2]
    """
    if not sequences:
        return []

    first, *rest = sequences
    others = [Membership(sequence, eq=eq) for sequence in rest]
    return unique((item for item in first if all(item in other for other in others)), eq=eq)
