"""Read-only queries over sequences: membership, quantifiers, filtering, folding.

Callbacks receive the element index first, then the element:

    filter_([5, 6, 7], lambda i, x: i > 0 and x % 2 == 1)
    # [7]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence, Set
from typing import Any

from klaw_collections.errors import KindMismatchError, UnsupportedKindError
from klaw_collections.optional import Optional
from klaw_collections.slice._membership import Eq
from klaw_collections.typeclass import typeclass

__all__ = [
    'chunk',
    'contain',
    'every',
    'filter_',
    'find',
    'flatten_deep',
    'group_by',
    'map_',
    'none',
    'reduce_',
    'some',
]

type Predicate[T] = Callable[[int, T], bool]


@typeclass
def contain(container: Any, value: Any, *, eq: Eq[Any] | None = None) -> bool:
    """Return True if value is in container.

    - sequences (list, tuple, range, ...): an element is or equals value
    - mappings: value is a key
    - sets: value is a member
    - str: value is a substring (value must be a str)

    Args:
        container: The container to search.
        value: The value to look for.
        eq: Optional equality used instead of `==` (ignored for str).

    Raises:
        KindMismatchError: If value cannot be looked up in this container kind.
        UnsupportedKindError: If the container kind is not supported.
    """
    raise UnsupportedKindError(type(container).__name__)


@contain.instance(str)
def _contain_str(container: str, value: Any, *, eq: Eq[Any] | None = None) -> bool:  # noqa: ARG001
    if not isinstance(value, str):
        raise KindMismatchError('str', type(value).__name__)
    return value in container


@contain.instance(Mapping, Set)
def _contain_keyed(container: Mapping[Any, Any] | Set[Any], value: Any, *, eq: Eq[Any] | None = None) -> bool:
    if eq is not None:
        return any(eq(value, key) for key in container)
    try:
        return value in container
    except TypeError:
        raise KindMismatchError(type(container).__name__, type(value).__name__) from None


@contain.instance(Sequence)
def _contain_sequence(container: Sequence[Any], value: Any, *, eq: Eq[Any] | None = None) -> bool:
    if eq is not None:
        return any(eq(value, item) for item in container)
    # identity first, then ==, same as the set helpers
    return value in container


def chunk[T](items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive chunks of `size`; the last may be shorter.

    Returns an empty list when items is empty or size <= 0.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if size <= 0:
        return []
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


def every[T](items: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if predicate holds for every element (True for empty input)."""
    return all(predicate(i, item) for i, item in enumerate(items))


def some[T](items: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if predicate holds for at least one element."""
    return any(predicate(i, item) for i, item in enumerate(items))


def none[T](items: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if predicate holds for no element (True for empty input)."""
    return not any(predicate(i, item) for i, item in enumerate(items))


def filter_[T](items: Sequence[T], predicate: Predicate[T]) -> list[T]:
    """Return the elements for which predicate is True, in order."""
    return [item for i, item in enumerate(items) if predicate(i, item)]


def group_by[T](items: Sequence[T], predicate: Predicate[T]) -> tuple[list[T], list[T]]:
    """Partition items into (matching, non_matching), each in original order.

    Example:
        >>> group_by([1, 2, 3, 4], lambda _, x: x % 2 == 0)
        ([2, 4], [1, 3])
    """
    matching: list[T] = []
    rest: list[T] = []
    for i, item in enumerate(items):
        (matching if predicate(i, item) else rest).append(item)
    return matching, rest


def find[T](items: Sequence[T], predicate: Predicate[T]) -> Optional[T]:
    """Return the first element satisfying predicate, or an empty Optional.

    Stops calling predicate after the first match.
    """
    for i, item in enumerate(items):
        if predicate(i, item):
            return Optional.of(item)
    return Optional.empty()


def flatten_deep(items: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested lists and tuples, depth-first, left to right.

    Strings and other non-list/tuple values are leaves.

    Example:
        >>> flatten_deep([1, [2, (3, [4])], 'ab'])
        [1, 2, 3, 4, 'ab']
    """
    flat: list[Any] = []
    _flatten_into(items, flat)
    return flat


def _flatten_into(items: Sequence[Any], out: list[Any]) -> None:
    for item in items:
        if isinstance(item, list | tuple):
            _flatten_into(item, out)
        else:
            out.append(item)


def map_[T, U](items: Sequence[T], mapper: Callable[[int, T], U]) -> list[U]:
    """Return [mapper(index, element) for each element]; same length as items."""
    return [mapper(i, item) for i, item in enumerate(items)]


def reduce_[T](items: Sequence[T], reducer: Callable[[int, T, T], T], zero: T | None = None) -> T | None:
    """Left-fold items with reducer(index, accumulator, element).

    - empty input: returns zero
    - single element: returns that element, reducer is not called
    - otherwise: the accumulator starts as items[0] and the fold begins with
      items[1]; index is the position of the element being folded in.

    Example:
        >>> reduce_([1, 2, 3, 4], lambda _, acc, x: acc + x)
        10
    """
    if not items:
        return zero

    acc = items[0]
    for i in range(1, len(items)):
        acc = reducer(i, acc, items[i])
    return acc
