"""Positional edits: delete, drop, insert and update by index.

All functions return new lists. Contract violations come back as
`Err(IndexOutOfRange)` or `Err(InvalidValueType)` rather than raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from klaw_collections._logging import get_logger
from klaw_collections.errors import IndexOutOfRange, InvalidValueType
from klaw_collections.result import Err, Ok

__all__ = [
    'delete_by_index',
    'drop',
    'insert_by_index',
    'update_by_index',
]

logger = get_logger(__name__)

type ElemType = type | tuple[type, ...]


def _out_of_range(op: str, index: int, length: int, name: str = 'index') -> Err[IndexOutOfRange]:
    logger.debug('index_out_of_range', op=op, name=name, index=index, length=length)
    return Err(IndexOutOfRange(index, length, name))


def _check_type(
    op: str,
    values: Iterable[Any],
    elem_type: ElemType | None,
    start: int = 0,
) -> Err[InvalidValueType] | None:
    if elem_type is None:
        return None
    for i, value in enumerate(values, start):
        if not isinstance(value, elem_type):
            expected = _type_name(elem_type)
            actual = type(value).__name__
            logger.debug('invalid_value_type', op=op, expected=expected, actual=actual, index=i)
            return Err(InvalidValueType(expected, actual, i))
    return None


def _type_name(elem_type: ElemType) -> str:
    if isinstance(elem_type, tuple):
        return ' | '.join(t.__name__ for t in elem_type)
    return elem_type.__name__


def delete_by_index[T](
    items: Sequence[T],
    start: int,
    end: int | None = None,
) -> Ok[list[T]] | Err[IndexOutOfRange]:
    """Remove the element at start, or the range [start, end).

    Args:
        items: The source sequence (left untouched).
        start: Index of the first element to remove; must be in [0, len).
        end: Exclusive end of the range; must be in (start, len].

    Returns:
        Ok(new list) or Err(IndexOutOfRange) naming the bad argument.

    Example:
        >>> delete_by_index(['a', 'b', 'c', 'd'], 1, 3)
        Ok(value=['a', 'd'])
    """
    length = len(items)
    if not 0 <= start < length:
        return _out_of_range('delete_by_index', start, length, 'start')

    if end is None:
        end = start + 1
    elif not start < end <= length:
        return _out_of_range('delete_by_index', end, length, 'end')

    return Ok([*items[:start], *items[end:]])


def drop[T](items: Sequence[T], n: int) -> list[T]:
    """Drop n elements from the front (n > 0) or from the back (n < 0).

    Returns an empty list when abs(n) >= len(items); n == 0 returns a copy.

    Example:
        >>> drop([1, 2, 3, 4], -1)
        [1, 2, 3]
    """
    length = len(items)
    if abs(n) >= length:
        return [] if n else list(items)
    if n > 0:
        return list(items[n:])
    return list(items[: length + n])


def insert_by_index[T](
    items: Sequence[T],
    index: int,
    value: T | Sequence[T],
    *,
    elem_type: ElemType | None = None,
) -> Ok[list[T]] | Err[IndexOutOfRange | InvalidValueType]:
    """Insert a value, or splice a list/tuple of values, at index.

    A list or tuple value is spliced in element by element, unless elem_type
    is given and the value itself is an instance of it (use elem_type=list to
    insert a list into a list of lists).

    Args:
        items: The source sequence (left untouched).
        index: Insertion point in [0, len]; len appends.
        value: A single element or a list/tuple of elements.
        elem_type: When given, every inserted element must be an instance of it.
            A mismatch reports its position in the resulting list.

    Returns:
        Ok(new list), Err(IndexOutOfRange) or Err(InvalidValueType).

    Example:
        >>> insert_by_index([1, 2, 3], 1, 99)
        Ok(value=[1, 99, 2, 3])
        >>> insert_by_index([1, 2, 3], 3, [4, 5])
        Ok(value=[1, 2, 3, 4, 5])
    """
    length = len(items)
    if not 0 <= index <= length:
        return _out_of_range('insert_by_index', index, length)

    splice = isinstance(value, list | tuple) and (elem_type is None or not isinstance(value, elem_type))
    inserted: Sequence[Any] = value if splice else (value,)  # type: ignore[assignment]

    if (err := _check_type('insert_by_index', inserted, elem_type, index)) is not None:
        return err

    return Ok([*items[:index], *inserted, *items[index:]])


def update_by_index[T](
    items: Sequence[T],
    index: int,
    value: T,
    *,
    elem_type: ElemType | None = None,
) -> Ok[list[T]] | Err[IndexOutOfRange | InvalidValueType]:
    """Return a copy of items with the element at index replaced by value.

    Args:
        items: The source sequence (left untouched).
        index: Position to replace; must be in [0, len).
        value: The new element.
        elem_type: When given, value must be an instance of it.

    Returns:
        Ok(new list), Err(IndexOutOfRange) or Err(InvalidValueType).
    """
    length = len(items)
    if not 0 <= index < length:
        return _out_of_range('update_by_index', index, length)

    if (err := _check_type('update_by_index', (value,), elem_type, index)) is not None:
        return err

    updated = list(items)
    updated[index] = value
    return Ok(updated)
