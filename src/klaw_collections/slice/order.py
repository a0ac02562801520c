"""Ordering helpers: in-place reversal, shuffling and sorting by field."""

from __future__ import annotations

import random
from collections.abc import Mapping, MutableSequence, Sequence
from enum import Enum
from typing import Any

from klaw_collections._config import get_random
from klaw_collections._logging import get_logger
from klaw_collections.errors import FieldNotFound, UnsupportedFieldType
from klaw_collections.result import Err, Ok
from klaw_collections.typeclass import typeclass

__all__ = [
    'SortOrder',
    'reverse_slice',
    'shuffle',
    'sort_by_field',
]

logger = get_logger(__name__)

_MISSING = object()


class SortOrder(Enum):
    """Direction for sort_by_field()."""

    ASC = 'asc'
    DESC = 'desc'


def reverse_slice(items: MutableSequence[Any]) -> None:
    """Reverse items in place."""
    i, j = 0, len(items) - 1
    while i < j:
        items[i], items[j] = items[j], items[i]
        i += 1
        j -= 1


def shuffle[T](items: Sequence[T], *, rng: random.Random | None = None) -> list[T]:
    """Return a new list with the elements of items in random order.

    Args:
        items: The source sequence (left untouched).
        rng: Random generator to draw from. Defaults to the generator seeded
            by `init(seed=...)`.
    """
    generator = rng if rng is not None else get_random()
    return generator.sample(list(items), len(items))


@typeclass
def sort_kind(value: Any) -> str | None:
    """Return the ordering kind of a sort-field value, or None if unsupported."""
    return None


@sort_kind.instance(bool, int, float)
def _sort_kind_number(value: bool | int | float) -> str:  # noqa: ARG001
    return 'number'


@sort_kind.instance(str)
def _sort_kind_string(value: str) -> str:  # noqa: ARG001
    return 'string'


def _field_value(item: Any, field: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(field, _MISSING)
    return getattr(item, field, _MISSING)


def sort_by_field[T](
    items: Sequence[T],
    field: str,
    order: SortOrder | str = SortOrder.ASC,
) -> Ok[list[T]] | Err[FieldNotFound | UnsupportedFieldType]:
    """Return items stably sorted by one field.

    Elements may be objects (dataclasses, msgspec Structs, plain classes),
    where the field is an attribute, or mappings, where it is a key. Field
    values must be int, float, bool or str; numbers and strings cannot be mixed.

    Args:
        items: The source sequence (left untouched).
        field: Attribute or key name to sort by.
        order: SortOrder.ASC (default) or SortOrder.DESC, or "asc"/"desc".

    Returns:
        Ok(sorted list), Err(FieldNotFound) or Err(UnsupportedFieldType).

    Raises:
        ValueError: If order is neither a SortOrder nor "asc"/"desc".

    Example:
        >>> sort_by_field([{'name': 'b'}, {'name': 'a'}], 'name')
        Ok(value=[{'name': 'a'}, {'name': 'b'}])
    """
    resolved = SortOrder(order.lower() if isinstance(order, str) else order)

    keys: list[Any] = []
    kinds: set[str] = set()
    for item in items:
        value = _field_value(item, field)
        if value is _MISSING:
            logger.debug('field_not_found', op='sort_by_field', field=field, type=type(item).__name__)
            return Err(FieldNotFound(field))

        kind = sort_kind(value)
        if kind is None:
            logger.debug('unsupported_field_type', op='sort_by_field', field=field, type=type(value).__name__)
            return Err(UnsupportedFieldType(field, type(value).__name__))

        keys.append(value)
        kinds.add(kind)

    if len(kinds) > 1:
        type_name = ' | '.join(sorted({type(key).__name__ for key in keys}))
        logger.debug('unsupported_field_type', op='sort_by_field', field=field, type=type_name)
        return Err(UnsupportedFieldType(field, type_name))

    positions = sorted(range(len(keys)), key=keys.__getitem__, reverse=resolved is SortOrder.DESC)
    return Ok([items[i] for i in positions])
