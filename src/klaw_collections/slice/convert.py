"""Typed coercion of sequences into plain lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from klaw_collections._logging import get_logger
from klaw_collections.errors import InvalidValueType
from klaw_collections.result import Err, Ok

__all__ = ['as_list', 'int_list', 'str_list']

logger = get_logger(__name__)


def as_list[T](items: Iterable[T] | None) -> list[T] | None:
    """Copy any iterable into a list; None stays None."""
    if items is None:
        return None
    return list(items)


def _typed_list(op: str, items: Iterable[Any], expected: type) -> Ok[list[Any]] | Err[InvalidValueType]:
    out: list[Any] = []
    for i, item in enumerate(items):
        # bool is an int subclass but never a valid int element
        if type(item) is bool or not isinstance(item, expected):
            logger.debug('invalid_value_type', op=op, expected=expected.__name__, actual=type(item).__name__, index=i)
            return Err(InvalidValueType(expected.__name__, type(item).__name__, i))
        out.append(item)
    return Ok(out)


def str_list(items: Iterable[Any]) -> Ok[list[str]] | Err[InvalidValueType]:
    """Return Ok(list of str) if every element is a str, else Err naming the first offender."""
    return _typed_list('str_list', items, str)


def int_list(items: Iterable[Any]) -> Ok[list[int]] | Err[InvalidValueType]:
    """Return Ok(list of int) if every element is an int (bools excluded), else Err."""
    return _typed_list('int_list', items, int)
