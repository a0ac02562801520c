"""Membership tracking shared by the equality-based helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

__all__ = ['Eq', 'Membership']

type Eq[T] = Callable[[T, T], bool]


class Membership[T]:
    """A growing collection of values answering `value in membership`.

    Without `eq`, hashable values live in a set and unhashable ones in a list,
    so lookups are O(1) for the common case while matching exactly what `==`
    would match. With `eq`, every lookup is a linear scan calling
    `eq(value, candidate)`.
    """

    __slots__ = ('_eq', '_hashed', '_others')

    def __init__(self, values: Iterable[T] = (), eq: Eq[T] | None = None) -> None:
        self._eq = eq
        self._hashed: set[Any] = set()
        self._others: list[T] = []
        for value in values:
            self.add(value)

    def add(self, value: T) -> None:
        if self._eq is None:
            try:
                self._hashed.add(value)
            except TypeError:
                pass  # unhashable, tracked in _others
            else:
                return
        self._others.append(value)

    def __contains__(self, value: object) -> bool:
        if self._eq is not None:
            eq = self._eq
            return any(eq(value, candidate) for candidate in self._others)  # type: ignore[arg-type]

        try:
            found = value in self._hashed
        except TypeError:
            found = any(value is c or value == c for c in self._hashed)
        return found or any(value is c or value == c for c in self._others)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._others)
