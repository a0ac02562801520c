"""Optional type: an immutable container that may or may not hold a value."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from klaw_collections.errors import AbsentValueError
from klaw_collections.result import Err, Ok

__all__ = ['Optional']


class Optional[T](msgspec.Struct, frozen=True, gc=False, repr_omit_defaults=True):
    """A value of type T together with a presence flag.

    Build instances with `empty()`, `of()` or `of_nullable()`. When absent,
    `value` is None and is never handed out by the accessors; read it through
    `get()`, `or_else()` and friends.

    Optional(None) is distinct from an empty Optional: `of(None)` is present.

    Examples:
        >>> Optional.of(42).get()
        42
        >>> Optional.empty().or_else(0)
        0
        >>> Optional.of_nullable(None).is_empty()
        True
        >>> Optional.of(2).map(lambda x: x * 10)
        Optional(value=20, present=True)
    """

    value: T | None = None
    present: bool = False

    def __post_init__(self) -> None:
        if not self.present and self.value is not None:
            msg = f'An empty Optional cannot hold a value, got {self.value!r}'
            raise ValueError(msg)

    @classmethod
    def empty(cls) -> Optional[T]:
        """Return an Optional holding no value."""
        return _EMPTY

    @classmethod
    def of(cls, value: T) -> Optional[T]:
        """Return a present Optional wrapping value."""
        return cls(value, True)

    @classmethod
    def of_nullable(cls, value: T | None) -> Optional[T]:
        """Return a present Optional unless value is None."""
        if value is None:
            return _EMPTY
        return cls(value, True)

    def is_present(self) -> bool:
        """Return True if a value is present."""
        return self.present

    def is_empty(self) -> bool:
        """Return True if no value is present."""
        return not self.present

    def get(self) -> T:
        """Return the value.

        Raises:
            AbsentValueError: If the Optional is empty.
        """
        if not self.present:
            raise AbsentValueError()
        return self.value  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        """Return the value if present, otherwise default."""
        if self.present:
            return self.value  # type: ignore[return-value]
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value if present, otherwise the result of supplier().

        The supplier is only called when the Optional is empty.
        """
        if self.present:
            return self.value  # type: ignore[return-value]
        return supplier()

    def or_else_throw[E](self, error_supplier: Callable[[], E]) -> Ok[T] | Err[E]:
        """Return Ok(value) if present, otherwise Err(error_supplier()).

        Call `.unwrap()` on the result to raise the supplied error instead.

        Example:
            ```python
            Optional.empty().or_else_throw(lambda: ValueError('no user'))
            # Err(error=ValueError('no user'))
            Optional.of(7).or_else_throw(lambda: ValueError('no user'))
            # Ok(value=7)
            ```
        """
        if self.present:
            return Ok(self.value)  # type: ignore[arg-type]
        return Err(error_supplier())

    def if_present(self, action: Callable[[T], Any]) -> None:
        """Call action(value) if a value is present."""
        if self.present:
            action(self.value)  # type: ignore[arg-type]

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        """Call action(value) if present, otherwise empty_action()."""
        if self.present:
            action(self.value)  # type: ignore[arg-type]
        else:
            empty_action()

    def map[U](self, f: Callable[[T], U]) -> Optional[U]:
        """Apply f to the value if present; empty stays empty."""
        if self.present:
            return Optional(f(self.value), True)  # type: ignore[arg-type]
        return _EMPTY

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if predicate(value) is True."""
        if self.present and predicate(self.value):  # type: ignore[arg-type]
            return self
        return _EMPTY


_EMPTY: Optional[Any] = Optional()
