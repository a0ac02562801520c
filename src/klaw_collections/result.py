"""Result type: Ok[T] | Err[E] for operations that can violate their contract.

Positional and sorting helpers return a Result instead of raising, so callers
decide whether a bad index is an error to propagate or a value to inspect.

Example:
    ```python
    from klaw_collections import delete_by_index

    delete_by_index([1, 2, 3], 1)
    # Ok(value=[1, 3])
    delete_by_index([1, 2, 3], 5)
    # Err(error=IndexOutOfRange(index=5, length=3, name='start'))
    delete_by_index([1, 2, 3], 5).unwrap()
    # raises IndexOutOfRangeError
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Err', 'Ok', 'Result', 'collect']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok([1, 2])
        >>> ok.unwrap()
        [1, 2]
        >>> ok.map(len)
        Ok(value=2)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since there is no error to return."""
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain another Result-returning operation on the contained value.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Errors are usually one of the structs from `klaw_collections.errors`;
    `unwrap()` raises their exception variant.

    Examples:
        >>> err = Err('out of range')
        >>> err.is_err()
        True
        >>> err.unwrap_or([])
        []
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Raises:
            BaseException: The error's exception variant when it has one
                (`to_exception()`), the error itself when it already is an
                exception, otherwise RuntimeError.
        """
        raise _as_exception(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise RuntimeError with a custom message, chained to the error."""
        raise RuntimeError(f'{msg}: {self.error!r}') from _as_exception(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error."""
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]


def _as_exception(error: object) -> BaseException:
    to_exception = getattr(error, 'to_exception', None)
    if callable(to_exception):
        return to_exception()
    if isinstance(error, BaseException):
        return error
    return RuntimeError(f'Called unwrap on Err: {error!r}')


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
