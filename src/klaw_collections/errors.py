"""Collection error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'AbsentValue',
    'AbsentValueError',
    'FieldNotFound',
    'FieldNotFoundError',
    'IndexOutOfRange',
    'IndexOutOfRangeError',
    'InvalidValueType',
    'InvalidValueTypeError',
    'KindMismatch',
    'KindMismatchError',
    'UnsupportedFieldType',
    'UnsupportedFieldTypeError',
    'UnsupportedKind',
    'UnsupportedKindError',
]


# --- Optional Errors ---


class AbsentValue(msgspec.Struct, frozen=True, gc=False):
    """Optional holds no value - struct variant for Result[T, AbsentValue]."""

    def to_exception(self) -> AbsentValueError:
        """Convert to exception for raise-based code."""
        return AbsentValueError()


class AbsentValueError(LookupError):
    """Optional holds no value - exception variant."""

    def __init__(self) -> None:
        super().__init__('No value present')

    def to_struct(self) -> AbsentValue:
        """Convert to struct for Result-based code."""
        return AbsentValue()


# --- Positional Errors ---


class IndexOutOfRange(msgspec.Struct, frozen=True, gc=False):
    """Index outside the valid range - struct variant for Result[T, IndexOutOfRange].

    Attributes:
        index: The offending index.
        length: Length of the sequence the index was applied to.
        name: Which argument was invalid ("index", "start" or "end").
    """

    index: int
    length: int
    name: str = 'index'

    def to_exception(self) -> IndexOutOfRangeError:
        """Convert to exception for raise-based code."""
        return IndexOutOfRangeError(self.index, self.length, self.name)


class IndexOutOfRangeError(IndexError):
    """Index outside the valid range - exception variant."""

    def __init__(self, index: int, length: int, name: str = 'index') -> None:
        self.index = index
        self.length = length
        self.name = name
        super().__init__(f'Invalid {name} {index} for sequence of length {length}')

    def to_struct(self) -> IndexOutOfRange:
        """Convert to struct for Result-based code."""
        return IndexOutOfRange(self.index, self.length, self.name)


class InvalidValueType(msgspec.Struct, frozen=True, gc=False):
    """Value has the wrong element type - struct variant for Result[T, InvalidValueType]."""

    expected: str
    actual: str
    index: int | None = None

    def to_exception(self) -> InvalidValueTypeError:
        """Convert to exception for raise-based code."""
        return InvalidValueTypeError(self.expected, self.actual, self.index)


class InvalidValueTypeError(TypeError):
    """Value has the wrong element type - exception variant."""

    def __init__(self, expected: str, actual: str, index: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.index = index
        msg = f'Expected {expected}, got {actual}'
        if index is not None:
            msg = f'{msg} at index {index}'
        super().__init__(msg)

    def to_struct(self) -> InvalidValueType:
        """Convert to struct for Result-based code."""
        return InvalidValueType(self.expected, self.actual, self.index)


# --- Sort Errors ---


class FieldNotFound(msgspec.Struct, frozen=True, gc=False):
    """Sort field missing on an element - struct variant for Result[T, FieldNotFound]."""

    field: str

    def to_exception(self) -> FieldNotFoundError:
        """Convert to exception for raise-based code."""
        return FieldNotFoundError(self.field)


class FieldNotFoundError(AttributeError):
    """Sort field missing on an element - exception variant."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Field {field!r} not found')

    def to_struct(self) -> FieldNotFound:
        """Convert to struct for Result-based code."""
        return FieldNotFound(self.field)


class UnsupportedFieldType(msgspec.Struct, frozen=True, gc=False):
    """Sort field is not orderable - struct variant for Result[T, UnsupportedFieldType]."""

    field: str
    type_name: str

    def to_exception(self) -> UnsupportedFieldTypeError:
        """Convert to exception for raise-based code."""
        return UnsupportedFieldTypeError(self.field, self.type_name)


class UnsupportedFieldTypeError(TypeError):
    """Sort field is not orderable - exception variant."""

    def __init__(self, field: str, type_name: str) -> None:
        self.field = field
        self.type_name = type_name
        super().__init__(f'Field {field!r} has unsupported type {type_name}')

    def to_struct(self) -> UnsupportedFieldType:
        """Convert to struct for Result-based code."""
        return UnsupportedFieldType(self.field, self.type_name)


# --- Membership Errors ---


class KindMismatch(msgspec.Struct, frozen=True, gc=False):
    """Value kind cannot be searched for in the container - struct variant."""

    container: str
    value: str

    def to_exception(self) -> KindMismatchError:
        """Convert to exception for raise-based code."""
        return KindMismatchError(self.container, self.value)


class KindMismatchError(TypeError):
    """Value kind cannot be searched for in the container - exception variant."""

    def __init__(self, container: str, value: str) -> None:
        self.container = container
        self.value = value
        super().__init__(f'Cannot search for {value} in {container}')

    def to_struct(self) -> KindMismatch:
        """Convert to struct for Result-based code."""
        return KindMismatch(self.container, self.value)


class UnsupportedKind(msgspec.Struct, frozen=True, gc=False):
    """Container kind is not supported - struct variant."""

    kind: str

    def to_exception(self) -> UnsupportedKindError:
        """Convert to exception for raise-based code."""
        return UnsupportedKindError(self.kind)


class UnsupportedKindError(TypeError):
    """Container kind is not supported - exception variant."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f'Kind {kind} is not supported')

    def to_struct(self) -> UnsupportedKind:
        """Convert to struct for Result-based code."""
        return UnsupportedKind(self.kind)
