"""klaw-collections: Optional values and generic collection helpers.

Flat imports (preferred):
    from klaw_collections import Optional, Ok, Err, chunk, unique, sort_by_field

Submodule imports (for organization):
    from klaw_collections.optional import Optional
    from klaw_collections.result import Ok, Err, Result
    from klaw_collections.slice import chunk, unique
    from klaw_collections.errors import IndexOutOfRangeError
"""

# Configuration
from klaw_collections._config import CollectionsConfig, get_config, init, reset

# Logging
from klaw_collections._logging import configure_logging, get_logger

# Errors
from klaw_collections.errors import (
    AbsentValueError,
    FieldNotFoundError,
    IndexOutOfRangeError,
    InvalidValueTypeError,
    KindMismatchError,
    UnsupportedFieldTypeError,
    UnsupportedKindError,
)

# Types
from klaw_collections.optional import Optional
from klaw_collections.result import Err, Ok, Result, collect

# Collection operations
from klaw_collections.slice import (
    SortOrder,
    as_list,
    chunk,
    contain,
    delete_by_index,
    difference,
    drop,
    every,
    filter_,
    find,
    flatten_deep,
    group_by,
    insert_by_index,
    int_list,
    intersection,
    map_,
    none,
    reduce_,
    reverse_slice,
    shuffle,
    some,
    sort_by_field,
    str_list,
    union,
    unique,
    update_by_index,
    without,
)

# Typeclass
from klaw_collections.typeclass import typeclass

__all__ = [
    # Errors
    'AbsentValueError',
    # Configuration
    'CollectionsConfig',
    # Result types
    'Err',
    'FieldNotFoundError',
    'IndexOutOfRangeError',
    'InvalidValueTypeError',
    'KindMismatchError',
    'Ok',
    # Optional
    'Optional',
    'Result',
    # Collection operations
    'SortOrder',
    'UnsupportedFieldTypeError',
    'UnsupportedKindError',
    'as_list',
    'chunk',
    'collect',
    # Logging
    'configure_logging',
    'contain',
    'delete_by_index',
    'difference',
    'drop',
    'every',
    'filter_',
    'find',
    'flatten_deep',
    'get_config',
    'get_logger',
    'group_by',
    'init',
    'insert_by_index',
    'int_list',
    'intersection',
    'map_',
    'none',
    'reduce_',
    'reset',
    'reverse_slice',
    'shuffle',
    'some',
    'sort_by_field',
    'str_list',
    # Typeclass
    'typeclass',
    'union',
    'unique',
    'update_by_index',
    'without',
]
