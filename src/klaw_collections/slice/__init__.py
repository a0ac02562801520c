"""Generic collection operations over ordered sequences."""

from klaw_collections.slice.convert import as_list, int_list, str_list
from klaw_collections.slice.index import delete_by_index, drop, insert_by_index, update_by_index
from klaw_collections.slice.order import SortOrder, reverse_slice, shuffle, sort_by_field
from klaw_collections.slice.query import (
    chunk,
    contain,
    every,
    filter_,
    find,
    flatten_deep,
    group_by,
    map_,
    none,
    reduce_,
    some,
)
from klaw_collections.slice.sets import difference, intersection, union, unique, without

__all__ = [
    'SortOrder',
    'as_list',
    'chunk',
    'contain',
    'delete_by_index',
    'difference',
    'drop',
    'every',
    'filter_',
    'find',
    'flatten_deep',
    'group_by',
    'insert_by_index',
    'int_list',
    'intersection',
    'map_',
    'none',
    'reduce_',
    'reverse_slice',
    'shuffle',
    'some',
    'sort_by_field',
    'str_list',
    'union',
    'unique',
    'update_by_index',
    'without',
]
