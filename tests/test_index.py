"""Tests for positional edits: delete, drop, insert, update."""

import pytest
from klaw_collections import (
    Err,
    IndexOutOfRangeError,
    InvalidValueTypeError,
    Ok,
    delete_by_index,
    drop,
    insert_by_index,
    update_by_index,
)
from klaw_collections.errors import IndexOutOfRange, InvalidValueType


class TestDeleteByIndex:
    """Tests for delete_by_index()."""

    def test_single(self):
        assert delete_by_index(['a', 'b', 'c'], 1) == Ok(['a', 'c'])

    def test_first_and_last(self):
        assert delete_by_index([1, 2, 3], 0) == Ok([2, 3])
        assert delete_by_index([1, 2, 3], 2) == Ok([1, 2])

    def test_range(self):
        assert delete_by_index(['a', 'b', 'c', 'd'], 1, 3) == Ok(['a', 'd'])

    def test_range_to_end(self):
        assert delete_by_index([1, 2, 3], 1, 3) == Ok([1])

    def test_input_untouched(self):
        items = [1, 2, 3]
        delete_by_index(items, 0)
        assert items == [1, 2, 3]

    @pytest.mark.parametrize('start', [-1, 3, 10])
    def test_invalid_start(self, start: int):
        assert delete_by_index([1, 2, 3], start) == Err(IndexOutOfRange(start, 3, 'start'))

    def test_empty_sequence(self):
        assert delete_by_index([], 0) == Err(IndexOutOfRange(0, 0, 'start'))

    @pytest.mark.parametrize('end', [1, 0, 4])
    def test_invalid_end(self, end: int):
        """end must be greater than start and at most len."""
        assert delete_by_index([1, 2, 3], 1, end) == Err(IndexOutOfRange(end, 3, 'end'))

    def test_unwrap_raises(self):
        with pytest.raises(IndexOutOfRangeError, match='Invalid start 5'):
            delete_by_index([1], 5).unwrap()


class TestDrop:
    """Tests for drop()."""

    def test_from_front(self):
        assert drop([1, 2, 3, 4], 1) == [2, 3, 4]

    def test_from_back(self):
        assert drop([1, 2, 3, 4], -1) == [1, 2, 3]

    def test_zero_copies(self):
        items = [1, 2]
        result = drop(items, 0)
        assert result == [1, 2]
        assert result is not items

    @pytest.mark.parametrize('n', [4, 5, -4, -5])
    def test_drop_everything(self, n: int):
        assert drop([1, 2, 3, 4], n) == []

    def test_empty(self):
        assert drop([], 0) == []
        assert drop([], 2) == []


class TestInsertByIndex:
    """Tests for insert_by_index()."""

    def test_example(self):
        assert insert_by_index([1, 2, 3], 1, 99) == Ok([1, 99, 2, 3])

    def test_front_and_end(self):
        assert insert_by_index([1, 2], 0, 0) == Ok([0, 1, 2])
        assert insert_by_index([1, 2], 2, 3) == Ok([1, 2, 3])

    def test_into_empty(self):
        assert insert_by_index([], 0, 'a') == Ok(['a'])

    def test_splice_sequence(self):
        """A list value is spliced in."""
        assert insert_by_index([1, 4], 1, [2, 3]) == Ok([1, 2, 3, 4])
        assert insert_by_index([1, 4], 1, (2, 3)) == Ok([1, 2, 3, 4])

    def test_string_is_single_value(self):
        """Strings are inserted whole."""
        assert insert_by_index(['a', 'd'], 1, 'bc') == Ok(['a', 'bc', 'd'])

    def test_list_as_element_with_elem_type(self):
        """elem_type=list inserts a list as one element."""
        assert insert_by_index([[1], [3]], 1, [2], elem_type=list) == Ok([[1], [2], [3]])

    @pytest.mark.parametrize('index', [-1, 4])
    def test_invalid_index(self, index: int):
        assert insert_by_index([1, 2, 3], index, 0) == Err(IndexOutOfRange(index, 3))

    def test_type_mismatch(self):
        assert insert_by_index([1, 2], 0, 'x', elem_type=int) == Err(InvalidValueType('int', 'str', 0))

    def test_type_mismatch_in_spliced_values(self):
        """Each spliced element is checked."""
        assert insert_by_index([1, 2], 0, [3, 'x'], elem_type=int) == Err(InvalidValueType('int', 'str', 1))

    def test_type_mismatch_reports_position_in_result(self):
        """The reported index is where the bad element would land, as in update_by_index()."""
        assert insert_by_index([1, 2, 3], 2, 'x', elem_type=int) == Err(InvalidValueType('int', 'str', 2))
        assert insert_by_index([1, 2, 3], 1, [4, 'x'], elem_type=int) == Err(InvalidValueType('int', 'str', 2))
        assert update_by_index([1, 2, 3], 2, 'x', elem_type=int) == Err(InvalidValueType('int', 'str', 2))

    def test_tuple_elem_type(self):
        assert insert_by_index([1.5], 0, 1, elem_type=(int, float)) == Ok([1, 1.5])
        result = insert_by_index([1.5], 0, 'x', elem_type=(int, float))
        assert result == Err(InvalidValueType('int | float', 'str', 0))

    def test_unwrap_raises(self):
        with pytest.raises(InvalidValueTypeError):
            insert_by_index([1], 0, 'x', elem_type=int).unwrap()

    def test_input_untouched(self):
        items = (1, 2)
        assert insert_by_index(items, 1, 5) == Ok([1, 5, 2])
        assert items == (1, 2)


class TestUpdateByIndex:
    """Tests for update_by_index()."""

    def test_update(self):
        assert update_by_index([1, 2, 3], 1, 20) == Ok([1, 20, 3])

    def test_input_untouched(self):
        items = [1, 2, 3]
        update_by_index(items, 0, 9)
        assert items == [1, 2, 3]

    @pytest.mark.parametrize('index', [-1, 3])
    def test_invalid_index(self, index: int):
        assert update_by_index([1, 2, 3], index, 0) == Err(IndexOutOfRange(index, 3))

    def test_type_mismatch(self):
        assert update_by_index(['a'], 0, 1, elem_type=str) == Err(InvalidValueType('str', 'int', 0))

    def test_type_ok(self):
        assert update_by_index(['a'], 0, 'b', elem_type=str) == Ok(['b'])
