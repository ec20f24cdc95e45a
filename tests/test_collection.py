"""
Tests for TypedCollection and its concrete Int/String collections.

These tests verify:
    - Construction-time and mutation-time kind checks
    - Positional access and index validation
    - Negative index normalization in insert/remove
    - Derived collections (slice, reverse, filter, values)
    - In-place operations (splice, unique, merge, sort, each)
"""

from dataclasses import dataclass

import pytest

from typekit.collection import FilterMode, IntCollection, StringCollection, TypedCollection
from typekit.errors import InvalidArgumentError, OutOfRangeError, TypeMismatchError
from typekit.kinds import INTEGER, ObjectKind


@dataclass
class Point:
    x: int
    y: int


POINT = ObjectKind("Point", Point)


class TestConstruction:
    """Test building collections."""

    def test_empty_collection(self):
        """Should create an empty collection."""
        c = IntCollection()
        assert len(c) == 0
        assert c.to_list() == []

    def test_read_back_preserves_order(self):
        """Every element read back via at() should match the input order."""
        items = [5, 3, 9, 1]
        c = IntCollection(items)
        assert [c.at(i) for i in range(len(items))] == items

    def test_numeric_input_coerced_to_int(self):
        """Numeric strings and floats should be stored as int."""
        c = IntCollection(["4", 2.0, 7])
        assert c.to_list() == [4, 2, 7]
        assert all(type(v) is int for v in c)

    def test_int_collection_rejects_non_numeric(self):
        """Non-numeric input should fail the whole construction."""
        with pytest.raises(TypeMismatchError):
            IntCollection([1, "two", 3])

    def test_int_collection_rejects_bool(self):
        """Booleans are not numbers here."""
        with pytest.raises(TypeMismatchError):
            IntCollection([True])

    def test_string_collection_rejects_int(self):
        """A String-kind collection with 42 in it should fail."""
        with pytest.raises(TypeMismatchError):
            StringCollection(["a", 42])

    def test_bare_string_rejected_as_items(self):
        """A string is not an iterable of elements."""
        with pytest.raises(InvalidArgumentError):
            StringCollection("abc")

    def test_base_requires_kind(self):
        """TypedCollection without kind should fail."""
        with pytest.raises(InvalidArgumentError):
            TypedCollection([1])

    def test_object_collection(self):
        """Should hold instances of the declared class only."""
        c = TypedCollection([Point(1, 2)], kind=POINT)
        assert c.first() == Point(1, 2)
        with pytest.raises(TypeMismatchError):
            TypedCollection([Point(1, 2), (3, 4)], kind=POINT)

    def test_mapping_input_keeps_keys(self):
        """A mapping should be stored under its own keys."""
        c = IntCollection({3: 10, 7: 20})
        assert c.keys() == [3, 7]
        assert c[7] == 20

    def test_type_error_compatible(self):
        """TypeMismatchError should also be a TypeError."""
        with pytest.raises(TypeError):
            StringCollection([1])


class TestAppendAndAccess:
    """Test append, at, index_exists and key access."""

    def test_append(self):
        c = StringCollection(["a"])
        c.append("b")
        assert c.to_list() == ["a", "b"]
        assert c.keys() == [0, 1]

    def test_append_rejects_wrong_kind(self):
        """Append should validate and leave the collection untouched."""
        c = StringCollection(["a"])
        with pytest.raises(TypeMismatchError):
            c.append(42)
        assert c.to_list() == ["a"]

    def test_at_out_of_range(self):
        """at(5) on 3 elements should raise OutOfRangeError."""
        c = IntCollection([1, 2, 3])
        with pytest.raises(OutOfRangeError):
            c.at(5)
        with pytest.raises(OutOfRangeError):
            c.at(3)

    def test_at_negative(self):
        """at(-1) should raise InvalidArgumentError."""
        c = IntCollection([1, 2, 3])
        with pytest.raises(InvalidArgumentError):
            c.at(-1)

    def test_at_non_integer(self):
        c = IntCollection([1, 2, 3])
        with pytest.raises(InvalidArgumentError):
            c.at("1")

    def test_index_exists(self):
        c = IntCollection([1, 2, 3])
        assert c.index_exists(0)
        assert c.index_exists(2)
        assert not c.index_exists(3)
        with pytest.raises(InvalidArgumentError):
            c.index_exists(-1)

    def test_missing_key(self):
        c = IntCollection([1])
        with pytest.raises(OutOfRangeError):
            c[4]

    def test_setitem_validates(self):
        c = IntCollection([1, 2])
        c[1] = "9"
        assert c.to_list() == [1, 9]
        with pytest.raises(TypeMismatchError):
            c[0] = "x"

    def test_setitem_missing_key(self):
        """Assigning to a key that does not exist should not add it."""
        c = StringCollection(["a", "b", "c"])
        with pytest.raises(OutOfRangeError):
            c[10] = "x"
        assert c.keys() == [0, 1, 2]
        assert c.to_list() == ["a", "b", "c"]

    def test_first_and_last(self):
        c = StringCollection(["a", "b", "c"])
        assert c.first() == "a"
        assert c.last() == "c"
        empty = StringCollection()
        assert empty.first() is None
        assert empty.last() is None

    def test_contains(self):
        c = IntCollection([1, 2, 3])
        assert c.contains(2)
        assert 3 in c
        assert 7 not in c


class TestInsertRemove:
    """Test index-normalizing insert and remove."""

    def test_insert_after_index(self):
        """insert(i, x) should place x right after position i."""
        c = StringCollection(["a", "b", "c"])
        c.insert(0, "x")
        assert c.to_list() == ["a", "x", "b", "c"]

    def test_insert_minus_one_appends(self):
        """insert(-1, x) on [a, b, c] should yield [a, b, c, x]."""
        c = StringCollection(["a", "b", "c"])
        c.insert(-1, "x")
        assert c.to_list() == ["a", "b", "c", "x"]

    def test_insert_far_negative_goes_to_front(self):
        c = StringCollection(["a", "b", "c"])
        c.insert(-100, "x")
        assert c.to_list() == ["x", "a", "b", "c"]

    def test_insert_past_end_appends(self):
        c = StringCollection(["a", "b"])
        c.insert(10, "x")
        assert c.to_list() == ["a", "b", "x"]

    def test_insert_into_empty(self):
        c = StringCollection()
        c.insert(-1, "x")
        assert c.to_list() == ["x"]

    def test_insert_validates(self):
        c = IntCollection([1])
        with pytest.raises(TypeMismatchError):
            c.insert(0, "nope")
        assert c.to_list() == [1]

    def test_insert_reindexes(self):
        c = IntCollection({5: 1, 9: 2})
        c.insert(0, 3)
        assert c.keys() == [0, 1, 2]

    def test_remove_minus_one(self):
        """remove(-1) on [a, b, c] should yield [a, b]."""
        c = StringCollection(["a", "b", "c"])
        c.remove(-1)
        assert c.to_list() == ["a", "b"]

    def test_remove_by_position(self):
        c = StringCollection(["a", "b", "c"])
        c.remove(1)
        assert c.to_list() == ["a", "c"]
        assert c.keys() == [0, 1]

    def test_remove_far_negative_clamps_to_zero(self):
        c = StringCollection(["a", "b", "c"])
        c.remove(-100)
        assert c.to_list() == ["b", "c"]

    def test_remove_past_end_is_noop(self):
        c = StringCollection(["a", "b", "c"])
        c.remove(3)
        assert c.to_list() == ["a", "b", "c"]

    @pytest.mark.parametrize("items", [[], ["a"], ["a", "b", "c"]])
    def test_insert_then_remove_last_is_identity(self, items):
        """Removing the appended element should restore the original content."""
        c = StringCollection(items)
        c.insert(-1, "x")
        c.remove(-1)
        assert c.to_list() == items

    @pytest.mark.parametrize("index", [0, 1, 2, -2, -3])
    def test_insert_then_remove_at_inserted_position(self, index):
        items = ["a", "b", "c"]
        c = StringCollection(items)
        position = (index if index >= 0 else len(items) + index) + 1
        c.insert(index, "x")
        assert c.at(position) == "x"
        c.remove(position)
        assert c.to_list() == items


class TestSliceSpliceReverse:
    """Test range operations."""

    def test_full_slice_equals_source(self):
        c = IntCollection([1, 2, 3])
        assert c.slice(0, len(c)) == c

    def test_slice_does_not_mutate(self):
        c = IntCollection([1, 2, 3, 4])
        part = c.slice(1, 2)
        assert part.to_list() == [2, 3]
        assert part.keys() == [0, 1]
        assert c.to_list() == [1, 2, 3, 4]

    def test_slice_returns_same_class(self):
        assert isinstance(IntCollection([1, 2]).slice(0), IntCollection)

    def test_slice_negative_offset_and_length(self):
        c = IntCollection([1, 2, 3, 4, 5])
        assert c.slice(-2).to_list() == [4, 5]
        assert c.slice(1, -1).to_list() == [2, 3, 4]
        assert c.slice(-3, 5).to_list() == [3, 4, 5]
        assert c.slice(10).to_list() == []

    def test_slice_preserve_keys(self):
        c = StringCollection(["a", "b", "c"])
        assert c.slice(1, preserve_keys=True).keys() == [1, 2]

    def test_splice_removes_to_end(self):
        c = IntCollection([1, 2, 3, 4])
        removed = c.splice(2)
        assert removed.to_list() == [3, 4]
        assert c.to_list() == [1, 2]

    def test_splice_with_replacement(self):
        c = IntCollection([1, 2, 3, 4])
        removed = c.splice(1, 2, [8, 9, 10])
        assert removed.to_list() == [2, 3]
        assert c.to_list() == [1, 8, 9, 10, 4]
        assert c.keys() == [0, 1, 2, 3, 4]

    def test_splice_single_replacement(self):
        c = StringCollection(["a", "b", "c"])
        c.splice(1, 1, "z")
        assert c.to_list() == ["a", "z", "c"]

    def test_splice_insert_only(self):
        c = IntCollection([1, 4])
        removed = c.splice(1, 0, [2, 3])
        assert len(removed) == 0
        assert c.to_list() == [1, 2, 3, 4]

    def test_splice_bad_replacement_leaves_source(self):
        c = IntCollection([1, 2, 3])
        with pytest.raises(TypeMismatchError):
            c.splice(0, 1, ["bad"])
        assert c.to_list() == [1, 2, 3]

    def test_reverse(self):
        c = IntCollection([1, 2, 3])
        assert c.reverse().to_list() == [3, 2, 1]
        assert c.reverse().reverse() == c
        assert c.to_list() == [1, 2, 3]

    def test_reverse_preserve_keys(self):
        c = IntCollection([1, 2, 3])
        assert c.reverse(preserve_keys=True).keys() == [2, 1, 0]


class TestInPlaceOperations:
    """Test unique, merge, sort, each and walk."""

    def test_unique_keeps_first_occurrences(self):
        c = IntCollection([3, 1, 3, 2, 1])
        result = c.unique()
        assert result is c
        assert c.to_list() == [3, 1, 2]
        assert c.keys() == [0, 1, 2]

    def test_unique_idempotent(self):
        c = StringCollection(["b", "a", "b"])
        c.unique()
        once = c.to_list()
        c.unique()
        assert c.to_list() == once

    def test_merge(self):
        c = IntCollection([1, 2])
        assert c.merge(IntCollection([3, 4])) is c
        assert c.to_list() == [1, 2, 3, 4]

    def test_merge_rejects_other_kind(self):
        c = IntCollection([1])
        with pytest.raises(TypeMismatchError):
            c.merge(StringCollection(["x"]))
        assert c.to_list() == [1]

    def test_merge_rejects_bare_string(self):
        """A string should not be merged character by character."""
        c = StringCollection(["a"])
        with pytest.raises(InvalidArgumentError):
            c.merge("xy")
        assert c.to_list() == ["a"]

    def test_merge_accepts_list(self):
        c = StringCollection(["a"])
        c.merge(["xy"])
        assert c.to_list() == ["a", "xy"]

    def test_sort(self):
        c = IntCollection([3, 1, 2])
        assert c.sort() is True
        assert c.to_list() == [1, 2, 3]

    def test_sort_with_key_and_reverse(self):
        c = StringCollection(["bb", "a", "ccc"])
        c.sort(key=len, reverse=True)
        assert c.to_list() == ["ccc", "bb", "a"]

    def test_each_mutates_objects_in_place(self):
        c = TypedCollection([Point(1, 1), Point(2, 2)], kind=POINT)

        def shift(p):
            p.x += 10

        c.each(shift)
        assert c.column("x") == [11, 12]

    def test_each_ignores_return_value(self):
        """A value returned by the action should not replace the element."""
        c = IntCollection([1, 2, 3])
        c.each(lambda v: v * 2)
        assert c.to_list() == [1, 2, 3]

    def test_each_return_of_other_kind_is_harmless(self):
        """each() should not kind-check what the action returns."""
        seen = []
        c = StringCollection(["a", "bb"])
        c.each(lambda s: seen.append(s) or len(s))
        assert seen == ["a", "bb"]
        assert c.to_list() == ["a", "bb"]

    def test_walk(self):
        seen = []
        c = StringCollection(["a", "b"])
        assert c.walk(lambda value, key, prefix: seen.append(f"{prefix}{key}{value}"), ">") is True
        assert seen == [">0a", ">1b"]


class TestQueries:
    """Test filter, map, find, column and text rendering."""

    def test_filter_by_value_keeps_keys(self):
        c = IntCollection([1, 2, 3, 4])
        evens = c.filter(lambda v: v % 2 == 0)
        assert evens.to_list() == [2, 4]
        assert evens.keys() == [1, 3]
        assert evens.values().keys() == [0, 1]

    def test_filter_by_key_receives_keys(self):
        """KEY mode should pass keys, not values."""
        received = []
        c = StringCollection(["a", "b", "c"])

        def keep_first_two(key):
            received.append(key)
            return key < 2

        assert c.filter(keep_first_two, FilterMode.KEY).to_list() == ["a", "b"]
        assert received == [0, 1, 2]

    def test_filter_both(self):
        c = StringCollection(["a", "b", "c"])
        result = c.filter(lambda value, key: value != "a" and key != 2, FilterMode.BOTH)
        assert result.to_list() == ["b"]

    def test_filter_without_predicate_drops_falsy(self):
        c = IntCollection([0, 1, 0, 2])
        assert c.filter().to_list() == [1, 2]

    def test_filter_bad_mode(self):
        with pytest.raises(InvalidArgumentError):
            IntCollection([1]).filter(bool, "key")

    def test_map_is_untyped(self):
        c = IntCollection([1, 2, 3])
        assert c.map(str) == ["1", "2", "3"]

    def test_find_and_find_index(self):
        c = IntCollection([5, 8, 11])
        assert c.find(lambda v: v > 6) == 8
        assert c.find_index(lambda v: v > 6) == 1
        assert c.find(lambda v: v > 100) is None
        assert c.find_index(lambda v: v > 100) is None

    def test_find_index_returns_key(self):
        c = IntCollection([1, 2, 3, 4]).filter(lambda v: v > 2)
        assert c.find_index(lambda v: v == 4) == 3

    def test_column_on_mappings(self):
        c = TypedCollection([{"id": 1}, {"name": "x"}, {"id": 3}], kind=ObjectKind("row", dict))
        assert c.column("id") == [1, 3]

    def test_column_on_objects(self):
        c = TypedCollection([Point(1, 2), Point(3, 4)], kind=POINT)
        assert c.column("y") == [2, 4]

    def test_str_joins_with_comma(self):
        assert str(IntCollection([1, 2, 3])) == "1,2,3"

    def test_implode(self):
        assert StringCollection(["a", "b"]).implode(" | ") == "a | b"
        assert IntCollection([1, 2]).implode("-") == "1-2"

    def test_implode_without_text_form(self):
        """Kinds without their own __str__ should implode to an empty string."""
        c = TypedCollection([Point(1, 2)], kind=POINT)
        assert c.implode(",") == ""

    def test_equality(self):
        assert IntCollection([1, 2]) == IntCollection([1, 2])
        assert IntCollection([1, 2]) != IntCollection([2, 1])
        assert IntCollection([1]) != TypedCollection([Point(1, 1)], kind=POINT)

    def test_generic_int_collection_equals_concrete(self):
        assert TypedCollection([1, 2], kind=INTEGER) == IntCollection([1, 2])
