"""Unit tests for the path model, path discovery and path combination."""

import pytest

from row_spreader.paths.base import ITERATOR, Iterator, Key, drop_iterators, render_path, unique_paths
from row_spreader.paths.combine import (
    CombineMode,
    combine_path_sets,
    get_combiner,
    intersect_or_non_empty,
    union,
)
from row_spreader.paths.discovery import discover_paths, is_non_empty


def k(name):
    return Key(name=name)


A = (k("a"),)
B = (k("b"),)
C = (k("c"),)
B_ITEMS = (k("b"), ITERATOR)


def test_path_elements_compare_structurally():
    """Test that path elements are equal and hash equal by value."""
    assert Key(name="a") == Key(name="a")
    assert Key(name="a") != Key(name="b")
    assert Iterator() == ITERATOR
    assert Key(name="$") != ITERATOR
    assert len({(Key(name="a"), Iterator()), (Key(name="a"), ITERATOR)}) == 1


def test_render_path():
    """Test rendering paths as dotted column names."""
    assert render_path((k("peka"), ITERATOR, k("yoba"))) == "peka.$.yoba"
    assert render_path(A) == "a"
    assert render_path(()) == ""


def test_drop_iterators():
    """Test stripping iterator steps from a path."""
    assert drop_iterators((k("a"), ITERATOR, k("b"), ITERATOR)) == (k("a"), k("b"))
    assert drop_iterators((ITERATOR,)) == ()


def test_unique_paths_keeps_first_occurrence():
    """Test that deduplication preserves first-seen order."""
    assert unique_paths([B, A, B, C, A]) == [B, A, C]


class TestDiscovery:
    """Tests for discovering the paths of a single document."""

    @pytest.mark.parametrize(
        "value",
        [
            1,
            2.5,
            "text",
            True,
            None,
            [],
            {},
            {"a": None},
            {"a": []},
            {"a": {}},
            {"a": {"b": {"c": []}}},
            [[]],
            [{}],
            {"a": [{}, []]},
        ],
    )
    def test_no_paths_for_scalars_and_empty_content(self, value):
        """Test that scalars and empty content at any depth yield no paths."""
        assert discover_paths(value) == []

    def test_scalar_fields_and_scalar_arrays(self):
        """Test the simple object with a scalar and an array of scalars."""
        assert discover_paths({"a": 1, "b": [2, 3]}) == [A, B_ITEMS]

    def test_nested_objects_and_arrays(self):
        """Test paths through nested objects and arrays."""
        paths = discover_paths({"x": {"y": [1, 2]}, "z": [10, 20]})

        assert paths == [(k("x"), k("y"), ITERATOR), (k("z"), ITERATOR)]

    def test_array_of_objects_unions_element_paths(self):
        """Test that paths of all array elements are united."""
        paths = discover_paths({"c": [{"v": 1}, {"v": 2, "w": 3}, {}]})

        assert paths == [(k("c"), ITERATOR, k("v")), (k("c"), ITERATOR, k("w"))]

    def test_empty_fields_are_skipped(self):
        """Test that null and empty container fields contribute nothing."""
        paths = discover_paths({"a": None, "b": [], "c": {}, "d": "kept", "e": {"f": None}})

        assert paths == [(k("d"),)]

    def test_nested_arrays(self):
        """Test arrays of arrays get one iterator step per level."""
        assert discover_paths({"m": [[1, 2], [3]]}) == [(k("m"), ITERATOR, ITERATOR)]

    def test_null_array_element_is_a_value(self):
        """Test that null elements inside an array still make the array a path."""
        assert discover_paths({"a": [None]}) == [(k("a"), ITERATOR)]

    def test_top_level_array(self):
        """Test discovery on a top-level array with and without the flat flag."""
        assert discover_paths([1, 2]) == [(ITERATOR,)]
        assert discover_paths([1, 2], flat=True) == []
        assert discover_paths([{"a": 1}], flat=True) == [A]
        assert discover_paths([{"a": 1}]) == [(ITERATOR, k("a"))]

    def test_flat_only_applies_to_top_level(self):
        """Test that nested arrays keep their iterator steps when flat is set."""
        assert discover_paths({"b": [2, 3]}, flat=True) == [B_ITEMS]

    def test_field_order_is_document_order(self):
        """Test paths come back in the order fields appear."""
        assert discover_paths({"c": 1, "a": 2, "b": 3}) == [C, A, B]

    def test_never_contains_empty_path(self):
        """Test that the empty path is never discovered."""
        assert () not in discover_paths({"a": 1, "b": [{"c": [1]}]})

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, False),
            ([], False),
            ({}, False),
            (0, True),
            ("", True),
            (False, True),
            ([None], True),
        ],
    )
    def test_is_non_empty(self, value, expected):
        """Test the non-empty pre-filter."""
        assert is_non_empty(value) is expected


class TestUnion:
    """Tests for the union combine policy."""

    def test_union_contains_paths_of_either_side(self):
        """Test union is exactly the paths of either operand."""
        assert union([A, B], [B, C]) == [A, B, C]

    def test_union_is_commutative_as_sets(self):
        """Test operand order only affects column order."""
        assert set(union([A, B], [C])) == set(union([C], [A, B]))

    def test_union_is_associative(self):
        """Test grouping does not change the result."""
        assert union(union([A], [B]), [C]) == union([A], union([B], [C]))

    def test_union_is_idempotent(self):
        """Test applying union repeatedly changes nothing."""
        once = union([A, B], [B, C])
        assert union(once, [B, C]) == once
        assert union(once, once) == once


class TestIntersect:
    """Tests for the intersect combine policy and its bootstrap rule."""

    def test_empty_left_passes_right_through(self):
        """Test intersect([], X) == X."""
        assert intersect_or_non_empty([], [A, B]) == [A, B]

    def test_empty_right_passes_left_through(self):
        """Test intersect(X, []) == X."""
        assert intersect_or_non_empty([A, B], []) == [A, B]

    def test_both_non_empty_is_true_intersection(self):
        """Test intersect(A, B) == A & B once both are non-empty."""
        assert intersect_or_non_empty([A, B, C], [C, A]) == [A, C]
        assert intersect_or_non_empty([A], [B]) == []

    def test_bootstrap_from_empty_accumulator(self):
        """Test the fold seeds from the first document, then narrows."""
        header = combine_path_sets([[A], [A, B]], CombineMode.INTERSECT)

        assert header == [A]

    def test_empty_document_does_not_erase_header(self):
        """Test a document without paths leaves the header untouched."""
        header = combine_path_sets([[A, B], [], [B, C]], CombineMode.INTERSECT)

        assert header == [B]

    def test_disjoint_documents_empty_header_then_reseeds(self):
        """Test that once intersection empties the header the next document reseeds it."""
        header = combine_path_sets([[A], [B], [C]], CombineMode.INTERSECT)

        assert header == [C]


def test_combine_path_sets_union():
    """Test folding with the union policy."""
    assert combine_path_sets([[A], [], [B, A], [C]]) == [A, B, C]


def test_combine_path_sets_empty_input():
    """Test that no documents give an empty header."""
    assert combine_path_sets([], CombineMode.UNION) == []
    assert combine_path_sets([], CombineMode.INTERSECT) == []


def test_get_combiner_accepts_mode_names():
    """Test combiners can be looked up by enum or by value."""
    assert get_combiner(CombineMode.UNION) is union
    assert get_combiner("intersect") is intersect_or_non_empty
