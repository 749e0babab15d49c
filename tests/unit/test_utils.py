"""Tests for generic list comparison helpers."""

import pytest

from jsxrules.utils import cyclic_match, diff, duplicates, unique


class TestDiff:
    """Asymmetric difference."""

    def test_elements_of_a_not_in_b(self):
        assert diff([1, 2, 3], [2, 3, 4]) == [1]
        assert diff(["a", "b"], ["b"]) == ["a"]
        assert diff([1, 2], [1, 2]) == []

    def test_keeps_order_and_multiplicity(self):
        assert diff(["x", "y", "x", "z"], ["y"]) == ["x", "x", "z"]

    def test_result_excludes_b(self):
        a, b = ["p", "q", "r", "q"], ["q", "s"]
        result = diff(a, b)
        assert not any(x in b for x in result)
        assert len(result) <= len(a)

    def test_equality_not_identity(self):
        assert diff([[1], [2]], [[1]]) == [[2]]


class TestDuplicates:
    """Repeated element detection."""

    def test_returns_every_repeat(self):
        assert duplicates([1, 2, 2, 3, 3, 3]) == [2, 3, 3]
        assert duplicates(["a", "b", "a"]) == ["a"]
        assert duplicates(["x", "x", "x"]) == ["x", "x"]

    def test_distinct_elements(self):
        assert duplicates([1, 2, 3]) == []
        assert duplicates([]) == []

    def test_unhashable_values(self):
        assert duplicates([{"a": 1}, {"a": 1}]) == [{"a": 1}]


class TestUnique:
    def test_first_occurrences(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestCyclicMatch:
    """Repeating pattern matching."""

    def test_repeating_pattern(self):
        assert cyclic_match(["A", "B", "A", "B"], ["A", "B"]) is True
        assert cyclic_match(["A", "B", "A"], ["A", "B"]) is True

    def test_mismatch(self):
        assert cyclic_match(["A", "B", "C"], ["A", "B"]) is False
        assert cyclic_match(["B", "A"], ["A", "B"]) is False

    def test_empty_sequence_matches(self):
        assert cyclic_match([], ["A"]) is True

    def test_shorter_sequence_matches_prefix(self):
        assert cyclic_match(["Header"], ["Header", "Main", "Footer"]) is True

    def test_non_string_values(self):
        assert cyclic_match([0, 1, 0, 1, 0], [0, 1]) is True

    def test_empty_pattern_rejected(self):
        with pytest.raises(ValueError, match="pattern must not be empty"):
            cyclic_match(["A"], [])
