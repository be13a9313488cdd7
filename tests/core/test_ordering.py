"""Tests for magnitude ordering - Pure functions."""

from dataclasses import dataclass
from functools import cmp_to_key

from quake_markers.core.ordering import (
    compare_magnitude,
    largest,
    magnitude_key,
    sort_by_magnitude,
)


@dataclass(frozen=True)
class Item:
    magnitude: float
    name: str = ""


class TestCompareMagnitude:
    """Tests for compare_magnitude()."""

    def test_equal_is_zero(self):
        a = Item(5.0)
        assert compare_magnitude(a, a) == 0
        assert compare_magnitude(Item(5.0, "x"), Item(5.0, "y")) == 0

    def test_smaller_sorts_after(self):
        assert compare_magnitude(Item(3.0), Item(5.0)) == 1

    def test_larger_sorts_before(self):
        assert compare_magnitude(Item(5.0), Item(3.0)) == -1

    def test_antisymmetric(self):
        """Swapping arguments flips the sign when magnitudes differ."""
        pairs = [(Item(1.0), Item(2.0)), (Item(6.5), Item(4.4)), (Item(-1.0), Item(0.0))]
        for a, b in pairs:
            assert compare_magnitude(a, b) == -compare_magnitude(b, a)

    def test_works_with_cmp_to_key(self):
        """Comparator gives descending order when used with sorted()."""
        items = [Item(5.0), Item(7.0), Item(3.0)]
        result = sorted(items, key=cmp_to_key(compare_magnitude))
        assert [i.magnitude for i in result] == [7.0, 5.0, 3.0]


class TestSortByMagnitude:
    """Tests for sort_by_magnitude()."""

    def test_descending(self):
        items = [Item(5.0), Item(7.0), Item(3.0)]
        assert [i.magnitude for i in sort_by_magnitude(items)] == [7.0, 5.0, 3.0]

    def test_ties_keep_feed_order(self):
        """Equal magnitudes stay in input order."""
        items = [Item(4.0, "first"), Item(6.0, "big"), Item(4.0, "second"), Item(4.0, "third")]

        result = sort_by_magnitude(items)

        assert [i.name for i in result] == ["big", "first", "second", "third"]

    def test_agrees_with_comparator(self):
        items = [Item(m) for m in [2.1, 6.3, 4.4, 6.3, 0.5, 3.3]]
        by_key = sort_by_magnitude(items)
        by_cmp = sorted(items, key=cmp_to_key(compare_magnitude))
        assert by_key == by_cmp

    def test_does_not_mutate_input(self):
        items = [Item(1.0), Item(2.0)]
        sort_by_magnitude(items)
        assert [i.magnitude for i in items] == [1.0, 2.0]

    def test_key(self):
        assert magnitude_key(Item(4.5)) == -4.5


class TestLargest:
    """Tests for largest()."""

    def test_takes_top_n(self):
        items = [Item(m) for m in [2.0, 6.0, 4.0, 5.0]]
        assert [i.magnitude for i in largest(items, 2)] == [6.0, 5.0]

    def test_count_larger_than_input(self):
        items = [Item(1.0), Item(2.0)]
        assert len(largest(items, 10)) == 2

    def test_non_positive_count(self):
        items = [Item(1.0)]
        assert largest(items, 0) == []
        assert largest(items, -3) == []
