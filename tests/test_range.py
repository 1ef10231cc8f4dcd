"""Tests for closed integer ranges."""

import pytest
from pydantic import ValidationError

from rectcompare.models import Range


class TestContainment:
    """Tests for value and range containment checks."""

    def test_contains_inclusive_bounds(self):
        """Bounds count as inside for inclusive checks."""
        r = Range.of(2, 5)
        assert r.contains_inclusive(2)
        assert r.contains_inclusive(5)
        assert not r.contains_inclusive(6)

    def test_contains_exclusive_bounds(self):
        """Bounds are outside for exclusive checks."""
        r = Range.of(2, 5)
        assert r.contains_exclusive(3)
        assert not r.contains_exclusive(2)
        assert not r.contains_exclusive(5)

    def test_contains_all_exclusive_requires_both_ends_strict(self):
        """Nested range must not touch either bound."""
        outer = Range.of(0, 10)
        assert outer.contains_all_exclusive(Range.of(1, 9))
        assert not outer.contains_all_exclusive(Range.of(0, 9))
        assert not outer.contains_all_exclusive(Range.of(1, 10))
        assert not outer.contains_all_exclusive(outer)


class TestOverlap:
    """Tests for range overlap."""

    def test_distance(self):
        assert Range.of(3, 8).distance == 5
        assert Range.of(4, 4).distance == 0

    def test_partial_overlap(self):
        """Overlap spans the shared values only."""
        assert Range.of(0, 5).overlap(Range.of(3, 9)) == Range.of(3, 5)

    def test_nested_overlap(self):
        """Overlap of a nested range is the inner range."""
        assert Range.of(0, 10).overlap(Range.of(4, 6)) == Range.of(4, 6)

    def test_touching_ranges_overlap_at_one_value(self):
        """Ranges sharing one bound overlap with distance 0."""
        overlap = Range.of(0, 5).overlap(Range.of(5, 9))
        assert overlap == Range.of(5, 5)
        assert overlap.distance == 0

    def test_disjoint_ranges(self):
        """Disjoint ranges have no overlap."""
        assert Range.of(0, 4).overlap(Range.of(5, 9)) is None

    @pytest.mark.parametrize(
        "first,second",
        [
            ((0, 5), (3, 9)),
            ((0, 10), (4, 6)),
            ((-4, -1), (-1, 3)),
            ((0, 4), (5, 9)),
        ],
    )
    def test_overlap_is_commutative(self, first, second):
        """Order of the operands does not matter."""
        a, b = Range.of(*first), Range.of(*second)
        assert a.overlap(b) == b.overlap(a)

    def test_ranges_are_immutable(self):
        """Ranges are frozen value objects."""
        r = Range.of(1, 2)
        with pytest.raises(ValidationError):
            r.min = 0
        assert hash(r) == hash(Range.of(1, 2))
