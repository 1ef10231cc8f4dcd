"""Closed integer intervals along a single axis."""

from typing import Optional

from pydantic import Field

from .base import ValueModel


class Range(ValueModel):
    """Closed interval ``[min, max]`` of integer coordinates.

    Callers pass ordered bounds (``min <= max``); this is not validated since
    every range in the package is built from a line's or rectangle's own
    ordered coordinates.
    """

    min: int = Field(..., description="Lower bound (inclusive)")
    max: int = Field(..., description="Upper bound (inclusive)")

    @classmethod
    def of(cls, min_value: int, max_value: int) -> "Range":
        """Create a range from its two bounds."""
        return cls(min=min_value, max=max_value)

    @property
    def distance(self) -> int:
        """Span between the bounds; 0 for a single value."""
        return self.max - self.min

    def contains_inclusive(self, value: int) -> bool:
        return self.min <= value <= self.max

    def contains_exclusive(self, value: int) -> bool:
        return self.min < value < self.max

    def contains_all_exclusive(self, other: "Range") -> bool:
        """Check that ``other`` nests strictly inside this range on both ends."""
        return other.min > self.min and other.max < self.max

    def overlap(self, other: "Range") -> Optional["Range"]:
        """Get the range of values shared by both ranges.

        Returns:
            The shared range (distance 0 when the ranges only touch at one
            value), or None if the ranges are disjoint.
        """
        low = max(self.min, other.min)
        high = min(self.max, other.max)
        if low > high:
            return None
        return Range(min=low, max=high)
