"""Rectangle model with containment, intersection and adjacency queries."""

import logging
from itertools import product

from pydantic import Field

from .base import Adjacency, Orientation, Point, ValueModel
from .line import Line
from .range import Range

logger = logging.getLogger(__name__)


class Rectangle(ValueModel):
    """
    Axis-aligned rectangle anchored at its lower-left corner.

    ``length`` extends along X and ``width`` along Y. Corners, sides and axis
    ranges are all derived from these three fields, which alone decide
    equality.
    """

    length: int = Field(..., gt=0, description="Extent along the X axis")
    width: int = Field(..., gt=0, description="Extent along the Y axis")
    lower_left: Point = Field(..., description="Anchor corner")

    # Corners

    @property
    def lower_right(self) -> Point:
        return Point(x=self.lower_left.x + self.length, y=self.lower_left.y)

    @property
    def top_left(self) -> Point:
        return Point(x=self.lower_left.x, y=self.lower_left.y + self.width)

    @property
    def top_right(self) -> Point:
        return Point(x=self.lower_left.x + self.length, y=self.lower_left.y + self.width)

    @property
    def corner_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.lower_left, self.lower_right, self.top_left, self.top_right)

    # Sides

    @property
    def left_side(self) -> Line:
        return Line(point_a=self.lower_left, point_b=self.top_left)

    @property
    def right_side(self) -> Line:
        return Line(point_a=self.lower_right, point_b=self.top_right)

    @property
    def top_side(self) -> Line:
        return Line(point_a=self.top_left, point_b=self.top_right)

    @property
    def bottom_side(self) -> Line:
        return Line(point_a=self.lower_left, point_b=self.lower_right)

    @property
    def lines(self) -> tuple[Line, ...]:
        """All four sides: left, right, bottom, top."""
        return (self.left_side, self.right_side, self.bottom_side, self.top_side)

    def lines_with_orientation(self, orientation: Orientation) -> tuple[Line, ...]:
        return tuple(line for line in self.lines if line.orientation == orientation)

    @property
    def horizontal_lines(self) -> tuple[Line, ...]:
        return self.lines_with_orientation(Orientation.HORIZONTAL)

    @property
    def vertical_lines(self) -> tuple[Line, ...]:
        return self.lines_with_orientation(Orientation.VERTICAL)

    # Projections

    @property
    def range_x(self) -> Range:
        return Range.of(self.lower_left.x, self.lower_left.x + self.length)

    @property
    def range_y(self) -> Range:
        return Range.of(self.lower_left.y, self.lower_left.y + self.width)

    @property
    def area(self) -> int:
        return self.length * self.width

    # Comparisons

    def contains(self, other: "Rectangle") -> bool:
        """Check whether every corner of ``other`` lies within this rectangle.

        Bounds are inclusive, so a rectangle sharing an edge with this one can
        still be contained. A rectangle never contains itself.
        """
        if self == other:
            return False
        if other.area > self.area:
            return False

        return all(
            self.lower_left.x <= corner.x <= self.lower_right.x
            and self.lower_left.y <= corner.y <= self.top_right.y
            for corner in other.corner_points
        )

    def intersection_points(self, other: "Rectangle") -> frozenset[Point]:
        """Find the points where the boundaries of the two rectangles cross.

        Coinciding edges are not reported here; they are classified by
        :meth:`determine_adjacency_with` instead.

        Args:
            other: Rectangle to compare against

        Returns:
            Set of crossing points, empty for identical rectangles or when this
            rectangle contains ``other``.
        """
        if self == other or self.contains(other):
            return frozenset()

        return _crossing_points(self, other) | _crossing_points(other, self)

    def is_corner_adjacent_to(self, other: "Rectangle") -> bool:
        """Check whether a corner of this rectangle touches the opposite corner of ``other``."""
        return (
            self.lower_left == other.top_right
            or self.lower_right == other.top_left
            or self.top_right == other.lower_left
            or self.top_left == other.lower_right
        )

    def determine_adjacency_with(self, other: "Rectangle") -> Adjacency:
        """Classify how this rectangle borders ``other``.

        Rectangles that are identical, nested or crossing are never adjacent.
        Otherwise a shared corner gives SINGLE_POINT; failing that, horizontal
        sides are compared before vertical ones and the first side pair that is
        adjacent decides the result.

        Args:
            other: Rectangle to compare against

        Returns:
            The adjacency classification
        """
        if (
            self == other
            or self.contains(other)
            or other.contains(self)
            or self.intersection_points(other)
        ):
            return Adjacency.NONE

        if self.is_corner_adjacent_to(other):
            logger.debug("Corner contact between %r and %r", self, other)
            return Adjacency.SINGLE_POINT

        for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
            adjacency = _first_adjacency(
                self.lines_with_orientation(orientation),
                other.lines_with_orientation(orientation),
            )
            if adjacency != Adjacency.NONE:
                logger.debug("%s sides resolved adjacency as %s", orientation.value, adjacency.value)
                return adjacency

        return Adjacency.NONE


def _crossing_points(rect_a: Rectangle, rect_b: Rectangle) -> frozenset[Point]:
    """Points where A's vertical edges cross B's horizontal edges.

    Called once per direction; the caller unions both results.
    """
    xs = {x for x in (rect_a.range_x.min, rect_a.range_x.max) if rect_b.range_x.contains_exclusive(x)}
    ys = {y for y in (rect_b.range_y.min, rect_b.range_y.max) if rect_a.range_y.contains_exclusive(y)}
    return frozenset(Point(x=x, y=y) for x, y in product(xs, ys))


def _first_adjacency(own_lines: tuple[Line, ...], other_lines: tuple[Line, ...]) -> Adjacency:
    """Return the first non-NONE line adjacency, scanning pairs in order."""
    for own_line in own_lines:
        for other_line in other_lines:
            adjacency = own_line.determine_adjacency_with(other_line)
            if adjacency != Adjacency.NONE:
                return adjacency
    return Adjacency.NONE
