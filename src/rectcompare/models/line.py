"""Axis-aligned line segments and line-level adjacency."""

from pydantic import Field

from .base import Adjacency, Orientation, Point, ValueModel
from .range import Range


class DiagonalLineError(ValueError):
    """Raised when a line's points share neither an X nor a Y coordinate."""

    def __init__(self, line: "Line"):
        super().__init__(f"Expected vertical/horizontal line; got diagonal line: {line!r}")
        self.line = line


class Line(ValueModel):
    """
    Segment between two points on the integer plane.

    Only vertical and horizontal segments are supported. Points are expected in
    increasing order along the varying axis; lines compare equal only when both
    points match in that order.
    """

    point_a: Point = Field(..., description="Start point")
    point_b: Point = Field(..., description="End point")

    @property
    def points(self) -> tuple[Point, Point]:
        return (self.point_a, self.point_b)

    @property
    def orientation(self) -> Orientation:
        """Resolve the line orientation.

        Raises:
            DiagonalLineError: If the points are not axis-aligned.
        """
        if self.point_a.x == self.point_b.x:
            return Orientation.VERTICAL
        elif self.point_a.y == self.point_b.y:
            return Orientation.HORIZONTAL
        raise DiagonalLineError(self)

    @property
    def length(self) -> int:
        """Signed distance from point A to point B along the varying axis."""
        if self.orientation == Orientation.VERTICAL:
            return self.point_b.y - self.point_a.y
        return self.point_b.x - self.point_a.x

    @property
    def distinct_x_coordinates(self) -> frozenset[int]:
        return frozenset(point.x for point in self.points)

    @property
    def distinct_y_coordinates(self) -> frozenset[int]:
        return frozenset(point.y for point in self.points)

    @property
    def coordinate_range(self) -> Range:
        """Range covered along the varying axis (Y if vertical, X if horizontal)."""
        if self.orientation == Orientation.VERTICAL:
            return Range.of(self.point_a.y, self.point_b.y)
        return Range.of(self.point_a.x, self.point_b.x)

    def determine_adjacency_with(self, other: "Line") -> Adjacency:
        """Classify how this line overlaps ``other``.

        Lines are adjacent when they share an orientation and overlap across
        more than one coordinate on the same axis. A single shared endpoint is
        NONE here; corner contact is a rectangle-level concern and never yields
        SINGLE_POINT from this method.

        Args:
            other: Line to compare against

        Returns:
            PROPER for identical lines, SUB_LINE when ``other`` is shorter and
            lies strictly inside this line, PARTIAL for any other overlap,
            else NONE.
        """
        if self == other:
            return Adjacency.PROPER

        orientation = self.orientation
        if orientation != other.orientation:
            return Adjacency.NONE

        if orientation == Orientation.VERTICAL:
            shared = self.distinct_x_coordinates & other.distinct_x_coordinates
        else:
            shared = self.distinct_y_coordinates & other.distinct_y_coordinates
        if not shared:
            return Adjacency.NONE

        own_range = self.coordinate_range
        overlap = own_range.overlap(other.coordinate_range)
        if overlap is None or overlap.distance == 0:
            return Adjacency.NONE

        if other.length < self.length and own_range.contains_all_exclusive(overlap):
            return Adjacency.SUB_LINE
        return Adjacency.PARTIAL
