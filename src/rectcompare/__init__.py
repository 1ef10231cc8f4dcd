"""Containment, intersection and adjacency of axis-aligned rectangles."""

from .models import Adjacency, DiagonalLineError, Line, Orientation, Point, Range, Rectangle
from .report import ComparisonReport, compare_rectangles

__version__ = "0.1.0"

__all__ = [
    "Adjacency",
    "ComparisonReport",
    "DiagonalLineError",
    "Line",
    "Orientation",
    "Point",
    "Range",
    "Rectangle",
    "compare_rectangles",
]
