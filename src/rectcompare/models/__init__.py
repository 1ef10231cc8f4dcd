"""Geometry models for rectangle comparison.

All models are frozen Pydantic models: immutable, hashable and compared by
value, so they can be shared freely and compared from any number of threads.

Model Hierarchy:
- Rectangle → Lines (sides) → Points
- Rectangle / Line → Range (projection onto one axis)
"""

from .base import (
    Adjacency,
    Orientation,
    Point,
    ValueModel,
)
from .line import (
    DiagonalLineError,
    Line,
)
from .range import Range
from .rectangle import Rectangle

__all__ = [
    # Base types
    "Adjacency",
    "Orientation",
    "Point",
    "ValueModel",
    # Range
    "Range",
    # Line
    "DiagonalLineError",
    "Line",
    # Rectangle
    "Rectangle",
]
