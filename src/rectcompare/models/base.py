"""Base models and common types for rectangle comparison."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Orientation(str, Enum):
    """Axis along which a line's points are aligned."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class Adjacency(str, Enum):
    """Classification of how two lines or two rectangles touch."""

    PROPER = "PROPER"  # identical sides
    PARTIAL = "PARTIAL"
    SUB_LINE = "SUB_LINE"
    SINGLE_POINT = "SINGLE_POINT"  # rectangle level only
    NONE = "NONE"


class ValueModel(BaseModel):
    """Base class for immutable geometry value objects.

    Frozen models compare and hash by field values, so two objects built from
    the same coordinates are interchangeable.
    """

    model_config = ConfigDict(frozen=True)


class Point(ValueModel):
    """A point on the integer coordinate plane."""

    x: int = Field(..., description="X coordinate")
    y: int = Field(..., description="Y coordinate")

    def pretty(self) -> str:
        """Render as ``(x, y)``."""
        return f"({self.x}, {self.y})"
