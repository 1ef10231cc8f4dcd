"""Comparison report for a pair of rectangles.

Runs every rectangle query for an ordered pair (A, B) once and collects the
results into a serializable model, plus a rich renderer for console output.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table

from rectcompare.config import settings
from rectcompare.models import Adjacency, Point, Rectangle


class ComparisonReport(BaseModel):
    """Results of comparing rectangle A against rectangle B."""

    rectangle_a: Rectangle
    rectangle_b: Rectangle

    area_a: int = Field(..., gt=0)
    area_b: int = Field(..., gt=0)
    identical: bool
    a_contains_b: bool
    intersection_points: list[Point] = Field(
        default_factory=list, description="Boundary crossings, ordered by x then y"
    )
    adjacency: Adjacency

    @property
    def intersects(self) -> bool:
        return bool(self.intersection_points)


def compare_rectangles(rectangle_a: Rectangle, rectangle_b: Rectangle) -> ComparisonReport:
    """Compare two rectangles.

    Args:
        rectangle_a: First rectangle (the subject of containment)
        rectangle_b: Second rectangle

    Returns:
        ComparisonReport with areas, identity, containment, intersection
        points and adjacency
    """
    points = sorted(
        rectangle_a.intersection_points(rectangle_b),
        key=lambda point: (point.x, point.y),
    )
    return ComparisonReport(
        rectangle_a=rectangle_a,
        rectangle_b=rectangle_b,
        area_a=rectangle_a.area,
        area_b=rectangle_b.area,
        identical=rectangle_a == rectangle_b,
        a_contains_b=rectangle_a.contains(rectangle_b),
        intersection_points=points,
        adjacency=rectangle_a.determine_adjacency_with(rectangle_b),
    )


def format_points(points: Iterable[Point]) -> str:
    """Join points as ``(x, y), (x, y)``."""
    return ", ".join(point.pretty() for point in points)


def _format_bool(value: bool) -> str:
    return "[green]true[/green]" if value else "[red]false[/red]"


def render_report(
    report: ComparisonReport,
    console: Console,
    labels: Optional[tuple[str, str]] = None,
) -> None:
    """Print a comparison report as a table."""
    label_a, label_b = labels or settings.labels

    table = Table(title="Results", show_header=False, title_justify="left")
    table.add_column("Check", style="bold")
    table.add_column("Result")

    table.add_row(f"Rectangle {label_a} Area", str(report.area_a))
    table.add_row(f"Rectangle {label_b} Area", str(report.area_b))
    table.add_row("Rectangles are Identical", _format_bool(report.identical))
    table.add_row(
        f"Rectangle {label_a} CONTAINS Rectangle {label_b}",
        _format_bool(report.a_contains_b),
    )
    table.add_row(
        f"Rectangle {label_a} INTERSECTS with Rectangle {label_b} at points",
        format_points(report.intersection_points) or "[dim]none[/dim]",
    )
    table.add_row("Rectangle Adjacency status", report.adjacency.value)

    console.print(table)
