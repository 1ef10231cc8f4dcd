"""rectcompare CLI."""

import logging
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from rectcompare.config import settings
from rectcompare.models import Point, Rectangle
from rectcompare.report import compare_rectangles, render_report

app = typer.Typer(
    name="rectcompare",
    help="Compare two axis-aligned rectangles for containment, intersection and adjacency",
    add_completion=False,
)
console = Console()

INTRO_MESSAGE = "Use this application to calculate data about the relationships between two rectangles."
DIMENSION_INVALID = "Invalid input; LENGTH/WIDTH must be a positive, whole number. Please try again..."
COORDINATE_INVALID = "Invalid input; X/Y COORDINATE must be a valid, whole number"

RectangleArgs = Tuple[int, int, int, int]


def setup_logging(level: str) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_rectangle(values: RectangleArgs) -> Rectangle:
    """Build a rectangle from ``(length, width, x, y)``."""
    length, width, x, y = values
    return Rectangle(length=length, width=width, lower_left=Point(x=x, y=y))


def _validate_dimensions(value: RectangleArgs) -> RectangleArgs:
    length, width, _, _ = value
    if length <= 0 or width <= 0:
        raise typer.BadParameter("LENGTH/WIDTH must be a positive, whole number")
    return value


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level"),
) -> None:
    """Configure logging for every command."""
    setup_logging(log_level or settings.log_level)


@app.command()
def compare(
    a: RectangleArgs = typer.Option(
        ..., "--a", metavar="LENGTH WIDTH X Y", callback=_validate_dimensions, help="First rectangle"
    ),
    b: RectangleArgs = typer.Option(
        ..., "--b", metavar="LENGTH WIDTH X Y", callback=_validate_dimensions, help="Second rectangle"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Compare two rectangles given on the command line."""
    report = compare_rectangles(build_rectangle(a), build_rectangle(b))
    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return
    render_report(report, console)


def _prompt_int(text: str, invalid_message: str, positive: bool) -> int:
    """Prompt until the answer parses as a whole number."""
    while True:
        raw = typer.prompt(text)
        try:
            value = int(raw.strip())
        except ValueError:
            console.print(f"[red]{invalid_message}[/red]")
            continue
        if positive and value <= 0:
            console.print(f"[red]{invalid_message}[/red]")
            continue
        return value


def _prompt_rectangle(label: str) -> Rectangle:
    length = _prompt_int(f"Enter Rectangle {label} LENGTH", DIMENSION_INVALID, positive=True)
    width = _prompt_int(f"Enter Rectangle {label} WIDTH", DIMENSION_INVALID, positive=True)
    x = _prompt_int(f"Enter Rectangle {label} BOTTOM-LEFT X-COORDINATE", COORDINATE_INVALID, positive=False)
    y = _prompt_int(f"Enter Rectangle {label} BOTTOM-LEFT Y-COORDINATE", COORDINATE_INVALID, positive=False)
    return build_rectangle((length, width, x, y))


@app.command()
def interactive() -> None:
    """Prompt for pairs of rectangles until told to stop."""
    console.print(INTRO_MESSAGE)

    while True:
        label_a, label_b = settings.labels
        rectangle_a = _prompt_rectangle(label_a)
        rectangle_b = _prompt_rectangle(label_b)
        render_report(compare_rectangles(rectangle_a, rectangle_b), console)

        if not typer.confirm("Check additional rectangles?"):
            break


if __name__ == "__main__":
    app()
