"""Pytest configuration and fixtures."""

import pytest

from rectcompare.models import Point, Rectangle


@pytest.fixture
def make_rect():
    """Build a rectangle from (length, width, lower-left x, lower-left y)."""

    def _make(length: int, width: int, x: int, y: int) -> Rectangle:
        return Rectangle(length=length, width=width, lower_left=Point(x=x, y=y))

    return _make
