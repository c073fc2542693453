"""
Geometric Primitives
====================

Pure value types - NO state, NO side effects.

Design:
- Immutable points and rectangles (frozen dataclass pattern)
- Screen coordinates: origin top-left, y grows downwards
- Scaling returns new values, never mutates
"""

import math
from dataclasses import dataclass
from typing import Tuple

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    def scaled(self, factor: float) -> "Point":
        """Multiply both coordinates by factor."""
        return Point(self.x * factor, self.y * factor)

    def translated(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """
    Immutable axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent

    Invariants:
        - width >= 0
        - height >= 0
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Validate invariants."""
        if self.width < 0:
            raise ValueError(f"Rect width must be >= 0, got {self.width}")
        if self.height < 0:
            raise ValueError(f"Rect height must be >= 0, got {self.height}")

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """
        Corners in drawing order: top-left, bottom-left, bottom-right, top-right.

        Returns:
            Tuple of four points
        """
        return (
            Point(self.min_x, self.min_y),
            Point(self.min_x, self.max_y),
            Point(self.max_x, self.max_y),
            Point(self.max_x, self.min_y),
        )

    def scaled(self, factor: float) -> "Rect":
        """Scale origin and size uniformly (factor must be >= 0)."""
        return Rect(
            x=self.x * factor,
            y=self.y * factor,
            width=self.width * factor,
            height=self.height * factor,
        )
