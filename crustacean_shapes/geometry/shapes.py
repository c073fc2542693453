"""
Drawable Shapes Module
======================

Value-type shapes that know how to describe themselves to a renderer.

Design:
- Immutable shapes (frozen dataclass pattern)
- Shapes issue primitive commands; they never touch pixels or markup
- Heterogeneous equality: shapes of different types compare unequal
- scaled() returns a new value, the original is never mutated
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Tuple

import numpy as np

from crustacean_shapes.colors import DEFAULT_STYLE, RECTANGLE_STYLE, Style
from crustacean_shapes.geometry.primitives import TWO_PI, Point, Rect

if TYPE_CHECKING:
    from crustacean_shapes.rendering.base import Renderer


class Drawable(ABC):
    """
    Anything that can issue drawing commands to a Renderer.

    Concrete drawables are dataclasses, so `==` between two different
    drawable types is simply False.
    """

    @abstractmethod
    def draw(self, renderer: "Renderer") -> None:
        """Issue drawing commands to `renderer` to represent self."""

    def is_equal_to(self, other: "Drawable") -> bool:
        return self == other


class ClosedShape(ABC):
    """Shapes that enclose an area."""

    @property
    @abstractmethod
    def area(self) -> float:
        ...

    @property
    @abstractmethod
    def perimeter(self) -> float:
        ...


def total_perimeter(shapes: Iterable[ClosedShape]) -> float:
    """Sum of perimeters of the given closed shapes."""
    return sum(shape.perimeter for shape in shapes)


def _as_point(value) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


@dataclass(frozen=True)
class Polygon(Drawable, ClosedShape):
    """
    Closed polygon drawn as a single path.

    The pen starts at the last corner so the outline closes on itself.

    Attributes:
        corners: Ordered vertices (Point or (x, y) pairs)
    """

    corners: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "corners", tuple(_as_point(c) for c in self.corners))

    def draw(self, renderer: "Renderer") -> None:
        if not self.corners:
            return
        renderer.move_to(self.corners[-1])
        for corner in self.corners:
            renderer.line_to(corner)

    def _vertices(self) -> np.ndarray:
        return np.array([c.as_tuple() for c in self.corners], dtype=float).reshape(-1, 2)

    @property
    def area(self) -> float:
        """Shoelace formula (absolute value, so winding does not matter)."""
        if len(self.corners) < 3:
            return 0.0
        v = self._vertices()
        x, y = v[:, 0], v[:, 1]
        return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2)

    @property
    def perimeter(self) -> float:
        if len(self.corners) < 2:
            return 0.0
        v = self._vertices()
        edges = np.roll(v, -1, axis=0) - v
        return float(np.sum(np.hypot(edges[:, 0], edges[:, 1])))

    def scaled(self, factor: float) -> "Polygon":
        return Polygon(tuple(c.scaled(factor) for c in self.corners))


@dataclass(frozen=True)
class Circle(Drawable, ClosedShape):
    """
    Circle with optional paint style.

    Attributes:
        center: Circle center
        radius: Circle radius (>= 0)
        style: Stroke/fill settings (used by renderers that paint)
    """

    center: Point
    radius: float
    style: Style = DEFAULT_STYLE

    def __post_init__(self):
        object.__setattr__(self, "center", _as_point(self.center))
        if self.radius < 0:
            raise ValueError(f"Circle radius must be >= 0, got {self.radius}")

    def draw(self, renderer: "Renderer") -> None:
        renderer.draw_circle(self)

    @property
    def diameter(self) -> float:
        return self.radius * 2

    def with_diameter(self, diameter: float) -> "Circle":
        return replace(self, radius=diameter / 2)

    def shifted(self, dx: float, dy: float) -> "Circle":
        """Return a copy moved by (dx, dy)."""
        return replace(self, center=self.center.translated(dx, dy))

    @property
    def area(self) -> float:
        return self.radius * self.radius * math.pi

    @property
    def perimeter(self) -> float:
        return 2 * self.radius * math.pi

    def scaled(self, factor: float) -> "Circle":
        return Circle(self.center.scaled(factor), self.radius * factor, self.style.scaled(factor))


@dataclass(frozen=True)
class Rectangle(Drawable, ClosedShape):
    """
    Axis-aligned rectangle.

    Attributes:
        bounds: Rectangle geometry
        style: Stroke/fill settings
    """

    bounds: Rect
    style: Style = RECTANGLE_STYLE

    def draw(self, renderer: "Renderer") -> None:
        renderer.draw_rectangle(self)

    @property
    def area(self) -> float:
        return self.bounds.width * self.bounds.height

    @property
    def perimeter(self) -> float:
        return 2 * (self.bounds.width + self.bounds.height)

    def scaled(self, factor: float) -> "Rectangle":
        return Rectangle(self.bounds.scaled(factor), self.style.scaled(factor))


@dataclass(frozen=True)
class Bubble(Drawable):
    """
    An outer circle plus a small highlight circle up and to the right.

    Attributes:
        center: Outer circle center
        radius: Outer circle radius
    """

    center: Point
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", _as_point(self.center))
        if self.radius < 0:
            raise ValueError(f"Bubble radius must be >= 0, got {self.radius}")

    @property
    def highlight_center(self) -> Point:
        return Point(self.center.x + 0.2 * self.radius, self.center.y - 0.4 * self.radius)

    @property
    def highlight_radius(self) -> float:
        return self.radius * 0.33

    def draw(self, renderer: "Renderer") -> None:
        renderer.circle_at(self.center, self.radius)
        renderer.circle_at(self.highlight_center, self.highlight_radius)

    def scaled(self, factor: float) -> "Bubble":
        return Bubble(self.center.scaled(factor), self.radius * factor)


def regular_polygon(n: int, center: Point, radius: float) -> Polygon:
    """
    Regular n-sided polygon with corners on a circle.

    Args:
        n: Number of sides (>= 3)
        center: Circumscribed circle center
        radius: Circumscribed circle radius

    Returns:
        Polygon whose first corner sits directly below the center
    """
    if n < 3:
        raise ValueError(f"Regular polygon needs at least 3 sides, got {n}")
    center = _as_point(center)
    angles = np.arange(n) * (TWO_PI / n)
    xs = center.x + np.sin(angles) * radius
    ys = center.y + np.cos(angles) * radius
    return Polygon(tuple(Point(float(x), float(y)) for x, y in zip(xs, ys)))
