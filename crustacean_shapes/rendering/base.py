"""
Renderer Base Module
====================

Abstract drawing target for Drawables.

Design:
- Three primitive commands are required: move_to, line_to, arc_at
- Everything else has a default built from the primitives
- Renderers may override any default with a more specific command
  (console prints circle_at, SVG emits <circle>, raster adds a rect path)

Architecture:
    Renderer (abstract)
        ↓
    ConsoleRenderer, RecordingRenderer, SVGRenderer,
    RasterRenderer, ScaledRenderer (concrete)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from crustacean_shapes.geometry.primitives import TWO_PI, Point, Rect

if TYPE_CHECKING:
    from crustacean_shapes.geometry.shapes import Circle, Drawable, Rectangle


class Renderer(ABC):
    """
    Abstract base class for renderers.

    Subclasses must implement move_to(), line_to() and arc_at().

    Example:
        >>> class PenRenderer(Renderer):
        ...     def move_to(self, position): ...
        ...     def line_to(self, position): ...
        ...     def arc_at(self, center, radius, start_angle, end_angle): ...
    """

    @abstractmethod
    def move_to(self, position: Point) -> None:
        """Move the pen to `position` without drawing anything."""

    @abstractmethod
    def line_to(self, position: Point) -> None:
        """Draw a line from the pen position to `position`, updating the pen."""

    @abstractmethod
    def arc_at(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        """Draw the arc of the circle at `center` between two angles (radians)."""

    def circle_at(self, center: Point, radius: float) -> None:
        """Draw a complete circle."""
        self.arc_at(center, radius, 0.0, TWO_PI)

    def rectangle_at(self, rect: Rect) -> None:
        """Draw a rectangle outline as a closed path."""
        self.move_to(Point(rect.min_x, rect.min_y))
        self.line_to(Point(rect.min_x, rect.max_y))
        self.line_to(Point(rect.max_x, rect.max_y))
        self.line_to(Point(rect.max_x, rect.min_y))
        self.line_to(Point(rect.min_x, rect.min_y))

    def draw_circle(self, circle: "Circle") -> None:
        """Shape-level hook for circles; default is a full arc."""
        self.arc_at(circle.center, circle.radius, 0.0, TWO_PI)

    def draw_rectangle(self, rectangle: "Rectangle") -> None:
        """Shape-level hook for rectangles; default is rectangle_at(bounds)."""
        self.rectangle_at(rectangle.bounds)

    def render(self, drawable: "Drawable") -> "Renderer":
        """Draw `drawable` into this renderer and return self for chaining."""
        drawable.draw(self)
        return self
