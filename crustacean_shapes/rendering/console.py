"""
Console Renderer
================

Dumps drawing commands as text, one line per command.

Handy for debugging: nested diagrams are hard to inspect visually,
but the command dump shows every element in drawing order.
"""

from typing import Callable

from crustacean_shapes.geometry.primitives import Point, Rect
from crustacean_shapes.rendering.base import Renderer


def format_number(value: float) -> str:
    """Shortest general format: 100.0 -> '100', 187.5 -> '187.5'."""
    return f"{value:g}"


def format_point(point: Point) -> str:
    return f"({format_number(point.x)}, {format_number(point.y)})"


class ConsoleRenderer(Renderer):
    """
    Renderer that writes each command as a line of text.

    Attributes:
        write: Line sink (default: print)

    Example:
        >>> ConsoleRenderer().move_to(Point(10, 20))
        move_to(10, 20)
    """

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def move_to(self, position: Point) -> None:
        self.write(f"move_to{format_point(position)}")

    def line_to(self, position: Point) -> None:
        self.write(f"line_to{format_point(position)}")

    def arc_at(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self.write(
            f"arc_at({format_point(center)}, radius: {format_number(radius)}, "
            f"start_angle: {format_number(start_angle)}, end_angle: {format_number(end_angle)})"
        )

    def circle_at(self, center: Point, radius: float) -> None:
        self.write(f"circle_at({format_point(center)}, {format_number(radius)})")

    def rectangle_at(self, rect: Rect) -> None:
        self.write(
            f"rectangle_at({format_number(rect.x)}, {format_number(rect.y)}, "
            f"{format_number(rect.width)}, {format_number(rect.height)})"
        )
