"""
Scaled Renderer
===============

Adapter that applies uniform scaling before delegating to a base renderer.
Positions and distances are multiplied by `scale`; angles pass through.
"""

from crustacean_shapes.geometry.primitives import Point, Rect
from crustacean_shapes.rendering.base import Renderer


class ScaledRenderer(Renderer):
    """
    Renderer wrapper that scales every command.

    Specialised commands are forwarded to the base renderer's own
    versions, so a console dump still reads circle_at after scaling.

    Attributes:
        base: Renderer receiving the scaled commands
        scale: Uniform scale factor
    """

    def __init__(self, base: Renderer, scale: float):
        if scale < 0:
            raise ValueError(f"scale must be >= 0, got {scale}")
        self.base = base
        self.scale = scale

    def move_to(self, position: Point) -> None:
        self.base.move_to(position.scaled(self.scale))

    def line_to(self, position: Point) -> None:
        self.base.line_to(position.scaled(self.scale))

    def arc_at(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self.base.arc_at(center.scaled(self.scale), radius * self.scale, start_angle, end_angle)

    def circle_at(self, center: Point, radius: float) -> None:
        self.base.circle_at(center.scaled(self.scale), radius * self.scale)

    def rectangle_at(self, rect: Rect) -> None:
        self.base.rectangle_at(rect.scaled(self.scale))

    def draw_circle(self, circle) -> None:
        self.base.draw_circle(circle.scaled(self.scale))

    def draw_rectangle(self, rectangle) -> None:
        self.base.draw_rectangle(rectangle.scaled(self.scale))
