"""
Recording Renderer
==================

Keeps the command stream as data instead of printing it.
"""

from typing import Any, List, NamedTuple, Tuple

from crustacean_shapes.geometry.primitives import Point, Rect
from crustacean_shapes.rendering.base import Renderer


class DrawCommand(NamedTuple):
    """A single primitive command and its arguments."""

    name: str
    args: Tuple[Any, ...]


class RecordingRenderer(Renderer):
    """
    Renderer that records every command in issue order.

    Only the specialised commands it overrides (circle_at, rectangle_at)
    show up under their own names; draw_circle and draw_rectangle fall
    back to the base defaults and are recorded as arc_at / rectangle_at.
    """

    def __init__(self):
        self._commands: List[DrawCommand] = []

    @property
    def commands(self) -> List[DrawCommand]:
        return list(self._commands)

    def names(self) -> List[str]:
        return [command.name for command in self._commands]

    def count(self, name: str) -> int:
        return sum(1 for command in self._commands if command.name == name)

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def move_to(self, position: Point) -> None:
        self._commands.append(DrawCommand("move_to", (position,)))

    def line_to(self, position: Point) -> None:
        self._commands.append(DrawCommand("line_to", (position,)))

    def arc_at(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self._commands.append(DrawCommand("arc_at", (center, radius, start_angle, end_angle)))

    def circle_at(self, center: Point, radius: float) -> None:
        self._commands.append(DrawCommand("circle_at", (center, radius)))

    def rectangle_at(self, rect: Rect) -> None:
        self._commands.append(DrawCommand("rectangle_at", (rect,)))
