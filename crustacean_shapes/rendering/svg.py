"""
SVG Renderer
============

Builds an SVG document string from drawing commands.

Design:
- move_to / line_to accumulate an SVG path ("M x y L x y ...")
- A full-sweep arc becomes <circle>, a partial arc becomes a path arc
- Circles and rectangles with a Style become <circle> / <rect> elements
- Pending path data is flushed before any standalone element, so the
  output keeps drawing order
"""

import math
from typing import Iterable, List, Optional, Tuple

from crustacean_shapes.colors import CSSColor, Style
from crustacean_shapes.geometry.primitives import TWO_PI, Point, Rect
from crustacean_shapes.rendering.base import Renderer
from crustacean_shapes.rendering.console import format_number as _num

PATH_STYLE = Style(stroke_color=CSSColor.rgb(57, 157, 249), fill_color=None, stroke_width=3)


def _paint(style: Style) -> str:
    fill = str(style.fill_color) if style.fill_color is not None else "none"
    return (
        f"stroke='{style.stroke_color}' fill='{fill}' "
        f"stroke-width='{_num(style.stroke_width)}'"
    )


class SVGRenderer(Renderer):
    """
    Renderer producing SVG markup.

    Attributes:
        width: Canvas width
        height: Canvas height
        background: Background fill (rendered as a full-size rect)
        style: Paint used for path commands and bare circles

    Example:
        >>> renderer = SVGRenderer(width=200, height=100)
        >>> Circle(Point(50, 50), 20).draw(renderer)
        >>> renderer.svg_string.startswith("<svg")
        True
    """

    def __init__(
        self,
        width: int = 960,
        height: int = 500,
        background: Tuple[int, int, int] = (25, 25, 25),
        style: Style = PATH_STYLE,
    ):
        self.width = width
        self.height = height
        self.background = background
        self.style = style
        self._commands: List[str] = []
        self._path: List[str] = []

    @property
    def commands(self) -> List[str]:
        """SVG elements emitted so far (pending path included)."""
        return self._commands + ([self._path_element()] if self._path else [])

    def _path_element(self) -> str:
        return f"<path d='{' '.join(self._path)}' {_paint(self.style)} />"

    def _flush_path(self) -> None:
        if self._path:
            self._commands.append(self._path_element())
            self._path = []

    def move_to(self, position: Point) -> None:
        self._path.append(f"M {_num(position.x)} {_num(position.y)}")

    def line_to(self, position: Point) -> None:
        if not self._path:
            # SVG paths must start with a moveto
            self.move_to(position)
            return
        self._path.append(f"L {_num(position.x)} {_num(position.y)}")

    def arc_at(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = end_angle - start_angle
        if abs(sweep) >= TWO_PI - 1e-9:
            self._flush_path()
            self._commands.append(
                f"<circle cx='{_num(center.x)}' cy='{_num(center.y)}' r='{_num(radius)}' "
                f"{_paint(self.style)} />"
            )
            return

        start = Point(center.x + radius * math.cos(start_angle), center.y + radius * math.sin(start_angle))
        end = Point(center.x + radius * math.cos(end_angle), center.y + radius * math.sin(end_angle))
        large_arc = 1 if abs(sweep) > math.pi else 0
        sweep_flag = 1 if sweep > 0 else 0
        self._path.append(f"M {_num(start.x)} {_num(start.y)}")
        self._path.append(
            f"A {_num(radius)} {_num(radius)} 0 {large_arc} {sweep_flag} {_num(end.x)} {_num(end.y)}"
        )

    def draw_circle(self, circle) -> None:
        self._flush_path()
        self._commands.append(
            f"<circle cx='{_num(circle.center.x)}' cy='{_num(circle.center.y)}' "
            f"r='{_num(circle.radius)}' {_paint(circle.style)} />"
        )

    def draw_rectangle(self, rectangle) -> None:
        self._flush_path()
        bounds: Rect = rectangle.bounds
        self._commands.append(
            f"<rect x='{_num(bounds.x)}' y='{_num(bounds.y)}' "
            f"width='{_num(bounds.width)}' height='{_num(bounds.height)}' "
            f"{_paint(rectangle.style)} />"
        )

    @property
    def svg_string(self) -> str:
        r, g, b = self.background
        output = [
            f"<svg width='{self.width}' height='{self.height}' xmlns='http://www.w3.org/2000/svg'>",
            f"<rect width='{self.width}' height='{self.height}' style=\"fill:rgb({r},{g},{b})\"/>",
        ]
        output.extend(self.commands)
        output.append("</svg>")
        return "".join(output)

    @property
    def html_string(self) -> str:
        return (
            "<!DOCTYPE html>"
            "<html>"
            "<head>"
            "<style>body { background-color: #555555; }</style>"
            "</head>"
            "<body>" + self.svg_string + "</body>"
            "</html>"
        )


class SVGDocument:
    """
    Ordered collection of drawables rendered to a fresh SVGRenderer on demand.

    Attributes:
        drawables: Elements in drawing order
        width: SVG canvas width
        height: SVG canvas height
    """

    def __init__(self, drawables: Optional[Iterable] = None, width: int = 960, height: int = 500):
        self.drawables = list(drawables or [])
        self.width = width
        self.height = height

    def append(self, drawable) -> None:
        self.drawables.append(drawable)

    def draw(self, renderer: Renderer) -> None:
        """Draw with a specific renderer instead of SVG."""
        for drawable in self.drawables:
            drawable.draw(renderer)

    def _render(self) -> SVGRenderer:
        context = SVGRenderer(width=self.width, height=self.height)
        self.draw(context)
        return context

    @property
    def svg_string(self) -> str:
        return self._render().svg_string

    @property
    def html_string(self) -> str:
        return self._render().html_string
