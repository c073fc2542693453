"""
Configuration schema for diagram rendering.

Defines the canvas, stroke and SVG settings, the showcase switches, and
an optional declarative list of shapes, all loaded from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from crustacean_shapes.colors import CSSColor, ColorName, DEFAULT_STYLE, RECTANGLE_STYLE, Style
from crustacean_shapes.geometry.primitives import Point, Rect
from crustacean_shapes.geometry.shapes import Bubble, Circle, Drawable, Polygon, Rectangle, regular_polygon

SHAPE_TYPES = {"circle", "polygon", "rectangle", "bubble", "regular_polygon"}
MAX_CANVAS_SIZE = 4096


def _validate_rgb(name: str, rgb: Tuple[int, int, int]) -> None:
    if len(rgb) != 3 or not all(0 <= int(c) <= 255 for c in rgb):
        raise ValueError(f"{name} must be three values in [0, 255], got {rgb}")


def parse_color(value: Any) -> Optional[CSSColor]:
    """
    Parse a YAML color: a CSS keyword, "#RRGGBB", an [r, g, b] list, or null.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return CSSColor.rgb(*value)
    if isinstance(value, str):
        if value.startswith("#") and len(value) == 7:
            return CSSColor.rgb(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))
        try:
            return CSSColor.named(ColorName(value.lower()))
        except ValueError:
            raise ValueError(f"Unknown color: {value!r}") from None
    raise ValueError(f"Unsupported color value: {value!r}")


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing area for console and raster output."""

    width: int = 375
    height: int = 667

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"canvas must have positive dimensions, got {self.width}x{self.height}"
            )
        if self.width > MAX_CANVAS_SIZE or self.height > MAX_CANVAS_SIZE:
            raise ValueError(
                f"canvas too large (max {MAX_CANVAS_SIZE}x{MAX_CANVAS_SIZE}), "
                f"got {self.width}x{self.height}"
            )

    @property
    def frame(self) -> Rect:
        return Rect(0.0, 0.0, float(self.width), float(self.height))


@dataclass(frozen=True)
class StrokeConfig:
    """Raster stroke settings. `color` accepts anything parse_color does."""

    color: CSSColor = CSSColor.rgb(57, 157, 249)
    line_width: int = 3

    def __post_init__(self):
        if not isinstance(self.color, CSSColor):
            object.__setattr__(self, "color", parse_color(self.color))
        if self.color is None:
            raise ValueError("stroke color must not be null")
        if self.line_width <= 0:
            raise ValueError(f"line_width must be > 0, got {self.line_width}")


@dataclass(frozen=True)
class SVGConfig:
    """SVG document settings."""

    width: int = 960
    height: int = 500
    background: Tuple[int, int, int] = (25, 25, 25)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"svg must have positive dimensions, got {self.width}x{self.height}"
            )
        _validate_rgb("svg background", self.background)


@dataclass(frozen=True)
class ShapeConfig:
    """
    Declarative shape entry.

    Required fields per shape_type:
    - circle: center, radius
    - bubble: center, radius
    - polygon: corners (at least 3)
    - rectangle: bounds [x, y, width, height]
    - regular_polygon: sides, center, radius
    """

    shape_type: str
    center: Optional[Tuple[float, float]] = None
    radius: Optional[float] = None
    corners: List[Tuple[float, float]] = field(default_factory=list)
    bounds: Optional[Tuple[float, float, float, float]] = None
    sides: Optional[int] = None
    style: Optional[Style] = None

    def __post_init__(self):
        if self.shape_type not in SHAPE_TYPES:
            raise ValueError(
                f"Invalid shape_type: {self.shape_type}. "
                f"Must be one of {sorted(SHAPE_TYPES)}"
            )

        if self.shape_type in {"circle", "bubble", "regular_polygon"}:
            if self.center is None or self.radius is None:
                raise ValueError(f"{self.shape_type} needs center and radius")
            if self.radius < 0:
                raise ValueError(f"radius must be >= 0, got {self.radius}")

        if self.shape_type == "polygon" and len(self.corners) < 3:
            raise ValueError(
                f"polygon must have at least 3 corners, got {len(self.corners)}"
            )

        if self.shape_type == "rectangle":
            if self.bounds is None or len(self.bounds) != 4:
                raise ValueError("rectangle needs bounds [x, y, width, height]")
            if self.bounds[2] < 0 or self.bounds[3] < 0:
                raise ValueError(f"rectangle width and height must be >= 0, got {self.bounds}")

        if self.shape_type == "regular_polygon":
            if self.sides is None or self.sides < 3:
                raise ValueError(f"regular_polygon needs sides >= 3, got {self.sides}")

    def to_drawable(self) -> Drawable:
        """Build the shape this entry describes."""
        if self.shape_type == "circle":
            return Circle(Point(*self.center), self.radius, self.style or DEFAULT_STYLE)
        if self.shape_type == "bubble":
            return Bubble(Point(*self.center), self.radius)
        if self.shape_type == "polygon":
            return Polygon(tuple(Point(*c) for c in self.corners))
        if self.shape_type == "rectangle":
            return Rectangle(Rect(*self.bounds), self.style or RECTANGLE_STYLE)
        return regular_polygon(self.sides, Point(*self.center), self.radius)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShapeConfig":
        if "shape_type" not in data:
            raise ValueError(f"shape entry needs a shape_type, got keys {sorted(data)}")
        style = None
        style_data = data.get("style")
        if style_data is not None:
            style = Style(
                stroke_color=parse_color(style_data.get("stroke_color")) or CSSColor.named(ColorName.RED),
                fill_color=parse_color(style_data.get("fill_color")),
                stroke_width=style_data.get("stroke_width", 5),
            )
        return cls(
            shape_type=data["shape_type"],
            center=tuple(data["center"]) if "center" in data else None,
            radius=data.get("radius"),
            corners=[tuple(c) for c in data.get("corners", [])],
            bounds=tuple(data["bounds"]) if "bounds" in data else None,
            sides=data.get("sides"),
            style=style,
        )


@dataclass(frozen=True)
class DiagramConfig:
    """
    Main configuration for diagram rendering.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    stroke: StrokeConfig = field(default_factory=StrokeConfig)
    svg: SVGConfig = field(default_factory=SVGConfig)

    # Showcase switches (used when no shapes are declared)
    nest_diagram: bool = True
    nest_scale: float = 0.3
    add_bubble: bool = True

    shapes: List[ShapeConfig] = field(default_factory=list)
    output_dir: Optional[Path] = None

    def __post_init__(self):
        if not 0.0 < self.nest_scale <= 1.0:
            raise ValueError(f"nest_scale must be in (0.0, 1.0], got {self.nest_scale}")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "DiagramConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas:
              width: 375
              height: 667

            stroke:
              color: [57, 157, 249]
              line_width: 3

            svg:
              width: 960
              height: 500

            nest_diagram: true
            nest_scale: 0.3
            add_bubble: true

            shapes:
              - shape_type: "circle"
                center: [187.5, 333.5]
                radius: 93.75
              - shape_type: "regular_polygon"
                sides: 3
                center: [187.5, 333.5]
                radius: 93.75

            output_dir: "./runs/diagram"
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiagramConfig":
        canvas = CanvasConfig(**(data.get("canvas") or {}))

        stroke = StrokeConfig(**(data.get("stroke") or {}))

        svg_data = dict(data.get("svg") or {})
        if "background" in svg_data:
            svg_data["background"] = tuple(svg_data["background"])
        svg = SVGConfig(**svg_data)

        shapes = [ShapeConfig.from_dict(s) for s in data.get("shapes") or []]

        output_dir = data.get("output_dir")

        return cls(
            canvas=canvas,
            stroke=stroke,
            svg=svg,
            nest_diagram=data.get("nest_diagram", True),
            nest_scale=data.get("nest_scale", 0.3),
            add_bubble=data.get("add_bubble", True),
            shapes=shapes,
            output_dir=Path(output_dir) if output_dir else None,
        )
