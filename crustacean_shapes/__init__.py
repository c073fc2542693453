"""
Crustacean Shapes
=================

Bounded Context: Polymorphic shape rendering.

Design Philosophy:
- Shapes are values: immutable, comparable, freely copied
- Shapes describe themselves with primitive commands; renderers decide
  what those commands mean (text, SVG, pixels)
- A Diagram can contain a copy of itself without recursing forever

Architecture:

    crustacean_shapes/
    ├── geometry/          # Points, rects, drawable shapes
    │   ├── primitives.py  # Point, Rect
    │   └── shapes.py      # Polygon, Circle, Rectangle, Bubble
    │
    ├── rendering/         # Renderer contract + implementations
    │   ├── base.py        # Renderer
    │   ├── console.py     # ConsoleRenderer
    │   ├── recording.py   # RecordingRenderer
    │   ├── scaled.py      # ScaledRenderer
    │   ├── svg.py         # SVGRenderer, SVGDocument
    │   └── raster.py      # RasterRenderer (numpy frame + supervision)
    │
    ├── diagram.py         # Diagram, Scaled, sample diagrams
    ├── colors.py          # CSSColor, Style
    ├── config.py          # YAML configuration
    ├── registry.py        # RendererRegistry
    └── pipeline.py        # Orchestration

Usage:

    from crustacean_shapes import Diagram, Circle, Point, Scaled, ConsoleRenderer

    diagram = Diagram()
    diagram.add(Circle(Point(100, 100), 40))
    diagram.add(Scaled(0.5, diagram))
    diagram.draw(ConsoleRenderer())

    # Or use the pipeline (config + several outputs)
    from crustacean_shapes import PipelineBuilder

    outputs = (
        PipelineBuilder()
        .add_renderer("console")
        .add_renderer("svg")
        .build()
        .run()
    )
"""

from crustacean_shapes.colors import ColorName, CSSColor, Style
from crustacean_shapes.geometry import (
    TWO_PI,
    Bubble,
    Circle,
    ClosedShape,
    Drawable,
    Point,
    Polygon,
    Rect,
    Rectangle,
    regular_polygon,
    total_perimeter,
)
from crustacean_shapes.diagram import Diagram, Scaled, sample_diagram, showcase_diagram
from crustacean_shapes.rendering import (
    ConsoleRenderer,
    DrawCommand,
    RasterRenderer,
    RecordingRenderer,
    Renderer,
    ScaledRenderer,
    SVGDocument,
    SVGRenderer,
    render_frame,
    save_frame,
)
from crustacean_shapes.config import DiagramConfig, ShapeConfig
from crustacean_shapes.registry import RendererRegistry, RendererNotAvailableError
from crustacean_shapes.pipeline import DiagramPipeline, PipelineBuilder, build_diagram

__all__ = [
    # Colors
    "ColorName",
    "CSSColor",
    "Style",
    # Geometry
    "TWO_PI",
    "Point",
    "Rect",
    "Drawable",
    "ClosedShape",
    "Polygon",
    "Circle",
    "Rectangle",
    "Bubble",
    "regular_polygon",
    "total_perimeter",
    # Composition
    "Diagram",
    "Scaled",
    "sample_diagram",
    "showcase_diagram",
    # Rendering
    "Renderer",
    "ConsoleRenderer",
    "DrawCommand",
    "RecordingRenderer",
    "ScaledRenderer",
    "SVGRenderer",
    "SVGDocument",
    "RasterRenderer",
    "render_frame",
    "save_frame",
    # Config / orchestration
    "DiagramConfig",
    "ShapeConfig",
    "RendererRegistry",
    "RendererNotAvailableError",
    "DiagramPipeline",
    "PipelineBuilder",
    "build_diagram",
]

__version__ = "1.0.0"
