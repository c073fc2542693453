"""
Rendering Layer
===============

Bounded Context: Turning drawing commands into output.

Responsibilities:
- Renderer contract (move_to, line_to, arc_at + defaults)
- Text dump, command recording, SVG markup, raster frames
- Scaling adapter for nested drawings

Non-responsibilities:
- Shape geometry (handled by geometry)
- Composition (handled by diagram)
"""

from crustacean_shapes.rendering.base import Renderer
from crustacean_shapes.rendering.console import ConsoleRenderer
from crustacean_shapes.rendering.recording import DrawCommand, RecordingRenderer
from crustacean_shapes.rendering.scaled import ScaledRenderer
from crustacean_shapes.rendering.svg import SVGDocument, SVGRenderer
from crustacean_shapes.rendering.raster import RasterRenderer, blank_frame, render_frame, save_frame

__all__ = [
    "Renderer",
    "ConsoleRenderer",
    "DrawCommand",
    "RecordingRenderer",
    "ScaledRenderer",
    "SVGRenderer",
    "SVGDocument",
    "RasterRenderer",
    "blank_frame",
    "render_frame",
    "save_frame",
]
