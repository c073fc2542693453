"""
Geometry Layer
==============

Bounded Context: Geometric values and the shapes built from them.

Responsibilities:
- Points and rectangles (immutable)
- Drawable shapes that issue drawing commands
- Area / perimeter for closed shapes
- NO pixels, NO markup (handled by rendering)
"""

from crustacean_shapes.geometry.primitives import TWO_PI, Point, Rect
from crustacean_shapes.geometry.shapes import (
    Bubble,
    Circle,
    ClosedShape,
    Drawable,
    Polygon,
    Rectangle,
    regular_polygon,
    total_perimeter,
)

__all__ = [
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
]
