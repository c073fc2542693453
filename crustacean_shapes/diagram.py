"""
Diagram Module
==============

Composite drawables with value semantics.

Design:
- Diagram stores its elements in an immutable tuple
- Copies share that tuple (copy-on-write: add() rebinds, never mutates)
- Nested diagrams are handed out as snapshots, never as the stored object
- add() stores a snapshot, so a diagram can contain itself:
  the inner copy is frozen at insertion time and drawing terminates
- Scaled wraps any drawable and draws it through a ScaledRenderer
"""

import copy
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from crustacean_shapes.geometry.primitives import Point, Rect
from crustacean_shapes.geometry.shapes import Bubble, Circle, Drawable, Rectangle, regular_polygon
from crustacean_shapes.rendering.base import Renderer
from crustacean_shapes.rendering.scaled import ScaledRenderer


class Diagram(Drawable):
    """
    An ordered, heterogeneous group of drawables.

    Usage:
        diagram = Diagram()
        diagram.add(Circle(Point(50, 50), 10))
        diagram.add(Scaled(0.5, diagram))   # safe: inner copy is a snapshot
        diagram.draw(ConsoleRenderer())
    """

    def __init__(self, elements: Iterable[Drawable] = ()):
        self._elements: Tuple[Drawable, ...] = tuple(copy.copy(e) for e in elements)

    @property
    def elements(self) -> Tuple[Drawable, ...]:
        return tuple(_detached(e) for e in self._elements)

    def draw(self, renderer: Renderer) -> None:
        for element in self._elements:
            element.draw(renderer)

    def add(self, other: Drawable) -> None:
        """Append a snapshot of `other`."""
        self._elements = self._elements + (copy.copy(other),)

    def copy(self) -> "Diagram":
        return self.__copy__()

    def __copy__(self) -> "Diagram":
        clone = Diagram.__new__(Diagram)
        clone._elements = self._elements
        return clone

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Drawable]:
        return (_detached(e) for e in self._elements)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Diagram):
            return NotImplemented
        return self._elements == other._elements

    __hash__ = None

    def __repr__(self) -> str:
        return f"Diagram(elements={list(self._elements)!r})"

    def scaled(self, factor: float) -> "Scaled":
        return Scaled(factor, self)


@dataclass(frozen=True)
class Scaled(Drawable):
    """
    A drawable that draws `subject` with uniform scaling.

    Unhashable: the subject may be a Diagram.

    Attributes:
        scale: Scale factor applied to all positions and distances
        subject: Drawable to scale (snapshotted on construction)
    """

    scale: float
    subject: Drawable

    __hash__ = None

    def __post_init__(self):
        if self.scale < 0:
            raise ValueError(f"scale must be >= 0, got {self.scale}")
        object.__setattr__(self, "subject", copy.copy(self.subject))

    def __copy__(self) -> "Scaled":
        return Scaled(self.scale, self.subject)

    def draw(self, renderer: Renderer) -> None:
        self.subject.draw(ScaledRenderer(base=renderer, scale=self.scale))

    def scaled(self, factor: float) -> "Scaled":
        return Scaled(self.scale * factor, self.subject)


def _detached(element: Drawable) -> Drawable:
    # Shapes are frozen; composites are copied so callers cannot reach stored state
    if isinstance(element, (Diagram, Scaled)):
        return copy.copy(element)
    return element


def sample_diagram(frame: Rect) -> Diagram:
    """
    Diagram centered in `frame`: a circle, its inscribed triangle,
    a small square, and the circle again shifted below.
    """
    sample = Diagram()
    r = min(frame.width, frame.height) / 4
    center = Point(frame.mid_x, frame.mid_y)

    circle = Circle(center=center, radius=r)
    sample.add(circle)
    sample.add(regular_polygon(3, center, r))

    square = Rect(x=center.x - r / 3, y=center.y, width=r / 6, height=r / 6)
    sample.add(Rectangle(bounds=square))

    circle = circle.shifted(0, circle.radius * 2.5)
    sample.add(circle)
    return sample


def showcase_diagram(
    frame: Rect,
    nest: bool = True,
    nest_scale: float = 0.3,
    bubble: bool = True,
    base: Optional[Diagram] = None,
) -> Diagram:
    """
    The sample diagram, optionally nested inside itself and decorated
    with a bubble in the top-right corner.

    Args:
        frame: Drawing area
        nest: Append a scaled copy of the diagram to itself
        nest_scale: Scale of the nested copy
        bubble: Append a Bubble
        base: Start from a copy of this diagram instead of the sample

    Returns:
        Diagram ready to draw
    """
    diagram = base.copy() if base is not None else sample_diagram(frame)

    if nest:
        diagram.add(Scaled(scale=nest_scale, subject=diagram))

    if bubble:
        radius = frame.width / 10
        margin = radius * 1.2
        center = Point(frame.max_x - margin, frame.min_y + margin)
        diagram.add(Bubble(center=center, radius=radius))

    return diagram
