"""
Test Diagram Composition and Value Semantics
============================================

A Diagram must draw its elements in insertion order, and containing a
copy of itself must terminate because the inner copy is a snapshot.

Usage:
    pytest test_diagram.py
"""

import pytest

from crustacean_shapes import (
    Bubble,
    Circle,
    Diagram,
    Point,
    Polygon,
    Rect,
    Rectangle,
    RecordingRenderer,
    Scaled,
    regular_polygon,
    sample_diagram,
    showcase_diagram,
)

DRAWING_AREA = Rect(x=0.0, y=0.0, width=375.0, height=667.0)

SAMPLE_COMMANDS = ["arc_at", "move_to", "line_to", "line_to", "line_to", "rectangle_at", "arc_at"]


def _record(drawable) -> RecordingRenderer:
    renderer = RecordingRenderer()
    drawable.draw(renderer)
    return renderer


def test_elements_drawn_in_insertion_order():
    diagram = Diagram()
    diagram.add(Bubble(Point(0, 0), 5))
    diagram.add(Rectangle(Rect(0, 0, 1, 1)))
    diagram.add(Circle(Point(1, 1), 1))

    assert _record(diagram).names() == ["circle_at", "circle_at", "rectangle_at", "arc_at"]


def test_diagram_containing_itself_terminates():
    diagram = Diagram([Circle(Point(10, 10), 5), regular_polygon(3, Point(10, 10), 5)])
    n = len(_record(diagram))

    diagram.add(diagram)

    assert len(_record(diagram)) == 2 * n


def test_diagram_containing_scaled_self_terminates():
    diagram = Diagram([Circle(Point(10, 10), 5), Polygon([(0, 0), (4, 0), (4, 4)])])
    n = len(_record(diagram))

    diagram.add(Scaled(0.5, diagram))
    diagram.add(Scaled(0.5, diagram))

    # 2n after the first nesting, then the whole 2n again scaled
    assert len(_record(diagram)) == 4 * n


def test_added_diagram_is_a_snapshot():
    inner = Diagram([Circle(Point(0, 0), 1)])
    outer = Diagram()
    outer.add(inner)

    inner.add(Circle(Point(5, 5), 1))

    assert len(inner) == 2
    assert len(outer.elements[0]) == 1


def test_copies_share_storage_until_written():
    original = Diagram([Circle(Point(0, 0), 1)])
    clone = original.copy()
    assert clone._elements is original._elements

    clone.add(Bubble(Point(1, 1), 1))

    assert len(original) == 1
    assert len(clone) == 2
    assert clone._elements is not original._elements


def test_nested_diagrams_of_a_copy_are_independent():
    diagram = Diagram([Circle(Point(10, 10), 5)])
    diagram.add(diagram)
    clone = diagram.copy()

    clone.elements[1].add(Circle(Point(0, 0), 1))
    for element in clone:
        if isinstance(element, Diagram):
            element.add(Circle(Point(0, 0), 1))

    assert len(_record(diagram)) == 2
    assert len(_record(clone)) == 2


def test_scaled_subject_cannot_be_changed_through_elements():
    diagram = Diagram([Scaled(0.5, Diagram([Circle(Point(10, 10), 5)]))])

    diagram.elements[0].subject.add(Circle(Point(0, 0), 1))

    assert len(_record(diagram)) == 1


def test_scaled_is_unhashable():
    with pytest.raises(TypeError):
        hash(Scaled(0.5, Diagram([Circle(Point(0, 0), 1)])))
    with pytest.raises(TypeError):
        hash(Scaled(2, Circle(Point(0, 0), 1)))


def test_diagram_equality_is_elementwise():
    circle = Circle(Point(0, 0), 1)
    triangle = regular_polygon(3, Point(0, 0), 1)

    assert Diagram([circle, triangle]) == Diagram([circle, triangle])
    assert Diagram([circle, triangle]) != Diagram([triangle, circle])
    assert Diagram([circle]) != circle
    assert Scaled(0.5, Diagram([circle])) == Scaled(0.5, Diagram([circle]))
    assert Scaled(0.5, Diagram([circle])) != Scaled(0.3, Diagram([circle]))


def test_scaled_applies_to_positions_and_radii():
    renderer = _record(Scaled(2, Circle(Point(10, 20), 5)))

    (command,) = renderer.commands
    assert command.name == "arc_at"
    center, radius, start, end = command.args
    assert center == Point(20, 40)
    assert radius == 10
    assert start == 0.0


def test_scaled_rejects_negative_scale():
    with pytest.raises(ValueError):
        Scaled(-1, Circle(Point(0, 0), 1))


def test_sample_diagram_layout():
    sample = sample_diagram(DRAWING_AREA)
    circle, triangle, square, shifted = sample.elements

    assert circle == Circle(Point(187.5, 333.5), 93.75)
    assert len(triangle.corners) == 3
    assert square.bounds == Rect(156.25, 333.5, 15.625, 15.625)
    assert shifted.center == Point(187.5, 333.5 + 93.75 * 2.5)
    assert _record(sample).names() == SAMPLE_COMMANDS


def test_showcase_nests_and_adds_bubble():
    showcase = showcase_diagram(DRAWING_AREA)
    renderer = _record(showcase)

    assert renderer.names() == SAMPLE_COMMANDS + SAMPLE_COMMANDS + ["circle_at", "circle_at"]

    nested_arc = renderer.commands[len(SAMPLE_COMMANDS)]
    center, radius = nested_arc.args[0], nested_arc.args[1]
    assert center.x == pytest.approx(187.5 * 0.3)
    assert center.y == pytest.approx(333.5 * 0.3)
    assert radius == pytest.approx(93.75 * 0.3)

    bubble = showcase.elements[-1]
    assert isinstance(bubble, Bubble)
    assert bubble.radius == pytest.approx(37.5)
    assert bubble.center.x == pytest.approx(330)
    assert bubble.center.y == pytest.approx(45)


def test_showcase_switches():
    plain = showcase_diagram(DRAWING_AREA, nest=False, bubble=False)
    assert plain == sample_diagram(DRAWING_AREA)

    base = Diagram([Circle(Point(1, 1), 1)])
    built = showcase_diagram(DRAWING_AREA, nest=True, bubble=False, base=base)
    assert len(built) == 2
    assert len(base) == 1
