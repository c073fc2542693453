"""
Test Shapes, Colors and Geometry
================================

Checks the command streams shapes emit and their value behaviour.

Usage:
    pytest test_shapes.py
"""

import math

import pytest

from crustacean_shapes import (
    TWO_PI,
    Bubble,
    Circle,
    ColorName,
    CSSColor,
    Point,
    Polygon,
    Rect,
    Rectangle,
    RecordingRenderer,
    Renderer,
    Style,
    regular_polygon,
    total_perimeter,
)


class PenRenderer(Renderer):
    """Implements only the three primitives, so every default is exercised."""

    def __init__(self):
        self.calls = []

    def move_to(self, position):
        self.calls.append(("move_to", position))

    def line_to(self, position):
        self.calls.append(("line_to", position))

    def arc_at(self, center, radius, start_angle, end_angle):
        self.calls.append(("arc_at", center, radius, start_angle, end_angle))


# ========== Primitives ==========

def test_rect_edges_and_center():
    rect = Rect(x=10, y=20, width=30, height=40)
    assert (rect.min_x, rect.max_x, rect.min_y, rect.max_y) == (10, 40, 20, 60)
    assert rect.center == Point(25, 40)
    assert rect.corners() == (Point(10, 20), Point(10, 60), Point(40, 60), Point(40, 20))


def test_rect_rejects_negative_size():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 5)


def test_point_scaling_is_a_new_value():
    p = Point(2, 3)
    assert p.scaled(2) == Point(4, 6)
    assert p == Point(2, 3)


# ========== Colors ==========

def test_css_color_descriptions():
    assert str(CSSColor.named(ColorName.FUCHSIA)) == "fuchsia"
    assert str(CSSColor.rgb(100, 100, 100)) == "#646464"
    assert str(CSSColor.gray(0xAA)) == "#AAAAAA"


def test_css_color_resolves_named_rgb():
    assert CSSColor.named(ColorName.TEAL).as_rgb() == (0, 128, 128)
    color = CSSColor.named(ColorName.RED).to_sv_color()
    assert (color.r, color.g, color.b) == (255, 0, 0)


def test_css_color_validation():
    with pytest.raises(ValueError):
        CSSColor.rgb(256, 0, 0)
    with pytest.raises(ValueError):
        CSSColor()
    with pytest.raises(ValueError):
        CSSColor(name=ColorName.RED, rgb_value=(1, 2, 3))


def test_style_rejects_negative_stroke_width():
    with pytest.raises(ValueError):
        Style(stroke_width=-1)


# ========== Drawing commands ==========

def test_polygon_starts_at_last_corner():
    renderer = PenRenderer()
    Polygon([(0, 0), (10, 0), (10, 10)]).draw(renderer)

    assert renderer.calls == [
        ("move_to", Point(10, 10)),
        ("line_to", Point(0, 0)),
        ("line_to", Point(10, 0)),
        ("line_to", Point(10, 10)),
    ]


def test_empty_polygon_draws_nothing():
    renderer = PenRenderer()
    Polygon().draw(renderer)
    assert renderer.calls == []


def test_circle_draws_full_arc_by_default():
    renderer = PenRenderer()
    Circle(Point(187.5, 100), 50).draw(renderer)
    assert renderer.calls == [("arc_at", Point(187.5, 100), 50, 0.0, TWO_PI)]


def test_rectangle_default_is_closed_path():
    renderer = PenRenderer()
    Rectangle(Rect(75, 50, 100, 100)).draw(renderer)

    assert renderer.calls == [
        ("move_to", Point(75, 50)),
        ("line_to", Point(75, 150)),
        ("line_to", Point(175, 150)),
        ("line_to", Point(175, 50)),
        ("line_to", Point(75, 50)),
    ]


def test_bubble_draws_outer_and_highlight_circles():
    renderer = RecordingRenderer()
    Bubble(Point(100, 100), 10).draw(renderer)

    assert renderer.names() == ["circle_at", "circle_at"]
    outer, highlight = renderer.commands
    assert outer.args == (Point(100, 100), 10)
    assert highlight.args[0] == Point(102, 96)
    assert highlight.args[1] == pytest.approx(3.3)


def test_bubble_circles_fall_back_to_arcs():
    renderer = PenRenderer()
    Bubble(Point(0, 0), 10).draw(renderer)
    assert [call[0] for call in renderer.calls] == ["arc_at", "arc_at"]


# ========== Equality ==========

def test_equality_is_heterogeneous():
    circle = Circle(Point(0, 0), 1)
    bubble = Bubble(Point(0, 0), 1)

    assert circle == Circle(Point(0, 0), 1)
    assert circle != bubble
    assert not circle.is_equal_to(bubble)
    assert Polygon([(0, 0), (1, 1), (2, 0)]) == Polygon([Point(0, 0), Point(1, 1), Point(2, 0)])


# ========== Closed shapes ==========

def test_areas_and_perimeters():
    square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
    assert square.area == pytest.approx(100)
    assert square.perimeter == pytest.approx(40)

    circle = Circle(Point(0, 0), 1)
    assert circle.area == pytest.approx(math.pi)
    assert circle.perimeter == pytest.approx(2 * math.pi)

    rectangle = Rectangle(Rect(0, 0, 100, 100))
    assert rectangle.area == 10000
    assert rectangle.perimeter == 400


def test_total_perimeter():
    circle = Circle(Point(187.5, 100), 93.75)
    rectangle = Rectangle(Rect(75, 50, 800, 375))
    expected = 2 * math.pi * 93.75 + 2 * (800 + 375)
    assert total_perimeter([circle, rectangle]) == pytest.approx(expected)


def test_circle_value_helpers():
    circle = Circle(Point(10, 10), 5)
    assert circle.diameter == 10
    assert circle.with_diameter(30).radius == 15
    moved = circle.shifted(1, 2)
    assert moved.center == Point(11, 12)
    assert circle.center == Point(10, 10)


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        Circle(Point(0, 0), -1)
    with pytest.raises(ValueError):
        Bubble(Point(0, 0), -1)


# ========== Regular polygons ==========

def test_regular_triangle_corners():
    triangle = regular_polygon(3, Point(0, 0), 1)
    xs = [c.x for c in triangle.corners]
    ys = [c.y for c in triangle.corners]

    assert xs == pytest.approx([0.0, math.sqrt(3) / 2, -math.sqrt(3) / 2])
    assert ys == pytest.approx([1.0, -0.5, -0.5])


def test_regular_polygon_needs_three_sides():
    with pytest.raises(ValueError):
        regular_polygon(2, Point(0, 0), 1)
