"""
Test Renderers
==============

Console dump, scaling adapter, SVG markup and raster frames.

Usage:
    pytest test_renderers.py
"""

import math

import cv2
import numpy as np
import pytest
import supervision as sv

from crustacean_shapes import (
    Bubble,
    Circle,
    ConsoleRenderer,
    Point,
    Polygon,
    Rect,
    Rectangle,
    RasterRenderer,
    RecordingRenderer,
    Scaled,
    ScaledRenderer,
    SVGDocument,
    SVGRenderer,
    render_frame,
    save_frame,
)
from crustacean_shapes.rendering import blank_frame


# ========== Console ==========

def test_console_renderer_prints_commands(capsys):
    renderer = ConsoleRenderer()
    Polygon([(0, 0), (10, 0), (10, 10)]).draw(renderer)
    Circle(Point(187.5, 100), 50).draw(renderer)
    Rectangle(Rect(75, 50, 100, 100)).draw(renderer)
    Bubble(Point(100, 100), 10).draw(renderer)

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "move_to(10, 10)",
        "line_to(0, 0)",
        "line_to(10, 0)",
        "line_to(10, 10)",
        "arc_at((187.5, 100), radius: 50, start_angle: 0, end_angle: 6.28319)",
        "rectangle_at(75, 50, 100, 100)",
        "circle_at((100, 100), 10)",
        "circle_at((102, 96), 3.3)",
    ]


def test_console_renderer_custom_sink():
    lines = []
    ConsoleRenderer(write=lines.append).move_to(Point(1.5, 2))
    assert lines == ["move_to(1.5, 2)"]


# ========== Scaling ==========

def test_scaled_renderer_keeps_specialised_commands():
    lines = []
    renderer = ScaledRenderer(ConsoleRenderer(write=lines.append), scale=2)

    renderer.move_to(Point(1, 2))
    renderer.circle_at(Point(1, 1), 2)
    renderer.rectangle_at(Rect(1, 1, 2, 3))
    renderer.arc_at(Point(1, 1), 1, 0.5, 1.5)

    assert lines == [
        "move_to(2, 4)",
        "circle_at((2, 2), 4)",
        "rectangle_at(2, 2, 4, 6)",
        "arc_at((2, 2), radius: 2, start_angle: 0.5, end_angle: 1.5)",
    ]


def test_scaled_renderer_rejects_negative_scale():
    with pytest.raises(ValueError):
        ScaledRenderer(RecordingRenderer(), -0.5)


# ========== Recording ==========

def test_recording_renderer_counts_and_clears():
    renderer = RecordingRenderer()
    Polygon([(0, 0), (1, 0), (1, 1)]).draw(renderer)

    assert renderer.count("line_to") == 3
    assert renderer.count("move_to") == 1
    renderer.clear()
    assert len(renderer) == 0


# ========== SVG ==========

def test_svg_path_then_circle_in_order():
    renderer = SVGRenderer(width=200, height=100)
    Polygon([(0, 0), (10, 0), (10, 10)]).draw(renderer)
    Circle(Point(50, 50), 20).draw(renderer)

    assert renderer.commands[0].startswith("<path d='M 10 10 L 0 0 L 10 0 L 10 10'")
    assert renderer.commands[1] == (
        "<circle cx='50' cy='50' r='20' stroke='red' fill='yellow' stroke-width='5' />"
    )


def test_svg_rectangle_uses_shape_style():
    renderer = SVGRenderer()
    Rectangle(Rect(75, 50, 100, 100)).draw(renderer)

    assert renderer.commands == [
        "<rect x='75' y='50' width='100' height='100' stroke='teal' fill='aqua' stroke-width='5' />"
    ]


def test_svg_bare_circles_use_renderer_style():
    renderer = SVGRenderer()
    Bubble(Point(100, 100), 10).draw(renderer)

    assert len(renderer.commands) == 2
    assert renderer.commands[0] == (
        "<circle cx='100' cy='100' r='10' stroke='#399DF9' fill='none' stroke-width='3' />"
    )


def test_svg_partial_arc_is_path_arc():
    renderer = SVGRenderer()
    renderer.arc_at(Point(0, 0), 10, 0, math.pi / 2)

    (path,) = renderer.commands
    assert path.startswith("<path d='M 10 0 A 10 10 0 0 1 ")


def test_svg_scaled_circle_keeps_element_form():
    renderer = SVGRenderer()
    Scaled(2, Circle(Point(10, 10), 5)).draw(renderer)

    assert renderer.commands[0].startswith("<circle cx='20' cy='20' r='10'")
    assert "stroke-width='10'" in renderer.commands[0]


def test_svg_scaled_rectangle_keeps_element_form():
    renderer = SVGRenderer()
    Scaled(2, Rectangle(Rect(1, 1, 2, 3))).draw(renderer)

    assert renderer.commands == [
        "<rect x='2' y='2' width='4' height='6' stroke='teal' fill='aqua' stroke-width='10' />"
    ]


def test_scaled_bubble_still_prints_circles():
    lines = []
    Scaled(2, Bubble(Point(100, 100), 10)).draw(ConsoleRenderer(write=lines.append))

    assert lines == ["circle_at((200, 200), 20)", "circle_at((204, 192), 6.6)"]


def test_svg_and_html_documents():
    renderer = SVGRenderer(width=200, height=100)
    Circle(Point(50, 50), 20).draw(renderer)

    svg = renderer.svg_string
    assert svg.startswith("<svg width='200' height='100'")
    assert "style=\"fill:rgb(25,25,25)\"" in svg
    assert svg.endswith("</svg>")
    assert renderer.html_string.startswith("<!DOCTYPE html>")
    assert svg in renderer.html_string


def test_svg_document_renders_fresh_each_time():
    document = SVGDocument(width=960, height=500)
    document.append(Rectangle(Rect(75, 50, 100, 100)))
    document.append(Circle(Point(187.5, 100), 93.75))

    html = document.html_string
    assert "<rect x='75' y='50'" in html
    assert "<circle cx='187.5' cy='100' r='93.75'" in html
    assert document.html_string == html

    recorder = RecordingRenderer()
    document.draw(recorder)
    assert recorder.names() == ["rectangle_at", "arc_at"]


# ========== Raster ==========

def test_blank_frame_is_white():
    frame = blank_frame(50, 40)
    assert frame.shape == (40, 50, 3)
    assert frame.dtype == np.uint8
    assert (frame == 255).all()


def test_raster_path_building():
    renderer = RasterRenderer(blank_frame(20, 20), arc_segments=64)
    renderer.move_to(Point(1, 1))
    renderer.line_to(Point(5, 5))
    renderer.arc_at(Point(10, 10), 3, 0, 2 * math.pi)
    renderer.rectangle_at(Rect(2, 2, 4, 4))

    subpaths = renderer.subpaths
    assert [len(s) for s in subpaths] == [2, 65, 5]
    assert subpaths[2][0] == subpaths[2][-1]


def test_raster_stroke_draws_and_clears():
    renderer = RasterRenderer(blank_frame(50, 50))
    Polygon([(10, 10), (40, 10), (40, 40), (10, 40)]).draw(renderer)

    frame = renderer.stroke_path(color=sv.Color(r=57, g=157, b=249), thickness=3)

    assert renderer.subpaths == []
    assert not np.array_equal(frame[10, 25], [255, 255, 255])
    assert np.array_equal(frame[25, 25], [255, 255, 255])


def test_render_frame_leaves_input_untouched():
    base = blank_frame(60, 60)
    frame = render_frame(Circle(Point(30, 30), 20), width=60, height=60, frame=base)

    assert (base == 255).all()
    assert not (frame == 255).all()


def test_raster_rejects_bad_frames():
    with pytest.raises(TypeError):
        RasterRenderer([[0, 0, 0]])
    with pytest.raises(ValueError):
        RasterRenderer(np.zeros((10, 10), dtype=np.uint8))


def test_save_frame(tmp_path):
    frame = render_frame(Bubble(Point(30, 30), 20), width=60, height=60)
    path = save_frame(frame, tmp_path / "nested" / "bubble.png")

    assert path.exists()
    assert cv2.imread(str(path)).shape == (60, 60, 3)
