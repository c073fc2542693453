"""
Raster Renderer Module
======================

Graphics-context adapter: turns drawing commands into pixels on a frame.

Design:
- Path building and stroking are separate steps (like a graphics context):
  commands only add sub-paths, stroke_path() paints and clears them
- Arcs are approximated by polylines (numpy linspace sampling)
- Uses supervision drawing utilities for the actual pixels

Dependencies:
- supervision (draw_line, Color, Point)
- numpy (frames, arc sampling)
- opencv (writing images to disk)
"""

from pathlib import Path
from typing import List, Optional, Union

import cv2
import numpy as np
import supervision as sv

from crustacean_shapes.geometry.primitives import TWO_PI, Point, Rect
from crustacean_shapes.rendering.base import Renderer

LIGHT_BLUE = sv.Color(r=57, g=157, b=249)
WHITE = sv.Color(r=255, g=255, b=255)


class RasterRenderer(Renderer):
    """
    Renderer that accumulates a path over a numpy image frame.

    Usage:
        renderer = RasterRenderer(frame)
        diagram.draw(renderer)
        frame = renderer.stroke_path(color=LIGHT_BLUE, thickness=3)

    Attributes:
        frame: BGR image (H x W x 3, uint8) drawn into by stroke_path()
        arc_segments: Polyline segments used for a full circle
    """

    def __init__(self, frame: np.ndarray, arc_segments: int = 64):
        if not isinstance(frame, np.ndarray):
            raise TypeError(f"frame must be np.ndarray, got {type(frame)}")
        if frame.ndim != 3 or frame.shape[2] != 3:
            raise ValueError(f"frame must be HxWx3, got shape {frame.shape}")
        if arc_segments < 4:
            raise ValueError(f"arc_segments must be >= 4, got {arc_segments}")
        self.frame = frame
        self.arc_segments = arc_segments
        self._subpaths: List[List[Point]] = []

    @property
    def subpaths(self) -> List[List[Point]]:
        """Current (not yet stroked) path, one point list per sub-path."""
        return [list(subpath) for subpath in self._subpaths]

    def move_to(self, position: Point) -> None:
        self._subpaths.append([position])

    def line_to(self, position: Point) -> None:
        if not self._subpaths:
            self._subpaths.append([position])
            return
        self._subpaths[-1].append(position)

    def arc_at(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        sweep = abs(end_angle - start_angle)
        samples = max(2, int(np.ceil(self.arc_segments * sweep / TWO_PI)) + 1)
        angles = np.linspace(start_angle, end_angle, samples)
        self._subpaths.append([
            Point(float(center.x + radius * np.cos(a)), float(center.y + radius * np.sin(a)))
            for a in angles
        ])

    def rectangle_at(self, rect: Rect) -> None:
        corners = rect.corners()
        self._subpaths.append(list(corners) + [corners[0]])

    def stroke_path(self, color: sv.Color = LIGHT_BLUE, thickness: int = 3) -> np.ndarray:
        """
        Stroke every sub-path onto the frame, then clear the path.

        Args:
            color: Stroke color
            thickness: Line width in pixels

        Returns:
            The frame with the path drawn
        """
        for subpath in self._subpaths:
            for start, end in zip(subpath, subpath[1:]):
                self.frame = sv.draw_line(
                    scene=self.frame,
                    start=sv.Point(x=start.x, y=start.y),
                    end=sv.Point(x=end.x, y=end.y),
                    color=color,
                    thickness=thickness,
                )
        self._subpaths = []
        return self.frame


def blank_frame(width: int, height: int, background: sv.Color = WHITE) -> np.ndarray:
    """Create an HxWx3 frame filled with the background color (BGR order)."""
    if width <= 0 or height <= 0:
        raise ValueError(f"frame size must be positive, got {width}x{height}")
    frame = np.zeros((height, width, 3), dtype=np.uint8)
    frame[:, :] = background.as_bgr()
    return frame


def render_frame(
    drawable,
    width: int,
    height: int,
    color: sv.Color = LIGHT_BLUE,
    thickness: int = 3,
    background: sv.Color = WHITE,
    frame: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Draw a drawable into a frame and stroke the resulting path.

    Args:
        drawable: Anything with draw(renderer)
        width: Frame width (ignored when frame is given)
        height: Frame height (ignored when frame is given)
        color: Stroke color
        thickness: Stroke width
        background: Fill for a new frame
        frame: Existing frame to draw on (copied, never modified)

    Returns:
        New frame with the drawing
    """
    target = frame.copy() if frame is not None else blank_frame(width, height, background)
    renderer = RasterRenderer(target)
    drawable.draw(renderer)
    return renderer.stroke_path(color=color, thickness=thickness)


def save_frame(frame: np.ndarray, path: Union[str, Path]) -> Path:
    """Write a frame to disk (format from the file extension)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), frame):
        raise IOError(f"Failed to write image: {path}")
    return path
