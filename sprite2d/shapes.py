"""Vertex lists for the outline and filled primitives drawn on a canvas."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

Point = Tuple[int, int]

SEGMENTS = 100
_PI = 3.1415926


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def _ellipse_points(cx: int, cy: int, rx: int, ry: int, count: int) -> List[Point]:
    points = []
    for i in range(count):
        theta = 2.0 * _PI * i / SEGMENTS
        points.append((_round(cx + rx * math.cos(theta)), _round(cy + ry * math.sin(theta))))
    return points


def rect_corners(x: int, y: int, w: int, h: int) -> List[Point]:
    """Corners of a rectangle, clockwise from its top-left."""
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def circle_outline(cx: int, cy: int, r: int) -> List[Point]:
    """Points of a closed loop approximating a circle."""
    return _ellipse_points(cx, cy, r, r, SEGMENTS)


def circle_fan(cx: int, cy: int, r: int) -> List[Point]:
    """Triangle-fan vertices for a filled circle: centre, then the rim closed."""
    return [(cx, cy)] + _ellipse_points(cx, cy, r, r, SEGMENTS + 1)


def oval_outline(cx: int, cy: int, rx: int, ry: int) -> List[Point]:
    """Points of a closed loop approximating an axis-aligned ellipse."""
    return _ellipse_points(cx, cy, rx, ry, SEGMENTS)


def oval_fan(cx: int, cy: int, rx: int, ry: int) -> List[Point]:
    """Triangle-fan vertices for a filled ellipse: centre, then the rim closed."""
    return [(cx, cy)] + _ellipse_points(cx, cy, rx, ry, SEGMENTS + 1)


def polygon_vertices(points: Iterable[Tuple[int, int]]) -> List[Point]:
    """Vertices of a polygon, or an empty list when fewer than three are given."""
    vertices = [(int(x), int(y)) for x, y in points]
    return vertices if len(vertices) >= 3 else []