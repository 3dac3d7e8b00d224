"""Point math and arrowhead construction."""
from __future__ import annotations

import math

from madcircle.types import ArrowShape, Point

DEFAULT_BARB_LENGTH = 10.0
DEFAULT_BARB_ANGLE = math.pi / 4


def sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def lerp(a: Point, b: Point, t: float) -> Point:
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def direction(start: Point, end: Point) -> float:
    """Angle of the segment ``start -> end`` in radians.

    A zero-length segment points along +x (angle 0).
    """
    dx, dy = sub(end, start)
    if dx == 0 and dy == 0:
        return 0.0
    return math.atan2(dy, dx)


def compute_arrow(
    start: Point,
    end: Point,
    barb_length: float = DEFAULT_BARB_LENGTH,
    barb_angle: float = DEFAULT_BARB_ANGLE,
) -> ArrowShape:
    """Build the arrow for ``start -> end``.

    Both barbs leave ``end`` along the reversed segment direction, rotated by
    ``-barb_angle`` and ``+barb_angle`` respectively, each ``barb_length`` long.
    """
    if barb_length < 0:
        raise ValueError(f"barb_length must be >= 0, got {barb_length}")
    start = Point(*start)
    end = Point(*end)
    back = direction(start, end) + math.pi
    left = back - barb_angle
    right = back + barb_angle
    return ArrowShape(
        start=start,
        end=end,
        barb_left=Point(end.x + barb_length * math.cos(left), end.y + barb_length * math.sin(left)),
        barb_right=Point(end.x + barb_length * math.cos(right), end.y + barb_length * math.sin(right)),
    )
