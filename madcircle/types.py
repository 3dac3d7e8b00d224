"""Shared value types, protocols, and errors for the animation engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import Callable, NamedTuple


class Point(NamedTuple):
    """A 2D coordinate used for touch locations and the marker center."""

    x: float
    y: float


Line = tuple[Point, Point]


@dataclass(frozen=True, slots=True)
class ArrowShape:
    """A drawn segment: shaft from ``start`` to ``end`` plus two barbs at ``end``."""

    start: Point
    end: Point
    barb_left: Point
    barb_right: Point

    def strokes(self) -> tuple[Line, Line, Line]:
        """Return the shaft and both barbs as ``(from, to)`` line pairs."""
        return (
            (self.start, self.end),
            (self.end, self.barb_left),
            (self.end, self.barb_right),
        )


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class AnimationInFlightError(RuntimeError):
    """Raised when a segment is started while another is still animating."""

    def __init__(self, start: Point, end: Point) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Cannot animate {tuple(start)} -> {tuple(end)}: a segment is already in flight"
        )


System = Callable[[TickContext], None]


@dataclass(slots=True)
class MarkerState:
    """The moving marker: its current center and whether a segment is in flight."""

    center: Point = Point(0.0, 0.0)
    animating: bool = False
