"""Animation driver: moves the marker along one segment at a time.

The driver owns at most one in-flight :class:`Segment`. Each engine tick the
animation system advances it, publishes the new marker position, and on
completion hands control back to the coordinator, which may start the next
segment straight away.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from madcircle.bus import MARKER_MOVED, SEGMENT_COMPLETED, SEGMENT_STARTED, SignalBus
from madcircle.easing import get_easing
from madcircle.geometry import DEFAULT_BARB_ANGLE, DEFAULT_BARB_LENGTH, compute_arrow, lerp
from madcircle.types import AnimationInFlightError, MarkerState, Point

if TYPE_CHECKING:
    from madcircle.clock import Clock
    from madcircle.coordinator import TouchQueueCoordinator
    from madcircle.overlay import TrajectoryOverlay
    from madcircle.types import TickContext

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    start: Point
    end: Point
    duration: int
    elapsed: int = 0
    easing: str = "linear"

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration


class AnimationDriver:
    """Interpolates the marker toward a target and draws the segment's arrow.

    ``coordinator`` is a plain back-reference set by the coordinator itself;
    the driver calls its ``on_animation_completed`` when a segment finishes.
    """

    def __init__(
        self,
        marker: MarkerState,
        overlay: TrajectoryOverlay,
        clock: Clock,
        bus: SignalBus | None = None,
        barb_length: float = DEFAULT_BARB_LENGTH,
        barb_angle: float = DEFAULT_BARB_ANGLE,
        easing: str = "ease_in_out",
    ) -> None:
        self.marker = marker
        self.coordinator: TouchQueueCoordinator | None = None
        self._overlay = overlay
        self._clock = clock
        self._bus = bus
        self._barb_length = barb_length
        self._barb_angle = barb_angle
        get_easing(easing)  # reject unknown names at construction
        self._easing = easing
        self._segment: Segment | None = None

    @property
    def segment(self) -> Segment | None:
        return self._segment

    @property
    def in_flight(self) -> bool:
        return self._segment is not None

    def animate(self, start: Point, end: Point, duration: float) -> Segment:
        """Start moving the marker from ``start`` to ``end`` over ``duration`` seconds.

        The arrow is added to the overlay at once, at full length. A zero
        duration completes on the next tick the animation system runs.
        """
        if self._segment is not None:
            raise AnimationInFlightError(start, end)
        start = Point(*start)
        end = Point(*end)
        self._overlay.add_arrow(
            compute_arrow(start, end, self._barb_length, self._barb_angle)
        )
        segment = Segment(
            start=start,
            end=end,
            duration=self._clock.ticks_for(duration),
            easing=self._easing,
        )
        self._segment = segment
        logger.debug(
            "Segment %s -> %s over %d ticks", tuple(start), tuple(end), segment.duration
        )
        if self._bus is not None:
            self._bus.publish(
                SEGMENT_STARTED, start=start, end=end, ticks=segment.duration
            )
        return segment

    def advance(self) -> None:
        """Advance the in-flight segment by one tick.

        Segments that finish here are completed in a loop, so a run of
        zero-length segments queued behind this one drains within the same
        tick without growing the call stack.
        """
        segment = self._segment
        if segment is None:
            return
        segment.elapsed = min(segment.elapsed + 1, segment.duration)
        if not segment.done:
            t = get_easing(segment.easing)(segment.progress)
            self._move(lerp(segment.start, segment.end, t))

        while self._segment is not None and self._segment.done:
            self._complete(self._segment)

    def _move(self, point: Point) -> None:
        self.marker.center = point
        if self._bus is not None:
            self._bus.publish(MARKER_MOVED, point=point)

    def _complete(self, segment: Segment) -> None:
        self._segment = None
        self._move(segment.end)
        if self._bus is not None:
            self._bus.publish(SEGMENT_COMPLETED, end=segment.end)
        if self.coordinator is not None:
            self.coordinator.on_animation_completed()


def make_animation_system(driver: AnimationDriver) -> Callable[[TickContext], None]:
    def animation_system(ctx: TickContext) -> None:
        driver.advance()

    return animation_system
