"""Touch-queue coordinator: serializes touches into one stream of segments.

Two states. While ``idle`` a touch starts a segment at once; while
``animating`` it is appended to a FIFO of pending targets. Each completed
segment pops the next target, or drops back to ``idle`` when none is left.
"""
from __future__ import annotations

import logging
import threading
from collections import deque
from typing import TYPE_CHECKING

from madcircle.types import MarkerState, Point

if TYPE_CHECKING:
    from madcircle.driver import AnimationDriver

logger = logging.getLogger(__name__)

IDLE = "idle"
ANIMATING = "animating"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class TouchQueueCoordinator:
    """Decides, per touch or completion, whether to animate now or buffer.

    All queue and marker-flag access happens under one lock, so touches may
    arrive from a thread other than the one ticking the engine.
    """

    def __init__(
        self,
        driver: AnimationDriver,
        speed: float = 1.0,
        min_speed: float = 0.0,
        max_speed: float = 1.0,
    ) -> None:
        if min_speed > max_speed:
            raise ValueError(
                f"min_speed ({min_speed}) must not exceed max_speed ({max_speed})"
            )
        self._driver = driver
        driver.coordinator = self
        self._min_speed = min_speed
        self._max_speed = max_speed
        self._speed = clamp(speed, min_speed, max_speed)
        self._pending: deque[Point] = deque()
        self._lock = threading.Lock()

    @property
    def marker(self) -> MarkerState:
        return self._driver.marker

    @property
    def state(self) -> str:
        return ANIMATING if self.marker.animating else IDLE

    @property
    def speed(self) -> float:
        return self._speed

    def pending(self) -> int:
        """Return the number of targets waiting behind the in-flight segment."""
        with self._lock:
            return len(self._pending)

    def pending_targets(self) -> tuple[Point, ...]:
        with self._lock:
            return tuple(self._pending)

    def on_touch_ended(self, point: Point) -> None:
        point = Point(*point)
        with self._lock:
            if self.marker.animating:
                self._pending.append(point)
                logger.debug(
                    "Queued %s (%d pending)", tuple(point), len(self._pending)
                )
                return
            self._begin(point)

    def on_animation_completed(self) -> None:
        with self._lock:
            if not self.marker.animating:
                logger.debug("Completion while idle ignored")
                return
            if self._driver.in_flight:
                logger.debug("Completion while a segment is still moving ignored")
                return
            if self._pending:
                self._begin(self._pending[0])
                self._pending.popleft()
                return
            self.marker.animating = False
            logger.debug("Queue drained, marker idle at %s", tuple(self.marker.center))

    def speed_changed(self, value: float) -> float:
        """Store a new speed, clamped into range. Applies from the next segment."""
        with self._lock:
            self._speed = clamp(value, self._min_speed, self._max_speed)
            return self._speed

    def _begin(self, target: Point) -> None:
        self.marker.animating = True
        self._driver.animate(self.marker.center, target, self._speed)
