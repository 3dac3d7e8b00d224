"""Session - wires engine, bus, overlay, driver, and coordinator together.

The session is the boundary between the core and whatever UI drives it. UI
layers report ``touch_ended``, ``speed_changed`` and ``clear_requested`` and
subscribe to bus signals for rendering.
"""
from __future__ import annotations

import logging
from typing import Sequence

from madcircle.bus import Handler, SignalBus, make_signal_system
from madcircle.config import MadCircleConfig
from madcircle.coordinator import TouchQueueCoordinator
from madcircle.driver import AnimationDriver, make_animation_system
from madcircle.engine import Engine
from madcircle.overlay import TrajectoryOverlay
from madcircle.types import MarkerState, Point

logger = logging.getLogger(__name__)


class Session:
    def __init__(
        self,
        config: MadCircleConfig | None = None,
        origin: Sequence[float] = (0.0, 0.0),
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else MadCircleConfig()
        self.engine = Engine(tps=self.config.tps, seed=seed)
        self.bus = SignalBus()
        self.overlay = TrajectoryOverlay(self.bus)
        self.marker = MarkerState(center=Point(*origin))
        self.driver = AnimationDriver(
            self.marker,
            self.overlay,
            self.engine.clock,
            bus=self.bus,
            barb_length=self.config.barb_length,
            barb_angle=self.config.barb_angle,
            easing=self.config.easing,
        )
        self.coordinator = TouchQueueCoordinator(
            self.driver,
            speed=self.config.initial_speed,
            min_speed=self.config.min_speed,
            max_speed=self.config.max_speed,
        )

        # Animation first so the bus flush sees this tick's effects
        self.engine.add_system(make_animation_system(self.driver))
        self.engine.add_system(make_signal_system(self.bus))

    # --- Boundary events ---

    def touch_ended(self, point: Sequence[float]) -> None:
        self.coordinator.on_touch_ended(Point(*point))

    def speed_changed(self, value: float) -> float:
        speed = self.coordinator.speed_changed(value)
        logger.debug("Speed set to %.3f (requested %.3f)", speed, value)
        return speed

    def slider_changed(self, value: float) -> float:
        """Map a slider position onto speed: further right means faster."""
        return self.speed_changed(self.config.max_speed - value)

    def clear_requested(self) -> None:
        self.overlay.clear()

    # --- Effects and time ---

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self.bus.subscribe(signal_name, handler)

    @property
    def idle(self) -> bool:
        return not self.marker.animating

    def step(self) -> None:
        self.engine.step()

    def run(self, n: int) -> None:
        self.engine.run(n)

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """Step until the queue is drained. Returns the number of ticks taken.

        Raises ``RuntimeError`` if still animating after ``max_ticks``.
        """
        ticks = 0
        while not self.idle:
            if ticks >= max_ticks:
                raise RuntimeError(f"Still animating after {max_ticks} ticks")
            self.engine.step()
            ticks += 1
        return ticks
