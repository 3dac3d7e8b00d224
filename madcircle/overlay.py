"""Trajectory overlay: the arrows drawn so far."""
from __future__ import annotations

import logging
from typing import Iterator

from madcircle.bus import ARROW_ADDED, ARROWS_CLEARED, SignalBus
from madcircle.types import ArrowShape

logger = logging.getLogger(__name__)


class TrajectoryOverlay:
    """Holds every arrow added since the last clear, in drawing order."""

    def __init__(self, bus: SignalBus | None = None) -> None:
        self._bus = bus
        self._arrows: list[ArrowShape] = []

    @property
    def arrows(self) -> tuple[ArrowShape, ...]:
        return tuple(self._arrows)

    def __len__(self) -> int:
        return len(self._arrows)

    def __iter__(self) -> Iterator[ArrowShape]:
        return iter(tuple(self._arrows))

    def add_arrow(self, shape: ArrowShape) -> None:
        self._arrows.append(shape)
        if self._bus is not None:
            self._bus.publish(ARROW_ADDED, shape=shape)

    def clear(self) -> None:
        """Remove all arrows. Clearing an empty overlay does nothing."""
        if not self._arrows:
            return
        count = len(self._arrows)
        self._arrows.clear()
        logger.debug("Cleared %d arrows", count)
        if self._bus is not None:
            self._bus.publish(ARROWS_CLEARED, count=count)
