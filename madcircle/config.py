"""Session configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass

from madcircle.easing import EASINGS

Color = tuple[int, int, int]


@dataclass(frozen=True)
class MadCircleConfig:
    """Immutable configuration for a marker session.

    Attributes:
        tps: Engine ticks per second; segment durations round to whole ticks.
        initial_speed: Segment duration in seconds before any speed change.
        min_speed: Lower clamp for speed changes.
        max_speed: Upper clamp for speed changes; also the slider's origin.
        barb_length: Length of each arrowhead barb.
        barb_angle: Angle in radians between each barb and the shaft.
        easing: Name of the interpolation curve in ``EASINGS``.
        marker_diameter: Marker size for renderers.
        marker_opacity: Marker alpha in ``[0, 1]``.
        arrow_opacity: Arrow alpha in ``[0, 1]``.
        arrow_width: Arrow stroke width.
        palette: Colors a renderer may pick the marker color from.
    """

    tps: int = 60
    initial_speed: float = 1.0
    min_speed: float = 0.0
    max_speed: float = 1.0
    barb_length: float = 10.0
    barb_angle: float = math.pi / 4
    easing: str = "ease_in_out"
    marker_diameter: int = 50
    marker_opacity: float = 0.5
    arrow_opacity: float = 0.3
    arrow_width: int = 1
    palette: tuple[Color, ...] = (
        (255, 204, 0),
        (0, 122, 255),
        (52, 199, 89),
    )

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.min_speed > self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) must not exceed max_speed ({self.max_speed})"
            )
        if self.barb_length < 0:
            raise ValueError(f"barb_length must be >= 0, got {self.barb_length}")
        if self.easing not in EASINGS:
            raise ValueError(f"Unknown easing {self.easing!r}")
        for name in ("marker_opacity", "arrow_opacity"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
