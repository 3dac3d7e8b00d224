"""madcircle - A marker that chases queued touches, drawing arrows as it goes."""

from madcircle.bus import SignalBus
from madcircle.config import MadCircleConfig
from madcircle.coordinator import ANIMATING, IDLE, TouchQueueCoordinator
from madcircle.driver import AnimationDriver, Segment, make_animation_system
from madcircle.engine import Engine
from madcircle.geometry import compute_arrow
from madcircle.overlay import TrajectoryOverlay
from madcircle.session import Session
from madcircle.types import AnimationInFlightError, ArrowShape, MarkerState, Point, TickContext

__all__ = [
    "Session",
    "MadCircleConfig",
    "Engine",
    "SignalBus",
    "TouchQueueCoordinator",
    "AnimationDriver",
    "Segment",
    "make_animation_system",
    "TrajectoryOverlay",
    "compute_arrow",
    "Point",
    "ArrowShape",
    "MarkerState",
    "TickContext",
    "AnimationInFlightError",
    "IDLE",
    "ANIMATING",
]
