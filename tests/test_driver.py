"""Tests for AnimationDriver and the animation system."""
from __future__ import annotations

import pytest

from madcircle.bus import MARKER_MOVED, SEGMENT_COMPLETED, SEGMENT_STARTED, SignalBus
from madcircle.clock import Clock
from madcircle.driver import AnimationDriver, Segment, make_animation_system
from madcircle.geometry import compute_arrow
from madcircle.overlay import TrajectoryOverlay
from madcircle.types import AnimationInFlightError, MarkerState, Point


class RecordingCoordinator:
    """Stands in for the coordinator; counts completions."""

    def __init__(self) -> None:
        self.completions = 0

    def on_animation_completed(self) -> None:
        self.completions += 1


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


@pytest.fixture
def overlay() -> TrajectoryOverlay:
    return TrajectoryOverlay()


@pytest.fixture
def driver(bus: SignalBus, overlay: TrajectoryOverlay) -> AnimationDriver:
    driver = AnimationDriver(
        MarkerState(), overlay, Clock(tps=10), bus=bus, easing="linear"
    )
    driver.coordinator = RecordingCoordinator()
    return driver


def _advance(driver: AnimationDriver, n: int) -> None:
    for _ in range(n):
        driver.advance()


class TestSegment:
    def test_progress(self) -> None:
        seg = Segment(Point(0, 0), Point(1, 0), duration=4, elapsed=1)
        assert seg.progress == 0.25
        assert not seg.done

    def test_zero_duration_is_done(self) -> None:
        seg = Segment(Point(0, 0), Point(1, 0), duration=0)
        assert seg.progress == 1.0
        assert seg.done


class TestAnimate:
    def test_arrow_drawn_at_start(
        self, driver: AnimationDriver, overlay: TrajectoryOverlay
    ) -> None:
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        assert overlay.arrows == (compute_arrow(Point(0, 0), Point(10, 0)),)
        assert driver.marker.center == Point(0, 0)

    def test_duration_converted_to_ticks(self, driver: AnimationDriver) -> None:
        segment = driver.animate(Point(0, 0), Point(10, 0), 0.5)
        assert segment.duration == 5
        assert driver.in_flight

    def test_second_animate_raises(self, driver: AnimationDriver) -> None:
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        with pytest.raises(AnimationInFlightError):
            driver.animate(Point(10, 0), Point(20, 0), 1.0)

    def test_publishes_segment_started(
        self, driver: AnimationDriver, bus: SignalBus
    ) -> None:
        seen = []
        bus.subscribe(SEGMENT_STARTED, lambda name, data: seen.append(data))
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        bus.flush()
        assert seen == [{"start": Point(0, 0), "end": Point(10, 0), "ticks": 10}]

    def test_barb_settings_used(self, overlay: TrajectoryOverlay) -> None:
        driver = AnimationDriver(
            MarkerState(), overlay, Clock(tps=10), barb_length=3.0, barb_angle=0.2
        )
        driver.animate(Point(0, 0), Point(5, 5), 1.0)
        assert overlay.arrows[0] == compute_arrow(Point(0, 0), Point(5, 5), 3.0, 0.2)

    def test_unknown_easing_rejected(self, overlay: TrajectoryOverlay) -> None:
        with pytest.raises(ValueError):
            AnimationDriver(MarkerState(), overlay, Clock(tps=10), easing="wobble")


class TestAdvance:
    def test_no_segment_is_noop(self, driver: AnimationDriver) -> None:
        driver.advance()
        assert driver.marker.center == Point(0, 0)
        assert driver.coordinator.completions == 0

    def test_linear_midpoint(self, driver: AnimationDriver) -> None:
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        _advance(driver, 5)
        assert driver.marker.center == Point(5.0, 0.0)
        assert driver.in_flight

    def test_reaches_target_exactly(self, driver: AnimationDriver) -> None:
        driver.animate(Point(0.1, 0.2), Point(0.3, 0.7), 1.0)
        _advance(driver, 10)
        assert driver.marker.center == Point(0.3, 0.7)
        assert not driver.in_flight
        assert driver.coordinator.completions == 1

    def test_completes_after_duration_not_before(self, driver: AnimationDriver) -> None:
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        _advance(driver, 9)
        assert driver.coordinator.completions == 0
        driver.advance()
        assert driver.coordinator.completions == 1

    def test_monotonic_progress_with_easing(self, overlay: TrajectoryOverlay) -> None:
        driver = AnimationDriver(
            MarkerState(), overlay, Clock(tps=20), easing="ease_in_out"
        )
        driver.animate(Point(0, 0), Point(100, 0), 1.0)
        xs = []
        while driver.in_flight:
            driver.advance()
            xs.append(driver.marker.center.x)
        assert len(xs) == 20
        assert xs == sorted(xs)
        assert xs[-1] == 100

    def test_curve_read_from_segment(self, driver: AnimationDriver) -> None:
        segment = driver.animate(Point(0, 0), Point(10, 0), 1.0)
        assert segment.easing == "linear"
        segment.easing = "ease_in"
        _advance(driver, 5)
        assert driver.marker.center == Point(2.5, 0.0)

    def test_zero_duration_completes_on_first_tick(self, driver: AnimationDriver) -> None:
        driver.animate(Point(0, 0), Point(10, 10), 0.0)
        driver.advance()
        assert driver.marker.center == Point(10, 10)
        assert driver.coordinator.completions == 1

    def test_zero_length_segment(
        self, driver: AnimationDriver, overlay: TrajectoryOverlay
    ) -> None:
        driver.animate(Point(0, 0), Point(0, 0), 1.0)
        _advance(driver, 10)
        assert driver.coordinator.completions == 1
        assert len(overlay) == 1

    def test_publishes_positions_and_completion(
        self, driver: AnimationDriver, bus: SignalBus
    ) -> None:
        moves = []
        done = []
        bus.subscribe(MARKER_MOVED, lambda name, data: moves.append(data["point"]))
        bus.subscribe(SEGMENT_COMPLETED, lambda name, data: done.append(data["end"]))
        driver.animate(Point(0, 0), Point(10, 0), 1.0)
        _advance(driver, 10)
        bus.flush()
        assert len(moves) == 10
        assert moves[-1] == Point(10, 0)
        assert done == [Point(10, 0)]


def test_animation_system_advances_driver(driver: AnimationDriver) -> None:
    system = make_animation_system(driver)
    driver.animate(Point(0, 0), Point(10, 0), 0.2)
    system(None)
    system(None)
    assert driver.marker.center == Point(10, 0)
    assert not driver.in_flight
