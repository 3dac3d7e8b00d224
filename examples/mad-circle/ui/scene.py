"""Render-side copy of the marker and arrows, fed by bus signals."""
from __future__ import annotations

from typing import Any

from madcircle import ArrowShape, Point, Session
from madcircle.bus import ARROW_ADDED, ARROWS_CLEARED, MARKER_MOVED


class Scene:
    """What the canvas draws. Updated only through session signals."""

    def __init__(self, session: Session) -> None:
        self.center: Point = session.marker.center
        self.arrows: list[ArrowShape] = []
        session.subscribe(MARKER_MOVED, self._on_marker_moved)
        session.subscribe(ARROW_ADDED, self._on_arrow_added)
        session.subscribe(ARROWS_CLEARED, self._on_arrows_cleared)

    def _on_marker_moved(self, signal: str, data: dict[str, Any]) -> None:
        self.center = data["point"]

    def _on_arrow_added(self, signal: str, data: dict[str, Any]) -> None:
        self.arrows.append(data["shape"])

    def _on_arrows_cleared(self, signal: str, data: dict[str, Any]) -> None:
        self.arrows.clear()
