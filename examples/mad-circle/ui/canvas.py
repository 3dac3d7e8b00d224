"""Marker and trajectory arrow rendering."""
from __future__ import annotations

from typing import Sequence

import pygame

from madcircle import ArrowShape, MadCircleConfig, Point

from ui.constants import ARROW_COLOR, BG_COLOR, STATUS_TEXT


def _blend(color: tuple[int, int, int], alpha: float) -> tuple[int, int, int]:
    """Mix ``color`` over the white background at ``alpha``."""
    return tuple(int(bg + (c - bg) * alpha) for c, bg in zip(color, BG_COLOR))


def draw_arrows(
    surface: pygame.Surface, arrows: Sequence[ArrowShape], config: MadCircleConfig
) -> None:
    color = _blend(ARROW_COLOR, config.arrow_opacity)
    for arrow in arrows:
        for start, end in arrow.strokes():
            pygame.draw.line(surface, color, start, end, config.arrow_width)


def draw_marker(
    surface: pygame.Surface,
    center: Point,
    color: tuple[int, int, int],
    config: MadCircleConfig,
) -> None:
    pygame.draw.circle(
        surface,
        _blend(color, config.marker_opacity),
        (int(center.x), int(center.y)),
        config.marker_diameter // 2,
    )


def draw_status(
    surface: pygame.Surface, font: pygame.font.Font, state: str, pending: int, speed: float
) -> None:
    text = f"{state}  queued: {pending}  duration: {speed:.2f}s"
    label = font.render(text, True, STATUS_TEXT)
    surface.blit(label, (8, surface.get_height() - label.get_height() - 6))
