"""Clear button and speed slider."""
from __future__ import annotations

import pygame

from ui.constants import (
    CLEAR_RECT,
    CLEAR_TEXT,
    CONTROL_Y,
    SLIDER_FILL,
    SLIDER_KNOB_R,
    SLIDER_TRACK,
    SLIDER_W,
    SLIDER_X,
)


class Slider:
    """Horizontal slider reporting a value in [0, 1]."""

    def __init__(self, value: float, knob_color: tuple[int, int, int]) -> None:
        self.value = value
        self.knob_color = knob_color
        self.dragging = False

    @property
    def knob_x(self) -> int:
        return int(SLIDER_X + self.value * SLIDER_W)

    def hit(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return (
            SLIDER_X - SLIDER_KNOB_R <= x <= SLIDER_X + SLIDER_W + SLIDER_KNOB_R
            and abs(y - CONTROL_Y) <= SLIDER_KNOB_R * 2
        )

    def drag_to(self, x: int) -> float:
        self.value = min(max((x - SLIDER_X) / SLIDER_W, 0.0), 1.0)
        return self.value

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.line(
            surface, SLIDER_TRACK, (SLIDER_X, CONTROL_Y), (SLIDER_X + SLIDER_W, CONTROL_Y), 4
        )
        pygame.draw.line(surface, SLIDER_FILL, (SLIDER_X, CONTROL_Y), (self.knob_x, CONTROL_Y), 4)
        pygame.draw.circle(surface, self.knob_color, (self.knob_x, CONTROL_Y), SLIDER_KNOB_R)


def clear_hit(pos: tuple[int, int]) -> bool:
    return pygame.Rect(CLEAR_RECT).collidepoint(pos)


def draw_clear_button(surface: pygame.Surface, font: pygame.font.Font) -> None:
    label = font.render("Clear", True, CLEAR_TEXT)
    rect = pygame.Rect(CLEAR_RECT)
    surface.blit(label, label.get_rect(center=rect.center))
