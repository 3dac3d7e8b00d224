"""Mad Circle: a marker that chases your clicks.

Exercises madcircle's touch queue, animation driver, and trajectory overlay.

Controls:
  Click     Send the marker to the cursor (queued while it is moving)
  Slider    Drag right for faster segments
  Clear     Remove drawn arrows (also C)
  Esc       Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from madcircle import MadCircleConfig, Session
from madcircle.logging_config import setup_logging

from ui.canvas import draw_arrows, draw_marker, draw_status
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, TPS
from ui.controls import Slider, clear_hit, draw_clear_button
from ui.scene import Scene


def main() -> None:
    setup_logging(level=logging.DEBUG if "--debug" in sys.argv else logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Mad Circle")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    config = MadCircleConfig(tps=TPS)
    session = Session(config, origin=(SCREEN_W / 2, SCREEN_H / 2))
    scene = Scene(session)
    rng = session.engine.random
    marker_color = rng.choice(config.palette)
    slider = Slider(value=config.max_speed - config.initial_speed, knob_color=rng.choice(config.palette))

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    session.clear_requested()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if slider.hit(event.pos):
                    slider.dragging = True
                    session.slider_changed(slider.drag_to(event.pos[0]))

            elif event.type == pygame.MOUSEMOTION and slider.dragging:
                session.slider_changed(slider.drag_to(event.pos[0]))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if slider.dragging:
                    slider.dragging = False
                elif clear_hit(event.pos):
                    session.clear_requested()
                else:
                    session.touch_ended(event.pos)

        # --- Tick ---
        while accumulator >= tick_interval:
            session.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_arrows(screen, scene.arrows, config)
        draw_marker(screen, scene.center, marker_color, config)
        draw_clear_button(screen, font)
        slider.draw(screen)
        draw_status(
            screen,
            font,
            session.coordinator.state,
            session.coordinator.pending(),
            session.coordinator.speed,
        )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
