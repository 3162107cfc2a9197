from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pygame
from lib_figure.controls import apply_held_keys
from lib_figure.data import CANVAS_HEIGHT, CANVAS_WIDTH, floor_y_for_height
from lib_figure.figure import Figure
from lib_figure.util_2d import RenderMode, draw_background, draw_figure_on_frame, draw_floor

from ..sequence import SceneInterface, SequenceManager
from .common import blank_frame, blit_frame

logger = logging.getLogger(__name__)


class DanceScene(SceneInterface):
    """Keyboard-driven dancer standing on the floor line.

    Keys: R reset, P/Space pause, F fullscreen, Tab next render style,
    Escape back to the start screen. Held keys pose the figure
    (see `lib_figure.controls`).
    """

    def __init__(self, manager: Optional[SequenceManager] = None) -> None:
        super().__init__(manager)
        self.figure: Optional[Figure] = None
        self.paused = False
        self.render_mode = RenderMode.SKELETON
        self.last_frame: Optional[np.ndarray] = None

    def enter(self) -> None:
        logger.debug("DanceScene: enter")
        width, height = CANVAS_WIDTH, CANVAS_HEIGHT
        if self.manager is not None:
            state = self.manager.global_state
            width, height = state.width, state.height
            self.render_mode = state.render_mode
        self.figure = Figure(floor_y=floor_y_for_height(height), home_x=width / 2)
        self.paused = False
        self.last_frame = blank_frame(width, height)

    def exit(self) -> None:
        logger.debug("DanceScene: exit")
        self.figure = None
        self.last_frame = None

    def update(self, dt: float) -> None:
        if self.figure is None or self.paused:
            return
        apply_held_keys(self.figure, pygame.key.get_pressed())

    def draw(self) -> Optional[np.ndarray]:
        """Draw the current pose into `last_frame` and return it."""
        if self.figure is None or self.last_frame is None:
            return None
        frame = self.last_frame
        draw_background(frame)
        draw_floor(frame, self.figure.floor_y)
        draw_figure_on_frame(frame, self.figure.solve(), self.render_mode)
        return frame

    def render(self, surface: Optional[pygame.Surface]) -> None:
        # a paused scene keeps showing the last drawn frame
        if not self.paused:
            self.draw()
        if surface is None or self.last_frame is None:
            return
        blit_frame(surface, self.last_frame)

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        logger.info("DanceScene: %s", "paused" if self.paused else "resumed")

    def cycle_render_mode(self) -> None:
        self.render_mode = self.render_mode.next()
        if self.manager is not None:
            self.manager.global_state.render_mode = self.render_mode
        logger.info("DanceScene: render mode %s", self.render_mode.value)

    def handle_event(self, event) -> None:
        if event is None or event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_r:
            if self.figure is not None:
                self.figure.reset()
        elif event.key in (pygame.K_p, pygame.K_SPACE):
            self.toggle_pause()
        elif event.key == pygame.K_TAB:
            self.cycle_render_mode()
        elif event.key == pygame.K_f:
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                pygame.display.toggle_fullscreen()
        elif event.key == pygame.K_ESCAPE:
            if self.manager is not None:
                self.manager.start("start")
