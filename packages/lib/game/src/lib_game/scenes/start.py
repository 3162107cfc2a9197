import logging
from typing import Optional

import cv2
import pygame
from lib_figure.data import CANVAS_HEIGHT, CANVAS_WIDTH
from lib_figure.util_2d import BACKGROUND_COLOR, draw_background

from ..sequence import SceneInterface
from .common import blank_frame, blit_frame

logger = logging.getLogger(__name__)

TITLE = "RDance"
HINT = "Press S or Enter to dance"


class StartScene(SceneInterface):
    def __init__(self, manager=None):
        super().__init__(manager)
        self.frame = None

    def enter(self):
        """Prepare the title card for the current viewport size."""
        logger.debug("StartScene: enter")
        width, height = self._viewport()
        frame = blank_frame(width, height)
        draw_background(frame, BACKGROUND_COLOR)
        self._put_centered(frame, TITLE, height // 2 - 20, 2.0, 4)
        self._put_centered(frame, HINT, height // 2 + 40, 0.8, 2)
        self.frame = frame

    def exit(self):
        self.frame = None
        logger.debug("StartScene: exit")

    def _viewport(self):
        if self.manager is None:
            return CANVAS_WIDTH, CANVAS_HEIGHT
        state = self.manager.global_state
        return state.width, state.height

    @staticmethod
    def _put_centered(frame, text, y, scale, thickness):
        (text_w, _text_h), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, scale, thickness)
        x = max(0, (frame.shape[1] - text_w) // 2)
        cv2.putText(
            frame, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, (255, 255, 255), thickness, cv2.LINE_AA
        )

    def render(self, surface: Optional[pygame.Surface]) -> None:
        if surface is None or self.frame is None:
            return
        blit_frame(surface, self.frame)

    def handle_event(self, event) -> None:
        """Pressing 's' or Enter switches to the dance scene; Escape quits."""
        if event is None or self.manager is None:
            return None

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_s, pygame.K_RETURN):
                self.manager.start("dance")
            elif event.key == pygame.K_ESCAPE:
                self.manager.stop()
