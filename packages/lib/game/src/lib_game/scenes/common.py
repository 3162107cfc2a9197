from __future__ import annotations

import cv2
import numpy as np
import pygame


def blank_frame(width: int, height: int) -> np.ndarray:
    """Return a black BGR frame of the given size."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def blit_frame(surface: pygame.Surface, frame: np.ndarray) -> None:
    """Convert a BGR frame to a pygame surface and blit it scaled to `surface`.

    The frame from OpenCV is BGR; convert to RGB and scale to surface size.
    """
    surf_w, surf_h = surface.get_size()
    if frame.shape[1] != surf_w or frame.shape[0] != surf_h:
        frame = cv2.resize(frame, (surf_w, surf_h))
    frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    # surface from buffer; ensure contiguous
    frame_rgb = np.ascontiguousarray(frame_rgb)
    pg_surf = pygame.image.frombuffer(frame_rgb.tobytes(), (surf_w, surf_h), "RGB")
    surface.blit(pg_surf, (0, 0))
