"""Sequence manager and Scene interface for lib_game.

Scenes are registered by name on a `SequenceManager`, which switches between
them and forwards the per-frame update/render/event calls of the main loop.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pygame
from lib_figure.data import CANVAS_HEIGHT, CANVAS_WIDTH
from lib_figure.util_2d import RenderMode

logger = logging.getLogger(__name__)


class SceneInterface(abc.ABC):
    """Abstract interface for a scene.

    Concrete scenes override the lifecycle hooks they need; the defaults
    are no-ops.
    """

    def __init__(self, manager: Optional["SequenceManager"] = None) -> None:
        self.manager = manager

    def enter(self) -> None:
        """Called when the scene becomes active."""
        return None

    def exit(self) -> None:
        """Called when the scene is no longer active."""
        return None

    def update(self, dt: float) -> None:
        """Update scene logic. dt is seconds since last update."""
        return None

    def render(self, surface: Optional[pygame.Surface]) -> None:
        """Render the scene to the given drawing surface (pygame.Surface).

        surface may be None in non-graphical tests.
        """
        return None

    def handle_event(self, event: Optional[pygame.event.Event]) -> None:
        """Handle an input/event object (pygame.Event or similar)."""
        return None


@dataclass
class GlobalState:
    """State shared between scenes."""

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    render_mode: RenderMode = RenderMode.SKELETON


class SequenceManager:
    """Simple manager for scenes/sequences.

    Responsibilities:
    - register scenes
    - switch active scene
    - forward update/render/event calls
    """

    def __init__(self, global_state: Optional[GlobalState] = None) -> None:
        self._scenes: Dict[str, SceneInterface] = {}
        self._current: Optional[SceneInterface] = None
        self.running: bool = False
        self.global_state = global_state or GlobalState()

    @property
    def current(self) -> Optional[SceneInterface]:
        return self._current

    def initialize(self) -> None:
        """Initialize manager resources. Call before starting the loop."""
        self.running = True

    def register_scene(self, name: str, scene: SceneInterface) -> None:
        """Register a scene instance under a name."""
        scene.manager = self
        self._scenes[name] = scene

    def start(self, name: str) -> None:
        """Switch to the named scene, calling lifecycle hooks."""
        if name not in self._scenes:
            raise KeyError(f"Unknown scene: {name}")

        if self._current is not None:
            self._current.exit()

        logger.debug("switching to scene '%s'", name)
        self._current = self._scenes[name]
        self._current.enter()

    def update(self, dt: float) -> None:
        """Forward update to current scene."""
        if self._current is not None:
            self._current.update(dt)

    def render(self, surface: Any) -> None:
        """Forward render to current scene."""
        if self._current is not None:
            self._current.render(surface)

    def handle_event(self, event: Any) -> None:
        """Forward event to current scene."""
        if self._current is not None:
            self._current.handle_event(event)

    def stop(self) -> None:
        """Ask the main loop to finish after the current frame."""
        self.running = False

    def shutdown(self) -> None:
        """Shutdown manager and active scene."""
        if self._current is not None:
            self._current.exit()
            self._current = None
        self.running = False
