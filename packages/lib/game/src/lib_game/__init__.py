"""lib_game package exports for simple sequence/scene management.

This module exposes the interfaces used by the app to manage the
sequence of screens (start screen, dance screen).
"""

from .scenes.dance import DanceScene
from .scenes.start import StartScene
from .sequence import GlobalState, SceneInterface, SequenceManager

__all__ = [
    "SequenceManager",
    "SceneInterface",
    "GlobalState",
    "StartScene",
    "DanceScene",
]
