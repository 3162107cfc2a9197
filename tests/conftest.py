import os

# headless pygame / matplotlib
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402
from lib_figure.data import DEFAULT_BONE_LENGTHS, Pose  # noqa: E402


class Pressed:
    """Stand-in for pygame.key.get_pressed() holding a fixed set of keys."""

    def __init__(self, *keys):
        self._keys = set(keys)

    def __getitem__(self, key):
        return key in self._keys


@pytest.fixture
def lengths():
    return DEFAULT_BONE_LENGTHS


@pytest.fixture
def zero_pose():
    return Pose(pelvis_x=100.0, pelvis_y=200.0)
