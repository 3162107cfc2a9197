"""The dancer figure: bone lengths, live pose and floor line in one object."""

from __future__ import annotations

import logging
import math
from typing import Tuple

from .calibrate import calibrate_pelvis_y
from .data import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_BONE_LENGTHS,
    POSE_FIELDS,
    BoneLengths,
    JointPositions,
    Pose,
    floor_y_for_height,
)
from .kinematics import BONE_CHAIN, ChainLink, solve

logger = logging.getLogger(__name__)


class Figure:
    """A posable figure owned by whichever collaborator created it.

    Input handlers mutate the pose through `nudge` between frames and the
    renderer reads `solve()` once per frame. Floor contact is only enforced
    at construction and on `reset`; moving a leg afterwards does not keep the
    foot on the floor.
    """

    def __init__(
        self,
        lengths: BoneLengths = DEFAULT_BONE_LENGTHS,
        *,
        floor_y: float = floor_y_for_height(CANVAS_HEIGHT),
        home_x: float = CANVAS_WIDTH / 2,
        chain: Tuple[ChainLink, ...] = BONE_CHAIN,
    ) -> None:
        if not math.isfinite(home_x):
            raise ValueError(f"home_x must be finite, got {home_x!r}.")
        self.lengths = lengths
        self.floor_y = float(floor_y)
        self.home_x = float(home_x)
        self.chain = chain
        self.pose = self._standing_pose()

    def _standing_pose(self) -> Pose:
        pelvis_y = calibrate_pelvis_y(self.lengths, self.floor_y)
        return Pose.standing(pelvis_x=self.home_x, pelvis_y=pelvis_y)

    def reset(self) -> None:
        """Restore the standing pose with the pelvis recalibrated to the floor."""
        self.pose = self._standing_pose()
        logger.info("Figure reset (pelvis at %.1f, %.1f)", self.pose.pelvis_x, self.pose.pelvis_y)

    def nudge(self, name: str, delta: float) -> float:
        """Add `delta` to the pose field `name` and return the new value."""

        if name not in POSE_FIELDS:
            raise KeyError(f"Unknown pose field: {name}")
        if not math.isfinite(delta):
            raise ValueError(f"delta for '{name}' must be finite, got {delta!r}.")
        value = getattr(self.pose, name) + delta
        setattr(self.pose, name, value)
        return value

    def solve(self) -> JointPositions:
        return solve(self.pose, self.lengths, self.chain)
