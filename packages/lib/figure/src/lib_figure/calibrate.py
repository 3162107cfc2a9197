"""Floor contact calibration for the standing pose."""

from __future__ import annotations

import logging
import math

from .data import BoneLengths, Pose
from .kinematics import BONE_CHAIN, solve

logger = logging.getLogger(__name__)

# Leg angles the calibration always reasons about, whatever the live pose holds
CANONICAL_LEG_ANGLES = {
    "spine_angle": -90.0,
    "left_thigh_angle": 160.0,
    "right_thigh_angle": 200.0,
    "left_shin_angle": 0.0,
    "right_shin_angle": 0.0,
}


def calibrate_pelvis_y(lengths: BoneLengths, floor_y: float) -> float:
    """Return the pelvis Y that puts the lower foot of the standing pose on `floor_y`.

    The standing pose is solved with the pelvis at the origin, so each foot's
    Y is exactly the vertical drop of its thigh + shin chain. The leg that
    drops furthest is the one that has to reach the floor.
    """

    if not math.isfinite(floor_y):
        raise ValueError(f"floor_y must be finite, got {floor_y!r}.")

    pose = Pose.standing(pelvis_x=0.0, pelvis_y=0.0)
    for name, value in CANONICAL_LEG_ANGLES.items():
        setattr(pose, name, value)

    joints = solve(pose, lengths, BONE_CHAIN)
    max_foot_drop = max(float(joints["left_foot"][1]), float(joints["right_foot"][1]))
    pelvis_y = floor_y - max_foot_drop
    logger.debug(
        "calibrated pelvis_y=%.3f (floor_y=%.3f, foot drop=%.3f)",
        pelvis_y,
        floor_y,
        max_foot_drop,
    )
    return pelvis_y
