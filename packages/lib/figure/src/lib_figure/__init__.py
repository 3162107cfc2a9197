from .calibrate import CANONICAL_LEG_ANGLES, calibrate_pelvis_y
from .data import (
    DEFAULT_BONE_LENGTHS,
    JOINT_NAMES,
    BoneLengths,
    JointPositions,
    Pose,
    floor_y_for_height,
)
from .figure import Figure
from .kinematics import BONE_CHAIN, RIGID_NECK_CHAIN, solve

__all__ = [
    "BoneLengths",
    "Pose",
    "JointPositions",
    "DEFAULT_BONE_LENGTHS",
    "JOINT_NAMES",
    "floor_y_for_height",
    "BONE_CHAIN",
    "RIGID_NECK_CHAIN",
    "solve",
    "CANONICAL_LEG_ANGLES",
    "calibrate_pelvis_y",
    "Figure",
]
