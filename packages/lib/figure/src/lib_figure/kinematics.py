"""Forward kinematics for the 2D dancer figure.

Joint placement walks a fixed bone table once. Each row is
``(child, parent, bone_length_field, relative_angle_field)``:

    child = parent + length * (cos(theta), sin(theta))

where ``theta`` is the cumulative orientation of the child bone, i.e. the
parent's orientation plus the bone's own relative angle. The root `pelvis`
carries the orientation `spine_angle`, so the spine bone itself adds nothing
and both legs hang off the spine's rotation.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import numpy as np

from .data import JOINT_INDEX, JOINT_NAMES, BoneLengths, JointPositions, Pose

JointName = str
ChainLink = Tuple[JointName, JointName, str, Optional[str]]

ROOT_JOINT: JointName = "pelvis"

BONE_CHAIN: Tuple[ChainLink, ...] = (
    ("spine_end", "pelvis", "spine", None),
    ("left_shoulder", "spine_end", "shoulder", "left_shoulder_angle"),
    ("right_shoulder", "spine_end", "shoulder", "right_shoulder_angle"),
    ("left_elbow", "left_shoulder", "upper_arm", "left_upper_arm_angle"),
    ("right_elbow", "right_shoulder", "upper_arm", "right_upper_arm_angle"),
    ("left_hand", "left_elbow", "forearm", "left_forearm_angle"),
    ("right_hand", "right_elbow", "forearm", "right_forearm_angle"),
    ("left_knee", "pelvis", "thigh", "left_thigh_angle"),
    ("right_knee", "pelvis", "thigh", "right_thigh_angle"),
    ("left_foot", "left_knee", "shin", "left_shin_angle"),
    ("right_foot", "right_knee", "shin", "right_shin_angle"),
    ("head", "spine_end", "neck", "neck_angle"),
)

# Head follows the spine exactly; `neck_angle` is ignored.
RIGID_NECK_CHAIN: Tuple[ChainLink, ...] = tuple(
    (child, parent, bone, None if child == "head" else angle)
    for child, parent, bone, angle in BONE_CHAIN
)


def _check_finite(pose: Pose) -> None:
    for name, value in pose.values().items():
        if not math.isfinite(value):
            raise ValueError(f"Pose field '{name}' must be finite, got {value!r}.")


def bone_offset(length: float, angle_deg: float) -> np.ndarray:
    """Return the (dx, dy) vector of a bone of `length` oriented at `angle_deg`."""

    theta = np.deg2rad(angle_deg)
    return np.array([np.cos(theta) * length, np.sin(theta) * length], dtype=np.float64)


def cumulative_angles(
    pose: Pose, chain: Tuple[ChainLink, ...] = BONE_CHAIN
) -> Dict[JointName, float]:
    """Return the absolute orientation (degrees) of the bone ending at each joint."""

    orientation: Dict[JointName, float] = {ROOT_JOINT: pose.spine_angle}
    for child, parent, _bone, angle_field in chain:
        relative = 0.0 if angle_field is None else getattr(pose, angle_field)
        orientation[child] = orientation[parent] + relative
    return orientation


def solve(
    pose: Pose,
    lengths: BoneLengths,
    chain: Tuple[ChainLink, ...] = BONE_CHAIN,
) -> JointPositions:
    """Place every joint of `pose` in screen space.

    Args:
            pose: pelvis position and joint angles in degrees
            lengths: bone lengths of the figure
            chain: bone table to walk, parents listed before their children

    Returns: a fresh `JointPositions`; the inputs are left untouched.

    Raises:
            ValueError: a pose field is NaN or infinite.
    """

    _check_finite(pose)

    keypoints = np.zeros((len(JOINT_NAMES), 2), dtype=np.float64)
    keypoints[JOINT_INDEX[ROOT_JOINT]] = (pose.pelvis_x, pose.pelvis_y)

    orientation = cumulative_angles(pose, chain)
    for child, parent, bone, _angle_field in chain:
        keypoints[JOINT_INDEX[child]] = keypoints[JOINT_INDEX[parent]] + bone_offset(
            getattr(lengths, bone), orientation[child]
        )

    return JointPositions(keypoints=keypoints)
