"""Data definitions for the dancer figure."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Tuple

import numpy as np

# Canvas size of the windowed sketch (pixels)
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# The floor line sits at 90% of the viewport height
FLOOR_RATIO = 0.9


def floor_y_for_height(height: float) -> float:
    """Return the floor line Y coordinate for a viewport of `height` pixels."""
    return float(height) * FLOOR_RATIO


@dataclass(frozen=True)
class BoneLengths:
    """Fixed proportions of the figure, in pixels.

    attributes:
            thigh: pelvis -> knee
            shin: knee -> foot
            spine: pelvis -> neck base
            shoulder: neck base -> shoulder
            upper_arm: shoulder -> elbow
            forearm: elbow -> hand
            neck: neck base -> head
    """

    thigh: float
    shin: float
    spine: float
    shoulder: float
    upper_arm: float
    forearm: float
    neck: float

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value <= 0.0:
                raise ValueError(
                    f"Bone length '{f.name}' must be a positive finite number, got {value!r}."
                )


DEFAULT_BONE_LENGTHS = BoneLengths(
    thigh=80.0,
    shin=70.0,
    spine=100.0,
    shoulder=40.0,
    upper_arm=60.0,
    forearm=50.0,
    neck=30.0,
)


@dataclass
class Pose:
    """Pelvis position plus joint angles in degrees.

    `spine_angle` is the absolute orientation of the root bone. Every other
    angle is relative and gets added to the orientation of its parent bone.
    Angles are never clamped or wrapped.
    """

    pelvis_x: float = 0.0
    pelvis_y: float = 0.0
    spine_angle: float = 0.0
    left_thigh_angle: float = 0.0
    right_thigh_angle: float = 0.0
    left_shin_angle: float = 0.0
    right_shin_angle: float = 0.0
    left_shoulder_angle: float = 0.0
    right_shoulder_angle: float = 0.0
    left_upper_arm_angle: float = 0.0
    right_upper_arm_angle: float = 0.0
    left_forearm_angle: float = 0.0
    right_forearm_angle: float = 0.0
    neck_angle: float = 0.0

    @classmethod
    def standing(cls, pelvis_x: float = 0.0, pelvis_y: float = 0.0) -> "Pose":
        """Canonical standing pose: upright torso, legs slightly apart, arms down."""
        return cls(pelvis_x=pelvis_x, pelvis_y=pelvis_y, **STANDING_ANGLES)

    def copy(self) -> "Pose":
        return replace(self)

    def values(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


POSE_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(Pose))
ANGLE_FIELDS: Tuple[str, ...] = tuple(n for n in POSE_FIELDS if n.endswith("_angle"))

STANDING_ANGLES: Dict[str, float] = {
    # -90 points the spine up the screen (negative y)
    "spine_angle": -90.0,
    "left_thigh_angle": 160.0,
    "right_thigh_angle": 200.0,
    "left_shin_angle": 0.0,
    "right_shin_angle": 0.0,
    "left_shoulder_angle": 90.0,
    "right_shoulder_angle": -90.0,
    "left_upper_arm_angle": 90.0,
    "right_upper_arm_angle": -90.0,
    "left_forearm_angle": 0.0,
    "right_forearm_angle": 0.0,
    "neck_angle": 0.0,
}


JOINT_NAMES: Tuple[str, ...] = (
    "pelvis",
    "spine_end",
    "left_shoulder",
    "right_shoulder",
    "left_elbow",
    "right_elbow",
    "left_hand",
    "right_hand",
    "left_knee",
    "right_knee",
    "left_foot",
    "right_foot",
    "head",
)

JOINT_INDEX: Dict[str, int] = {name: i for i, name in enumerate(JOINT_NAMES)}

# Bones drawn between joints (parent, child)
BONE_CONNECTIONS: Tuple[Tuple[str, str], ...] = (
    ("pelvis", "spine_end"),
    ("spine_end", "head"),
    ("spine_end", "left_shoulder"),
    ("left_shoulder", "left_elbow"),
    ("left_elbow", "left_hand"),
    ("spine_end", "right_shoulder"),
    ("right_shoulder", "right_elbow"),
    ("right_elbow", "right_hand"),
    ("pelvis", "left_knee"),
    ("left_knee", "left_foot"),
    ("pelvis", "right_knee"),
    ("right_knee", "right_foot"),
)


@dataclass(frozen=True, eq=False)
class JointPositions:
    """Screen-space joint positions for one frame.

    attributes:
            keypoints: numpy.ndarray (13, 2), rows ordered as `JOINT_NAMES`.
                    Stored as a read-only float64 copy of the given array.

    Two instances are equal when their keypoints are identical, and equal
    instances hash alike.
    """

    keypoints: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        keypoints = np.array(self.keypoints, dtype=np.float64, copy=True)
        if keypoints.shape != (len(JOINT_NAMES), 2):
            raise ValueError(
                f"Expected keypoints of shape {(len(JOINT_NAMES), 2)}, got {keypoints.shape}."
            )
        keypoints.setflags(write=False)
        object.__setattr__(self, "keypoints", keypoints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JointPositions):
            return NotImplemented
        return bool(np.array_equal(self.keypoints, other.keypoints))

    def __hash__(self) -> int:
        # adding 0.0 folds -0.0 into 0.0, which compare equal
        return hash((self.keypoints + 0.0).tobytes())

    def __getitem__(self, name: str) -> np.ndarray:
        return self.keypoints[JOINT_INDEX[name]]

    def __str__(self) -> str:
        with np.printoptions(precision=3, suppress=True):
            return f"JointPositions(keypoints={self.keypoints})"

    def to_dict(self) -> Dict[str, Tuple[float, float]]:
        return {
            name: (float(self.keypoints[i, 0]), float(self.keypoints[i, 1]))
            for i, name in enumerate(JOINT_NAMES)
        }
