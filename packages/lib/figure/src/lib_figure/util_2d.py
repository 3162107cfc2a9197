from __future__ import annotations

import enum
from typing import Sequence, Tuple

import cv2
import numpy as np

from .data import BONE_CONNECTIONS, JOINT_NAMES, JointPositions

Color = Tuple[int, int, int]

# Colors are BGR
BACKGROUND_COLOR: Color = (40, 20, 20)
FLOOR_COLOR: Color = (255, 255, 255)
BONE_COLOR: Color = (255, 255, 255)
JOINT_OUTLINE_COLOR: Color = (0, 0, 0)
SKIN_COLOR: Color = (180, 220, 255)
DRESS_COLOR: Color = (120, 60, 180)
NECKLINE_COLOR: Color = (140, 80, 200)
HAIR_COLOR: Color = (20, 40, 60)
IRIS_COLOR: Color = (19, 69, 139)
NOSE_COLOR: Color = (160, 200, 255)
MOUTH_COLOR: Color = (180, 180, 255)
DETAILED_DRESS_COLOR: Color = (100, 40, 150)
DRESS_FOLD_COLOR: Color = (80, 30, 130)
DETAILED_NECKLINE_COLOR: Color = (120, 60, 170)
BELT_COLOR: Color = (60, 20, 100)
SKIN_SHADE_COLOR: Color = (160, 200, 255)
INNER_IRIS_COLOR: Color = (40, 80, 160)
NOSE_SHADOW_COLOR: Color = (140, 180, 255)
MOUTH_INNER_COLOR: Color = (100, 100, 200)
LIP_COLOR: Color = (160, 160, 255)

JOINT_RADIUS = 3


class RenderMode(enum.Enum):
    SKELETON = "skeleton"
    SIMPLE = "simple"
    DETAILED = "detailed"

    def next(self) -> "RenderMode":
        modes = list(RenderMode)
        return modes[(modes.index(self) + 1) % len(modes)]


def _pt(point: Sequence[float], dx: float = 0.0, dy: float = 0.0) -> Tuple[int, int]:
    return (int(round(point[0] + dx)), int(round(point[1] + dy)))


def _ellipse(
    frame: np.ndarray,
    center: Sequence[float],
    width: float,
    height: float,
    color: Color,
    *,
    start: float = 0.0,
    end: float = 360.0,
    thickness: int = -1,
) -> None:
    """Draw an axis-aligned ellipse given its full width/height, like p5's ellipse()."""
    axes = (max(1, int(round(abs(width) / 2))), max(1, int(round(abs(height) / 2))))
    cv2.ellipse(frame, _pt(center), axes, 0, start, end, color, thickness, cv2.LINE_AA)


def _quadratic_curve(
    frame: np.ndarray,
    p0: Sequence[float],
    control: Sequence[float],
    p1: Sequence[float],
    color: Color,
    thickness: int,
    samples: int = 16,
) -> None:
    t = np.linspace(0.0, 1.0, samples)[:, None]
    a, c, b = np.asarray(p0, float), np.asarray(control, float), np.asarray(p1, float)
    curve = (1 - t) ** 2 * a + 2 * (1 - t) * t * c + t**2 * b
    cv2.polylines(frame, [np.round(curve).astype(np.int32)], False, color, thickness, cv2.LINE_AA)


def _lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a + (b - a) * t


def draw_background(frame: np.ndarray, color: Color = BACKGROUND_COLOR) -> None:
    """Fill the whole frame with `color` (in place)."""
    frame[:, :] = color


def draw_floor(frame: np.ndarray, floor_y: float, color: Color = FLOOR_COLOR) -> None:
    """Draw the horizontal floor line across the frame (in place)."""
    width = frame.shape[1]
    y = int(round(floor_y))
    cv2.line(frame, (0, y), (width, y), color, 4)


def draw_skeleton_on_frame(frame: np.ndarray, joints: JointPositions) -> None:
    """Wireframe style: white bones with small dots on every joint."""

    for a, b in BONE_CONNECTIONS:
        cv2.line(frame, _pt(joints[a]), _pt(joints[b]), BONE_COLOR, 3, cv2.LINE_AA)

    for name in JOINT_NAMES:
        center = _pt(joints[name])
        cv2.circle(frame, center, JOINT_RADIUS, BONE_COLOR, -1, cv2.LINE_AA)
        cv2.circle(frame, center, JOINT_RADIUS, JOINT_OUTLINE_COLOR, 1, cv2.LINE_AA)


def _draw_simple_dress(frame: np.ndarray, joints: JointPositions) -> None:
    pelvis, spine_end = joints["pelvis"], joints["spine_end"]
    waist = _lerp(pelvis, spine_end, 0.3)
    chest = _lerp(pelvis, spine_end, 0.6)
    _ellipse(frame, waist, 25, 35, DRESS_COLOR)
    _ellipse(frame, chest, 35, 45, DRESS_COLOR)

    # skirt runs from the waist down to the higher knee
    knee_y = min(joints["left_knee"][1], joints["right_knee"][1])
    skirt_center = (waist[0], (waist[1] + knee_y) / 2)
    _ellipse(frame, skirt_center, 50, knee_y - waist[1] - 15, DRESS_COLOR)

    _ellipse(frame, (chest[0], chest[1] - 10), 20, 15, NECKLINE_COLOR)


def _draw_simple_arm(frame: np.ndarray, joints: JointPositions, side: str) -> None:
    spine_end = joints["spine_end"]
    shoulder = joints[f"{side}_shoulder"]
    elbow = joints[f"{side}_elbow"]
    hand = joints[f"{side}_hand"]

    _ellipse(frame, shoulder, 12, 25, SKIN_COLOR)
    _ellipse(frame, elbow, 10, 20, SKIN_COLOR)
    _ellipse(frame, hand, 8, 12, SKIN_COLOR)
    for a, b in ((spine_end, shoulder), (shoulder, elbow), (elbow, hand)):
        cv2.line(frame, _pt(a), _pt(b), SKIN_COLOR, 3, cv2.LINE_AA)


def _draw_simple_leg(frame: np.ndarray, joints: JointPositions, side: str) -> None:
    knee = joints[f"{side}_knee"]
    foot = joints[f"{side}_foot"]
    toe_dir = 1.0 if side == "left" else -1.0

    _ellipse(frame, knee, 15, 35, SKIN_COLOR)
    _ellipse(frame, (foot[0] + toe_dir * 8, foot[1]), 20, 12, SKIN_COLOR)
    cv2.line(frame, _pt(knee), _pt(foot), SKIN_COLOR, 4, cv2.LINE_AA)


def _draw_simple_head(frame: np.ndarray, head: np.ndarray) -> None:
    x, y = float(head[0]), float(head[1])

    # hair behind the face
    _ellipse(frame, (x, y - 8), 35, 45, HAIR_COLOR)
    _ellipse(frame, (x, y), 30, 40, SKIN_COLOR)
    _ellipse(frame, (x, y + 15), 20, 10, SKIN_COLOR)
    # fringe and strands
    _ellipse(frame, (x, y - 12), 25, 12, HAIR_COLOR)
    _quadratic_curve(frame, (x - 15, y - 5), (x - 20, y + 10), (x - 12, y + 25), HAIR_COLOR, 3)
    _quadratic_curve(frame, (x + 15, y - 5), (x + 20, y + 10), (x + 12, y + 25), HAIR_COLOR, 3)

    for eye_x in (x - 7, x + 7):
        _ellipse(frame, (eye_x, y - 5), 8, 6, (255, 255, 255))
        _ellipse(frame, (eye_x, y - 5), 5, 4, IRIS_COLOR)
        _ellipse(frame, (eye_x, y - 5), 2, 2, (0, 0, 0))
        # brow
        _ellipse(frame, (eye_x, y - 8), 10, 3, HAIR_COLOR, start=180, end=360, thickness=1)

    cv2.line(frame, _pt((x, y - 2)), _pt((x, y + 3)), NOSE_COLOR, 1, cv2.LINE_AA)
    _ellipse(frame, (x, y + 8), 8, 4, MOUTH_COLOR, start=0, end=180, thickness=1)


def draw_simple_figure_on_frame(frame: np.ndarray, joints: JointPositions) -> None:
    """Illustrated style, painted back to front: dress, limbs, neck, head."""

    _draw_simple_dress(frame, joints)
    for side in ("left", "right"):
        _draw_simple_arm(frame, joints, side)
        _draw_simple_leg(frame, joints, side)
    cv2.line(frame, _pt(joints["spine_end"]), _pt(joints["head"]), SKIN_COLOR, 8, cv2.LINE_AA)
    _draw_simple_head(frame, joints["head"])


def _draw_detailed_dress(frame: np.ndarray, joints: JointPositions) -> None:
    pelvis, spine_end = joints["pelvis"], joints["spine_end"]
    waist = _lerp(pelvis, spine_end, 0.3)
    chest = _lerp(pelvis, spine_end, 0.6)
    _ellipse(frame, waist, 28, 40, DETAILED_DRESS_COLOR)
    _ellipse(frame, chest, 38, 50, DETAILED_DRESS_COLOR)

    knee_y = min(joints["left_knee"][1], joints["right_knee"][1])
    skirt_y = (waist[1] + knee_y) / 2
    skirt_height = knee_y - waist[1] - 15
    _ellipse(frame, (waist[0], skirt_y), 55, skirt_height, DETAILED_DRESS_COLOR)
    # folds
    for i in range(3):
        _ellipse(frame, (waist[0] + (i - 1) * 8, skirt_y), 45, skirt_height - 5, DRESS_FOLD_COLOR)

    _ellipse(frame, (chest[0], chest[1] - 10), 22, 18, DETAILED_NECKLINE_COLOR)
    _ellipse(frame, waist, 30, 8, BELT_COLOR)


def _draw_detailed_arm(frame: np.ndarray, joints: JointPositions, side: str) -> None:
    spine_end = joints["spine_end"]
    shoulder = joints[f"{side}_shoulder"]
    elbow = joints[f"{side}_elbow"]
    hand = joints[f"{side}_hand"]
    offset = 2.0 if side == "left" else -2.0

    _ellipse(frame, shoulder, 14, 28, SKIN_COLOR)
    _ellipse(frame, elbow, 12, 22, SKIN_COLOR)
    _ellipse(frame, hand, 10, 14, SKIN_COLOR)
    for a, b in ((spine_end, shoulder), (shoulder, elbow), (elbow, hand)):
        cv2.line(frame, _pt(a), _pt(b), SKIN_COLOR, 4, cv2.LINE_AA)
    for a, b in ((shoulder, elbow), (elbow, hand)):
        cv2.line(frame, _pt(a, offset), _pt(b, offset), SKIN_SHADE_COLOR, 2, cv2.LINE_AA)


def _draw_detailed_leg(frame: np.ndarray, joints: JointPositions, side: str) -> None:
    knee = joints[f"{side}_knee"]
    foot = joints[f"{side}_foot"]
    toe_dir = 1.0 if side == "left" else -1.0

    _ellipse(frame, knee, 18, 38, SKIN_COLOR)
    _ellipse(frame, (foot[0] + toe_dir * 10, foot[1]), 22, 14, SKIN_COLOR)
    cv2.line(frame, _pt(knee), _pt(foot), SKIN_COLOR, 5, cv2.LINE_AA)
    cv2.line(frame, _pt(knee, toe_dir * 2), _pt(foot, toe_dir * 2), SKIN_SHADE_COLOR, 3, cv2.LINE_AA)


def _draw_detailed_head(frame: np.ndarray, head: np.ndarray) -> None:
    x, y = float(head[0]), float(head[1])

    _ellipse(frame, (x, y - 8), 38, 48, HAIR_COLOR)
    _ellipse(frame, (x, y), 32, 42, SKIN_COLOR)
    _ellipse(frame, (x, y + 16), 22, 12, SKIN_COLOR)
    # cheeks
    _ellipse(frame, (x - 10, y + 5), 8, 6, SKIN_SHADE_COLOR)
    _ellipse(frame, (x + 10, y + 5), 8, 6, SKIN_SHADE_COLOR)

    _ellipse(frame, (x, y - 12), 28, 15, HAIR_COLOR)
    for sign in (-1.0, 1.0):
        _quadratic_curve(
            frame, (x + sign * 16, y - 5), (x + sign * 22, y + 8), (x + sign * 14, y + 20), HAIR_COLOR, 4
        )
        _quadratic_curve(
            frame, (x + sign * 14, y + 20), (x + sign * 10, y + 30), (x + sign * 8, y + 25), HAIR_COLOR, 4
        )
    for i in range(3):
        strand_x = x - 12 + i * 12
        strand_y = y + 15 + i * 5
        cv2.line(frame, _pt((strand_x, y - 3)), _pt((strand_x - 3, strand_y)), HAIR_COLOR, 2, cv2.LINE_AA)
        cv2.line(frame, _pt((strand_x, y - 3)), _pt((strand_x + 3, strand_y)), HAIR_COLOR, 2, cv2.LINE_AA)

    for eye_x in (x - 8, x + 8):
        _ellipse(frame, (eye_x, y - 5), 10, 8, (255, 255, 255))
        _ellipse(frame, (eye_x, y - 5), 7, 5, IRIS_COLOR)
        _ellipse(frame, (eye_x, y - 5), 5, 4, INNER_IRIS_COLOR)
        _ellipse(frame, (eye_x, y - 5), 3, 3, (0, 0, 0))
        _ellipse(frame, (eye_x + 0.5, y - 5.5), 1.5, 1.5, (255, 255, 255))
        _ellipse(frame, (eye_x, y - 8), 12, 4, HAIR_COLOR, start=180, end=360, thickness=2)

    cv2.line(frame, _pt((x, y - 2)), _pt((x, y + 4)), SKIN_SHADE_COLOR, 2, cv2.LINE_AA)
    cv2.line(frame, _pt((x + 1, y - 1)), _pt((x + 1, y + 2)), NOSE_SHADOW_COLOR, 1, cv2.LINE_AA)
    _ellipse(frame, (x, y + 8), 8, 3, MOUTH_INNER_COLOR, start=0, end=180)
    _ellipse(frame, (x, y + 8), 10, 5, LIP_COLOR, start=0, end=180, thickness=2)


def draw_detailed_figure_on_frame(frame: np.ndarray, joints: JointPositions) -> None:
    """Illustrated style with folds, shading and a fuller face."""

    _draw_detailed_dress(frame, joints)
    for side in ("left", "right"):
        _draw_detailed_arm(frame, joints, side)
        _draw_detailed_leg(frame, joints, side)
    spine_end, head = joints["spine_end"], joints["head"]
    cv2.line(frame, _pt(spine_end), _pt(head), SKIN_COLOR, 10, cv2.LINE_AA)
    cv2.line(frame, _pt(spine_end, 2), _pt(head, 2), SKIN_SHADE_COLOR, 8, cv2.LINE_AA)
    _draw_detailed_head(frame, head)


def draw_figure_on_frame(
    frame: np.ndarray, joints: JointPositions, mode: RenderMode = RenderMode.SKELETON
) -> None:
    """Draw `joints` onto a BGR frame in the given style (in place).

    Does nothing when `joints` is None.
    """
    if joints is None:
        return

    if mode is RenderMode.SKELETON:
        draw_skeleton_on_frame(frame, joints)
    elif mode is RenderMode.SIMPLE:
        draw_simple_figure_on_frame(frame, joints)
    elif mode is RenderMode.DETAILED:
        draw_detailed_figure_on_frame(frame, joints)
    else:
        raise ValueError(f"Unsupported render mode: {mode!r}")
