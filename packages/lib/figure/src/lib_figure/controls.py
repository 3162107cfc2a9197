"""Keyboard bindings that drive the figure's pose while keys are held."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import pygame

from .figure import Figure

# Per-frame increments
MOVE_STEP = 2.0
ANGLE_STEP = 3.0


@dataclass(frozen=True)
class KeyBinding:
    key: int
    field: str
    delta: float


KEY_BINDINGS: Tuple[KeyBinding, ...] = (
    # pelvis position (W is up the screen)
    KeyBinding(pygame.K_w, "pelvis_y", -MOVE_STEP),
    KeyBinding(pygame.K_s, "pelvis_y", MOVE_STEP),
    KeyBinding(pygame.K_a, "pelvis_x", -MOVE_STEP),
    KeyBinding(pygame.K_d, "pelvis_x", MOVE_STEP),
    # torso
    KeyBinding(pygame.K_q, "spine_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_e, "spine_angle", ANGLE_STEP),
    # arms
    KeyBinding(pygame.K_UP, "left_upper_arm_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_DOWN, "left_upper_arm_angle", ANGLE_STEP),
    KeyBinding(pygame.K_LEFT, "right_upper_arm_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_RIGHT, "right_upper_arm_angle", ANGLE_STEP),
    # legs
    KeyBinding(pygame.K_i, "left_thigh_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_k, "left_thigh_angle", ANGLE_STEP),
    KeyBinding(pygame.K_j, "right_thigh_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_l, "right_thigh_angle", ANGLE_STEP),
    # head
    KeyBinding(pygame.K_z, "neck_angle", -ANGLE_STEP),
    KeyBinding(pygame.K_x, "neck_angle", ANGLE_STEP),
)


def apply_held_keys(
    figure: Figure,
    pressed: Any,
    bindings: Tuple[KeyBinding, ...] = KEY_BINDINGS,
) -> int:
    """Apply one frame of input to `figure`.

    `pressed` is anything indexable by pygame key constants that returns a
    truthy value for held keys, e.g. the result of `pygame.key.get_pressed()`.
    Returns the number of bindings that fired.
    """

    fired = 0
    for binding in bindings:
        if pressed[binding.key]:
            figure.nudge(binding.field, binding.delta)
            fired += 1
    return fired
