import pygame
import pytest
from conftest import Pressed
from lib_figure.controls import ANGLE_STEP, KEY_BINDINGS, MOVE_STEP, apply_held_keys
from lib_figure.data import POSE_FIELDS
from lib_figure.figure import Figure


def test_no_keys_no_change():
    figure = Figure()
    before = figure.pose.values()
    assert apply_held_keys(figure, Pressed()) == 0
    assert figure.pose.values() == before


def test_w_moves_pelvis_up():
    figure = Figure()
    y = figure.pose.pelvis_y
    apply_held_keys(figure, Pressed(pygame.K_w))
    assert figure.pose.pelvis_y == pytest.approx(y - MOVE_STEP)


def test_held_key_accumulates_per_frame():
    figure = Figure()
    for _ in range(10):
        apply_held_keys(figure, Pressed(pygame.K_e))
    assert figure.pose.spine_angle == pytest.approx(-90.0 + 10 * ANGLE_STEP)


def test_several_keys_at_once():
    figure = Figure()
    fired = apply_held_keys(figure, Pressed(pygame.K_UP, pygame.K_RIGHT, pygame.K_i, pygame.K_z))
    assert fired == 4
    assert figure.pose.left_upper_arm_angle == pytest.approx(90.0 - ANGLE_STEP)
    assert figure.pose.right_upper_arm_angle == pytest.approx(-90.0 + ANGLE_STEP)
    assert figure.pose.left_thigh_angle == pytest.approx(160.0 - ANGLE_STEP)
    assert figure.pose.neck_angle == pytest.approx(-ANGLE_STEP)


def test_opposite_keys_cancel():
    figure = Figure()
    before = figure.pose.values()
    apply_held_keys(figure, Pressed(pygame.K_j, pygame.K_l, pygame.K_a, pygame.K_d))
    assert figure.pose.values() == pytest.approx(before)


def test_bindings_target_pose_fields():
    assert {b.field for b in KEY_BINDINGS} <= set(POSE_FIELDS)
    assert len({b.key for b in KEY_BINDINGS}) == len(KEY_BINDINGS)
