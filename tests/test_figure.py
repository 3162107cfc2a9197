import numpy as np
import pytest
from lib_figure.data import STANDING_ANGLES, floor_y_for_height
from lib_figure.figure import Figure
from lib_figure.kinematics import RIGID_NECK_CHAIN


def _lower_foot_y(figure):
    joints = figure.solve()
    return max(joints["left_foot"][1], joints["right_foot"][1])


def test_floor_line_constant():
    assert floor_y_for_height(600) == pytest.approx(540.0)


def test_new_figure_stands_on_floor():
    figure = Figure()
    assert figure.floor_y == pytest.approx(540.0)
    assert figure.pose.pelvis_x == pytest.approx(400.0)
    assert _lower_foot_y(figure) == pytest.approx(540.0, abs=1e-6)
    for name, value in STANDING_ANGLES.items():
        assert getattr(figure.pose, name) == value


def test_custom_floor_and_home():
    figure = Figure(floor_y=900.0, home_x=960.0)
    assert figure.pose.pelvis_x == 960.0
    assert _lower_foot_y(figure) == pytest.approx(900.0, abs=1e-6)


def test_nudge_accumulates_without_limit():
    figure = Figure()
    for _ in range(200):
        figure.nudge("spine_angle", 3.0)
    assert figure.pose.spine_angle == pytest.approx(-90.0 + 600.0)


def test_nudge_returns_new_value():
    figure = Figure()
    assert figure.nudge("pelvis_x", -2.0) == pytest.approx(398.0)


def test_nudge_rejects_unknown_field():
    with pytest.raises(KeyError):
        Figure().nudge("tail_angle", 1.0)


def test_nudge_rejects_non_finite_delta():
    figure = Figure()
    with pytest.raises(ValueError):
        figure.nudge("left_thigh_angle", float("inf"))
    assert figure.pose.left_thigh_angle == 160.0


def test_moving_a_leg_does_not_resnap_to_floor():
    figure = Figure()
    pelvis_y = figure.pose.pelvis_y
    figure.nudge("left_thigh_angle", -30.0)
    figure.nudge("right_thigh_angle", 30.0)
    assert figure.pose.pelvis_y == pelvis_y
    assert _lower_foot_y(figure) != pytest.approx(540.0, abs=1e-3)


def test_reset_restores_standing_pose():
    figure = Figure()
    original = figure.pose.values()
    figure.nudge("pelvis_y", -50.0)
    figure.nudge("spine_angle", 33.0)
    figure.nudge("right_upper_arm_angle", 12.0)
    figure.nudge("neck_angle", 9.0)

    figure.reset()

    assert figure.pose.values() == original
    assert _lower_foot_y(figure) == pytest.approx(540.0, abs=1e-6)


def test_reset_is_idempotent():
    figure = Figure()
    figure.nudge("left_shin_angle", 45.0)
    figure.reset()
    first_pose, first_joints = figure.pose.values(), figure.solve()
    figure.reset()
    assert figure.pose.values() == first_pose
    assert np.array_equal(figure.solve().keypoints, first_joints.keypoints)


def test_reset_replaces_pose_object():
    figure = Figure()
    held = figure.pose
    figure.reset()
    assert figure.pose is not held


def test_chain_is_used_by_solve():
    figure = Figure(chain=RIGID_NECK_CHAIN)
    figure.nudge("neck_angle", 90.0)
    joints = figure.solve()
    assert joints["head"][0] == pytest.approx(joints["spine_end"][0], abs=1e-9)


def test_solve_results_are_values():
    figure = Figure()
    assert figure.solve() == figure.solve()
    assert Figure().solve() == Figure().solve()
    assert len({Figure().solve(), Figure().solve()}) == 1
