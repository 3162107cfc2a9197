import numpy as np
import pytest
from lib_figure.figure import Figure
from lib_figure.util_2d import (
    BACKGROUND_COLOR,
    BELT_COLOR,
    FLOOR_COLOR,
    RenderMode,
    draw_background,
    draw_figure_on_frame,
    draw_floor,
)


@pytest.fixture
def frame():
    frame = np.zeros((600, 800, 3), dtype=np.uint8)
    draw_background(frame)
    return frame


def test_background_fills_frame(frame):
    assert (frame.reshape(-1, 3) == BACKGROUND_COLOR).all()


def test_floor_line(frame):
    draw_floor(frame, 540.0)
    assert tuple(frame[540, 10]) == FLOOR_COLOR
    assert tuple(frame[540, 790]) == FLOOR_COLOR
    assert tuple(frame[500, 10]) == BACKGROUND_COLOR


@pytest.mark.parametrize("mode", list(RenderMode))
def test_figure_is_drawn_around_the_pelvis(frame, mode):
    figure = Figure()
    joints = figure.solve()
    blank = frame.copy()

    draw_figure_on_frame(frame, joints, mode)

    changed = np.argwhere((frame != blank).any(axis=2))
    assert len(changed) > 0
    x, y = joints["pelvis"]
    # drawing stays within a generous box around the figure
    assert changed[:, 1].min() > x - 200 and changed[:, 1].max() < x + 200
    assert changed[:, 0].min() > joints["head"][1] - 60
    assert changed[:, 0].max() < figure.floor_y + 20


def test_figure_off_screen_is_clipped(frame):
    figure = Figure(home_x=-5000.0)
    blank = frame.copy()
    draw_figure_on_frame(frame, figure.solve(), RenderMode.SIMPLE)
    assert np.array_equal(frame, blank)


def test_none_joints_is_noop(frame):
    blank = frame.copy()
    draw_figure_on_frame(frame, None)
    assert np.array_equal(frame, blank)


def test_render_mode_cycles():
    assert RenderMode.SKELETON.next() is RenderMode.SIMPLE
    assert RenderMode.SIMPLE.next() is RenderMode.DETAILED
    assert RenderMode.DETAILED.next() is RenderMode.SKELETON


def test_detailed_style_differs_from_simple(frame):
    joints = Figure().solve()
    simple = frame.copy()
    detailed = frame.copy()
    draw_figure_on_frame(simple, joints, RenderMode.SIMPLE)
    draw_figure_on_frame(detailed, joints, RenderMode.DETAILED)
    assert not np.array_equal(simple, detailed)


def test_detailed_style_draws_the_belt(frame):
    joints = Figure().solve()
    draw_figure_on_frame(frame, joints, RenderMode.DETAILED)
    waist = joints["pelvis"] + (joints["spine_end"] - joints["pelvis"]) * 0.3
    x, y = int(round(waist[0])), int(round(waist[1]))
    assert tuple(frame[y, x]) == BELT_COLOR
