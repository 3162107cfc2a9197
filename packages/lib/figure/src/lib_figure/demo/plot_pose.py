"""Plot the dancer figure with matplotlib (standing pose or custom angles)."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import PathCollection
from matplotlib.lines import Line2D

from lib_figure.data import (
    ANGLE_FIELDS,
    BONE_CONNECTIONS,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    JointPositions,
)
from lib_figure.figure import Figure
from lib_figure.kinematics import BONE_CHAIN, RIGID_NECK_CHAIN


@dataclass
class PoseVisuals:
    points: Optional[PathCollection]
    segments: List[Line2D]
    floor: Optional[Line2D]


def create_pose_2d_matplotlib(
    joints: JointPositions,
    *,
    ax: Axes,
    floor_y: Optional[float] = None,
) -> PoseVisuals:
    """Draw bones, joints and the floor line onto `ax`.

    The axes are inverted on y so the plot matches screen coordinates.
    """

    segments: List[Line2D] = []
    for a, b in BONE_CONNECTIONS:
        (line,) = ax.plot(
            [joints[a][0], joints[b][0]],
            [joints[a][1], joints[b][1]],
            color="tab:blue",
            linewidth=2.0,
        )
        segments.append(line)

    points = ax.scatter(joints.keypoints[:, 0], joints.keypoints[:, 1], color="tab:red", s=12, zorder=3)

    floor = None
    if floor_y is not None:
        floor = ax.axhline(floor_y, color="black", linewidth=2.0)

    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_aspect("equal")
    return PoseVisuals(points=points, segments=segments, floor=floor)


def dispose_pose_visuals(visuals: PoseVisuals) -> None:
    for line in visuals.segments:
        line.remove()
    visuals.segments = []
    if visuals.points is not None:
        visuals.points.remove()
        visuals.points = None
    if visuals.floor is not None:
        visuals.floor.remove()
        visuals.floor = None


def parse_angle_overrides(items: Sequence[str]) -> dict[str, float]:
    """Parse `name=degrees` pairs such as `left_thigh_angle=120`."""

    overrides: dict[str, float] = {}
    for item in items:
        name, sep, value = item.partition("=")
        if not sep:
            raise ValueError(f"Expected name=degrees, got '{item}'.")
        if name not in ANGLE_FIELDS:
            raise ValueError(f"Unknown angle '{name}'. Choose from: {', '.join(ANGLE_FIELDS)}")
        overrides[name] = float(value)
    return overrides


def build_figure(overrides: dict[str, float], *, rigid_neck: bool = False) -> Figure:
    figure = Figure(chain=RIGID_NECK_CHAIN if rigid_neck else BONE_CHAIN)
    for name, value in overrides.items():
        figure.nudge(name, value - getattr(figure.pose, name))
    return figure


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "angles",
        nargs="*",
        metavar="NAME=DEGREES",
        help="Angle overrides applied on top of the standing pose.",
    )
    parser.add_argument(
        "--rigid-neck",
        action="store_true",
        help="Ignore neck_angle and keep the head aligned with the spine.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Save the plot to this path instead of opening a window.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    try:
        overrides = parse_angle_overrides(args.angles)
    except ValueError as exc:
        parser.error(str(exc))

    figure = build_figure(overrides, rigid_neck=args.rigid_neck)

    fig = plt.figure(figsize=(8, 6))
    ax = fig.add_subplot(111)
    ax.set_xlim(0, CANVAS_WIDTH)
    ax.set_ylim(0, CANVAS_HEIGHT)
    create_pose_2d_matplotlib(figure.solve(), ax=ax, floor_y=figure.floor_y)
    fig.suptitle("Dancer pose")

    if args.output:
        fig.savefig(args.output)
        plt.close(fig)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
