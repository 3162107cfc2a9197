"""App entrypoint: a keyboard-posable dancer on a pygame window.

Controls: W/A/S/D move the pelvis, Q/E lean the torso, arrow keys swing the
arms, I/K and J/L swing the legs, Z/X tilt the head. R resets, P pauses,
Tab switches the drawing style, F toggles fullscreen.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

import pygame
from lib_figure.data import CANVAS_HEIGHT, CANVAS_WIDTH
from lib_figure.logging_config import setup_logging
from lib_figure.util_2d import RenderMode
from lib_game import DanceScene, GlobalState, SequenceManager, StartScene

logger = logging.getLogger("app")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--width",
        type=int,
        default=CANVAS_WIDTH,
        help=f"Window width in pixels (default: {CANVAS_WIDTH}).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=CANVAS_HEIGHT,
        help=f"Window height in pixels (default: {CANVAS_HEIGHT}).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Frame rate cap (default: 60).",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in RenderMode],
        default=RenderMode.SKELETON.value,
        help="Initial drawing style (default: skeleton).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0 or args.fps <= 0:
        parser.error("--width, --height and --fps must be positive")

    setup_logging(getattr(logging, args.log_level), args.log_file)

    manager = SequenceManager(
        GlobalState(width=args.width, height=args.height, render_mode=RenderMode(args.mode))
    )
    manager.initialize()
    manager.register_scene("start", StartScene())
    manager.register_scene("dance", DanceScene())

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
    except pygame.error as e:
        print(f"Could not open a window: {e}", file=sys.stderr)
        pygame.quit()
        return 2
    pygame.display.set_caption("RDance")

    manager.start("start")

    clock = pygame.time.Clock()
    running = True
    while running and manager.running:
        dt = clock.tick(args.fps) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            manager.handle_event(event)

        manager.update(dt)
        manager.render(screen)
        pygame.display.flip()

    manager.shutdown()
    pygame.quit()
    logger.info("bye")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
