"""Window that runs the Game of Life on the built-in starting pattern."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Sequence

import pygame

from lifegrid.framebuffer import Color, FrameBuffer
from lifegrid.life import game_of_life
from lifegrid.pattern_lower import lower_points
from lifegrid.pattern_upper import upper_points

WINDOW_WIDTH = 100
WINDOW_HEIGHT = 100
FRAMEBUFFER_WIDTH = 100
FRAMEBUFFER_HEIGHT = 100
BACKGROUND = Color.GREEN
LIVING = Color.BLACK
TARGET_FRAME_TIME = 0.1  # seconds, i.e. 10 frames per second
TITLE = "Game of Life"


def starting_points() -> list[tuple[int, int]]:
    """Return every live cell of the built-in pattern as (x, y) pairs."""
    return upper_points() + lower_points()


def seed(
    framebuffer: FrameBuffer, points: Iterable[tuple[int, int]], color: Color
) -> None:
    """Paint ``color`` at each of ``points``; points off the buffer are ignored."""
    for x, y in points:
        framebuffer.set_pixel(int(x), int(y), color)


def _close_requested() -> bool:
    return any(event.type == pygame.QUIT for event in pygame.event.get())


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and advance one generation per frame until it is closed."""
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life on a built-in pattern.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)

        framebuffer = FrameBuffer(FRAMEBUFFER_WIDTH, FRAMEBUFFER_HEIGHT, BACKGROUND)
        seed(framebuffer, starting_points(), LIVING)

        while not _close_requested():
            frame_start = time.monotonic()

            game_of_life(
                framebuffer, WINDOW_WIDTH, WINDOW_HEIGHT, BACKGROUND, LIVING
            )
            framebuffer.swap_buffers(screen)

            elapsed = time.monotonic() - frame_start
            if elapsed < TARGET_FRAME_TIME:
                time.sleep(TARGET_FRAME_TIME - elapsed)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())