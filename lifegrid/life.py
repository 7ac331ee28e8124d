"""Conway's Game of Life rules applied to the pixels of a frame buffer."""

from __future__ import annotations

from collections.abc import Sequence

from lifegrid.framebuffer import Color, FrameBuffer

_NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def living_neighbors(
    data: Sequence[Color], x: int, y: int, width: int, height: int, living_color: Color
) -> int:
    """Count the neighbours of (x, y) that hold ``living_color``; edges do not wrap."""
    return sum(
        1
        for dx, dy in _NEIGHBOR_OFFSETS
        if 0 <= x + dx < width
        and 0 <= y + dy < height
        and data[(y + dy) * width + (x + dx)] == living_color
    )


def dies(
    data: Sequence[Color], x: int, y: int, width: int, height: int, living_color: Color
) -> bool:
    """Whether a live cell dies of under- or overpopulation."""
    count = living_neighbors(data, x, y, width, height, living_color)
    return count < 2 or count > 3


def is_born(
    data: Sequence[Color], x: int, y: int, width: int, height: int, living_color: Color
) -> bool:
    """Whether an empty cell comes alive (exactly three live neighbours)."""
    return living_neighbors(data, x, y, width, height, living_color) == 3


def game_of_life(
    framebuffer: FrameBuffer,
    width: int,
    height: int,
    bg_color: Color,
    living_color: Color,
) -> None:
    """Advance the frame buffer by one generation in place.

    Any pixel that is not ``bg_color`` counts as a live cell, but only pixels
    equal to ``living_color`` are counted as live neighbours.
    """
    data = framebuffer.pixels()
    deaths: list[tuple[int, int]] = []
    births: list[tuple[int, int]] = []

    for y in range(height):
        for x in range(width):
            if data[y * width + x] != bg_color:
                if dies(data, x, y, width, height, living_color):
                    deaths.append((x, y))
            elif is_born(data, x, y, width, height, living_color):
                births.append((x, y))

    for x, y in deaths:
        framebuffer.set_pixel(x, y, bg_color)
    for x, y in births:
        framebuffer.set_pixel(x, y, living_color)