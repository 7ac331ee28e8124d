"""An in-memory RGBA pixel buffer that can be saved to disk or shown on screen."""

from __future__ import annotations

from typing import NamedTuple

import pygame
from PIL import Image


class Color(NamedTuple):
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


Color.BLANK = Color(0, 0, 0, 0)
Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(0, 0, 0, 255)
Color.GREEN = Color(0, 228, 48, 255)


class FrameBuffer:
    """A fixed-size grid of colours, stored row by row."""

    def __init__(self, width: int, height: int, color: Color) -> None:
        self.width = width
        self.height = height
        self.color = Color(*color)
        self._data: list[Color] = [self.color] * (width * height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._contains(x, y):
            self._data[y * self.width + x] = Color(*color)

    def get_pixel(self, x: int, y: int) -> Color:
        """Return one pixel, or ``Color.BLANK`` outside the buffer."""
        if self._contains(x, y):
            return self._data[y * self.width + x]
        return Color.BLANK

    def pixels(self) -> list[Color]:
        """Return a snapshot of all pixels in row-major order."""
        return list(self._data)

    def _rgba_bytes(self) -> bytes:
        return bytes(channel for pixel in self._data for channel in pixel)

    def draw_image(self, output_file_name: str) -> None:
        """Save the buffer as an image; the format follows the file extension."""
        image = Image.frombytes("RGBA", (self.width, self.height), self._rgba_bytes())
        image.save(output_file_name)
        print(f"Image created and saved as '{output_file_name}'!")

    def clear(self) -> None:
        """Fill the whole buffer with its background colour."""
        self._data = [self.color] * (self.width * self.height)

    def swap_buffers(self, surface: pygame.Surface) -> None:
        """Draw the buffer at the top-left corner of ``surface`` and present it."""
        image = pygame.image.frombuffer(
            self._rgba_bytes(), (self.width, self.height), "RGBA"
        )
        surface.blit(image, (0, 0))
        if surface is pygame.display.get_surface():
            pygame.display.flip()