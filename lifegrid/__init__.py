"""Conway's Game of Life on a pixel framebuffer, with a pygame window to watch it."""

__version__ = "0.1.0"