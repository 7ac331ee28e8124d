# lifegrid

Conway's Game of Life, run on a 100 × 100 pixel framebuffer. Every pixel is a
cell: black pixels are alive and pixels in the background colour (green) are
dead. The board starts from a fixed pixel-art pattern and moves forward one
generation per frame, at about ten frames a second, until you close the window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
lifegrid
```

This opens a 100 × 100 window titled "Game of Life" and draws each generation
into it. The command takes no options apart from `--help`; the board size,
colours, speed and starting pattern are fixed.

## Rules

Cells beyond the edge of the board count as dead; the board does not wrap
around. Each generation:

- a living cell with fewer than two or more than three living neighbours dies;
- a dead cell with exactly three living neighbours comes to life.

Every change is worked out from the board as it was before the step, and only
then written back. Any pixel that is not the background colour is treated as a
living cell, but only pixels of the living colour are counted as neighbours.

## Using it as a library

```python
from lifegrid.framebuffer import Color, FrameBuffer
from lifegrid.life import game_of_life

green = Color.GREEN     # Color(0, 228, 48, 255)
black = Color.BLACK     # Color(0, 0, 0, 255)

board = FrameBuffer(5, 5, green)
for x in (1, 2, 3):
    board.set_pixel(x, 2, black)   # a horizontal blinker

game_of_life(board, 5, 5, green, black)
assert board.get_pixel(2, 1) == black   # it is now vertical
assert board.get_pixel(1, 2) == green

board.draw_image("blinker.png")   # writes the board to an image file
```

### `lifegrid.framebuffer`

- `Color(r, g, b, a=255)` is a named tuple of 8-bit channels, with the
  constants `Color.BLANK`, `Color.WHITE`, `Color.BLACK` and `Color.GREEN`.
- `FrameBuffer(width, height, color)` holds a grid of colours filled with
  `color`.
  - `set_pixel(x, y, color)` does nothing for coordinates off the board.
  - `get_pixel(x, y)` returns `Color.BLANK` for coordinates off the board.
  - `pixels()` returns a copy of all pixels, row by row.
  - `clear()` fills the board with the colour it was created with again.
  - `draw_image(path)` saves the board as an RGBA image (the format follows the
    file extension) and prints a line saying where it was saved.
  - `swap_buffers(surface)` draws the board at the top-left corner of a pygame
    surface, and flips the display when that surface is the display surface.

### `lifegrid.life`

- `game_of_life(framebuffer, width, height, bg_color, living_color)` advances
  the board by one generation in place.
- `living_neighbors(data, x, y, width, height, living_color)` counts the living
  neighbours of a cell in a row-major list of pixels; `dies(...)` and
  `is_born(...)` take the same arguments and apply the two rules above.

### `lifegrid.app`

- `starting_points()` returns the built-in pattern as a list of `(x, y)` pairs;
  `lifegrid.pattern_upper.upper_points()` and
  `lifegrid.pattern_lower.lower_points()` return its top and bottom halves.
- `seed(framebuffer, points, color)` sets each of the given points to a colour.
- `main(argv=None)` is what the `lifegrid` command runs.

## What it does not do

There is no way to edit the board, pause, step, or load a different pattern
from the window or the command line, and nothing is saved unless you call
`FrameBuffer.draw_image` yourself.