import pytest

from lifegrid.framebuffer import Color, FrameBuffer
from lifegrid.life import dies, game_of_life, is_born, living_neighbors

BG = Color.GREEN
LIVE = Color.BLACK


def make_buffer(width, height, cells):
    buffer = FrameBuffer(width, height, BG)
    for x, y in cells:
        buffer.set_pixel(x, y, LIVE)
    return buffer


def live_cells(buffer):
    return {
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.get_pixel(x, y) == LIVE
    }


def test_living_neighbors_counts_surrounding_cells():
    buffer = make_buffer(3, 3, [(0, 0), (2, 0), (1, 2)])
    assert living_neighbors(buffer.pixels(), 1, 1, 3, 3, LIVE) == 3


def test_living_neighbors_ignores_self_and_does_not_wrap():
    buffer = make_buffer(3, 3, [(0, 0), (2, 2)])
    data = buffer.pixels()
    assert living_neighbors(data, 0, 0, 3, 3, LIVE) == 0
    assert living_neighbors(data, 2, 0, 3, 3, LIVE) == 0


def test_is_born_and_dies_rules():
    buffer = make_buffer(3, 3, [(0, 0), (2, 0), (1, 2)])
    data = buffer.pixels()
    assert is_born(data, 1, 1, 3, 3, LIVE)
    assert not dies(data, 1, 1, 3, 3, LIVE)
    assert dies(data, 0, 0, 3, 3, LIVE)
    assert not is_born(data, 0, 1, 3, 3, LIVE)


def test_single_cell_dies():
    buffer = make_buffer(5, 5, [(2, 2)])
    game_of_life(buffer, 5, 5, BG, LIVE)
    assert buffer.pixels() == [BG] * 25


def test_block_is_still_life():
    cells = {(1, 1), (2, 1), (1, 2), (2, 2)}
    buffer = make_buffer(4, 4, cells)
    for _ in range(3):
        game_of_life(buffer, 4, 4, BG, LIVE)
        assert live_cells(buffer) == cells


def test_blinker_oscillates_with_period_two():
    horizontal = {(1, 2), (2, 2), (3, 2)}
    vertical = {(2, 1), (2, 2), (2, 3)}
    buffer = make_buffer(5, 5, horizontal)
    game_of_life(buffer, 5, 5, BG, LIVE)
    assert live_cells(buffer) == vertical
    game_of_life(buffer, 5, 5, BG, LIVE)
    assert live_cells(buffer) == horizontal


def test_corner_block_survives_without_wrapping():
    cells = {(0, 0), (1, 0), (0, 1), (1, 1)}
    buffer = make_buffer(3, 3, cells)
    game_of_life(buffer, 3, 3, BG, LIVE)
    assert live_cells(buffer) == cells


def test_foreign_color_counts_as_alive_but_not_as_neighbor():
    buffer = make_buffer(5, 5, [(1, 2), (3, 2)])
    buffer.set_pixel(2, 2, Color.WHITE)
    game_of_life(buffer, 5, 5, BG, LIVE)
    assert buffer.get_pixel(2, 2) == BG
    assert live_cells(buffer) == set()


def test_empty_grid_stays_empty():
    buffer = make_buffer(6, 4, [])
    game_of_life(buffer, 6, 4, BG, LIVE)
    assert buffer.pixels() == [BG] * 24


def test_grid_larger_than_buffer_raises_index_error():
    buffer = make_buffer(3, 3, [])
    with pytest.raises(IndexError):
        game_of_life(buffer, 4, 4, BG, LIVE)