from collections import defaultdict

from lifegrid.pattern_upper import upper_points


def _by_row():
    rows = defaultdict(list)
    for x, y in upper_points():
        rows[y].append(x)
    return rows


def test_first_and_last_points():
    points = upper_points()
    assert points[0] == (0, 0)
    assert points[1] == (1, 0)
    assert points[-1] == (96, 49)


def test_all_points_lie_in_upper_half_of_grid():
    for x, y in upper_points():
        assert 0 <= x < 100
        assert 0 <= y < 50


def test_points_are_unique():
    points = upper_points()
    assert len(points) == len(set(points))


def test_points_are_in_row_major_order():
    points = upper_points()
    assert points == sorted(points, key=lambda p: (p[1], p[0]))


def test_known_points_present():
    points = set(upper_points())
    assert {(89, 8), (90, 8), (67, 16), (83, 42)} <= points
    assert (0, 4) not in points


def test_border_rows_repeat():
    rows = _by_row()
    assert rows[0] == rows[3]
    assert rows[1] == rows[2]
    assert [x + 2 for x in rows[0]] == rows[1]


def test_row_pairs_that_differ_by_one_cell():
    rows = _by_row()
    assert set(rows[40]) - set(rows[39]) == {7}
    assert set(rows[39]) <= set(rows[40])
    assert set(rows[21]) ^ set(rows[20]) == {10, 49, 88}


def test_empty_rows():
    rows = _by_row()
    for y in (4, 5, 6, 7, 18, 43):
        assert rows[y] == []


def test_each_call_returns_a_fresh_list():
    first = upper_points()
    first.clear()
    assert upper_points()[0] == (0, 0)