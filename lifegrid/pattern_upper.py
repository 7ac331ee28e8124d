"""The top half (rows 0 to 49) of the built-in starting pattern."""

from __future__ import annotations

_ROWS: dict[int, tuple[int, ...]] = {
    0: (0, 1, 5, 6, 10, 11, 15, 16, 20, 21, 25, 26, 30, 31, 35, 36, 40, 41, 45, 46,
        50, 51, 55, 56, 60, 61, 65, 66, 70, 71, 75, 76, 80, 81, 85, 86, 90, 91, 95, 96),
    1: (2, 3, 7, 8, 12, 13, 17, 18, 22, 23, 27, 28, 32, 33, 37, 38, 42, 43, 47, 48,
        52, 53, 57, 58, 62, 63, 67, 68, 72, 73, 77, 78, 82, 83, 87, 88, 92, 93, 97, 98),
    2: (2, 3, 7, 8, 12, 13, 17, 18, 22, 23, 27, 28, 32, 33, 37, 38, 42, 43, 47, 48,
        52, 53, 57, 58, 62, 63, 67, 68, 72, 73, 77, 78, 82, 83, 87, 88, 92, 93, 97, 98),
    3: (0, 1, 5, 6, 10, 11, 15, 16, 20, 21, 25, 26, 30, 31, 35, 36, 40, 41, 45, 46,
        50, 51, 55, 56, 60, 61, 65, 66, 70, 71, 75, 76, 80, 81, 85, 86, 90, 91, 95, 96),
    8: (89, 90),
    9: (18, 24, 25, 71, 72, 80, 81),
    10: (11, 25, 33, 47, 48, 49, 63),
    11: (4, 6, 11, 36, 42, 53, 67, 73),
    12: (11, 42, 43, 72, 73, 76, 85),
    13: (7, 18, 30, 59, 91, 92),
    14: (4, 7, 8, 20, 59, 64),
    15: (39, 67, 73, 76, 85, 86),
    16: (67,),
    17: (45, 51, 52, 54, 55, 56),
    19: (9, 10),
    20: (10, 18, 19, 22, 23, 25, 26, 28, 29, 31, 32, 34, 35, 37, 38,
         59, 60, 62, 63, 65, 66, 68, 69, 71, 72, 74, 75, 78, 79, 91),
    21: (18, 19, 22, 23, 25, 26, 28, 29, 31, 32, 34, 35, 37, 38, 49,
         59, 60, 62, 63, 65, 66, 68, 69, 71, 72, 74, 75, 78, 79, 88, 91),
    22: (43, 88),
    23: (18, 19, 25, 31, 37, 38, 59, 60, 66, 72, 78, 79, 88),
    24: (18, 19, 25, 31, 37, 38, 46, 59, 60, 66, 72, 78, 79),
    25: (25, 26, 30, 31, 66, 67, 71, 72),
    26: (8, 9, 18, 19, 37, 38, 46, 50, 59, 60, 78, 79, 90, 91),
    27: (7, 8, 9, 10, 18, 19, 21, 22, 23, 26, 27, 29, 30, 33, 34, 35, 37, 38, 42,
         59, 60, 62, 63, 64, 67, 68, 70, 71, 74, 75, 76, 78, 79, 91),
    28: (6, 7, 9, 10, 23, 25, 27, 29, 31, 33, 45, 64, 66, 68, 70, 72, 74, 91),
    29: (7, 8, 18, 19, 25, 26, 30, 31, 37, 38, 59, 60, 66, 67, 71, 72, 78, 79, 94),
    30: (18, 19, 37, 38, 59, 60, 78, 79, 94),
    31: (25, 26, 30, 31, 50, 54, 66, 67, 71, 72, 94),
    32: (18, 19, 23, 25, 27, 29, 31, 33, 37, 38, 54,
         59, 60, 64, 66, 68, 70, 72, 74, 78, 79),
    33: (18, 19, 21, 22, 23, 26, 27, 29, 30, 33, 34, 35, 37, 38, 50, 51, 53, 54,
         59, 60, 62, 63, 64, 67, 68, 70, 71, 74, 75, 76, 78, 79),
    34: (85, 86),
    35: (18, 19, 25, 26, 30, 31, 37, 38, 45, 59, 60, 66, 67, 71, 72, 78, 79),
    36: (18, 19, 25, 31, 37, 38, 59, 60, 66, 72, 78, 79),
    37: (25, 31, 66, 72, 88),
    38: (8, 88, 89),
    39: (8, 18, 19, 22, 23, 25, 26, 28, 29, 31, 32, 34, 35, 37, 38,
         59, 60, 62, 63, 65, 66, 68, 69, 71, 72, 74, 75, 78, 79),
    40: (7, 8, 18, 19, 22, 23, 25, 26, 28, 29, 31, 32, 34, 35, 37, 38,
         59, 60, 62, 63, 65, 66, 68, 69, 71, 72, 74, 75, 78, 79),
    41: (39, 40, 42, 43, 45, 46, 48, 49, 51, 52, 54, 55, 57, 58, 84, 85),
    42: (39, 40, 42, 43, 45, 46, 48, 49, 51, 52, 54, 55, 57, 58, 83),
    44: (5, 6, 7, 39, 40, 57, 58),
    45: (4, 5, 6, 7, 8, 39, 40, 49, 57, 58),
    46: (3, 4, 6, 7, 8, 43, 44, 45, 49, 52, 53, 54),
    47: (4, 5, 39, 40, 49, 57, 58, 96),
    48: (39, 40, 57, 58, 96),
    49: (21, 22, 44, 53, 77, 78, 79, 85, 86, 87, 96),
}


def upper_points() -> list[tuple[int, int]]:
    """Return the live cells of rows 0 to 49 as (x, y) pairs in row-major order."""
    return [(x, y) for y, xs in sorted(_ROWS.items()) for x in xs]