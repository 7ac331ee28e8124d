"""The bottom half (rows 50 to 99) of the built-in starting pattern."""

from __future__ import annotations

_ROWS: dict[int, tuple[int, ...]] = {
    50: (22, 29, 30, 32, 33, 35, 36, 38, 39, 44, 47, 48, 49, 53,
         58, 59, 61, 62, 64, 65, 67, 68, 84, 85, 86, 87, 88),
    51: (22, 29, 30, 32, 33, 35, 36, 38, 39, 44, 53,
         58, 59, 61, 62, 64, 65, 67, 68, 84, 85, 86, 88, 89),
    52: (8, 9, 75, 76, 78, 87, 88),
    53: (29, 30, 67, 68, 78),
    54: (29, 30, 34, 43, 44, 45, 48, 49, 50, 52, 53, 54, 63, 67, 68, 77),
    55: (34, 38, 39, 40, 57, 58, 59, 63, 76, 77),
    56: (29, 30, 34, 63, 67, 68),
    57: (14, 29, 30, 67, 68),
    58: (14, 39, 58, 96, 97),
    59: (13, 14, 29, 30, 33, 34, 35, 39, 42, 43, 44, 47, 48, 49,
         53, 54, 55, 58, 62, 63, 64, 67, 68, 96, 97),
    60: (29, 30, 39, 58, 67, 68, 94, 95),
    61: (94, 95),
    62: (17, 18, 29, 30, 34, 43, 49, 54, 63, 67, 68, 85, 86),
    63: (16, 17, 18, 19, 29, 30, 34, 38, 39, 40, 43, 49, 54,
         57, 58, 59, 63, 67, 68, 84, 85, 86, 87),
    64: (15, 16, 18, 19, 34, 43, 49, 54, 63, 84, 85, 87, 88),
    65: (5, 16, 17, 29, 30, 67, 68, 86, 87),
    66: (5, 29, 30, 67, 68),
    67: (33, 34, 35, 62, 63, 64, 94),
    68: (29, 30, 67, 68, 93, 94),
    69: (29, 30, 40, 41, 43, 44, 46, 47, 50, 51, 53, 54, 56, 57, 67, 68),
    70: (34, 40, 41, 43, 44, 46, 47, 50, 51, 53, 54, 56, 57, 63),
    71: (14, 22, 29, 30, 34, 38, 39, 58, 59, 63, 67, 68),
    72: (14, 15, 20, 21, 22, 29, 30, 34, 38, 39, 58, 59, 63, 67, 68),
    73: (19, 20, 77),
    74: (29, 30, 38, 39, 44, 51, 58, 59, 67, 68, 77),
    75: (8, 9, 25, 29, 30, 33, 34, 35, 38, 39, 58, 59, 62, 63, 64, 67, 68, 78),
    76: (7, 8, 9, 10, 22, 25),
    77: (6, 7, 9, 10, 29, 30, 38, 39, 46, 58, 59, 67, 68, 91, 92, 93),
    78: (7, 8, 29, 30, 38, 39, 46, 49, 58, 59, 67, 68, 90, 91, 92, 93, 94),
    79: (25, 44, 46, 47, 90, 91, 92, 94, 95),
    80: (29, 30, 32, 33, 35, 36, 38, 39, 46, 47, 48,
         58, 59, 61, 62, 64, 65, 67, 68, 93, 94),
    81: (29, 30, 32, 33, 35, 36, 38, 39, 47, 48, 58, 59, 61, 62, 64, 65, 67, 68),
    82: (79, 80),
    83: (19, 20, 21, 44, 78, 79, 80, 81),
    84: (3, 4, 5, 15, 78, 79, 81, 82),
    85: (3, 4, 14, 15, 16, 42, 80, 81),
    86: (48, 65),
    87: (19, 32, 33),
    88: (11, 32, 33, 34, 45, 53, 94),
    89: (60, 61, 62, 65, 67, 71, 72, 73, 77, 93, 94),
    90: (27, 31, 36, 48, 77, 78, 94),
    91: (14, 15, 31, 56, 78),
    92: (45, 46, 47, 48),
    94: (30, 80),
    95: (80,),
    96: (3, 4, 8, 9, 13, 14, 18, 19, 23, 24, 28, 29, 33, 34, 38, 39, 43, 44, 48, 49,
         53, 54, 58, 59, 63, 64, 68, 69, 73, 74, 78, 79, 83, 84, 88, 89, 93, 94, 98, 99),
    97: (1, 2, 6, 7, 11, 12, 16, 17, 21, 22, 26, 27, 31, 32, 36, 37, 41, 42, 46, 47,
         51, 52, 56, 57, 61, 62, 66, 67, 71, 72, 76, 77, 81, 82, 86, 87, 91, 92, 96, 97),
    98: (1, 2, 6, 7, 11, 12, 16, 17, 21, 22, 26, 27, 31, 32, 36, 37, 41, 42, 46, 47,
         51, 52, 56, 57, 61, 62, 66, 67, 71, 72, 76, 77, 81, 82, 86, 87, 91, 92, 96, 97),
    99: (3, 4, 8, 9, 13, 14, 18, 19, 23, 24, 28, 29, 33, 34, 38, 39, 43, 44, 48, 49,
         53, 54, 58, 59, 63, 64, 68, 69, 73, 74, 78, 79, 83, 84, 88, 89, 93, 94, 98, 99),
}


def lower_points() -> list[tuple[int, int]]:
    """Return the live cells of rows 50 to 99 as (x, y) pairs in row-major order."""
    return [(x, y) for y, xs in sorted(_ROWS.items()) for x in xs]