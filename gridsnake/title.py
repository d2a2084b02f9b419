"""The title banner that can be stamped onto a game canvas."""

from __future__ import annotations

from collections.abc import MutableSequence

_TITLE_ROWS: dict[int, tuple[int, ...]] = {
    22: (37, 38, 39, 40, 41, 42, 44, 46, 47, 48, 53, 54, 55, 56, 61, 62, 63,
         70, 71, 72, 77, 78, 79, 80, 82, 83, 84, 85, 86, 87, 88, 89, 90, 91),
    23: (36, 37, 38, 43, 44, 47, 48, 49, 54, 55, 62, 63, 71, 72, 78, 79, 83,
         84, 90, 91),
    24: (35, 36, 37, 44, 47, 48, 49, 54, 55, 62, 63, 71, 72, 77, 78, 83, 84,
         91),
    25: (35, 36, 37, 47, 48, 50, 54, 55, 61, 63, 64, 71, 72, 76, 77, 83, 84),
    26: (36, 37, 38, 47, 48, 50, 54, 55, 61, 63, 64, 71, 72, 75, 76, 83, 84),
    27: (37, 38, 39, 40, 47, 48, 51, 54, 55, 60, 64, 65, 71, 72, 74, 75, 83,
         84, 89),
    28: (39, 40, 41, 42, 47, 48, 52, 54, 55, 60, 64, 65, 71, 72, 73, 74, 75,
         83, 84, 85, 86, 87, 88, 89),
    29: (41, 42, 43, 47, 48, 52, 54, 55, 59, 65, 66, 71, 72, 73, 75, 76, 83,
         84, 89),
    30: (42, 43, 44, 47, 48, 53, 54, 55, 59, 60, 61, 62, 63, 64, 65, 66, 71,
         72, 76, 77, 83, 84),
    31: (35, 42, 43, 44, 47, 48, 53, 54, 55, 58, 66, 67, 71, 72, 77, 78, 83,
         84, 91),
    32: (35, 36, 41, 42, 43, 47, 48, 54, 55, 58, 66, 67, 71, 72, 78, 79, 83,
         84, 90, 91),
    33: (35, 37, 38, 39, 40, 41, 42, 46, 47, 48, 49, 54, 55, 57, 58, 59, 65,
         66, 67, 68, 70, 71, 72, 77, 78, 79, 80, 82, 83, 84, 85, 86, 87, 88,
         89, 90, 91),
    35: (38, 39, 40, 43, 44, 45, 48, 49, 50, 51, 54, 55, 56, 59, 60, 61, 66,
         67, 68, 70, 71, 72, 76, 77, 81, 82, 85, 86, 87, 88),
    36: (38, 41, 43, 46, 48, 53, 58, 65, 70, 73, 75, 78, 80, 83, 85),
    37: (38, 41, 43, 46, 48, 49, 50, 51, 54, 55, 59, 60, 66, 67, 70, 73, 75,
         78, 80, 85, 86, 87, 88),
    38: (38, 39, 40, 43, 44, 45, 48, 56, 61, 68, 70, 71, 72, 75, 76, 77, 78,
         80, 83, 85),
    39: (38, 43, 46, 48, 49, 50, 51, 53, 54, 55, 58, 59, 60, 65, 66, 67, 70,
         75, 78, 81, 82, 85, 86, 87, 88),
    42: (56, 57, 58, 59, 60, 61, 62, 63, 64),
}

_FOOD_MARK = (42, 78)


def _title_marks():
    for row, cols in _TITLE_ROWS.items():
        for col in cols:
            yield row, col, "T"
    yield _FOOD_MARK[0], _FOOD_MARK[1], "F"


def draw_title(canvas: MutableSequence[MutableSequence[str]]) -> None:
    """Stamp the title banner onto ``canvas``, shifted left by half its width.

    Marks that would fall outside the canvas are left out.
    """
    height = len(canvas)
    width = len(canvas[0]) if height else 0
    shift = -(width // 2)
    for row, col, mark in _title_marks():
        col += shift
        if 0 <= row < height and 0 <= col < width:
            canvas[row][col] = mark