"""Turn a game board into flat fill commands and sprite placements."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .config import CELL_SIZE, OFFSET, PADDING, SNAKE_COLOR, WINDOW_WIDTH
from .scores import score_digits

Color = tuple[int, int, int]

UI_BAR_COLOR: Color = (1, 15, 25)
CORNER_COLOR: Color = (1, 15, 25)
BRIDGE_COLOR: Color = (1, 25, 35)
HEAD_BRIDGE_COLOR: Color = (244, 241, 222)
FOOD_COLOR: Color = (200, 10, 40)
CHECKER_COLORS: tuple[Color, Color] = ((1, 30, 40), (1, 40, 45))

DIGIT_WIDTH = 11
DIGIT_HEIGHT = 21
DIGIT_STRIDE = 12
DIGIT_SCALE = 2.0
DIGIT_SPACING = 2.0

_STEP = CELL_SIZE + PADDING
_SNAKE_MARKS = ("@", "T")


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class FillCommand:
    """Fill ``rect`` with the solid ``color``."""

    rect: Rect
    color: Color


def snake_color(index: int, length: int) -> Color:
    """Colour of the segment ``index`` places behind the head; the tail is darkest."""
    t = index / (length - 1) if length > 1 else 0.0
    shade = 1.0 - 0.5 * t
    return tuple(int(channel * shade) for channel in SNAKE_COLOR)  # type: ignore[return-value]


def cell_rect(row: int, col: int) -> Rect:
    """Pixel rectangle of the board cell at (row, col)."""
    return Rect(float(col * _STEP), float(OFFSET + row * _STEP), float(CELL_SIZE), float(CELL_SIZE))


def _bridge_color(
    index_a: int | None,
    index_b: int | None,
    mark_a: str,
    mark_b: str,
    carried: Color,
) -> tuple[Color, Color]:
    """Colour of the gap between two neighbouring cells, and the carried snake colour."""
    if index_a == 0 or index_b == 0:
        return HEAD_BRIDGE_COLOR, carried
    if index_a is not None and index_b is not None and abs(index_a - index_b) == 1:
        return carried, carried
    if mark_a == "T" and mark_b == "T":
        return carried, carried
    return BRIDGE_COLOR, carried


def board_commands(
    grid: Sequence[Sequence[str]],
    index_of: Callable[[int, int], int | None],
    length: int,
) -> list[FillCommand]:
    """Fill commands for the top bar, the cells, the gaps between them and the corners.

    ``index_of`` gives a cell's position along the snake from the head, or None.
    Snake-marked cells without a segment of their own take the colour of the
    last segment seen, as does a gap joining two title cells.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    indices = [[index_of(i, j) for j in range(cols)] for i in range(rows)]
    commands = [FillCommand(Rect(0.0, 0.0, float(WINDOW_WIDTH), float(OFFSET)), UI_BAR_COLOR)]
    carried: Color = (0, 0, 0)

    for i, (marks, idx_row) in enumerate(zip(grid, indices)):
        for j, (mark, k) in enumerate(zip(marks, idx_row)):
            if k is not None:
                carried = snake_color(k, length)
            if mark in _SNAKE_MARKS:
                color = carried
            elif mark == "F":
                color = FOOD_COLOR
            else:
                color = CHECKER_COLORS[(i + j) % 2]
            commands.append(FillCommand(cell_rect(i, j), color))

    for i, (marks, idx_row) in enumerate(zip(grid, indices)):
        pairs = zip(marks, marks[1:], idx_row, idx_row[1:])
        for j, (mark_a, mark_b, index_a, index_b) in enumerate(pairs):
            if index_a is not None and index_b is not None and index_a != 0 and index_b != 0 \
                    and abs(index_a - index_b) == 1:
                carried = snake_color(min(index_a, index_b), length)
            color, carried = _bridge_color(index_a, index_b, mark_a, mark_b, carried)
            rect = Rect(float(j * _STEP + CELL_SIZE), float(OFFSET + i * _STEP),
                        float(PADDING), float(CELL_SIZE))
            commands.append(FillCommand(rect, color))

    for i, (upper, lower, idx_up, idx_low) in enumerate(
        zip(grid, grid[1:], indices, indices[1:])
    ):
        for j, (mark_a, mark_b, index_a, index_b) in enumerate(zip(upper, lower, idx_up, idx_low)):
            if index_a is not None and index_b is not None and index_a != 0 and index_b != 0 \
                    and abs(index_a - index_b) == 1:
                carried = snake_color(min(index_a, index_b), length)
            color, carried = _bridge_color(index_a, index_b, mark_a, mark_b, carried)
            rect = Rect(float(j * _STEP), float(OFFSET + i * _STEP + CELL_SIZE),
                        float(CELL_SIZE), float(PADDING))
            commands.append(FillCommand(rect, color))

    for i in range(rows - 1):
        for j in range(cols):
            rect = Rect(float(j * _STEP + CELL_SIZE), float(OFFSET + i * _STEP + CELL_SIZE),
                        float(PADDING), float(PADDING))
            commands.append(FillCommand(rect, CORNER_COLOR))

    return commands


def digit_source(digit: int) -> Rect:
    """Where a digit sits on the score sprite sheet; out-of-range digits show as 0."""
    if not 0 <= digit <= 9:
        digit = 0
    return Rect(float(digit * DIGIT_STRIDE), 0.0, float(DIGIT_WIDTH), float(DIGIT_HEIGHT))


def score_digit_placements(score: int, x: float, y: float) -> list[tuple[Rect, Rect]]:
    """Source and destination rectangles for drawing ``score`` starting at (x, y)."""
    step = DIGIT_WIDTH * DIGIT_SCALE + DIGIT_SPACING
    return [
        (
            digit_source(digit),
            Rect(x + position * step, y, DIGIT_WIDTH * DIGIT_SCALE, DIGIT_HEIGHT * DIGIT_SCALE),
        )
        for position, digit in enumerate(score_digits(score))
    ]