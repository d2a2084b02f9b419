"""Snake board state and the rules that advance it one tick at a time."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from .config import COLS, MAX_SNAKE_LENGTH, ROWS, WRAP_MARGIN

EMPTY = "."
SNAKE = "@"
FOOD = "F"

INITIAL_LENGTH = 10
INITIAL_FOOD = 10
FOOD_PER_MEAL = 1


class Direction(enum.Enum):
    """A heading, valued as its (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def opposite(self) -> "Direction":
        """The heading pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Segment:
    """One board cell occupied by the snake."""

    row: int
    col: int


@dataclass
class TickOutcome:
    """What happened during one tick of the game."""

    ate_food: bool = False
    new_high_score: bool = False
    collided: bool = False
    needs_reset: bool = False


class Game:
    """The board, the snake on it and the running score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.canvas: list[list[str]] = [[EMPTY] * COLS for _ in range(ROWS)]
        self.snake: list[Segment] = []
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.score = 0
        self.max_score = 0

    @property
    def head(self) -> Segment:
        return self.snake[0]

    def init_snake(self, row: int, col: int) -> None:
        """Lay a fresh snake with its head at (row, col), trailing to the left."""
        self.snake = [Segment(row, col - i) for i in range(INITIAL_LENGTH)]
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT

    def clear_grid(self) -> None:
        """Blank every cell except food."""
        for row in self.canvas:
            row[:] = [cell if cell == FOOD else EMPTY for cell in row]

    def clear_all(self) -> None:
        """Blank every cell, food included."""
        for row in self.canvas:
            row[:] = [EMPTY] * len(row)

    def draw_snake_to_grid(self) -> None:
        for seg in self.snake:
            self.canvas[seg.row][seg.col] = SNAKE

    def snake_index(self, row: int, col: int) -> int | None:
        """Position of the segment at (row, col) counted from the head, or None."""
        for index, seg in enumerate(self.snake):
            if seg.row == row and seg.col == col:
                return index
        return None

    def spawn_food(self, count: int) -> None:
        """Put ``count`` pieces of food on randomly chosen empty cells."""
        for _ in range(count):
            if self.empty_cells() == 0:
                raise ValueError("no empty cell left for food")
            while True:
                row = self.rng.randrange(ROWS)
                col = self.rng.randrange(COLS)
                if self.canvas[row][col] == EMPTY:
                    break
            self.canvas[row][col] = FOOD

    def steer(self, direction: Direction) -> None:
        """Queue a turn, ignoring one straight back into the snake."""
        if self.direction is not direction.opposite():
            self.next_direction = direction

    def move_snake(self) -> None:
        """Advance the snake one cell, wrapping around the board edges."""
        self.direction = self.next_direction
        d_row, d_col = self.direction.value
        row = self.head.row + d_row
        col = self.head.col + d_col
        if row < 0:
            row = ROWS - 1 - WRAP_MARGIN
        if row >= ROWS - WRAP_MARGIN:
            row = 0
        if col < 0:
            col = COLS - 1 - WRAP_MARGIN
        if col >= COLS - WRAP_MARGIN:
            col = 0
        self.snake = [Segment(row, col), *self.snake[:-1]]

    def setup(self) -> None:
        """Place a new snake in the middle of the board, keeping food."""
        self.clear_grid()
        self.init_snake(ROWS // 2, COLS // 2)
        self.draw_snake_to_grid()

    def restart(self) -> None:
        """Start a new round: wipe the board, new snake, fresh food, score zero."""
        self.clear_all()
        self.init_snake(ROWS // 2 + 8, COLS // 2)
        self.spawn_food(INITIAL_FOOD + 1)
        self.draw_snake_to_grid()
        self.score = 0

    def empty_cells(self) -> int:
        return sum(row.count(EMPTY) for row in self.canvas)

    def tick(self) -> TickOutcome:
        """Move the snake once and apply eating, growth and collision rules."""
        outcome = TickOutcome()
        old_tail = self.snake[-1]
        self.move_snake()
        head = self.head

        if self.canvas[head.row][head.col] == FOOD:
            if len(self.snake) < MAX_SNAKE_LENGTH:
                self.snake.append(old_tail)
                self.score += 1
                outcome.ate_food = True
                if self.score > self.max_score:
                    self.max_score = self.score
                    outcome.new_high_score = True
                if self.empty_cells() >= FOOD_PER_MEAL:
                    self.spawn_food(FOOD_PER_MEAL)
            else:
                outcome.needs_reset = True

        if self.canvas[head.row][head.col] == SNAKE:
            outcome.collided = True
            outcome.needs_reset = True

        if self.empty_cells() < FOOD_PER_MEAL:
            outcome.needs_reset = True
        if len(self.snake) >= ROWS * COLS:
            outcome.needs_reset = True

        self.clear_grid()
        self.draw_snake_to_grid()
        return outcome