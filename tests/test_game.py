import random

import pytest

from gridsnake.config import COLS, ROWS
from gridsnake.game import (
    EMPTY,
    FOOD,
    INITIAL_FOOD,
    INITIAL_LENGTH,
    SNAKE,
    Direction,
    Game,
    Segment,
)


def _game(seed=1):
    game = Game(random.Random(seed))
    game.setup()
    return game


def _count(game, mark):
    return sum(row.count(mark) for row in game.canvas)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposite(direction, expected):
    assert direction.opposite() is expected


def test_init_snake_lays_body_to_the_left():
    game = Game(random.Random(0))
    game.init_snake(5, 15)
    assert len(game.snake) == INITIAL_LENGTH
    assert game.snake[0] == Segment(5, 15)
    assert all(seg.row == 5 for seg in game.snake)
    cols = [seg.col for seg in game.snake]
    assert cols == sorted(cols, reverse=True)
    assert game.direction is Direction.RIGHT


def test_setup_draws_snake_in_middle():
    game = _game()
    assert game.head == Segment(ROWS // 2, COLS // 2)
    assert _count(game, SNAKE) == INITIAL_LENGTH
    assert game.empty_cells() == ROWS * COLS - INITIAL_LENGTH


def test_snake_index():
    game = _game()
    for index, seg in enumerate(game.snake):
        assert game.snake_index(seg.row, seg.col) == index
    assert game.snake_index(0, 0) is None


def test_clear_grid_keeps_food_and_clear_all_removes_it():
    game = _game()
    game.canvas[0][0] = FOOD
    game.clear_grid()
    assert game.canvas[0][0] == FOOD
    assert _count(game, SNAKE) == 0
    game.clear_all()
    assert game.empty_cells() == ROWS * COLS


def test_spawn_food_uses_empty_cells():
    game = _game()
    game.spawn_food(5)
    assert _count(game, FOOD) == 5
    assert _count(game, SNAKE) == INITIAL_LENGTH


def test_spawn_food_without_room_raises():
    game = _game()
    for row in game.canvas:
        row[:] = [SNAKE] * len(row)
    with pytest.raises(ValueError):
        game.spawn_food(1)


def test_steer_ignores_reversal():
    game = _game()
    game.steer(Direction.LEFT)
    assert game.next_direction is Direction.RIGHT
    game.steer(Direction.UP)
    assert game.next_direction is Direction.UP


def test_move_wraps_right_edge():
    game = Game(random.Random(0))
    game.init_snake(3, COLS - 1)
    game.move_snake()
    assert game.head == Segment(3, 0)
    assert game.snake[1] == Segment(3, COLS - 1)


def test_move_wraps_top_edge():
    game = Game(random.Random(0))
    game.init_snake(0, 20)
    game.steer(Direction.UP)
    game.move_snake()
    assert game.head == Segment(ROWS - 1, 20)
    assert game.direction is Direction.UP


def test_tick_without_food_moves_one_cell():
    game = _game()
    before = list(game.snake)
    outcome = game.tick()
    assert not outcome.ate_food and not outcome.collided
    assert len(game.snake) == len(before)
    assert game.snake[1:] == before[:-1]
    assert game.head == Segment(before[0].row, before[0].col + 1)


def test_tick_eats_food_and_grows():
    game = _game()
    old_tail = game.snake[-1]
    game.canvas[game.head.row][game.head.col + 1] = FOOD
    outcome = game.tick()
    assert outcome.ate_food
    assert outcome.new_high_score
    assert game.score == 1
    assert game.max_score == 1
    assert len(game.snake) == INITIAL_LENGTH + 1
    assert game.snake[-1] == old_tail
    assert _count(game, FOOD) == 1
    assert _count(game, SNAKE) == INITIAL_LENGTH + 1


def test_eating_below_high_score_is_not_new_high():
    game = _game()
    game.max_score = 50
    game.canvas[game.head.row][game.head.col + 1] = FOOD
    outcome = game.tick()
    assert outcome.ate_food
    assert not outcome.new_high_score
    assert game.max_score == 50


def test_tick_detects_self_collision():
    game = _game()
    outcomes = []
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN):
        game.steer(direction)
        outcomes.append(game.tick())
    assert not outcomes[0].collided and not outcomes[1].collided
    assert outcomes[2].collided
    assert outcomes[2].needs_reset


def test_restart_resets_score_and_food():
    game = _game()
    game.score = 7
    game.canvas[0][0] = FOOD
    game.restart()
    assert game.score == 0
    assert game.head == Segment(ROWS // 2 + 8, COLS // 2)
    assert _count(game, FOOD) == INITIAL_FOOD + 1
    assert _count(game, SNAKE) == INITIAL_LENGTH
    assert game.empty_cells() == ROWS * COLS - INITIAL_LENGTH - INITIAL_FOOD - 1


def test_new_game_canvas_is_empty():
    game = Game()
    assert game.empty_cells() == ROWS * COLS
    assert all(cell == EMPTY for row in game.canvas for cell in row)