import random

from gridsnake.app import HIGH_SCORE_FILE, INITIAL_TITLE, LOG_FILE, TICK_MS, SnakeApp
from gridsnake.config import COLS, ROWS
from gridsnake.game import INITIAL_FOOD, Direction, Segment


def _count(app, mark):
    return sum(row.count(mark) for row in app.game.canvas)


def _started(tmp_path):
    app = SnakeApp(tmp_path, random.Random(0))
    app.handle_key("space")
    return app


def test_starts_paused_with_initial_title(tmp_path):
    app = SnakeApp(tmp_path, random.Random(0))
    head = app.game.head
    assert app.paused is True
    assert app.update(TICK_MS) is None
    assert app.game.head == head
    assert app.title() == INITIAL_TITLE


def test_loads_stored_high_score(tmp_path):
    (tmp_path / HIGH_SCORE_FILE).write_text("7")
    app = SnakeApp(tmp_path, random.Random(0))
    assert app.game.max_score == 7


def test_space_starts_game_with_food(tmp_path):
    app = _started(tmp_path)
    assert app.paused is False
    assert app.started is True
    assert _count(app, "F") == INITIAL_FOOD
    assert app.game.head == Segment(ROWS // 2, COLS // 2)


def test_tick_waits_for_interval(tmp_path):
    app = _started(tmp_path)
    head = app.game.head
    assert app.update(TICK_MS - 1) is None
    assert app.game.head == head
    app.update(TICK_MS)
    assert app.game.head == Segment(head.row, head.col + 1)


def test_steering_keys(tmp_path):
    app = _started(tmp_path)
    app.handle_key("left")
    assert app.game.next_direction is Direction.RIGHT
    app.handle_key("w")
    assert app.game.next_direction is Direction.UP


def test_eating_updates_score_file_and_title(tmp_path):
    app = _started(tmp_path)
    head = app.game.head
    app.game.canvas[head.row][head.col + 1] = "F"
    outcome = app.update(TICK_MS)
    assert outcome.ate_food
    assert app.game.score == 1
    assert (tmp_path / HIGH_SCORE_FILE).read_text() == "1"
    assert app.title() == "Classic Snake  |  Score: 1 |  Max score: 1"


def test_collision_logs_and_resets(tmp_path):
    app = _started(tmp_path)
    game = app.game
    game.snake = [Segment(5, 5), Segment(5, 6), Segment(6, 6), Segment(6, 5), Segment(6, 4)]
    game.direction = game.next_direction = Direction.DOWN
    game.clear_all()
    game.draw_snake_to_grid()
    outcome = app.update(TICK_MS)
    assert outcome.collided
    assert app.reset_pending is True
    lines = (tmp_path / LOG_FILE).read_text().splitlines()
    assert lines[0].startswith("DATE")
    assert lines[2].startswith("Time : ")


def test_reset_key_restarts_round(tmp_path):
    app = _started(tmp_path)
    app.game.score = 5
    app.handle_key("r")
    assert app.update(0) is None
    assert app.reset_pending is False
    assert app.game.score == 0
    assert app.game.head == Segment(ROWS // 2 + 8, COLS // 2)
    assert _count(app, "F") == INITIAL_FOOD + 1
    assert app.title() == f"Classic Snake  |  Score: 0 |  Max score: {app.game.max_score}"


def test_escape_logs_and_stops(tmp_path):
    app = SnakeApp(tmp_path, random.Random(0))
    app.handle_key("escape")
    assert app.running is False
    assert app.paused is False
    assert (tmp_path / LOG_FILE).read_text().startswith("DATE")