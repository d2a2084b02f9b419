# gridsnake

gridsnake is a classic snake game on a 40 × 40 grid. The snake wraps around
the edges of the board and grows by one segment for each piece of food it
eats. Its body fades from the head to the tail. The high score is saved
between sessions, and a plain-text log records games as they end.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
gridsnake --data-dir PATH
```

`--data-dir` names the directory that holds the game's files. It defaults to
the current directory. The directory holds:

- `snake_ui_scores.bmp`: the sprite sheet for the score labels and digits.
  This file is required. If it is missing, the game prints
  `Failed to load UI bmp: ...` and exits with status 1.
- `icon.bmp`: the window icon. This file is optional.
- `highscore.dat`: the stored high score. The game reads it at start and
  rewrites it whenever the score beats it.
- `gameslog.log`: the game log. The game appends one line per entry and
  writes a header the first time.

| Key                  | Action                                                  |
|----------------------|---------------------------------------------------------|
| Space                | lay out the snake and food on the first press, then pause or resume |
| Arrow keys / W A S D | steer (a turn straight back is ignored)                 |
| R                    | restart with a fresh board and score 0                  |
| Esc                  | write a log line and quit                               |

The game is paused when it starts. A tick happens every 80 ms.

The board restarts by itself when any of these happens:

- the snake runs into itself (a log line is written);
- the snake reaches the full size of the board;
- no empty cell is left for food.

## Using the pieces

The game rules do not depend on the display, so you can drive them directly:

```python
import random
from gridsnake.game import Game, Direction

game = Game(random.Random(1))
game.setup()
game.spawn_food(10)
game.steer(Direction.UP)
outcome = game.tick()  # TickOutcome(ate_food=..., new_high_score=..., collided=..., needs_reset=...)
```

- `gridsnake.game`: `Game`, `Direction`, `Segment` and `TickOutcome`.
- `gridsnake.render`:
  - `board_commands(grid, index_of, length)` turns a grid into a list of
    `FillCommand` rectangles and colours.
  - `score_digit_placements` lays out the digits of a score on the sprite
    sheet.
- `gridsnake.scores`: `load_high_score`, `save_high_score`, `log_game_stats`
  and `score_digits`.
- `gridsnake.title.draw_title(canvas)` stamps a title banner onto a canvas.
  Marks that fall outside the canvas are left out.
- `gridsnake.app.SnakeApp` runs a session from key names and a millisecond
  clock. Its `run()` method opens the pygame window.

## What it does not include

The package does not include the `snake_ui_scores.bmp` sprite sheet or the
`icon.bmp` icon. You must supply the sprite sheet in the data directory
before the window will open.

## Running the tests

```
pip install .[test]
pytest
```