"""The playable window: keyboard handling, game timing and drawing."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

import pygame

from .config import PADDING, WINDOW_HEIGHT, WINDOW_WIDTH
from .game import Direction, Game, INITIAL_FOOD, TickOutcome
from .render import Rect, board_commands, score_digit_placements
from .scores import load_high_score, log_game_stats, save_high_score

TICK_MS = 80
FRAME_DELAY_MS = 16

HIGH_SCORE_FILE = "highscore.dat"
LOG_FILE = "gameslog.log"
SPRITE_FILE = "snake_ui_scores.bmp"
ICON_FILE = "icon.bmp"

INITIAL_TITLE = "Classic Snake  |  Score: 0 | HI-Score: 0"

_UI_Y = 15.0
_LABEL_H = 21.0 * 2.0
_SCORE_LABEL_SRC = Rect(178.0, 0.0, 70.0, 21.0)
_HIGH_LABEL_SRC = Rect(120.0, 0.0, 54.0, 21.0)
_SCORE_LABEL_DST = Rect(WINDOW_WIDTH * 0.25 - 140.0 / 2.0, _UI_Y, 70.0 * 2.0, _LABEL_H)
_HIGH_LABEL_DST = Rect(WINDOW_WIDTH * 0.75 - 108.0 / 2.0, _UI_Y, 54.0 * 2.0, _LABEL_H)

_STEERING = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}


class SnakeApp:
    """Game session state driven by key names and a millisecond clock."""

    def __init__(self, data_dir: str | Path | None = None, rng: random.Random | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else Path.cwd()
        self.game = Game(rng)
        self.game.max_score = load_high_score(self.data_dir / HIGH_SCORE_FILE)
        self.paused = True
        self.started = False
        self.reset_pending = False
        self.running = True
        self.last_tick = 0
        self._title = INITIAL_TITLE
        self.game.setup()

    @property
    def high_score_path(self) -> Path:
        return self.data_dir / HIGH_SCORE_FILE

    @property
    def log_path(self) -> Path:
        return self.data_dir / LOG_FILE

    def _log(self) -> None:
        log_game_stats(self.log_path, self.game.score, self.game.max_score)

    def _refresh_title(self) -> None:
        self._title = (
            f"Classic Snake  |  Score: {self.game.score} |  Max score: {self.game.max_score}"
        )

    def handle_key(self, key: str) -> None:
        """React to a key press given by its name, such as ``"space"`` or ``"w"``."""
        key = key.lower()
        if key == "escape":
            self._log()
            self.running = False
            key = "space"  # escape also toggles the pause, like a space press
        if key == "space":
            self.paused = not self.paused
            if not self.started:
                self.game.setup()
                self.game.spawn_food(INITIAL_FOOD)
                self.started = True
        elif key in _STEERING:
            self.game.steer(_STEERING[key])
        elif key == "r":
            self.reset_pending = True

    def update(self, now_ms: int) -> TickOutcome | None:
        """Apply a pending reset, or advance the game if a tick is due at ``now_ms``."""
        if self.reset_pending:
            self.game.restart()
            self._refresh_title()
            self.reset_pending = False
            return None
        if self.paused or now_ms - self.last_tick < TICK_MS:
            return None
        self.last_tick = now_ms
        outcome = self.game.tick()
        if outcome.ate_food:
            if outcome.new_high_score:
                save_high_score(self.high_score_path, self.game.max_score)
            self._refresh_title()
        if outcome.collided:
            self._log()
        if outcome.needs_reset:
            self.reset_pending = True
        return outcome

    def title(self) -> str:
        """Current window caption."""
        return self._title

    def _draw(self, screen: pygame.Surface, sheet: pygame.Surface) -> None:
        game = self.game
        for command in board_commands(game.canvas, game.snake_index, len(game.snake)):
            rect = command.rect
            screen.fill(command.color, pygame.Rect(round(rect.x), round(rect.y),
                                                   round(rect.w), round(rect.h)))
        _blit(screen, sheet, _SCORE_LABEL_SRC, _SCORE_LABEL_DST)
        _blit(screen, sheet, _HIGH_LABEL_SRC, _HIGH_LABEL_DST)
        for score, label in ((game.score, _SCORE_LABEL_DST), (game.max_score, _HIGH_LABEL_DST)):
            for src, dst in score_digit_placements(score, label.x + label.w + PADDING, _UI_Y):
                _blit(screen, sheet, src, dst)

    def run(self) -> int:
        """Open the window and play until it is closed; returns an exit status."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(self._title)
            try:
                pygame.display.set_icon(pygame.image.load(str(self.data_dir / ICON_FILE)))
            except (pygame.error, FileNotFoundError):
                pass
            try:
                sheet = pygame.image.load(str(self.data_dir / SPRITE_FILE))
            except (pygame.error, FileNotFoundError) as exc:
                print(f"Failed to load UI bmp: {exc}", file=sys.stderr)
                return 1

            while self.running:
                if self.reset_pending:
                    self.update(pygame.time.get_ticks())
                    pygame.display.set_caption(self._title)
                    continue
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(pygame.key.name(event.key))
                self.update(pygame.time.get_ticks())
                pygame.display.set_caption(self._title)
                self._draw(screen, sheet)
                pygame.display.flip()
                pygame.time.delay(FRAME_DELAY_MS)
            return 0
        finally:
            pygame.quit()


def _blit(screen: pygame.Surface, sheet: pygame.Surface, src: Rect, dst: Rect) -> None:
    source = pygame.Rect(round(src.x), round(src.y), round(src.w), round(src.h))
    if not sheet.get_rect().contains(source):
        return
    piece = pygame.transform.scale(sheet.subsurface(source), (round(dst.w), round(dst.h)))
    screen.blit(piece, (round(dst.x), round(dst.y)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play snake on a wrapping grid.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the sprite sheet, high score and game log",
    )
    args = parser.parse_args(argv)
    return SnakeApp(args.data_dir).run()


if __name__ == "__main__":
    sys.exit(main())