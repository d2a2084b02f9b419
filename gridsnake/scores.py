"""High-score persistence, the game log and score digit formatting."""

from __future__ import annotations

import os
import re
from datetime import datetime

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_LOG_HEADER = (
    "DATE                            | SCORE | HI    \n"
    "--------------------------------|-------|-------\n"
)


def load_high_score(path: str | os.PathLike) -> int:
    """Read the stored high score, or 0 if there is none to read."""
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            text = handle.read()
    except OSError:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_high_score(path: str | os.PathLike, score: int) -> None:
    """Overwrite the stored high score."""
    with open(path, "w", encoding="ascii") as handle:
        handle.write(str(score))


def log_game_stats(
    path: str | os.PathLike,
    score: int,
    max_score: int,
    now: datetime | None = None,
) -> None:
    """Append one line for a finished game, writing a header into a new log."""
    stamp = (now if now is not None else datetime.now()).ctime()
    with open(path, "a", encoding="utf-8") as handle:
        if handle.tell() == 0:
            handle.write(_LOG_HEADER)
        handle.write(f"Time : {stamp:<24} | {score:<5} | {max_score:<5}\n")


def score_digits(score: int) -> tuple[int, ...]:
    """Digits shown for a score: at least two, any non-digit shown as 0."""
    return tuple(int(ch) if ch.isdigit() else 0 for ch in f"{score:02d}")