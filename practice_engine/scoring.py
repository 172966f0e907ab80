"""XP and streak calculations."""

from __future__ import annotations

from .config import (
    DESCRIBE_MODE_BONUS,
    DIFFICULTY_MULTIPLIER,
    FILL_MODE_BONUS,
    MATH_BASE_XP,
    MATH_LEVEL_DIVISOR,
    MATH_TIME_BONUS,
    TIME_BONUS_STEP,
    WORD_BASE_XP,
    WORD_LEVEL_DIVISOR,
    WORD_TIME_BONUS,
)
from .models import GameMode

_MODE_BONUS = {
    GameMode.MATH: 0,
    GameMode.LISTEN: 0,
    GameMode.FILL: FILL_MODE_BONUS,
    GameMode.DESCRIBE: DESCRIBE_MODE_BONUS,
}


def base_xp(mode: GameMode) -> int:
    return WORD_BASE_XP if mode.is_word_mode else MATH_BASE_XP


def time_bonus(time_remaining: int, mode: GameMode) -> int:
    per_tick = WORD_TIME_BONUS if mode.is_word_mode else MATH_TIME_BONUS
    return (max(0, time_remaining) // TIME_BONUS_STEP) * per_tick


def difficulty_bonus(level: int, mode: GameMode) -> int:
    divisor = WORD_LEVEL_DIVISOR if mode.is_word_mode else MATH_LEVEL_DIVISOR
    return (max(0, level) // divisor) * DIFFICULTY_MULTIPLIER


def mode_bonus(mode: GameMode) -> int:
    return _MODE_BONUS[mode]


def calculate_xp(correct: bool, time_remaining: int, level: int, mode: GameMode) -> int:
    """
    XP awarded for a resolved round.

    Incorrect and timed-out rounds earn nothing. A correct answer earns the
    mode's base XP plus bonuses for time left, player level and mode.
    """
    if not correct:
        return 0
    return (
        base_xp(mode)
        + time_bonus(time_remaining, mode)
        + difficulty_bonus(level, mode)
        + mode_bonus(mode)
    )


def update_streak(current: int, best: int, correct: bool) -> tuple[int, int]:
    """Return the new ``(current, best)`` streak pair."""
    if correct:
        current += 1
        return current, max(best, current)
    return 0, best
