from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .config import XP_PER_LEVEL
from .scoring import update_streak


def level_for_xp(total_xp: int) -> int:
    return max(0, total_xp) // XP_PER_LEVEL + 1


def xp_into_level(total_xp: int) -> int:
    """XP earned towards the next level."""
    return max(0, total_xp) % XP_PER_LEVEL


@dataclass
class PlayerProgress:
    """
    Long-lived player profile fields.

    The host persists this object; the engine reads it to pick a tier and
    writes back XP and streaks after every resolved round.
    """

    level: int = 1
    total_xp: int = 0
    current_streak: int = 0
    best_streak: int = 0

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"level must be positive, got {self.level}")
        if self.total_xp < 0 or self.current_streak < 0 or self.best_streak < 0:
            raise ValueError("xp and streaks must be non-negative")
        self.best_streak = max(self.best_streak, self.current_streak)

    def apply(self, correct: bool, xp_award: int) -> None:
        self.current_streak, self.best_streak = update_streak(
            self.current_streak, self.best_streak, correct
        )
        if xp_award:
            self.total_xp += xp_award
            self.level = max(self.level, level_for_xp(self.total_xp))


@dataclass
class SessionStats:
    """Running totals for the current day."""

    day: date = field(default_factory=date.today)
    total_solved: int = 0
    correct_answers: int = 0
    xp_earned: int = 0

    @property
    def accuracy(self) -> int:
        """Percentage of correct answers, rounded."""
        if self.total_solved == 0:
            return 0
        return round(self.correct_answers / self.total_solved * 100)

    def roll_over(self, today: date | None = None) -> None:
        today = today or date.today()
        if today != self.day:
            self.day = today
            self.total_solved = 0
            self.correct_answers = 0
            self.xp_earned = 0

    def record(self, correct: bool, xp_award: int, today: date | None = None) -> None:
        self.roll_over(today)
        self.total_solved += 1
        if correct:
            self.correct_answers += 1
            self.xp_earned += xp_award

    def as_dict(self) -> dict:
        return {
            "day": self.day.isoformat(),
            "total_solved": self.total_solved,
            "correct_answers": self.correct_answers,
            "xp_earned": self.xp_earned,
            "accuracy": self.accuracy,
        }
