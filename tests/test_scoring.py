"""Tests for XP, streak and progress bookkeeping."""

from datetime import date

import pytest

from practice_engine import GameMode, PlayerProgress, SessionStats, calculate_xp, update_streak
from practice_engine.progress import level_for_xp, xp_into_level


class TestCalculateXp:
    def test_math_example(self):
        assert calculate_xp(True, 18, 6, GameMode.MATH) == 15 + 6 + 5

    def test_incorrect_earns_nothing(self):
        for mode in GameMode:
            assert calculate_xp(False, 30, 20, mode) == 0

    @pytest.mark.parametrize(
        "mode,bonus", [(GameMode.LISTEN, 0), (GameMode.FILL, 5), (GameMode.DESCRIBE, 10)]
    )
    def test_word_modes(self, mode, bonus):
        # 20 base + floor(45/5)*3 + floor(3/3)*5 + mode bonus
        assert calculate_xp(True, 45, 3, mode) == 20 + 27 + 5 + bonus

    def test_zero_time_left(self):
        assert calculate_xp(True, 0, 1, GameMode.MATH) == 15

    def test_level_bonus_steps(self):
        assert calculate_xp(True, 0, 4, GameMode.MATH) == 15
        assert calculate_xp(True, 0, 5, GameMode.MATH) == 20
        assert calculate_xp(True, 0, 12, GameMode.LISTEN) == 20 + 20


class TestStreak:
    def test_correct_correct_incorrect(self):
        current, best = 0, 0
        for correct in (True, True, False):
            current, best = update_streak(current, best, correct)
        assert (current, best) == (0, 2)

    def test_best_is_kept(self):
        assert update_streak(2, 5, True) == (3, 5)
        assert update_streak(5, 5, True) == (6, 6)


class TestPlayerProgress:
    def test_apply_updates_xp_and_streak(self):
        progress = PlayerProgress(level=1, total_xp=140)
        progress.apply(True, 26)
        assert progress.total_xp == 166
        assert progress.level == 2
        assert progress.current_streak == 1
        assert progress.best_streak == 1

    def test_incorrect_resets_streak(self):
        progress = PlayerProgress(current_streak=4, best_streak=4)
        progress.apply(False, 0)
        assert progress.current_streak == 0
        assert progress.best_streak == 4

    def test_best_never_below_current(self):
        progress = PlayerProgress(current_streak=3, best_streak=1)
        assert progress.best_streak == 3

    def test_level_not_lowered_by_xp(self):
        progress = PlayerProgress(level=12, total_xp=0)
        progress.apply(True, 20)
        assert progress.level == 12

    def test_rejects_invalid_values(self):
        with pytest.raises(ValueError):
            PlayerProgress(level=0)
        with pytest.raises(ValueError):
            PlayerProgress(total_xp=-1)

    def test_level_helpers(self):
        assert level_for_xp(0) == 1
        assert level_for_xp(149) == 1
        assert level_for_xp(150) == 2
        assert xp_into_level(160) == 10


class TestSessionStats:
    def test_record(self):
        stats = SessionStats(day=date(2026, 1, 1))
        stats.record(True, 26, today=date(2026, 1, 1))
        stats.record(False, 0, today=date(2026, 1, 1))
        stats.record(True, 20, today=date(2026, 1, 1))
        assert stats.total_solved == 3
        assert stats.correct_answers == 2
        assert stats.xp_earned == 46
        assert stats.accuracy == 67

    def test_accuracy_empty(self):
        assert SessionStats().accuracy == 0

    def test_rolls_over_on_new_day(self):
        stats = SessionStats(day=date(2026, 1, 1))
        stats.record(True, 30, today=date(2026, 1, 1))
        stats.record(False, 0, today=date(2026, 1, 2))
        assert stats.day == date(2026, 1, 2)
        assert stats.total_solved == 1
        assert stats.correct_answers == 0
        assert stats.xp_earned == 0

    def test_as_dict(self):
        stats = SessionStats(day=date(2026, 3, 4))
        assert stats.as_dict() == {
            "day": "2026-03-04",
            "total_solved": 0,
            "correct_answers": 0,
            "xp_earned": 0,
            "accuracy": 0,
        }
