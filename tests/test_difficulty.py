"""Tests for tier resolution."""

import pytest

from practice_engine import GameMode, Operator, Tier, resolve_tier, tier_for_level


def _expected(level):
    if level <= 5:
        return Tier.EASY
    if level <= 10:
        return Tier.MEDIUM
    if level <= 15:
        return Tier.INTERMEDIATE
    if level <= 20:
        return Tier.DIFFICULT
    return Tier.EXTREME


class TestTierForLevel:
    @pytest.mark.parametrize("level", range(1, 101))
    def test_thresholds(self, level):
        assert resolve_tier(level).tier == _expected(level)

    @pytest.mark.parametrize(
        "level,tier",
        [(5, Tier.EASY), (6, Tier.MEDIUM), (10, Tier.MEDIUM), (11, Tier.INTERMEDIATE),
         (15, Tier.INTERMEDIATE), (16, Tier.DIFFICULT), (20, Tier.DIFFICULT), (21, Tier.EXTREME)],
    )
    def test_boundaries(self, level, tier):
        assert tier_for_level(level) == tier

    def test_total_for_out_of_range_levels(self):
        assert tier_for_level(0) == Tier.EASY
        assert tier_for_level(-3) == Tier.EASY
        assert tier_for_level(10_000) == Tier.EXTREME


class TestTierParams:
    def test_easy_is_additive_only(self):
        params = resolve_tier(1)
        assert params.operators == (Operator.ADD, Operator.SUB)
        assert params.additive_range == (1, 10)
        assert params.variance == 5

    def test_medium_adds_multiplication(self):
        assert Operator.MUL in resolve_tier(8).operators
        assert Operator.DIV not in resolve_tier(8).operators

    def test_division_from_intermediate(self):
        for level in (12, 18, 30):
            assert Operator.DIV in resolve_tier(level).operators

    def test_variance_grows_with_tier(self):
        variances = [resolve_tier(level).variance for level in (1, 6, 11, 16, 21)]
        assert variances == [5, 10, 20, 50, 100]

    def test_round_durations(self):
        params = resolve_tier(12)
        assert params.round_duration(GameMode.MATH) == 30
        for mode in (GameMode.LISTEN, GameMode.FILL, GameMode.DESCRIBE):
            assert params.round_duration(mode) == 45
