"""Tests for the exercise factory and the simulation script."""

from practice_engine import EquationExercise, ExerciseFactory, GameMode, Tier, WordExercise, resolve_tier
from simulate_sessions import simulate


class TestExerciseFactory:
    def test_math_mode_yields_equations(self):
        factory = ExerciseFactory(seed=1)
        exercise = factory.next_exercise(resolve_tier(12), GameMode.MATH)
        assert isinstance(exercise, EquationExercise)
        assert exercise.tier == Tier.INTERMEDIATE

    def test_word_mode_yields_words(self):
        factory = ExerciseFactory(seed=1)
        exercise = factory.next_exercise(Tier.DIFFICULT, GameMode.LISTEN)
        assert isinstance(exercise, WordExercise)
        assert exercise.tier == Tier.DIFFICULT

    def test_accepts_bare_tier(self):
        factory = ExerciseFactory(seed=1)
        exercise = factory.next_exercise(Tier.EASY, GameMode.MATH)
        assert exercise.operator.value in ("+", "-")

    def test_stats(self):
        factory = ExerciseFactory(seed=3)
        for _ in range(8):
            factory.next_exercise(Tier.MEDIUM, GameMode.MATH)
        factory.next_exercise(Tier.EASY, GameMode.FILL)
        stats = factory.get_stats()
        assert stats["total_generated"] == 9
        assert sum(stats["operator_distribution"].values()) == 8
        assert stats["tier_distribution"] == {"medium": 8, "easy": 1}

        factory.reset()
        assert factory.get_stats()["total_generated"] == 0

    def test_collisions_logged(self, caplog):
        # a window larger than the easy key space forces repeats
        factory = ExerciseFactory(seed=5, recent_window=500, max_attempts=2)
        for _ in range(150):
            factory.next_exercise(Tier.EASY, GameMode.MATH)
        assert factory.get_stats()["collisions"] > 0
        assert "Could not avoid a repeat equation" in caplog.text

    def test_word_pool_epoch(self):
        factory = ExerciseFactory(seed=5)
        for _ in range(21):
            factory.next_exercise(Tier.EASY, GameMode.LISTEN)
        assert factory.word_pool_epoch(Tier.EASY) == 1

    def test_seed_reproducibility(self):
        a = ExerciseFactory(seed=11)
        b = ExerciseFactory(seed=11)
        for mode in (GameMode.MATH, GameMode.FILL, GameMode.MATH):
            assert a.next_exercise(Tier.EXTREME, mode) == b.next_exercise(Tier.EXTREME, mode)


class TestSimulation:
    def test_math_simulation(self):
        report = simulate(Tier.MEDIUM, rounds=40, seed=2)
        assert report.rounds == 40
        assert 0 <= report.accuracy <= 100
        assert report.mean_xp >= 0
        assert set(report.operators) <= {"+", "-", "×"}
        assert sum(report.operators.values()) == 40

    def test_word_simulation_repeats_only_after_pool_cycles(self):
        report = simulate(Tier.EASY, mode=GameMode.FILL, rounds=20, seed=4)
        assert report.repeats == 0
        assert report.operators == {}
