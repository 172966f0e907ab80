from __future__ import annotations

import logging
import random
from collections import Counter

from .config import MAX_GENERATION_ATTEMPTS, RECENT_EQUATION_WINDOW
from .difficulty import TIER_PARAMS
from .equation_generator import EquationGenerator
from .models import Exercise, GameMode, Tier, TierParams, WordExercise
from .pool import RecentKeys
from .word_generator import WordExerciseGenerator

logger = logging.getLogger(__name__)


class ExerciseFactory:
    """
    High-level API to produce the next exercise for a session.

    Owns the random sources, the recent-equation window used to avoid
    repeats, and the per-tier word pools.

    Usage:

    ```python
    factory = ExerciseFactory(seed=42)
    exercise = factory.next_exercise(resolve_tier(7), GameMode.MATH)
    # exercise.answer_choices -> five numbers to show in the UI
    ```
    """

    def __init__(
        self,
        seed: int | None = None,
        recent_window: int = RECENT_EQUATION_WINDOW,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        # use different seeds derived from base seed so results are reproducible
        equation_seed = None if seed is None else seed + 1
        word_seed = None if seed is None else seed + 2

        self._equations = EquationGenerator(
            rng=random.Random(equation_seed), max_attempts=max_attempts
        )
        self._words = WordExerciseGenerator(rng=random.Random(word_seed))
        self._recent_equations = RecentKeys(recent_window)

        self._operator_counts: Counter[str] = Counter()
        self._tier_counts: Counter[Tier] = Counter()
        self._collisions = 0

    def next_exercise(self, params: TierParams | Tier, mode: GameMode) -> Exercise:
        if isinstance(params, Tier):
            params = TIER_PARAMS[params]

        if mode == GameMode.MATH:
            exercise = self._equations.generate(params, exclude_keys=self._recent_equations)
            if self._equations.last_collided:
                self._collisions += 1
                logger.warning(
                    f"Could not avoid a repeat equation in {params.tier.value}: {exercise.prompt}"
                )
            self._recent_equations.add(exercise.key)
            self._operator_counts[exercise.operator.value] += 1
        else:
            exercise = self._words.generate(params, mode)

        self._tier_counts[params.tier] += 1
        return exercise

    def apply_mode(self, exercise: WordExercise, mode: GameMode) -> WordExercise:
        return self._words.apply_mode(exercise, mode)

    def word_pool_epoch(self, tier: Tier) -> int:
        return self._words.pool(tier).epoch

    def reset(self) -> None:
        """Forget recent equations and counters (e.g. for a new day)."""
        self._recent_equations.clear()
        self._operator_counts.clear()
        self._tier_counts.clear()
        self._collisions = 0

    def get_stats(self) -> dict:
        return {
            "total_generated": sum(self._tier_counts.values()),
            "operator_distribution": dict(self._operator_counts),
            "tier_distribution": {k.value: v for k, v in self._tier_counts.items()},
            "collisions": self._collisions,
        }

