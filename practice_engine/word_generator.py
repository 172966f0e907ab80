from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from typing import Mapping, Sequence

from .config import BLANK_MARKER, MASK_RATIO, MIN_BLANKS
from .models import GameMode, Tier, TierParams, WordEntry, WordExercise
from .pool import NonRepeatPool
from .word_catalog import WORD_CATALOG

logger = logging.getLogger(__name__)


def blank_count(length: int) -> int:
    """Number of letters hidden for a word of `length` characters."""
    return max(MIN_BLANKS, math.floor(MASK_RATIO * length))


def mask_word(word: str, rng: random.Random) -> str:
    """
    Render `word` for fill-in-the-blank play.

    Letters are space-joined; a random subset of interior positions is
    replaced by the blank marker. The first letter is always shown.
    """
    interior = range(1, len(word))
    count = min(blank_count(len(word)), len(interior))
    hidden = set(rng.sample(interior, count))
    return " ".join(
        BLANK_MARKER if index in hidden else letter
        for index, letter in enumerate(word)
    )


def reveal_hint(exercise: WordExercise, revealed_count: int) -> str | None:
    """Return the next unseen hint, or None once all have been revealed."""
    if revealed_count < 0 or revealed_count >= len(exercise.hints):
        return None
    return exercise.hints[revealed_count]


class WordExerciseGenerator:
    """
    Serve vocabulary exercises from per-tier non-repeating pools.

    A tier's pool is built lazily on the first request for that tier.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        catalog: Mapping[Tier, Sequence[WordEntry]] = WORD_CATALOG,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._catalog = catalog
        self._pools: dict[Tier, NonRepeatPool[WordEntry]] = {}

    def pool(self, tier: Tier) -> NonRepeatPool[WordEntry]:
        if tier not in self._pools:
            self._pools[tier] = NonRepeatPool(
                self._catalog[tier], self._rng, key=lambda entry: entry.word.lower()
            )
            logger.debug(f"Built word pool for {tier.value} with {len(self._pools[tier])} words")
        return self._pools[tier]

    def generate(self, params: TierParams, mode: GameMode = GameMode.LISTEN) -> WordExercise:
        pool = self.pool(params.tier)
        entry = pool.draw()
        exercise = WordExercise(
            word=pool.key_of(entry),
            definition=entry.definition,
            category=entry.category,
            hints=tuple(entry.hints),
            tier=params.tier,
        )
        return self.apply_mode(exercise, mode)

    def apply_mode(self, exercise: WordExercise, mode: GameMode) -> WordExercise:
        """Recompute the masked form when `mode` needs one."""
        if mode == GameMode.FILL:
            return replace(exercise, masked_form=mask_word(exercise.word, self._rng))
        return replace(exercise, masked_form=None)
