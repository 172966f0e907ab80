"""Tests for vocabulary exercises, masking and hints."""

import math
import random

import pytest

from practice_engine import GameMode, Tier, resolve_tier
from practice_engine.word_catalog import WORD_CATALOG
from practice_engine.word_generator import (
    WordExerciseGenerator,
    blank_count,
    mask_word,
    reveal_hint,
)


class TestCatalog:
    def test_twenty_words_per_tier(self):
        for tier in Tier:
            assert len(WORD_CATALOG[tier]) == 20

    def test_words_unique_and_lowercase(self):
        for tier in Tier:
            words = [entry.word for entry in WORD_CATALOG[tier]]
            assert len(set(words)) == len(words)
            assert all(w == w.lower() for w in words)

    def test_every_entry_has_hints(self):
        for entries in WORD_CATALOG.values():
            for entry in entries:
                assert entry.hints
                assert entry.definition
                assert entry.category


class TestMasking:
    @pytest.mark.parametrize("word", ["cat", "book", "elephant", "photosynthesis",
                                      "supercalifragilisticexpialidocious"])
    def test_blank_count_and_first_letter(self, word, rng):
        masked = mask_word(word, rng)
        letters = masked.split(" ")
        assert len(letters) == len(word)
        assert letters[0] == word[0]
        assert letters.count("_") == max(2, math.floor(0.4 * len(word)))

    def test_unmasked_letters_are_original(self, rng):
        word = "mountain"
        for shown, original in zip(mask_word(word, rng).split(" "), word):
            assert shown in ("_", original)

    def test_blank_count(self):
        assert blank_count(3) == 2
        assert blank_count(5) == 2
        assert blank_count(10) == 4

    def test_short_word_caps_blanks(self, rng):
        assert mask_word("ox", rng) == "o _"

    def test_seeded_mask_is_reproducible(self):
        assert mask_word("butterfly", random.Random(3)) == mask_word("butterfly", random.Random(3))


class TestHints:
    def test_reveals_in_order_then_stops(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        exercise = gen.generate(resolve_tier(1))
        revealed = []
        for count in range(len(exercise.hints) + 2):
            revealed.append(reveal_hint(exercise, count))
        assert revealed[: len(exercise.hints)] == list(exercise.hints)
        assert revealed[len(exercise.hints):] == [None, None]


class TestWordExerciseGenerator:
    def test_full_cycle_without_repeats(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        params = resolve_tier(12)
        words = [gen.generate(params).word for _ in range(20)]
        assert len(set(words)) == 20
        assert gen.pool(Tier.INTERMEDIATE).epoch == 0

        gen.generate(params)
        assert gen.pool(Tier.INTERMEDIATE).epoch == 1

    def test_words_come_from_tier(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        catalog_words = {entry.word for entry in WORD_CATALOG[Tier.EXTREME]}
        for _ in range(30):
            exercise = gen.generate(resolve_tier(40))
            assert exercise.word in catalog_words
            assert exercise.tier == Tier.EXTREME

    def test_pools_are_per_tier(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        gen.generate(resolve_tier(1))
        assert gen.pool(Tier.EASY).remaining == 19
        assert gen.pool(Tier.MEDIUM).remaining == 20

    def test_masked_form_only_in_fill_mode(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        params = resolve_tier(1)
        assert gen.generate(params, GameMode.LISTEN).masked_form is None
        assert gen.generate(params, GameMode.DESCRIBE).masked_form is None
        filled = gen.generate(params, GameMode.FILL)
        assert filled.masked_form is not None
        assert filled.masked_form.startswith(filled.word[0])

    def test_apply_mode_recomputes_mask(self, rng):
        gen = WordExerciseGenerator(rng=rng)
        exercise = gen.generate(resolve_tier(1), GameMode.LISTEN)
        filled = gen.apply_mode(exercise, GameMode.FILL)
        assert filled.word == exercise.word
        assert filled.masked_form is not None
        assert gen.apply_mode(filled, GameMode.LISTEN).masked_form is None
