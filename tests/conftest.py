"""Shared fixtures for practice engine tests."""

from __future__ import annotations

import random

import pytest

from practice_engine import GameMode, PlayerProgress, PracticeSession, resolve_tier


class ScriptedRandom(random.Random):
    """Random source that returns queued values before falling back to a seeded stream."""

    def __init__(self, *, choices=(), ints=(), seed=0):
        super().__init__(seed)
        self.choices = list(choices)
        self.ints = list(ints)

    def choice(self, seq):
        if self.choices:
            value = self.choices.pop(0)
            assert value in seq
            return value
        return super().choice(seq)

    def randint(self, a, b):
        if self.ints:
            return self.ints.pop(0)
        return super().randint(a, b)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scripted():
    def _make(choices=(), ints=()):
        return ScriptedRandom(choices=choices, ints=ints)
    return _make


@pytest.fixture
def easy_params():
    return resolve_tier(3)


@pytest.fixture
def intermediate_params():
    return resolve_tier(12)


@pytest.fixture
def math_session():
    return PracticeSession(PlayerProgress(level=6), mode=GameMode.MATH, seed=7)


@pytest.fixture
def word_session():
    return PracticeSession(PlayerProgress(level=3), mode=GameMode.FILL, seed=7)
