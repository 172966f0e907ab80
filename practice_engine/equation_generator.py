from __future__ import annotations

import logging
import operator
import random
from dataclasses import dataclass
from typing import Callable, Container

from .config import CHOICE_COUNT, MAX_GENERATION_ATTEMPTS
from .models import EquationExercise, Operator, TierParams

logger = logging.getLogger(__name__)


@dataclass
class _OpConfig:
    symbol: Operator
    func: Callable[[int, int], int]


_OPS = {
    Operator.ADD: _OpConfig(Operator.ADD, operator.add),
    Operator.SUB: _OpConfig(Operator.SUB, operator.sub),
    Operator.MUL: _OpConfig(Operator.MUL, operator.mul),
    Operator.DIV: _OpConfig(Operator.DIV, operator.floordiv),
}


def build_choices(
    answer: int, variance: int, rng: random.Random, count: int = CHOICE_COUNT
) -> tuple[int, ...]:
    """
    Return `count` distinct choices: `answer` plus distractors, shuffled.

    Distractors are `answer` perturbed by a signed offset in
    ``[-variance, variance - 1]``, clamped to at least 1.
    """
    distractors: list[int] = []
    while len(distractors) < count - 1:
        candidate = max(1, answer + rng.randint(-variance, variance - 1))
        if candidate != answer and candidate not in distractors:
            distractors.append(candidate)

    choices = distractors + [answer]
    rng.shuffle(choices)
    return tuple(choices)


class EquationGenerator:
    """Generate single-operator arithmetic exercises for a difficulty tier."""

    def __init__(
        self,
        rng: random.Random | None = None,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.last_collided = False

    def _operands(self, op: Operator, params: TierParams) -> tuple[int, int, int | None]:
        """Draw operands for `op`. Division also fixes the answer."""
        if op == Operator.DIV:
            divisor = self._rng.randint(*params.divisor_range)
            quotient = self._rng.randint(*params.quotient_range)
            return divisor * quotient, divisor, quotient

        if op == Operator.MUL:
            lo, hi = params.multiplicative_range
        else:
            lo, hi = params.additive_range
        a = self._rng.randint(lo, hi)
        b = self._rng.randint(lo, hi)
        if op == Operator.SUB and a < b:
            # keep the result non-negative
            a, b = b, a
        return a, b, None

    def _generate_single(self, params: TierParams) -> EquationExercise:
        op = self._rng.choice(params.operators)
        a, b, answer = self._operands(op, params)
        if answer is None:
            answer = _OPS[op].func(a, b)

        return EquationExercise(
            operand1=a,
            operand2=b,
            operator=op,
            correct_answer=answer,
            answer_choices=build_choices(answer, params.variance, self._rng),
            tier=params.tier,
        )

    def generate(
        self, params: TierParams, exclude_keys: Container = ()
    ) -> EquationExercise:
        """
        Generate an exercise whose key is not in `exclude_keys`.

        After `max_attempts` collisions the last candidate is returned anyway;
        `last_collided` records whether that happened.
        """
        self.last_collided = False
        for _ in range(self.max_attempts):
            exercise = self._generate_single(params)
            if exercise.key not in exclude_keys:
                return exercise

        self.last_collided = True
        logger.debug(f"Equation repeat after {self.max_attempts} attempts: {exercise.prompt}")
        return exercise
