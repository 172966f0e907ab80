from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union


class Tier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    INTERMEDIATE = "intermediate"
    DIFFICULT = "difficult"
    EXTREME = "extreme"


class GameMode(str, Enum):
    MATH = "math"
    LISTEN = "listen"
    FILL = "fill"
    DESCRIBE = "describe"

    @property
    def is_word_mode(self) -> bool:
        return self is not GameMode.MATH


class Operator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "×"
    DIV = "÷"


class Phase(str, Enum):
    PLAYING = "playing"
    RESULT = "result"


@dataclass(frozen=True)
class TierParams:
    """
    Generation parameters for one difficulty tier.

    Ranges are inclusive ``(lo, hi)`` pairs.
    """

    tier: Tier
    operators: tuple[Operator, ...]
    additive_range: tuple[int, int]
    multiplicative_range: tuple[int, int]
    divisor_range: tuple[int, int]
    quotient_range: tuple[int, int]
    variance: int
    math_duration: int
    word_duration: int

    def round_duration(self, mode: GameMode) -> int:
        if mode == GameMode.MATH:
            return self.math_duration
        return self.word_duration


EquationKey = tuple[int, Operator, int]


@dataclass(frozen=True)
class EquationExercise:
    """
    A single arithmetic exercise.

    - `answer_choices`: the correct answer plus four distractors, shuffled
    - `key`: ``(operand1, operator, operand2)``, used for repeat-avoidance
    """

    operand1: int
    operand2: int
    operator: Operator
    correct_answer: int
    answer_choices: tuple[int, ...]
    tier: Tier
    kind: Literal["equation"] = "equation"

    @property
    def key(self) -> EquationKey:
        return (self.operand1, self.operator, self.operand2)

    @property
    def prompt(self) -> str:
        return f"{self.operand1} {self.operator.value} {self.operand2} = ?"


@dataclass(frozen=True)
class WordEntry:
    word: str
    definition: str
    hints: tuple[str, ...]
    category: str


@dataclass(frozen=True)
class WordExercise:
    """
    A single vocabulary exercise.

    `masked_form` is only populated in fill-in-the-blank mode.
    """

    word: str
    definition: str
    category: str
    hints: tuple[str, ...]
    tier: Tier
    masked_form: str | None = None
    kind: Literal["word"] = "word"

    @property
    def key(self) -> str:
        return self.word


Exercise = Union[EquationExercise, WordExercise]


@dataclass
class RoundState:
    """Mutable state of the round currently being played."""

    exercise: Exercise
    time_remaining: int
    phase: Phase = Phase.PLAYING
    selected_answer: str | int | None = None
    correct: bool | None = None
    timed_out: bool = False

    @property
    def is_locked(self) -> bool:
        return self.phase == Phase.RESULT


@dataclass(frozen=True)
class SubmitResult:
    correct: bool
    xp_award: int
    new_streak: int
    best_streak: int
    timed_out: bool = False

