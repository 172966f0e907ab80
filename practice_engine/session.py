from __future__ import annotations

import logging
from datetime import date

from .clock import RoundClock
from .config import MAX_GENERATION_ATTEMPTS, RECENT_EQUATION_WINDOW
from .difficulty import resolve_tier
from .errors import EmptyAnswerError, RoundStateError
from .generator import ExerciseFactory
from .models import (
    EquationExercise,
    Exercise,
    GameMode,
    RoundState,
    SubmitResult,
    Tier,
    TierParams,
    WordExercise,
)
from .progress import PlayerProgress, SessionStats
from .scoring import calculate_xp
from .word_generator import reveal_hint

logger = logging.getLogger(__name__)


def normalize_answer(answer: str | int) -> str:
    """Lowercase and strip a raw answer; reject empty input."""
    text = str(answer).strip().lower()
    if not text:
        raise EmptyAnswerError("answer must not be empty")
    return text


def is_correct(exercise: Exercise, answer: str | int) -> bool:
    normalized = normalize_answer(answer)
    if isinstance(exercise, EquationExercise):
        try:
            return int(normalized) == exercise.correct_answer
        except ValueError:
            return False
    return normalized == exercise.word.lower()


class PracticeSession:
    """
    One player's practice session.

    Wires the tier resolver, the exercise factory, the round clock and the
    scoring rules together. `progress` is the host-owned profile and is
    updated in place after every resolved round.
    """

    def __init__(
        self,
        progress: PlayerProgress | None = None,
        mode: GameMode = GameMode.MATH,
        seed: int | None = None,
        recent_window: int = RECENT_EQUATION_WINDOW,
        max_attempts: int = MAX_GENERATION_ATTEMPTS,
    ) -> None:
        self.progress = progress or PlayerProgress()
        self.mode = mode
        self.stats = SessionStats()
        self.factory = ExerciseFactory(
            seed=seed, recent_window=recent_window, max_attempts=max_attempts
        )
        self.clock = RoundClock()
        self.exercise: Exercise | None = None
        self.hints_revealed = 0
        self.last_result: SubmitResult | None = None

    @property
    def round(self) -> RoundState | None:
        return self.clock.state

    def resolve_tier(self, level: int | None = None) -> TierParams:
        return resolve_tier(self.progress.level if level is None else level)

    def next_exercise(
        self, tier: Tier | TierParams | None = None, mode: GameMode | None = None
    ) -> Exercise:
        params = tier if tier is not None else self.resolve_tier()
        return self.factory.next_exercise(params, mode or self.mode)

    def start_round(self, exercise: Exercise) -> RoundState:
        if isinstance(exercise, WordExercise) and self.mode == GameMode.MATH:
            raise ValueError("word exercise issued in math mode")
        if isinstance(exercise, EquationExercise) and self.mode != GameMode.MATH:
            raise ValueError("equation exercise issued in a word mode")
        duration = self.resolve_tier().round_duration(self.mode)
        state = self.clock.start(exercise, duration)
        self.exercise = exercise
        self.hints_revealed = 0
        self.last_result = None
        return state

    def advance(self) -> Exercise:
        """Move from a resolved round to a fresh one."""
        self.clock.advance()
        exercise = self.next_exercise()
        self.start_round(exercise)
        return exercise

    def tick(self) -> RoundState | None:
        if self.clock.tick():
            self._settle(correct=False, time_remaining=0, timed_out=True)
        return self.clock.state

    def submit(self, answer: str | int, today: date | None = None) -> SubmitResult | None:
        """
        Submit a player answer for the current round.

        Returns None if the round was already resolved (e.g. by a timeout).
        """
        state = self.clock.state
        if state is None:
            raise RoundStateError("no round in progress")
        correct = is_correct(state.exercise, answer)
        claimed = self.clock.submit(answer, correct)
        if claimed is None:
            return None
        return self._settle(correct, claimed.time_remaining, today=today)

    def _settle(
        self,
        correct: bool,
        time_remaining: int,
        timed_out: bool = False,
        today: date | None = None,
    ) -> SubmitResult:
        xp_award = calculate_xp(correct, time_remaining, self.progress.level, self.mode)
        self.progress.apply(correct, xp_award)
        self.stats.record(correct, xp_award, today=today)
        result = SubmitResult(
            correct=correct,
            xp_award=xp_award,
            new_streak=self.progress.current_streak,
            best_streak=self.progress.best_streak,
            timed_out=timed_out,
        )
        self.last_result = result
        outcome = "timeout" if timed_out else ("correct" if correct else "incorrect")
        logger.info(
            f"Round resolved: {outcome}, +{xp_award} XP, streak {result.new_streak}"
        )
        return result

    def reveal_hint(self) -> str | None:
        if not isinstance(self.exercise, WordExercise):
            return None
        hint = reveal_hint(self.exercise, self.hints_revealed)
        if hint is not None:
            self.hints_revealed += 1
        return hint

    def change_mode(self, mode: GameMode) -> None:
        """
        Switch presentation mode.

        Word modes can be switched mid-round; the masked form is recomputed
        for fill mode. Switching between math and word play needs a new
        exercise, so the current round is discarded.
        """
        previous, self.mode = self.mode, mode
        self.hints_revealed = 0
        if previous.is_word_mode and mode.is_word_mode:
            if isinstance(self.exercise, WordExercise):
                self.exercise = self.factory.apply_mode(self.exercise, mode)
                if self.clock.state is not None:
                    self.clock.state.exercise = self.exercise
            return
        if previous != mode:
            self.clock.cancel()
            self.exercise = None

    def cancel(self) -> None:
        self.clock.cancel()
        self.exercise = None
