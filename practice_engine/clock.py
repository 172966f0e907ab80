from __future__ import annotations

import threading

from .errors import RoundStateError
from .models import Exercise, Phase, RoundState


class RoundClock:
    """
    Countdown for a single round.

    The host calls `tick()` once per second. The round is resolved exactly
    once, either by `submit()` or by the tick that reaches zero; whichever
    claims the round first wins and the other becomes a no-op. A submission
    that has claimed the round stops the countdown, so a tick arriving in the
    same instant cannot turn it into a timeout.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state: RoundState | None = None
        self._cancelled = False

    @property
    def state(self) -> RoundState | None:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self, exercise: Exercise, duration: int) -> RoundState:
        if duration < 1:
            raise ValueError(f"duration must be positive, got {duration}")
        with self._lock:
            if self._state is not None and self._state.phase == Phase.PLAYING:
                raise RoundStateError("previous round is still being played")
            self._state = RoundState(exercise=exercise, time_remaining=duration)
            self._cancelled = False
            return self._state

    def _claim(self) -> RoundState | None:
        """Compare-and-swap PLAYING -> RESULT. Caller must hold the lock."""
        state = self._state
        if state is None or self._cancelled or state.phase != Phase.PLAYING:
            return None
        state.phase = Phase.RESULT
        return state

    def tick(self) -> bool:
        """
        Advance the countdown by one second.

        Returns True when this tick timed the round out.
        """
        with self._lock:
            state = self._state
            if state is None or self._cancelled or state.phase != Phase.PLAYING:
                return False
            state.time_remaining = max(0, state.time_remaining - 1)
            if state.time_remaining > 0:
                return False
            self._claim()
            state.correct = False
            state.timed_out = True
            return True

    def submit(self, answer: str | int, correct: bool) -> RoundState | None:
        """
        Resolve the round with a player answer.

        Returns the resolved state, or None if the round had already been
        resolved, cancelled or never started.
        """
        with self._lock:
            state = self._claim()
            if state is None:
                return None
            state.selected_answer = answer
            state.correct = correct
            return state

    def advance(self) -> None:
        with self._lock:
            if self._state is None or self._state.phase != Phase.RESULT:
                raise RoundStateError("can only advance once the round is resolved")
            self._state = None

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            self._state = None
