from __future__ import annotations

"""
Simulate practice sessions against the engine.

This script:
- plays seeded sessions for every tier with a simulated player
- reports accuracy, mean XP per round, operator distribution and how often
  an exercise repeated within the session.

Usage:
    python simulate_sessions.py
"""

import random
from collections import Counter
from dataclasses import dataclass

from practice_engine import (
    EquationExercise,
    GameMode,
    PlayerProgress,
    PracticeSession,
    Tier,
)

_TIER_LEVELS = {
    Tier.EASY: 3,
    Tier.MEDIUM: 8,
    Tier.INTERMEDIATE: 12,
    Tier.DIFFICULT: 18,
    Tier.EXTREME: 25,
}


@dataclass
class SimulationReport:
    tier: Tier
    mode: GameMode
    rounds: int
    accuracy: int
    mean_xp: float
    repeats: int
    timeouts: int
    operators: dict


def _wrong_answer(exercise) -> str:
    if isinstance(exercise, EquationExercise):
        wrong = [c for c in exercise.answer_choices if c != exercise.correct_answer]
        return str(wrong[0])
    return exercise.word[::-1] + "x"


def simulate(
    tier: Tier,
    mode: GameMode = GameMode.MATH,
    rounds: int = 200,
    skill: float = 0.75,
    seed: int = 0,
) -> SimulationReport:
    """Play `rounds` rounds; the simulated player answers correctly with probability `skill`."""
    player = random.Random(seed)
    session = PracticeSession(
        PlayerProgress(level=_TIER_LEVELS[tier]), mode=mode, seed=seed
    )
    seen: set = set()
    repeats = 0
    timeouts = 0
    xp_total = 0
    operators: Counter[str] = Counter()

    exercise = session.next_exercise()
    state = session.start_round(exercise)
    for i in range(rounds):
        if exercise.key in seen:
            repeats += 1
        seen.add(exercise.key)
        if isinstance(exercise, EquationExercise):
            operators[exercise.operator.value] += 1

        # think for a few seconds; sometimes the clock runs out
        think = player.randint(1, state.time_remaining + 5)
        result = None
        for _ in range(think):
            session.tick()
            if session.last_result is not None:
                result = session.last_result
                timeouts += 1
                break
        if result is None:
            answer = (
                exercise.key if not isinstance(exercise, EquationExercise)
                else str(exercise.correct_answer)
            )
            if player.random() >= skill:
                answer = _wrong_answer(exercise)
            result = session.submit(answer)
        xp_total += result.xp_award

        if i < rounds - 1:
            exercise = session.advance()
            state = session.round

    return SimulationReport(
        tier=tier,
        mode=mode,
        rounds=rounds,
        accuracy=session.stats.accuracy,
        mean_xp=xp_total / rounds,
        repeats=repeats,
        timeouts=timeouts,
        operators=dict(operators),
    )


def main() -> None:
    for mode in (GameMode.MATH, GameMode.FILL):
        print(f"=== {mode.value} ===")
        for tier in Tier:
            report = simulate(tier, mode=mode)
            print(
                f"{tier.value:>12}: accuracy={report.accuracy:3d}% "
                f"mean_xp={report.mean_xp:6.2f} repeats={report.repeats:3d} "
                f"timeouts={report.timeouts:3d} operators={report.operators}"
            )


if __name__ == "__main__":
    main()
