from .models import (
    EquationExercise,
    Exercise,
    GameMode,
    Operator,
    Phase,
    RoundState,
    SubmitResult,
    Tier,
    TierParams,
    WordExercise,
)
from .difficulty import resolve_tier, tier_for_level
from .errors import EmptyAnswerError, PracticeEngineError, RoundStateError
from .generator import ExerciseFactory
from .progress import PlayerProgress, SessionStats
from .scoring import calculate_xp, update_streak
from .session import PracticeSession
from .word_generator import mask_word, reveal_hint

__all__ = [
    "EquationExercise",
    "Exercise",
    "GameMode",
    "Operator",
    "Phase",
    "RoundState",
    "SubmitResult",
    "Tier",
    "TierParams",
    "WordExercise",
    "resolve_tier",
    "tier_for_level",
    "EmptyAnswerError",
    "PracticeEngineError",
    "RoundStateError",
    "ExerciseFactory",
    "PlayerProgress",
    "SessionStats",
    "calculate_xp",
    "update_streak",
    "PracticeSession",
    "mask_word",
    "reveal_hint",
]
