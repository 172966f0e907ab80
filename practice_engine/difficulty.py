from __future__ import annotations

from .config import (
    DIFFICULT_MAX_LEVEL,
    EASY_MAX_LEVEL,
    INTERMEDIATE_MAX_LEVEL,
    MATH_ROUND_SECONDS,
    MEDIUM_MAX_LEVEL,
    WORD_ROUND_SECONDS,
)
from .models import Operator, Tier, TierParams

_ADD_SUB = (Operator.ADD, Operator.SUB)
_ALL_OPS = (Operator.ADD, Operator.SUB, Operator.MUL, Operator.DIV)


def _params(
    tier: Tier,
    operators: tuple[Operator, ...],
    additive: int,
    multiplicative: int,
    divisor: int,
    quotient: int,
    variance: int,
) -> TierParams:
    return TierParams(
        tier=tier,
        operators=operators,
        additive_range=(1, additive),
        multiplicative_range=(1, multiplicative),
        divisor_range=(1, divisor),
        quotient_range=(1, quotient),
        variance=variance,
        math_duration=MATH_ROUND_SECONDS,
        word_duration=WORD_ROUND_SECONDS,
    )


TIER_PARAMS: dict[Tier, TierParams] = {
    Tier.EASY: _params(Tier.EASY, _ADD_SUB, 10, 10, 10, 10, 5),
    Tier.MEDIUM: _params(
        Tier.MEDIUM, (Operator.ADD, Operator.SUB, Operator.MUL), 20, 10, 10, 10, 10
    ),
    Tier.INTERMEDIATE: _params(Tier.INTERMEDIATE, _ALL_OPS, 50, 12, 12, 15, 20),
    Tier.DIFFICULT: _params(Tier.DIFFICULT, _ALL_OPS, 100, 15, 15, 20, 50),
    Tier.EXTREME: _params(Tier.EXTREME, _ALL_OPS, 200, 20, 20, 25, 100),
}


def tier_for_level(level: int) -> Tier:
    """Map a player level onto its tier. Total over all integers."""
    if level <= EASY_MAX_LEVEL:
        return Tier.EASY
    if level <= MEDIUM_MAX_LEVEL:
        return Tier.MEDIUM
    if level <= INTERMEDIATE_MAX_LEVEL:
        return Tier.INTERMEDIATE
    if level <= DIFFICULT_MAX_LEVEL:
        return Tier.DIFFICULT
    return Tier.EXTREME


def resolve_tier(level: int) -> TierParams:
    return TIER_PARAMS[tier_for_level(level)]
