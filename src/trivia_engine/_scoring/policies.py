# Area: Scoring
"""
trivia_engine._scoring.policies — Scoring policies and constants
================================================================

Two base-points policies exist and a calculator uses exactly one:

COMPOUNDING (default)
    base 100 × difficulty × answer options × streak

TIERED
    base 10 / 20 / 30 picked from the difficulty multiplier,
    × answer options × streak, plus the additive time bonus
"""

from enum import Enum
from typing import Dict


class ScoringPolicy(Enum):
    """Base-points policy of a ScoreCalculator."""
    COMPOUNDING = "compounding"
    TIERED = "tiered"


BASE_POINTS = 100

# Upper multiplier bound → base points, checked in order
TIERED_BASE_POINTS = (
    (1.0, 10),
    (1.5, 20),
)
TIERED_TOP_BASE_POINTS = 30

ANSWER_OPTION_MULTIPLIERS: Dict[int, float] = {
    3: 1.0,
    4: 1.2,
    5: 1.4,
}

STREAK_CAP = 10
STREAK_STEP = 0.1

TIME_BONUS_FACTOR = 0.5

# Time bonus is on by default only where it is part of the policy
DEFAULT_TIME_BONUS: Dict[ScoringPolicy, bool] = {
    ScoringPolicy.COMPOUNDING: False,
    ScoringPolicy.TIERED: True,
}


def tiered_base_points(difficulty_multiplier: float) -> int:
    """Coarse base points for the TIERED policy."""
    for upper_bound, points in TIERED_BASE_POINTS:
        if difficulty_multiplier <= upper_bound:
            return points
    return TIERED_TOP_BASE_POINTS
