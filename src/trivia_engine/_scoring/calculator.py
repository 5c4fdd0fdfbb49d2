# Area: Scoring
"""
trivia_engine._scoring.calculator — Per-question score calculation
==================================================================

``ScoreCalculator.compute_score`` is a pure function of its input: the
remaining time is passed in, never measured, and the calculator keeps
no running total. Totals live in ``ScoreBoard``.

Arithmetic is done in ``Decimal`` so that e.g. 100 × 1.5 × 1.2 is
exactly 180 before rounding half-up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .policies import (
    ANSWER_OPTION_MULTIPLIERS,
    BASE_POINTS,
    DEFAULT_TIME_BONUS,
    STREAK_CAP,
    STREAK_STEP,
    TIME_BONUS_FACTOR,
    ScoringPolicy,
    tiered_base_points,
)

logger = logging.getLogger("trivia_engine.scoring")


class ScoreInput(BaseModel):
    """
    Facts about one answered question.

    ``remaining_time_ms`` and ``question_time_ms`` only matter when the
    time bonus is enabled; both must be given for a bonus to apply.
    """
    model_config = ConfigDict(frozen=True)

    is_correct: bool
    difficulty_multiplier: float = Field(gt=0)
    answer_option_count: int = Field(ge=3, le=5)
    remaining_time_ms: Optional[int] = Field(default=None, ge=0)
    current_streak: int = Field(default=0, ge=0)
    question_time_ms: Optional[int] = Field(default=None, gt=0)


@dataclass(frozen=True)
class ScoreResult:
    """
    Outcome of scoring one answer.

    Attributes:
        points_awarded: Points to add to the total (0 when incorrect)
        new_streak: Streak counter after this answer
        time_bonus: Part of points_awarded that came from the time bonus
    """

    points_awarded: int
    new_streak: int
    time_bonus: int = 0


def _dec(value: Union[int, float]) -> Decimal:
    return Decimal(str(value))


def streak_multiplier(current_streak: int) -> float:
    """1 + 0.1 per streak step, capped at a streak of 10 (×2.0)."""
    return float(1 + _dec(min(current_streak, STREAK_CAP)) * _dec(STREAK_STEP))


class ScoreCalculator:
    """
    Computes points for a single answer under one scoring policy.

    Attributes:
        policy: The base-points policy, fixed for the calculator's life
        time_bonus_enabled: Whether the additive time bonus applies
    """

    def __init__(
        self,
        policy: ScoringPolicy = ScoringPolicy.COMPOUNDING,
        time_bonus: Optional[bool] = None,
    ):
        self.policy = ScoringPolicy(policy)
        self.time_bonus_enabled = (
            DEFAULT_TIME_BONUS[self.policy] if time_bonus is None else time_bonus
        )

    def base_points(self, difficulty_multiplier: float) -> int:
        if self.policy is ScoringPolicy.TIERED:
            return tiered_base_points(difficulty_multiplier)
        return BASE_POINTS

    def compute_score(
        self,
        score_input: Union[ScoreInput, Mapping[str, Any], None] = None,
        **fields: Any,
    ) -> ScoreResult:
        """
        Compute points and the new streak for one answer.

        Accepts a ``ScoreInput``, a mapping, or the fields as keywords:

            calc.compute_score(is_correct=True, difficulty_multiplier=1.5,
                               answer_option_count=4, current_streak=0)

        Raises:
            ValueError: (pydantic ValidationError) for inputs outside the
                documented domain.
        """
        if score_input is None:
            score_input = ScoreInput(**fields)
        elif not isinstance(score_input, ScoreInput):
            score_input = ScoreInput.model_validate(dict(score_input))

        if not score_input.is_correct:
            return ScoreResult(points_awarded=0, new_streak=0)

        base = self.base_points(score_input.difficulty_multiplier)
        product = (
            _dec(base)
            * _dec(ANSWER_OPTION_MULTIPLIERS[score_input.answer_option_count])
            * _dec(streak_multiplier(score_input.current_streak))
        )
        if self.policy is ScoringPolicy.COMPOUNDING:
            product *= _dec(score_input.difficulty_multiplier)

        points = int(product.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        bonus = self._time_bonus(base, score_input)

        result = ScoreResult(
            points_awarded=points + bonus,
            new_streak=score_input.current_streak + 1,
            time_bonus=bonus,
        )
        logger.debug(
            "Scored %d (+%d time bonus) at streak %d under %s",
            result.points_awarded, bonus, score_input.current_streak,
            self.policy.value,
        )
        return result

    def _time_bonus(self, base: int, score_input: ScoreInput) -> int:
        if not self.time_bonus_enabled:
            return 0
        if score_input.remaining_time_ms is None or score_input.question_time_ms is None:
            return 0

        total = score_input.question_time_ms
        remaining = min(max(score_input.remaining_time_ms, 0), total)
        bonus = _dec(base) * _dec(remaining) / _dec(total) * _dec(TIME_BONUS_FACTOR)
        return int(bonus.to_integral_value(rounding=ROUND_FLOOR))
