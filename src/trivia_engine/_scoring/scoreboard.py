# Area: Scoring
"""
trivia_engine._scoring.scoreboard — Running score state for one session
=======================================================================

The calculator is pure; the scoreboard is where its results accumulate.
One ScoreBoard per session, independent of the mode controller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .calculator import ScoreResult

logger = logging.getLogger("trivia_engine.scoring.scoreboard")


@dataclass(frozen=True)
class QuestionOutcome:
    """
    One entry of the score history.

    Attributes:
        index: 0-based position of the question in the session
        is_correct: Whether the answer was correct
        points_awarded: Points added for this question
        streak_after: Streak counter after the answer
        difficulty: Difficulty label of the question
        topic: Topic of the question
        remaining_time_ms: Time left when answered, if known
    """

    index: int
    is_correct: bool
    points_awarded: int
    streak_after: int
    difficulty: str
    topic: str
    remaining_time_ms: Optional[int] = None


@dataclass(frozen=True)
class ScoreState:
    """Snapshot of a session's score."""

    total_score: int = 0
    streak: int = 0
    history: Tuple[QuestionOutcome, ...] = ()


@dataclass
class ScoreBoard:
    """Accumulates ScoreResults into a total, a streak and a history."""

    total_score: int = 0
    streak: int = 0
    history: List[QuestionOutcome] = field(default_factory=list)

    def record(
        self,
        result: ScoreResult,
        *,
        is_correct: bool,
        difficulty: str,
        topic: str,
        remaining_time_ms: Optional[int] = None,
    ) -> QuestionOutcome:
        """
        Apply a calculator result and append it to the history.

        Raises:
            ValueError: If the result contradicts ``is_correct``.
        """
        if not is_correct and (result.points_awarded or result.new_streak):
            raise ValueError("an incorrect answer cannot award points or keep a streak")

        outcome = QuestionOutcome(
            index=len(self.history),
            is_correct=is_correct,
            points_awarded=result.points_awarded,
            streak_after=result.new_streak,
            difficulty=difficulty,
            topic=topic,
            remaining_time_ms=remaining_time_ms,
        )
        self.history.append(outcome)
        self.total_score += result.points_awarded
        self.streak = result.new_streak

        logger.debug(
            "Question %d: %s, +%d (total %d, streak %d)",
            outcome.index, "correct" if is_correct else "incorrect",
            outcome.points_awarded, self.total_score, self.streak,
        )
        return outcome

    @property
    def correct_answers(self) -> int:
        return sum(1 for outcome in self.history if outcome.is_correct)

    def snapshot(self) -> ScoreState:
        return ScoreState(
            total_score=self.total_score,
            streak=self.streak,
            history=tuple(self.history),
        )

    def reset(self) -> None:
        """Clear score, streak and history for a new session."""
        self.total_score = 0
        self.streak = 0
        self.history.clear()
