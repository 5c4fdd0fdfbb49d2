# Area: Scoring
"""
Scoring engine.

This package contains:
- ScoreCalculator: pure per-answer points and streak update
- ScoreBoard: per-session total, streak and history
- summarize(): end-of-session statistics
"""

from .calculator import ScoreCalculator, ScoreInput, ScoreResult, streak_multiplier
from .policies import ANSWER_OPTION_MULTIPLIERS, BASE_POINTS, ScoringPolicy
from .scoreboard import QuestionOutcome, ScoreBoard, ScoreState
from .summary import DifficultyStats, SessionSummary, grade_for, summarize

__all__ = [
    "ScoreCalculator",
    "ScoreInput",
    "ScoreResult",
    "streak_multiplier",
    "ANSWER_OPTION_MULTIPLIERS",
    "BASE_POINTS",
    "ScoringPolicy",
    "QuestionOutcome",
    "ScoreBoard",
    "ScoreState",
    "DifficultyStats",
    "SessionSummary",
    "grade_for",
    "summarize",
]
