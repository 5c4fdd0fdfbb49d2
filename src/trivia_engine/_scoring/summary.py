# Area: Scoring
"""
trivia_engine._scoring.summary — End-of-session statistics
==========================================================

Builds the numbers a results screen shows from a score history:
accuracy, letter grade, success rate per difficulty and the most
played topics.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .scoreboard import QuestionOutcome


# Minimum accuracy percentage → grade, checked top-down
GRADE_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
    (0.0, "F"),
)

TOP_TOPICS_LIMIT = 5


@dataclass(frozen=True)
class DifficultyStats:
    """Correct/total counts for one difficulty label."""

    correct: int
    total: int

    @property
    def rate(self) -> float:
        return 0.0 if self.total == 0 else self.correct / self.total * 100


@dataclass(frozen=True)
class SessionSummary:
    """
    Statistics of a finished (or running) session.

    Attributes:
        total_score: Sum of points awarded
        questions: Number of answered questions
        correct_answers: Number of correct answers
        accuracy: Percentage of correct answers (0-100)
        grade: Letter grade derived from accuracy
        best_streak: Longest run of correct answers
        by_difficulty: Stats keyed by difficulty label
        top_topics: Up to five (topic, count) pairs, most played first
    """

    total_score: int
    questions: int
    correct_answers: int
    accuracy: float
    grade: str
    best_streak: int
    by_difficulty: Dict[str, DifficultyStats] = field(default_factory=dict)
    top_topics: List[Tuple[str, int]] = field(default_factory=list)


def grade_for(accuracy: float) -> str:
    """Letter grade for an accuracy percentage."""
    for minimum, grade in GRADE_THRESHOLDS:
        if accuracy >= minimum:
            return grade
    return "F"


def summarize(history: Iterable[QuestionOutcome]) -> SessionSummary:
    """Compute a SessionSummary from score history entries."""
    outcomes = list(history)
    questions = len(outcomes)
    correct = sum(1 for outcome in outcomes if outcome.is_correct)
    accuracy = 0.0 if questions == 0 else correct / questions * 100

    per_difficulty: Dict[str, List[int]] = {}
    for outcome in outcomes:
        counts = per_difficulty.setdefault(outcome.difficulty, [0, 0])
        counts[1] += 1
        if outcome.is_correct:
            counts[0] += 1

    # Counter.most_common keeps insertion order for equal counts
    topics = Counter(outcome.topic for outcome in outcomes)

    return SessionSummary(
        total_score=sum(outcome.points_awarded for outcome in outcomes),
        questions=questions,
        correct_answers=correct,
        accuracy=accuracy,
        grade=grade_for(accuracy),
        best_streak=max((outcome.streak_after for outcome in outcomes), default=0),
        by_difficulty={
            label: DifficultyStats(correct=c, total=t)
            for label, (c, t) in per_difficulty.items()
        },
        top_topics=topics.most_common(TOP_TOPICS_LIMIT),
    )
