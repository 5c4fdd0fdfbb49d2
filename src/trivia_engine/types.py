"""
trivia_engine.types — Schemas for host inputs/outputs
======================================================

This module documents the exact structure of the values exchanged
between the engine and the host that renders the game.

Inputs from collaborators are pydantic models, validated once at the
boundary:

    from trivia_engine import TriviaQuestion
    q = TriviaQuestion.model_validate(payload_from_generator)

Outputs to the host are plain TypedDicts so they serialise cleanly:

    >>> sorted(ValidationResult.__annotations__)
    ['error', 'is_valid', 'suggestions']
"""

from typing import List, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ============================================
# Question generator → host
# ============================================

class AnswerOption(BaseModel):
    """One answer choice of a trivia question."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    is_correct: bool = False


class TriviaQuestion(BaseModel):
    """A question supplied by the external question generator.

    Fields
    ------
    question : str
        The question text.
    answers : List[AnswerOption]
        Three to five options, exactly one of them correct.
    topic : str
        Topic the question was generated for, e.g. "Science".
    difficulty : str
        Difficulty label: "easy", "medium", "hard" or "custom:<text>".
    """
    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1)
    answers: List[AnswerOption] = Field(min_length=3, max_length=5)
    topic: str
    difficulty: str

    @field_validator("topic", "difficulty")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _exactly_one_correct(self) -> "TriviaQuestion":
        correct = sum(1 for answer in self.answers if answer.is_correct)
        if correct != 1:
            raise ValueError(f"expected exactly one correct answer, got {correct}")
        return self

    @property
    def answer_option_count(self) -> int:
        return len(self.answers)

    @property
    def correct_index(self) -> int:
        return next(i for i, answer in enumerate(self.answers) if answer.is_correct)

    def is_correct(self, answer_index: int) -> bool:
        """Return True if ``answer_index`` points at the correct option."""
        if not 0 <= answer_index < len(self.answers):
            raise IndexError(
                f"answer index {answer_index} out of range 0..{len(self.answers) - 1}"
            )
        return self.answers[answer_index].is_correct


# ============================================
# DifficultyClassifier.validate() output
# ============================================

class _ValidationResultBase(TypedDict):
    is_valid: bool


class ValidationResult(_ValidationResultBase, total=False):
    """Result of validating a custom difficulty description.

    Fields
    ------
    is_valid : bool
        False blocks session start.
    error : str
        Present only when ``is_valid`` is False.
    suggestions : List[str]
        Hints. On a valid result they are non-blocking.
    """
    error: str
    suggestions: List[str]


# ============================================
# SessionRunner.answer() output
# ============================================

class AnswerFeedback(TypedDict):
    """What the scoreboard shows after an answer.

    Fields
    ------
    is_correct : bool
    correct_index : int
        Index of the right option, for highlighting.
    points_awarded : int
    total_score : int
    streak : int
    should_continue : bool
    load_next : bool
        True when the host should fetch another question after the
        feedback delay.
    reason : Optional[str]
        Why the session ended, or None while it runs.
    """
    is_correct: bool
    correct_index: int
    points_awarded: int
    total_score: int
    streak: int
    should_continue: bool
    load_next: bool
    reason: Optional[str]
