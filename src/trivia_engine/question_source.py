# Area: Question Source
"""
trivia_engine.question_source — The question generator interface
================================================================

Hosts subclass QuestionSource and implement one method. The session
runner calls it whenever the controller asks for the next question.

The engine never generates questions itself: an LLM-backed generator,
a database, or the bundled DemoQuestionSource all plug in here.

Type Definitions
----------------
The returned value is a TriviaQuestion (see types.py):

    from trivia_engine import TriviaQuestion

    >>> sorted(TriviaQuestion.model_fields)
    ['answers', 'difficulty', 'question', 'topic']
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Union

from .types import TriviaQuestion


class QuestionSource(ABC):
    """
    Abstract base class for question generators.

    Subclass this and implement ``get_question``. Sources may return a
    TriviaQuestion or a plain dict with the same fields; the runner
    validates dicts once before use.
    """

    # ──────────────────────────────────────────────────────────────
    # Produce the next question
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def get_question(
        self, topic: str, difficulty: str
    ) -> Union[TriviaQuestion, Mapping[str, Any]]:
        """
        Called each time the session needs a new question.

        Parameters
        ----------
        topic : str
            Topic chosen by the player, e.g. "Science".
        difficulty : str
            Difficulty label: "easy", "medium", "hard" or
            "custom:<free text>".

        Returns
        -------
        TriviaQuestion
            {
                "question": str,
                "answers": [                # 3 to 5 options
                    {"text": str, "is_correct": bool},
                    ...                     # exactly one correct
                ],
                "topic": str,
                "difficulty": str
            }

        Example
        -------
        >>> def get_question(self, topic, difficulty):
        ...     return {
        ...         "question": "What is H2O?",
        ...         "answers": [
        ...             {"text": "Water", "is_correct": True},
        ...             {"text": "Salt", "is_correct": False},
        ...             {"text": "Air", "is_correct": False},
        ...         ],
        ...         "topic": topic,
        ...         "difficulty": difficulty,
        ...     }

        Custom difficulties carry the player's own words, e.g.
        "custom:university level organic chemistry". Pass the text to
        the generator as-is; scoring derives its multiplier separately.
        """
        ...
