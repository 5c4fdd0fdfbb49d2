# Area: Question Source
"""
trivia_engine.demo_source — Demo question source
=================================================

A ready-to-use QuestionSource that works out of the box, without any
generator service. It cycles a small built-in question bank and stamps
each question with the requested topic and difficulty.

Usage:
    from trivia_engine import DemoQuestionSource, SessionRunner

    runner = SessionRunner(source=DemoQuestionSource(seed=7))
    runner.start(now_ms=0)
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from .question_source import QuestionSource
from .types import AnswerOption, TriviaQuestion

logger = logging.getLogger("trivia_engine.demo_source")


# (question, correct answer, wrong answers)
DEMO_QUESTIONS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    (
        "What is the chemical symbol for gold?",
        "Au",
        ("Ag", "Gd", "Go", "Gl"),
    ),
    (
        "Which planet is known as the Red Planet?",
        "Mars",
        ("Venus", "Jupiter", "Mercury", "Saturn"),
    ),
    (
        "In which year did the Berlin Wall fall?",
        "1989",
        ("1987", "1991", "1985", "1993"),
    ),
    (
        "How many players does a football (soccer) team field?",
        "11",
        ("9", "10", "12", "7"),
    ),
    (
        "Who composed the Four Seasons?",
        "Antonio Vivaldi",
        ("Johann Sebastian Bach", "Wolfgang Amadeus Mozart",
         "George Frideric Handel", "Joseph Haydn"),
    ),
    (
        "What is the square root of 144?",
        "12",
        ("14", "11", "16", "10"),
    ),
    (
        "Which gas do plants absorb from the atmosphere?",
        "Carbon dioxide",
        ("Oxygen", "Nitrogen", "Hydrogen", "Helium"),
    ),
    (
        "What is the longest river in South America?",
        "Amazon",
        ("Paraná", "Orinoco", "Magdalena", "São Francisco"),
    ),
)


class DemoQuestionSource(QuestionSource):
    """
    Demo implementation of QuestionSource using a canned question bank.

    Questions are served in bank order and wrap around when the bank is
    exhausted. With a ``seed`` the bank order and the position of the
    correct answer are shuffled reproducibly; without one the correct
    answer rotates through the positions.
    """

    def __init__(
        self,
        answer_option_count: int = 4,
        seed: Optional[int] = None,
        questions: Sequence[Tuple[str, str, Sequence[str]]] = DEMO_QUESTIONS,
    ):
        """
        Initialize DemoQuestionSource.

        Args:
            answer_option_count: Options per question (3 to 5)
            seed: Optional seed for reproducible shuffling
            questions: Alternative bank of (question, correct, wrong) tuples
        """
        if not 3 <= answer_option_count <= 5:
            raise ValueError("answer_option_count must be between 3 and 5")
        if not questions:
            raise ValueError("question bank is empty")

        self.answer_option_count = answer_option_count
        self._rng = random.Random(seed) if seed is not None else None
        self._bank = list(questions)
        if self._rng is not None:
            self._rng.shuffle(self._bank)
        self._served = 0

    @property
    def served(self) -> int:
        """Number of questions handed out so far."""
        return self._served

    def get_question(self, topic: str, difficulty: str) -> TriviaQuestion:
        """Return the next bank question, stamped with topic and difficulty."""
        text, correct, wrong = self._bank[self._served % len(self._bank)]
        answers = self._build_answers(correct, wrong)
        self._served += 1

        logger.debug("Demo question %d: %s", self._served, text)
        return TriviaQuestion(
            question=text,
            answers=answers,
            topic=topic,
            difficulty=difficulty,
        )

    def _build_answers(self, correct: str, wrong: Sequence[str]) -> List[AnswerOption]:
        options = [AnswerOption(text=w) for w in wrong[: self.answer_option_count - 1]]
        if len(options) != self.answer_option_count - 1:
            raise ValueError(
                f"question needs {self.answer_option_count - 1} wrong answers, "
                f"got {len(options)}"
            )

        if self._rng is not None:
            position = self._rng.randrange(self.answer_option_count)
        else:
            position = self._served % self.answer_option_count
        options.insert(position, AnswerOption(text=correct, is_correct=True))
        return options
