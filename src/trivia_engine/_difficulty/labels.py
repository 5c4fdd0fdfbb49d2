# Area: Difficulty
"""
trivia_engine._difficulty.labels — Typed difficulty labels
==========================================================

A difficulty label travels as a plain string ("hard",
"custom:university physics") between the host and the question
generator. Inside the engine it is parsed once into a tagged union:

    Difficulty = StandardDifficulty | CustomDifficulty
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..errors import DifficultyLabelError
from .keywords import CUSTOM_PREFIX, DISPLAY_MAX_LENGTH, DISPLAY_MIN_LENGTH, FILLER_WORDS


class StandardDifficulty(Enum):
    """The three built-in difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class CustomDifficulty:
    """A free-text difficulty description, stored trimmed."""
    text: str

    def __post_init__(self):
        if not self.text.strip():
            raise DifficultyLabelError(CUSTOM_PREFIX + self.text)
        object.__setattr__(self, "text", self.text.strip())


Difficulty = Union[StandardDifficulty, CustomDifficulty]


def is_custom_label(label: str) -> bool:
    """Check if a raw label uses the ``custom:`` prefix."""
    return label.strip().startswith(CUSTOM_PREFIX)


def parse_difficulty(label: Union[str, StandardDifficulty, CustomDifficulty]) -> Difficulty:
    """
    Parse a raw difficulty label into its typed form.

    Already-typed values are returned unchanged.

    Raises:
        DifficultyLabelError: If the label is not a standard level and
            not a non-empty ``custom:`` description.
    """
    if isinstance(label, (StandardDifficulty, CustomDifficulty)):
        return label

    raw = label.strip()
    if raw.startswith(CUSTOM_PREFIX):
        text = raw[len(CUSTOM_PREFIX):]
        if not text.strip():
            raise DifficultyLabelError(label)
        return CustomDifficulty(text)

    try:
        return StandardDifficulty(raw.lower())
    except ValueError:
        raise DifficultyLabelError(label) from None


def format_difficulty(difficulty: Difficulty) -> str:
    """Turn a typed difficulty back into its wire label."""
    if isinstance(difficulty, CustomDifficulty):
        return f"{CUSTOM_PREFIX}{difficulty.text}"
    return difficulty.value


def custom_label(text: str) -> str:
    """Build a ``custom:`` label from free text."""
    return format_difficulty(CustomDifficulty(text))


def display_difficulty(
    difficulty: Union[str, Difficulty], max_length: int = DISPLAY_MAX_LENGTH
) -> str:
    """
    Human-readable name, e.g. "Hard" or "Custom: university physics".

    Custom text longer than ``max_length`` is cut and ends in "...";
    ``max_length`` is raised to DISPLAY_MIN_LENGTH so some text remains.
    """
    parsed = parse_difficulty(difficulty)
    if isinstance(parsed, StandardDifficulty):
        return parsed.value.capitalize()

    max_length = max(max_length, DISPLAY_MIN_LENGTH)
    text = parsed.text
    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return f"Custom: {text}"


def normalize_custom_text(text: str) -> str:
    """Lower-case, collapse whitespace and drop punctuation except hyphens."""
    stripped = re.sub(r"[^\w\s-]", "", text.lower())
    return re.sub(r"\s+", " ", stripped).strip()


def has_meaningful_content(text: str) -> bool:
    """True if the text has a word longer than two letters that is not filler."""
    return any(
        len(word) > 2 and word not in FILLER_WORDS
        for word in normalize_custom_text(text).split()
    )
