# Area: Difficulty
"""
trivia_engine._difficulty.classifier — Difficulty → multiplier
==============================================================

Maps standard labels to their fixed multiplier and infers a tier for
free-text ``custom:`` descriptions by keyword matching. Also validates
the free text typed into the settings form.

Classification never fails for a well-formed label: text without any
known keyword falls back to the default tier.
"""

from __future__ import annotations

import logging
import string
from typing import List, Optional, Sequence, Union

from ..errors import DifficultyLabelError, DifficultyValidationError
from ..types import ValidationResult
from .keywords import (
    CUSTOM_PREFIX,
    DEFAULT_TIER,
    EMPTY_DESCRIPTION_ERROR,
    GENERAL_DIFFICULTY_SUGGESTIONS,
    GENERIC_REFINEMENT_SUGGESTIONS,
    MAX_DESCRIPTION_LENGTH,
    MIN_DESCRIPTION_LENGTH,
    MISSING_KEYWORD_SUGGESTIONS,
    STANDARD_MULTIPLIERS,
    TIER_KEYWORDS,
    TIER_REFINEMENT_SUGGESTIONS,
    TOO_LONG_ERROR,
    TOO_SHORT_ERROR,
    TOPIC_DIFFICULTY_SUGGESTIONS,
    VAGUE_DESCRIPTION_SUGGESTION,
    DifficultyTier,
)
from .labels import (
    CustomDifficulty,
    Difficulty,
    StandardDifficulty,
    has_meaningful_content,
    parse_difficulty,
)

logger = logging.getLogger("trivia_engine.difficulty")


def tokenize(text: str) -> List[str]:
    """Lower-case, whitespace-split, strip surrounding punctuation."""
    tokens = (token.strip(string.punctuation) for token in text.lower().split())
    return [token for token in tokens if token]


def _contains_phrase(tokens: Sequence[str], phrase: Sequence[str]) -> bool:
    width = len(phrase)
    return any(
        list(tokens[i:i + width]) == list(phrase)
        for i in range(len(tokens) - width + 1)
    )


class DifficultyClassifier:
    """
    Classifies difficulty labels and validates custom descriptions.

    Stateless apart from the fallback tier, so one instance can serve a
    whole session (or many).

    Attributes:
        default_tier: Tier returned for custom text with no keyword.
    """

    def __init__(self, default_tier: DifficultyTier = DEFAULT_TIER):
        self.default_tier = default_tier

    # ── Classification ────────────────────────────────────────

    def detect_tier(self, text: str) -> Optional[DifficultyTier]:
        """
        Return the first tier whose keyword appears in ``text``.

        Tiers are tested in precedence order (expert first). Returns
        None when no keyword is present.
        """
        tokens = tokenize(text)
        for tier, keywords in TIER_KEYWORDS:
            for keyword in keywords:
                if _contains_phrase(tokens, keyword.split()):
                    return tier
        return None

    def classify_tier(
        self, label: Union[str, Difficulty]
    ) -> Optional[DifficultyTier]:
        """Tier for a custom label; None for standard labels."""
        difficulty = parse_difficulty(label)
        if isinstance(difficulty, StandardDifficulty):
            return None
        tier = self.detect_tier(difficulty.text)
        if tier is None:
            logger.debug(
                "No tier keyword in %r, falling back to %s",
                difficulty.text, self.default_tier.name,
            )
            return self.default_tier
        return tier

    def classify(self, label: Union[str, Difficulty]) -> float:
        """
        Return the scoring multiplier for a difficulty label.

        Args:
            label: "easy", "medium", "hard", "custom:<text>" or an
                already-parsed difficulty.

        Returns:
            1.0 / 1.5 / 2.0 for standard labels, a tier value in
            {1.0, 1.5, 2.0, 2.5} for custom ones.

        Raises:
            DifficultyLabelError: If the label is malformed.
        """
        difficulty = parse_difficulty(label)
        if isinstance(difficulty, StandardDifficulty):
            return STANDARD_MULTIPLIERS[difficulty.value]
        return self.classify_tier(difficulty).multiplier

    # ── Validation ────────────────────────────────────────────

    def validate(self, text: str) -> ValidationResult:
        """
        Validate free-text difficulty typed by the user.

        Hard failures (empty, too short, too long) come back with
        ``is_valid`` False and an ``error``. Text without a tier keyword
        is valid but carries ``suggestions``, led by a vagueness hint
        when it is nothing but filler words.
        """
        trimmed = text.strip()

        if not trimmed:
            return {"is_valid": False, "error": EMPTY_DESCRIPTION_ERROR}
        if len(trimmed) < MIN_DESCRIPTION_LENGTH:
            return {"is_valid": False, "error": TOO_SHORT_ERROR}
        if len(trimmed) > MAX_DESCRIPTION_LENGTH:
            return {"is_valid": False, "error": TOO_LONG_ERROR}

        if self.detect_tier(trimmed) is None:
            suggestions = list(MISSING_KEYWORD_SUGGESTIONS)
            if not has_meaningful_content(trimmed):
                suggestions.insert(0, VAGUE_DESCRIPTION_SUGGESTION)
            return {"is_valid": True, "suggestions": suggestions}

        return {"is_valid": True}

    def validate_label(self, label: str) -> ValidationResult:
        """Validate a raw label; standard labels are always valid."""
        raw = label.strip()
        if raw.lower() in STANDARD_MULTIPLIERS:
            return {"is_valid": True}
        if raw.startswith(CUSTOM_PREFIX):
            return self.validate(raw[len(CUSTOM_PREFIX):])
        return {"is_valid": False, "error": str(DifficultyLabelError(label))}

    def parse(self, label: str) -> Difficulty:
        """
        Parse a label at the session boundary.

        Raises:
            DifficultyLabelError: For unknown labels.
            DifficultyValidationError: For custom text failing validation.
        """
        result = self.validate_label(label)
        if not result["is_valid"]:
            if label.strip().startswith(CUSTOM_PREFIX):
                raise DifficultyValidationError(label, result)
            raise DifficultyLabelError(label)
        difficulty = parse_difficulty(label)
        if isinstance(difficulty, CustomDifficulty):
            logger.info(
                "Custom difficulty %r classified as %s",
                difficulty.text, self.classify_tier(difficulty).name,
            )
        return difficulty

    # ── Suggestions ───────────────────────────────────────────

    def suggestions_for(self, text: str) -> List[str]:
        """Hints for refining a description, based on its detected tier."""
        tier = self.detect_tier(text) or self.default_tier
        return list(TIER_REFINEMENT_SUGGESTIONS.get(tier, GENERIC_REFINEMENT_SUGGESTIONS))

    def topic_suggestions(self, topic: Optional[str] = None) -> List[str]:
        """Example custom descriptions for a topic."""
        if not topic or not topic.strip():
            return list(GENERAL_DIFFICULTY_SUGGESTIONS)

        topic = topic.strip()
        topic_lower = topic.lower()
        for category, examples in TOPIC_DIFFICULTY_SUGGESTIONS.items():
            if category in topic_lower:
                return list(examples) + GENERAL_DIFFICULTY_SUGGESTIONS[:3]

        return [
            f"beginner {topic}",
            f"intermediate {topic}",
            f"advanced {topic}",
            f"professional {topic} knowledge",
        ] + GENERAL_DIFFICULTY_SUGGESTIONS[:3]
