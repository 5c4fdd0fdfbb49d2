# Area: Difficulty
"""
Difficulty labels, tiers and the keyword classifier.

This package contains:
- Typed difficulty labels (standard or custom free text)
- Keyword tier tables and user-facing messages
- DifficultyClassifier: label → multiplier, text → validation result
"""

from .classifier import DifficultyClassifier, tokenize
from .keywords import CUSTOM_PREFIX, DEFAULT_TIER, DifficultyTier
from .labels import (
    CustomDifficulty,
    Difficulty,
    StandardDifficulty,
    custom_label,
    display_difficulty,
    format_difficulty,
    is_custom_label,
    has_meaningful_content,
    normalize_custom_text,
    parse_difficulty,
)

__all__ = [
    "DifficultyClassifier",
    "tokenize",
    "CUSTOM_PREFIX",
    "DEFAULT_TIER",
    "DifficultyTier",
    "CustomDifficulty",
    "Difficulty",
    "StandardDifficulty",
    "custom_label",
    "display_difficulty",
    "format_difficulty",
    "is_custom_label",
    "has_meaningful_content",
    "normalize_custom_text",
    "parse_difficulty",
]
