# Area: Difficulty
"""
trivia_engine._difficulty.keywords — Difficulty tiers and keyword tables
=========================================================================

Constants used by the classifier. Tier order in ``TIER_KEYWORDS`` is the
match precedence: the first tier with a matching keyword wins.
"""

from enum import Enum
from typing import Dict, List, Tuple


CUSTOM_PREFIX = "custom:"

MIN_DESCRIPTION_LENGTH = 3
MAX_DESCRIPTION_LENGTH = 200
DISPLAY_MAX_LENGTH = 50
# Room for one character plus the ellipsis
DISPLAY_MIN_LENGTH = 4

# Words that carry no meaning in a difficulty description
FILLER_WORDS = frozenset({"the", "and", "for", "with", "that"})


class DifficultyTier(Enum):
    """Multiplier tiers inferred from a custom difficulty description."""
    ELEMENTARY = 1.0
    HIGH_SCHOOL = 1.5
    UNIVERSITY = 2.0
    EXPERT = 2.5

    @property
    def multiplier(self) -> float:
        return self.value


# Product decision: unmatched text is treated as university level.
DEFAULT_TIER = DifficultyTier.UNIVERSITY


# Keywords are lower-case; multi-word keywords match consecutive tokens.
TIER_KEYWORDS: Tuple[Tuple[DifficultyTier, Tuple[str, ...]], ...] = (
    (DifficultyTier.EXPERT, (
        "expert", "professional", "advanced", "phd",
        "doctorate", "master", "graduate",
    )),
    (DifficultyTier.UNIVERSITY, (
        "university", "college", "bachelor", "undergraduate",
    )),
    (DifficultyTier.HIGH_SCHOOL, (
        "high school", "secondary", "intermediate",
    )),
    (DifficultyTier.ELEMENTARY, (
        "elementary", "beginner", "basic", "simple", "easy",
    )),
)


STANDARD_MULTIPLIERS: Dict[str, float] = {
    "easy": 1.0,
    "medium": 1.5,
    "hard": 2.0,
}


# ══════════════════════════════════════════════════════════════
# USER-FACING MESSAGES
# ══════════════════════════════════════════════════════════════

EMPTY_DESCRIPTION_ERROR = "Please enter a difficulty description"
TOO_SHORT_ERROR = (
    f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters long"
)
TOO_LONG_ERROR = (
    f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters long"
)

MISSING_KEYWORD_SUGGESTIONS: List[str] = [
    'Consider adding difficulty indicators like "beginner", "advanced", "professional"',
    'Examples: "beginner cooking", "professional sports", "university physics"',
]

VAGUE_DESCRIPTION_SUGGESTION = (
    "Describe who the questions are for, not just filler words"
)

TIER_REFINEMENT_SUGGESTIONS: Dict[DifficultyTier, List[str]] = {
    DifficultyTier.EXPERT: [
        "Try adding specific expertise areas",
        "Consider mentioning professional experience level",
        'Add context like "research level" or "industry expert"',
    ],
    DifficultyTier.UNIVERSITY: [
        "Specify year level (freshman, senior, graduate)",
        "Add specific course context",
        "Consider mentioning field of study",
    ],
    DifficultyTier.HIGH_SCHOOL: [
        "Specify grade level for better accuracy",
        'Add context like "advanced placement" if applicable',
        "Consider adding subject area specifics",
    ],
}

GENERIC_REFINEMENT_SUGGESTIONS: List[str] = [
    "Be more specific about the knowledge level",
    "Add context about the target audience",
    "Consider using education level indicators",
]

GENERAL_DIFFICULTY_SUGGESTIONS: List[str] = [
    "beginner level",
    "high school level",
    "university level",
    "professional level",
    "expert knowledge",
]

TOPIC_DIFFICULTY_SUGGESTIONS: Dict[str, List[str]] = {
    "science": [
        "elementary school science",
        "high school chemistry",
        "university physics",
        "phd level biology",
    ],
    "history": [
        "basic world history",
        "high school history",
        "college level european history",
        "expert military history",
    ],
    "sports": [
        "casual fan",
        "beginner sports trivia",
        "professional sports statistics",
    ],
    "music": [
        "simple pop music",
        "intermediate music theory",
        "advanced classical composition",
    ],
    "math": [
        "elementary arithmetic",
        "high school algebra",
        "undergraduate calculus",
        "graduate level topology",
    ],
}
