"""
trivia_engine — Trivia Game Session Engine
==========================================

Quick Start (no question generator needed):
    from trivia_engine import DemoQuestionSource, SessionRunner
    runner = SessionRunner(source=DemoQuestionSource())
    runner.start()

Custom question generator:
    from trivia_engine import QuestionSource, SessionRunner
    class MySource(QuestionSource): ...  # Implement get_question()
    runner = SessionRunner(source=MySource(), difficulty="custom:expert chess")

Engine pieces, usable on their own:
1. DifficultyClassifier - label → multiplier, custom text validation
2. ScoreCalculator - points and streak for one answer
3. GameModeController - time-limited / question-limited / unlimited sessions

Type Definitions
----------------
All input/output types are available for import:

    from trivia_engine import (
        TriviaQuestion, AnswerOption,
        ValidationResult, AnswerFeedback,
    )
"""

from ._difficulty import (
    CustomDifficulty,
    DifficultyClassifier,
    DifficultyTier,
    StandardDifficulty,
    display_difficulty,
    format_difficulty,
    has_meaningful_content,
    normalize_custom_text,
    parse_difficulty,
)
from ._scoring import (
    ScoreBoard,
    ScoreCalculator,
    ScoreInput,
    ScoreResult,
    ScoringPolicy,
    SessionSummary,
    summarize,
)
from ._session import (
    AdvanceScheduler,
    Directive,
    GameMode,
    GameModeController,
    GameOverReason,
    QuestionLimitedConfig,
    SessionState,
    TimeCue,
    TimeCueTracker,
    TimeLimitedConfig,
    UnlimitedConfig,
    build_game_mode,
    parse_game_mode,
)
from ._settings import EngineSettings, load_settings
from ._shared import setup_logging
from .demo_source import DemoQuestionSource
from .errors import (
    ConfigurationError,
    DifficultyLabelError,
    DifficultyValidationError,
    GameModeConfigError,
    InvalidStateTransition,
    TriviaEngineError,
)
from .question_source import QuestionSource
from .runner import SessionRunner, TickOutcome
from .types import AnswerFeedback, AnswerOption, TriviaQuestion, ValidationResult

__all__ = [
    # Main classes
    "DifficultyClassifier",
    "ScoreCalculator",
    "GameModeController",
    "SessionRunner",
    "QuestionSource",
    "DemoQuestionSource",
    # Difficulty
    "CustomDifficulty",
    "DifficultyTier",
    "StandardDifficulty",
    "display_difficulty",
    "format_difficulty",
    "has_meaningful_content",
    "normalize_custom_text",
    "parse_difficulty",
    # Scoring
    "ScoreBoard",
    "ScoreInput",
    "ScoreResult",
    "ScoringPolicy",
    "SessionSummary",
    "summarize",
    # Session
    "AdvanceScheduler",
    "Directive",
    "GameMode",
    "GameOverReason",
    "QuestionLimitedConfig",
    "SessionState",
    "TickOutcome",
    "TimeCue",
    "TimeCueTracker",
    "TimeLimitedConfig",
    "UnlimitedConfig",
    "build_game_mode",
    "parse_game_mode",
    # Settings & logging
    "EngineSettings",
    "load_settings",
    "setup_logging",
    # Errors
    "TriviaEngineError",
    "ConfigurationError",
    "DifficultyLabelError",
    "DifficultyValidationError",
    "GameModeConfigError",
    "InvalidStateTransition",
    # Types
    "AnswerFeedback",
    "AnswerOption",
    "TriviaQuestion",
    "ValidationResult",
]
__version__ = "1.0.0"
