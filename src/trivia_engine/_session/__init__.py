# Area: Session
"""
Game-mode session engine.

This package contains:
- Game mode configuration variants
- The session state machine and GameModeController
- Host helpers: time cues and the delayed question advance
"""

from .advance import DEFAULT_ADVANCE_DELAY_MS, AdvanceScheduler
from .controller import GameModeController
from .cues import TimeCue, TimeCueTracker
from .enums import GameMode, GameOverReason, SessionEvent, SessionState
from .models import Directive, SessionProgress, SessionTimerState
from .modes import (
    DEFAULT_QUESTION_LIMIT,
    DEFAULT_TIME_LIMIT_MS,
    GameModeConfig,
    QuestionLimitedConfig,
    TimeLimitedConfig,
    UnlimitedConfig,
    build_game_mode,
    parse_game_mode,
)
from .state_machine import TRANSITIONS, SessionStateMachine

__all__ = [
    "DEFAULT_ADVANCE_DELAY_MS",
    "AdvanceScheduler",
    "GameModeController",
    "TimeCue",
    "TimeCueTracker",
    "GameMode",
    "GameOverReason",
    "SessionEvent",
    "SessionState",
    "Directive",
    "SessionProgress",
    "SessionTimerState",
    "DEFAULT_QUESTION_LIMIT",
    "DEFAULT_TIME_LIMIT_MS",
    "GameModeConfig",
    "QuestionLimitedConfig",
    "TimeLimitedConfig",
    "UnlimitedConfig",
    "build_game_mode",
    "parse_game_mode",
    "TRANSITIONS",
    "SessionStateMachine",
]
