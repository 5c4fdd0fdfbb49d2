"""
trivia_engine.errors — Custom exception classes
================================================

Defines the exception hierarchy for the session engine.

* ``DifficultyLabelError`` / ``DifficultyValidationError`` are user-input
  problems. They are recovered locally and shown as field errors.
* ``InvalidStateTransition`` is an integration error: a controller method
  was called in a state where it is not legal.
* ``GameModeConfigError`` and ``ConfigurationError`` reject bad settings
  before a session starts.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .error_formatter import format_error_block

if TYPE_CHECKING:
    from .types import ValidationResult


class TriviaEngineError(Exception):
    """Base exception for all trivia engine errors."""
    pass


class DifficultyLabelError(TriviaEngineError, ValueError):
    """Raised when a difficulty label is neither standard nor ``custom:``."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(
            f"Unknown difficulty label {label!r}: expected easy, medium, hard "
            f"or 'custom:<description>'"
        )


class DifficultyValidationError(TriviaEngineError, ValueError):
    """Raised when custom difficulty text fails hard validation."""

    def __init__(self, text: str, result: "ValidationResult"):
        self.text = text
        self.result = result
        super().__init__(result.get("error") or "Invalid difficulty description")

    @property
    def suggestions(self) -> List[str]:
        return list(self.result.get("suggestions") or [])


class InvalidStateTransition(TriviaEngineError):
    """Raised when a controller operation is not legal in the current state."""

    def __init__(
        self,
        operation: str,
        state: str,
        mode: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.state = state
        self.mode = mode
        self.context = context or {}
        super().__init__(
            f"Cannot {operation}() while session is {state}"
        )

    def format_error_log(self) -> str:
        return format_error_block(
            error_type="INVALID_STATE_TRANSITION",
            operation=self.operation,
            state=self.state,
            mode=self.mode,
            context=self.context,
            details=[str(self)],
        )


class GameModeConfigError(TriviaEngineError, ValueError):
    """Raised when a game mode configuration fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Invalid game mode configuration: {errors}")


class ConfigurationError(TriviaEngineError):
    """Raised when engine settings cannot be loaded or validated."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)
