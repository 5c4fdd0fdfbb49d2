# Area: Session
"""
trivia_engine._session.modes — Game mode configuration
======================================================

A session is configured with exactly one of three variants. They are
frozen pydantic models tagged by ``mode``, so settings forms and JSON
files can be validated straight into the right variant:

    parse_game_mode({"mode": "question-limited", "total_questions": 5})
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ..errors import GameModeConfigError
from .enums import GameMode

DEFAULT_TIME_LIMIT_MS = 60_000
DEFAULT_QUESTION_LIMIT = 10


class TimeLimitedConfig(BaseModel):
    """Play until ``total_time_ms`` of running time has elapsed."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["time-limited"] = "time-limited"
    total_time_ms: int = Field(default=DEFAULT_TIME_LIMIT_MS, gt=0)

    @property
    def game_mode(self) -> GameMode:
        return GameMode.TIME_LIMITED


class QuestionLimitedConfig(BaseModel):
    """Play until ``total_questions`` answers have been recorded."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["question-limited"] = "question-limited"
    total_questions: int = Field(default=DEFAULT_QUESTION_LIMIT, ge=1)

    @property
    def game_mode(self) -> GameMode:
        return GameMode.QUESTION_LIMITED


class UnlimitedConfig(BaseModel):
    """Play until the player ends the session."""
    model_config = ConfigDict(frozen=True)

    mode: Literal["unlimited"] = "unlimited"

    @property
    def game_mode(self) -> GameMode:
        return GameMode.UNLIMITED


GameModeConfig = Annotated[
    Union[TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig],
    Field(discriminator="mode"),
]

_CONFIG_TYPES = (TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig)
_adapter: TypeAdapter = TypeAdapter(GameModeConfig)


def parse_game_mode(
    data: Union[TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig, Mapping[str, Any]],
) -> Union[TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig]:
    """
    Validate a game mode configuration.

    Args:
        data: A config model, or a mapping with a ``mode`` key.

    Raises:
        GameModeConfigError: If the mode is unknown or a parameter is
            out of range.
    """
    if isinstance(data, _CONFIG_TYPES):
        return data
    try:
        return _adapter.validate_python(dict(data))
    except ValidationError as e:
        raise GameModeConfigError(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        ) from e


def build_game_mode(
    mode: Union[str, GameMode],
    time_limit_ms: int = DEFAULT_TIME_LIMIT_MS,
    question_limit: int = DEFAULT_QUESTION_LIMIT,
) -> Union[TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig]:
    """Build the config variant for ``mode`` from flat parameters."""
    try:
        game_mode = GameMode(mode)
    except ValueError:
        raise GameModeConfigError([f"mode: unknown game mode {mode!r}"]) from None
    if game_mode is GameMode.TIME_LIMITED:
        payload = {"mode": game_mode.value, "total_time_ms": time_limit_ms}
    elif game_mode is GameMode.QUESTION_LIMITED:
        payload = {"mode": game_mode.value, "total_questions": question_limit}
    else:
        payload = {"mode": game_mode.value}
    return parse_game_mode(payload)
