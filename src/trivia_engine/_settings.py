# Area: Shared
"""
trivia_engine._settings — Engine configuration
===============================================

Settings are layered, later sources win:

1. defaults below
2. an optional JSON config file
3. a ``.env`` file (read with python-dotenv, never written to os.environ)
4. ``TRIVIA_*`` environment variables
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._scoring.policies import ScoringPolicy
from ._session.advance import DEFAULT_ADVANCE_DELAY_MS
from .errors import ConfigurationError

logger = logging.getLogger("trivia_engine.settings")

# Environment variable → settings key
ENV_MAPPINGS = {
    "TRIVIA_STRICT_TRANSITIONS": "strict_transitions",
    "TRIVIA_SCORING_POLICY": "scoring_policy",
    "TRIVIA_TIME_BONUS": "time_bonus",
    "TRIVIA_ANSWER_OPTION_COUNT": "answer_option_count",
    "TRIVIA_ADVANCE_DELAY_MS": "advance_delay_ms",
    "TRIVIA_TICK_INTERVAL_MS": "tick_interval_ms",
    "TRIVIA_QUESTION_TIME_MS": "question_time_ms",
    "TRIVIA_LOG_LEVEL": "log_level",
    "TRIVIA_LOG_FILE": "log_file",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EngineSettings(BaseModel):
    """
    Recognised engine options.

    Attributes:
        strict_transitions: Raise on controller misuse (development) or
            log and ignore it (production)
        scoring_policy: "compounding" (default) or "tiered"
        time_bonus: Time-remaining bonus toggle; None uses the policy default
        answer_option_count: Answers shown per question (3, 4 or 5)
        advance_delay_ms: Feedback delay before the next question
        tick_interval_ms: How often the host calls tick()
        question_time_ms: Per-question countdown used for the time bonus
        log_level: Package log level
        log_file: Optional JSON-lines log file
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_transitions: bool = True
    scoring_policy: ScoringPolicy = ScoringPolicy.COMPOUNDING
    time_bonus: Optional[bool] = None
    answer_option_count: int = Field(default=4, ge=3, le=5)
    advance_delay_ms: int = Field(default=DEFAULT_ADVANCE_DELAY_MS, ge=0)
    tick_interval_ms: int = Field(default=1000, gt=0)
    question_time_ms: int = Field(default=30_000, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return value

    @field_validator("time_bonus", "log_file", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def _read_config_file(config_path: str) -> Dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a JSON object")
    return data


def _from_env(values: Mapping[str, Optional[str]]) -> Dict[str, Any]:
    return {
        config_key: values[env_key]
        for env_key, config_key in ENV_MAPPINGS.items()
        if values.get(env_key) is not None
    }


def load_settings(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> EngineSettings:
    """
    Load engine settings from file, .env and environment.

    Args:
        config_path: Optional JSON config file
        env_file: Explicit .env path; by default a .env is searched from
            the current directory upwards
        environ: Environment mapping, defaults to os.environ
        **overrides: Values that win over every other source (e.g. CLI flags)

    Raises:
        ConfigurationError: If a source cannot be read or a value is invalid
    """
    config: Dict[str, Any] = {}

    if config_path:
        config.update(_read_config_file(config_path))

    dotenv_path = env_file or find_dotenv(usecwd=True)
    if dotenv_path:
        config.update(_from_env(dotenv_values(dotenv_path)))

    config.update(_from_env(os.environ if environ is None else environ))
    config.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = EngineSettings.model_validate(config)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigurationError(f"Invalid engine settings: {errors}", errors) from e

    logger.debug("Loaded settings: %s", settings.model_dump(mode="json"))
    return settings
