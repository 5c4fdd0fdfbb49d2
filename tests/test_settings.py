# Area: Shared Tests
"""Tests for engine settings loading (JSON file, .env, environment)."""

import json

import pytest

from trivia_engine._scoring.policies import ScoringPolicy
from trivia_engine._settings import ENV_MAPPINGS, EngineSettings, load_settings
from trivia_engine.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test where no stray .env can be found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestEngineSettings:
    """Tests for the EngineSettings model."""

    def test_defaults(self):
        """Test the default value of every setting."""
        settings = EngineSettings()
        assert settings.strict_transitions is True
        assert settings.scoring_policy is ScoringPolicy.COMPOUNDING
        assert settings.time_bonus is None
        assert settings.answer_option_count == 4
        assert settings.advance_delay_ms == 2000
        assert settings.tick_interval_ms == 1000
        assert settings.question_time_ms == 30_000
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_log_level_normalised(self):
        """Test that the log level is upper-cased."""
        assert EngineSettings(log_level="debug").log_level == "DEBUG"

    def test_every_env_key_maps_to_a_field(self):
        assert set(ENV_MAPPINGS.values()) <= set(EngineSettings.model_fields)


class TestLoadSettings:
    """Tests for layering settings sources."""

    def test_no_sources_gives_defaults(self):
        """Test that no file and no environment give the defaults."""
        assert load_settings(environ={}) == EngineSettings()

    def test_json_file(self, tmp_path):
        """Test loading settings from a JSON file."""
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"scoring_policy": "tiered", "answer_option_count": 5}))
        settings = load_settings(config_path=str(path), environ={})
        assert settings.scoring_policy is ScoringPolicy.TIERED
        assert settings.answer_option_count == 5

    def test_environment_overrides_file(self, tmp_path):
        """Test that TRIVIA_* variables override the JSON file."""
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"advance_delay_ms": 500}))
        settings = load_settings(
            config_path=str(path),
            environ={"TRIVIA_ADVANCE_DELAY_MS": "1500", "TRIVIA_STRICT_TRANSITIONS": "false"},
        )
        assert settings.advance_delay_ms == 1500
        assert settings.strict_transitions is False

    def test_dotenv_file(self, tmp_path):
        """Test loading settings from an explicit .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("TRIVIA_TIME_BONUS=true\nTRIVIA_LOG_LEVEL=warning\n")
        settings = load_settings(env_file=str(env_file), environ={})
        assert settings.time_bonus is True
        assert settings.log_level == "WARNING"

    def test_dotenv_found_in_cwd(self, isolated_cwd):
        """Test that a .env in the working directory is found."""
        (isolated_cwd / ".env").write_text("TRIVIA_TICK_INTERVAL_MS=250\n")
        assert load_settings(environ={}).tick_interval_ms == 250

    def test_environment_overrides_dotenv(self, tmp_path):
        """Test that the environment overrides the .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("TRIVIA_SCORING_POLICY=tiered\n")
        settings = load_settings(
            env_file=str(env_file),
            environ={"TRIVIA_SCORING_POLICY": "compounding"},
        )
        assert settings.scoring_policy is ScoringPolicy.COMPOUNDING

    def test_overrides_win(self):
        """Test that keyword overrides beat every other source."""
        settings = load_settings(
            environ={"TRIVIA_LOG_LEVEL": "ERROR"},
            log_level="DEBUG",
            log_file=None,
        )
        assert settings.log_level == "DEBUG"

    def test_question_time_from_environment(self):
        """Test that TRIVIA_QUESTION_TIME_MS sets the per-question time."""
        settings = load_settings(environ={"TRIVIA_QUESTION_TIME_MS": "15000"})
        assert settings.question_time_ms == 15_000

    def test_blank_time_bonus_means_policy_default(self):
        """Test that a blank TRIVIA_TIME_BONUS leaves the policy default."""
        settings = load_settings(environ={"TRIVIA_TIME_BONUS": ""})
        assert settings.time_bonus is None

    def test_unrelated_environment_ignored(self):
        """Test that unknown variables are ignored."""
        settings = load_settings(environ={"HOME": "/tmp", "TRIVIA_UNKNOWN": "1"})
        assert settings == EngineSettings()


class TestLoadSettingsErrors:
    """Tests for settings errors surfacing as ConfigurationError."""

    def test_missing_config_file(self, tmp_path):
        """Test that a missing config file is reported."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(config_path=str(tmp_path / "missing.json"), environ={})

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is reported."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_settings(config_path=str(path), environ={})

    def test_json_must_be_object(self, tmp_path):
        """Test that a JSON list is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_settings(config_path=str(path), environ={})

    @pytest.mark.parametrize("environ", [
        {"TRIVIA_ANSWER_OPTION_COUNT": "6"},
        {"TRIVIA_SCORING_POLICY": "random"},
        {"TRIVIA_LOG_LEVEL": "LOUD"},
        {"TRIVIA_ADVANCE_DELAY_MS": "-1"},
        {"TRIVIA_TICK_INTERVAL_MS": "soon"},
    ])
    def test_invalid_values(self, environ):
        """Test that out-of-range values carry pydantic error details."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(environ=environ)
        assert exc_info.value.errors

    def test_unknown_file_key_rejected(self, tmp_path):
        """Test that unknown keys in the file are rejected."""
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"turbo": True}))
        with pytest.raises(ConfigurationError):
            load_settings(config_path=str(path), environ={})
