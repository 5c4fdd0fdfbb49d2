# Area: Shared Tests
"""Tests for logging setup and the structured error report."""

import json
import logging

import pytest

from trivia_engine._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_transition_error,
    setup_logging,
)
from trivia_engine.error_formatter import format_error_block, indent_json
from trivia_engine.errors import (
    ConfigurationError,
    DifficultyLabelError,
    DifficultyValidationError,
    GameModeConfigError,
    InvalidStateTransition,
    TriviaEngineError,
)


@pytest.fixture
def restore_package_logger():
    pkg_logger = logging.getLogger("trivia_engine")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield pkg_logger
    for handler in pkg_logger.handlers:
        handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


def _record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("trivia_engine.test", level, __file__, 1, msg, None, None)


class TestFormatters:
    """Tests for the terminal and JSON log formatters."""

    def test_json_formatter(self):
        """Test that JSONFormatter emits level, logger, message and timestamp."""
        data = json.loads(JSONFormatter().format(_record(logging.WARNING, "careful")))
        assert data["level"] == "WARNING"
        assert data["logger"] == "trivia_engine.test"
        assert data["message"] == "careful"
        assert "timestamp" in data

    def test_terminal_formatter_colors_copy(self):
        """Test that colouring does not leak into the original record."""
        record = _record(logging.ERROR)
        line = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[31mERROR\033[0m" in line
        assert record.levelname == "ERROR"


class TestSetupLogging:
    """Tests for setup_logging handler wiring."""

    def test_terminal_handler_only(self, restore_package_logger):
        """Test that the default setup installs one non-propagating handler."""
        setup_logging()
        assert len(restore_package_logger.handlers) == 1
        assert restore_package_logger.propagate is False
        assert restore_package_logger.level == logging.INFO

    def test_string_level(self, restore_package_logger):
        """Test that a level name is accepted in any case."""
        setup_logging(level="debug")
        assert restore_package_logger.level == logging.DEBUG

    def test_file_handler_writes_json(self, restore_package_logger, tmp_path):
        """Test that a log file receives JSON lines, creating its directory."""
        log_file = tmp_path / "logs" / "engine.log"
        setup_logging(log_file_path=str(log_file))
        logging.getLogger("trivia_engine.session.controller").info("Session started")
        for handler in restore_package_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "Session started"

    def test_repeated_setup_does_not_stack_handlers(self, restore_package_logger):
        """Test that calling setup_logging twice keeps a single handler."""
        setup_logging()
        setup_logging()
        assert len(restore_package_logger.handlers) == 1


class TestErrorReport:
    """Tests for the structured state-transition error block."""

    def _error(self):
        return InvalidStateTransition(
            operation="tick",
            state="idle",
            mode="time-limited",
            context={"elapsed_ms": 0, "remaining_ms": 5000},
        )

    def test_message(self):
        """Test the one-line exception message."""
        assert str(self._error()) == "Cannot tick() while session is idle"

    def test_format_error_log(self):
        """Test that the block names the operation, mode and context."""
        block = self._error().format_error_log()
        assert "SESSION ERROR" in block
        assert "Operation:    tick" in block
        assert "Game Mode:    time-limited" in block
        assert '"remaining_ms": 5000' in block

    def test_block_without_mode(self):
        """Test that the game mode line is omitted when unknown."""
        block = format_error_block("X", "pause", "idle", None, {})
        assert "Game Mode" not in block

    def test_indent_json_prefixes_lines(self):
        """Test that indent_json prefixes every line with a space."""
        assert indent_json({"a": 1}) == ' {\n   "a": 1\n }'

    def test_log_transition_error(self, capsys, caplog):
        """Test that the block goes to stderr and a summary to the log."""
        with caplog.at_level(logging.ERROR, logger="trivia_engine"):
            log_transition_error(self._error())
        assert "INVALID_STATE_TRANSITION" in capsys.readouterr().err
        assert "Invalid state transition: tick in idle" in caplog.text


class TestErrorHierarchy:
    """Tests for the exception hierarchy."""

    def test_all_share_base(self):
        """Test that every engine error derives from TriviaEngineError."""
        errors = [
            DifficultyLabelError("x"),
            DifficultyValidationError("custom:ab", {"is_valid": False, "error": "short"}),
            InvalidStateTransition("tick", "idle"),
            GameModeConfigError(["mode: bad"]),
            ConfigurationError("bad"),
        ]
        for error in errors:
            assert isinstance(error, TriviaEngineError)

    def test_user_input_errors_are_value_errors(self):
        """Test that bad user input errors are also ValueErrors."""
        assert isinstance(DifficultyLabelError("x"), ValueError)
        assert isinstance(GameModeConfigError([]), ValueError)

    def test_validation_error_exposes_result(self):
        """Test that DifficultyValidationError carries the validation result."""
        result = {"is_valid": False, "error": "too short", "suggestions": ["longer"]}
        error = DifficultyValidationError("custom:ab", result)
        assert str(error) == "too short"
        assert error.suggestions == ["longer"]
