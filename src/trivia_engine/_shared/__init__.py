# Area: Shared
"""
Shared utilities used by the difficulty, scoring and session packages.

This package contains:
- Logging configuration
"""

from .logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_transition_error,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "TerminalFormatter",
    "log_transition_error",
    "setup_logging",
]
