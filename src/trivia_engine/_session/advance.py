# Area: Session
"""
trivia_engine._session.advance — Delayed question advance
=========================================================

After an answer the host shows correctness feedback for a while
(~2000 ms) before loading the next question. This tracker holds that
pending advance as a due timestamp, so it can be cancelled and so
tests can drive it without a real clock.

A pending advance whose session is already over is discarded instead of
firing: checking ``is_game_over`` before acting is the cancellation
rule for delayed callbacks.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("trivia_engine.session.advance")

DEFAULT_ADVANCE_DELAY_MS = 2000


class AdvanceScheduler:
    """
    Tracks at most one pending "load next question" for a session.

    Attributes:
        delay_ms: Default delay between an answer and the next question
    """

    def __init__(self, delay_ms: int = DEFAULT_ADVANCE_DELAY_MS) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self.delay_ms = delay_ms
        self._due_at: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self._due_at is not None

    @property
    def due_at(self) -> Optional[int]:
        return self._due_at

    def schedule(self, now_ms: int, delay_ms: Optional[int] = None) -> int:
        """Set (or overwrite) the pending advance; returns its due time."""
        delay = self.delay_ms if delay_ms is None else delay_ms
        self._due_at = now_ms + delay
        logger.debug("Advance scheduled for %d (%dms)", self._due_at, delay)
        return self._due_at

    def cancel(self) -> None:
        """Drop the pending advance. No-op if nothing is pending."""
        if self._due_at is not None:
            logger.debug("Advance cancelled (was due at %d)", self._due_at)
            self._due_at = None

    def poll(self, now_ms: int, is_game_over: bool) -> bool:
        """
        Return True exactly once when the pending advance is due.

        If the session is over the pending advance is discarded and
        False is returned.
        """
        if self._due_at is None:
            return False
        if is_game_over:
            logger.debug("Advance discarded: session is over")
            self._due_at = None
            return False
        if now_ms < self._due_at:
            return False
        self._due_at = None
        return True
