# Area: Session
"""
trivia_engine._session.controller — Game mode controller
========================================================

Coordinates one session in one of three modes (time-limited,
question-limited, unlimited). The controller:

* tracks elapsed/remaining time from timestamps the host passes in,
* tracks the question budget,
* decides when the session is over and whether to load another question.

It owns no timer and never schedules callbacks; the host drives ``tick``
from its interval and delays question loading itself. It does not
compute scores either.

Misuse (e.g. ``tick`` before ``start``) raises ``InvalidStateTransition``.
With ``strict=False`` the misuse is logged and ignored instead, returning
the last directive.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import InvalidStateTransition
from .enums import GameMode, GameOverReason, SessionEvent, SessionState
from .models import (
    CONTINUE,
    LOAD_NEXT,
    Directive,
    SessionProgress,
    SessionTimerState,
    game_over,
)
from .modes import (
    QuestionLimitedConfig,
    TimeLimitedConfig,
    UnlimitedConfig,
    parse_game_mode,
)
from .state_machine import SessionStateMachine

logger = logging.getLogger("trivia_engine.session.controller")


_REASON_EVENTS = {
    GameOverReason.TIME_EXPIRED: SessionEvent.TIME_EXPIRED,
    GameOverReason.QUESTIONS_EXHAUSTED: SessionEvent.QUESTIONS_EXHAUSTED,
    GameOverReason.ENDED_BY_USER: SessionEvent.END,
}

AnyModeConfig = Union[TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig]


class GameModeController:
    """
    State machine driving one play session.

    Usage
    -----
        controller = GameModeController({"mode": "question-limited",
                                         "total_questions": 3})
        controller.start(now_ms=0)
        directive = controller.record_answer()
        if directive.load_next:
            ...  # host fetches the next question after its delay

    Attributes:
        config: The validated game mode configuration
        strict: Raise on illegal operations (True) or log and ignore
    """

    def __init__(
        self,
        config: Union[AnyModeConfig, Mapping[str, Any]],
        strict: bool = True,
    ):
        self.config: AnyModeConfig = parse_game_mode(config)
        self.strict = strict
        self._machine = SessionStateMachine()
        self._reset_bookkeeping()

    def _reset_bookkeeping(self) -> None:
        self._start_timestamp: Optional[int] = None
        self._elapsed_ms = 0
        self._questions_answered = 0
        self._questions_remaining: Optional[int] = (
            self.config.total_questions
            if isinstance(self.config, QuestionLimitedConfig)
            else None
        )
        self._reason: Optional[GameOverReason] = None
        self._last_directive = CONTINUE

    # ── Read-only state ───────────────────────────────────────

    @property
    def mode(self) -> GameMode:
        return self.config.game_mode

    @property
    def state(self) -> SessionState:
        return self._machine.current_state

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state is SessionState.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    @property
    def game_over_reason(self) -> Optional[GameOverReason]:
        return self._reason

    @property
    def last_directive(self) -> Directive:
        return self._last_directive

    @property
    def remaining_ms(self) -> Optional[int]:
        if not isinstance(self.config, TimeLimitedConfig):
            return None
        return max(0, self.config.total_time_ms - self._elapsed_ms)

    @property
    def timer(self) -> SessionTimerState:
        return SessionTimerState(
            is_running=self.is_running,
            start_timestamp=self._start_timestamp,
            elapsed_ms=self._elapsed_ms,
            remaining_ms=self.remaining_ms,
        )

    @property
    def progress(self) -> SessionProgress:
        return SessionProgress(
            questions_answered=self._questions_answered,
            questions_remaining=self._questions_remaining,
            is_game_over=self.is_game_over,
        )

    def can(self, event: SessionEvent) -> bool:
        """Check whether ``event`` is legal in the current state."""
        return self._machine.can_transition(event)

    # ── Transitions ───────────────────────────────────────────

    def start(self, now_ms: int) -> Directive:
        """
        Start the session: IDLE → RUNNING.

        Returns a directive asking the host to load the first question.
        """
        if not self.can(SessionEvent.START):
            return self._reject("start")

        self._machine.transition(SessionEvent.START)
        self._start_timestamp = now_ms
        self._elapsed_ms = 0
        logger.info("Session started (%s) at %d", self.mode.value, now_ms)
        return self._emit(LOAD_NEXT)

    def tick(self, now_ms: int) -> Directive:
        """
        Advance the clock to ``now_ms``.

        In time-limited mode the session ends with TIME_EXPIRED once the
        remaining time reaches zero. Sticky no-op after GAME_OVER.
        """
        if self.is_game_over:
            return self._last_directive
        if not self.can(SessionEvent.TICK):
            return self._reject("tick")

        self._machine.transition(SessionEvent.TICK)
        self._advance_clock(now_ms)
        logger.debug(
            "Tick at %d: elapsed=%d remaining=%s",
            now_ms, self._elapsed_ms, self.remaining_ms,
        )
        if self._time_expired():
            return self._finish(GameOverReason.TIME_EXPIRED)
        return self._emit(CONTINUE)

    def record_answer(self, now_ms: Optional[int] = None) -> Directive:
        """
        Record that the current question was answered.

        When ``now_ms`` is given the clock is advanced first; if the time
        budget ran out by then, time expiry wins and the answer is not
        counted. In question-limited mode the budget is decremented and
        the session ends when it reaches zero. Sticky no-op after
        GAME_OVER.
        """
        if self.is_game_over:
            return self._last_directive
        if not self.can(SessionEvent.ANSWER):
            return self._reject("record_answer")

        if now_ms is not None:
            self._advance_clock(now_ms)
            if self._time_expired():
                return self._finish(GameOverReason.TIME_EXPIRED)

        self._machine.transition(SessionEvent.ANSWER)
        self._questions_answered += 1

        if self._questions_remaining is not None:
            self._questions_remaining -= 1
            if self._questions_remaining <= 0:
                self._questions_remaining = 0
                return self._finish(GameOverReason.QUESTIONS_EXHAUSTED)

        return self._emit(LOAD_NEXT)

    def pause(self, now_ms: Optional[int] = None) -> Directive:
        """
        Freeze the clock: RUNNING → PAUSED.

        Pass ``now_ms`` to account for time since the last tick.
        """
        if not self.can(SessionEvent.PAUSE):
            return self._reject("pause")

        if now_ms is not None:
            self._advance_clock(now_ms)
            if self._time_expired():
                return self._finish(GameOverReason.TIME_EXPIRED)

        self._machine.transition(SessionEvent.PAUSE)
        logger.info("Session paused at elapsed=%d", self._elapsed_ms)
        return self._emit(CONTINUE)

    def resume(self, now_ms: int) -> Directive:
        """
        Unfreeze the clock: PAUSED → RUNNING.

        Re-anchors the start timestamp so the paused interval is not
        counted as elapsed time.
        """
        if not self.can(SessionEvent.RESUME):
            return self._reject("resume")

        self._machine.transition(SessionEvent.RESUME)
        self._start_timestamp = now_ms - self._elapsed_ms
        logger.info("Session resumed at %d (elapsed=%d)", now_ms, self._elapsed_ms)
        return self._emit(CONTINUE)

    def end(self) -> Directive:
        """Abandon the session from any non-terminal state."""
        if self.is_game_over:
            return self._last_directive
        return self._finish(GameOverReason.ENDED_BY_USER)

    def reset(self) -> None:
        """Discard the session and return to IDLE with the same config."""
        self._machine.reset()
        self._reset_bookkeeping()
        logger.debug("Controller reset")

    # ── Internals ─────────────────────────────────────────────

    def _advance_clock(self, now_ms: int) -> None:
        if self._start_timestamp is None:
            return
        # Elapsed time never goes backwards
        self._elapsed_ms = max(self._elapsed_ms, now_ms - self._start_timestamp)

    def _time_expired(self) -> bool:
        remaining = self.remaining_ms
        return remaining is not None and remaining <= 0

    def _emit(self, directive: Directive) -> Directive:
        self._last_directive = directive
        return directive

    def _finish(self, reason: GameOverReason) -> Directive:
        self._machine.transition(_REASON_EVENTS[reason])
        self._reason = reason
        logger.info(
            "Session over (%s): answered=%d elapsed=%d",
            reason.value, self._questions_answered, self._elapsed_ms,
        )
        return self._emit(game_over(reason))

    def _context(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "elapsed_ms": self._elapsed_ms,
            "remaining_ms": self.remaining_ms,
            "questions_answered": self._questions_answered,
            "questions_remaining": self._questions_remaining,
        }

    def _reject(self, operation: str) -> Directive:
        error = InvalidStateTransition(
            operation=operation,
            state=self.state.value,
            mode=self.mode.value,
            context=self._context(),
        )
        if self.strict:
            raise error
        logger.warning("Ignoring illegal operation: %s", error)
        return self._last_directive
