# Area: Session
"""
trivia_engine._session.state_machine — Session State Machine
============================================================

Transition table for one play session. The controller consults it
before every operation and owns everything else (timer, quota,
directives).
"""

from typing import Optional

from ..errors import InvalidStateTransition
from .enums import SessionEvent, SessionState


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.IDLE: {
        SessionEvent.START: SessionState.RUNNING,
        SessionEvent.END: SessionState.GAME_OVER,
    },
    SessionState.RUNNING: {
        SessionEvent.TICK: SessionState.RUNNING,
        SessionEvent.ANSWER: SessionState.RUNNING,
        SessionEvent.PAUSE: SessionState.PAUSED,
        SessionEvent.END: SessionState.GAME_OVER,
        SessionEvent.TIME_EXPIRED: SessionState.GAME_OVER,
        SessionEvent.QUESTIONS_EXHAUSTED: SessionState.GAME_OVER,
    },
    SessionState.PAUSED: {
        SessionEvent.RESUME: SessionState.RUNNING,
        SessionEvent.END: SessionState.GAME_OVER,
    },
    SessionState.GAME_OVER: {},
}


class SessionStateMachine:
    """
    State machine for one session's lifecycle.

    Attributes:
        current_state: The current state of the state machine
        last_event: The last event that was applied, if any
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_state = SessionState.IDLE
        self.last_event: Optional[SessionEvent] = None

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: SessionEvent) -> SessionState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidStateTransition: If the transition is not valid
        """
        if not self.can_transition(event):
            raise InvalidStateTransition(
                operation=event.value.lower(),
                state=self.current_state.value,
            )

        self.current_state = TRANSITIONS[self.current_state][event]
        self.last_event = event
        return self.current_state

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS[self.current_state]

    def reset(self) -> None:
        """Reset state machine to initial state."""
        self.current_state = SessionState.IDLE
        self.last_event = None
