# Area: Session
"""
trivia_engine._session.models — Session value objects
=====================================================

Snapshots handed to the host: timer state, progress, and the directive
returned by every controller operation.
"""

from dataclasses import dataclass
from typing import Optional

from .enums import GameOverReason


@dataclass(frozen=True)
class SessionTimerState:
    """
    Timer bookkeeping of a session.

    Attributes:
        is_running: True while the session is RUNNING
        start_timestamp: Anchor in ms; moved forward on resume so paused
            time is not counted. None before start.
        elapsed_ms: Running time so far
        remaining_ms: Time left (time-limited mode only, else None)
    """

    is_running: bool
    start_timestamp: Optional[int]
    elapsed_ms: int
    remaining_ms: Optional[int]


@dataclass(frozen=True)
class SessionProgress:
    """
    Question progress of a session.

    Attributes:
        questions_answered: Answers recorded so far
        questions_remaining: Budget left (question-limited only, else None)
        is_game_over: True once the session reached GAME_OVER
    """

    questions_answered: int
    questions_remaining: Optional[int]
    is_game_over: bool


@dataclass(frozen=True)
class Directive:
    """
    What the host should do next.

    Attributes:
        should_continue: False once the session is over
        load_next: True when the host should fetch another question
            (after its own feedback delay)
        reason: Why the session ended, None while it runs
    """

    should_continue: bool
    load_next: bool
    reason: Optional[GameOverReason] = None

    def to_dict(self) -> dict:
        return {
            "should_continue": self.should_continue,
            "load_next": self.load_next,
            "reason": self.reason.value if self.reason else None,
        }


CONTINUE = Directive(should_continue=True, load_next=False)
LOAD_NEXT = Directive(should_continue=True, load_next=True)


def game_over(reason: GameOverReason) -> Directive:
    return Directive(should_continue=False, load_next=False, reason=reason)
