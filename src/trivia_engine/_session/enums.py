# Area: Session
"""
trivia_engine._session.enums — Session State Machine Enums
==========================================================

Defines the states, events and game-over reasons of the game-mode
state machine.
"""

from enum import Enum


class GameMode(Enum):
    """The three ways a session can be bounded."""
    TIME_LIMITED = "time-limited"
    QUESTION_LIMITED = "question-limited"
    UNLIMITED = "unlimited"


class SessionState(Enum):
    """
    States of the session state machine.

    State transitions:
    IDLE -> RUNNING (on START)
    RUNNING -> RUNNING (on TICK or ANSWER)
    RUNNING -> PAUSED (on PAUSE)
    PAUSED -> RUNNING (on RESUME)
    RUNNING -> GAME_OVER (on TIME_EXPIRED or QUESTIONS_EXHAUSTED)
    IDLE/RUNNING/PAUSED -> GAME_OVER (on END)
    GAME_OVER is terminal until the controller is reset.
    """
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class SessionEvent(Enum):
    """
    Events that trigger state transitions.

    Events are triggered by:
    - START: host starts the session
    - TICK: host interval fires (~1000ms)
    - ANSWER: player submitted an answer
    - PAUSE / RESUME: host pauses or resumes play
    - END: player abandons the session
    - TIME_EXPIRED: time budget used up (time-limited mode)
    - QUESTIONS_EXHAUSTED: question budget used up (question-limited mode)
    """
    START = "START"
    TICK = "TICK"
    ANSWER = "ANSWER"
    PAUSE = "PAUSE"
    RESUME = "RESUME"
    END = "END"
    TIME_EXPIRED = "TIME_EXPIRED"
    QUESTIONS_EXHAUSTED = "QUESTIONS_EXHAUSTED"


class GameOverReason(Enum):
    """Why a session reached GAME_OVER."""
    TIME_EXPIRED = "time_expired"
    QUESTIONS_EXHAUSTED = "questions_exhausted"
    ENDED_BY_USER = "ended_by_user"
