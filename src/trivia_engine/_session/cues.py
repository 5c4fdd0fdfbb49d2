# Area: Session
"""
trivia_engine._session.cues — Time warning cues
===============================================

Decides which audio cue a host should play as a time-limited session
runs down. Playing the sound is the host's job; this only picks the cue
and makes sure each whole second triggers at most one cue.

    remaining 10..4 s  → WARNING
    remaining  3..1 s  → COUNTDOWN
    every 30 s mark    → BEEP
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

COUNTDOWN_FROM_SECONDS = 3
WARNING_FROM_SECONDS = 10
BEEP_EVERY_SECONDS = 30


class TimeCue(Enum):
    """Cues a host can map to sounds or animations."""
    BEEP = "beep"
    WARNING = "time_warning"
    COUNTDOWN = "countdown"


def cue_for_seconds(seconds: int) -> Optional[TimeCue]:
    """Cue for a whole number of remaining seconds, ignoring repeats."""
    if seconds <= 0:
        return None
    if seconds <= COUNTDOWN_FROM_SECONDS:
        return TimeCue.COUNTDOWN
    if seconds <= WARNING_FROM_SECONDS:
        return TimeCue.WARNING
    if seconds % BEEP_EVERY_SECONDS == 0:
        return TimeCue.BEEP
    return None


class TimeCueTracker:
    """Emits each cue at most once per remaining-seconds value."""

    def __init__(self) -> None:
        self._last_cued_second: Optional[int] = None

    def cue_for(self, remaining_ms: Optional[int]) -> Optional[TimeCue]:
        """
        Return the cue to play for ``remaining_ms``, or None.

        Ticks that land in a second which already produced a cue return
        None.
        """
        if remaining_ms is None:
            return None
        seconds = remaining_ms // 1000
        if seconds == self._last_cued_second:
            return None

        cue = cue_for_seconds(seconds)
        if cue is not None:
            self._last_cued_second = seconds
        return cue

    def reset(self) -> None:
        self._last_cued_second = None
