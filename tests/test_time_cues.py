# Area: Session Tests
"""Tests for time warning cues."""

import pytest

from trivia_engine._session.cues import TimeCue, TimeCueTracker, cue_for_seconds


class TestCueForSeconds:
    """Tests for the seconds → cue mapping."""

    @pytest.mark.parametrize("seconds,cue", [
        (0, None),
        (-1, None),
        (1, TimeCue.COUNTDOWN),
        (3, TimeCue.COUNTDOWN),
        (4, TimeCue.WARNING),
        (10, TimeCue.WARNING),
        (11, None),
        (30, TimeCue.BEEP),
        (60, TimeCue.BEEP),
        (45, None),
    ])
    def test_mapping(self, seconds, cue):
        """Test the cue chosen for each whole-second value."""
        assert cue_for_seconds(seconds) is cue


class TestTimeCueTracker:
    """Tests for once-per-second cue tracking."""

    def test_none_for_untimed_modes(self):
        """Test that modes without a time limit get no cues."""
        assert TimeCueTracker().cue_for(None) is None

    def test_one_cue_per_second(self):
        """Test that a second value cues at most once."""
        tracker = TimeCueTracker()
        assert tracker.cue_for(9_900) is TimeCue.WARNING
        assert tracker.cue_for(9_100) is None
        assert tracker.cue_for(8_900) is TimeCue.WARNING

    def test_countdown_sequence(self):
        """Test the final three-second countdown."""
        tracker = TimeCueTracker()
        cues = [tracker.cue_for(ms) for ms in (3_000, 2_000, 1_000, 0)]
        assert cues == [TimeCue.COUNTDOWN, TimeCue.COUNTDOWN, TimeCue.COUNTDOWN, None]

    def test_reset_allows_repeat(self):
        """Test that reset() forgets the cues already given."""
        tracker = TimeCueTracker()
        assert tracker.cue_for(30_000) is TimeCue.BEEP
        tracker.reset()
        assert tracker.cue_for(30_000) is TimeCue.BEEP
