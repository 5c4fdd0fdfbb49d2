# Area: Session Tests
"""Tests for AdvanceScheduler — the delayed load of the next question."""

import pytest

from trivia_engine._session.advance import DEFAULT_ADVANCE_DELAY_MS, AdvanceScheduler


class TestAdvanceScheduler:
    """Unit tests for AdvanceScheduler."""

    def test_nothing_pending_initially(self):
        scheduler = AdvanceScheduler()
        assert scheduler.is_pending is False
        assert scheduler.due_at is None
        assert scheduler.poll(10_000, is_game_over=False) is False

    def test_default_delay(self):
        scheduler = AdvanceScheduler()
        assert scheduler.schedule(1_000) == 1_000 + DEFAULT_ADVANCE_DELAY_MS

    def test_not_due_before_delay(self):
        scheduler = AdvanceScheduler(delay_ms=2000)
        scheduler.schedule(1_000)
        assert scheduler.poll(2_999, is_game_over=False) is False
        assert scheduler.is_pending is True

    def test_fires_exactly_once(self):
        scheduler = AdvanceScheduler(delay_ms=2000)
        scheduler.schedule(1_000)
        assert scheduler.poll(3_000, is_game_over=False) is True
        assert scheduler.poll(4_000, is_game_over=False) is False
        assert scheduler.is_pending is False

    def test_discarded_when_game_over(self):
        scheduler = AdvanceScheduler(delay_ms=2000)
        scheduler.schedule(0)
        assert scheduler.poll(5_000, is_game_over=True) is False
        assert scheduler.is_pending is False

    def test_cancel(self):
        scheduler = AdvanceScheduler()
        scheduler.schedule(0)
        scheduler.cancel()
        assert scheduler.poll(60_000, is_game_over=False) is False

    def test_cancel_without_pending_is_noop(self):
        AdvanceScheduler().cancel()

    def test_reschedule_overwrites(self):
        scheduler = AdvanceScheduler(delay_ms=2000)
        scheduler.schedule(0)
        scheduler.schedule(500, delay_ms=100)
        assert scheduler.due_at == 600

    def test_zero_delay_due_immediately(self):
        scheduler = AdvanceScheduler(delay_ms=0)
        scheduler.schedule(100)
        assert scheduler.poll(100, is_game_over=False) is True

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            AdvanceScheduler(delay_ms=-1)
