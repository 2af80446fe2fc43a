"""Tests for layout_lessons.clock."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

from layout_lessons.clock import FakeClock, SystemClock


class TestSystemClock:
    def test_now_is_utc_and_current(self):
        before = datetime.now(timezone.utc)
        now = SystemClock().now()
        after = datetime.now(timezone.utc)
        assert now.tzinfo is not None
        assert before <= now <= after


class TestFakeClock:
    def test_does_not_advance_by_itself(self, clock):
        first = clock.now()
        time.sleep(0.01)
        assert clock.now() == first

    def test_returns_set_time(self, clock):
        expected = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        clock.set(expected)
        assert clock.now() == expected

    def test_advance(self, clock):
        first = clock.now()
        clock.advance(timedelta(days=1))
        assert clock.now() == first + timedelta(days=1)

    def test_default_start_is_now(self):
        before = datetime.now(timezone.utc)
        assert FakeClock().now() >= before
