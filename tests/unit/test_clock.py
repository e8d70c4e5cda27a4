"""Unit tests for day bucketing."""
from datetime import date, datetime, timedelta, timezone

import pytest

from learning.clock import Clock, day_key, window


@pytest.mark.unit
class TestDayKey:
    def test_naive_is_utc(self):
        assert day_key(datetime(2025, 3, 10, 23, 30)) == date(2025, 3, 10)

    def test_converts_into_reference_zone(self):
        ts = datetime(2025, 3, 10, 23, 30, tzinfo=timezone.utc)
        assert day_key(ts, "UTC") == date(2025, 3, 10)
        assert day_key(ts, "Asia/Kolkata") == date(2025, 3, 11)
        assert day_key(ts, "America/New_York") == date(2025, 3, 10)

    def test_date_passthrough(self):
        assert day_key(date(2025, 1, 1), "Asia/Tokyo") == date(2025, 1, 1)

    def test_window_oldest_first(self):
        days = window(date(2025, 3, 10), 3)
        assert days == [date(2025, 3, 8), date(2025, 3, 9), date(2025, 3, 10)]


@pytest.mark.unit
class TestClock:
    def test_today_uses_zone(self):
        now = datetime(2025, 3, 10, 20, 0, tzinfo=timezone.utc)
        assert Clock("UTC", now=lambda: now).today() == date(2025, 3, 10)
        assert Clock("Asia/Tokyo", now=lambda: now).today() == date(2025, 3, 11)

    def test_default_clock_is_aware_utc(self):
        now = Clock().now()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)
