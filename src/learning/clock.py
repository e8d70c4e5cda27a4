"""
Day bucketing.

Every read and write path truncates timestamps to a calendar day in ONE reference
time zone (configured via DAY_BOUNDARY_TZ, default UTC). Naive datetimes are UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo


def resolve_zone(tz: str | timezone | ZoneInfo | None) -> timezone | ZoneInfo:
    if tz is None:
        return timezone.utc
    if isinstance(tz, str):
        if tz.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(tz)
    return tz


def day_key(ts: datetime | date, tz: str | timezone | ZoneInfo | None = None) -> date:
    """Truncate a timestamp to its calendar day in the reference zone."""
    if isinstance(ts, datetime):
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(resolve_zone(tz)).date()
    return ts


def parse_day(value: str | date) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def days_between(earlier: date, later: date) -> int:
    return (later - earlier).days


def window(today: date, window_days: int) -> list[date]:
    """The `window_days` calendar days ending today, oldest first."""
    return [today - timedelta(days=offset) for offset in range(window_days - 1, -1, -1)]


class Clock:
    def __init__(self, tz: str | timezone | ZoneInfo | None = None, now: Optional[Callable[[], datetime]] = None):
        self.tz = resolve_zone(tz)
        self._now = now or (lambda: datetime.now(timezone.utc))

    def now(self) -> datetime:
        return self._now()

    def today(self) -> date:
        return day_key(self.now(), self.tz)
