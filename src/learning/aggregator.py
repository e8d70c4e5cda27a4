"""
Progress aggregation for dashboards. Pure reads; nothing here mutates a LearnerProgress.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterator, List

from learning.clock import window
from learning.errors import InvalidArgument
from learning.models import LearnerProgress
from learning.streak import effective_streak

# (minimum xp, badge name), highest first
BADGE_TIERS = [
    (1000, "Legend"),
    (500, "Champion"),
    (250, "Explorer"),
    (100, "Learner"),
    (0, "Newbie"),
]


@dataclass(frozen=True)
class DayXp:
    day: date
    xp: int


class WeeklySeries:
    """
    Gap-filled XP per day for the last `window_days` days, oldest first.

    Iteration is lazy and can be repeated; the length is always `window_days`.
    """

    def __init__(self, progress: LearnerProgress, today: date, window_days: int = 7):
        self.today = today
        self.window_days = window_days
        self._by_day: Dict[date, int] = {e.day: e.xp_earned for e in progress.history}

    def __iter__(self) -> Iterator[DayXp]:
        for day in window(self.today, self.window_days):
            yield DayXp(day=day, xp=self._by_day.get(day, 0))

    def __len__(self) -> int:
        return self.window_days

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeeklySeries):
            return NotImplemented
        return (
            self.today == other.today
            and self.window_days == other.window_days
            and list(self) == list(other)
        )

    def __hash__(self) -> int:
        return hash((self.today, self.window_days, tuple(self)))

    def __repr__(self) -> str:
        return f"WeeklySeries(today={self.today}, points={[(p.day.isoformat(), p.xp) for p in self]})"

    def total(self) -> int:
        return sum(point.xp for point in self)

    def average(self) -> int:
        return round(self.total() / self.window_days) if self.window_days else 0

    def to_list(self) -> List[dict]:
        return [{"day": p.day.isoformat(), "xp": p.xp} for p in self]


@dataclass(frozen=True)
class ProgressSummary:
    xp: int
    streak: int
    completed_count: int
    completion_ratio: float
    weekly_series: WeeklySeries

    def to_dict(self) -> dict:
        return {
            "xp": self.xp,
            "streak": self.streak,
            "completed_count": self.completed_count,
            "completion_ratio": self.completion_ratio,
            "weekly_series": self.weekly_series.to_list(),
        }


def summarize(
    progress: LearnerProgress,
    total_modules: int,
    today: date,
    window_days: int = 7,
) -> ProgressSummary:
    if total_modules < 0:
        raise InvalidArgument(f"total_modules must be >= 0, got {total_modules}")
    if window_days < 1:
        raise InvalidArgument(f"window_days must be >= 1, got {window_days}")

    completed = len(progress.completed_modules)
    ratio = completed / total_modules if total_modules else 0.0
    return ProgressSummary(
        xp=progress.total_xp,
        streak=effective_streak(progress, today),
        completed_count=completed,
        completion_ratio=ratio,
        weekly_series=WeeklySeries(progress, today, window_days),
    )


def badge_for(xp: int) -> str:
    for threshold, name in BADGE_TIERS:
        if xp >= threshold:
            return name
    return BADGE_TIERS[-1][1]
