"""
Streak evaluation over the activity ledger.

The transition is applied once per learner per calendar day: the first activity of a
new day moves the streak, later activity on the same day leaves it alone.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from learning.clock import days_between
from learning.models import ActivityDay, LearnerProgress


def recompute_streak(progress: LearnerProgress, today: date, previous_active_day: Optional[date]) -> int:
    """
    Apply the day transition and return the new streak.

    `previous_active_day` is the learner's last active day as it was before today's
    activity was recorded (see LedgerUpdate.previous_active_day).
    """
    if previous_active_day is None:
        progress.current_streak = 1
        return progress.current_streak

    gap = days_between(previous_active_day, today)
    if gap <= 0:
        # same day (or a back-dated record): the transition already happened
        if progress.current_streak == 0:
            progress.current_streak = 1
    elif gap == 1:
        progress.current_streak += 1
    else:
        progress.current_streak = 1
    return progress.current_streak


def effective_streak(progress: LearnerProgress, today: date) -> int:
    """Stored streak while it is still alive (last active today or yesterday), else 0."""
    last = progress.last_active_day()
    if last is None:
        return 0
    if days_between(last, today) > 1:
        return 0
    return progress.current_streak


def derive_streak(history: Iterable[ActivityDay]) -> int:
    """Length of the consecutive-day run ending at the most recent active day."""
    active = sorted({e.day for e in history if e.xp_earned > 0}, reverse=True)
    if not active:
        return 0
    run = 1
    for prev, cur in zip(active, active[1:]):
        if prev - cur != timedelta(days=1):
            break
        run += 1
    return run
