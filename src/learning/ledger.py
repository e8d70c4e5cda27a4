"""
Activity ledger: per-day XP history with append-or-merge semantics.
"""

from __future__ import annotations

import bisect
from datetime import date
from typing import Optional

from learning.errors import AlreadyCompleted, InvalidAmount
from learning.models import ActivityDay, LearnerProgress, LedgerUpdate


def validate_amount(xp_earned: object) -> int:
    if isinstance(xp_earned, bool) or not isinstance(xp_earned, int):
        raise InvalidAmount(f"xp_earned must be an integer, got {xp_earned!r}")
    if xp_earned <= 0:
        raise InvalidAmount(f"xp_earned must be positive, got {xp_earned}")
    return xp_earned


def record_activity(
    progress: LearnerProgress,
    day: date,
    xp_earned: int,
    module_id: Optional[str] = None,
) -> LedgerUpdate:
    """
    Add `xp_earned` to the entry for `day`, creating it if needed.

    Each call adds XP ("more activity today"), it never sets the day's total.
    A module already in completed_modules is rejected with AlreadyCompleted and
    nothing is written.
    """
    xp_earned = validate_amount(xp_earned)
    if module_id is not None and progress.has_completed(module_id):
        raise AlreadyCompleted(module_id)

    previous_active_day = progress.last_active_day()

    entry = progress.entry_for(day)
    opened_day = entry is None
    if entry is None:
        days = [e.day for e in progress.history]
        progress.history.insert(bisect.bisect_left(days, day), ActivityDay(day=day, xp_earned=xp_earned))
    else:
        entry.xp_earned += xp_earned
    progress.total_xp += xp_earned

    module_added = None
    if module_id is not None:
        progress.completed_modules.append(module_id)
        module_added = module_id

    return LedgerUpdate(
        day=day,
        previous_active_day=previous_active_day,
        opened_day=opened_day,
        xp_added=xp_earned,
        module_added=module_added,
    )
