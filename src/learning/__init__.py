"""
Learner progress core: activity ledger, streaks, summaries and recommendations.

Framework-free. The web layer (portal) supplies a ProgressStore and a Clock.
"""

from learning.aggregator import ProgressSummary, WeeklySeries, badge_for, summarize
from learning.clock import Clock, day_key
from learning.errors import AlreadyCompleted, InvalidAmount, InvalidArgument, NotFound, ProgressError
from learning.ledger import record_activity
from learning.locks import KeyedLock
from learning.models import ActivityDay, LearnerProgress, LedgerUpdate, ModuleCatalogEntry
from learning.recommend import recommend
from learning.service import ProgressService
from learning.store import InMemoryProgressStore, ProgressStore
from learning.streak import derive_streak, effective_streak, recompute_streak

__all__ = [
    "ActivityDay",
    "AlreadyCompleted",
    "Clock",
    "InMemoryProgressStore",
    "InvalidAmount",
    "InvalidArgument",
    "KeyedLock",
    "LearnerProgress",
    "LedgerUpdate",
    "ModuleCatalogEntry",
    "NotFound",
    "ProgressError",
    "ProgressService",
    "ProgressStore",
    "ProgressSummary",
    "WeeklySeries",
    "badge_for",
    "day_key",
    "derive_streak",
    "effective_streak",
    "recommend",
    "record_activity",
    "recompute_streak",
    "summarize",
]
