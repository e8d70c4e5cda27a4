"""
Request/response boundary of the progress core.

The surrounding application resolves and authorizes the learner, then calls in here
with a plain learner id. Every write runs inside the store's exclusive scope.
"""

from __future__ import annotations

import logging
from typing import Collection, Iterable, List, Optional

from learning.aggregator import ProgressSummary, summarize
from learning.clock import Clock
from learning.errors import NotFound
from learning.ledger import record_activity
from learning.models import LearnerProgress, ModuleCatalogEntry
from learning.recommend import recommend
from learning.store import ProgressStore
from learning.streak import recompute_streak

logger = logging.getLogger("portal.learning")


class ProgressService:
    def __init__(self, store: ProgressStore, clock: Optional[Clock] = None):
        self.store = store
        self.clock = clock or Clock()

    def submit_activity(
        self,
        learner_id: str,
        xp_earned: int,
        module_id: Optional[str] = None,
        known_modules: Optional[Collection[str]] = None,
    ) -> dict:
        """
        Record XP (and optionally a completed module) for today and advance the streak.

        When `known_modules` is given, a `module_id` outside it raises NotFound before
        anything is loaded or written.
        """
        learner_id = str(learner_id)
        if module_id is not None and known_modules is not None and module_id not in known_modules:
            raise NotFound(f"Module {module_id} not found")
        today = self.clock.today()
        with self.store.exclusive(learner_id):
            progress = self.store.load_progress(learner_id)
            if progress is None:
                logger.info("creating progress record learner=%s", learner_id)
                progress = LearnerProgress.empty(learner_id)

            update = record_activity(progress, today, xp_earned, module_id)
            if update.previous_active_day != today:
                recompute_streak(progress, today, update.previous_active_day)
            self.store.save_progress(progress)

        logger.info(
            "activity recorded learner=%s day=%s new_day=%s xp_added=%s module_added=%s total_xp=%s streak=%s",
            learner_id, update.day, update.opened_day, update.xp_added, update.module_added,
            progress.total_xp, progress.current_streak,
        )
        return {
            "xp": progress.total_xp,
            "streak": progress.current_streak,
            "completed_modules": list(progress.completed_modules),
        }

    def load_or_empty(self, learner_id: str) -> LearnerProgress:
        progress = self.store.load_progress(str(learner_id))
        return progress if progress is not None else LearnerProgress.empty(learner_id)

    def require_progress(self, learner_id: str) -> LearnerProgress:
        progress = self.store.load_progress(str(learner_id))
        if progress is None:
            raise NotFound(f"No progress recorded for learner {learner_id}")
        return progress

    def get_summary(self, learner_id: str, total_modules: int, window_days: int = 7) -> ProgressSummary:
        """Unknown learners get zero-valued defaults rather than an error."""
        return summarize(self.load_or_empty(learner_id), total_modules, self.clock.today(), window_days)

    def get_recommendations(
        self,
        learner_id: str,
        catalog: Iterable[ModuleCatalogEntry],
        interests: Collection[str],
        limit: int = 5,
    ) -> List[ModuleCatalogEntry]:
        progress = self.load_or_empty(learner_id)
        return recommend(catalog, interests, progress.completed_modules, limit)
