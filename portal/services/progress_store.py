"""
SQLAlchemy-backed ProgressStore.

The exclusive scope takes the process-wide per-learner lock, row-locks the progress
record on backends that support SELECT ... FOR UPDATE, and commits on exit (rolls
back on any error).
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from learning.locks import KeyedLock
from learning.models import LearnerProgress
from learning.store import ProgressStore
from portal.models.models import LearnerProgressRecord
from portal.utils.logger import configure_logging

logger = configure_logging()


class SqlProgressStore(ProgressStore):
    def __init__(self, db: Session, locks: Optional[KeyedLock] = None):
        super().__init__(locks)
        self.db = db
        self._in_scope: set[str] = set()

    def _record(self, learner_id: str, *, for_update: bool = False) -> Optional[LearnerProgressRecord]:
        q = self.db.query(LearnerProgressRecord).filter(LearnerProgressRecord.learner_id == int(learner_id))
        if for_update:
            q = q.with_for_update()
        return q.first()

    def load_progress(self, learner_id: str) -> Optional[LearnerProgress]:
        learner_id = str(learner_id)
        rec = self._record(learner_id, for_update=learner_id in self._in_scope)
        if rec is None:
            return None
        return LearnerProgress.from_document(
            {
                "learner_id": learner_id,
                "total_xp": rec.total_xp,
                "current_streak": rec.current_streak,
                "completed_modules": rec.completed_modules,
                "history": rec.history,
            }
        )

    def save_progress(self, progress: LearnerProgress) -> None:
        doc = progress.to_document()
        rec = self._record(progress.learner_id)
        if rec is None:
            rec = LearnerProgressRecord(learner_id=int(progress.learner_id))
            self.db.add(rec)
        rec.total_xp = doc["total_xp"]
        rec.current_streak = doc["current_streak"]
        # JSON columns are replaced wholesale so the change is always flushed
        rec.completed_modules = doc["completed_modules"]
        rec.history = doc["history"]
        rec.updated_at = datetime.utcnow()
        self.db.flush()
        if progress.learner_id not in self._in_scope:
            self.db.commit()

    @contextmanager
    def exclusive(self, learner_id: str) -> Iterator[None]:
        learner_id = str(learner_id)
        with self.locks.hold(learner_id):
            self._in_scope.add(learner_id)
            try:
                yield
                self.db.commit()
            except Exception:
                logger.warning("rolling back progress update learner=%s", learner_id)
                self.db.rollback()
                raise
            finally:
                self._in_scope.discard(learner_id)
