"""
Binds the progress core to the request: a SQL-backed store on the request's DB
session, the configured day-boundary clock and the process-wide learner locks.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from learning.clock import Clock
from learning.locks import KeyedLock
from learning.service import ProgressService
from portal.config import get_db, settings
from portal.services.progress_store import SqlProgressStore

# one lock per learner for the whole process; SqlProgressStore adds row locks on top
learner_locks = KeyedLock()


def get_clock() -> Clock:
    return Clock(settings.DAY_BOUNDARY_TZ)


def get_progress_service(db: Session = Depends(get_db), clock: Clock = Depends(get_clock)) -> ProgressService:
    return ProgressService(SqlProgressStore(db, learner_locks), clock)
