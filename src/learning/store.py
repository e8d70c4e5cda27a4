from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from learning.locks import KeyedLock
from learning.models import LearnerProgress


class ProgressStore(ABC):
    """
    Persistence contract for learner progress.

    Writers must hold `exclusive(learner_id)` across load -> mutate -> save so two
    requests for the same learner cannot interleave their read-modify-write.
    """

    def __init__(self, locks: Optional[KeyedLock] = None):
        self.locks = locks if locks is not None else KeyedLock()

    @abstractmethod
    def load_progress(self, learner_id: str) -> Optional[LearnerProgress]:
        raise NotImplementedError

    @abstractmethod
    def save_progress(self, progress: LearnerProgress) -> None:
        raise NotImplementedError

    @contextmanager
    def exclusive(self, learner_id: str) -> Iterator[None]:
        with self.locks.hold(str(learner_id)):
            yield


class InMemoryProgressStore(ProgressStore):
    """Document store kept in a dict. Returns copies so callers never alias stored state."""

    def __init__(self, locks: Optional[KeyedLock] = None):
        super().__init__(locks)
        self._docs: Dict[str, dict] = {}

    def load_progress(self, learner_id: str) -> Optional[LearnerProgress]:
        doc = self._docs.get(str(learner_id))
        if doc is None:
            return None
        return LearnerProgress.from_document(copy.deepcopy(doc))

    def save_progress(self, progress: LearnerProgress) -> None:
        self._docs[progress.learner_id] = progress.to_document()

    def __contains__(self, learner_id: object) -> bool:
        return str(learner_id) in self._docs
