"""
Plain records the progress core operates on.

LearnerProgress is persisted as a single document per learner; `to_document` /
`from_document` define that shape for every store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from learning.clock import parse_day


@dataclass
class ActivityDay:
    day: date
    xp_earned: int


@dataclass
class LearnerProgress:
    learner_id: str
    total_xp: int = 0
    current_streak: int = 0
    completed_modules: List[str] = field(default_factory=list)
    history: List[ActivityDay] = field(default_factory=list)  # ordered by day, unique days

    @classmethod
    def empty(cls, learner_id: str) -> "LearnerProgress":
        return cls(learner_id=str(learner_id))

    def entry_for(self, day: date) -> Optional[ActivityDay]:
        for entry in self.history:
            if entry.day == day:
                return entry
        return None

    def last_active_day(self) -> Optional[date]:
        """Most recent day with xp_earned > 0."""
        for entry in reversed(self.history):
            if entry.xp_earned > 0:
                return entry.day
        return None

    def has_completed(self, module_id: str) -> bool:
        return module_id in self.completed_modules

    def to_document(self) -> Dict[str, Any]:
        return {
            "learner_id": self.learner_id,
            "total_xp": self.total_xp,
            "current_streak": self.current_streak,
            "completed_modules": list(self.completed_modules),
            "history": [{"day": e.day.isoformat(), "xp_earned": e.xp_earned} for e in self.history],
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "LearnerProgress":
        history = [
            ActivityDay(day=parse_day(item["day"]), xp_earned=int(item.get("xp_earned") or 0))
            for item in (doc.get("history") or [])
            if isinstance(item, dict) and item.get("day")
        ]
        history.sort(key=lambda e: e.day)
        return cls(
            learner_id=str(doc["learner_id"]),
            total_xp=int(doc.get("total_xp") or 0),
            current_streak=int(doc.get("current_streak") or 0),
            completed_modules=list(doc.get("completed_modules") or []),
            history=history,
        )


@dataclass(frozen=True)
class ModuleCatalogEntry:
    module_id: str
    title: str
    description: str
    xp_value: int
    interest_tag: str


@dataclass(frozen=True)
class LedgerUpdate:
    """What a single record_activity call changed."""

    day: date
    previous_active_day: Optional[date]
    opened_day: bool
    xp_added: int
    module_added: Optional[str] = None
