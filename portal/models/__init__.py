"""
Portal data models. Single import surface for DB entities.

DB entities (portal.models.models):
- User, LearnerProgressRecord, LearningPath, CatalogModule, Announcement
"""

from portal.models.models import (
    User,
    LearnerProgressRecord,
    LearningPath,
    CatalogModule,
    Announcement,
)

__all__ = [
    "User",
    "LearnerProgressRecord",
    "LearningPath",
    "CatalogModule",
    "Announcement",
]
