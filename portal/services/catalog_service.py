"""
Learning-path catalog: read access for routes and the seeding entry point.
"""

from typing import Iterable, Optional

from sqlalchemy.orm import Session

from learning.models import ModuleCatalogEntry
from portal.models.models import CatalogModule, LearningPath
from portal.schemas.catalog_schemas import LearningPathResponse, ModuleResponse
from portal.utils.logger import configure_logging

logger = configure_logging()


class CatalogService:
    def __init__(self, db: Session):
        self.db = db

    def _paths(self, interests: Optional[Iterable[str]] = None) -> list[LearningPath]:
        q = self.db.query(LearningPath)
        if interests is not None:
            q = q.filter(LearningPath.interest.in_(list(interests)))
        return q.order_by(LearningPath.order_index.asc(), LearningPath.id.asc()).all()

    def list_paths(self) -> list[LearningPathResponse]:
        return [
            LearningPathResponse(
                title=p.title,
                description=p.description,
                interest=p.interest,
                modules=[module_response(m, p.interest) for m in p.modules],
            )
            for p in self._paths()
        ]

    def entries(self, interests: Optional[Iterable[str]] = None) -> list[ModuleCatalogEntry]:
        """Flattened catalog in path order, then module order."""
        return [
            ModuleCatalogEntry(
                module_id=m.module_id,
                title=m.title,
                description=m.description,
                xp_value=m.xp_value,
                interest_tag=p.interest,
            )
            for p in self._paths(interests)
            for m in p.modules
        ]

    def get_module(self, module_id: str) -> Optional[ModuleResponse]:
        m = self.db.query(CatalogModule).filter(CatalogModule.module_id == module_id).first()
        if m is None:
            return None
        return module_response(m, m.path.interest)

    def module_ids(self) -> set[str]:
        return {row.module_id for row in self.db.query(CatalogModule.module_id).all()}

    def count_modules(self) -> int:
        return self.db.query(CatalogModule).count()

    def seed(self, paths: list[dict], *, replace: bool = True) -> int:
        """Load learning paths (see portal.seed_data). Returns the number of modules written."""
        if replace:
            self.db.query(CatalogModule).delete()
            self.db.query(LearningPath).delete()
        written = 0
        for p_idx, p in enumerate(paths):
            path = LearningPath(
                title=p["title"],
                description=p["description"],
                interest=p["interest"],
                order_index=p_idx,
            )
            for m_idx, m in enumerate(p.get("modules") or []):
                path.modules.append(
                    CatalogModule(
                        module_id=m["module_id"],
                        title=m["title"],
                        description=m["description"],
                        xp_value=int(m.get("xp_value", 20)),
                        order_index=m_idx,
                    )
                )
                written += 1
            self.db.add(path)
        self.db.commit()
        logger.info("seeded learning paths paths=%s modules=%s", len(paths), written)
        return written


def module_response(m: CatalogModule, interest: str) -> ModuleResponse:
    return ModuleResponse(
        module_id=m.module_id,
        title=m.title,
        description=m.description,
        xp_value=m.xp_value,
        interest=interest,
    )
