"""
Learning paths and module lookup.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from portal.config import get_db
from portal.models.models import User as DbUser
from portal.schemas.catalog_schemas import LearningPathListResponse, ModuleDetailResponse
from portal.services.catalog_service import CatalogService
from portal.utils.auth import get_current_user

catalog_routes = APIRouter()


@catalog_routes.get("/learning-paths", response_model=LearningPathListResponse)
async def list_learning_paths(
    current_user: DbUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> LearningPathListResponse:
    return LearningPathListResponse(learning_paths=CatalogService(db).list_paths())


@catalog_routes.get("/module/{module_id}", response_model=ModuleDetailResponse)
async def get_module(
    module_id: str,
    current_user: DbUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ModuleDetailResponse:
    module = CatalogService(db).get_module(module_id)
    if module is None:
        raise HTTPException(status_code=404, detail="Module not found")
    return ModuleDetailResponse(module=module)
