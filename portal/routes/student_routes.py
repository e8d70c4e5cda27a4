"""
Student endpoints: submit activity, progress summary, dashboard, analysis.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from learning.aggregator import badge_for
from learning.service import ProgressService
from portal.config import get_db, settings
from portal.models.models import User as DbUser
from portal.schemas.catalog_schemas import ModuleResponse
from portal.schemas.progress_schemas import (
    AnalysisResponse,
    DashboardResponse,
    ProgressSummaryResponse,
    RecommendationsResponse,
    RecommendedStep,
    StudentListItem,
    SubmitActivityRequest,
    SubmitActivityResponse,
)
from portal.services.catalog_service import CatalogService
from portal.services.progress_service import get_progress_service
from portal.utils.auth import require_roles
from portal.utils.common import analysis_insights, preferences_of, summary_response, user_schema
from portal.utils.logger import configure_logging, log_request

logger = configure_logging()

student_routes = APIRouter()


@student_routes.post("/student/progress", response_model=SubmitActivityResponse)
def submit_activity(
    body: SubmitActivityRequest,
    current_user: DbUser = Depends(require_roles("student")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> SubmitActivityResponse:
    """
    Record XP for today (and the completed module, if any).
    400 on bad XP, 404 on a module outside the catalog, 409 on a repeat completion.
    """
    known = CatalogService(db).module_ids() if body.module_id is not None else None
    with log_request(logger, f"submit_activity learner={current_user.id}"):
        result = progress.submit_activity(str(current_user.id), body.xp_earned, body.module_id, known)
    return SubmitActivityResponse(**result)


@student_routes.get("/student/progress", response_model=ProgressSummaryResponse)
def get_progress(
    window_days: Optional[int] = Query(default=None, ge=1, le=366),
    current_user: DbUser = Depends(require_roles("student")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> ProgressSummaryResponse:
    total = CatalogService(db).count_modules()
    summary = progress.get_summary(str(current_user.id), total, window_days or settings.WEEKLY_WINDOW_DAYS)
    return summary_response(summary, total)


@student_routes.get("/student/dashboard", response_model=DashboardResponse)
def get_dashboard(
    current_user: DbUser = Depends(require_roles("student")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> DashboardResponse:
    total = CatalogService(db).count_modules()
    learner_id = str(current_user.id)
    summary = progress.get_summary(learner_id, total, settings.WEEKLY_WINDOW_DAYS)
    return DashboardResponse(
        user=user_schema(current_user),
        completed_modules=list(progress.load_or_empty(learner_id).completed_modules),
        summary=summary_response(summary, total),
        badge=badge_for(summary.xp),
        average_xp=summary.weekly_series.average(),
    )


@student_routes.get("/student/recommendations", response_model=RecommendationsResponse)
def get_recommendations(
    limit: Optional[int] = Query(default=None, ge=0, le=50),
    current_user: DbUser = Depends(require_roles("student")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> RecommendationsResponse:
    prefs = preferences_of(current_user)
    modules = progress.get_recommendations(
        str(current_user.id),
        CatalogService(db).entries(),
        prefs.interests,
        settings.RECOMMENDATION_LIMIT if limit is None else limit,
    )
    return RecommendationsResponse(
        modules=[
            ModuleResponse(
                module_id=m.module_id,
                title=m.title,
                description=m.description,
                xp_value=m.xp_value,
                interest=m.interest_tag,
            )
            for m in modules
        ]
    )


@student_routes.get("/student/analysis", response_model=AnalysisResponse)
def get_analysis(
    current_user: DbUser = Depends(require_roles("student")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> AnalysisResponse:
    """Preferences, the linked parent's aspiration, and the recommended next modules."""
    prefs = preferences_of(current_user)
    parent = (
        db.query(DbUser)
        .filter(DbUser.student_id == current_user.id, DbUser.role == "parent")
        .first()
    )
    parent_name = (parent.full_name or None) if parent else None
    parent_aspiration = (parent.aspiration or None) if parent else None

    modules = progress.get_recommendations(
        str(current_user.id),
        CatalogService(db).entries(prefs.interests),
        prefs.interests,
        settings.RECOMMENDATION_LIMIT,
    )
    return AnalysisResponse(
        has_preferences=bool(prefs.interests) and bool(prefs.style),
        interests=prefs.interests,
        learning_style=prefs.style or None,
        has_parent_aspiration=bool(parent_aspiration),
        parent_name=parent_name,
        parent_aspiration=parent_aspiration,
        recommended_path=[
            RecommendedStep(module_id=m.module_id, step=m.title, description=m.description, xp_value=m.xp_value)
            for m in modules
        ],
        insights=analysis_insights(prefs.interests, parent_aspiration),
    )


@student_routes.get("/student/list", response_model=list[StudentListItem])
def list_students(db: Session = Depends(get_db)) -> list[StudentListItem]:
    """Public: used by the parent registration form to pick a student."""
    students = db.query(DbUser).filter(DbUser.role == "student").order_by(DbUser.id.asc()).all()
    return [StudentListItem(id=s.id, email=s.email) for s in students]
