"""
Parent endpoints: linked-student report, aspiration, relink/unlink.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from learning.service import ProgressService
from portal.config import get_db, settings
from portal.models.models import User as DbUser
from portal.schemas.parent_schemas import (
    AspirationRequest,
    AspirationResponse,
    LinkedStudent,
    RelinkStudentRequest,
    RelinkStudentResponse,
    UnlinkStudentRequest,
    UnlinkStudentResponse,
)
from portal.schemas.progress_schemas import StudentReportResponse
from portal.services.catalog_service import CatalogService
from portal.services.progress_service import get_progress_service
from portal.utils.auth import get_current_user, get_user_by_id, require_roles
from portal.utils.common import display_name, preferences_of, summary_response
from portal.utils.logger import configure_logging

logger = configure_logging()

parent_routes = APIRouter()


@parent_routes.get("/student/report", response_model=StudentReportResponse)
def get_student_report(
    parent: DbUser = Depends(require_roles("parent")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> StudentReportResponse:
    """Profile and progress of the student linked to the calling parent."""
    student = get_user_by_id(parent.student_id, db) if parent.student_id else None
    if student is None:
        raise HTTPException(status_code=404, detail="No linked student found")

    total = CatalogService(db).count_modules()
    learner_id = str(student.id)
    summary = progress.get_summary(learner_id, total, settings.WEEKLY_WINDOW_DAYS)
    return StudentReportResponse(
        id=student.id,
        email=student.email,
        full_name=student.full_name or "",
        role=student.role,
        preferences=preferences_of(student) if student.preferences is not None else None,
        progress=summary_response(summary, total),
        completed_modules=list(progress.load_or_empty(learner_id).completed_modules),
        parent_aspiration=parent.aspiration or "",
    )


@parent_routes.get("/parent/aspiration", response_model=AspirationResponse)
async def get_aspiration(current_user: DbUser = Depends(get_current_user)) -> AspirationResponse:
    return AspirationResponse(aspiration=current_user.aspiration or "")


@parent_routes.put("/parent/aspiration", response_model=AspirationResponse)
async def save_aspiration(
    body: AspirationRequest,
    parent: DbUser = Depends(require_roles("parent")),
    db: Session = Depends(get_db),
) -> AspirationResponse:
    parent.aspiration = (body.aspiration or "").strip()
    db.add(parent)
    db.commit()
    db.refresh(parent)
    return AspirationResponse(aspiration=parent.aspiration, message="Aspiration saved successfully")


@parent_routes.post("/parent/relink-student", response_model=RelinkStudentResponse)
async def relink_student(
    body: RelinkStudentRequest,
    parent: DbUser = Depends(require_roles("parent")),
    db: Session = Depends(get_db),
) -> RelinkStudentResponse:
    student = get_user_by_id(body.new_student_id, db)
    if student is None or student.role != "student":
        raise HTTPException(status_code=404, detail="Student not found")
    parent.student_id = student.id
    db.add(parent)
    db.commit()
    logger.info("parent relinked parent=%s student=%s", parent.id, student.id)
    return RelinkStudentResponse(
        success=True,
        message="Student relinked successfully",
        student=LinkedStudent(id=student.id, email=student.email, name=display_name(student)),
    )


@parent_routes.post("/parent/unlink-student", response_model=UnlinkStudentResponse)
async def unlink_student(
    body: UnlinkStudentRequest,
    parent: DbUser = Depends(require_roles("parent")),
    db: Session = Depends(get_db),
) -> UnlinkStudentResponse:
    if parent.student_id is None or parent.student_id != body.student_id:
        raise HTTPException(status_code=400, detail="Student is not linked to this parent")
    parent.student_id = None
    db.add(parent)
    db.commit()
    logger.info("parent unlinked parent=%s student=%s", parent.id, body.student_id)
    return UnlinkStudentResponse(success=True, message="Student unlinked successfully")
