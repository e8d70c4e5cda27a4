"""
Teacher endpoints: student roster with progress, announcements.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from learning.service import ProgressService
from learning.streak import effective_streak
from portal.config import get_db
from portal.models.models import Announcement, User as DbUser
from portal.schemas.announcement_schemas import AnnouncementResponse, CreateAnnouncementRequest
from portal.schemas.progress_schemas import StudentRosterItem, StudentRosterResponse
from portal.services.progress_service import get_progress_service
from portal.utils.auth import get_current_user, require_roles
from portal.utils.common import iso_format

teacher_routes = APIRouter()


@teacher_routes.get("/teacher/students", response_model=StudentRosterResponse)
def list_students_with_progress(
    current_user: DbUser = Depends(require_roles("teacher", "admin")),
    progress: ProgressService = Depends(get_progress_service),
    db: Session = Depends(get_db),
) -> StudentRosterResponse:
    students = db.query(DbUser).filter(DbUser.role == "student").order_by(DbUser.id.asc()).all()
    today = progress.clock.today()
    roster: list[StudentRosterItem] = []
    for s in students:
        p = progress.load_or_empty(str(s.id))
        roster.append(
            StudentRosterItem(
                id=s.id,
                email=s.email,
                full_name=s.full_name or "",
                xp=p.total_xp,
                streak=effective_streak(p, today),
                completed_modules=list(p.completed_modules),
            )
        )
    return StudentRosterResponse(students=roster)


@teacher_routes.get("/teacher/announcements", response_model=list[AnnouncementResponse])
async def list_announcements(
    current_user: DbUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> list[AnnouncementResponse]:
    rows = db.query(Announcement).order_by(Announcement.date.desc(), Announcement.id.desc()).all()
    return [AnnouncementResponse(id=a.id, title=a.title, message=a.message, date=iso_format(a.date)) for a in rows]


@teacher_routes.post(
    "/teacher/announcements",
    response_model=AnnouncementResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_announcement(
    body: CreateAnnouncementRequest,
    current_user: DbUser = Depends(require_roles("teacher", "admin")),
    db: Session = Depends(get_db),
) -> AnnouncementResponse:
    title = body.title.strip()
    message = body.message.strip()
    if not title or not message:
        raise HTTPException(status_code=400, detail="Title and message are required")
    a = Announcement(title=title, message=message)
    db.add(a)
    db.commit()
    db.refresh(a)
    return AnnouncementResponse(id=a.id, title=a.title, message=a.message, date=iso_format(a.date))
