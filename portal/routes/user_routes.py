"""
First-login name setup and learning preferences.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from portal.config import get_db
from portal.models.models import User as DbUser
from portal.schemas.user_schemas import Preferences, PreferencesResponse, SetupNameRequest, SetupNameResponse
from portal.utils.auth import get_current_user, issue_token, require_roles, set_auth_cookie
from portal.utils.common import preferences_of, user_schema

user_routes = APIRouter()


@user_routes.put("/user/setup-name", response_model=SetupNameResponse)
async def setup_name(
    body: SetupNameRequest,
    response: Response,
    current_user: DbUser = Depends(require_roles("student")),
    db: Session = Depends(get_db),
) -> SetupNameResponse:
    """
    Set the student's full name on first login and clear the first-login flag.
    Returns a fresh token whose claims no longer mark the first login as pending.
    """
    if not current_user.first_time_login:
        raise HTTPException(status_code=404, detail="User not found or already completed setup")
    full_name = body.full_name.strip()
    if not full_name:
        raise HTTPException(status_code=400, detail="Full name is required")
    current_user.full_name = full_name
    current_user.first_time_login = False
    db.add(current_user)
    db.commit()
    db.refresh(current_user)

    token = issue_token(current_user)
    set_auth_cookie(response, token)
    return SetupNameResponse(message="Name set successfully", token=token, user=user_schema(current_user))


@user_routes.get("/user/preferences", response_model=PreferencesResponse)
async def get_preferences(current_user: DbUser = Depends(get_current_user)) -> PreferencesResponse:
    return PreferencesResponse(preferences=preferences_of(current_user))


@user_routes.put("/user/preferences", response_model=PreferencesResponse)
async def save_preferences(
    body: Preferences,
    current_user: DbUser = Depends(require_roles("student")),
    db: Session = Depends(get_db),
) -> PreferencesResponse:
    """Replace the student's interests and learning style."""
    interests = [i.strip() for i in body.interests if isinstance(i, str) and i.strip()]
    current_user.preferences = {"interests": interests, "style": body.style or ""}
    db.add(current_user)
    db.commit()
    db.refresh(current_user)
    return PreferencesResponse(preferences=preferences_of(current_user), message="Preferences saved successfully")
