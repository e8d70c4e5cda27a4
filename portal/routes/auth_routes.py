"""
Registration, login and logout. Tokens are returned in the body (bearer use) and set as
an HTTP-only cookie.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from portal.config import get_db
from portal.models.models import User as DbUser
from portal.schemas.auth_schemas import LoginRequest, LoginResponse, LogoutResponse, RegisterRequest, RegisterResponse
from portal.schemas.user_schemas import User
from portal.utils.auth import (
    authenticate_user,
    clear_auth_cookie,
    create_user,
    get_current_user,
    get_user_by_email,
    get_user_by_id,
    issue_token,
    set_auth_cookie,
)
from portal.utils.common import user_schema
from portal.utils.logger import configure_logging

logger = configure_logging()

auth_routes = APIRouter()


@auth_routes.post("/register", status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> RegisterResponse:
    """Register a new account. Parents must name an existing student to link to."""
    if get_user_by_email(request.email, db):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User exists")

    if request.role == "parent":
        if request.student_id is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Student ID required for parent")
        student = get_user_by_id(request.student_id, db)
        if student is None or student.role != "student":
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid student ID")

    user = create_user(request.email, request.password, db, role=request.role, student_id=request.student_id)
    logger.info("registered user id=%s role=%s", user.id, user.role)
    return RegisterResponse(message="Registered")


@auth_routes.post("/login")
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)) -> LoginResponse:
    user = authenticate_user(request.email, request.password, db)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = issue_token(user)
    set_auth_cookie(response, token)
    return LoginResponse(message="Login successful", token=token)


@auth_routes.post("/logout")
def logout(response: Response) -> LogoutResponse:
    clear_auth_cookie(response)
    return LogoutResponse(message="Logout successful - cookie cleared")


@auth_routes.get("/me", response_model=User)
def get_current_user_info(current_user: DbUser = Depends(get_current_user)) -> User:
    return user_schema(current_user)
