from typing import Callable, Optional

from fastapi import Cookie, Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portal.config import get_db, settings
from portal.models.models import User
from portal.schemas.auth_schemas import TokenClaims
from portal.utils.jwt import create_access_token, get_password_hash, verify_password, verify_token

bearer = HTTPBearer(auto_error=False)


def get_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    access_token: Optional[str] = Cookie(None),
) -> TokenClaims:
    """Resolve the caller's claims from `Authorization: Bearer` or the access_token cookie."""
    token = credentials.credentials if credentials else access_token
    return verify_token(token)


def get_current_user(claims: TokenClaims = Depends(get_claims), db: Session = Depends(get_db)) -> User:
    user = get_user_by_id(int(claims.sub), db)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def require_roles(*roles: str) -> Callable[..., User]:
    """Dependency factory: the current user, or 403 when their role is not allowed."""

    def _check(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Forbidden: {', '.join(roles)} only",
            )
        return user

    return _check


def claims_for(user: User) -> TokenClaims:
    return TokenClaims(
        sub=str(user.id),
        email=user.email,
        role=user.role,
        first_login_pending=bool(user.first_time_login),
    )


def issue_token(user: User) -> str:
    return create_access_token(claims_for(user))


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key="access_token",
        value=token,
        httponly=True,
        secure=False,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key="access_token",
        httponly=True,
        secure=False,
        samesite="lax"
    )


def get_user_by_email(email: str, db: Session) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def get_user_by_id(user_id: int, db: Session) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def create_user(email: str, password: str, db: Session, *, role: str = "student", student_id: int | None = None) -> User:
    user = User(
        email=email.strip().lower(),
        hashed_password=get_password_hash(password),
        role=role,
        student_id=student_id if role == "parent" else None,
        first_time_login=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(email: str, password: str, db: Session) -> User | None:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
