from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field

Role = Literal["student", "parent", "teacher", "admin"]

CLAIMS_VERSION = 1


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    role: Literal["student", "parent", "teacher"] = "student"
    student_id: Optional[int] = None  # required when role == "parent"


class LoginResponse(BaseModel):
    message: str
    token: str


class RegisterResponse(BaseModel):
    message: str


class LogoutResponse(BaseModel):
    message: str


class TokenClaims(BaseModel):
    """Validated once at the boundary; routes only ever see this structure."""
    ver: int = CLAIMS_VERSION
    sub: str  # learner / user id
    email: str
    role: Role
    first_login_pending: bool = False
    exp: Optional[datetime] = None
