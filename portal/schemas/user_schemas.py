from pydantic import BaseModel
from typing import Optional


class Preferences(BaseModel):
    interests: list[str] = []
    style: str = ""


class User(BaseModel):
    id: int
    email: str
    role: str
    full_name: str = ""
    first_time_login: bool = False
    preferences: Optional[Preferences] = None


class SetupNameRequest(BaseModel):
    full_name: str


class SetupNameResponse(BaseModel):
    message: str
    token: str
    user: User


class PreferencesResponse(BaseModel):
    preferences: Preferences
    message: Optional[str] = None
