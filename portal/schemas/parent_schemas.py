from pydantic import BaseModel
from typing import Optional


class AspirationRequest(BaseModel):
    aspiration: str = ""


class AspirationResponse(BaseModel):
    aspiration: str
    message: Optional[str] = None


class RelinkStudentRequest(BaseModel):
    new_student_id: int


class UnlinkStudentRequest(BaseModel):
    student_id: int


class LinkedStudent(BaseModel):
    id: int
    email: str
    name: str


class RelinkStudentResponse(BaseModel):
    success: bool
    message: str
    student: LinkedStudent


class UnlinkStudentResponse(BaseModel):
    success: bool
    message: str
