from pydantic import BaseModel


class CreateAnnouncementRequest(BaseModel):
    title: str = ""
    message: str = ""


class AnnouncementResponse(BaseModel):
    id: int
    title: str
    message: str
    date: str
