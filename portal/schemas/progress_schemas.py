"""
Learner progress schemas (dashboards, progress page, parent report, teacher roster).
"""

from pydantic import BaseModel, Field
from typing import Optional

from portal.schemas.catalog_schemas import ModuleResponse
from portal.schemas.user_schemas import Preferences, User


class SubmitActivityRequest(BaseModel):
    # strict so True/"20" are not silently coerced; zero/negative is left to the core (InvalidAmount)
    xp_earned: int = Field(strict=True)
    module_id: Optional[str] = None


class SubmitActivityResponse(BaseModel):
    xp: int
    streak: int
    completed_modules: list[str]


class DayXpResponse(BaseModel):
    day: str  # ISO date
    xp: int


class ProgressSummaryResponse(BaseModel):
    xp: int
    streak: int
    completed_count: int
    completion_ratio: float
    total_modules: int
    weekly_series: list[DayXpResponse]


class DashboardResponse(BaseModel):
    user: User
    completed_modules: list[str]
    summary: ProgressSummaryResponse
    badge: str
    average_xp: int


class RecommendedStep(BaseModel):
    module_id: str
    step: str
    description: str
    xp_value: int
    done: bool = False


class AnalysisResponse(BaseModel):
    has_preferences: bool
    interests: list[str]
    learning_style: Optional[str] = None
    has_parent_aspiration: bool
    parent_name: Optional[str] = None
    parent_aspiration: Optional[str] = None
    recommended_path: list[RecommendedStep]
    insights: str


class RecommendationsResponse(BaseModel):
    modules: list[ModuleResponse]


class StudentReportResponse(BaseModel):
    id: int
    email: str
    full_name: str
    role: str
    preferences: Optional[Preferences] = None
    progress: ProgressSummaryResponse
    completed_modules: list[str]
    parent_aspiration: str = ""


class StudentListItem(BaseModel):
    id: int
    email: str


class StudentRosterItem(BaseModel):
    id: int
    email: str
    full_name: str
    xp: int
    streak: int
    completed_modules: list[str]


class StudentRosterResponse(BaseModel):
    students: list[StudentRosterItem]
