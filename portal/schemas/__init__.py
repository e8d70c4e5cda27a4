"""
Portal schemas package. Import from submodules or from this package.

Example:
    from portal.schemas import SubmitActivityRequest, ProgressSummaryResponse
    from portal.schemas.progress_schemas import DashboardResponse
"""

from portal.schemas.auth_schemas import (
    TokenClaims,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from portal.schemas.user_schemas import (
    User,
    Preferences,
    PreferencesResponse,
    SetupNameRequest,
    SetupNameResponse,
)
from portal.schemas.catalog_schemas import (
    ModuleResponse,
    LearningPathResponse,
    LearningPathListResponse,
    ModuleDetailResponse,
)
from portal.schemas.progress_schemas import (
    SubmitActivityRequest,
    SubmitActivityResponse,
    DayXpResponse,
    ProgressSummaryResponse,
    DashboardResponse,
    RecommendedStep,
    AnalysisResponse,
    RecommendationsResponse,
    StudentReportResponse,
    StudentListItem,
    StudentRosterItem,
    StudentRosterResponse,
)
from portal.schemas.parent_schemas import (
    AspirationRequest,
    AspirationResponse,
    RelinkStudentRequest,
    RelinkStudentResponse,
    UnlinkStudentRequest,
    UnlinkStudentResponse,
)
from portal.schemas.announcement_schemas import (
    CreateAnnouncementRequest,
    AnnouncementResponse,
)

__all__ = [
    # auth
    "TokenClaims",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "RegisterRequest",
    "RegisterResponse",
    # user
    "User",
    "Preferences",
    "PreferencesResponse",
    "SetupNameRequest",
    "SetupNameResponse",
    # catalog
    "ModuleResponse",
    "LearningPathResponse",
    "LearningPathListResponse",
    "ModuleDetailResponse",
    # progress
    "SubmitActivityRequest",
    "SubmitActivityResponse",
    "DayXpResponse",
    "ProgressSummaryResponse",
    "DashboardResponse",
    "RecommendedStep",
    "AnalysisResponse",
    "RecommendationsResponse",
    "StudentReportResponse",
    "StudentListItem",
    "StudentRosterItem",
    "StudentRosterResponse",
    # parent
    "AspirationRequest",
    "AspirationResponse",
    "RelinkStudentRequest",
    "RelinkStudentResponse",
    "UnlinkStudentRequest",
    "UnlinkStudentResponse",
    # announcements
    "CreateAnnouncementRequest",
    "AnnouncementResponse",
]
