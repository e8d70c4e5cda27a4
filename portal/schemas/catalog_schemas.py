"""
Learning path and module schemas.
"""

from pydantic import BaseModel


class ModuleResponse(BaseModel):
    module_id: str
    title: str
    description: str
    xp_value: int
    interest: str


class LearningPathResponse(BaseModel):
    title: str
    description: str
    interest: str
    modules: list[ModuleResponse]


class LearningPathListResponse(BaseModel):
    learning_paths: list[LearningPathResponse]


class ModuleDetailResponse(BaseModel):
    module: ModuleResponse
