from typing import Tuple

from pydantic import BaseModel, Field


class LearningModule(BaseModel):
    model_config = {"frozen": True}

    name: str
    duration: str = Field(..., description="예상 학습 기간 (예: '2 weeks')")


class LearningStage(BaseModel):
    """학습 경로의 한 단계 (beginner → intermediate → advanced)."""

    model_config = {"frozen": True}

    id: str
    title: str
    description: str
    duration: str
    difficulty: str
    modules: Tuple[LearningModule, ...]


class Certification(BaseModel):
    model_config = {"frozen": True}

    name: str
    provider: str
    level: str
    duration: str
    rating: float = Field(..., ge=0.0, le=5.0)
