"""
models/result_model.py

채점 결과 모델. 완료된 세션마다 한 번 생성되며 이후 불변.
"""

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field


class Recommendation(str, Enum):
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"


def _score_field(description: str):
    return Field(..., ge=0, le=100, description=description)


class WiscarScores(BaseModel):
    """WISCAR 6요소 점수 (각 0~100)."""

    model_config = {"frozen": True}

    will: int = _score_field("의지 (Will)")
    interest: int = _score_field("흥미 (Interest)")
    skill: int = _score_field("현재 기술 (Skill)")
    cognitive: int = _score_field("인지 준비도 (Cognitive readiness)")
    ability: int = _score_field("학습 능력 (Ability to learn)")
    real_world: int = _score_field("실무 적합도 (Real-world alignment)")


class AssessmentResult(BaseModel):
    """
    진단 결과 전체.

    지침 목록(strengths ~ alternative_roles)은 항상 비어 있지 않은 순서 있는 튜플.
    recommended_stage는 data/learning_path.py 의 단계 id.
    """

    model_config = {"frozen": True}

    overall_score: int = _score_field("종합 점수")
    recommendation: Recommendation
    psychometric_score: int = _score_field("심리 적합도 점수")
    technical_score: int = _score_field("기술 준비도 점수")
    wiscar_scores: WiscarScores
    strengths: Tuple[str, ...] = Field(..., min_length=1)
    improvements: Tuple[str, ...] = Field(..., min_length=1)
    next_steps: Tuple[str, ...] = Field(..., min_length=1)
    top_roles: Tuple[str, ...] = Field(..., min_length=1)
    alternative_roles: Tuple[str, ...] = Field(..., min_length=1)
    recommendation_message: str
    recommended_stage: str
