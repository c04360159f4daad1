"""
models/assessment_state.py

진단 진행 상태를 담는 답안 카드 모델.
Pydantic BaseModel 기반 — 직렬화/역직렬화 및 타입 안전성 확보.
상태 전이 로직은 services/navigation_service.py 에 있다.
"""

import time
from typing import Dict

from pydantic import BaseModel, Field


class AssessmentState(BaseModel):
    """
    한 응답자의 진단 세션 전체 상태를 표현하는 모델.

    새 상태는 navigation_service.new_state(catalog)로 만든다. 포인터 상한은
    카탈로그에 따라 다르므로 모델 자체는 하한(ge=0)만 검증한다.

    Attributes:
        current_section_index:  현재 섹션 인덱스 (0-based).
        current_question_index: 현재 섹션 안의 문항 인덱스 (0-based).
        answers:                답안지. {question.id: 선택한 보기 값}
                                세션 동안 키가 삭제되지 않으며 덮어쓰기만 가능.
        is_complete:            마지막 문항을 넘겨 채점이 끝난 상태.
        start_time:             진단 시작 시각 (time.time() 기준 Unix timestamp).
    """

    current_section_index: int = Field(
        default=0,
        ge=0,
        description="현재 섹션 인덱스 (0-based)"
    )
    current_question_index: int = Field(
        default=0,
        ge=0,
        description="현재 섹션 내 문항 인덱스 (0-based)"
    )
    answers: Dict[str, str] = Field(
        default_factory=dict,
        description="답안지. key: question.id, value: 선택한 보기 값"
    )
    is_complete: bool = Field(
        default=False,
        description="진단 완료 여부"
    )
    start_time: float = Field(
        default_factory=time.time,
        description="진단 시작 시각 (Unix timestamp, time.time() 기준)"
    )

    model_config = {"validate_assignment": True}

    @property
    def position(self) -> tuple:
        return (self.current_section_index, self.current_question_index)
