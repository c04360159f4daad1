from enum import Enum
from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class Section(str, Enum):
    """진단 섹션. 진행 순서는 SECTION_ORDER가 정한다."""

    INTRODUCTION = "introduction"
    PSYCHOMETRIC = "psychometric"
    TECHNICAL = "technical"
    WISCAR = "wiscar"

    @property
    def display_name(self) -> str:
        return "WISCAR" if self is Section.WISCAR else self.value.capitalize()


SECTION_ORDER: Tuple[Section, ...] = (
    Section.INTRODUCTION,
    Section.PSYCHOMETRIC,
    Section.TECHNICAL,
    Section.WISCAR,
)


class Dimension(str, Enum):
    """문항이 기여하는 채점 차원 (닫힌 집합)."""

    PSYCHOMETRIC = "psychometric"
    TECHNICAL = "technical"
    # WISCAR 6요소
    WILL = "will"
    INTEREST = "interest"
    SKILL = "skill"
    COGNITIVE = "cognitive"
    ABILITY = "ability"
    REAL_WORLD = "real_world"


WISCAR_FACETS: Tuple[Dimension, ...] = (
    Dimension.WILL,
    Dimension.INTEREST,
    Dimension.SKILL,
    Dimension.COGNITIVE,
    Dimension.ABILITY,
    Dimension.REAL_WORLD,
)


class Option(BaseModel):
    """
    보기 하나.
    weight는 채점 가중치 (0.0 ~ 1.0). 클라이언트에는 노출하지 않는다.
    """

    model_config = {"frozen": True}

    value: str = Field(..., min_length=1, description="보기 식별 값")
    label: str = Field(..., min_length=1, description="보기 표시 문구")
    weight: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="선택 시 해당 차원에 더해지는 가중치"
    )


class Question(BaseModel):
    """
    IoT 보안 진로 진단 문항 모델
    Pydantic v2 적용, 로드 후 불변

    category / type 은 화면 배지용 표시 라벨일 뿐 채점에 쓰이지 않는다.
    채점 차원 분류는 닫힌 열거형 dimensions 만 사용한다.
    """

    model_config = {"frozen": True}

    id: str = Field(
        ...,
        min_length=1,
        description="문항 식별자 (카탈로그 내 고유)"
    )
    section: Section = Field(
        ...,
        description="소속 섹션"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="문항 분류 (예: personality, networking, will)"
    )
    type: str = Field(
        ...,
        min_length=1,
        description="문항 유형 (예: conscientiousness, knowledge)"
    )
    prompt: str = Field(
        ...,
        min_length=1,
        description="발문"
    )
    options: Tuple[Option, ...] = Field(
        ...,
        description="보기 목록 (선언 순서 유지)"
    )
    dimensions: Tuple[Dimension, ...] = Field(
        ...,
        description="이 문항이 점수를 보태는 채점 차원들"
    )

    @field_validator('options')
    @classmethod
    def validate_options_length(cls, v: Tuple[Option, ...]) -> Tuple[Option, ...]:
        """
        검증 로직 1: 보기는 최소 2개 이상, 보기 값은 서로 달라야 한다.
        """
        if len(v) < 2:
            raise ValueError("보기(options)는 최소 2개 이상의 항목이 필요합니다.")
        values = [opt.value for opt in v]
        if len(set(values)) != len(values):
            raise ValueError(f"보기 값이 중복되었습니다: {values}")
        return v

    @model_validator(mode='after')
    def validate_dimensions(self) -> 'Question':
        """
        검증 로직 2: 모든 문항은 최소 하나의 채점 차원에 기여해야 한다.
        """
        if not self.dimensions:
            raise ValueError(f"문항 '{self.id}'에 채점 차원(dimensions)이 없습니다.")
        return self

    def option_values(self) -> Tuple[str, ...]:
        return tuple(opt.value for opt in self.options)

    def has_option(self, value: str) -> bool:
        return value in self.option_values()

    def weight_of(self, value: str) -> float:
        """선택한 보기의 가중치. 보기에 없는 값이면 0.0."""
        for opt in self.options:
            if opt.value == value:
                return opt.weight
        return 0.0
