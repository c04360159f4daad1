"""
services/scoring_service.py

답안지 → 진단 결과 채점 로직.
순수 Python 함수로 구성 — UI 코드, 전역 상태 변경 없음.
같은 답안지는 항상 같은 결과를 낸다.
"""

import logging
from typing import Dict, Mapping, Optional

from config import RECOMMEND_NO_THRESHOLD, RECOMMEND_YES_THRESHOLD
from iot_readiness.models.question_model import WISCAR_FACETS, Dimension
from iot_readiness.models.result_model import AssessmentResult, Recommendation, WiscarScores
from iot_readiness.services import guidance_service as guidance
from iot_readiness.services.catalog import QuestionCatalog, default_catalog

logger = logging.getLogger(__name__)

__all__ = [
    "RECOMMEND_YES_THRESHOLD",
    "RECOMMEND_NO_THRESHOLD",
    "calculate_dimension_scores",
    "calculate_overall_score",
    "recommend",
    "score",
]


def calculate_dimension_scores(
    answers: Mapping[str, str],
    catalog: QuestionCatalog,
) -> Dict[Dimension, int]:
    """
    차원별 점수를 계산한다.

    차원 점수 = 100 × (응답한 문항의 보기 가중치 합) / (해당 차원 문항 수)
    응답하지 않은 문항은 0으로 처리하므로 완료도와 선택의 질이 함께 반영된다.

    카탈로그에 없는 문항 id, 보기에 없는 값은 경고 후 무시.

    Returns:
        {Dimension: 0 ~ 100 정수}
    """
    for qid, value in answers.items():
        question = catalog.get_question(qid)
        if question is None:
            logger.warning(f"채점 제외: 카탈로그에 없는 문항 id '{qid}'")
        elif not question.has_option(value):
            logger.warning(f"채점 제외: 문항 '{qid}'에 없는 보기 '{value}'")

    scores: Dict[Dimension, int] = {}
    for dimension in Dimension:
        questions = catalog.questions_for_dimension(dimension)
        earned = sum(
            q.weight_of(answers[q.id])
            for q in questions
            if q.id in answers
        )
        scores[dimension] = round(earned / len(questions) * 100)
    return scores


def calculate_overall_score(psychometric_score: int, technical_score: int) -> int:
    """심리 적합도와 기술 준비도의 평균 (정수 반올림)."""
    return round((psychometric_score + technical_score) / 2)


def recommend(overall_score: int) -> Recommendation:
    """
    종합 점수 → 추천 등급.

    overall_score >= RECOMMEND_YES_THRESHOLD 이면 Yes,
    overall_score <  RECOMMEND_NO_THRESHOLD  이면 No, 그 사이는 Maybe.
    """
    if overall_score >= RECOMMEND_YES_THRESHOLD:
        return Recommendation.YES
    if overall_score < RECOMMEND_NO_THRESHOLD:
        return Recommendation.NO
    return Recommendation.MAYBE


def score(
    answers: Mapping[str, str],
    catalog: Optional[QuestionCatalog] = None,
) -> AssessmentResult:
    """
    답안지를 채점하여 AssessmentResult를 반환한다.

    Args:
        answers: 답안지. {question.id: 선택한 보기 값}. 비어 있어도 된다.
        catalog: 채점 기준 카탈로그. None이면 기본 카탈로그.

    Returns:
        불변 AssessmentResult. 빈 답안지는 모든 점수 0, 추천 No.
    """
    catalog = catalog or default_catalog()
    dims = calculate_dimension_scores(answers, catalog)

    psychometric = dims[Dimension.PSYCHOMETRIC]
    technical = dims[Dimension.TECHNICAL]
    overall = calculate_overall_score(psychometric, technical)
    recommendation = recommend(overall)

    wiscar = WiscarScores(**{facet.value: dims[facet] for facet in WISCAR_FACETS})

    logger.info(
        f"채점 완료: 응답 {len(answers)}개, 종합 {overall}점 → {recommendation.value}"
    )

    return AssessmentResult(
        overall_score=overall,
        recommendation=recommendation,
        psychometric_score=psychometric,
        technical_score=technical,
        wiscar_scores=wiscar,
        strengths=guidance.strengths(dims),
        improvements=guidance.improvements(dims),
        next_steps=guidance.next_steps(),
        top_roles=guidance.top_roles(),
        alternative_roles=guidance.alternative_roles(),
        recommendation_message=guidance.recommendation_message(recommendation),
        recommended_stage=guidance.recommended_stage(technical),
    )
