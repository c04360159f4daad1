"""
services/guidance_service.py

채점 결과에 붙는 정성 지침 (강점, 개선점, 다음 단계, 추천 직무)과
학습 경로 데이터 조회.
순수 Python 함수로 구성 — 모든 목록은 비어 있지 않은 튜플로 반환.
"""

from typing import Dict, List, Mapping, Tuple

from config import MAX_GUIDANCE_ITEMS, STRENGTH_THRESHOLD
from iot_readiness.data.learning_path import CERTIFICATIONS, LEARNING_STAGES
from iot_readiness.models.learning_path_model import Certification, LearningStage
from iot_readiness.models.question_model import Dimension
from iot_readiness.models.result_model import Recommendation

STRENGTH_TEXT: Dict[Dimension, str] = {
    Dimension.PSYCHOMETRIC: "Good stress tolerance and a systematic approach to complex challenges",
    Dimension.TECHNICAL: "Solid grasp of IoT protocols and security fundamentals",
    Dimension.WILL: "Persistence when facing long-running security problems",
    Dimension.INTEREST: "High curiosity and motivation for cybersecurity",
    Dimension.SKILL: "Existing hands-on technical and programming experience",
    Dimension.COGNITIVE: "Strong analytical thinking and problem-solving skills",
    Dimension.ABILITY: "Eagerness to learn new technologies quickly",
    Dimension.REAL_WORLD: "Clear picture of the security work environment you want",
}

IMPROVEMENT_TEXT: Dict[Dimension, str] = {
    Dimension.PSYCHOMETRIC: "Build structured habits for handling incidents under pressure",
    Dimension.TECHNICAL: "Strengthen networking fundamentals and IoT protocols",
    Dimension.WILL: "Practice sticking with hard problems through to resolution",
    Dimension.INTEREST: "Explore IoT security specialties to find the work that excites you",
    Dimension.SKILL: "Gain hands-on experience with security testing tools",
    Dimension.COGNITIVE: "Develop deeper understanding of encryption methods and traffic analysis",
    Dimension.ABILITY: "Set up a regular learning routine with labs and courses",
    Dimension.REAL_WORLD: "Talk to practitioners about day-to-day IoT security work",
}

FALLBACK_STRENGTHS: Tuple[str, ...] = (
    "Willingness to evaluate your readiness for a career in IoT security",
)
FALLBACK_IMPROVEMENTS: Tuple[str, ...] = (
    "Practice with real IoT devices and environments",
)

NEXT_STEPS: Tuple[str, ...] = (
    "Enroll in 'IoT Security Fundamentals' course",
    "Set up a home lab with Raspberry Pi for hands-on practice",
    "Learn tools like Wireshark, Metasploit, and Kali Linux",
    "Join IoT security communities and forums",
    "Consider CompTIA Security+ certification",
)

TOP_ROLES: Tuple[str, ...] = (
    "IoT Security Analyst",
    "Embedded Security Engineer",
    "Penetration Tester (IoT)",
    "Cybersecurity Architect",
)

ALTERNATIVE_ROLES: Tuple[str, ...] = (
    "Network Security Engineer",
    "Cloud Security Analyst",
    "Software Security Developer",
)

RECOMMENDATION_MESSAGES: Dict[Recommendation, str] = {
    Recommendation.YES: "You show strong potential for a successful career in IoT Security Engineering!",
    Recommendation.MAYBE: "You have good foundational qualities but may need additional preparation.",
    Recommendation.NO: "Consider exploring alternative cybersecurity roles that better match your profile.",
}

# 기술 점수 → 학습 시작 단계
_STAGE_CUTOFFS: Tuple[Tuple[int, str], ...] = (
    (50, "beginner"),
    (80, "intermediate"),
)
_TOP_STAGE = "advanced"


def strengths(dimension_scores: Mapping[Dimension, int]) -> Tuple[str, ...]:
    """
    STRENGTH_THRESHOLD 이상인 차원을 점수 내림차순으로 반환.
    동점은 Dimension 선언 순서를 유지한다. 해당 차원이 없으면 FALLBACK_STRENGTHS.
    """
    picked = [
        d for d in Dimension
        if dimension_scores.get(d, 0) >= STRENGTH_THRESHOLD
    ]
    picked.sort(key=lambda d: -dimension_scores[d])
    texts = tuple(STRENGTH_TEXT[d] for d in picked[:MAX_GUIDANCE_ITEMS])
    return texts or FALLBACK_STRENGTHS


def improvements(dimension_scores: Mapping[Dimension, int]) -> Tuple[str, ...]:
    """STRENGTH_THRESHOLD 미만인 차원을 점수 오름차순으로 반환."""
    picked = [
        d for d in Dimension
        if dimension_scores.get(d, 0) < STRENGTH_THRESHOLD
    ]
    picked.sort(key=lambda d: dimension_scores.get(d, 0))
    texts = tuple(IMPROVEMENT_TEXT[d] for d in picked[:MAX_GUIDANCE_ITEMS])
    return texts or FALLBACK_IMPROVEMENTS


def next_steps() -> Tuple[str, ...]:
    return NEXT_STEPS


def top_roles() -> Tuple[str, ...]:
    return TOP_ROLES


def alternative_roles() -> Tuple[str, ...]:
    return ALTERNATIVE_ROLES


def recommendation_message(recommendation: Recommendation) -> str:
    return RECOMMENDATION_MESSAGES[recommendation]


def recommended_stage(technical_score: int) -> str:
    """
    기술 준비도 점수로 학습 시작 단계를 고른다.

    Returns:
        "beginner" (< 50), "intermediate" (< 80), "advanced" (그 외)
    """
    for cutoff, stage_id in _STAGE_CUTOFFS:
        if technical_score < cutoff:
            return stage_id
    return _TOP_STAGE


def learning_stages() -> List[LearningStage]:
    return list(LEARNING_STAGES)


def certifications() -> List[Certification]:
    return list(CERTIFICATIONS)
