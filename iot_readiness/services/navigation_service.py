"""
services/navigation_service.py

진단 진행 상태 전이 로직 (섹션/문항 포인터 이동, 답안 기록).
AssessmentState는 호출자가 생성·소유하고, 이 모듈의 함수는 그 상태만 변경한다.

상태: (섹션 인덱스, 문항 인덱스) 쌍 + 종료 상태(is_complete).
범위를 벗어나거나 답하지 않은 문항에서의 이동 요청은 예외 없이 무시(no-op)한다.
"""

import logging
from typing import Callable, Mapping, Optional

from iot_readiness.errors import InvalidAnswerError
from iot_readiness.models.assessment_state import AssessmentState
from iot_readiness.models.question_model import Question
from iot_readiness.models.result_model import AssessmentResult
from iot_readiness.services.catalog import QuestionCatalog
from iot_readiness.services.scoring_service import score

logger = logging.getLogger(__name__)

Scorer = Callable[[Mapping[str, str], QuestionCatalog], AssessmentResult]


def _section_length(catalog: QuestionCatalog, section_index: int) -> int:
    return len(catalog.questions_for_section(catalog.section_at(section_index)))


def new_state(catalog: QuestionCatalog) -> AssessmentState:
    """
    카탈로그의 첫 문항 (0, 0)을 가리키는 새 진단 상태.
    포인터의 상한은 카탈로그에 달려 있으므로 세션은 항상 이 함수로 시작한다.
    """
    logger.debug(f"새 진단 상태 생성: {catalog.total_questions()}문항")
    return AssessmentState()


def current_question(state: AssessmentState, catalog: QuestionCatalog) -> Optional[Question]:
    """현재 포인터의 문항. 진단이 끝났으면 None."""
    if state.is_complete:
        return None
    return catalog.question_at(state.current_section_index, state.current_question_index)


def record_answer(state: AssessmentState, catalog: QuestionCatalog, value: str) -> None:
    """
    현재 문항에 답을 기록(덮어쓰기)한다. 포인터는 바꾸지 않는다.

    Raises:
        InvalidAnswerError: value가 현재 문항의 보기에 없는 경우.
    """
    question = current_question(state, catalog)
    if question is None:
        logger.warning("record_answer 무시: 이미 완료된 진단입니다.")
        return
    if not question.has_option(value):
        raise InvalidAnswerError(question.id, value)
    state.answers[question.id] = value


def can_advance(state: AssessmentState, catalog: QuestionCatalog) -> bool:
    """현재 문항에 기록된 답이 있으면 True."""
    question = current_question(state, catalog)
    return question is not None and question.id in state.answers


def is_first_question(state: AssessmentState) -> bool:
    return state.current_section_index == 0 and state.current_question_index == 0


def is_last_question(state: AssessmentState, catalog: QuestionCatalog) -> bool:
    if state.is_complete:
        return False
    last_section = catalog.section_count() - 1
    return (
        state.current_section_index == last_section
        and state.current_question_index == _section_length(catalog, last_section) - 1
    )


def advance(
    state: AssessmentState,
    catalog: QuestionCatalog,
    scorer: Scorer = score,
) -> Optional[AssessmentResult]:
    """
    다음 문항으로 이동한다.

    - 섹션 안에 문항이 남아 있으면 문항 인덱스 +1
    - 섹션의 마지막 문항이면 다음 섹션의 첫 문항
    - 마지막 섹션의 마지막 문항이면 완료 상태로 전이하고 전체 답안지를 채점

    Returns:
        완료 전이가 일어난 호출에서만 AssessmentResult, 그 외에는 None.
        현재 문항에 답이 없거나 이미 완료된 경우 상태는 바뀌지 않는다.
    """
    if state.is_complete:
        logger.warning("advance 무시: 이미 완료된 진단입니다.")
        return None
    if not can_advance(state, catalog):
        logger.warning(
            f"advance 무시: 응답하지 않은 문항 (위치 {state.position})"
        )
        return None

    if state.current_question_index < _section_length(catalog, state.current_section_index) - 1:
        state.current_question_index += 1
        return None

    if state.current_section_index < catalog.section_count() - 1:
        state.current_section_index += 1
        state.current_question_index = 0
        return None

    state.is_complete = True
    logger.info(f"진단 완료: 응답 {len(state.answers)}개 채점 시작")
    return scorer(dict(state.answers), catalog)


def retreat(state: AssessmentState, catalog: QuestionCatalog) -> bool:
    """
    이전 문항으로 이동한다.

    - 문항 인덱스 > 0 이면 -1
    - 섹션의 첫 문항이면 이전 섹션의 마지막 문항
    - 첫 섹션의 첫 문항이면 이동하지 않음

    Returns:
        포인터가 실제로 이동했으면 True.
    """
    if state.is_complete:
        logger.warning("retreat 무시: 이미 완료된 진단입니다.")
        return False

    if state.current_question_index > 0:
        state.current_question_index -= 1
        return True

    if state.current_section_index > 0:
        prev_section = state.current_section_index - 1
        state.current_question_index = _section_length(catalog, prev_section) - 1
        state.current_section_index = prev_section
        return True

    return False


def progress_percent(state: AssessmentState, catalog: QuestionCatalog) -> float:
    """
    진행률 (0.0 ~ 100.0). 표시용 값.

    섹션마다 100 / 섹션 수 만큼을 차지하고, 섹션 안에서는 문항 인덱스 비율로 채운다.
    """
    if state.is_complete:
        return 100.0
    share = 100 / catalog.section_count()
    section_len = _section_length(catalog, state.current_section_index)
    return (
        state.current_section_index * share
        + (state.current_question_index / section_len) * share
    )


def answered_count(state: AssessmentState) -> int:
    return len(state.answers)
