"""
services/catalog.py

문항 카탈로그 — 섹션 순서대로 정렬된 불변 문항 집합.
생성 시점에 형태를 검증하므로, 잘못된 카탈로그는 세션 시작 전에 실패한다.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from iot_readiness.data.questions import QUESTIONS
from iot_readiness.errors import (
    CatalogError,
    DuplicateQuestionError,
    EmptyCatalogError,
    EmptySectionError,
)
from iot_readiness.models.question_model import SECTION_ORDER, Dimension, Question, Section

logger = logging.getLogger(__name__)


class QuestionCatalog:
    """
    섹션별 문항 조회 전용 카탈로그. 변경 연산 없음.

    Args:
        questions: 문항 정의 (선언 순서가 섹션 내 순서가 된다).
        sections:  섹션 진행 순서. 기본값은 SECTION_ORDER.

    Raises:
        EmptyCatalogError:      문항이 하나도 없는 경우.
        DuplicateQuestionError: 같은 id의 문항이 있는 경우.
        EmptySectionError:      문항이 없는 섹션이 있는 경우.
        CatalogError:           선언되지 않은 섹션의 문항, 또는 아무 문항도
                                기여하지 않는 채점 차원이 있는 경우.
    """

    def __init__(
        self,
        questions: Iterable[Question],
        sections: Sequence[Section] = SECTION_ORDER,
    ):
        questions = list(questions)
        if not questions:
            raise EmptyCatalogError("문항 카탈로그가 비어 있습니다.")
        if not sections:
            raise EmptyCatalogError("섹션 목록이 비어 있습니다.")

        self._sections: Tuple[Section, ...] = tuple(sections)
        self._by_id: Dict[str, Question] = {}
        buckets: Dict[Section, list] = {s: [] for s in self._sections}

        for q in questions:
            if q.id in self._by_id:
                raise DuplicateQuestionError(q.id)
            if q.section not in buckets:
                raise CatalogError(f"문항 '{q.id}'의 섹션 '{q.section.value}'이 섹션 목록에 없습니다.")
            self._by_id[q.id] = q
            buckets[q.section].append(q)

        for section, items in buckets.items():
            if not items:
                raise EmptySectionError(section.value)

        self._by_section: Dict[Section, Tuple[Question, ...]] = {
            s: tuple(items) for s, items in buckets.items()
        }

        missing = [d.value for d in Dimension if not self.questions_for_dimension(d)]
        if missing:
            raise CatalogError(f"문항이 없는 채점 차원이 있습니다: {missing}")

        logger.debug(
            f"카탈로그 로드: {len(self._by_id)}문항 / {len(self._sections)}섹션"
        )

    # ── 섹션 조회 ─────────────────────────────────────────────────────────────

    def section_count(self) -> int:
        return len(self._sections)

    def section_at(self, index: int) -> Section:
        """index 범위 밖이면 IndexError (섹션 수는 고정이므로 프로그래밍 오류)."""
        if not 0 <= index < len(self._sections):
            raise IndexError(f"섹션 인덱스 범위 초과: {index} (섹션 수 {len(self._sections)})")
        return self._sections[index]

    def sections(self) -> Tuple[Section, ...]:
        return self._sections

    # ── 문항 조회 ─────────────────────────────────────────────────────────────

    def questions_for_section(self, section: Section) -> Tuple[Question, ...]:
        return self._by_section[section]

    def question_at(self, section_index: int, question_index: int) -> Question:
        questions = self.questions_for_section(self.section_at(section_index))
        return questions[question_index]

    def get_question(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def questions_for_dimension(self, dimension: Dimension) -> Tuple[Question, ...]:
        return tuple(q for q in self if dimension in q.dimensions)

    def total_questions(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Question]:
        """섹션 순서 → 섹션 내 선언 순서로 순회."""
        for section in self._sections:
            yield from self._by_section[section]

    def __len__(self) -> int:
        return len(self._by_id)


@lru_cache(maxsize=1)
def default_catalog() -> QuestionCatalog:
    """data/questions.py 의 고정 문항으로 카탈로그를 만든다 (최초 1회)."""
    return QuestionCatalog(QUESTIONS)
