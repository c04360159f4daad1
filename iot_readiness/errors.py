"""
errors.py

진단 코어의 예외 계층.

- 답안 기록 오류(InvalidAnswerError)는 호출자가 복구 가능한 오류.
- 카탈로그 형태 오류(CatalogError 계열)는 로드 시점의 치명적 오류.
  잘못된 카탈로그로는 세션을 시작할 수 없다.

범위를 벗어난 이동(이전/다음)은 예외가 아니라 무시(no-op) 정책으로 처리한다.
"""


class AssessmentError(Exception):
    """진단 코어 예외의 공통 부모."""


class InvalidAnswerError(AssessmentError, ValueError):
    """현재 문항의 보기에 없는 값을 기록하려 한 경우."""

    def __init__(self, question_id: str, value: str):
        self.question_id = question_id
        self.value = value
        super().__init__(f"문항 '{question_id}'에 '{value}' 보기가 없습니다.")


class CatalogError(AssessmentError):
    """문항 카탈로그 구성이 잘못된 경우."""


class EmptyCatalogError(CatalogError):
    """문항이 하나도 없는 카탈로그."""


class EmptySectionError(CatalogError):
    """문항이 없는 섹션이 포함된 카탈로그."""

    def __init__(self, section: str):
        self.section = section
        super().__init__(f"섹션 '{section}'에 문항이 없습니다.")


class DuplicateQuestionError(CatalogError):
    """같은 id를 가진 문항이 두 개 이상인 카탈로그."""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"문항 id '{question_id}'가 중복되었습니다.")
