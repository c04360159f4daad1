"""
api/routes.py — FastAPI 엔드포인트
"""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

import api.session as session

# Core Logic Imports
from iot_readiness.errors import InvalidAnswerError
from iot_readiness.models.assessment_state import AssessmentState
from iot_readiness.models.question_model import Question
from iot_readiness.models.result_model import AssessmentResult
from iot_readiness.services import navigation_service as nav
from iot_readiness.services.catalog import default_catalog
from iot_readiness.services.guidance_service import (
    certifications, learning_stages, recommended_stage
)
from iot_readiness.services.scoring_service import score

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class AnswerBody(BaseModel):
    value: str

class ScoreBody(BaseModel):
    answers: dict[str, str] = {}


# ── 헬퍼 ─────────────────────────────────────────────────────────────────────

def _sid(request: Request) -> str:
    return request.state.session_id


def _question_to_dict(q: Question) -> dict:
    # 채점 가중치는 노출하지 않는다
    return {
        "id": q.id,
        "section": q.section.value,
        "category": q.category,
        "type": q.type,
        "prompt": q.prompt,
        "options": [{"value": o.value, "label": o.label} for o in q.options],
    }


def _result_to_dict(result: AssessmentResult) -> dict:
    return result.model_dump(mode="json")


def _require_state(sid: str) -> AssessmentState:
    state: AssessmentState | None = session.get(sid, "assessment_state")
    if state is None:
        raise HTTPException(status_code=404, detail="진단 세션이 없습니다.")
    return state


def _position_dict(state: AssessmentState) -> dict:
    catalog = default_catalog()
    d = {
        "section_index": state.current_section_index,
        "question_index": state.current_question_index,
        "progress": round(nav.progress_percent(state, catalog), 1),
        "is_complete": state.is_complete,
        "can_advance": nav.can_advance(state, catalog),
        "is_first": nav.is_first_question(state),
        "is_last": nav.is_last_question(state, catalog),
    }
    if not state.is_complete:
        section = catalog.section_at(state.current_section_index)
        d.update({
            "section": section.value,
            "section_title": section.display_name,
            "section_question_count": len(catalog.questions_for_section(section)),
        })
    return d


# ── 엔드포인트 ───────────────────────────────────────────────────────────────

@router.get("/api/catalog")
async def get_catalog():
    catalog = default_catalog()
    return {
        "sections": [
            {
                "id": s.value,
                "title": s.display_name,
                "questions": [_question_to_dict(q) for q in catalog.questions_for_section(s)],
            }
            for s in catalog.sections()
        ],
        "total": catalog.total_questions(),
    }


@router.post("/api/start-assessment")
async def start_assessment(request: Request):
    sid = _sid(request)
    catalog = default_catalog()
    session.put(sid, "assessment_state", nav.new_state(catalog))
    session.put(sid, "result", None)
    return {
        "total": catalog.total_questions(),
        "section_count": catalog.section_count(),
        "ok": True,
    }


@router.get("/api/current-question")
async def get_current_question(request: Request):
    state = _require_state(_sid(request))
    question = nav.current_question(state, default_catalog())
    if question is None:
        raise HTTPException(status_code=400, detail="이미 완료된 진단입니다.")

    d = _question_to_dict(question)
    d.update(_position_dict(state))
    d["saved_answer"] = state.answers.get(question.id, "")
    return d


@router.get("/api/assessment-state")
async def get_assessment_state(request: Request):
    state = _require_state(_sid(request))
    d = _position_dict(state)
    d.update({
        "answers": dict(state.answers),
        "answered_count": nav.answered_count(state),
        "start_time": state.start_time,
        "total": default_catalog().total_questions(),
    })
    return d


@router.post("/api/answer")
async def save_answer(request: Request, body: AnswerBody):
    state = _require_state(_sid(request))
    try:
        nav.record_answer(state, default_catalog(), body.value)
    except InvalidAnswerError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"ok": True, "answered_count": nav.answered_count(state)}


@router.post("/api/next")
async def next_question(request: Request):
    sid = _sid(request)
    state = _require_state(sid)
    before = state.position
    result = nav.advance(state, default_catalog())

    d = _position_dict(state)
    d["moved"] = result is not None or state.position != before
    if result is not None:
        # 완료된 진행 상태는 폐기하고 결과만 보관
        session.put(sid, "assessment_state", None)
        session.put(sid, "result", result)
        d["result"] = _result_to_dict(result)
    return d


@router.post("/api/previous")
async def previous_question(request: Request):
    state = _require_state(_sid(request))
    moved = nav.retreat(state, default_catalog())
    d = _position_dict(state)
    d["moved"] = moved
    return d


@router.get("/api/results")
async def get_results(request: Request):
    result: AssessmentResult | None = session.get(_sid(request), "result")
    if result is None:
        raise HTTPException(status_code=404, detail="결과 정보가 없습니다.")
    return _result_to_dict(result)


@router.post("/api/score")
async def score_answers(body: ScoreBody):
    return _result_to_dict(score(body.answers))


@router.get("/api/learning-path")
async def get_learning_path(request: Request):
    result: AssessmentResult | None = session.get(_sid(request), "result")
    return {
        "stages": [s.model_dump() for s in learning_stages()],
        "certifications": [c.model_dump() for c in certifications()],
        "recommended_stage": (
            recommended_stage(result.technical_score) if result else None
        ),
    }


@router.post("/api/reset")
async def reset_session(request: Request):
    session.reset(_sid(request))
    return {"ok": True}
