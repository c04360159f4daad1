import pytest

from iot_readiness.errors import InvalidAnswerError
from iot_readiness.models.assessment_state import AssessmentState
from iot_readiness.models.result_model import AssessmentResult
from iot_readiness.services import navigation_service as nav
from iot_readiness.services.catalog import default_catalog

CATALOG = default_catalog()
TOTAL = CATALOG.total_questions()
LAST_POSITION = (3, len(CATALOG.questions_for_section(CATALOG.section_at(3))) - 1)


def _answer_first_option(state):
    question = nav.current_question(state, CATALOG)
    nav.record_answer(state, CATALOG, question.options[0].value)


def _walk_to_last_question():
    state = AssessmentState()
    for _ in range(TOTAL - 1):
        _answer_first_option(state)
        assert nav.advance(state, CATALOG) is None
    return state


def test_new_state_helper_builds_origin_state():
    state = nav.new_state(CATALOG)
    assert state.position == (0, 0)
    assert state.answers == {}
    assert not state.is_complete
    assert nav.current_question(state, CATALOG).id == "intro_1"


def test_new_state_starts_at_origin():
    state = AssessmentState()
    assert state.position == (0, 0)
    assert state.answers == {}
    assert not state.is_complete
    assert nav.current_question(state, CATALOG).id == "intro_1"
    assert nav.is_first_question(state)


def test_record_answer_stores_without_moving():
    state = AssessmentState()
    nav.record_answer(state, CATALOG, "expert")
    assert state.answers == {"intro_1": "expert"}
    assert state.position == (0, 0)


def test_record_answer_is_idempotent():
    state = AssessmentState()
    nav.record_answer(state, CATALOG, "novice")
    snapshot = dict(state.answers)
    nav.record_answer(state, CATALOG, "novice")
    assert state.answers == snapshot


def test_record_answer_overwrites():
    state = AssessmentState()
    nav.record_answer(state, CATALOG, "novice")
    nav.record_answer(state, CATALOG, "expert")
    assert state.answers == {"intro_1": "expert"}


def test_record_answer_rejects_unknown_value():
    state = AssessmentState()
    with pytest.raises(InvalidAnswerError) as exc:
        nav.record_answer(state, CATALOG, "mqtt")
    assert exc.value.question_id == "intro_1"
    assert state.answers == {}


def test_advance_blocked_when_unanswered():
    state = AssessmentState()
    assert not nav.can_advance(state, CATALOG)
    assert nav.advance(state, CATALOG) is None
    assert state.position == (0, 0)


def test_advance_blocked_on_first_question_of_new_section():
    state = AssessmentState()
    _answer_first_option(state)
    nav.advance(state, CATALOG)
    _answer_first_option(state)
    nav.advance(state, CATALOG)
    # (1, 0) 은 아직 응답 전
    assert state.position == (1, 0)
    assert nav.advance(state, CATALOG) is None
    assert state.position == (1, 0)


def test_advance_moves_within_then_across_sections():
    state = AssessmentState()
    _answer_first_option(state)
    nav.advance(state, CATALOG)
    assert state.position == (0, 1)
    _answer_first_option(state)
    nav.advance(state, CATALOG)
    assert state.position == (1, 0)


def test_full_traversal_completes_exactly_once():
    state = _walk_to_last_question()
    assert state.position == LAST_POSITION
    assert nav.is_last_question(state, CATALOG)

    _answer_first_option(state)
    result = nav.advance(state, CATALOG)
    assert isinstance(result, AssessmentResult)
    assert state.is_complete
    assert len(state.answers) == TOTAL

    assert nav.advance(state, CATALOG) is None
    assert nav.current_question(state, CATALOG) is None


def test_completion_hands_full_answer_map_to_scorer():
    calls = []

    def fake_scorer(answers, catalog):
        calls.append(dict(answers))
        return "scored"

    state = _walk_to_last_question()
    _answer_first_option(state)
    assert nav.advance(state, CATALOG, scorer=fake_scorer) == "scored"
    assert nav.advance(state, CATALOG, scorer=fake_scorer) is None
    assert calls == [state.answers]


def test_retreat_from_origin_is_noop():
    state = AssessmentState()
    assert nav.retreat(state, CATALOG) is False
    assert state.position == (0, 0)


def test_retreat_crosses_to_previous_section_last_question():
    state = AssessmentState(current_section_index=2, current_question_index=0)
    assert nav.retreat(state, CATALOG) is True
    assert state.position == (1, 2)


def test_retreat_from_last_question_walks_back_to_origin():
    state = _walk_to_last_question()
    visited = [state.position]
    while nav.retreat(state, CATALOG):
        visited.append(state.position)

    assert state.position == (0, 0)
    assert len(visited) == TOTAL
    assert len(set(visited)) == TOTAL
    assert nav.retreat(state, CATALOG) is False


def test_retreat_keeps_answers():
    state = _walk_to_last_question()
    answers = dict(state.answers)
    nav.retreat(state, CATALOG)
    assert state.answers == answers
    assert nav.can_advance(state, CATALOG)


def test_pointers_stay_in_bounds_for_mixed_sequence():
    state = AssessmentState()
    steps = ["next", "back", "back", "next", "next", "next", "back"] * 6
    for step in steps:
        if step == "next":
            _answer_first_option(state)
            nav.advance(state, CATALOG)
        else:
            nav.retreat(state, CATALOG)
        if state.is_complete:
            break
        section = CATALOG.section_at(state.current_section_index)
        assert 0 <= state.current_question_index < len(CATALOG.questions_for_section(section))


def test_record_answer_leaves_progress_unchanged():
    state = AssessmentState(current_section_index=2, current_question_index=1)
    before = nav.progress_percent(state, CATALOG)
    nav.record_answer(state, CATALOG, "easy_access")
    nav.record_answer(state, CATALOG, "performance")
    assert nav.progress_percent(state, CATALOG) == before


def test_progress_is_monotonic_over_advances():
    state = AssessmentState()
    values = [nav.progress_percent(state, CATALOG)]
    while not state.is_complete:
        _answer_first_option(state)
        nav.advance(state, CATALOG)
        values.append(nav.progress_percent(state, CATALOG))

    assert values[0] == 0.0
    assert values[-1] == 100.0
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_progress_formula():
    state = AssessmentState(current_section_index=1, current_question_index=1)
    # 25 + (1/3) * 25
    assert nav.progress_percent(state, CATALOG) == pytest.approx(33.333, abs=0.01)


def test_operations_after_completion_are_noops():
    state = _walk_to_last_question()
    _answer_first_option(state)
    nav.advance(state, CATALOG)
    answers = dict(state.answers)

    nav.record_answer(state, CATALOG, "anything")
    assert nav.retreat(state, CATALOG) is False
    assert state.answers == answers
    assert not nav.can_advance(state, CATALOG)
    assert not nav.is_last_question(state, CATALOG)
