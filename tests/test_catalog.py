import pytest
from pydantic import ValidationError

from iot_readiness.errors import (
    CatalogError,
    DuplicateQuestionError,
    EmptyCatalogError,
    EmptySectionError,
)
from iot_readiness.models.question_model import SECTION_ORDER, Dimension, Option, Question, Section
from iot_readiness.services.catalog import QuestionCatalog, default_catalog


def _question(qid, section, dimensions=tuple(Dimension)):
    return Question(
        id=qid,
        section=section,
        category="test",
        type="test",
        prompt=f"Question {qid}?",
        options=(
            Option(value="a", label="A", weight=1.0),
            Option(value="b", label="B", weight=0.0),
        ),
        dimensions=dimensions,
    )


def _one_per_section():
    return [_question(f"q_{s.value}", s) for s in SECTION_ORDER]


def test_default_catalog_sections_in_fixed_order():
    catalog = default_catalog()
    assert catalog.section_count() == 4
    assert [catalog.section_at(i) for i in range(4)] == [
        Section.INTRODUCTION,
        Section.PSYCHOMETRIC,
        Section.TECHNICAL,
        Section.WISCAR,
    ]


def test_default_catalog_preserves_declaration_order():
    catalog = default_catalog()
    ids = [q.id for q in catalog.questions_for_section(Section.PSYCHOMETRIC)]
    assert ids == ["psych_1", "psych_2", "psych_3"]
    assert [q.id for q in catalog.questions_for_section(Section.INTRODUCTION)] == ["intro_1", "intro_2"]


def test_default_catalog_measures_every_wiscar_facet():
    catalog = default_catalog()
    for facet in (Dimension.WILL, Dimension.INTEREST, Dimension.SKILL,
                  Dimension.COGNITIVE, Dimension.ABILITY, Dimension.REAL_WORLD):
        assert catalog.questions_for_dimension(facet)


def test_default_catalog_ids_are_unique_and_iteration_follows_sections():
    catalog = default_catalog()
    ids = [q.id for q in catalog]
    assert len(ids) == len(set(ids)) == catalog.total_questions() == len(catalog)
    assert ids[0] == "intro_1"
    assert ids[-1] == "wiscar_real_world"


def test_every_scored_question_has_a_full_weight_option():
    for q in default_catalog():
        assert max(o.weight for o in q.options) == 1.0, q.id


def test_section_at_out_of_range_fails_fast():
    catalog = default_catalog()
    with pytest.raises(IndexError):
        catalog.section_at(4)
    with pytest.raises(IndexError):
        catalog.section_at(-1)


def test_get_question_unknown_id_returns_none():
    assert default_catalog().get_question("nope") is None
    assert default_catalog().get_question("tech_1").section is Section.TECHNICAL


def test_empty_catalog_rejected():
    with pytest.raises(EmptyCatalogError):
        QuestionCatalog([])


def test_empty_section_rejected():
    questions = [q for q in _one_per_section() if q.section is not Section.TECHNICAL]
    with pytest.raises(EmptySectionError) as exc:
        QuestionCatalog(questions)
    assert exc.value.section == "technical"


def test_duplicate_question_id_rejected():
    questions = _one_per_section() + [_question("q_wiscar", Section.WISCAR)]
    with pytest.raises(DuplicateQuestionError):
        QuestionCatalog(questions)


def test_question_in_undeclared_section_rejected():
    with pytest.raises(CatalogError):
        QuestionCatalog(_one_per_section(), sections=SECTION_ORDER[:3])


def test_dimension_without_questions_rejected():
    questions = [
        _question(f"q_{s.value}", s, dimensions=(Dimension.PSYCHOMETRIC,))
        for s in SECTION_ORDER
    ]
    with pytest.raises(CatalogError):
        QuestionCatalog(questions)


def test_question_requires_two_distinct_options():
    with pytest.raises(ValidationError):
        Question(
            id="x", section=Section.INTRODUCTION, category="c", type="t", prompt="p",
            options=(Option(value="a", label="A", weight=1.0),),
            dimensions=(Dimension.SKILL,),
        )
    with pytest.raises(ValidationError):
        Question(
            id="x", section=Section.INTRODUCTION, category="c", type="t", prompt="p",
            options=(
                Option(value="a", label="A", weight=1.0),
                Option(value="a", label="B", weight=0.5),
            ),
            dimensions=(Dimension.SKILL,),
        )


def test_option_weight_bounded():
    with pytest.raises(ValidationError):
        Option(value="a", label="A", weight=1.5)


def test_question_is_immutable():
    q = default_catalog().get_question("intro_1")
    with pytest.raises(ValidationError):
        q.prompt = "changed"
