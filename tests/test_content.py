"""
Tests that the enumerations, content tables and catalogs line up.
"""

import pytest

from emission_catalog import CATALOGS
from guides import improvement_ideas, warming_context
from models import (
    CATEGORY_LABELS,
    CATEGORY_ORDER,
    RESULTS_INDEX,
    STEP_ORDER,
    Category,
    Step,
)
from step_content import OPTION_CONTENT, STEP_CONTENT, option_label


class TestEnumerations:
    def test_category_order_is_exhaustive(self):
        assert set(CATEGORY_ORDER) == set(Category)
        assert len(CATEGORY_ORDER) == len(Category)

    def test_step_order_is_exhaustive(self):
        assert set(STEP_ORDER) == set(Step)
        assert STEP_ORDER[-1] is Step.RESULTS
        assert RESULTS_INDEX == len(STEP_ORDER) - 1

    def test_every_question_step_maps_to_a_category(self):
        for step in STEP_ORDER[:-1]:
            assert step.category in CATEGORY_ORDER
            assert not step.is_terminal
        assert Step.RESULTS.category is None

    def test_labels_cover_every_category(self):
        assert set(CATEGORY_LABELS) == set(Category)


class TestStepContent:
    def test_every_step_has_content(self):
        assert set(STEP_CONTENT) == set(Step)

    def test_question_steps_have_explainers(self):
        for step in STEP_ORDER[:-1]:
            assert STEP_CONTENT[step].explainer

    @pytest.mark.parametrize("catalog", list(CATALOGS.values()), ids=lambda c: c.name)
    def test_every_option_has_a_label(self, catalog):
        for q in catalog.questions:
            for opt in q.options:
                assert opt.option_id in OPTION_CONTENT

    def test_sub_questions_have_prompts(self):
        catalog = CATALOGS["advanced"]
        for q in catalog.questions:
            step = Step(q.category.value)
            assert q.key in STEP_CONTENT[step].question_prompts

    def test_option_label_falls_back_to_id(self):
        assert option_label("walk") == "On foot"
        assert option_label("hovercraft") == "hovercraft"


class TestGuides:
    def test_blurbs_have_text(self):
        assert all(i["title"] and i["summary"] for i in improvement_ideas())
        assert all(i["name"] and i["why"] for i in warming_context())
