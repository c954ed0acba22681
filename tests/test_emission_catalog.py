"""
Tests for the emission catalogs.
"""

import dataclasses

import pytest

from emission_catalog import (
    ADVANCED_CATALOG,
    CATALOGS,
    STANDARD_CATALOG,
    CatalogShape,
    EmissionCatalog,
    EmissionOption,
    OptionNotFound,
    Question,
    UnknownCatalog,
    get_catalog,
)
from models import CATEGORY_ORDER, Category, Period


class TestLookup:
    """lookup / impact on the standard catalog."""

    def test_lookup_known_option(self):
        opt = STANDARD_CATALOG.lookup(Category.FOOD, "heavy-meat-diet")
        assert opt.annual == 2600
        assert opt.to_horizon == 195000

    def test_lookup_unknown_option_raises(self):
        with pytest.raises(OptionNotFound) as exc:
            STANDARD_CATALOG.lookup(Category.FOOD, "pizza")
        assert exc.value.category is Category.FOOD
        assert exc.value.option_id == "pizza"

    def test_lookup_option_from_other_category_raises(self):
        with pytest.raises(OptionNotFound):
            STANDARD_CATALOG.lookup(Category.COMMUTE, "supermarket")

    def test_option_not_found_is_lookup_error(self):
        assert issubclass(OptionNotFound, LookupError)

    def test_impact_periods_use_precomputed_figures(self):
        assert STANDARD_CATALOG.impact(Category.HOME_ENERGY, "grid-electricity") == 96
        assert STANDARD_CATALOG.impact(Category.HOME_ENERGY, "grid-electricity", Period.WEEKLY) == 1.8
        assert STANDARD_CATALOG.impact(Category.HOME_ENERGY, "grid-electricity", Period.MONTHLY) == 8.0
        assert STANDARD_CATALOG.impact(Category.HOME_ENERGY, "grid-electricity", Period.HORIZON) == 7200

    def test_impact_accepts_period_string(self):
        assert STANDARD_CATALOG.impact(Category.TRAVEL, "far-from-home", "horizon") == 75000

    def test_impact_derives_missing_figures(self):
        assert ADVANCED_CATALOG.impact(Category.TRAVEL, "international-1", Period.HORIZON) == pytest.approx(75.0)
        assert ADVANCED_CATALOG.impact(Category.FOOD, "diet-heavy-meat", Period.MONTHLY) == pytest.approx(0.1)
        assert ADVANCED_CATALOG.impact(Category.TRAVEL, "international-2", Period.WEEKLY) == pytest.approx(2.0 / 52)


class TestStructure:
    """Catalog shape invariants."""

    def test_standard_has_one_question_per_category(self):
        assert STANDARD_CATALOG.shape is CatalogShape.ABSOLUTE
        for cat in CATEGORY_ORDER:
            questions = STANDARD_CATALOG.questions_for(cat)
            assert len(questions) == 1
            assert questions[0].key == cat.value

    def test_every_category_has_questions(self):
        for catalog in CATALOGS.values():
            for cat in CATEGORY_ORDER:
                assert catalog.questions_for(cat)

    def test_advanced_deltas_can_be_negative(self):
        assert ADVANCED_CATALOG.shape is CatalogShape.DELTA
        assert ADVANCED_CATALOG.impact(Category.HOME_ENERGY, "grid-renewable") == -0.3

    def test_car_question_depends_on_mode(self):
        assert [q.key for q in ADVANCED_CATALOG.applicable_questions(Category.COMMUTE, {})] == ["mode"]
        keys = [q.key for q in ADVANCED_CATALOG.applicable_questions(Category.COMMUTE, {"mode": "mode-carpool"})]
        assert keys == ["mode", "car"]
        keys = [q.key for q in ADVANCED_CATALOG.applicable_questions(Category.COMMUTE, {"mode": "mode-bus"})]
        assert keys == ["mode"]

    def test_option_ids_in_display_order(self):
        assert STANDARD_CATALOG.option_ids("commute") == ["walk", "minibus-taxi", "bus", "private-car"]

    def test_unknown_question_raises(self):
        with pytest.raises(LookupError):
            STANDARD_CATALOG.question("nope")

    def test_catalog_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            STANDARD_CATALOG.horizon_years = 10

    def test_indexes_are_read_only(self):
        with pytest.raises(TypeError):
            STANDARD_CATALOG._by_key["commute"] = None
        with pytest.raises(TypeError):
            CATALOGS["mine"] = STANDARD_CATALOG

    def test_absolute_catalog_rejects_missing_category(self):
        with pytest.raises(ValueError):
            EmissionCatalog(
                name="broken",
                shape=CatalogShape.ABSOLUTE,
                horizon_years=75,
                questions=(Question("commute", Category.COMMUTE, (EmissionOption("walk", 0),)),),
            )

    def test_duplicate_question_key_rejected(self):
        q = Question("diet", Category.FOOD, (EmissionOption("x", 1.0),))
        with pytest.raises(ValueError):
            EmissionCatalog(name="dup", shape=CatalogShape.DELTA, horizon_years=75, questions=(q, q))


class TestRegistry:
    def test_get_catalog(self):
        assert get_catalog("standard") is STANDARD_CATALOG
        assert get_catalog("advanced") is ADVANCED_CATALOG

    def test_get_unknown_catalog(self):
        with pytest.raises(UnknownCatalog):
            get_catalog("expert")
