# emission_catalog.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models import CATEGORY_ORDER, Category, Period

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12


class OptionNotFound(LookupError):
    """Raised when an option id is not registered under a category."""

    def __init__(self, category: Category, option_id: str):
        super().__init__(f"{option_id!r} is not an option of {category.value!r}")
        self.category = category
        self.option_id = option_id


class UnknownCatalog(LookupError):
    """Raised when a catalog name is not registered."""


class CatalogShape(str, Enum):
    ABSOLUTE = "absolute"  # one question per category, absolute annual figures
    DELTA = "delta"  # independent sub-questions, signed annual adjustments


@dataclass(frozen=True)
class EmissionOption:
    option_id: str
    annual: float
    weekly: Optional[float] = None
    monthly: Optional[float] = None
    to_horizon: Optional[float] = None


@dataclass(frozen=True)
class Question:
    """A selectable group of options inside a category."""

    key: str
    category: Category
    options: Tuple[EmissionOption, ...]
    # (question key, option ids): this question only counts when the other
    # question is answered with one of these ids.
    depends_on: Optional[Tuple[str, Tuple[str, ...]]] = None

    def option(self, option_id: str) -> Optional[EmissionOption]:
        for opt in self.options:
            if opt.option_id == option_id:
                return opt
        return None

    def applies(self, selections: Mapping[str, str]) -> bool:
        if self.depends_on is None:
            return True
        parent_key, trigger_ids = self.depends_on
        return selections.get(parent_key) in trigger_ids


@dataclass(frozen=True)
class EmissionCatalog:
    """Read-only table of impact values. Build once, at import time."""

    name: str
    shape: CatalogShape
    questions: Tuple[Question, ...]
    horizon_years: int
    _by_key: Mapping[str, Question] = field(init=False, repr=False, compare=False)
    _by_category: Mapping[Category, Tuple[Question, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_key: Dict[str, Question] = {}
        by_cat: Dict[Category, List[Question]] = {c: [] for c in CATEGORY_ORDER}
        for q in self.questions:
            if q.key in by_key:
                raise ValueError(f"Duplicate question key {q.key!r} in catalog {self.name!r}")
            by_key[q.key] = q
            by_cat[q.category].append(q)
        if self.shape is CatalogShape.ABSOLUTE:
            for cat, qs in by_cat.items():
                if len(qs) != 1 or qs[0].key != cat.value:
                    raise ValueError(
                        f"Absolute catalog {self.name!r} needs exactly one question keyed {cat.value!r}"
                    )
        object.__setattr__(self, "_by_key", MappingProxyType(by_key))
        object.__setattr__(
            self, "_by_category", MappingProxyType({c: tuple(qs) for c, qs in by_cat.items()})
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def questions_for(self, category: Category) -> Tuple[Question, ...]:
        return self._by_category[category]

    def question(self, key: str) -> Question:
        try:
            return self._by_key[key]
        except KeyError:
            raise LookupError(f"No question {key!r} in catalog {self.name!r}") from None

    def primary_question(self, category: Category) -> Question:
        return self._by_category[category][0]

    def applicable_questions(
        self, category: Category, selections: Mapping[str, str]
    ) -> Tuple[Question, ...]:
        return tuple(q for q in self._by_category[category] if q.applies(selections))

    def option_ids(self, question_key: str) -> List[str]:
        return [o.option_id for o in self.question(question_key).options]

    def lookup(self, category: Category, option_id: str) -> EmissionOption:
        """Return the option registered under *category*; raise OptionNotFound otherwise."""
        for q in self._by_category[category]:
            opt = q.option(option_id)
            if opt is not None:
                return opt
        raise OptionNotFound(category, option_id)

    def impact(self, category: Category, option_id: str, period: Period = Period.ANNUAL) -> float:
        """Numeric impact of an option for a period.

        Precomputed figures win; missing ones are derived from the annual value
        (annual / 52, annual / 12, annual x horizon years).
        """
        opt = self.lookup(category, option_id)
        period = Period(period)
        if period is Period.ANNUAL:
            return opt.annual
        if period is Period.WEEKLY:
            return opt.weekly if opt.weekly is not None else opt.annual / WEEKS_PER_YEAR
        if period is Period.MONTHLY:
            return opt.monthly if opt.monthly is not None else opt.annual / MONTHS_PER_YEAR
        return opt.to_horizon if opt.to_horizon is not None else opt.annual * self.horizon_years


# ---------------- Catalog tables ----------------

HORIZON_YEARS = 75  # 2025 -> 2100


def _absolute(category: Category, rows: Iterable[Tuple[str, float, float, float, float]]) -> Question:
    """rows: (option id, weekly, monthly, annual, to 2100)."""
    return Question(
        key=category.value,
        category=category,
        options=tuple(
            EmissionOption(oid, annual=ano, weekly=wk, monthly=mo, to_horizon=hz)
            for oid, wk, mo, ano, hz in rows
        ),
    )


def _delta(
    key: str,
    category: Category,
    rows: Iterable[Tuple[str, float]],
    depends_on: Optional[Tuple[str, Tuple[str, ...]]] = None,
) -> Question:
    return Question(
        key=key,
        category=category,
        options=tuple(EmissionOption(oid, annual=val) for oid, val in rows),
        depends_on=depends_on,
    )


STANDARD_CATALOG = EmissionCatalog(
    name="standard",
    shape=CatalogShape.ABSOLUTE,
    horizon_years=HORIZON_YEARS,
    questions=(
        _absolute(Category.COMMUTE, [
            ("walk", 0.0, 0.0, 0, 0),
            ("minibus-taxi", 2.5, 10.8, 130, 9750),
            ("bus", 1.3, 5.4, 65, 4875),
            ("private-car", 7.5, 32.5, 390, 29250),
        ]),
        _absolute(Category.HOME_ENERGY, [
            ("grid-electricity", 1.8, 8.0, 96, 7200),
            ("solar-panels", 0.0, 0.0, 0, 0),
            ("diesel-generator", 16.2, 70, 840, 63000),
            ("firewood-charcoal", 13.5, 58, 700, 52500),
        ]),
        _absolute(Category.FOOD, [
            ("heavy-meat-diet", 50.0, 216.7, 2600, 195000),
            ("some-meat-diet", 38.5, 166.7, 2000, 150000),
            ("vegetarian-diet", 26.7, 115.8, 1390, 104250),
            ("vegan-diet", 19.2, 83.3, 1000, 75000),
        ]),
        _absolute(Category.SHOPPING, [
            ("local-market", 1.0, 4.2, 50, 3750),
            ("supermarket", 1.9, 8.3, 100, 7500),
            ("online-shopping", 2.9, 12.5, 150, 11250),
            ("frequent-imports", 5.8, 25, 300, 22500),
        ]),
        _absolute(Category.TRAVEL, [
            ("stay-home", 0.0, 0.0, 0, 0),
            ("near-home", 1.9, 8.3, 100, 7500),
            ("far-from-home", 19.2, 83.3, 1000, 75000),
            ("very-far-from-home", 57.7, 250.0, 3000, 225000),
        ]),
    ),
)

CAR_MODES = ("mode-car-solo", "mode-carpool")

# Signed tCO2e/year adjustments per sub-question.
ADVANCED_CATALOG = EmissionCatalog(
    name="advanced",
    shape=CatalogShape.DELTA,
    horizon_years=HORIZON_YEARS,
    questions=(
        _delta("mode", Category.COMMUTE, [
            ("mode-car-solo", 1.2),
            ("mode-carpool", 0.6),
            ("mode-bus", 0.4),
            ("mode-train", 0.3),
            ("mode-bike-walk", 0.0),
        ]),
        _delta("car", Category.COMMUTE, [
            ("car-petrol", 1.0),
            ("car-hybrid", 0.6),
            ("car-electric", 0.3),
        ], depends_on=("mode", CAR_MODES)),
        _delta("dwelling", Category.HOME_ENERGY, [
            ("home-small", 0.8),
            ("home-medium", 1.2),
            ("home-large", 1.8),
        ]),
        _delta("grid", Category.HOME_ENERGY, [
            ("grid-fossil", 0.3),
            ("grid-mixed", 0.0),
            ("grid-renewable", -0.3),
        ]),
        _delta("efficiency", Category.HOME_ENERGY, [
            ("eff-none", 0.0),
            ("eff-some", -0.12),
            ("eff-deep", -0.3),
        ]),
        _delta("diet", Category.FOOD, [
            ("diet-heavy-meat", 1.2),
            ("diet-mixed", 0.8),
            ("diet-vegetarian", 0.5),
            ("diet-vegan", 0.4),
        ]),
        _delta("waste", Category.FOOD, [
            ("waste-high", 0.2),
            ("waste-medium", 0.1),
            ("waste-low", 0.05),
        ]),
        _delta("local", Category.FOOD, [
            ("local-often", -0.05),
            ("local-rarely", 0.0),
        ]),
        _delta("goods", Category.SHOPPING, [
            ("goods-low", 0.1),
            ("goods-average", 0.2),
            ("goods-high", 0.5),
        ]),
        _delta("electronics", Category.SHOPPING, [
            ("electronics-none", 0.0),
            ("electronics-some", 0.26),
            ("electronics-many", 0.5),
        ]),
        _delta("domestic", Category.TRAVEL, [
            ("domestic-0", 0.0),
            ("domestic-1", 0.2),
            ("domestic-2", 0.4),
            ("domestic-4", 0.8),
        ]),
        _delta("international", Category.TRAVEL, [
            ("international-0", 0.0),
            ("international-1", 1.0),
            ("international-2", 2.0),
        ]),
    ),
)

CATALOGS: Mapping[str, EmissionCatalog] = MappingProxyType({
    STANDARD_CATALOG.name: STANDARD_CATALOG,
    ADVANCED_CATALOG.name: ADVANCED_CATALOG,
})


def get_catalog(name: str) -> EmissionCatalog:
    try:
        return CATALOGS[name]
    except KeyError:
        raise UnknownCatalog(f"Unknown catalog {name!r}; expected one of {sorted(CATALOGS)}") from None
