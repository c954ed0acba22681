# models.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    COMMUTE = "commute"
    HOME_ENERGY = "home-energy"
    FOOD = "food"
    SHOPPING = "shopping"
    TRAVEL = "travel"


class Step(str, Enum):
    COMMUTE = "commute"
    HOME_ENERGY = "home-energy"
    FOOD = "food"
    SHOPPING = "shopping"
    TRAVEL = "travel"
    RESULTS = "results"

    @property
    def category(self) -> Category | None:
        """The category asked on this step, or None for the results page."""
        if self is Step.RESULTS:
            return None
        return Category(self.value)

    @property
    def is_terminal(self) -> bool:
        return self is Step.RESULTS


class Period(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"
    HORIZON = "horizon"


# Display / iteration order. Correctness never depends on it.
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.COMMUTE,
    Category.HOME_ENERGY,
    Category.FOOD,
    Category.SHOPPING,
    Category.TRAVEL,
)

STEP_ORDER: Tuple[Step, ...] = (
    Step.COMMUTE,
    Step.HOME_ENERGY,
    Step.FOOD,
    Step.SHOPPING,
    Step.TRAVEL,
    Step.RESULTS,
)

RESULTS_INDEX: int = STEP_ORDER.index(Step.RESULTS)

CATEGORY_LABELS: Dict[Category, str] = {
    Category.COMMUTE: "School commute",
    Category.HOME_ENERGY: "Home energy",
    Category.FOOD: "Food",
    Category.SHOPPING: "Shopping",
    Category.TRAVEL: "Holidays",
}

# Selection set: question key -> option id. Absent key means unanswered.
Selections = Dict[str, str]
