# wizard.py
"""Step progression for the quiz.

The state is a frozen value and every transition is a plain function that
returns the next state (the very same object when the transition does not
apply, e.g. "next" without an answer or a double click on "OK"). The
explanatory interstitial is a two-phase move: ``next_step`` proposes the
target index and ``dismiss_interstitial`` commits it.

``QuizSession`` wraps a state and a catalog for the Streamlit app.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional, Tuple

from emission_catalog import STANDARD_CATALOG, EmissionCatalog
from footprint import category_breakdown, cumulative_total, grand_total
from models import RESULTS_INDEX, STEP_ORDER, Category, Period, Step
from warming import calibration_for, projected_warming, warming_series

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WizardState:
    active_step_index: int = 0
    selections: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    explained_steps: FrozenSet[Category] = frozenset()
    interstitial_target: Optional[int] = None

    @property
    def interstitial_open(self) -> bool:
        return self.interstitial_target is not None


# ---------------- Queries ----------------


def initial_state() -> WizardState:
    return WizardState()


def active_step(state: WizardState) -> Step:
    return STEP_ORDER[state.active_step_index]


def is_step_complete(state: WizardState, catalog: EmissionCatalog, step: Step) -> bool:
    """True when every question that applies on *step* has an answer."""
    if step.is_terminal:
        return False
    questions = catalog.applicable_questions(step.category, state.selections)
    return bool(questions) and all(state.selections.get(q.key) for q in questions)


def completed_steps(state: WizardState, catalog: EmissionCatalog) -> List[Step]:
    return [s for s in STEP_ORDER if is_step_complete(state, catalog, s)]


def interstitial_step(state: WizardState) -> Optional[Step]:
    """The step whose explainer is on screen, if any."""
    if not state.interstitial_open:
        return None
    return active_step(state)


def _target_after(index: int) -> int:
    if STEP_ORDER[index] is Step.TRAVEL:
        return RESULTS_INDEX
    return min(len(STEP_ORDER) - 1, index + 1)


# ---------------- Transitions ----------------


def select(
    state: WizardState,
    catalog: EmissionCatalog,
    category: Category,
    option_id: str,
    question: Optional[str] = None,
) -> WizardState:
    step = active_step(state)
    if step.is_terminal or step.category is not category:
        log.debug("select(%s, %s) ignored on step %s", category.value, option_id, step.value)
        return state
    key = question or catalog.primary_question(category).key
    try:
        q = catalog.question(key)
    except LookupError:
        log.debug("select: unknown question %r", key)
        return state
    if q.category is not category or q.option(option_id) is None:
        log.debug("select: %r is not an option of %r", option_id, key)
        return state
    if state.selections.get(key) == option_id:
        return state
    selections = dict(state.selections)
    selections[key] = option_id
    # Drop answers to questions that no longer apply (e.g. car type after
    # switching the commute mode to the bus).
    for other in catalog.questions_for(category):
        if other.key in selections and not other.applies(selections):
            del selections[other.key]
    return replace(state, selections=MappingProxyType(selections))


def next_step(state: WizardState, catalog: EmissionCatalog) -> WizardState:
    step = active_step(state)
    if step.is_terminal or state.interstitial_open:
        return state
    if not is_step_complete(state, catalog, step):
        log.debug("next ignored: %s has no answer yet", step.value)
        return state
    target = _target_after(state.active_step_index)
    if step.category not in state.explained_steps:
        log.debug("opening interstitial for %s (target %d)", step.value, target)
        return replace(
            state,
            interstitial_target=target,
            explained_steps=state.explained_steps | {step.category},
        )
    return replace(state, active_step_index=target)


def dismiss_interstitial(state: WizardState) -> WizardState:
    if state.interstitial_target is None:
        return state
    return replace(state, active_step_index=state.interstitial_target, interstitial_target=None)


def back(state: WizardState) -> WizardState:
    index = max(0, state.active_step_index - 1)
    if index == state.active_step_index and not state.interstitial_open:
        return state
    return replace(state, active_step_index=index, interstitial_target=None)


def jump_to(state: WizardState, index: int) -> WizardState:
    if not 0 <= index < len(STEP_ORDER):
        log.debug("jump_to(%d) out of range", index)
        return state
    return replace(state, active_step_index=index, interstitial_target=None)


def reset() -> WizardState:
    return initial_state()


# ---------------- Session ----------------


class QuizSession:
    """One visitor's run through the quiz."""

    def __init__(self, catalog: EmissionCatalog = STANDARD_CATALOG):
        self.catalog = catalog
        self.calibration = calibration_for(catalog)
        self.state = initial_state()

    # --- read-only views ---
    @property
    def active_step_index(self) -> int:
        return self.state.active_step_index

    @property
    def active_step(self) -> Step:
        return active_step(self.state)

    @property
    def selections(self) -> Mapping[str, str]:
        return self.state.selections

    @property
    def interstitial_open(self) -> bool:
        return self.state.interstitial_open

    @property
    def interstitial_step(self) -> Optional[Step]:
        return interstitial_step(self.state)

    def has_selection(self, step: Optional[Step] = None) -> bool:
        return is_step_complete(self.state, self.catalog, step or self.active_step)

    def completed_steps(self) -> List[Step]:
        return completed_steps(self.state, self.catalog)

    # --- transitions ---
    def select(self, category: Category, option_id: str, question: Optional[str] = None) -> None:
        self.state = select(self.state, self.catalog, category, option_id, question)

    def next(self) -> None:
        self.state = next_step(self.state, self.catalog)

    def dismiss_interstitial(self) -> None:
        self.state = dismiss_interstitial(self.state)

    def back(self) -> None:
        self.state = back(self.state)

    def jump_to(self, index: int) -> None:
        self.state = jump_to(self.state, index)

    def reset(self) -> None:
        log.info("Quiz restarted")
        self.state = reset()

    # --- derived values, recomputed on every read ---
    def annual_total(self, period: Period = Period.ANNUAL) -> float:
        return grand_total(self.state.selections, self.catalog, period)

    def cumulative_total(self) -> float:
        return cumulative_total(self.state.selections, catalog=self.catalog)

    def projected_warming(self) -> float:
        return projected_warming(self.cumulative_total(), self.calibration)

    def warming_series(self) -> List[Tuple[int, float]]:
        return warming_series(self.cumulative_total(), calibration=self.calibration)

    def breakdown(self, include_zero: bool = True) -> List[Tuple[str, float]]:
        return category_breakdown(self.state.selections, self.catalog, include_zero)
