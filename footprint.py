# footprint.py
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Tuple

import pandas as pd

from emission_catalog import STANDARD_CATALOG, EmissionCatalog, OptionNotFound
from models import CATEGORY_LABELS, CATEGORY_ORDER, Category, Period

log = logging.getLogger(__name__)


# ---------------- Totals ----------------


def category_total(
    selections: Mapping[str, str],
    category: Category,
    catalog: EmissionCatalog = STANDARD_CATALOG,
    period: Period = Period.ANNUAL,
) -> float:
    """Sum of the selected options' impacts for one category.

    Unanswered questions and ids the catalog does not know contribute 0, so an
    unfinished quiz still renders a (partial) result.
    """
    total = 0.0
    for q in catalog.applicable_questions(category, selections):
        option_id = selections.get(q.key)
        if not option_id:
            continue
        try:
            total += catalog.impact(category, option_id, period)
        except OptionNotFound:
            log.debug("Ignoring unknown option %r for %s", option_id, category.value)
    return total


def grand_total(
    selections: Mapping[str, str],
    catalog: EmissionCatalog = STANDARD_CATALOG,
    period: Period = Period.ANNUAL,
) -> float:
    return sum(category_total(selections, c, catalog, period) for c in CATEGORY_ORDER)


def cumulative_total(
    selections: Mapping[str, str],
    horizon_years: Optional[int] = None,
    catalog: EmissionCatalog = STANDARD_CATALOG,
) -> float:
    """Emissions accumulated until the horizon year.

    Without *horizon_years* the catalog's precomputed per-option figures are
    summed; with it, annual totals are scaled by the given number of years.
    """
    if horizon_years is None:
        return grand_total(selections, catalog, Period.HORIZON)
    return grand_total(selections, catalog, Period.ANNUAL) * horizon_years


# ---------------- Breakdown ----------------


def category_breakdown(
    selections: Mapping[str, str],
    catalog: EmissionCatalog = STANDARD_CATALOG,
    include_zero: bool = True,
) -> List[Tuple[str, float]]:
    rows = [
        (CATEGORY_LABELS[c], category_total(selections, c, catalog))
        for c in CATEGORY_ORDER
    ]
    if include_zero:
        return rows
    return [(label, value) for label, value in rows if value != 0]


def breakdown_frame(
    selections: Mapping[str, str],
    catalog: EmissionCatalog = STANDARD_CATALOG,
) -> pd.DataFrame:
    """Non-zero breakdown as a frame for the pie chart and the result list."""
    rows = category_breakdown(selections, catalog, include_zero=False)
    df = pd.DataFrame(rows, columns=["Category", "tCO2e"])
    total = df["tCO2e"].sum()
    df["Share (%)"] = (df["tCO2e"] / total * 100.0).round(1) if total else 0.0
    return df


# ---------------- Authoring checks ----------------


def catalog_inconsistencies(
    catalog: EmissionCatalog,
    tolerance: float = 1e-6,
) -> List[Tuple[str, str, float, float]]:
    """Options whose precomputed horizon figure differs from annual x horizon.

    Returns (question key, option id, expected, authored) rows.
    """
    out: List[Tuple[str, str, float, float]] = []
    for q in catalog.questions:
        for opt in q.options:
            if opt.to_horizon is None:
                continue
            expected = opt.annual * catalog.horizon_years
            if abs(expected - opt.to_horizon) > tolerance:
                out.append((q.key, opt.option_id, expected, opt.to_horizon))
    return out
