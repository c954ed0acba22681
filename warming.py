# warming.py
"""Toy 2100 warming projection for the results page.

Two calibrations exist, one per catalog shape:

  • LINEAR_BASELINE: cumulative tonnes to 2100 scaled against a 2.2 trillion
    tonne / 4.3 °C baseline, drawn as a straight line from today, with a few
    historical anchor points in front.
  • PER_CAPITA: annual per-capita tonnes above a 2 t threshold, 0.35 °C per
    tonne, drawn as an exponential saturation curve (tau = 30 years).

Both are monotonic in the emissions input and clamped to [floor, ceiling].
This is an educational visual, not a climate model.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from emission_catalog import HORIZON_YEARS, EmissionCatalog, CatalogShape


@dataclass(frozen=True)
class WarmingCalibration:
    name: str
    kind: str  # "linear-baseline" | "per-capita"
    floor: float
    ceiling: float
    curve: str = "linear"  # "linear" | "saturating"
    tau_years: float = 30.0
    start_year: int = 2025
    end_year: int = 2100
    start_temp: float = 1.2
    history: Tuple[Tuple[int, float], ...] = ()
    # linear-baseline
    baseline_emissions_t: float = 2.2e12
    baseline_warming: float = 4.3
    # per-capita
    horizon_years: int = HORIZON_YEARS
    threshold_t: float = 2.0
    degrees_per_t: float = 0.35
    base_temp: float = 1.6


LINEAR_BASELINE = WarmingCalibration(
    name="linear-baseline",
    kind="linear-baseline",
    floor=1.2,
    ceiling=5.0,
    curve="linear",
    history=((2000, 0.9), (2010, 1.0), (2020, 1.2)),
)

PER_CAPITA = WarmingCalibration(
    name="per-capita",
    kind="per-capita",
    floor=1.3,
    ceiling=4.5,
    curve="saturating",
)


def _clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def calibration_for(catalog: EmissionCatalog) -> WarmingCalibration:
    return PER_CAPITA if catalog.shape is CatalogShape.DELTA else LINEAR_BASELINE


def projected_warming(
    cumulative_emissions: float,
    calibration: WarmingCalibration = LINEAR_BASELINE,
) -> float:
    """End-of-horizon temperature above pre-industrial (°C)."""
    c = calibration
    if c.kind == "per-capita":
        per_capita = cumulative_emissions / c.horizon_years
        t = c.base_temp + max(0.0, per_capita - c.threshold_t) * c.degrees_per_t
    elif c.kind == "linear-baseline":
        t = (cumulative_emissions / c.baseline_emissions_t) * c.baseline_warming
    else:
        raise ValueError(f"Unknown calibration kind: {c.kind}")
    return _clamp(t, c.floor, c.ceiling)


def _progress(n_years: int, calibration: WarmingCalibration) -> np.ndarray:
    i = np.arange(n_years + 1, dtype=float)
    if n_years == 0:
        return np.ones(1)
    if calibration.curve == "saturating":
        # Normalised so the last point lands exactly on the projection.
        full = 1.0 - math.exp(-n_years / calibration.tau_years)
        return (1.0 - np.exp(-i / calibration.tau_years)) / full
    return i / n_years


def warming_series(
    cumulative_emissions: float,
    start_year: Optional[int] = None,
    end_year: Optional[int] = None,
    calibration: WarmingCalibration = LINEAR_BASELINE,
) -> List[Tuple[int, float]]:
    """(year, temp) points from start_year to end_year inclusive.

    Historical anchors earlier than start_year come first. Temperatures are
    rounded to 2 decimals.
    """
    start = calibration.start_year if start_year is None else start_year
    end = calibration.end_year if end_year is None else end_year
    if end < start:
        raise ValueError(f"end_year ({end}) must not precede start_year ({start})")

    end_temp = projected_warming(cumulative_emissions, calibration)
    n_years = end - start
    temps = calibration.start_temp + (end_temp - calibration.start_temp) * _progress(n_years, calibration)
    temps[-1] = end_temp

    out: List[Tuple[int, float]] = [(y, t) for y, t in calibration.history if y < start]
    out.extend((start + k, round(float(t), 2)) for k, t in enumerate(temps))
    return out


def series_frame(
    cumulative_emissions: float,
    calibration: WarmingCalibration = LINEAR_BASELINE,
) -> pd.DataFrame:
    points = warming_series(cumulative_emissions, calibration=calibration)
    df = pd.DataFrame(points, columns=["Year", "Temp (°C)"])
    df["Kind"] = np.where(df["Year"] < calibration.start_year, "history", "projection")
    return df
