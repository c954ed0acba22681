"""
Tests for the toy warming projection.
"""

import pytest

from emission_catalog import ADVANCED_CATALOG, STANDARD_CATALOG
from warming import (
    LINEAR_BASELINE,
    PER_CAPITA,
    calibration_for,
    projected_warming,
    series_frame,
    warming_series,
)

CALIBRATIONS = [LINEAR_BASELINE, PER_CAPITA]
SAMPLES = [-1e6, 0, 1, 75, 150, 300, 1_000, 284_700, 1e9, 1e11, 1e12, 2.2e12, 3e12, 1e13, 1e15]


class TestProjectedWarming:
    @pytest.mark.parametrize("calibration", CALIBRATIONS, ids=lambda c: c.name)
    def test_monotonic_non_decreasing(self, calibration):
        values = [projected_warming(x, calibration) for x in sorted(SAMPLES)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    @pytest.mark.parametrize("calibration", CALIBRATIONS, ids=lambda c: c.name)
    def test_within_bounds(self, calibration):
        for x in SAMPLES:
            t = projected_warming(x, calibration)
            assert calibration.floor <= t <= calibration.ceiling

    def test_linear_baseline_reference_point(self):
        assert projected_warming(2.2e12) == pytest.approx(4.3)

    def test_linear_baseline_floor_and_ceiling(self):
        assert projected_warming(0) == 1.2
        assert projected_warming(284_700) == 1.2
        assert projected_warming(1e13) == 5.0

    def test_per_capita_threshold(self):
        # 2 t/year or less stays at the base temperature
        assert projected_warming(2 * 75, PER_CAPITA) == pytest.approx(1.6)
        # 4 t/year -> 1.6 + 2 * 0.35
        assert projected_warming(4 * 75, PER_CAPITA) == pytest.approx(2.3)
        assert projected_warming(100 * 75, PER_CAPITA) == 4.5

    def test_calibration_for_catalog(self):
        assert calibration_for(STANDARD_CATALOG) is LINEAR_BASELINE
        assert calibration_for(ADVANCED_CATALOG) is PER_CAPITA


class TestWarmingSeries:
    @pytest.mark.parametrize("calibration", CALIBRATIONS, ids=lambda c: c.name)
    @pytest.mark.parametrize("cumulative", [0, 300, 1.1e12, 2.2e12, 5e12])
    def test_deterministic(self, calibration, cumulative):
        assert warming_series(cumulative, calibration=calibration) == warming_series(
            cumulative, calibration=calibration
        )

    def test_length_includes_history_prefix(self):
        series = warming_series(1e12, 2025, 2100)
        assert len(series) == (2100 - 2025) + 1 + len(LINEAR_BASELINE.history)
        assert series[:3] == [(2000, 0.9), (2010, 1.0), (2020, 1.2)]

    def test_per_capita_has_no_history(self):
        assert len(warming_series(300, 2025, 2100, PER_CAPITA)) == 76

    def test_history_only_before_start_year(self):
        series = warming_series(1e12, 2015, 2030)
        assert [y for y, _ in series[:2]] == [2000, 2010]
        assert len(series) == 2 + 16

    @pytest.mark.parametrize("calibration", CALIBRATIONS, ids=lambda c: c.name)
    @pytest.mark.parametrize("cumulative", [0, 300, 555, 1.7e12, 2.2e12, 9e12])
    def test_last_point_equals_projection(self, calibration, cumulative):
        year, temp = warming_series(cumulative, calibration=calibration)[-1]
        assert year == calibration.end_year
        assert temp == round(projected_warming(cumulative, calibration), 2)

    @pytest.mark.parametrize("calibration", CALIBRATIONS, ids=lambda c: c.name)
    def test_rises_from_start_temperature(self, calibration):
        series = warming_series(9e12 if calibration is LINEAR_BASELINE else 600, calibration=calibration)
        projection = [t for y, t in series if y >= calibration.start_year]
        assert projection[0] == calibration.start_temp
        assert all(a <= b for a, b in zip(projection, projection[1:]))

    def test_values_rounded_to_two_decimals(self):
        for _, t in warming_series(1.3e12, calibration=LINEAR_BASELINE):
            assert t == round(t, 2)
        for _, t in warming_series(555, calibration=PER_CAPITA):
            assert t == round(t, 2)

    def test_years_are_consecutive(self):
        years = [y for y, _ in warming_series(1e12) if y >= 2025]
        assert years == list(range(2025, 2101))

    def test_single_year_range(self):
        series = warming_series(2.2e12, 2100, 2100)
        assert series[-1] == (2100, 4.3)
        assert len(series) == 1 + 3

    def test_inverted_range_raises(self):
        with pytest.raises(ValueError):
            warming_series(0, 2100, 2025)


class TestSeriesFrame:
    def test_kinds(self):
        df = series_frame(1e12)
        assert list(df.columns) == ["Year", "Temp (°C)", "Kind"]
        assert (df["Kind"] == "history").sum() == 3
        assert (df["Kind"] == "projection").sum() == 76
