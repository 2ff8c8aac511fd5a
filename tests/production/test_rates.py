"""Tests for production planning: validation, throughput formulas and breakdown."""

import pytest

from textilecalc.production.rates import (
    ProductionValidationError,
    calculate_production,
    calculate_raw_picks,
    calculate_raw_production,
    get_production_breakdown,
    validate_production_inputs,
)
from textilecalc.schemas.production import ProductionParams


@pytest.fixture(scope="module")
def params():
    """Two looms at 500 RPM, 40 PPI, 80 % efficiency, 12 hours a day."""
    return ProductionParams(rpm=500, pick=40, efficiency=80, machines=2, working_hours=12)


@pytest.fixture(scope="module")
def result(params):
    return calculate_production(params)


class TestValidation:
    def test_valid(self, params):
        validation = validate_production_inputs(params)
        assert validation.is_valid
        assert validation.errors == ()

    def test_zero_rpm(self):
        validation = validate_production_inputs(
            ProductionParams(rpm=0, pick=10, efficiency=80, machines=1, working_hours=8)
        )
        assert not validation.is_valid
        assert validation.errors == ("RPM must be greater than 0",)

    def test_collects_every_error_in_order(self):
        validation = validate_production_inputs(
            ProductionParams(rpm=0, pick=0, efficiency=150, machines=0, working_hours=25)
        )
        assert validation.errors == (
            "RPM must be greater than 0",
            "Pick (PPI) must be greater than 0",
            "Efficiency must be between 0 and 100",
            "At least 1 machine is required",
            "Working hours must be between 0 and 24",
        )

    def test_missing_values(self):
        validation = validate_production_inputs(
            ProductionParams(rpm=None, pick=None, efficiency=None, machines=None, working_hours=None)
        )
        assert len(validation.errors) == 5

    def test_working_hours_bounds(self):
        full_day = ProductionParams(rpm=500, pick=40, efficiency=80, machines=1, working_hours=24)
        no_hours = ProductionParams(rpm=500, pick=40, efficiency=80, machines=1, working_hours=0)
        assert validate_production_inputs(full_day).is_valid
        assert not validate_production_inputs(no_hours).is_valid

    @pytest.mark.parametrize("efficiency", ["80", float("nan"), None, -0.1, 100.5])
    def test_efficiency_must_be_a_number_in_range(self, efficiency):
        p = ProductionParams(rpm=500, pick=40, efficiency=efficiency, machines=1, working_hours=8)
        assert validate_production_inputs(p).errors == ("Efficiency must be between 0 and 100",)

    def test_nan_efficiency_rejected_before_calculation(self):
        p = ProductionParams(
            rpm=500, pick=40, efficiency=float("nan"), machines=1, working_hours=8
        )
        with pytest.raises(ProductionValidationError):
            calculate_production(p)

    def test_efficiency_bounds_inclusive(self):
        for efficiency in (0, 100):
            p = ProductionParams(
                rpm=500, pick=40, efficiency=efficiency, machines=1, working_hours=8
            )
            assert validate_production_inputs(p).is_valid


class TestRawFormulas:
    def test_raw_picks(self):
        assert calculate_raw_picks(500, 12, 2, 80) == 576000.0

    def test_raw_picks_zero_efficiency_gives_no_picks(self):
        assert calculate_raw_picks(500, 12, 2, 0) == 0

    def test_raw_picks_rejects_out_of_range(self):
        with pytest.raises(ValueError, match="picks calculation"):
            calculate_raw_picks(500, 12, 2, 101)

    def test_raw_production(self):
        assert calculate_raw_production(576000, 40) == pytest.approx(576000 / (40 * 39.37))

    def test_raw_production_rejects_non_positive(self):
        with pytest.raises(ValueError, match="production calculation"):
            calculate_raw_production(0, 40)


class TestCalculateProduction:
    def test_daily(self, result):
        assert result.daily.raw_picks_per_day == 576000.0
        assert result.daily.raw_production_meters == pytest.approx(365.76073)
        assert result.daily.formatted_production == 3.658
        assert result.daily.formatted_scale == 100
        assert result.daily.magnitude == 2

    def test_monthly(self, result):
        assert result.monthly.working_days == 26
        assert result.monthly.raw_production == pytest.approx(
            result.daily.raw_production_meters * 26
        )
        assert result.monthly.formatted_production == 9.51
        assert result.monthly.formatted_scale == 1000

    def test_custom_working_days(self):
        p = ProductionParams(
            rpm=500, pick=40, efficiency=80, machines=2, working_hours=12,
            working_days_per_month=30,
        )
        monthly = calculate_production(p).monthly
        assert monthly.working_days == 30
        assert monthly.raw_production == pytest.approx(365.76073 * 30)

    def test_formulas(self, result):
        assert result.formulas.raw_picks_formula == "500 × 60 × 12 × 2 × (80 / 100) = 576000.00"
        assert result.formulas.raw_production_formula.startswith("576000.00 ÷ (40 × 39.37) = ")
        assert result.formulas.raw_production_formula.endswith(" meters")

    def test_inputs_echoed(self, params, result):
        assert result.inputs is params

    def test_invalid_raises_validation_error(self):
        p = ProductionParams(rpm=0, pick=10, efficiency=80, machines=1, working_hours=8)
        with pytest.raises(ProductionValidationError) as exc_info:
            calculate_production(p)
        assert "RPM must be greater than 0" in exc_info.value.errors
        assert isinstance(exc_info.value, ValueError)
        assert str(exc_info.value) == "Validation failed: RPM must be greater than 0"

    def test_zero_efficiency_passes_validation_but_raises(self):
        p = ProductionParams(rpm=500, pick=40, efficiency=0, machines=1, working_hours=8)
        with pytest.raises(ValueError) as exc_info:
            calculate_production(p)
        assert not isinstance(exc_info.value, ProductionValidationError)

    def test_idempotent(self, params):
        assert calculate_production(params) == calculate_production(params)


class TestBreakdown:
    def test_summary(self, result):
        breakdown = get_production_breakdown(result, "Satin 60")
        assert breakdown["summary"] == {
            "quality": "Satin 60",
            "daily_production": "3.658 (×100 = 365.76 m)",
            "monthly_production": "9.51 (26 working days)",
        }

    def test_loom_settings(self, result):
        settings = get_production_breakdown(result, "Satin 60")["loom_settings"]
        assert settings["RPM"] == 500
        assert settings["Efficiency"] == "80%"
        assert settings["Working Hours"] == "12 hrs/day"

    def test_steps(self, result):
        steps = get_production_breakdown(result, "Satin 60")["calculation_steps"]
        assert steps["step1"]["calculation"] == "500 × 60 × 12 × 2 × (80 / 100)"
        assert steps["step1"]["result"] == "576,000"
        assert steps["step2"]["calculation"] == "576,000 ÷ (40 × 39.37)"
        assert steps["step3"]["result"] == "3.658 (scale: ×100)"
