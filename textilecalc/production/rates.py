"""
Production planning: loom parameters → picks per day → meters per day → month.

Formulas:
    raw picks/day  = RPM × 60 × working hours × machines × (efficiency / 100)
    raw meters/day = raw picks/day ÷ (pick × 39.37)
    monthly        = raw meters/day × working days per month

Daily and monthly figures are normalized with normalize_by_magnitude, which
keeps the scale factor so the display value can always be expanded back.

Unlike the estimate and floor metrics, this calculator validates eagerly:
validate_production_inputs() collects every violated rule, and
calculate_production() raises ProductionValidationError carrying that list.
"""

from __future__ import annotations

import logging
from typing import Any

from textilecalc.schemas.production import (
    DailyProduction,
    MonthlyProduction,
    ProductionFormulas,
    ProductionParams,
    ProductionResult,
)
from textilecalc.schemas.validation import ValidationResult
from textilecalc.utilities.conversion import MINUTES_PER_HOUR, picks_to_meters
from textilecalc.utilities.formatting import normalize_by_magnitude
from textilecalc.utilities.rounding import as_number, number_to_string, to_fixed, to_grouped

logger = logging.getLogger(__name__)


class ProductionValidationError(ValueError):
    """
    Raised by calculate_production() when the loom parameters are invalid.

    Attributes:
        errors: One message per violated rule, in rule order.
    """

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__("Validation failed: " + "; ".join(errors))
        self.errors = errors


def validate_production_inputs(params: ProductionParams) -> ValidationResult:
    """
    Check loom parameters, collecting a message for every violated rule.

    Never raises.
    """
    rpm = as_number(params.rpm)
    pick = as_number(params.pick)
    efficiency = as_number(params.efficiency)
    machines = as_number(params.machines)
    working_hours = as_number(params.working_hours)
    errors: list[str] = []

    if not rpm > 0:
        errors.append("RPM must be greater than 0")

    if not pick > 0:
        errors.append("Pick (PPI) must be greater than 0")

    if not 0 <= efficiency <= 100:
        errors.append("Efficiency must be between 0 and 100")

    if not machines >= 1:
        errors.append("At least 1 machine is required")

    if not 0 < working_hours <= 24:
        errors.append("Working hours must be between 0 and 24")

    return ValidationResult.from_errors(errors)


def calculate_raw_picks(
    rpm: float, working_hours: float, machines: float, efficiency: float
) -> float:
    """
    RPM × 60 × working hours × machines × (efficiency / 100).

    Raises:
        ValueError: If any parameter is out of range.
    """
    if rpm <= 0 or working_hours <= 0 or machines < 1 or efficiency < 0 or efficiency > 100:
        raise ValueError("Invalid parameters for picks calculation")
    return rpm * MINUTES_PER_HOUR * working_hours * machines * (efficiency / 100)


def calculate_raw_production(raw_picks_per_day: float, pick: float) -> float:
    """
    Raw picks per day ÷ (pick × 39.37), in meters per day.

    Raises:
        ValueError: If either argument is not positive.
    """
    if raw_picks_per_day <= 0 or pick <= 0:
        raise ValueError("Invalid parameters for production calculation")
    return picks_to_meters(raw_picks_per_day, pick)


def calculate_production(params: ProductionParams) -> ProductionResult:
    """
    Compute daily and monthly production from loom parameters.

    Raises:
        ProductionValidationError: If validate_production_inputs() reports errors.
        ValueError: If efficiency is 0, which passes validation but yields no picks.
    """
    validation = validate_production_inputs(params)
    if not validation.is_valid:
        logger.info("Production inputs rejected: %s", "; ".join(validation.errors))
        raise ProductionValidationError(validation.errors)

    rpm = as_number(params.rpm)
    pick = as_number(params.pick)
    efficiency = as_number(params.efficiency)
    machines = as_number(params.machines)
    working_hours = as_number(params.working_hours)
    working_days = params.working_days_per_month

    raw_picks_per_day = calculate_raw_picks(rpm, working_hours, machines, efficiency)
    raw_production_meters = calculate_raw_production(raw_picks_per_day, pick)
    daily = normalize_by_magnitude(raw_production_meters)

    raw_monthly = raw_production_meters * working_days
    monthly = normalize_by_magnitude(raw_monthly)

    return ProductionResult(
        inputs=params,
        daily=DailyProduction(
            raw_picks_per_day=raw_picks_per_day,
            raw_production_meters=raw_production_meters,
            formatted_production=daily.formatted,
            formatted_scale=daily.scale,
            magnitude=daily.magnitude,
        ),
        monthly=MonthlyProduction(
            raw_production=raw_monthly,
            formatted_production=monthly.formatted,
            formatted_scale=monthly.scale,
            working_days=working_days,
        ),
        formulas=ProductionFormulas(
            raw_picks_formula=(
                f"{_n(params.rpm)} × 60 × {_n(params.working_hours)} × {_n(params.machines)} "
                f"× ({_n(params.efficiency)} / 100) = {to_fixed(raw_picks_per_day, 2)}"
            ),
            raw_production_formula=(
                f"{to_fixed(raw_picks_per_day, 2)} ÷ ({_n(params.pick)} × 39.37) "
                f"= {to_fixed(raw_production_meters, 4)} meters"
            ),
        ),
    )


def get_production_breakdown(result: ProductionResult, quality_name: str) -> dict[str, Any]:
    """
    Detailed, display-ready breakdown of a production calculation.

    Returns a nested dict with ``summary``, ``loom_settings`` and
    ``calculation_steps`` sections.
    """
    params = result.inputs
    daily = result.daily
    monthly = result.monthly
    picks_grouped = to_grouped(daily.raw_picks_per_day)

    return {
        "summary": {
            "quality": quality_name,
            "daily_production": (
                f"{_n(daily.formatted_production)} (×{_n(daily.formatted_scale)} "
                f"= {to_fixed(daily.raw_production_meters, 2)} m)"
            ),
            "monthly_production": (
                f"{_n(monthly.formatted_production)} ({_n(monthly.working_days)} working days)"
            ),
        },
        "loom_settings": {
            "RPM": params.rpm,
            "Pick (PPI)": params.pick,
            "Efficiency": f"{_n(params.efficiency)}%",
            "Machines": params.machines,
            "Working Hours": f"{_n(params.working_hours)} hrs/day",
        },
        "calculation_steps": {
            "step1": {
                "name": "Raw Picks per Day",
                "formula": "RPM × 60 × Working Hours × Machines × (Efficiency / 100)",
                "calculation": (
                    f"{_n(params.rpm)} × 60 × {_n(params.working_hours)} × "
                    f"{_n(params.machines)} × ({_n(params.efficiency)} / 100)"
                ),
                "result": picks_grouped,
            },
            "step2": {
                "name": "Raw Production (meters)",
                "formula": "Raw Picks ÷ (Pick × 39.37)",
                "calculation": f"{picks_grouped} ÷ ({_n(params.pick)} × 39.37)",
                "result": f"{to_fixed(daily.raw_production_meters, 4)} meters/day",
            },
            "step3": {
                "name": "Formatted Production",
                "formula": "Mathematical normalization using log₁₀",
                "result": (
                    f"{_n(daily.formatted_production)} (scale: ×{_n(daily.formatted_scale)})"
                ),
            },
        },
    }


def _n(value: Any) -> str:
    return number_to_string(value)
