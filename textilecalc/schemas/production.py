"""
Production planning schema: loom parameters in, daily and monthly throughput out.
"""

from __future__ import annotations

from dataclasses import dataclass

from textilecalc.utilities.conversion import DEFAULT_WORKING_DAYS_PER_MONTH


@dataclass(frozen=True)
class ProductionParams:
    """
    Loom parameters for a production plan.

    Not validated on construction; validate_production_inputs() reports every
    violated rule at once.

    Attributes:
        rpm: Loom speed, > 0.
        pick: Picks per inch, > 0.
        efficiency: Machine efficiency in percent, 0-100.
        machines: Number of looms, >= 1.
        working_hours: Hours worked per day, (0, 24].
        working_days_per_month: Days used for the monthly projection.
    """

    rpm: float | None
    pick: float | None
    efficiency: float | None
    machines: float | None
    working_hours: float | None
    working_days_per_month: float = DEFAULT_WORKING_DAYS_PER_MONTH


@dataclass(frozen=True)
class DailyProduction:
    raw_picks_per_day: float
    raw_production_meters: float
    formatted_production: float
    formatted_scale: float
    magnitude: int


@dataclass(frozen=True)
class MonthlyProduction:
    raw_production: float
    formatted_production: float
    formatted_scale: float
    working_days: float


@dataclass(frozen=True)
class ProductionFormulas:
    """Human-readable audit trail of the two throughput formulas."""

    raw_picks_formula: str
    raw_production_formula: str


@dataclass(frozen=True)
class ProductionResult:
    """Complete output of calculate_production()."""

    inputs: ProductionParams
    daily: DailyProduction
    monthly: MonthlyProduction
    formulas: ProductionFormulas
