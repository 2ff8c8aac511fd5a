"""
Yarn consumption, wastage and stock bookkeeping for the weaving floor.

Theoretical consumption (kg) for a run of fabric:

    warp:  ends × meters × denier × (1 + w/100) / 9000
    weft:  picks × panna × meters × denier × (1 + w/100) / (9000 × 39.37)

where w is the wastage allowance in percent (3 unless given). The weft form
converts panna from inches to meters, hence the 39.37.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Literal, Optional

from textilecalc.schemas.validation import ValidationResult
from textilecalc.schemas.weaving import YarnWastage
from textilecalc.utilities.conversion import (
    BEAM_WEIGHT_DIVISOR,
    INCHES_PER_METER,
    wastage_multiplier,
)
from textilecalc.utilities.rounding import as_number, is_truthy, number_to_string, round_fixed

logger = logging.getLogger(__name__)

DEFAULT_CRIMP_PERCENTAGE = 5
DEFAULT_THEORETICAL_WASTAGE = 3

YarnSide = Literal["warp", "weft"]
StockTransactionKind = Literal["received", "issued", "returned", "adjustment"]


def calculate_yarn_wastage(issued_quantity: object, actual_consumption: object) -> YarnWastage:
    """
    Yarn issued to a loom but not accounted for by its consumption.

    Returns the wastage in kg (4 dp) and as a percentage of the issued
    quantity (2 dp, 0 when nothing was issued).
    """
    issued = as_number(issued_quantity)
    wastage = issued - as_number(actual_consumption)
    percentage = wastage / issued * 100 if issued > 0 else 0
    return YarnWastage(
        wastage_quantity=round_fixed(wastage, 4),
        wastage_percentage=round_fixed(percentage, 2),
    )


def calculate_warp_consumption(
    meters_produced: float, crimp_percentage: float = DEFAULT_CRIMP_PERCENTAGE
) -> float:
    """Warp meters consumed for *meters_produced* of fabric, crimp included (2 dp)."""
    consumption = as_number(meters_produced) * wastage_multiplier(as_number(crimp_percentage))
    return round_fixed(consumption, 2)


def calculate_theoretical_yarn_consumption(
    side: YarnSide | str,
    *,
    meters: object,
    denier: object,
    total_ends: object = None,
    picks: object = None,
    panna: object = None,
    wastage_percent: float = DEFAULT_THEORETICAL_WASTAGE,
) -> Optional[float]:
    """
    Expected yarn weight in kg for one side of the fabric, 4 dp.

    Args:
        side: ``"warp"`` (needs total_ends) or ``"weft"`` (needs picks and panna).
        meters: Fabric length woven.
        denier: Yarn denier.
        total_ends: Warp ends on the beam.
        picks: Weft picks per inch.
        panna: Fabric width in inches.
        wastage_percent: Wastage allowance in percent.

    Returns:
        The weight, or None when a required input is missing or zero, or
        *side* is neither warp nor weft.
    """
    multiplier = wastage_multiplier(as_number(wastage_percent))

    if side == "warp":
        if not (is_truthy(total_ends) and is_truthy(meters) and is_truthy(denier)):
            return None
        weight = (
            as_number(total_ends) * as_number(meters) * as_number(denier) * multiplier
        ) / BEAM_WEIGHT_DIVISOR
        return round_fixed(weight, 4)

    if side == "weft":
        if not (
            is_truthy(picks) and is_truthy(panna) and is_truthy(meters) and is_truthy(denier)
        ):
            return None
        weight = (
            as_number(picks) * as_number(panna) * as_number(meters) * as_number(denier) * multiplier
        ) / (BEAM_WEIGHT_DIVISOR * INCHES_PER_METER)
        return round_fixed(weight, 4)

    logger.debug("No theoretical consumption for yarn side %r", side)
    return None


def calculate_gsm(weight_kg: object, length_meters: object, width_meters: object) -> Optional[float]:
    """Grams per square meter of a fabric roll (2 dp); None if any input is missing or zero."""
    if not (is_truthy(weight_kg) and is_truthy(length_meters) and is_truthy(width_meters)):
        return None

    grams = as_number(weight_kg) * 1000
    area = as_number(length_meters) * as_number(width_meters)
    return round_fixed(grams / area, 2)


def validate_yarn_stock_transaction(
    kind: StockTransactionKind | str,
    quantity: object,
    current_stock: float,
) -> ValidationResult:
    """
    Check a stock movement before it is booked.

    The quantity must be positive, and an issue may not exceed the stock on
    hand.
    """
    errors: list[str] = []
    amount = as_number(quantity)

    if not amount > 0:
        errors.append("Quantity must be greater than 0")

    if kind == "issued" and amount > current_stock:
        errors.append(f"Insufficient stock. Available: {number_to_string(current_stock)} kg")

    return ValidationResult.from_errors(errors)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def generate_roll_number(company_code: str, sequence: int, on: date | None = None) -> str:
    """Fabric roll number ``CODE-YYYYMMDD-NNNN``; *on* defaults to today (UTC)."""
    day = on or _utc_today()
    return f"{company_code}-{day:%Y%m%d}-{sequence:04d}"


def generate_beam_number(sequence: int, on: date | None = None) -> str:
    """Warp beam number ``BM-YYYYMM-NNNN``; *on* defaults to today (UTC)."""
    day = on or _utc_today()
    return f"BM-{day:%Y%m}-{sequence:04d}"
