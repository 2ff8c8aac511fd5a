"""
Weaving floor metrics for beams and shift production entries.

Every function here is total: an invalid denominator or a missing input
yields 0 (or a zeroed record) instead of raising, so a half-filled
production entry can still be saved and recomputed later.
"""

from __future__ import annotations

from textilecalc.schemas.weaving import BeamWeight, Variance
from textilecalc.utilities.conversion import BEAM_WEIGHT_DIVISOR, INCHES_PER_METER
from textilecalc.utilities.formatting import format_weight
from textilecalc.utilities.rounding import (
    as_number,
    clamp,
    is_truthy,
    number_or_zero,
    round_fixed,
)


def calculate_beam_weight(tar: object, denier: object, total_length: object) -> BeamWeight:
    """Yarn on a beam: tar × denier × length / 9000, with its display form."""
    if not (is_truthy(tar) and is_truthy(denier) and is_truthy(total_length)):
        return BeamWeight(raw=0, formatted=0)

    raw = as_number(tar) * as_number(denier) * as_number(total_length) / BEAM_WEIGHT_DIVISOR
    return BeamWeight(raw=raw, formatted=format_weight(raw, 4))


def calculate_efficiency(total_hours: object, stoppage_hours: object) -> float:
    """Running time as a percentage of the shift, clamped to [0, 100], 2 dp."""
    total = as_number(total_hours)
    if not total > 0:
        return 0

    efficiency = ((total - as_number(stoppage_hours)) / total) * 100
    return round_fixed(clamp(efficiency, 0, 100), 2)


def calculate_meters_per_hour(meters_produced: object, total_hours: object) -> float:
    hours = as_number(total_hours)
    if not hours > 0:
        return 0
    return round_fixed(as_number(meters_produced) / hours, 2)


def calculate_actual_picks(meters_produced: object, panna: object, width: object) -> float:
    """
    Picks implied by woven meters: meters × panna × 39.37 / width, whole picks.

    Rounded to 0 decimals even though picks are fractional elsewhere.
    """
    if not (is_truthy(meters_produced) and is_truthy(panna) and is_truthy(width)):
        return 0

    picks = as_number(meters_produced) * as_number(panna) * INCHES_PER_METER / as_number(width)
    return round_fixed(picks, 0)


def calculate_variance(actual: object, target: object) -> Variance:
    """Actual minus target, and that difference as a percentage of target (2 dp)."""
    if not is_truthy(target):
        return Variance(variance=0, percentage=0)

    variance = as_number(actual) - as_number(target)
    return Variance(
        variance=variance,
        percentage=round_fixed(variance / as_number(target) * 100, 2),
    )


def calculate_utilization(active_hours: object, available_hours: object) -> float:
    """Active share of available hours, clamped to [0, 100], 2 dp."""
    available = as_number(available_hours)
    if not available > 0:
        return 0
    return round_fixed(clamp(as_number(active_hours) / available * 100, 0, 100), 2)


def calculate_defect_rate(total_defects: object, total_meters: object) -> float:
    """Defects per 100 m, 4 dp."""
    meters = as_number(total_meters)
    if not meters > 0:
        return 0
    return round_fixed(number_or_zero(total_defects) / meters * 100, 4)


def update_remaining_length(current_length: object, consumed_length: object) -> float:
    """Beam length left after consumption, never negative, 2 dp."""
    return round_fixed(max(0, number_or_zero(current_length) - number_or_zero(consumed_length)), 2)
