"""
Loom-level metrics: actual efficiency against theory, theoretical output,
shed utilization, and status/availability for display.

Theoretical production at 100 % efficiency is

    (RPM × 60 × hours) / (PPI × 39.37)  meters

and actual efficiency compares logged meters against it.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from textilecalc.schemas.validation import ValidationResult
from textilecalc.schemas.weaving import LoomAvailability, LoomStatus, LoomStatusDisplay
from textilecalc.utilities.conversion import MINUTES_PER_HOUR, picks_to_meters
from textilecalc.utilities.rounding import as_number, is_truthy, round_fixed

logger = logging.getLogger(__name__)

_STATUS_DISPLAY: dict[LoomStatus, LoomStatusDisplay] = {
    LoomStatus.RUNNING: LoomStatusDisplay(label="Running", color="green"),
    LoomStatus.IDLE: LoomStatusDisplay(label="Idle", color="gray"),
    LoomStatus.MAINTENANCE: LoomStatusDisplay(label="Maintenance", color="yellow"),
    LoomStatus.BREAKDOWN: LoomStatusDisplay(label="Breakdown", color="red"),
}

_UNAVAILABLE_REASONS: dict[LoomStatus, str] = {
    LoomStatus.RUNNING: "Currently running",
    LoomStatus.MAINTENANCE: "Under maintenance",
    LoomStatus.BREAKDOWN: "Breakdown - needs repair",
}


def calculate_actual_efficiency(
    meters_produced: object, rpm: object, hours: object, ppi: object
) -> float | None:
    """
    Logged meters as a percentage of theoretical meters, clamped to [0, 100].

    Returns None when rpm, hours or ppi is missing or not positive.
    """
    rpm_n, hours_n, ppi_n = as_number(rpm), as_number(hours), as_number(ppi)
    if not (rpm_n > 0 and hours_n > 0 and ppi_n > 0):
        logger.debug("Actual efficiency not computable: rpm=%s hours=%s ppi=%s", rpm, hours, ppi)
        return None

    theoretical = picks_to_meters(rpm_n * MINUTES_PER_HOUR * hours_n, ppi_n)
    efficiency = (as_number(meters_produced) / theoretical) * 100
    return min(100, max(0, round_fixed(efficiency, 2)))


def calculate_theoretical_production(
    rpm: object, hours: object, ppi: object, efficiency: float = 100
) -> float:
    """Expected meters at the given efficiency, 2 dp; 0 when rpm, hours or ppi is missing."""
    rpm_n, hours_n, ppi_n = as_number(rpm), as_number(hours), as_number(ppi)
    if not (is_truthy(rpm_n) and is_truthy(hours_n) and is_truthy(ppi_n)):
        return 0

    theoretical = picks_to_meters(rpm_n * MINUTES_PER_HOUR * hours_n * (efficiency / 100), ppi_n)
    return round_fixed(theoretical, 2)


def calculate_loom_utilization(running_looms: int, total_looms: int) -> float:
    """Share of looms running, in percent with 1 dp; 0 for an empty shed."""
    if total_looms == 0:
        return 0
    return round_fixed((running_looms / total_looms) * 100, 1)


def format_loom_status(status: LoomStatus | str) -> LoomStatusDisplay:
    """Label and colour for a loom status; unknown statuses render as themselves in gray."""
    try:
        return _STATUS_DISPLAY[LoomStatus(status)]
    except ValueError:
        return LoomStatusDisplay(label=str(status), color="gray")


def get_loom_availability(status: LoomStatus | str, is_active: bool) -> LoomAvailability:
    """Whether a loom can take a new production set, and why not if it cannot."""
    for blocking, reason in _UNAVAILABLE_REASONS.items():
        if status == blocking:
            return LoomAvailability(available=False, reason=reason)
    if not is_active:
        return LoomAvailability(available=False, reason="Loom is deactivated")
    return LoomAvailability(available=True, reason="Available for production")


def validate_production_log_entry(entry: Mapping[str, Any]) -> ValidationResult:
    """
    Check a shift production log entry, collecting every problem found.

    *entry* uses the stored document keys: ``loom``, ``qualityName``,
    ``date``, ``shift``, ``metersProduced``, ``actualRPM``,
    ``actualEfficiency``.
    """
    errors: list[str] = []

    if not entry.get("loom"):
        errors.append("Loom is required")

    quality_name = entry.get("qualityName")
    if not quality_name or not str(quality_name).strip():
        errors.append("Quality name is required")

    if not entry.get("date"):
        errors.append("Production date is required")

    if not entry.get("shift"):
        errors.append("Shift is required")

    meters = entry.get("metersProduced")
    if meters is None:
        errors.append("Meters produced is required")
    elif meters < 0:
        errors.append("Meters produced cannot be negative")

    rpm = entry.get("actualRPM")
    if rpm is not None and rpm < 0:
        errors.append("RPM cannot be negative")

    efficiency = entry.get("actualEfficiency")
    if efficiency is not None and (efficiency < 0 or efficiency > 100):
        errors.append("Efficiency must be between 0 and 100")

    return ValidationResult.from_errors(errors)
