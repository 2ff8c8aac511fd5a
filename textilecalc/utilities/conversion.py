"""
Industry constants and unit conversion for weaving calculations.

Every constant here is baked into previously persisted records and must not
change. All functions are pure.
"""

from __future__ import annotations

INCHES_PER_METER: float = 39.37
MINUTES_PER_HOUR: int = 60

# Denier is grams per 9000 m of yarn; per-meter estimate weights use 9 so the
# result reads as grams per 1000 m of fabric.
YARN_WEIGHT_DIVISOR: int = 9
BEAM_WEIGHT_DIVISOR: int = 9000

DEFAULT_WEIGHT_PRECISION: int = 4
DEFAULT_COST_PRECISION: int = 2
DEFAULT_WORKING_DAYS_PER_MONTH: int = 26


def wastage_multiplier(wastage_percent: float) -> float:
    """Convert a wastage percentage into the multiplier applied to consumption."""
    return 1 + (wastage_percent / 100)


def picks_to_meters(picks: float, picks_per_inch: float) -> float:
    """Convert a pick count into woven meters at the given pick density."""
    return picks / (picks_per_inch * INCHES_PER_METER)
