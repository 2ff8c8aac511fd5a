"""
Shared numeric utilities for the textilecalc calculation core.

Provides the deterministic building blocks every calculator uses:
half-up rounding compatible with stored records, the two display
normalizations, industry constants, and plain display helpers.
"""

from .conversion import (
    BEAM_WEIGHT_DIVISOR,
    DEFAULT_COST_PRECISION,
    DEFAULT_WEIGHT_PRECISION,
    DEFAULT_WORKING_DAYS_PER_MONTH,
    INCHES_PER_METER,
    MINUTES_PER_HOUR,
    YARN_WEIGHT_DIVISOR,
    picks_to_meters,
    wastage_multiplier,
)
from .formatting import (
    NormalizedValue,
    format_cost,
    format_currency,
    format_date,
    format_magnitude_dropping_digits,
    format_percentage,
    format_weight,
    normalize_by_magnitude,
)
from .rounding import (
    as_number,
    clamp,
    is_truthy,
    number_or_zero,
    number_to_string,
    round_fixed,
    to_fixed,
    to_grouped,
    to_plain_decimal,
    to_precision,
)

__all__ = [
    # types
    "NormalizedValue",
    # constants
    "BEAM_WEIGHT_DIVISOR",
    "DEFAULT_COST_PRECISION",
    "DEFAULT_WEIGHT_PRECISION",
    "DEFAULT_WORKING_DAYS_PER_MONTH",
    "INCHES_PER_METER",
    "MINUTES_PER_HOUR",
    "YARN_WEIGHT_DIVISOR",
    # conversion
    "picks_to_meters",
    "wastage_multiplier",
    # rounding
    "as_number",
    "clamp",
    "is_truthy",
    "number_or_zero",
    "number_to_string",
    "round_fixed",
    "to_fixed",
    "to_grouped",
    "to_plain_decimal",
    "to_precision",
    # formatting
    "format_magnitude_dropping_digits",
    "format_weight",
    "format_cost",
    "normalize_by_magnitude",
    "format_currency",
    "format_percentage",
    "format_date",
]
