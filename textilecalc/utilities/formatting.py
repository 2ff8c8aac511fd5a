"""
Display normalization for weights, costs and production figures.

Two normalizations live here and must not be conflated:

format_magnitude_dropping_digits
    Collapses any value to ``d.ddd…`` (one nonzero digit before the point)
    and throws the order of magnitude away. Estimate weights and costs are
    stored in this form.

normalize_by_magnitude
    Scales a value into [1, 10) with log10 and keeps the scale factor, so
    ``formatted × scale`` recovers the original. Production figures use it.

Both are total functions: degenerate input yields zero, never an exception.
Callers must read a zero result as "not computable yet", not as a measured
zero.

The module also carries the plain display helpers (currency, percentage,
date) used when rendering records.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime

from .conversion import DEFAULT_COST_PRECISION, DEFAULT_WEIGHT_PRECISION
from .rounding import as_number, round_fixed, to_fixed, to_plain_decimal, to_precision

_NON_DIGITS = re.compile(r"[^0-9]")
_MAX_SIGNIFICANT_DIGITS = 100

DATE_FORMATS: dict[str, str] = {
    "DD/MM/YYYY": "{day}/{month}/{year}",
    "MM/DD/YYYY": "{month}/{day}/{year}",
    "YYYY-MM-DD": "{year}-{month}-{day}",
}


@dataclass(frozen=True)
class NormalizedValue:
    """
    A value rescaled into [1, 10) together with the scale that undoes it.

    Attributes:
        formatted: Normalized value, rounded by magnitude (2-4 decimals).
        scale: Power of ten the normalized value was divided by.
        magnitude: Base-10 exponent of ``scale``.
        original: The value that was normalized.
    """

    formatted: float
    scale: float
    magnitude: int
    original: float


_ZERO_NORMALIZED = NormalizedValue(formatted=0, scale=1, magnitude=0, original=0)


def format_magnitude_dropping_digits(
    value: object, precision: int, significant_digits: int | None = None
) -> float:
    """
    Reduce *value* to one leading nonzero digit and *precision* decimals.

    The order of magnitude is discarded: 56726.535 and 5.6726535 both come
    out as 5.6726 at precision 4. The sign is kept.

    The digit string is taken from *value* rendered to *significant_digits*
    significant digits (half-up), or from its shortest exact decimal form
    when that rendering would be exponential. By default *significant_digits*
    equals *precision*, so 836.6272 gives 8.366 and 56726.535 gives 5.6726 at
    precision 4. Pass ``precision + 1`` to reproduce records written by the
    previous costing screens (8.3663 and 5.6727 for the same inputs).

    Args:
        value: Any number. None, NaN, zero and non-finite values give 0.
        precision: Number of decimals in the result, >= 1.
        significant_digits: Rendering width in [1, 100]; defaults to *precision*.

    Returns:
        The normalized value, or 0 when nothing can be formatted, including
        a precision or rendering width out of range.
    """
    number = as_number(value)
    if number == 0 or not math.isfinite(number):
        return 0

    width = precision if significant_digits is None else significant_digits
    if precision < 1 or not 1 <= width <= _MAX_SIGNIFICANT_DIGITS:
        return 0

    abs_value = abs(number)
    rendered = to_precision(abs_value, width)
    if "e" in rendered:
        rendered = to_plain_decimal(abs_value)

    digits = _NON_DIGITS.sub("", rendered)
    if not digits:
        return 0

    first_significant = next((i for i, ch in enumerate(digits) if ch != "0"), 0)
    significant = digits[first_significant:]
    decimals = significant[1 : precision + 1].ljust(precision, "0")

    formatted = float(f"{significant[0]}.{decimals}")
    if number < 0:
        formatted = -formatted
    return round_fixed(formatted, precision)


def format_weight(
    value: object,
    precision: int = DEFAULT_WEIGHT_PRECISION,
    significant_digits: int | None = None,
) -> float:
    """Weight display form, e.g. 56726.535 → 5.6726."""
    return format_magnitude_dropping_digits(value, precision, significant_digits)


def format_cost(
    value: object,
    precision: int = DEFAULT_COST_PRECISION,
    significant_digits: int | None = None,
) -> float:
    """Cost display form, e.g. 405.2356 → 4.05."""
    return format_magnitude_dropping_digits(value, precision, significant_digits)


def normalize_by_magnitude(value: object) -> NormalizedValue:
    """
    Rescale *value* into [1, 10), keeping the scale factor.

    Precision grows with magnitude: 4 decimals from 10^4 up, 3 from 10^2,
    2 below that.

    Examples:
        230.712  → NormalizedValue(2.307, 100, 2, 230.712)
        12543.62 → NormalizedValue(1.2544, 10000, 4, 12543.62)

    Non-positive, missing or non-finite values give
    ``NormalizedValue(0, 1, 0, 0)``.
    """
    number = as_number(value)
    if not number > 0 or not math.isfinite(number):
        return _ZERO_NORMALIZED

    magnitude = math.floor(math.log10(abs(number)))
    scale = math.pow(10, magnitude)
    normalized = number / scale

    if magnitude >= 4:
        precision = 4
    elif magnitude >= 2:
        precision = 3
    else:
        precision = 2

    return NormalizedValue(
        formatted=round_fixed(normalized, precision),
        scale=scale,
        magnitude=magnitude,
        original=number,
    )


# ── Display helpers ───────────────────────────────────────────────────────────


def format_currency(value: object, symbol: str = "₹") -> str:
    """Render an amount with two decimals, e.g. ``"₹12.30"``."""
    number = as_number(value)
    if math.isnan(number):
        return f"{symbol}0.00"
    return f"{symbol}{to_fixed(number, 2)}"


def format_percentage(value: object) -> str:
    """Render a percentage with two decimals, e.g. ``"12.35%"``."""
    number = as_number(value)
    if math.isnan(number):
        return "0%"
    return f"{to_fixed(number, 2)}%"


def format_date(value: date | datetime | str | None, fmt: str = "DD/MM/YYYY") -> str:
    """
    Render a date in one of the supported layouts.

    Strings are parsed as ISO 8601. Unparseable or missing values give an
    empty string; unknown layouts fall back to DD/MM/YYYY.
    """
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return ""

    template = DATE_FORMATS.get(fmt, DATE_FORMATS["DD/MM/YYYY"])
    return template.format(
        day=f"{value.day:02d}",
        month=f"{value.month:02d}",
        year=value.year,
    )
