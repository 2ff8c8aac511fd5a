"""
Fixed-decimal rounding and number coercion shared by every calculator.

Persisted business records were produced by JavaScript's ``Number.toFixed``
and ``Number.toPrecision``, which round the exact binary value of a double
half away from zero. Python's built-in ``round()`` rounds half to even, so it
must never be used for a value that is stored or compared against stored
records. Everything here goes through ``decimal`` on the exact binary value.

All functions are pure.
"""

from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal

# The exact decimal expansion of a double has at most 767 significant digits;
# the context must never round before the final quantize does.
_CONTEXT = Context(prec=800)
_FIXED_NOTATION_LIMIT: float = 1e21


def as_number(value: object) -> float:
    """
    Coerce a calculator input to float.

    ``None`` and anything that is not a real number become NaN, so missing
    inputs flow through arithmetic and are zeroed by the formatters.
    """
    if isinstance(value, (numbers.Real, Decimal)):
        return float(value)
    return math.nan


def to_fixed(value: float, digits: int) -> str:
    """Render *value* with exactly *digits* fractional digits, as ``toFixed`` does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude >= _FIXED_NOTATION_LIMIT:
        return sign + repr(magnitude)
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(magnitude).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return sign + format(rounded, "f")


def round_fixed(value: float, digits: int) -> float:
    """Round half away from zero on the exact binary value; ``Number(x.toFixed(d))``."""
    return float(to_fixed(value, digits))


def to_precision(value: float, precision: int) -> str:
    """
    Render *value* with *precision* significant digits, as ``toPrecision`` does.

    Fixed notation is used when the decimal exponent lies in
    ``[-6, precision)``; otherwise the result is exponential
    (e.g. ``"5.673e+4"``).

    Raises:
        ValueError: If precision is outside [1, 100].
    """
    if not 1 <= precision <= 100:
        raise ValueError(f"precision must be in [1, 100], got {precision}")
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    sign = "-" if value < 0 else ""
    if value == 0:
        return "0" if precision == 1 else "0." + "0" * (precision - 1)

    exact = Decimal(abs(value))
    exponent = exact.adjusted()
    scaled = exact.scaleb(precision - 1 - exponent, context=_CONTEXT)
    n = int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP, context=_CONTEXT))
    if n == 10**precision:
        n //= 10
        exponent += 1
    digits = str(n)

    if exponent < -6 or exponent >= precision:
        mantissa = digits[0] if precision == 1 else f"{digits[0]}.{digits[1:]}"
        exp_sign = "+" if exponent >= 0 else "-"
        return f"{sign}{mantissa}e{exp_sign}{abs(exponent)}"
    if exponent == precision - 1:
        return sign + digits
    if exponent >= 0:
        return f"{sign}{digits[: exponent + 1]}.{digits[exponent + 1 :]}"
    return f"{sign}0.{'0' * (-(exponent + 1))}{digits}"


def to_plain_decimal(value: float, max_fraction_digits: int = 20) -> str:
    """
    Shortest round-trip decimal form of *value*, never in exponential notation.

    Fractional digits beyond *max_fraction_digits* are rounded half away from
    zero. No grouping separators are emitted.
    """
    shortest = Decimal(repr(value))
    exponent = shortest.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -max_fraction_digits:
        shortest = shortest.quantize(
            Decimal(1).scaleb(-max_fraction_digits), rounding=ROUND_HALF_UP, context=_CONTEXT
        )
    return format(shortest, "f")


def clamp(value: float, lower: float, upper: float) -> float:
    """Constrain *value* to the closed interval [lower, upper]."""
    return min(upper, max(lower, value))


def number_or_zero(value: object) -> float:
    """Coerce *value* to float, treating None, NaN and non-numbers as 0."""
    number = as_number(value)
    return 0 if math.isnan(number) else number


def number_to_string(value: float) -> str:
    """Render a number the way a JavaScript template literal does (``8`` not ``8.0``)."""
    if isinstance(value, float) and value.is_integer() and abs(value) < _FIXED_NOTATION_LIMIT:
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def to_grouped(value: float, max_fraction_digits: int = 3) -> str:
    """Thousands-grouped rendering with trailing fractional zeros dropped, e.g. ``"1,234.5"``."""
    fixed = to_fixed(value, max_fraction_digits)
    if "." in fixed:
        fixed = fixed.rstrip("0").rstrip(".")
    integer, _, fraction = fixed.partition(".")
    grouped = f"{int(integer):,}"
    return f"{grouped}.{fraction}" if fraction else grouped


def is_truthy(value: object) -> bool:
    """True for a nonzero, non-NaN number; False for 0, NaN, None and non-numbers."""
    number = as_number(value)
    return number != 0 and not math.isnan(number)
