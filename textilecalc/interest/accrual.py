"""
Interest accrual on overdue challans.

Interest is charged per calendar day past the due date, at a rate given in
percent per day:

    simple:    I = P × r × t
    compound:  I = P × (1 + r)^t − P

where r is the daily rate as a decimal and t the whole days overdue. Both
are rounded half-up to 2 decimals.

A challan that is Paid or Cancelled accrues nothing, whatever its due date.
Overdue is never stored: it is derived from the current date on every call,
so ``today`` can be injected for reproducible results.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

from textilecalc.schemas.challan import Challan, ChallanStatus, InterestType
from textilecalc.utilities.rounding import number_or_zero, round_fixed

_ONE_DAY = timedelta(days=1)
_TERMINAL_STATUSES = (ChallanStatus.PAID, ChallanStatus.CANCELLED)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def _comparable(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    """Make a naive/aware pair comparable by reading naive values as UTC."""
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    if a.tzinfo is None:
        a = a.replace(tzinfo=timezone.utc)
    else:
        b = b.replace(tzinfo=timezone.utc)
    return a, b


def days_overdue(due_date: date | datetime, today: date | datetime | None = None) -> int:
    """
    Whole days elapsed since *due_date*; 0 if *today* is on or before it.

    Args:
        due_date: Date the balance fell due. A plain date means midnight.
        today: Reference time; defaults to the current UTC time.
    """
    now = _as_datetime(today) if today is not None else datetime.now(timezone.utc)
    due = _as_datetime(due_date)
    now, due = _comparable(now, due)

    if now <= due:
        return 0
    return (now - due) // _ONE_DAY


def calculate_simple_interest(principal: float, rate_percent_per_day: float, days: int) -> float:
    """P × (rate/100) × days, 2 dp; 0 when days or rate is not positive."""
    if days <= 0 or rate_percent_per_day <= 0:
        return 0

    rate = rate_percent_per_day / 100
    return round_fixed(principal * rate * days, 2)


def calculate_compound_interest(principal: float, rate_percent_per_day: float, days: int) -> float:
    """P × (1 + rate/100)^days − P, 2 dp; 0 when days or rate is not positive."""
    if days <= 0 or rate_percent_per_day <= 0:
        return 0

    rate = rate_percent_per_day / 100
    amount = principal * math.pow(1 + rate, days)
    return round_fixed(amount - principal, 2)


def calculate_interest(
    principal: float,
    rate_percent_per_day: float,
    days: int,
    interest_type: InterestType | str = InterestType.COMPOUND,
) -> float:
    """Simple interest for ``"simple"``; compound for anything else."""
    if interest_type == InterestType.SIMPLE:
        return calculate_simple_interest(principal, rate_percent_per_day, days)
    return calculate_compound_interest(principal, rate_percent_per_day, days)


def challan_days_overdue(challan: Challan, today: date | datetime | None = None) -> int:
    """Days overdue for display; always 0 once the challan is Paid or Cancelled."""
    if challan.status in _TERMINAL_STATUSES:
        return 0
    return days_overdue(challan.due_date, today)


def calculate_challan_interest(challan: Challan, today: date | datetime | None = None) -> float:
    """
    Interest accrued on *challan* as of *today*.

    The principal is the tracked principal amount, or the challan subtotal
    when none was tracked. Missing rates count as 0 and missing interest
    types as compound.
    """
    if challan.status in _TERMINAL_STATUSES:
        return 0

    days = days_overdue(challan.due_date, today)
    if days <= 0:
        return 0

    tracking = challan.interest_tracking
    principal = (
        tracking.principal_amount
        if tracking.principal_amount is not None
        else challan.totals.subtotal_amount
    )
    rate = number_or_zero(tracking.interest_rate)
    interest_type = tracking.interest_type or InterestType.COMPOUND

    return calculate_interest(principal, rate, days, interest_type)


def total_payable(challan: Challan) -> float:
    """Subtotal plus the interest last accrued on the document."""
    return challan.totals.subtotal_amount + (challan.interest_tracking.interest_accrued or 0)
