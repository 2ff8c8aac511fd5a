"""
Challan line and document totals.

The document subtotal computed here is what interest accrues on when no
explicit principal was tracked.
"""

from __future__ import annotations

from collections.abc import Iterable

from textilecalc.schemas.challan import ChallanItem, ChallanTotals, ItemTotals
from textilecalc.utilities.rounding import as_number, number_or_zero, round_fixed


def calculate_item_totals(item: ChallanItem) -> ItemTotals:
    """Weight (4 dp) and amount (2 dp) for one line: meters × per-meter values."""
    meters = as_number(item.ordered_meters)
    return ItemTotals(
        calculated_weight=round_fixed(meters * as_number(item.weight_per_meter), 4),
        calculated_amount=round_fixed(meters * as_number(item.price_per_meter), 2),
    )


def calculate_challan_totals(
    items: Iterable[tuple[ChallanItem, ItemTotals]],
) -> ChallanTotals:
    """
    Sum meters, weight and amount over priced lines.

    Each element pairs a line with its calculate_item_totals() result.
    Missing values count as 0. Meters and amount are rounded to 2 dp,
    weight to 4 dp.
    """
    total_meters = 0.0
    total_weight = 0.0
    subtotal_amount = 0.0
    for item, totals in items:
        total_meters += number_or_zero(item.ordered_meters)
        total_weight += number_or_zero(totals.calculated_weight)
        subtotal_amount += number_or_zero(totals.calculated_amount)

    return ChallanTotals(
        total_meters=round_fixed(total_meters, 2),
        total_weight=round_fixed(total_weight, 4),
        subtotal_amount=round_fixed(subtotal_amount, 2),
    )


def price_challan_items(
    items: Iterable[ChallanItem],
) -> tuple[list[tuple[ChallanItem, ItemTotals]], ChallanTotals]:
    """Price every line, then total the document."""
    priced = [(item, calculate_item_totals(item)) for item in items]
    return priced, calculate_challan_totals(priced)
