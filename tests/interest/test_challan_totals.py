"""Tests for challan line and document totals."""

from datetime import date

from textilecalc.interest.accrual import calculate_challan_interest
from textilecalc.interest.challan import (
    calculate_challan_totals,
    calculate_item_totals,
    price_challan_items,
)
from textilecalc.schemas.challan import (
    Challan,
    ChallanItem,
    ChallanStatus,
    InterestTracking,
    ItemTotals,
)

SATIN = ChallanItem(ordered_meters=100, weight_per_meter=0.125, price_per_meter=45.5)
CREPE = ChallanItem(ordered_meters=50.5, weight_per_meter=0.2, price_per_meter=20)


class TestItemTotals:
    def test_line(self):
        assert calculate_item_totals(SATIN) == ItemTotals(
            calculated_weight=12.5, calculated_amount=4550.0
        )

    def test_weight_rounded_to_four_decimals(self):
        item = ChallanItem(ordered_meters=3, weight_per_meter=0.123456, price_per_meter=1.5)
        totals = calculate_item_totals(item)
        assert totals.calculated_weight == 0.3704
        assert totals.calculated_amount == 4.5


class TestChallanTotals:
    def test_sums_lines(self):
        pairs = [(item, calculate_item_totals(item)) for item in (SATIN, CREPE)]
        totals = calculate_challan_totals(pairs)
        assert totals.total_meters == 150.5
        assert totals.total_weight == 22.6
        assert totals.subtotal_amount == 5560.0

    def test_missing_values_count_as_zero(self):
        blank = ChallanItem(ordered_meters=None, weight_per_meter=None, price_per_meter=None)
        pairs = [(SATIN, calculate_item_totals(SATIN)), (blank, calculate_item_totals(blank))]
        totals = calculate_challan_totals(pairs)
        assert totals.total_meters == 100
        assert totals.total_weight == 12.5
        assert totals.subtotal_amount == 4550.0

    def test_empty(self):
        totals = calculate_challan_totals([])
        assert (totals.total_meters, totals.total_weight, totals.subtotal_amount) == (0, 0, 0)

    def test_price_challan_items(self):
        priced, totals = price_challan_items([SATIN, CREPE])
        assert [item for item, _ in priced] == [SATIN, CREPE]
        assert priced[1][1].calculated_amount == 1010.0
        assert totals.subtotal_amount == 5560.0

    def test_subtotal_feeds_interest(self):
        """Without a tracked principal, interest accrues on the computed subtotal."""
        _, totals = price_challan_items([SATIN])
        challan = Challan(
            status=ChallanStatus.OPEN,
            due_date=date(2024, 1, 1),
            interest_tracking=InterestTracking(interest_rate=1, interest_type="simple"),
            totals=totals,
        )
        assert calculate_challan_interest(challan, today=date(2024, 1, 3)) == 91.0
