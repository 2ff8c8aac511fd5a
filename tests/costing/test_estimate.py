"""Tests for the estimate weight → cost pipeline."""

import math

import pytest

from textilecalc.costing.estimate import (
    apply_segment_defaults,
    build_estimate_input,
    calculate_estimate,
    calculate_raw_cost,
    calculate_warp_raw_weight,
    calculate_weft_raw_weight,
)
from textilecalc.schemas.estimate import EstimateInput, WarpSegment, WeftSegment
from textilecalc.settings.registry import get_settings


@pytest.fixture(scope="module")
def warp():
    """4000 ends of 50 denier at 10 % wastage, ₹200/kg + 5 % GST."""
    return WarpSegment(tar=4000, denier=50, wastage=10, yarn_price=200, yarn_gst=5)


@pytest.fixture(scope="module")
def weft():
    """50 picks × 48 panna of 75 denier at 10 % wastage, ₹180/kg + 5 % GST."""
    return WeftSegment(peek=50, panna=48, denier=75, wastage=10, yarn_price=180, yarn_gst=5)


class TestRawFormulas:
    def test_warp_raw_weight(self):
        assert calculate_warp_raw_weight(9, 1, 0) == 1.0
        assert calculate_warp_raw_weight(4000, 50, 10) == pytest.approx(24444.4444444)

    def test_weft_raw_weight(self):
        assert calculate_weft_raw_weight(3, 3, 1, 0) == 1.0
        assert calculate_weft_raw_weight(50, 48, 75, 10) == pytest.approx(22000.0)

    def test_raw_cost_includes_gst(self):
        assert calculate_raw_cost(2.0, 100, 5) == 210.0

    def test_missing_input_is_nan(self):
        assert math.isnan(calculate_warp_raw_weight(None, 50, 10))


class TestCalculateEstimate:
    def test_warp_section(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft))
        assert result.warp.formatted_weight == 2.4444
        assert result.warp.formatted_cost == 5.13

    def test_weft_section(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft))
        assert result.weft.formatted_weight == 2.2
        assert result.weft.formatted_cost == 4.15

    def test_cost_derives_from_formatted_weight(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft))
        assert result.warp.raw_cost == pytest.approx(result.warp.formatted_weight * 210)
        assert result.warp.raw_cost != pytest.approx(result.warp.raw_weight * 210)

    def test_totals_sum_formatted_values(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft))
        assert result.totals.total_weight == 4.6444
        assert result.totals.total_cost == 9.28

    def test_other_cost_added_to_total(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft, other_cost_per_meter=1.5))
        assert result.totals.total_cost == 10.78

    def test_missing_other_cost_counts_as_zero(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft, other_cost_per_meter=None))
        assert result.totals.total_cost == 9.28

    def test_second_weft_ignored_unless_enabled(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft, weft2=weft))
        assert result.weft2 is None
        assert result.totals.total_weight == 4.6444

    def test_second_weft_enabled(self, warp, weft):
        result = calculate_estimate(
            EstimateInput(warp=warp, weft=weft, weft2_enabled=True, weft2=weft)
        )
        assert result.weft2 == result.weft
        assert result.totals.total_weight == 6.8444
        assert result.totals.total_cost == 13.43

    def test_enabled_without_section(self, warp, weft):
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft, weft2_enabled=True))
        assert result.weft2 is None

    def test_incomplete_section_gives_zero(self, weft):
        draft = WarpSegment(tar=None, denier=50, wastage=10, yarn_price=200, yarn_gst=5)
        result = calculate_estimate(EstimateInput(warp=draft, weft=weft))
        assert math.isnan(result.warp.raw_weight)
        assert result.warp.formatted_weight == 0
        assert result.warp.formatted_cost == 0
        assert result.totals.total_weight == 2.2

    def test_missing_price_gives_zero_cost(self, weft):
        draft = WarpSegment(tar=4000, denier=50, wastage=10, yarn_price=None, yarn_gst=5)
        result = calculate_estimate(EstimateInput(warp=draft, weft=weft))
        assert result.warp.formatted_weight == 2.4444
        assert result.warp.formatted_cost == 0

    def test_cost_precision_limits_significant_digits(self, warp, weft):
        """513.324 renders as "513" at 3 significant digits, so the last decimal is 0."""
        result = calculate_estimate(EstimateInput(warp=warp, weft=weft, cost_precision=3))
        assert result.warp.formatted_cost == 5.13

    def test_idempotent(self, warp, weft):
        inputs = EstimateInput(warp=warp, weft=weft, weft2_enabled=True, weft2=weft)
        assert calculate_estimate(inputs) == calculate_estimate(inputs)


class TestSettingsDefaults:
    def test_missing_wastage_and_gst_filled(self):
        segment = WarpSegment(tar=4000, denier=50, wastage=None, yarn_price=200, yarn_gst=None)
        filled = apply_segment_defaults(segment, get_settings())
        assert filled.wastage == 10
        assert filled.yarn_gst == 5

    def test_explicit_values_kept(self, warp):
        assert apply_segment_defaults(warp, get_settings()) is warp

    def test_build_estimate_input(self, warp, weft):
        inputs = build_estimate_input(warp, weft, get_settings())
        assert inputs.weft2_enabled is False
        assert inputs.weight_precision == 4
        assert inputs.cost_precision == 2

    def test_build_with_second_weft(self, warp, weft):
        inputs = build_estimate_input(warp, weft, get_settings(), weft2=weft)
        assert inputs.weft2_enabled is True
        assert calculate_estimate(inputs).weft2 is not None
