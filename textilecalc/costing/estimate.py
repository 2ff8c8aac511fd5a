"""
Estimate calculator: fabric construction → yarn weight → yarn cost, per section.

Each section (warp, weft, optional second weft) runs the same four steps:

    1. raw weight       warp: (tar × denier × wastage) / 9
                        weft: (peek × panna × denier × wastage) / 9
    2. formatted weight format_weight(raw weight)
    3. raw cost         formatted weight × (price + GST amount)
    4. formatted cost   format_cost(raw cost)

Cost is computed from the formatted weight, not the raw one, and the totals
add up formatted section values. Stored estimates depend on both; neither
may be "corrected" to use raw values.

No validation is performed. Missing inputs become NaN and the formatter turns
them into 0, which callers treat as "not computable yet".
"""

from __future__ import annotations

import dataclasses

from textilecalc.schemas.estimate import (
    EstimateInput,
    EstimateResult,
    EstimateTotals,
    SegmentResult,
    WarpSegment,
    WeftSegment,
)
from textilecalc.settings.registry import CalculationSettings
from textilecalc.utilities.conversion import YARN_WEIGHT_DIVISOR, wastage_multiplier
from textilecalc.utilities.formatting import format_cost, format_weight
from textilecalc.utilities.rounding import as_number, number_or_zero, round_fixed


def calculate_warp_raw_weight(tar: object, denier: object, wastage_percent: object) -> float:
    """(Tar × Denier × (1 + wastage/100)) / 9"""
    multiplier = wastage_multiplier(as_number(wastage_percent))
    return (as_number(tar) * as_number(denier) * multiplier) / YARN_WEIGHT_DIVISOR


def calculate_weft_raw_weight(
    peek: object, panna: object, denier: object, wastage_percent: object
) -> float:
    """(Peek × Panna × Denier × (1 + wastage/100)) / 9"""
    multiplier = wastage_multiplier(as_number(wastage_percent))
    return (
        as_number(peek) * as_number(panna) * as_number(denier) * multiplier
    ) / YARN_WEIGHT_DIVISOR


def calculate_raw_cost(formatted_weight: float, yarn_price: object, gst_percentage: object) -> float:
    """Formatted weight × (yarn price + GST amount on that price)."""
    price = as_number(yarn_price)
    gst_amount = (price * as_number(gst_percentage)) / 100
    return formatted_weight * (price + gst_amount)


def _price_segment(
    raw_weight: float,
    yarn_price: object,
    yarn_gst: object,
    weight_precision: int,
    cost_precision: int,
) -> SegmentResult:
    formatted_weight = format_weight(raw_weight, weight_precision)
    raw_cost = calculate_raw_cost(formatted_weight, yarn_price, yarn_gst)
    return SegmentResult(
        raw_weight=raw_weight,
        formatted_weight=formatted_weight,
        raw_cost=raw_cost,
        formatted_cost=format_cost(raw_cost, cost_precision),
    )


def calculate_warp_segment(
    warp: WarpSegment, weight_precision: int, cost_precision: int
) -> SegmentResult:
    raw_weight = calculate_warp_raw_weight(warp.tar, warp.denier, warp.wastage)
    return _price_segment(
        raw_weight, warp.yarn_price, warp.yarn_gst, weight_precision, cost_precision
    )


def calculate_weft_segment(
    weft: WeftSegment, weight_precision: int, cost_precision: int
) -> SegmentResult:
    raw_weight = calculate_weft_raw_weight(weft.peek, weft.panna, weft.denier, weft.wastage)
    return _price_segment(
        raw_weight, weft.yarn_price, weft.yarn_gst, weight_precision, cost_precision
    )


def calculate_estimate(inputs: EstimateInput) -> EstimateResult:
    """
    Compute weight and cost for every section of an estimate, plus totals.

    The second weft is included only when ``weft2_enabled`` is set and a
    ``weft2`` section is given; otherwise ``result.weft2`` is None.

    Totals:
        total_weight = round(Σ formatted weights, weight_precision)
        total_cost   = round(Σ formatted costs + other cost per meter, cost_precision)

    Never raises for numeric input.
    """
    wp, cp = inputs.weight_precision, inputs.cost_precision

    warp = calculate_warp_segment(inputs.warp, wp, cp)
    weft = calculate_weft_segment(inputs.weft, wp, cp)
    weft2 = (
        calculate_weft_segment(inputs.weft2, wp, cp)
        if inputs.weft2_enabled and inputs.weft2
        else None
    )

    total_weight = (
        warp.formatted_weight + weft.formatted_weight + (weft2.formatted_weight if weft2 else 0)
    )
    total_cost = (
        warp.formatted_cost
        + weft.formatted_cost
        + (weft2.formatted_cost if weft2 else 0)
        + number_or_zero(inputs.other_cost_per_meter)
    )

    return EstimateResult(
        warp=warp,
        weft=weft,
        weft2=weft2,
        totals=EstimateTotals(
            total_weight=round_fixed(total_weight, wp),
            total_cost=round_fixed(total_cost, cp),
        ),
    )


# ── Settings integration ──────────────────────────────────────────────────────


def apply_segment_defaults(
    segment: WarpSegment | WeftSegment, settings: CalculationSettings
) -> WarpSegment | WeftSegment:
    """Fill a section's missing wastage and GST from the company settings."""
    changes: dict[str, float] = {}
    if segment.wastage is None:
        changes["wastage"] = settings.default_wastage
    if segment.yarn_gst is None:
        changes["yarn_gst"] = settings.default_gst_percentage
    return dataclasses.replace(segment, **changes) if changes else segment


def build_estimate_input(
    warp: WarpSegment,
    weft: WeftSegment,
    settings: CalculationSettings,
    weft2: WeftSegment | None = None,
    other_cost_per_meter: float | None = 0,
) -> EstimateInput:
    """
    Assemble an EstimateInput with section defaults and precision from *settings*.

    The second weft is enabled exactly when one is given.
    """
    return EstimateInput(
        warp=apply_segment_defaults(warp, settings),
        weft=apply_segment_defaults(weft, settings),
        weft2_enabled=weft2 is not None,
        weft2=apply_segment_defaults(weft2, settings) if weft2 is not None else None,
        other_cost_per_meter=other_cost_per_meter,
        weight_precision=settings.weight_precision,
        cost_precision=settings.cost_precision,
    )
