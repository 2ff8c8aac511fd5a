"""
Estimate schema: fabric construction inputs and per-section weight/cost results.

A fabric estimate has a warp section, a weft section and an optional second
weft. Inputs are deliberately unvalidated: a missing value (None) flows
through the arithmetic as NaN and is zeroed by the formatter, exactly like
an incomplete estimate draft.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from textilecalc.utilities.conversion import DEFAULT_COST_PRECISION, DEFAULT_WEIGHT_PRECISION


@dataclass(frozen=True)
class WarpSegment:
    """
    Warp construction parameters.

    Attributes:
        tar: Warp ends count.
        denier: Yarn linear-mass density.
        wastage: Process loss in percent.
        yarn_price: Yarn price per kg, before GST.
        yarn_gst: GST on the yarn price, in percent.
    """

    tar: Optional[float]
    denier: Optional[float]
    wastage: Optional[float]
    yarn_price: Optional[float]
    yarn_gst: Optional[float]


@dataclass(frozen=True)
class WeftSegment:
    """
    Weft construction parameters (also used for the second weft).

    Attributes:
        peek: Pick density.
        panna: Fabric width in reed units.
        denier: Yarn linear-mass density.
        wastage: Process loss in percent.
        yarn_price: Yarn price per kg, before GST.
        yarn_gst: GST on the yarn price, in percent.
    """

    peek: Optional[float]
    panna: Optional[float]
    denier: Optional[float]
    wastage: Optional[float]
    yarn_price: Optional[float]
    yarn_gst: Optional[float]


@dataclass(frozen=True)
class SegmentResult:
    """
    Weight and cost of one fabric section.

    ``raw_*`` values are unrounded formula outputs. ``formatted_cost`` is
    always computed from ``formatted_weight``, never from ``raw_weight``.
    """

    raw_weight: float
    formatted_weight: float
    raw_cost: float
    formatted_cost: float


@dataclass(frozen=True)
class EstimateTotals:
    """Sums of the formatted section values, re-rounded to the configured precision."""

    total_weight: float
    total_cost: float


@dataclass(frozen=True)
class EstimateInput:
    """
    Everything calculate_estimate() needs for one fabric quality.

    Attributes:
        warp: Warp section.
        weft: Weft section.
        weft2_enabled: Whether the second weft takes part in the estimate.
        weft2: Second weft section; ignored unless weft2_enabled.
        other_cost_per_meter: Flat extra cost added to the total cost.
        weight_precision: Decimals for formatted weights.
        cost_precision: Decimals for formatted costs.
    """

    warp: WarpSegment
    weft: WeftSegment
    weft2_enabled: bool = False
    weft2: Optional[WeftSegment] = None
    other_cost_per_meter: Optional[float] = 0
    weight_precision: int = DEFAULT_WEIGHT_PRECISION
    cost_precision: int = DEFAULT_COST_PRECISION


@dataclass(frozen=True)
class EstimateResult:
    """Per-section results and totals; ``weft2`` is None when not computed."""

    warp: SegmentResult
    weft: SegmentResult
    weft2: Optional[SegmentResult]
    totals: EstimateTotals
