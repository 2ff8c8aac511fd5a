"""
Record types exchanged between callers and the calculation core.

All records are frozen dataclasses created per call; none hold state
between calls.
"""

from .challan import (
    Challan,
    ChallanItem,
    ChallanStatus,
    ChallanTotals,
    InterestTracking,
    InterestType,
    ItemTotals,
)
from .estimate import (
    EstimateInput,
    EstimateResult,
    EstimateTotals,
    SegmentResult,
    WarpSegment,
    WeftSegment,
)
from .production import (
    DailyProduction,
    MonthlyProduction,
    ProductionFormulas,
    ProductionParams,
    ProductionResult,
)
from .validation import ValidationResult
from .weaving import (
    BeamWeight,
    LoomAvailability,
    LoomStatus,
    LoomStatusDisplay,
    Variance,
    YarnWastage,
)
from .yarn import YarnCategory, YarnIdentity

__all__ = [
    # challan
    "Challan",
    "ChallanItem",
    "ChallanStatus",
    "ChallanTotals",
    "InterestTracking",
    "InterestType",
    "ItemTotals",
    # estimate
    "EstimateInput",
    "EstimateResult",
    "EstimateTotals",
    "SegmentResult",
    "WarpSegment",
    "WeftSegment",
    # production
    "DailyProduction",
    "MonthlyProduction",
    "ProductionFormulas",
    "ProductionParams",
    "ProductionResult",
    # validation
    "ValidationResult",
    # weaving
    "BeamWeight",
    "LoomAvailability",
    "LoomStatus",
    "LoomStatusDisplay",
    "Variance",
    "YarnWastage",
    # yarn
    "YarnCategory",
    "YarnIdentity",
]
