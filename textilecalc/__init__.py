"""
textilecalc: deterministic calculation core for a textile manufacturing ERP.

Costing estimates, production projections, challan interest, weaving floor
metrics and yarn naming. Every calculator is a pure function over frozen
records; persisted values are reproduced digit for digit.
"""

from .costing import (
    apply_segment_defaults,
    build_estimate_input,
    calculate_estimate,
    calculate_raw_cost,
    calculate_warp_raw_weight,
    calculate_warp_segment,
    calculate_weft_raw_weight,
    calculate_weft_segment,
)
from .interest import (
    calculate_challan_interest,
    calculate_challan_totals,
    calculate_compound_interest,
    calculate_interest,
    calculate_item_totals,
    calculate_simple_interest,
    challan_days_overdue,
    days_overdue,
    price_challan_items,
    total_payable,
)
from .production import (
    ProductionValidationError,
    calculate_actual_efficiency,
    calculate_loom_utilization,
    calculate_production,
    calculate_raw_picks,
    calculate_raw_production,
    calculate_theoretical_production,
    format_loom_status,
    get_loom_availability,
    get_production_breakdown,
    validate_production_inputs,
    validate_production_log_entry,
)
from .schemas import (
    BeamWeight,
    Challan,
    ChallanItem,
    ChallanStatus,
    ChallanTotals,
    DailyProduction,
    EstimateInput,
    EstimateResult,
    EstimateTotals,
    InterestTracking,
    InterestType,
    ItemTotals,
    LoomAvailability,
    LoomStatus,
    LoomStatusDisplay,
    MonthlyProduction,
    ProductionFormulas,
    ProductionParams,
    ProductionResult,
    SegmentResult,
    ValidationResult,
    Variance,
    WarpSegment,
    WeftSegment,
    YarnCategory,
    YarnIdentity,
    YarnWastage,
)
from .settings import CalculationSettings, SettingsRegistry, get_registry, get_settings
from .utilities import (
    NormalizedValue,
    format_cost,
    format_currency,
    format_date,
    format_magnitude_dropping_digits,
    format_percentage,
    format_weight,
    normalize_by_magnitude,
    round_fixed,
)
from .weaving import (
    calculate_actual_picks,
    calculate_beam_weight,
    calculate_defect_rate,
    calculate_efficiency,
    calculate_gsm,
    calculate_meters_per_hour,
    calculate_theoretical_yarn_consumption,
    calculate_utilization,
    calculate_variance,
    calculate_warp_consumption,
    calculate_yarn_wastage,
    generate_beam_number,
    generate_roll_number,
    update_remaining_length,
    validate_yarn_stock_transaction,
)
from .yarn import (
    generate_yarn_display_name,
    get_yarn_category_label,
    get_yarn_short_display,
    parse_yarn_display_name,
)

__all__ = [
    # records
    "BeamWeight",
    "Challan",
    "ChallanItem",
    "ChallanStatus",
    "ChallanTotals",
    "DailyProduction",
    "EstimateInput",
    "EstimateResult",
    "EstimateTotals",
    "InterestTracking",
    "InterestType",
    "ItemTotals",
    "LoomAvailability",
    "LoomStatus",
    "LoomStatusDisplay",
    "MonthlyProduction",
    "NormalizedValue",
    "ProductionFormulas",
    "ProductionParams",
    "ProductionResult",
    "SegmentResult",
    "ValidationResult",
    "Variance",
    "WarpSegment",
    "WeftSegment",
    "YarnCategory",
    "YarnIdentity",
    "YarnWastage",
    # settings
    "CalculationSettings",
    "SettingsRegistry",
    "get_registry",
    "get_settings",
    # formatting
    "format_cost",
    "format_currency",
    "format_date",
    "format_magnitude_dropping_digits",
    "format_percentage",
    "format_weight",
    "normalize_by_magnitude",
    "round_fixed",
    # costing
    "apply_segment_defaults",
    "build_estimate_input",
    "calculate_estimate",
    "calculate_raw_cost",
    "calculate_warp_raw_weight",
    "calculate_warp_segment",
    "calculate_weft_raw_weight",
    "calculate_weft_segment",
    # production
    "ProductionValidationError",
    "calculate_actual_efficiency",
    "calculate_loom_utilization",
    "calculate_production",
    "calculate_raw_picks",
    "calculate_raw_production",
    "calculate_theoretical_production",
    "format_loom_status",
    "get_loom_availability",
    "get_production_breakdown",
    "validate_production_inputs",
    "validate_production_log_entry",
    # interest
    "calculate_challan_interest",
    "calculate_challan_totals",
    "calculate_compound_interest",
    "calculate_interest",
    "calculate_item_totals",
    "calculate_simple_interest",
    "challan_days_overdue",
    "days_overdue",
    "price_challan_items",
    "total_payable",
    # weaving
    "calculate_actual_picks",
    "calculate_beam_weight",
    "calculate_defect_rate",
    "calculate_efficiency",
    "calculate_gsm",
    "calculate_meters_per_hour",
    "calculate_theoretical_yarn_consumption",
    "calculate_utilization",
    "calculate_variance",
    "calculate_warp_consumption",
    "calculate_yarn_wastage",
    "generate_beam_number",
    "generate_roll_number",
    "update_remaining_length",
    "validate_yarn_stock_transaction",
    # yarn
    "generate_yarn_display_name",
    "get_yarn_category_label",
    "get_yarn_short_display",
    "parse_yarn_display_name",
]
