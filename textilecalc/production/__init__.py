from .loom import (
    calculate_actual_efficiency,
    calculate_loom_utilization,
    calculate_theoretical_production,
    format_loom_status,
    get_loom_availability,
    validate_production_log_entry,
)
from .rates import (
    ProductionValidationError,
    calculate_production,
    calculate_raw_picks,
    calculate_raw_production,
    get_production_breakdown,
    validate_production_inputs,
)

__all__ = [
    # rates
    "ProductionValidationError",
    "calculate_production",
    "calculate_raw_picks",
    "calculate_raw_production",
    "get_production_breakdown",
    "validate_production_inputs",
    # loom
    "calculate_actual_efficiency",
    "calculate_loom_utilization",
    "calculate_theoretical_production",
    "format_loom_status",
    "get_loom_availability",
    "validate_production_log_entry",
]
