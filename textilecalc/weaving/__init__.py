from .consumption import (
    DEFAULT_CRIMP_PERCENTAGE,
    DEFAULT_THEORETICAL_WASTAGE,
    calculate_gsm,
    calculate_theoretical_yarn_consumption,
    calculate_warp_consumption,
    calculate_yarn_wastage,
    generate_beam_number,
    generate_roll_number,
    validate_yarn_stock_transaction,
)
from .floor import (
    calculate_actual_picks,
    calculate_beam_weight,
    calculate_defect_rate,
    calculate_efficiency,
    calculate_meters_per_hour,
    calculate_utilization,
    calculate_variance,
    update_remaining_length,
)

__all__ = [
    # floor
    "calculate_actual_picks",
    "calculate_beam_weight",
    "calculate_defect_rate",
    "calculate_efficiency",
    "calculate_meters_per_hour",
    "calculate_utilization",
    "calculate_variance",
    "update_remaining_length",
    # consumption
    "DEFAULT_CRIMP_PERCENTAGE",
    "DEFAULT_THEORETICAL_WASTAGE",
    "calculate_gsm",
    "calculate_theoretical_yarn_consumption",
    "calculate_warp_consumption",
    "calculate_yarn_wastage",
    "generate_beam_number",
    "generate_roll_number",
    "validate_yarn_stock_transaction",
]
