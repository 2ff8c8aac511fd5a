from .estimate import (
    apply_segment_defaults,
    build_estimate_input,
    calculate_estimate,
    calculate_raw_cost,
    calculate_warp_raw_weight,
    calculate_warp_segment,
    calculate_weft_raw_weight,
    calculate_weft_segment,
)

__all__ = [
    "apply_segment_defaults",
    "build_estimate_input",
    "calculate_estimate",
    "calculate_raw_cost",
    "calculate_warp_raw_weight",
    "calculate_warp_segment",
    "calculate_weft_raw_weight",
    "calculate_weft_segment",
]
