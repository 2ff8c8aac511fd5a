from .accrual import (
    calculate_challan_interest,
    calculate_compound_interest,
    calculate_interest,
    calculate_simple_interest,
    challan_days_overdue,
    days_overdue,
    total_payable,
)
from .challan import calculate_challan_totals, calculate_item_totals, price_challan_items

__all__ = [
    # accrual
    "calculate_challan_interest",
    "calculate_compound_interest",
    "calculate_interest",
    "calculate_simple_interest",
    "challan_days_overdue",
    "days_overdue",
    "total_payable",
    # totals
    "calculate_challan_totals",
    "calculate_item_totals",
    "price_challan_items",
]
