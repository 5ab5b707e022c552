from studio_booking.pricing.calculator import (
    calculate_base_price,
    calculate_equipment_price,
    calculate_insurance_price,
    calculate_price_breakdown,
    is_peak_hour,
    per_person_share,
    select_group_discount,
    split_deposit,
)

__all__ = [
    "calculate_base_price",
    "calculate_equipment_price",
    "calculate_insurance_price",
    "calculate_price_breakdown",
    "is_peak_hour",
    "per_person_share",
    "select_group_discount",
    "split_deposit",
]
