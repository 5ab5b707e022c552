from studio_booking.schemas.availability_schema import DayAvailability, SlotStatus, TimeSlot
from studio_booking.schemas.booking_schema import (
    BookingPayload,
    PriceBreakdown,
    PricingSelection,
    PricingType,
)
from studio_booking.schemas.studio_schema import (
    EquipmentItem,
    GroupDiscountTier,
    InsuranceOption,
    StudioRateCard,
    StudioRates,
)

__all__ = [
    "BookingPayload",
    "DayAvailability",
    "EquipmentItem",
    "GroupDiscountTier",
    "InsuranceOption",
    "PriceBreakdown",
    "PricingSelection",
    "PricingType",
    "SlotStatus",
    "StudioRateCard",
    "StudioRates",
    "TimeSlot",
]
