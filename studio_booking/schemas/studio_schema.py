"""Studio rate card models supplied by the external data layer."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from studio_booking.config import settings


class StudioRates(BaseModel):
    """Base rates for each pricing tier."""
    hourly: Decimal
    daily: Decimal
    weekly: Decimal
    peak_hourly: Decimal
    off_peak_hourly: Decimal


class GroupDiscountTier(BaseModel):
    """Discount granted once a booking reaches ``min_guests``."""
    min_guests: int
    discount_percent: Decimal


class EquipmentItem(BaseModel):
    """Rentable add-on equipment."""
    id: str
    name: str
    price: Decimal
    description: str = ""


class InsuranceOption(BaseModel):
    """Damage cover offered at checkout."""
    id: str
    name: str
    price: Decimal
    description: str = ""


def _default_insurance_options() -> list[InsuranceOption]:
    from studio_booking.pricing.catalog import INSURANCE_OPTIONS

    return [InsuranceOption(**option) for option in INSURANCE_OPTIONS]


class StudioRateCard(BaseModel):
    """Everything the pricing calculator needs to know about a studio."""
    studio_id: str
    title: str
    rates: StudioRates
    group_discounts: list[GroupDiscountTier] = Field(default_factory=list)
    equipment: list[EquipmentItem] = Field(default_factory=list)
    insurance_options: list[InsuranceOption] = Field(
        default_factory=_default_insurance_options
    )
    capacity: int = settings.wizard.default_capacity
    instant_booking: bool = False
    location: Optional[str] = None

    def equipment_ids(self) -> set[str]:
        return {item.id for item in self.equipment}

    def insurance_ids(self) -> set[str]:
        return {option.id for option in self.insurance_options}
