"""Pricing selection, price breakdown and booking payload models."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PricingType(str, Enum):
    """Rate tier a booking is charged at."""
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"


class PricingSelection(BaseModel):
    """
    Inputs to the pricing calculator.

    Values are constrained by the form controls that produce them;
    nothing here is range-checked.
    """
    pricing_type: PricingType = PricingType.HOURLY
    duration: int = 1
    guest_count: int = 1
    is_peak_time: bool = False
    selected_equipment: frozenset[str] = Field(default_factory=frozenset)
    insurance: bool = False
    insurance_type: str = "basic"


class PriceBreakdown(BaseModel):
    """Derived price summary, recomputed on every input change."""
    base_price: Decimal
    equipment_price: Decimal
    insurance_price: Decimal
    subtotal: Decimal
    discount_percent: Decimal
    discount_amount: Decimal
    total: Decimal
    deposit_amount: Decimal
    final_amount: Decimal


class BookingPayload(BaseModel):
    """Completed booking handed to the external submission handler."""
    studio_id: str
    session_id: str
    date: str
    start_time: str
    duration: int
    guest_count: int
    special_requests: str = ""
    equipment: list[str] = Field(default_factory=list)
    insurance_type: Optional[str] = None
    payment_method: str
    selection: PricingSelection
    pricing: PriceBreakdown
    created_at: datetime
