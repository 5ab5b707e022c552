"""Shared test fixtures and helpers."""

from decimal import Decimal
from typing import Optional

import pytest

from studio_booking.pricing.catalog import EQUIPMENT_CATALOG
from studio_booking.schemas.availability_schema import DayAvailability, TimeSlot
from studio_booking.schemas.booking_schema import PricingSelection, PricingType
from studio_booking.schemas.studio_schema import StudioRateCard
from studio_booking.wizard.state_machine import BookingWizard

FUTURE_DATE = "2099-05-01"


def make_rate_card(**overrides) -> StudioRateCard:
    """Rate card with peak and off-peak rates of 500 / 400 and one 10% tier at 4 guests."""
    data = {
        "studio_id": "studio-1",
        "title": "Test Studio",
        "rates": {
            "hourly": 500,
            "daily": 3000,
            "weekly": 15000,
            "peak_hourly": 500,
            "off_peak_hourly": 400,
        },
        "group_discounts": [{"min_guests": 4, "discount_percent": 10}],
        "equipment": EQUIPMENT_CATALOG,
        "capacity": 10,
        "instant_booking": True,
    }
    data.update(overrides)
    return StudioRateCard.model_validate(data)


def make_selection(**overrides) -> PricingSelection:
    """PricingSelection with hourly, 1 hour, 1 guest defaults."""
    data = {
        "pricing_type": PricingType.HOURLY,
        "duration": 1,
        "guest_count": 1,
        "is_peak_time": False,
        "selected_equipment": frozenset(),
        "insurance": False,
    }
    data.update(overrides)
    return PricingSelection(**data)


def make_day(day: str = FUTURE_DATE, available: Optional[list[bool]] = None) -> DayAvailability:
    """Day with one slot per flag, starting at 09:00."""
    flags = available if available is not None else [True, False, True]
    return DayAvailability(
        date=day,
        slots=[TimeSlot(time=f"{9 + i:02d}:00", available=f) for i, f in enumerate(flags)],
    )


@pytest.fixture
def rate_card():
    return make_rate_card()


@pytest.fixture
def completed_bookings():
    return []


@pytest.fixture
def wizard(rate_card, completed_bookings):
    return BookingWizard(rate_card, on_booking_complete=completed_bookings.append)


@pytest.fixture
def filled_wizard(wizard):
    """Wizard with step one filled in, still on step one."""
    wizard.update("set_date", FUTURE_DATE)
    wizard.update("set_start_time", "14:00")
    wizard.update("set_duration", 3)
    return wizard


def money(value) -> Decimal:
    return Decimal(str(value))
