"""
Booking form fields with per-field validation.

Each setter validates its input the way the wizard's form controls
constrain it (date picker, time select, duration select, guest select)
and leaves the form untouched when the value is rejected.

Usage:
    form = BookingForm(rate_card)
    ok, msg = form.set_date("2099-05-01")
    ok, msg = form.toggle_equipment("camera")
"""

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Optional

from studio_booking.availability.generator import slot_times
from studio_booking.pricing.calculator import is_peak_hour
from studio_booking.pricing.catalog import HOURLY_DURATIONS, PAYMENT_METHODS
from studio_booking.schemas.booking_schema import PricingSelection, PricingType
from studio_booking.schemas.studio_schema import StudioRateCard

NO_INSURANCE = "none"
MAX_SPECIAL_REQUESTS_LENGTH = 1000


def _parse_date(value: str) -> Optional[dt.date]:
    """Parse a YYYY-MM-DD date, or None if malformed."""
    try:
        return dt.datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


@dataclass
class BookingForm:
    """Values collected across the wizard steps."""

    rate_card: StudioRateCard
    date: str = ""
    start_time: str = ""
    duration: int = 1
    guest_count: int = 1
    special_requests: str = ""
    equipment: list[str] = field(default_factory=list)
    insurance_type: str = ""
    payment_method: str = "card"

    @property
    def insurance(self) -> bool:
        return bool(self.insurance_type) and self.insurance_type != NO_INSURANCE

    def set_date(self, value: str, today: Optional[dt.date] = None) -> tuple[bool, str]:
        parsed = _parse_date(value)
        if parsed is None:
            return False, f"The date '{value}' doesn't look right. Use YYYY-MM-DD."
        if parsed < (today or dt.date.today()):
            return False, f"The date {parsed.isoformat()} is in the past."
        self.date = parsed.isoformat()
        return True, f"Got date: {self.date}"

    def set_start_time(self, value: str) -> tuple[bool, str]:
        value = value.strip()
        if value not in slot_times():
            return False, f"'{value}' is not a bookable start time."
        self.start_time = value
        return True, f"Got start time: {value}"

    def set_duration(self, hours: int) -> tuple[bool, str]:
        if hours not in HOURLY_DURATIONS:
            return False, f"{hours} hours is not an available duration."
        self.duration = hours
        return True, f"Got duration: {hours} hour{'s' if hours > 1 else ''}"

    def set_guest_count(self, count: int) -> tuple[bool, str]:
        if not 1 <= count <= self.rate_card.capacity:
            return False, (
                f"Guest count must be between 1 and {self.rate_card.capacity}, got {count}."
            )
        self.guest_count = count
        return True, f"Got guest count: {count}"

    def set_special_requests(self, text: str) -> tuple[bool, str]:
        if len(text) > MAX_SPECIAL_REQUESTS_LENGTH:
            return False, "Special requests are too long."
        self.special_requests = text.strip()
        return True, "Special requests noted."

    def toggle_equipment(self, equipment_id: str) -> tuple[bool, str]:
        """Add the item if it is not selected, remove it if it is."""
        if equipment_id not in self.rate_card.equipment_ids():
            return False, f"Unknown equipment '{equipment_id}'."
        if equipment_id in self.equipment:
            self.equipment.remove(equipment_id)
            return True, f"Removed {equipment_id}."
        self.equipment.append(equipment_id)
        return True, f"Added {equipment_id}."

    def set_insurance_type(self, insurance_type: str) -> tuple[bool, str]:
        if insurance_type not in self.rate_card.insurance_ids():
            return False, f"Unknown insurance option '{insurance_type}'."
        self.insurance_type = insurance_type
        return True, f"Got insurance: {insurance_type}"

    def set_payment_method(self, method: str) -> tuple[bool, str]:
        method = method.lower().strip()
        if method not in PAYMENT_METHODS:
            return False, f"Unknown payment method '{method}'."
        self.payment_method = method
        return True, f"Paying by {PAYMENT_METHODS[method]}."

    def date_time_complete(self) -> bool:
        return bool(self.date and self.start_time and self.duration)

    def guests_complete(self) -> bool:
        return bool(self.guest_count)

    def to_selection(self) -> PricingSelection:
        """Project the form onto the pricing calculator's input."""
        return PricingSelection(
            pricing_type=PricingType.HOURLY,
            duration=self.duration,
            guest_count=self.guest_count,
            is_peak_time=bool(self.start_time) and is_peak_hour(self.start_time),
            selected_equipment=frozenset(self.equipment),
            insurance=self.insurance,
            insurance_type=self.insurance_type or NO_INSURANCE,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "start_time": self.start_time,
            "duration": self.duration,
            "guest_count": self.guest_count,
            "special_requests": self.special_requests,
            "equipment": list(self.equipment),
            "insurance_type": self.insurance_type or None,
            "payment_method": self.payment_method,
        }
