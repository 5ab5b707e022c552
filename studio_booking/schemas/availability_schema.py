"""Availability calendar data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SlotStatus(str, Enum):
    """How a slot is presented to the guest."""
    BOOKED = "booked"
    INSTANT = "instant"
    REQUEST = "request"


@dataclass
class TimeSlot:
    """A single hourly slot on a given day."""
    time: str
    available: bool
    instant_bookable: bool = False
    booked_by: Optional[str] = None


@dataclass
class DayAvailability:
    """All slots for one calendar date, in time order."""
    date: str
    slots: list[TimeSlot] = field(default_factory=list)

    @property
    def fully_booked(self) -> bool:
        return not any(slot.available for slot in self.slots)

    @property
    def has_available_slots(self) -> bool:
        return not self.fully_booked

    def available_times(self) -> list[str]:
        return [slot.time for slot in self.slots if slot.available]
