"""
Mock studio availability calendar.

Generates a per-day grid of hourly slots for the booking window. There
is no backing store: every call produces a fresh random calendar. In
production this would be replaced by the booking service's calendar.
"""

import logging
import random
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, TypedDict

from studio_booking.config import settings
from studio_booking.schemas.availability_schema import (
    DayAvailability,
    SlotStatus,
    TimeSlot,
)

logger = logging.getLogger(__name__)


class ExistingBooking(TypedDict):
    """Minimal shape of a booking row that occupies studio time."""

    start_time: str
    duration_hours: int


def slot_times() -> list[str]:
    """Hourly slot labels from the first to the last bookable hour."""
    cfg = settings.availability
    return [f"{h:02d}:00" for h in range(cfg.first_slot_hour, cfg.last_slot_hour + 1)]


def generate_availability(
    instant_booking: bool,
    days: Optional[int] = None,
    start: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> list[DayAvailability]:
    """Generate a mock calendar starting at ``start`` (default today).

    Each slot is available with the configured probability (70%) and,
    only when the studio offers instant booking, instant-bookable with
    the configured probability (80%).
    """
    cfg = settings.availability
    days = cfg.window_days if days is None else days
    start = start or date.today()
    rng = rng or random.Random()
    times = slot_times()

    calendar: list[DayAvailability] = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        slots = [
            TimeSlot(
                time=t,
                available=rng.random() < cfg.availability_probability,
                instant_bookable=instant_booking and rng.random() < cfg.instant_probability,
            )
            for t in times
        ]
        calendar.append(DayAvailability(date=day.isoformat(), slots=slots))

    logger.debug(
        "Generated %d days of availability from %s (instant=%s)",
        days, start.isoformat(), instant_booking,
    )
    return calendar


def slot_status(slot: TimeSlot, verified_user: bool) -> SlotStatus:
    """How a slot is offered: booked, instant book, or request to book.

    Instant booking needs both the studio setting and a verified guest.
    """
    if not slot.available:
        return SlotStatus.BOOKED
    if slot.instant_bookable and verified_user:
        return SlotStatus.INSTANT
    return SlotStatus.REQUEST


def expand_booked_slots(bookings: Iterable[ExistingBooking]) -> list[str]:
    """List every hourly slot covered by existing bookings.

    A booking at 22:00 for 3 hours occupies 22:00 and 23:00; hours past
    midnight are dropped.
    """
    booked: list[str] = []
    for booking in bookings:
        start = datetime.strptime(booking["start_time"][:5], "%H:%M")
        for i in range(booking["duration_hours"]):
            hour = start.hour + i
            if hour < 24:
                booked.append(f"{hour:02d}:{start.minute:02d}")
    return booked


def apply_booked_slots(day: DayAvailability, booked: Iterable[str]) -> DayAvailability:
    """Mark the given slot times unavailable on a day."""
    taken = set(booked)
    for slot in day.slots:
        if slot.time in taken:
            slot.available = False
            slot.instant_bookable = False
    return day


def find_next_available(calendar: Iterable[DayAvailability]) -> Optional[tuple[str, str]]:
    """First (date, time) with an open slot, in calendar order."""
    for day in calendar:
        for slot in day.slots:
            if slot.available:
                return day.date, slot.time
    return None


def get_day(calendar: Iterable[DayAvailability], day: str) -> Optional[DayAvailability]:
    """Look up a single date in a generated calendar."""
    for entry in calendar:
        if entry.date == day:
            return entry
    return None
