from studio_booking.availability.generator import (
    apply_booked_slots,
    expand_booked_slots,
    find_next_available,
    generate_availability,
    get_day,
    slot_status,
    slot_times,
)

__all__ = [
    "apply_booked_slots",
    "expand_booked_slots",
    "find_next_available",
    "generate_availability",
    "get_day",
    "slot_status",
    "slot_times",
]
