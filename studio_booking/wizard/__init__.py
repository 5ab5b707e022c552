from studio_booking.wizard.booking_form import BookingForm
from studio_booking.wizard.state_machine import (
    BookingWizard,
    WizardStateError,
    WizardStep,
)

__all__ = [
    "BookingForm",
    "BookingWizard",
    "WizardStateError",
    "WizardStep",
]
