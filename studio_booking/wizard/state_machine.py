"""
Linear state machine driving the five-step booking wizard.

    DATE_TIME -> GUESTS_REQUESTS -> EQUIPMENT_INSURANCE -> PAYMENT -> CONFIRMATION

Navigation is forward/back only. Advancing is gated on the current
step's required fields; a failed gate leaves the wizard where it is.
Every field change re-prices the booking so the live summary is current.

Usage:
    wizard = BookingWizard(rate_card, on_booking_complete=submit_to_backend)
    wizard.update("set_date", "2099-05-01")
    wizard.next_step()
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional

from studio_booking.logging_context import (
    get_session_logger,
    new_session_id,
    session_context,
)
from studio_booking.pricing.calculator import calculate_price_breakdown
from studio_booking.schemas.booking_schema import BookingPayload, PriceBreakdown
from studio_booking.schemas.studio_schema import StudioRateCard
from studio_booking.wizard.booking_form import BookingForm

logger = get_session_logger(__name__)


class WizardStep(int, Enum):
    """Wizard steps in display order."""
    DATE_TIME = 1
    GUESTS_REQUESTS = 2
    EQUIPMENT_INSURANCE = 3
    PAYMENT = 4
    CONFIRMATION = 5

    @property
    def title(self) -> str:
        return STEP_TITLES[self]


STEP_TITLES: dict[WizardStep, str] = {
    WizardStep.DATE_TIME: "Date & Time",
    WizardStep.GUESTS_REQUESTS: "Guests & Requests",
    WizardStep.EQUIPMENT_INSURANCE: "Equipment & Insurance",
    WizardStep.PAYMENT: "Payment",
    WizardStep.CONFIRMATION: "Confirmation",
}

# Steps without an entry have no required fields
STEP_GATES: dict[WizardStep, Callable[[BookingForm], bool]] = {
    WizardStep.DATE_TIME: BookingForm.date_time_complete,
    WizardStep.GUESTS_REQUESTS: BookingForm.guests_complete,
}

FIELD_SETTERS = frozenset({
    "set_date",
    "set_start_time",
    "set_duration",
    "set_guest_count",
    "set_special_requests",
    "toggle_equipment",
    "set_insurance_type",
    "set_payment_method",
})


@dataclass
class StepEntry:
    """Recorded history entry for a step visit."""
    step: WizardStep
    entered_at: datetime


class WizardStateError(Exception):
    """Raised when an action is not valid on the current step."""


class BookingWizard:
    """
    Collects a booking across five steps and hands it off on submit.

    Persistence and payment capture belong to the ``on_booking_complete``
    callback; the wizard only assembles the payload.
    """

    STEPS: list[WizardStep] = list(WizardStep)

    def __init__(
        self,
        rate_card: StudioRateCard,
        on_booking_complete: Optional[Callable[[BookingPayload], Any]] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.rate_card = rate_card
        self.form = BookingForm(rate_card=rate_card)
        self._on_booking_complete = on_booking_complete
        self.session_id = session_id or new_session_id()

        self._current_step = WizardStep.DATE_TIME
        self._history: list[StepEntry] = [
            StepEntry(step=WizardStep.DATE_TIME, entered_at=datetime.now(timezone.utc))
        ]
        self._pricing = calculate_price_breakdown(self.form.to_selection(), rate_card)
        self._submitted = False

    @property
    def current_step(self) -> WizardStep:
        return self._current_step

    @property
    def pricing(self) -> PriceBreakdown:
        return self._pricing

    @property
    def progress(self) -> float:
        """Fraction of the wizard completed, for the progress bar."""
        return self._current_step.value / len(self.STEPS)

    @property
    def submitted(self) -> bool:
        return self._submitted

    def can_advance(self) -> bool:
        """Whether the current step's required fields are filled."""
        if self._current_step == self.STEPS[-1]:
            return False
        gate = STEP_GATES.get(self._current_step)
        return gate is None or gate(self.form)

    def next_step(self) -> WizardStep:
        """Advance one step if the gate passes; otherwise stay put."""
        with session_context(self.session_id):
            if not self.can_advance():
                logger.debug("Cannot advance from step %s", self._current_step.title)
                return self._current_step
            return self._enter(WizardStep(self._current_step.value + 1))

    def prev_step(self) -> WizardStep:
        """Go back one step; no-op on the first step."""
        if self._current_step == self.STEPS[0]:
            return self._current_step
        with session_context(self.session_id):
            return self._enter(WizardStep(self._current_step.value - 1))

    def _enter(self, step: WizardStep) -> WizardStep:
        old = self._current_step
        self._current_step = step
        self._history.append(StepEntry(step=step, entered_at=datetime.now(timezone.utc)))
        logger.debug("Wizard step: %s -> %s", old.title, step.title)
        return step

    def update(self, setter: str, value: Any) -> tuple[bool, str]:
        """Apply a form setter by name and re-price on success."""
        if setter not in FIELD_SETTERS:
            raise ValueError(f"Unknown form field setter: {setter}")
        with session_context(self.session_id):
            ok, message = getattr(self.form, setter)(value)
            if ok:
                self.reprice()
            else:
                logger.debug("Rejected %s(%r): %s", setter, value, message)
        return ok, message

    def reprice(self) -> PriceBreakdown:
        """Recompute the live price summary from the current form."""
        self._pricing = calculate_price_breakdown(self.form.to_selection(), self.rate_card)
        return self._pricing

    def build_payload(self) -> BookingPayload:
        """Assemble the booking payload from the form and latest pricing."""
        selection = self.form.to_selection()
        return BookingPayload(
            studio_id=self.rate_card.studio_id,
            session_id=self.session_id,
            selection=selection,
            pricing=calculate_price_breakdown(selection, self.rate_card),
            created_at=datetime.now(timezone.utc),
            **self.form.to_dict(),
        )

    def submit(self) -> BookingPayload:
        """
        Hand the assembled booking to the completion callback.

        Raises:
            WizardStateError: If the wizard is not on the confirmation step
                or the booking was already submitted.
        """
        if self._current_step != WizardStep.CONFIRMATION:
            raise WizardStateError(
                f"Cannot submit from step '{self._current_step.title}'; "
                f"finish the wizard first."
            )
        if self._submitted:
            raise WizardStateError("Booking already submitted.")

        payload = self.build_payload()
        self._submitted = True
        with session_context(self.session_id):
            logger.info(
                "Booking submitted for %s on %s at %s, total %s",
                payload.studio_id, payload.date, payload.start_time, payload.pricing.total,
            )
            if self._on_booking_complete is not None:
                self._on_booking_complete(payload)
        return payload

    def get_history(self) -> list[StepEntry]:
        """Return the full step history."""
        return list(self._history)

    def get_step_trace(self) -> list[str]:
        """Return ordered list of step titles visited."""
        return [entry.step.title for entry in self._history]

    def get_summary(self) -> dict[str, Any]:
        """Live booking summary shown beside every step."""
        return {
            "studio": self.rate_card.title,
            "step": self._current_step.title,
            **self.form.to_dict(),
            "pricing": self._pricing.model_dump(),
        }
