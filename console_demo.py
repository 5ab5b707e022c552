"""
Offline console demo: walks a booking through the wizard in the terminal.

Uses the real wizard, pricing calculator and mock availability calendar
against the demo studio. No backend, no payment gateway.

Usage:
    python console_demo.py
    python console_demo.py --scenario group
"""

import argparse
import random
from typing import Optional

from studio_booking.availability.generator import find_next_available, generate_availability
from studio_booking.config import settings
from studio_booking.pricing.calculator import per_person_share
from studio_booking.pricing.catalog import demo_rate_card
from studio_booking.schemas.booking_schema import BookingPayload
from studio_booking.schemas.studio_schema import StudioRateCard
from studio_booking.utils import format_price
from studio_booking.wizard.state_machine import BookingWizard, WizardStep

GREEN = "\033[92m"
YELLOW = "\033[93m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleSession:
    """Drives a BookingWizard from a scripted list of form actions."""

    # (setter, value) pairs; "next" advances, "back" goes back
    SCENARIOS: dict[str, list[tuple[str, object]]] = {
        "solo": [
            ("next", None),
            ("set_start_time", "{time}"),
            ("set_duration", 2),
            ("next", None),
            ("set_guest_count", 1),
            ("next", None),
            ("toggle_equipment", "lighting"),
            ("set_insurance_type", "none"),
            ("next", None),
            ("set_payment_method", "upi"),
            ("next", None),
        ],
        "group": [
            ("set_start_time", "{time}"),
            ("set_duration", 3),
            ("next", None),
            ("set_guest_count", 5),
            ("set_special_requests", "Need a green screen backdrop"),
            ("next", None),
            ("toggle_equipment", "camera"),
            ("toggle_equipment", "audio"),
            ("toggle_equipment", "audio"),
            ("set_insurance_type", "basic"),
            ("back", None),
            ("next", None),
            ("next", None),
            ("set_payment_method", "card"),
            ("next", None),
        ],
    }

    def __init__(
        self, seed: Optional[int] = None, rate_card: Optional[StudioRateCard] = None
    ) -> None:
        self.rate_card = rate_card or demo_rate_card()
        self.calendar = generate_availability(
            self.rate_card.instant_booking, rng=random.Random(seed)
        )
        self.wizard = BookingWizard(self.rate_card, on_booking_complete=self._on_complete)

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _on_complete(self, payload: BookingPayload) -> None:
        print(f"{GREEN}{BOLD}Booking handed off:{RESET} {payload.studio_id} "
              f"{payload.date} {payload.start_time} ({payload.duration}h)")

    def _print_summary(self) -> None:
        summary = self.wizard.get_summary()
        p = summary["pricing"]
        print(f"{YELLOW}  [{summary['step']}] base {format_price(p['base_price'])} | equipment "
              f"{format_price(p['equipment_price'])} | insurance {format_price(p['insurance_price'])}"
              f" | discount {p['discount_percent']}% | total {format_price(p['total'])}{RESET}")

    def run_scenario(self, scenario: str) -> None:
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"Unknown scenario: {scenario}")
            return

        slot = find_next_available(self.calendar)
        if slot is None:
            print("No availability in the booking window.")
            return
        slot_date, slot_time = slot

        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.marketplace_name} - {self.rate_card.title}{RESET}")
        print(f"{BOLD}  Scenario: {scenario}  |  first open slot {slot_date} {slot_time}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

        ok, msg = self.wizard.update("set_date", slot_date)
        self.system_log(msg)

        for action, value in steps:
            if action == "next":
                step = self.wizard.next_step()
                self.system_log(f"Step {step.value}: {step.title}")
            elif action == "back":
                step = self.wizard.prev_step()
                self.system_log(f"Back to step {step.value}: {step.title}")
            else:
                if isinstance(value, str):
                    value = value.format(time=slot_time)
                ok, msg = self.wizard.update(action, value)
                self.system_log(msg)
                self._print_summary()

        if self.wizard.current_step == WizardStep.CONFIRMATION:
            payload = self.wizard.submit()
            p = payload.pricing
            print(f"  Deposit now: {format_price(p.deposit_amount)}  "
                  f"Due later: {format_price(p.final_amount)}")
            split_count = min(payload.guest_count, settings.wizard.max_split_count)
            if split_count > 1:
                share = per_person_share(p.total, split_count)
                print(f"  Split {split_count} ways: {format_price(share)} each")

        print(f"{DIM}  Step trace: {' -> '.join(self.wizard.get_step_trace())}{RESET}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Scripted booking wizard walkthrough.")
    parser.add_argument("--scenario", default="group", choices=sorted(ConsoleSession.SCENARIOS))
    parser.add_argument("--seed", type=int, default=None, help="Seed for the mock calendar.")
    args = parser.parse_args()
    ConsoleSession(seed=args.seed).run_scenario(args.scenario)


if __name__ == "__main__":
    main()
