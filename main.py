"""
Command-line entry point for the studio booking core.

Usage:
    python main.py quote --type hourly --duration 3 --peak --guests 5 --equipment camera --insurance
    python main.py quote --studio studio.json --type daily
    python main.py availability --days 7 --seed 42
    python main.py demo --scenario group
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from studio_booking.availability.generator import generate_availability, slot_status
from studio_booking.pricing.calculator import calculate_price_breakdown
from studio_booking.pricing.catalog import demo_rate_card, load_rate_card
from studio_booking.schemas.booking_schema import PricingSelection, PricingType
from studio_booking.schemas.studio_schema import StudioRateCard
from studio_booking.utils import format_price

logger = logging.getLogger(__name__)


def _load_studio(path: Optional[str]) -> StudioRateCard:
    if path is None:
        return demo_rate_card()
    studio_path = Path(path)
    if not studio_path.exists():
        logger.error("Studio file not found: %s", studio_path)
        sys.exit(1)
    return load_rate_card(json.loads(studio_path.read_text(encoding="utf-8")))


def _run_quote(args: argparse.Namespace) -> None:
    rate_card = _load_studio(args.studio)
    selection = PricingSelection(
        pricing_type=PricingType(args.type),
        duration=args.duration,
        guest_count=args.guests,
        is_peak_time=args.peak,
        selected_equipment=frozenset(args.equipment),
        insurance=args.insurance,
        insurance_type=args.insurance_type,
    )
    breakdown = calculate_price_breakdown(selection, rate_card)
    if args.json:
        sys.stdout.write(breakdown.model_dump_json(indent=2) + "\n")
        return

    rows = [
        ("Base price", breakdown.base_price),
        ("Equipment", breakdown.equipment_price),
        ("Insurance", breakdown.insurance_price),
        ("Subtotal", breakdown.subtotal),
        (f"Group discount ({breakdown.discount_percent}%)", -breakdown.discount_amount),
        ("Total", breakdown.total),
        ("Deposit (30%)", breakdown.deposit_amount),
        ("Due later (70%)", breakdown.final_amount),
    ]
    sys.stdout.write(f"{rate_card.title}\n")
    for label, amount in rows:
        sys.stdout.write(f"  {label:<28}{format_price(amount):>14}\n")


def _run_availability(args: argparse.Namespace) -> None:
    rate_card = _load_studio(args.studio)
    calendar = generate_availability(
        rate_card.instant_booking, days=args.days, rng=random.Random(args.seed)
    )
    marks = {"booked": ".", "instant": "I", "request": "R"}
    for day in calendar:
        row = "".join(marks[slot_status(s, args.verified).value] for s in day.slots)
        label = "fully booked" if day.fully_booked else f"{len(day.available_times())} open"
        sys.stdout.write(f"{day.date}  {row}  {label}\n")


def _run_demo(args: argparse.Namespace) -> None:
    from console_demo import ConsoleSession

    ConsoleSession(seed=args.seed).run_scenario(args.scenario)


def main() -> None:
    parser = argparse.ArgumentParser(description="Studio booking pricing and availability.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="Price a booking selection.")
    quote.add_argument("--studio", default=None, help="Path to a studio rate card JSON file.")
    quote.add_argument("--type", default="hourly", choices=[t.value for t in PricingType])
    quote.add_argument("--duration", type=int, default=1)
    quote.add_argument("--guests", type=int, default=1)
    quote.add_argument("--peak", action="store_true", help="Charge the peak hourly rate.")
    quote.add_argument("--equipment", action="append", default=[], help="Equipment ID; repeatable.")
    quote.add_argument("--insurance", action="store_true")
    quote.add_argument("--insurance-type", default="basic")
    quote.add_argument("--json", action="store_true", help="Print the breakdown as JSON.")
    quote.set_defaults(handler=_run_quote)

    avail = sub.add_parser("availability", help="Print the mock availability calendar.")
    avail.add_argument("--studio", default=None)
    avail.add_argument("--days", type=int, default=None)
    avail.add_argument("--seed", type=int, default=None)
    avail.add_argument("--verified", action="store_true", help="Show instant-book slots.")
    avail.set_defaults(handler=_run_availability)

    demo = sub.add_parser("demo", help="Run the scripted wizard walkthrough.")
    demo.add_argument("--scenario", default="group")
    demo.add_argument("--seed", type=int, default=None)
    demo.set_defaults(handler=_run_demo)

    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    args.handler(args)


if __name__ == "__main__":
    main()
