"""
Booking price calculator.

Pure functions turning a PricingSelection and a studio rate card into a
PriceBreakdown:

    base      = rate x duration (hourly) or flat rate (daily / weekly)
    subtotal  = base + equipment + insurance
    discount  = subtotal x best qualifying group discount %
    total     = subtotal - discount
    deposit   = 30% of total, final = the remaining 70%

Usage:
    breakdown = calculate_price_breakdown(selection, rate_card)
    print(format_price(breakdown.total))
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from studio_booking.config import settings
from studio_booking.schemas.booking_schema import (
    PriceBreakdown,
    PricingSelection,
    PricingType,
)
from studio_booking.schemas.studio_schema import (
    EquipmentItem,
    GroupDiscountTier,
    InsuranceOption,
    StudioRateCard,
    StudioRates,
)
from studio_booking.utils import to_money

logger = logging.getLogger(__name__)

# Fixed split, not configurable
DEPOSIT_RATIO = Decimal("0.30")
ZERO = Decimal("0")
DEFAULT_INSURANCE_TYPE = "basic"


def calculate_base_price(
    selection: PricingSelection,
    rates: StudioRates,
    scale_flat_rates: Optional[bool] = None,
) -> Decimal:
    """Price of the studio time itself.

    Daily and weekly bookings are charged the flat rate regardless of
    duration unless ``scale_flat_rates`` (default: the SCALE_FLAT_RATES
    setting) is on.
    """
    if scale_flat_rates is None:
        scale_flat_rates = settings.pricing.scale_flat_rates

    if selection.pricing_type == PricingType.HOURLY:
        rate = rates.peak_hourly if selection.is_peak_time else rates.off_peak_hourly
        return rate * selection.duration

    flat = rates.daily if selection.pricing_type == PricingType.DAILY else rates.weekly
    if scale_flat_rates:
        return flat * selection.duration
    return flat


def calculate_equipment_price(
    selection: PricingSelection, equipment: Iterable[EquipmentItem]
) -> Decimal:
    """Sum of the selected equipment; unknown IDs contribute nothing."""
    prices = {item.id: item.price for item in equipment}
    return sum((prices.get(eid, ZERO) for eid in selection.selected_equipment), ZERO)


def calculate_insurance_price(
    selection: PricingSelection, options: Iterable[InsuranceOption]
) -> Decimal:
    """Flat cover fee for the chosen insurance option, or 0 when declined."""
    if not selection.insurance:
        return ZERO
    wanted = selection.insurance_type or DEFAULT_INSURANCE_TYPE
    for option in options:
        if option.id == wanted:
            return option.price
    logger.debug("Unknown insurance option '%s', charging nothing", wanted)
    return ZERO


def select_group_discount(guest_count: int, tiers: Iterable[GroupDiscountTier]) -> Decimal:
    """Best discount percent among tiers the guest count qualifies for."""
    qualifying = [t.discount_percent for t in tiers if t.min_guests <= guest_count]
    return max(qualifying, default=ZERO)


def split_deposit(total: Decimal) -> tuple[Decimal, Decimal]:
    """Split a total into (deposit, final payment) at 30/70.

    The final payment absorbs rounding so both parts always add up to
    the total.
    """
    deposit = to_money(total * DEPOSIT_RATIO)
    return deposit, total - deposit


def per_person_share(total: Decimal, split_count: int) -> Decimal:
    """Each member's share when a group splits the payment."""
    if not 1 <= split_count <= settings.wizard.max_split_count:
        raise ValueError(
            f"split_count must be between 1 and {settings.wizard.max_split_count}, "
            f"got {split_count}"
        )
    return to_money(total / split_count)


def is_peak_hour(start_time: str) -> bool:
    """Whether an HH:MM start time falls inside the peak-rate window."""
    hour = datetime.strptime(start_time.strip(), "%H:%M").hour
    return settings.pricing.peak_start_hour <= hour < settings.pricing.peak_end_hour


def calculate_price_breakdown(
    selection: PricingSelection,
    rate_card: StudioRateCard,
    scale_flat_rates: Optional[bool] = None,
) -> PriceBreakdown:
    """Compute the full price breakdown for a selection."""
    base_price = calculate_base_price(selection, rate_card.rates, scale_flat_rates)
    equipment_price = calculate_equipment_price(selection, rate_card.equipment)
    insurance_price = calculate_insurance_price(selection, rate_card.insurance_options)

    subtotal = base_price + equipment_price + insurance_price
    discount_percent = select_group_discount(selection.guest_count, rate_card.group_discounts)
    discount_amount = to_money(subtotal * discount_percent / 100)
    total = subtotal - discount_amount
    deposit, final = split_deposit(total)

    logger.debug(
        "Priced %s x%d for %s: subtotal=%s discount=%s%% total=%s",
        selection.pricing_type.value, selection.duration, rate_card.studio_id,
        subtotal, discount_percent, total,
    )
    return PriceBreakdown(
        base_price=base_price,
        equipment_price=equipment_price,
        insurance_price=insurance_price,
        subtotal=subtotal,
        discount_percent=discount_percent,
        discount_amount=discount_amount,
        total=total,
        deposit_amount=deposit,
        final_amount=final,
    )
