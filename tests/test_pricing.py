"""Tests for the booking price calculator."""

from decimal import Decimal

import pytest

from studio_booking.pricing.calculator import (
    calculate_base_price,
    calculate_equipment_price,
    calculate_insurance_price,
    calculate_price_breakdown,
    is_peak_hour,
    per_person_share,
    select_group_discount,
    split_deposit,
)
from studio_booking.schemas.booking_schema import PricingType
from studio_booking.schemas.studio_schema import GroupDiscountTier
from tests.conftest import make_rate_card, make_selection, money


class TestBasePrice:
    @pytest.mark.parametrize("duration", [0, 1, 3, 12])
    def test_hourly_off_peak_scales_with_duration(self, rate_card, duration):
        selection = make_selection(duration=duration)
        assert calculate_base_price(selection, rate_card.rates) == 400 * duration

    @pytest.mark.parametrize("duration", [0, 1, 3, 12])
    def test_hourly_peak_uses_peak_rate(self, rate_card, duration):
        selection = make_selection(duration=duration, is_peak_time=True)
        assert calculate_base_price(selection, rate_card.rates) == 500 * duration

    def test_daily_is_flat_rate(self, rate_card):
        selection = make_selection(pricing_type=PricingType.DAILY, duration=3)
        assert calculate_base_price(selection, rate_card.rates, False) == 3000

    def test_weekly_is_flat_rate(self, rate_card):
        selection = make_selection(pricing_type=PricingType.WEEKLY, duration=2)
        assert calculate_base_price(selection, rate_card.rates, False) == 15000

    def test_peak_flag_ignored_for_daily(self, rate_card):
        selection = make_selection(pricing_type=PricingType.DAILY, is_peak_time=True)
        assert calculate_base_price(selection, rate_card.rates, False) == 3000

    def test_flat_rates_scale_when_enabled(self, rate_card):
        selection = make_selection(pricing_type=PricingType.DAILY, duration=3)
        assert calculate_base_price(selection, rate_card.rates, True) == 9000


class TestEquipmentPrice:
    def test_sums_selected_items(self, rate_card):
        selection = make_selection(selected_equipment={"camera", "lighting"})
        assert calculate_equipment_price(selection, rate_card.equipment) == 800

    def test_nothing_selected_is_zero(self, rate_card):
        assert calculate_equipment_price(make_selection(), rate_card.equipment) == 0

    def test_unknown_ids_are_ignored(self, rate_card):
        selection = make_selection(selected_equipment={"camera", "drone"})
        assert calculate_equipment_price(selection, rate_card.equipment) == 500

    def test_duplicates_are_not_double_counted(self, rate_card):
        selection = make_selection(selected_equipment=["camera", "camera", "props"])
        assert selection.selected_equipment == frozenset({"camera", "props"})
        assert calculate_equipment_price(selection, rate_card.equipment) == 650

    def test_order_independent(self, rate_card):
        a = make_selection(selected_equipment=["audio", "backdrop", "props"])
        b = make_selection(selected_equipment=["props", "audio", "backdrop"])
        assert calculate_equipment_price(a, rate_card.equipment) == calculate_equipment_price(
            b, rate_card.equipment
        )


class TestInsurancePrice:
    def test_declined_is_zero(self, rate_card):
        selection = make_selection(insurance=False, insurance_type="premium")
        assert calculate_insurance_price(selection, rate_card.insurance_options) == 0

    def test_basic_is_default(self, rate_card):
        selection = make_selection(insurance=True)
        assert calculate_insurance_price(selection, rate_card.insurance_options) == 100

    def test_premium_option(self, rate_card):
        selection = make_selection(insurance=True, insurance_type="premium")
        assert calculate_insurance_price(selection, rate_card.insurance_options) == 200

    def test_unknown_option_is_zero(self, rate_card):
        selection = make_selection(insurance=True, insurance_type="platinum")
        assert calculate_insurance_price(selection, rate_card.insurance_options) == 0


class TestGroupDiscount:
    TIERS = [
        GroupDiscountTier(min_guests=4, discount_percent=Decimal("10")),
        GroupDiscountTier(min_guests=8, discount_percent=Decimal("15")),
        GroupDiscountTier(min_guests=2, discount_percent=Decimal("5")),
    ]

    @pytest.mark.parametrize(
        "guests,expected",
        [(0, 0), (1, 0), (2, 5), (3, 5), (4, 10), (7, 10), (8, 15), (50, 15)],
    )
    def test_best_qualifying_tier(self, guests, expected):
        assert select_group_discount(guests, self.TIERS) == expected

    def test_no_tiers(self):
        assert select_group_discount(10, []) == 0

    def test_highest_percent_wins_over_highest_threshold(self):
        tiers = [
            GroupDiscountTier(min_guests=2, discount_percent=Decimal("20")),
            GroupDiscountTier(min_guests=6, discount_percent=Decimal("10")),
        ]
        assert select_group_discount(6, tiers) == 20


class TestDepositSplit:
    @pytest.mark.parametrize("total", ["0", "1890", "999.99", "0.01", "12345.67"])
    def test_parts_sum_to_total(self, total):
        deposit, final = split_deposit(money(total))
        assert deposit + final == money(total)

    def test_thirty_seventy(self):
        assert split_deposit(money(1000)) == (money(300), money(700))

    def test_per_person_share(self):
        assert per_person_share(money(1890), 3) == money(630)

    def test_per_person_share_rounds_to_paise(self):
        assert per_person_share(money(100), 3) == money("33.33")

    def test_per_person_share_rejects_zero(self):
        with pytest.raises(ValueError, match="split_count"):
            per_person_share(money(100), 0)

    def test_per_person_share_rejects_too_many(self):
        with pytest.raises(ValueError, match="split_count"):
            per_person_share(money(100), 11)


class TestPeakHour:
    @pytest.mark.parametrize(
        "time,expected",
        [("09:00", False), ("10:00", True), ("14:30", True), ("17:59", True), ("18:00", False)],
    )
    def test_peak_window(self, time, expected):
        assert is_peak_hour(time) is expected


class TestPriceBreakdown:
    def test_worked_example(self):
        rate_card = make_rate_card(
            rates={"hourly": 500, "daily": 3000, "weekly": 15000,
                   "peak_hourly": 500, "off_peak_hourly": 400},
            equipment=[{"id": "camera", "name": "Camera", "price": 500}],
            group_discounts=[{"min_guests": 4, "discount_percent": 10}],
        )
        selection = make_selection(
            duration=3,
            is_peak_time=True,
            guest_count=5,
            selected_equipment={"camera"},
            insurance=True,
        )
        b = calculate_price_breakdown(selection, rate_card)
        assert b.base_price == 1500
        assert b.equipment_price == 500
        assert b.insurance_price == 100
        assert b.subtotal == 2100
        assert b.discount_percent == 10
        assert b.discount_amount == 210
        assert b.total == 1890
        assert b.deposit_amount == 567
        assert b.final_amount == 1323

    @pytest.mark.parametrize("pricing_type", list(PricingType))
    @pytest.mark.parametrize("guests", [1, 4, 9])
    def test_invariants_hold(self, rate_card, pricing_type, guests):
        selection = make_selection(
            pricing_type=pricing_type,
            duration=5,
            guest_count=guests,
            selected_equipment={"audio", "props"},
            insurance=True,
            insurance_type="premium",
        )
        b = calculate_price_breakdown(selection, rate_card)
        assert b.subtotal == b.base_price + b.equipment_price + b.insurance_price
        assert b.total == b.subtotal - b.discount_amount
        assert b.deposit_amount + b.final_amount == b.total

    def test_fractional_discount_rounds_to_paise(self):
        rate_card = make_rate_card(
            rates={"hourly": 111, "daily": 3000, "weekly": 15000,
                   "peak_hourly": 111, "off_peak_hourly": 111},
            group_discounts=[{"min_guests": 2, "discount_percent": "7.5"}],
        )
        b = calculate_price_breakdown(make_selection(duration=3, guest_count=2), rate_card)
        assert b.subtotal == 333
        assert b.discount_amount == money("24.98")
        assert b.total == money("308.02")
        assert b.deposit_amount + b.final_amount == b.total
        for amount in (b.discount_amount, b.total, b.deposit_amount, b.final_amount):
            assert amount == amount.quantize(Decimal("0.01"))

    def test_no_discount_below_threshold(self, rate_card):
        b = calculate_price_breakdown(make_selection(guest_count=3), rate_card)
        assert b.discount_amount == 0
        assert b.total == b.subtotal
