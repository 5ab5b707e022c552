"""Shared utilities used across the studio booking package."""

from decimal import Decimal, ROUND_HALF_UP

from studio_booking.config import settings

PAISE = Decimal("0.01")


def to_money(value) -> Decimal:
    """Coerce a number to a Decimal rounded half-up to two places."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(PAISE, rounding=ROUND_HALF_UP)


def format_price(amount, symbol: str = settings.pricing.currency_symbol) -> str:
    """Render an amount with the currency symbol and thousands separators.

    Examples:
        >>> format_price(Decimal("1890"))
        '₹1,890'
        >>> format_price(Decimal("566.5"))
        '₹566.50'
    """
    money = to_money(amount)
    if money == money.to_integral_value():
        return f"{symbol}{int(money):,}"
    return f"{symbol}{money:,.2f}"
