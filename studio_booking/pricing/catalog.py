"""Default add-on catalog: equipment, insurance cover and payment methods."""

import logging
from typing import Optional

from studio_booking.schemas.studio_schema import StudioRateCard

logger = logging.getLogger(__name__)

EQUIPMENT_CATALOG: list[dict] = [
    {"id": "camera", "name": "Professional Camera", "price": 500,
     "description": "4K camera with tripod"},
    {"id": "lighting", "name": "Lighting Kit", "price": 300,
     "description": "Professional lighting setup"},
    {"id": "audio", "name": "Audio Equipment", "price": 400,
     "description": "Microphones and audio interface"},
    {"id": "backdrop", "name": "Backdrop Set", "price": 200,
     "description": "Various backdrop options"},
    {"id": "props", "name": "Props Collection", "price": 150,
     "description": "Professional props and accessories"},
]

INSURANCE_OPTIONS: list[dict] = [
    {"id": "basic", "name": "Basic Coverage", "price": 100,
     "description": "Equipment damage protection"},
    {"id": "premium", "name": "Premium Coverage", "price": 200,
     "description": "Full coverage including liability"},
    {"id": "none", "name": "No Insurance", "price": 0,
     "description": "You are responsible for any damages"},
]

PAYMENT_METHODS: dict[str, str] = {
    "card": "Credit/Debit Card",
    "upi": "UPI Payment",
    "netbanking": "Net Banking",
    "wallet": "Digital Wallet",
}

HOURLY_DURATIONS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 8, 10, 12)

DEMO_STUDIO: dict = {
    "studio_id": "demo-studio",
    "title": "Sunlit Loft Studio",
    "rates": {
        "hourly": 500,
        "daily": 3200,
        "weekly": 18000,
        "peak_hourly": 500,
        "off_peak_hourly": 400,
    },
    "group_discounts": [
        {"min_guests": 4, "discount_percent": 10},
        {"min_guests": 8, "discount_percent": 15},
    ],
    "equipment": EQUIPMENT_CATALOG,
    "capacity": 10,
    "instant_booking": True,
    "location": "Bandra West, Mumbai",
}


def get_payment_method_name(method_id: str) -> Optional[str]:
    """Display name for a payment method, or None if unknown."""
    return PAYMENT_METHODS.get(method_id.lower().strip())


def demo_rate_card() -> StudioRateCard:
    """Rate card used by the CLI when no studio file is given."""
    return StudioRateCard.model_validate(DEMO_STUDIO)


def load_rate_card(raw: dict) -> StudioRateCard:
    """Validate a studio record from the data layer.

    Records without an equipment list fall back to the default catalog.
    """
    data = dict(raw)
    if "equipment" not in data:
        logger.debug("Studio %s has no equipment list, using default catalog",
                     data.get("studio_id"))
        data["equipment"] = EQUIPMENT_CATALOG
    return StudioRateCard.model_validate(data)
