"""
Centralized configuration with environment variable overrides.

Rate-independent business settings (peak window, mock availability
probabilities, wizard limits) live here. Studio rates themselves come
from the rate card supplied by the data layer.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag from an env var (1/0, true/false, yes/no)."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class PricingConfig:
    """Pricing settings that are not part of a studio's rate card."""

    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "₹")
    peak_start_hour: int = _safe_int("PEAK_START_HOUR", "10")
    peak_end_hour: int = _safe_int("PEAK_END_HOUR", "18")
    scale_flat_rates: bool = _safe_bool("SCALE_FLAT_RATES", "false")


@dataclass(frozen=True)
class AvailabilityConfig:
    """Parameters for the mock availability calendar."""

    window_days: int = _safe_int("AVAILABILITY_WINDOW_DAYS", "30")
    first_slot_hour: int = _safe_int("FIRST_SLOT_HOUR", "9")
    last_slot_hour: int = _safe_int("LAST_SLOT_HOUR", "20")
    availability_probability: float = _safe_float("AVAILABILITY_PROBABILITY", "0.7")
    instant_probability: float = _safe_float("INSTANT_BOOKABLE_PROBABILITY", "0.8")


@dataclass(frozen=True)
class WizardConfig:
    """Limits applied by the booking wizard's form controls."""

    default_capacity: int = _safe_int("DEFAULT_STUDIO_CAPACITY", "10")
    max_split_count: int = _safe_int("MAX_SPLIT_COUNT", "10")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    pricing: PricingConfig = field(default_factory=PricingConfig)
    availability: AvailabilityConfig = field(default_factory=AvailabilityConfig)
    wizard: WizardConfig = field(default_factory=WizardConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    marketplace_name: str = os.getenv("MARKETPLACE_NAME", "Creator Spaces")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    pricing = config.pricing
    if not 0 <= pricing.peak_start_hour < pricing.peak_end_hour <= 24:
        raise ValueError(
            "PEAK_START_HOUR and PEAK_END_HOUR must satisfy 0 <= start < end <= 24, "
            f"got {pricing.peak_start_hour}..{pricing.peak_end_hour}"
        )

    availability = config.availability
    if availability.window_days < 1:
        raise ValueError(
            f"AVAILABILITY_WINDOW_DAYS must be >= 1, got {availability.window_days}"
        )
    if not 0 <= availability.first_slot_hour <= availability.last_slot_hour <= 23:
        raise ValueError(
            "FIRST_SLOT_HOUR and LAST_SLOT_HOUR must satisfy 0 <= first <= last <= 23, "
            f"got {availability.first_slot_hour}..{availability.last_slot_hour}"
        )

    for rate_name, rate_value in [
        ("AVAILABILITY_PROBABILITY", availability.availability_probability),
        ("INSTANT_BOOKABLE_PROBABILITY", availability.instant_probability),
    ]:
        if not 0.0 <= rate_value <= 1.0:
            raise ValueError(f"{rate_name} must be between 0.0 and 1.0, got {rate_value}")

    if config.wizard.default_capacity < 1:
        raise ValueError(
            f"DEFAULT_STUDIO_CAPACITY must be >= 1, got {config.wizard.default_capacity}"
        )
    if config.wizard.max_split_count < 1:
        raise ValueError(
            f"MAX_SPLIT_COUNT must be >= 1, got {config.wizard.max_split_count}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.info("Configuration loaded for '%s'", config.marketplace_name)
    return config


# Singleton instance
settings = load_config()
