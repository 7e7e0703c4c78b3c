"""Fare tariff — per-km category rates, discount bands and tax rates.

The discount bands and the toll/state percentages are flat business
constants, not real toll or permit schedules. They live here as named
constants so a tariff file can override them without touching the engine.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


EARTH_RADIUS_KM = 6371.0
FALLBACK_DISTANCE_KM = 500
AVERAGE_SPEED_KMH = 60

ROUND_TRIP_MULTIPLIER = 1.8
DISCOUNT_FACTOR = 0.90       # 10% off
BEST_PRICE_FACTOR = 0.85     # 15% off, the price actually offered
GST_RATE = 0.05
TOLL_TAX_RATE = 0.03
STATE_TAX_RATE = 0.04
DEFAULT_TAX_RATE = 0.05

DEFAULT_CATEGORY = "sedan"
CATEGORY_RATES_PER_KM: dict[str, float] = {
    "sedan": 12.0,   # economy
    "suv": 16.0,     # premium
    "luxury": 25.0,
    "mini": 10.0,    # budget
}


class TariffError(ValueError):
    """A tariff file could not be read or does not describe a valid tariff."""


class FareTariff(BaseModel):
    """Every constant the category-rate fare law depends on."""

    category_rates_per_km: dict[str, float] = Field(
        default_factory=lambda: dict(CATEGORY_RATES_PER_KM),
        description="Per-km rate (₹/km) by lowercase cab category",
    )
    default_category: str = Field(
        default=DEFAULT_CATEGORY,
        description="Category whose rate applies to unrecognised categories",
    )
    round_trip_multiplier: float = Field(default=ROUND_TRIP_MULTIPLIER, gt=0)
    discount_factor: float = Field(
        default=DISCOUNT_FACTOR, gt=0, le=1.0,
        description="Multiplier for the 'discounted' display price (0.90 = 10% off)",
    )
    best_price_factor: float = Field(
        default=BEST_PRICE_FACTOR, gt=0, le=1.0,
        description="Multiplier for the best (offered) price (0.85 = 15% off)",
    )
    gst_rate: float = Field(default=GST_RATE, ge=0, le=1.0, description="GST on the best price")
    toll_tax_rate: float = Field(default=TOLL_TAX_RATE, ge=0, le=1.0, description="Toll share of the base price")
    state_tax_rate: float = Field(default=STATE_TAX_RATE, ge=0, le=1.0, description="State permit share of the base price")
    average_speed_kmh: float = Field(default=AVERAGE_SPEED_KMH, gt=0, description="Includes rest stops")
    fallback_distance_km: int = Field(default=FALLBACK_DISTANCE_KM, ge=0)

    @field_validator("category_rates_per_km")
    @classmethod
    def _lowercase_categories(cls, rates: dict[str, float]) -> dict[str, float]:
        return {key.strip().lower(): rate for key, rate in rates.items()}

    @field_validator("default_category")
    @classmethod
    def _lowercase_default(cls, category: str) -> str:
        return category.strip().lower()

    def rate_for(self, category: str | None) -> float:
        """Per-km rate for ``category``; unknown or empty falls back to the default category."""
        key = category.strip().lower() if isinstance(category, str) else ""
        if key in self.category_rates_per_km:
            return self.category_rates_per_km[key]
        return self.category_rates_per_km.get(
            self.default_category, CATEGORY_RATES_PER_KM[DEFAULT_CATEGORY],
        )

    @property
    def discount_pct(self) -> int:
        return int(round((1.0 - self.discount_factor) * 100))

    @property
    def best_discount_pct(self) -> int:
        return int(round((1.0 - self.best_price_factor) * 100))


DEFAULT_TARIFF = FareTariff()


def load_tariff(path: str | Path) -> FareTariff:
    """Load a tariff from a YAML file. Keys left out keep their defaults."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise TariffError(f"Cannot read tariff file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise TariffError(f"Tariff file {path} must contain a mapping, got {type(data).__name__}")

    rates = data.get("category_rates_per_km")
    if isinstance(rates, dict):
        data["category_rates_per_km"] = {
            **CATEGORY_RATES_PER_KM,
            **{str(k).lower(): v for k, v in rates.items()},
        }

    try:
        return FareTariff(**data)
    except ValidationError as exc:
        raise TariffError(f"Invalid tariff in {path}: {exc}") from exc
