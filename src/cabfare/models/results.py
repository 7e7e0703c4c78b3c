"""Result types — the contract between engine, API and dashboard.

Every result is a frozen value object: recomputed on each call, never mutated.
All monetary fields are whole rupees (rounded half-up).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


DistanceSource = Literal["fixed", "haversine", "fallback"]


class DistanceResolution(BaseModel):
    """Outcome of resolving a city pair to a road distance."""

    model_config = ConfigDict(frozen=True)

    from_city: str
    to_city: str
    distance_km: int
    """Non-negative whole kilometres."""
    source: DistanceSource
    """``fixed`` = curated corridor distance (or a caller-supplied distance),
    ``haversine`` = great-circle estimate from known coordinates,
    ``fallback`` = placeholder for an unresolvable pair."""


# ═══════════════════════════════════════════════════════════════════════════
# Category-rate price breakdown
# ═══════════════════════════════════════════════════════════════════════════

class TaxComponent(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate_pct: float
    amount: int


class TaxBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    gst: TaxComponent
    toll: TaxComponent
    state: TaxComponent


class PriceBreakdown(BaseModel):
    """Full fare quote under the category-rate law.

    For a round trip every field is derived from ``base_price`` (the
    one-way base scaled by the round-trip multiplier); nothing is
    recomputed from the distance independently.
    """

    model_config = ConfigDict(frozen=True)

    trip_type: str
    distance_km: int
    per_km_rate: float

    one_way_base_price: int
    """round(distance × per_km_rate)."""
    base_price: int
    """Journey base price = round(one_way_base_price × trip multiplier)."""
    discounted_price: int
    best_price: int
    """The price actually offered to the rider."""

    gst_amount: int
    toll_tax_amount: int
    state_tax_amount: int
    tax_inclusive_price: int
    """best_price + gst_amount."""
    all_inclusive_price: int
    """tax_inclusive_price + toll_tax_amount + state_tax_amount."""

    discount_pct: int
    best_discount_pct: int
    included_km: int
    extra_km_fare: float
    estimated_time_hours: int
    is_fixed_route: bool = False
    taxes: TaxBreakdown


# ═══════════════════════════════════════════════════════════════════════════
# Tiered-law results
# ═══════════════════════════════════════════════════════════════════════════

class TieredFare(BaseModel):
    """Tiered fare plus the flat tax applied on top of it."""

    model_config = ConfigDict(frozen=True)

    distance_km: float
    price: int
    tax_rate: float
    tax_amount: int
    total_amount: int


class TripCharges(BaseModel):
    """Per-km fare with add-on charges (fuel, driver, night)."""

    model_config = ConfigDict(frozen=True)

    base_fare: int
    extra_km_fare: int
    fuel_charge: int
    driver_charge: int
    night_charge: int
    total_fare: int
    distance_km: int


# ═══════════════════════════════════════════════════════════════════════════
# Trip quote
# ═══════════════════════════════════════════════════════════════════════════

class TripQuote(BaseModel):
    """Distance resolution + price breakdown for one cab on one trip."""

    model_config = ConfigDict(frozen=True)

    cab_name: str
    category: str
    distance: DistanceResolution
    breakdown: PriceBreakdown
