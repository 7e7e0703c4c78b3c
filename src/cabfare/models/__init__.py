"""Result models — fare calculator output contracts."""

from cabfare.models.results import (
    DistanceResolution,
    PriceBreakdown,
    TaxBreakdown,
    TaxComponent,
    TieredFare,
    TripCharges,
    TripQuote,
)

__all__ = [
    "DistanceResolution",
    "PriceBreakdown",
    "TaxBreakdown",
    "TaxComponent",
    "TieredFare",
    "TripCharges",
    "TripQuote",
]
