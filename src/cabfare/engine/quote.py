"""Trip quote orchestrator — resolve the route, then price one or more cabs."""

from __future__ import annotations

from collections.abc import Iterable

from cabfare.config.cab import CabProfile
from cabfare.config.tariff import DEFAULT_TARIFF, FareTariff
from cabfare.engine.distance import normalize_city, resolve_distance_detail
from cabfare.engine.fare import ONE_WAY, calculate_fare_by_distance
from cabfare.engine.rounding import as_distance, round_half_up
from cabfare.models.results import DistanceResolution, TripQuote


def resolve_route(
    from_city: str,
    to_city: str,
    distance_km: float | None = None,
    tariff: FareTariff = DEFAULT_TARIFF,
) -> DistanceResolution:
    """Resolve the trip distance; a caller-supplied distance wins and counts as ``fixed``."""
    if distance_km is not None:
        return DistanceResolution(
            from_city=normalize_city(from_city),
            to_city=normalize_city(to_city),
            distance_km=round_half_up(as_distance(distance_km)),
            source="fixed",
        )
    return resolve_distance_detail(from_city, to_city, fallback_km=tariff.fallback_distance_km)


def quote_trip(
    from_city: str,
    to_city: str,
    cab_profile: CabProfile | None = None,
    trip_type: str = ONE_WAY,
    distance_km: float | None = None,
    tariff: FareTariff = DEFAULT_TARIFF,
) -> TripQuote:
    """Quote one cab for one trip under the category-rate law."""
    cab = cab_profile if cab_profile is not None else CabProfile()
    route = resolve_route(from_city, to_city, distance_km, tariff)
    breakdown = calculate_fare_by_distance(route.distance_km, cab, trip_type, tariff)
    return TripQuote(cab_name=cab.name, category=cab.category, distance=route, breakdown=breakdown)


def compare_cabs(
    from_city: str,
    to_city: str,
    cabs: Iterable[CabProfile],
    trip_type: str = ONE_WAY,
    distance_km: float | None = None,
    tariff: FareTariff = DEFAULT_TARIFF,
) -> list[TripQuote]:
    """Quote every cab on the same route, cheapest all-inclusive price first."""
    route = resolve_route(from_city, to_city, distance_km, tariff)
    quotes = [
        TripQuote(
            cab_name=cab.name,
            category=cab.category,
            distance=route,
            breakdown=calculate_fare_by_distance(route.distance_km, cab, trip_type, tariff),
        )
        for cab in cabs
    ]
    quotes.sort(key=lambda q: q.breakdown.all_inclusive_price)
    return quotes
