"""Distance resolver — city pair → whole kilometres.

Precedence: curated corridor distance, then great-circle distance between
known coordinates, then a flat fallback. Every input resolves to some
distance; ``DistanceResolution.source`` says which path produced it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import numpy as np
import pandas as pd

from cabfare.config.routes import (
    ACTUAL_ROAD_DISTANCES,
    CITY_COORDINATES,
    FIXED_DISTANCES,
    ROAD_FACTORS,
    route_key,
)
from cabfare.config.tariff import EARTH_RADIUS_KM, FALLBACK_DISTANCE_KM
from cabfare.engine.rounding import as_distance, round_half_up
from cabfare.models.results import DistanceResolution

logger = logging.getLogger(__name__)


def normalize_city(name: object) -> str:
    return name.strip().lower() if isinstance(name, str) else ""


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in km between two points given in degrees."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_lat = phi2 - phi1
    d_lng = math.radians(lng2) - math.radians(lng1)
    a = math.sin(d_lat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lng / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def resolve_distance_detail(
    from_city: str,
    to_city: str,
    fallback_km: int = FALLBACK_DISTANCE_KM,
) -> DistanceResolution:
    """Resolve a city pair (case-insensitive) and report how it was resolved."""
    origin = normalize_city(from_city)
    destination = normalize_city(to_city)

    fixed = FIXED_DISTANCES.get(route_key(origin, destination))
    if fixed is not None:
        return DistanceResolution(
            from_city=origin, to_city=destination, distance_km=fixed, source="fixed",
        )

    if origin in CITY_COORDINATES and destination in CITY_COORDINATES:
        lat1, lng1 = CITY_COORDINATES[origin]
        lat2, lng2 = CITY_COORDINATES[destination]
        km = round_half_up(haversine_km(lat1, lng1, lat2, lng2))
        return DistanceResolution(
            from_city=origin, to_city=destination, distance_km=km, source="haversine",
        )

    # No geocoding: an unknown city gets a placeholder distance.
    logger.warning(
        "No distance data for %r → %r; using fallback of %d km", origin, destination, fallback_km,
    )
    return DistanceResolution(
        from_city=origin, to_city=destination, distance_km=fallback_km, source="fallback",
    )


def resolve_distance(from_city: str, to_city: str) -> int:
    """Road distance in whole km between two cities. Never raises."""
    return resolve_distance_detail(from_city, to_city).distance_km


def estimate_road_distance(straight_line_km: float, road_type: str = "default") -> float:
    """Approximate road distance from a straight-line distance.

    Unknown road types use the ``default`` factor.
    """
    factor = ROAD_FACTORS.get(normalize_city(road_type), ROAD_FACTORS["default"])
    return as_distance(straight_line_km) * factor


def resolve_road_distance(
    from_city: str,
    to_city: str,
    road_type: str = "default",
    fallback_km: int = FALLBACK_DISTANCE_KM,
) -> int:
    """Road distance in whole km for a city pair.

    Measured road distances come first, then curated corridors, which are
    already road km. Only a great-circle distance gets the road factor;
    unknown cities get the unscaled fallback.
    """
    origin = normalize_city(from_city)
    destination = normalize_city(to_city)

    actual = ACTUAL_ROAD_DISTANCES.get(route_key(origin, destination))
    if actual is not None:
        return actual

    resolution = resolve_distance_detail(origin, destination, fallback_km=fallback_km)
    if resolution.source != "haversine":
        return resolution.distance_km

    lat1, lng1 = CITY_COORDINATES[origin]
    lat2, lng2 = CITY_COORDINATES[destination]
    return round_half_up(estimate_road_distance(haversine_km(lat1, lng1, lat2, lng2), road_type))


def build_distance_matrix(
    cities: Iterable[str] | None = None,
    fallback_km: int = FALLBACK_DISTANCE_KM,
) -> pd.DataFrame:
    """Square origin × destination matrix of resolved distances (km).

    Same resolution rules as :func:`resolve_distance`, vectorised over all
    pairs. The diagonal is 0 for known cities.
    """
    names = [normalize_city(c) for c in (cities if cities is not None else CITY_COORDINATES)]
    names = list(dict.fromkeys(names))

    known = np.array([n in CITY_COORDINATES for n in names], dtype=bool)
    coords = np.array([CITY_COORDINATES.get(n, (0.0, 0.0)) for n in names], dtype=float).reshape(-1, 2)
    lat = np.radians(coords[:, 0])
    lng = np.radians(coords[:, 1])

    d_lat = lat[None, :] - lat[:, None]
    d_lng = lng[None, :] - lng[:, None]
    a = np.sin(d_lat / 2) ** 2 + np.cos(lat)[:, None] * np.cos(lat)[None, :] * np.sin(d_lng / 2) ** 2
    km = 2 * EARTH_RADIUS_KM * np.arcsin(np.minimum(1.0, np.sqrt(a)))
    matrix = np.floor(km + 0.5).astype(int)

    matrix[~(known[:, None] & known[None, :])] = fallback_km

    for i, origin in enumerate(names):
        for j, destination in enumerate(names):
            fixed = FIXED_DISTANCES.get(route_key(origin, destination))
            if fixed is not None:
                matrix[i, j] = fixed

    return pd.DataFrame(matrix, index=names, columns=names)
