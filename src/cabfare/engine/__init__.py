"""Engine — pure, stateless distance and fare computation."""

from cabfare.engine.distance import (
    build_distance_matrix,
    estimate_road_distance,
    haversine_km,
    resolve_distance,
    resolve_distance_detail,
    resolve_road_distance,
)
from cabfare.engine.travel_time import estimate_travel_time
from cabfare.engine.fare import calculate_fare_by_distance
from cabfare.engine.tiered import (
    calculate_taxes_and_fees,
    calculate_tiered_fare,
    calculate_tiered_quote,
    calculate_total_amount,
    calculate_trip_charges,
)
from cabfare.engine.quote import compare_cabs, quote_trip

__all__ = [
    "resolve_distance",
    "resolve_distance_detail",
    "haversine_km",
    "estimate_road_distance",
    "resolve_road_distance",
    "build_distance_matrix",
    "estimate_travel_time",
    "calculate_fare_by_distance",
    # tiered law
    "calculate_tiered_fare",
    "calculate_tiered_quote",
    "calculate_taxes_and_fees",
    "calculate_total_amount",
    "calculate_trip_charges",
    "quote_trip",
    "compare_cabs",
]
