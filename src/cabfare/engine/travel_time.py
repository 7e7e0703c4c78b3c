"""Travel-time estimate from distance — flat average speed, no traffic model."""

from __future__ import annotations

import math

from cabfare.config.tariff import AVERAGE_SPEED_KMH
from cabfare.engine.rounding import as_distance


def estimate_travel_time(distance_km: float, average_speed_kmh: float = AVERAGE_SPEED_KMH) -> int:
    """Whole hours to cover ``distance_km``, rounded up (60 km/h incl. rest stops)."""
    speed = average_speed_kmh if average_speed_kmh and average_speed_kmh > 0 else AVERAGE_SPEED_KMH
    return int(math.ceil(as_distance(distance_km) / speed))
