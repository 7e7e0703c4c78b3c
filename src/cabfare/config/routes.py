"""Static route reference tables — city coordinates and curated corridor distances.

Compiled into the package and exposed read-only; nothing mutates them at runtime.
"""

from __future__ import annotations

from types import MappingProxyType


CITY_COORDINATES = MappingProxyType({
    "delhi": (28.6139, 77.2090),
    "mumbai": (19.0760, 72.8777),
    "bangalore": (12.9716, 77.5946),
    "hyderabad": (17.3850, 78.4867),
    "chennai": (13.0827, 80.2707),
    "kolkata": (22.5726, 88.3639),
    "jaipur": (26.9124, 75.7873),
    "ahmedabad": (23.0225, 72.5714),
    "pune": (18.5204, 73.8567),
    "lucknow": (26.8467, 80.9462),
    "rajkot": (22.3039, 70.8022),
    "surat": (21.1702, 72.8311),
    "patna": (25.5941, 85.1376),
    "kochi": (9.9312, 76.2673),
    "indore": (22.7196, 75.8577),
    "bhopal": (23.2599, 77.4126),
    "nagpur": (21.1458, 79.0882),
    "chandigarh": (30.7333, 76.7794),
    "goa": (15.2993, 74.1240),
    "amritsar": (31.6340, 74.8723),
})
"""Lowercase city name → (latitude, longitude) in degrees."""


_CORRIDORS = (
    ("rajkot", "ahmedabad", 220),
    ("mumbai", "pune", 150),
    ("delhi", "jaipur", 281),
    ("bangalore", "chennai", 346),
    ("delhi", "chandigarh", 243),
    ("mumbai", "surat", 294),
    ("jaipur", "ahmedabad", 648),
)

# Both directions are stored; lookups use the ordered "from-to" key.
FIXED_DISTANCES = MappingProxyType({
    **{f"{a}-{b}": km for a, b, km in _CORRIDORS},
    **{f"{b}-{a}": km for a, b, km in _CORRIDORS},
})
"""Curated road distances (km) that override the geometric estimate."""


_ROAD_ROUTES = (
    ("rajkot", "delhi", 1140),
    ("rajkot", "mumbai", 660),
    ("rajkot", "ahmedabad", 220),
    ("rajkot", "surat", 325),
    ("rajkot", "jaipur", 790),
    ("delhi", "mumbai", 1400),
    ("delhi", "bangalore", 2150),
    ("ahmedabad", "mumbai", 520),
)

ACTUAL_ROAD_DISTANCES = MappingProxyType({
    **{f"{a}-{b}": km for a, b, km in _ROAD_ROUTES},
    **{f"{b}-{a}": km for a, b, km in _ROAD_ROUTES},
})
"""Measured road distances (km); these take precedence over a road-factor estimate."""


ROAD_FACTORS = MappingProxyType({
    "default": 1.3,   # typical Indian road network
    "urban": 1.4,     # winding city roads
    "highway": 1.2,   # intercity highway links
})
"""Road distance ÷ straight-line distance, by road type."""


def route_key(from_city: str, to_city: str) -> str:
    return f"{from_city}-{to_city}"
