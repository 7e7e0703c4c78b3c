"""Configuration models — cab profiles, tariff and route reference tables."""

from cabfare.config.cab import CabProfile, ChargeOption
from cabfare.config.tariff import DEFAULT_TARIFF, FareTariff, TariffError, load_tariff
from cabfare.config.routes import ACTUAL_ROAD_DISTANCES, CITY_COORDINATES, FIXED_DISTANCES, ROAD_FACTORS

__all__ = [
    "CabProfile",
    "ChargeOption",
    "FareTariff",
    "DEFAULT_TARIFF",
    "TariffError",
    "load_tariff",
    "CITY_COORDINATES",
    "FIXED_DISTANCES",
    "ACTUAL_ROAD_DISTANCES",
    "ROAD_FACTORS",
]
