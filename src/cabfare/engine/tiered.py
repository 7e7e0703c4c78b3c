"""Tiered fare law — base per-km price up to the included km, extra fare beyond.

Also holds the flat tax helpers and the per-km fare with add-on charges
(fuel, driver, night) used for intercity distance quotes.
"""

from __future__ import annotations

import logging

from cabfare.config.cab import CabProfile, ChargeOption
from cabfare.config.tariff import DEFAULT_TAX_RATE
from cabfare.engine.rounding import as_distance, as_number, round_half_up
from cabfare.models.results import TieredFare, TripCharges

logger = logging.getLogger(__name__)


def calculate_tiered_fare(cab_profile: CabProfile | None, distance_km: float) -> int:
    """Price a trip under the tiered law.

    Fixed-route cabs return their flat price. With no distance, the
    base per-km price alone is returned (a minimum quote).
    """
    cab = cab_profile if cab_profile is not None else CabProfile()
    if cab.is_fixed_route:
        return round_half_up(as_number(cab.fixed_price))

    distance = as_distance(distance_km)
    if not distance:
        return round_half_up(cab.base_km_price)

    covered_km = min(distance, cab.included_km)
    extra_km = max(0.0, distance - cab.included_km)
    covered_cost = covered_km * cab.base_km_price
    extra_cost = extra_km * cab.extra_fare_per_km
    price = covered_cost + extra_cost

    logger.debug(
        "Tiered fare for %s: %.1f km (%.1f included @ ₹%.2f = ₹%.2f, %.1f extra @ ₹%.2f = ₹%.2f) → ₹%.2f",
        cab.name, distance, covered_km, cab.base_km_price, covered_cost,
        extra_km, cab.extra_fare_per_km, extra_cost, price,
    )
    return round_half_up(price)


def calculate_taxes_and_fees(base_amount: float, tax_rate: float = DEFAULT_TAX_RATE) -> int:
    """Tax on ``base_amount``, whole rupees."""
    return round_half_up(as_number(base_amount) * as_number(tax_rate))


def calculate_total_amount(base_amount: float, tax_rate: float = DEFAULT_TAX_RATE) -> int:
    """``base_amount`` including tax, whole rupees."""
    return round_half_up(as_number(base_amount) * (1 + as_number(tax_rate)))


def calculate_tiered_quote(
    cab_profile: CabProfile | None,
    distance_km: float,
    tax_rate: float = DEFAULT_TAX_RATE,
) -> TieredFare:
    """Tiered fare with the flat tax on top, as one record."""
    price = calculate_tiered_fare(cab_profile, distance_km)
    return TieredFare(
        distance_km=as_distance(distance_km),
        price=price,
        tax_rate=as_number(tax_rate),
        tax_amount=calculate_taxes_and_fees(price, tax_rate),
        total_amount=calculate_total_amount(price, tax_rate),
    )


def _billed(option: ChargeOption, applies: bool = True) -> float:
    return option.amount if applies and not option.included else 0.0


def calculate_trip_charges(
    distance_km: float,
    cab_profile: CabProfile | None = None,
    is_night: bool = False,
) -> TripCharges:
    """Per-km fare over the whole distance plus overage and add-on charges.

    base   = base_km_price × distance
    extra  = max(0, distance − included_km) × extra_fare_per_km
    add-on = fuel + driver (when not included) + night (night trips only)
    """
    cab = cab_profile if cab_profile is not None else CabProfile()
    distance = as_distance(distance_km)

    base_fare = cab.base_km_price * distance
    extra_km_fare = max(0.0, distance - cab.included_km) * cab.extra_fare_per_km
    fuel_charge = _billed(cab.fuel_charges)
    driver_charge = _billed(cab.driver_charges)
    night_charge = _billed(cab.night_charges, applies=is_night)
    total = base_fare + extra_km_fare + fuel_charge + driver_charge + night_charge

    return TripCharges(
        base_fare=round_half_up(base_fare),
        extra_km_fare=round_half_up(extra_km_fare),
        fuel_charge=round_half_up(fuel_charge),
        driver_charge=round_half_up(driver_charge),
        night_charge=round_half_up(night_charge),
        total_fare=round_half_up(total),
        distance_km=round_half_up(distance),
    )
