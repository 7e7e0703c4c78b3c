"""Category-rate fare law — distance × category rate, discount bands, taxes.

Pure arithmetic: distance + cab profile + trip type → PriceBreakdown.
This is one of two pricing laws in the package; the tiered
base-km / extra-km law lives in :mod:`cabfare.engine.tiered`. They are not
reconciled, so callers pick the one a cab record is priced under.
"""

from __future__ import annotations

from cabfare.config.cab import CabProfile
from cabfare.config.tariff import DEFAULT_TARIFF, FareTariff
from cabfare.engine.rounding import as_distance, as_number, round_half_up
from cabfare.engine.travel_time import estimate_travel_time
from cabfare.models.results import PriceBreakdown, TaxBreakdown, TaxComponent

ONE_WAY = "oneWay"
ROUND_TRIP = "roundTrip"


def normalize_trip_type(trip_type: object) -> str:
    """``roundTrip`` (any case, ``round_trip`` / ``round-trip`` too) or ``oneWay`` for anything else."""
    if isinstance(trip_type, str) and trip_type.replace("_", "").replace("-", "").lower() == "roundtrip":
        return ROUND_TRIP
    return ONE_WAY


def trip_multiplier(trip_type: str, tariff: FareTariff = DEFAULT_TARIFF) -> float:
    return tariff.round_trip_multiplier if normalize_trip_type(trip_type) == ROUND_TRIP else 1.0


def _pct(rate: float) -> float:
    return round(rate * 100, 4)


def calculate_fare_by_distance(
    distance_km: float,
    cab_profile: CabProfile | None = None,
    trip_type: str = ONE_WAY,
    tariff: FareTariff = DEFAULT_TARIFF,
) -> PriceBreakdown:
    """Compute the full price breakdown for one cab over ``distance_km``.

    One-way and round-trip differ only by the trip multiplier applied to
    the one-way base price; discounts and taxes are then layered on the
    journey base price. A fixed-route cab collapses every price field to
    its administrator-set price (scaled by the same multiplier) with no
    discount or tax layering.
    """
    cab = cab_profile if cab_profile is not None else CabProfile()
    trip = normalize_trip_type(trip_type)
    distance = round_half_up(as_distance(distance_km))
    multiplier = trip_multiplier(trip, tariff)
    per_km_rate = tariff.rate_for(cab.category)
    included_km = distance * 2 if trip == ROUND_TRIP else distance
    estimated_time = estimate_travel_time(distance, tariff.average_speed_kmh)

    if cab.is_fixed_route:
        return _fixed_route_breakdown(
            cab, trip, distance, multiplier, per_km_rate, included_km, estimated_time,
        )

    one_way_base_price = round_half_up(distance * per_km_rate)
    journey_base_price = round_half_up(one_way_base_price * multiplier)

    discounted_price = round_half_up(journey_base_price * tariff.discount_factor)
    best_price = round_half_up(journey_base_price * tariff.best_price_factor)

    gst_amount = round_half_up(best_price * tariff.gst_rate)
    # Flat shares of the base price, not a per-route toll/permit schedule
    toll_tax_amount = round_half_up(journey_base_price * tariff.toll_tax_rate)
    state_tax_amount = round_half_up(journey_base_price * tariff.state_tax_rate)

    tax_inclusive_price = best_price + gst_amount
    all_inclusive_price = tax_inclusive_price + toll_tax_amount + state_tax_amount

    return PriceBreakdown(
        trip_type=trip,
        distance_km=distance,
        per_km_rate=per_km_rate,
        one_way_base_price=one_way_base_price,
        base_price=journey_base_price,
        discounted_price=discounted_price,
        best_price=best_price,
        gst_amount=gst_amount,
        toll_tax_amount=toll_tax_amount,
        state_tax_amount=state_tax_amount,
        tax_inclusive_price=tax_inclusive_price,
        all_inclusive_price=all_inclusive_price,
        discount_pct=tariff.discount_pct,
        best_discount_pct=tariff.best_discount_pct,
        included_km=included_km,
        extra_km_fare=per_km_rate,
        estimated_time_hours=estimated_time,
        is_fixed_route=False,
        taxes=TaxBreakdown(
            gst=TaxComponent(rate_pct=_pct(tariff.gst_rate), amount=gst_amount),
            toll=TaxComponent(rate_pct=_pct(tariff.toll_tax_rate), amount=toll_tax_amount),
            state=TaxComponent(rate_pct=_pct(tariff.state_tax_rate), amount=state_tax_amount),
        ),
    )


def _fixed_route_breakdown(
    cab: CabProfile,
    trip: str,
    distance: int,
    multiplier: float,
    per_km_rate: float,
    included_km: int,
    estimated_time: int,
) -> PriceBreakdown:
    one_way_price = round_half_up(as_number(cab.fixed_price))
    price = round_half_up(one_way_price * multiplier)
    no_tax = TaxComponent(rate_pct=0.0, amount=0)
    return PriceBreakdown(
        trip_type=trip,
        distance_km=distance,
        per_km_rate=per_km_rate,
        one_way_base_price=one_way_price,
        base_price=price,
        discounted_price=price,
        best_price=price,
        gst_amount=0,
        toll_tax_amount=0,
        state_tax_amount=0,
        tax_inclusive_price=price,
        all_inclusive_price=price,
        discount_pct=0,
        best_discount_pct=0,
        included_km=included_km,
        extra_km_fare=0.0,
        estimated_time_hours=estimated_time,
        is_fixed_route=True,
        taxes=TaxBreakdown(gst=no_tax, toll=no_tax, state=no_tax),
    )
