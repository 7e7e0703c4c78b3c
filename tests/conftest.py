"""Shared test fixtures — cab profiles and tariffs matching tariffs/default.yaml."""

from __future__ import annotations

from pathlib import Path

import pytest

from cabfare.config import CabProfile, ChargeOption, DEFAULT_TARIFF, FareTariff


@pytest.fixture
def sedan() -> CabProfile:
    return CabProfile(name="Dzire", category="sedan")


@pytest.fixture
def suv() -> CabProfile:
    return CabProfile(name="Ertiga", category="SUV")


@pytest.fixture
def tiered_cab() -> CabProfile:
    """Tiered-law cab: ₹12/km for the first 100 km, ₹10/km after."""
    return CabProfile(
        name="Etios",
        category="sedan",
        base_km_price=12,
        extra_fare_per_km=10,
        included_km=100,
    )


@pytest.fixture
def outstation_cab() -> CabProfile:
    """Cab with add-on charges billed on top of the per-km fare."""
    return CabProfile(
        name="Innova",
        category="suv",
        base_km_price=12,
        extra_fare_per_km=10,
        included_km=100,
        fuel_charges=ChargeOption(included=False, amount=500),
        driver_charges=ChargeOption(included=False, amount=800),
        night_charges=ChargeOption(included=False, amount=300),
    )


@pytest.fixture
def fixed_route_cab() -> CabProfile:
    return CabProfile(name="Rajkot Shuttle", category="sedan", is_fixed_route=True, fixed_price=2_499)


@pytest.fixture
def tariff() -> FareTariff:
    return DEFAULT_TARIFF


@pytest.fixture
def tariff_yaml_path() -> Path:
    return Path(__file__).parent.parent / "tariffs" / "default.yaml"
