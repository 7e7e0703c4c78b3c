"""Tests for the fare estimation API.

Covers:
  - Reference endpoints (/cities, /routes/fixed, /tariff)
  - Distance endpoints (/distance, /distance/matrix)
  - Fare endpoints (/fare/estimate, /fare/compare, /fare/tiered, /fare/trip-charges)
  - Tariff dependency override
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cabfare.api.server import app, get_tariff
from cabfare.config import CITY_COORDINATES, CabProfile, FareTariff
from cabfare.engine.distance import haversine_km
from cabfare.engine.fare import calculate_fare_by_distance
from cabfare.engine.rounding import round_half_up


client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# Reference endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestReference:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        assert client.get("/").json()["name"] == "Cab Fare Estimation API"

    def test_cities(self):
        cities = client.get("/cities").json()["cities"]
        assert len(cities) == 20
        rajkot = next(c for c in cities if c["name"] == "rajkot")
        assert (rajkot["latitude"], rajkot["longitude"]) == (22.3039, 70.8022)

    def test_fixed_routes(self):
        routes = client.get("/routes/fixed").json()["routes"]
        assert len(routes) == 14
        assert {"from_city": "rajkot", "to_city": "ahmedabad", "distance_km": 220} in routes

    def test_tariff(self):
        body = client.get("/tariff").json()
        assert body["category_rates_per_km"]["luxury"] == 25
        assert body["round_trip_multiplier"] == 1.8


# ═══════════════════════════════════════════════════════════════════════════
# Distance endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestDistance:

    def test_fixed_pair(self):
        body = client.get("/distance", params={"from_city": "AHMEDABAD", "to_city": "rajkot"}).json()
        assert body["distance_km"] == 220
        assert body["source"] == "fixed"
        assert body["estimated_time_hours"] == 4
        assert "road_distance_km" not in body

    def test_unknown_pair(self):
        body = client.get("/distance", params={"from_city": "Rajkot", "to_city": "Atlantis"}).json()
        assert body["distance_km"] == 500
        assert body["source"] == "fallback"

    def test_road_type_keeps_curated_corridor(self):
        body = client.get(
            "/distance", params={"from_city": "Mumbai", "to_city": "Pune", "road_type": "highway"},
        ).json()
        assert body["road_distance_km"] == 150  # already road km, no factor

    def test_road_type_uses_measured_distance(self):
        body = client.get(
            "/distance", params={"from_city": "Delhi", "to_city": "Rajkot", "road_type": "default"},
        ).json()
        assert body["source"] == "haversine"
        assert body["road_distance_km"] == 1_140

    def test_road_type_scales_great_circle(self):
        body = client.get(
            "/distance", params={"from_city": "Pune", "to_city": "Goa", "road_type": "highway"},
        ).json()
        lat1, lng1 = CITY_COORDINATES["pune"]
        lat2, lng2 = CITY_COORDINATES["goa"]
        assert body["road_distance_km"] == round_half_up(haversine_km(lat1, lng1, lat2, lng2) * 1.2)

    def test_missing_city_is_422(self):
        assert client.get("/distance", params={"from_city": "Rajkot"}).status_code == 422

    def test_matrix_subset(self):
        body = client.get("/distance/matrix", params={"cities": "Rajkot,Ahmedabad"}).json()
        assert body["cities"] == ["rajkot", "ahmedabad"]
        assert body["distances_km"] == [[0, 220], [220, 0]]

    def test_matrix_all(self):
        body = client.get("/distance/matrix").json()
        assert len(body["cities"]) == 20
        assert all(len(row) == 20 for row in body["distances_km"])


# ═══════════════════════════════════════════════════════════════════════════
# Fare endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestFareEstimate:

    def test_sedan_by_distance(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "Anywhere", "to_city": "Elsewhere",
            "cab": {"category": "sedan"}, "distance_km": 100,
        })
        assert resp.status_code == 200
        b = resp.json()["quote"]["breakdown"]
        assert b["best_price"] == 1_020
        assert b["all_inclusive_price"] == 1_155

    def test_round_trip_by_city(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "Rajkot", "to_city": "Ahmedabad",
            "cab": {"name": "Ertiga", "category": "SUV"}, "trip_type": "roundTrip",
        })
        body = resp.json()
        expected = calculate_fare_by_distance(220, CabProfile(category="suv"), "roundTrip")
        assert body["quote"]["breakdown"]["base_price"] == expected.base_price
        assert body["quote"]["distance"]["source"] == "fixed"
        assert "Round trip" in body["narrative"]

    def test_camel_case_cab_record(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "Rajkot", "to_city": "Ahmedabad",
            "cab": {"name": "Shuttle", "isFixedRoute": True, "price": 1999},
        })
        b = resp.json()["quote"]["breakdown"]
        assert b["is_fixed_route"] is True
        assert b["all_inclusive_price"] == 1_999

    def test_default_cab(self):
        resp = client.post("/fare/estimate", json={"from_city": "Mumbai", "to_city": "Pune"})
        assert resp.json()["quote"]["breakdown"]["base_price"] == 1_800

    def test_negative_distance_is_422(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "a", "to_city": "b", "distance_km": -10,
        })
        assert resp.status_code == 422

    def test_negative_cab_price_is_422(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "a", "to_city": "b", "cab": {"baseKmPrice": -1},
        })
        assert resp.status_code == 422

    def test_overflowing_distance_is_not_a_server_error(self):
        resp = client.post("/fare/estimate", json={
            "from_city": "a", "to_city": "b", "distance_km": 1e308,
        })
        assert resp.status_code == 200
        assert resp.json()["quote"]["breakdown"]["all_inclusive_price"] == 0


class TestFareCompare:

    def test_default_categories(self):
        body = client.post("/fare/compare", json={"from_city": "Delhi", "to_city": "Jaipur"}).json()
        assert [r["category"] for r in body["ranking"]] == ["mini", "sedan", "suv", "luxury"]
        assert body["ranking"][0]["all_inclusive_price"] < body["ranking"][-1]["all_inclusive_price"]
        assert "Cheapest: Mini" in body["comparison_narrative"]
        assert len(body["quotes"]) == 4

    def test_explicit_cabs(self):
        body = client.post("/fare/compare", json={
            "from_city": "Delhi", "to_city": "Jaipur", "trip_type": "roundTrip",
            "cabs": [{"name": "Camry", "category": "luxury"}, {"name": "Dzire", "category": "sedan"}],
        }).json()
        assert [r["cab"] for r in body["ranking"]] == ["Dzire", "Camry"]


class TestTieredEndpoints:

    def test_tiered(self):
        resp = client.post("/fare/tiered", json={
            "cab": {"baseKmPrice": 12, "extraFarePerKm": 10, "includedKm": 100},
            "distance_km": 220,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["price"] == 2_400
        assert body["tax_amount"] == 120
        assert body["total_amount"] == 2_520

    def test_tiered_custom_tax(self):
        body = client.post("/fare/tiered", json={
            "cab": {"baseKmPrice": 10, "includedKm": 100}, "distance_km": 50, "tax_rate": 0.12,
        }).json()
        assert body["price"] == 500             # 50 × 10
        assert body["tax_amount"] == 60         # 500 × 0.12
        assert body["total_amount"] == 560

    def test_trip_charges_by_distance(self):
        body = client.post("/fare/trip-charges", json={
            "cab": {
                "baseKmPrice": 12, "extraFarePerKm": 10, "includedKm": 100,
                "driverCharges": {"included": False, "amount": 800},
            },
            "distance_km": 220,
        }).json()
        assert body["total_fare"] == 2_640 + 1_200 + 800

    def test_trip_charges_by_city(self):
        body = client.post("/fare/trip-charges", json={
            "cab": {"baseKmPrice": 12},
            "from_city": "Mumbai", "to_city": "Pune",
            "is_night": True,
        }).json()
        assert body["distance_km"] == 150
        assert body["base_fare"] == 1_800


# ═══════════════════════════════════════════════════════════════════════════
# Tariff override
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def premium_tariff():
    app.dependency_overrides[get_tariff] = lambda: FareTariff(
        category_rates_per_km={"sedan": 20}, fallback_distance_km=300,
    )
    yield
    app.dependency_overrides.pop(get_tariff, None)


def test_overridden_tariff_is_used(premium_tariff):
    body = client.post("/fare/estimate", json={
        "from_city": "Rajkot", "to_city": "Atlantis", "cab": {"category": "sedan"},
    }).json()
    assert body["quote"]["distance"]["distance_km"] == 300
    assert body["quote"]["breakdown"]["base_price"] == 6_000  # 300 × 20
