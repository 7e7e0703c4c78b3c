"""FastAPI server — fare estimation API for the storefront and admin panel.

Run with:
    uvicorn cabfare.api.server:app --reload --port 8000

Or:
    python -m cabfare.api.server

Endpoints:
    GET  /cities             — cities with known coordinates
    GET  /routes/fixed       — curated corridor distances
    GET  /tariff             — active tariff (rates, discount bands, taxes)
    GET  /distance           — resolve a city pair to km (+ travel time)
    GET  /distance/matrix    — km matrix over a set of cities
    POST /fare/estimate      — category-rate price breakdown for one cab
    POST /fare/compare       — same route, several cabs, cheapest first
    POST /fare/tiered        — tiered base-km / extra-km fare + tax
    POST /fare/trip-charges  — per-km fare with fuel/driver/night charges
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from cabfare.config.cab import CabProfile
from cabfare.config.routes import CITY_COORDINATES, FIXED_DISTANCES
from cabfare.config.tariff import DEFAULT_TARIFF, DEFAULT_TAX_RATE, FareTariff, load_tariff
from cabfare.engine.distance import build_distance_matrix, resolve_distance_detail, resolve_road_distance
from cabfare.engine.quote import compare_cabs, quote_trip
from cabfare.engine.tiered import calculate_tiered_quote, calculate_trip_charges
from cabfare.engine.travel_time import estimate_travel_time
from cabfare.api.narrative import generate_comparison_narrative, generate_quote_narrative
from cabfare.models.results import TieredFare, TripCharges
from cabfare.settings import get_settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Cab Fare Estimation API",
    version="1.0",
    description=(
        "Distance resolution and fare estimation for intercity cab bookings. "
        "Resolve a city pair with GET /distance, then price it with POST /fare/estimate."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_tariff() -> FareTariff:
    """Active tariff: the configured YAML file, else the built-in defaults."""
    path = get_settings().tariff_path
    if not path:
        return DEFAULT_TARIFF
    tariff = load_tariff(path)
    logger.info("Loaded tariff from %s", path)
    return tariff


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class FareEstimateRequest(BaseModel):
    """Request body for /fare/estimate."""
    from_city: str = Field(description="Origin city name (case-insensitive)")
    to_city: str = Field(description="Destination city name (case-insensitive)")
    cab: CabProfile = Field(default_factory=CabProfile)
    trip_type: str = Field(default="oneWay", description="'oneWay' or 'roundTrip'")
    distance_km: float | None = Field(
        default=None, ge=0,
        description="Precomputed distance; skips city resolution when given",
    )


class FareEstimateResponse(BaseModel):
    quote: dict[str, Any]
    narrative: str = ""


class FareCompareRequest(BaseModel):
    """Request body for /fare/compare. No cabs = one default cab per category."""
    from_city: str
    to_city: str
    trip_type: str = "oneWay"
    distance_km: float | None = Field(default=None, ge=0)
    cabs: list[CabProfile] = Field(default_factory=list)


class FareCompareResponse(BaseModel):
    quotes: list[dict[str, Any]]
    ranking: list[dict[str, Any]]
    comparison_narrative: str


class TieredFareRequest(BaseModel):
    """Request body for /fare/tiered."""
    cab: CabProfile
    distance_km: float = Field(default=0.0, ge=0)
    tax_rate: float = Field(default=DEFAULT_TAX_RATE, ge=0, le=1.0)


class TripChargesRequest(BaseModel):
    """Request body for /fare/trip-charges."""
    cab: CabProfile
    distance_km: float | None = Field(default=None, ge=0)
    from_city: str | None = None
    to_city: str | None = None
    is_night: bool = False


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Cab Fare Estimation API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/cities")
def list_cities():
    """Cities the resolver has coordinates for."""
    return {
        "cities": [
            {"name": name, "latitude": lat, "longitude": lng}
            for name, (lat, lng) in sorted(CITY_COORDINATES.items())
        ],
    }


@app.get("/routes/fixed")
def list_fixed_routes():
    """Curated corridor distances, both directions."""
    return {
        "routes": [
            {"from_city": key.split("-", 1)[0], "to_city": key.split("-", 1)[1], "distance_km": km}
            for key, km in sorted(FIXED_DISTANCES.items())
        ],
    }


@app.get("/tariff")
def get_active_tariff(tariff: FareTariff = Depends(get_tariff)):
    return tariff.model_dump()


@app.get("/distance")
def get_distance(
    from_city: str = Query(description="Origin city"),
    to_city: str = Query(description="Destination city"),
    road_type: str | None = Query(
        default=None,
        description="Optional: 'urban', 'highway' or 'default'; adds the road distance to the response",
    ),
    tariff: FareTariff = Depends(get_tariff),
):
    """Resolve a city pair to km, with the resolution source and travel time."""
    resolution = resolve_distance_detail(from_city, to_city, fallback_km=tariff.fallback_distance_km)
    body: dict[str, Any] = {
        **resolution.model_dump(),
        "estimated_time_hours": estimate_travel_time(resolution.distance_km, tariff.average_speed_kmh),
    }
    if road_type is not None:
        body["road_type"] = road_type
        body["road_distance_km"] = resolve_road_distance(
            from_city, to_city, road_type, fallback_km=tariff.fallback_distance_km,
        )
    return body


@app.get("/distance/matrix")
def get_distance_matrix(
    cities: str | None = Query(
        default=None,
        description="Comma-separated city names; all known cities when omitted",
    ),
    tariff: FareTariff = Depends(get_tariff),
):
    names = [c for c in cities.split(",") if c.strip()] if cities else None
    matrix = build_distance_matrix(names, fallback_km=tariff.fallback_distance_km)
    return {
        "cities": list(matrix.index),
        "distances_km": matrix.values.tolist(),
    }


@app.post("/fare/estimate", response_model=FareEstimateResponse)
def estimate_fare(req: FareEstimateRequest, tariff: FareTariff = Depends(get_tariff)):
    """Price one cab under the category-rate law.

    Example minimal request:
    ```json
    {"from_city": "Rajkot", "to_city": "Ahmedabad", "cab": {"category": "suv"}, "trip_type": "roundTrip"}
    ```
    """
    quote = quote_trip(
        req.from_city, req.to_city, req.cab, req.trip_type, req.distance_km, tariff,
    )
    return FareEstimateResponse(
        quote=quote.model_dump(),
        narrative=generate_quote_narrative(quote),
    )


@app.post("/fare/compare", response_model=FareCompareResponse)
def compare_fares(req: FareCompareRequest, tariff: FareTariff = Depends(get_tariff)):
    """Price several cabs on the same route, cheapest all-inclusive first."""
    cabs = req.cabs or [
        CabProfile(name=category.title(), category=category)
        for category in tariff.category_rates_per_km
    ]
    quotes = compare_cabs(
        req.from_city, req.to_city, cabs, req.trip_type, req.distance_km, tariff,
    )

    ranking = [
        {
            "cab": q.cab_name,
            "category": q.category,
            "best_price": q.breakdown.best_price,
            "all_inclusive_price": q.breakdown.all_inclusive_price,
        }
        for q in quotes
    ]
    return FareCompareResponse(
        quotes=[q.model_dump() for q in quotes],
        ranking=ranking,
        comparison_narrative=generate_comparison_narrative(quotes),
    )


@app.post("/fare/tiered", response_model=TieredFare)
def tiered_fare(req: TieredFareRequest):
    """Tiered fare (base per-km up to the included km, extra fare beyond) + flat tax."""
    return calculate_tiered_quote(req.cab, req.distance_km, req.tax_rate)


@app.post("/fare/trip-charges", response_model=TripCharges)
def trip_charges(req: TripChargesRequest, tariff: FareTariff = Depends(get_tariff)):
    """Per-km fare with add-on charges; distance comes from the body or the city pair."""
    distance = req.distance_km
    if distance is None:
        distance = resolve_distance_detail(
            req.from_city or "", req.to_city or "", fallback_km=tariff.fallback_distance_km,
        ).distance_km
    return calculate_trip_charges(distance, req.cab, req.is_night)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    from cabfare.logging_setup import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json, settings.environment)
    uvicorn.run(
        "cabfare.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    main()
