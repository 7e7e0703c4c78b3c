"""Cab profile — every attribute the pricing laws read from a cab record."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class ChargeOption(BaseModel):
    """An add-on charge that is either bundled into the fare or billed on top."""

    model_config = ConfigDict(populate_by_name=True)

    included: bool = Field(default=True, description="True = already covered by the per-km price")
    amount: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("amount", "charge"),
        description="Flat charge (₹) billed when not included",
    )


class CabProfile(BaseModel):
    """One cab type as seen by the fare calculators.

    Accepts both snake_case and the camelCase field names used by the
    storefront's cab records (``baseKmPrice``, ``perKMCharge``, ``price`` …),
    so a stored record can be validated straight into a profile.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="Sedan", description="Human label shown to the rider")
    category: str = Field(
        default="sedan",
        description="Pricing category: sedan / suv / luxury / mini (case-insensitive). "
                    "Unrecognised values are priced at the sedan rate.",
    )
    base_km_price: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("base_km_price", "baseKmPrice"),
        description="Per-km price for kilometres inside the included allowance (₹/km)",
    )
    extra_fare_per_km: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("extra_fare_per_km", "extraFarePerKm", "perKMCharge"),
        description="Per-km price beyond the included allowance (₹/km)",
    )
    included_km: float = Field(
        default=0.0, ge=0,
        validation_alias=AliasChoices("included_km", "includedKm"),
        description="Kilometres covered by the base per-km price",
    )
    is_fixed_route: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_fixed_route", "isFixedRoute"),
        description="True = administrator-set flat price, no dynamic pricing",
    )
    fixed_price: float | None = Field(
        default=None, ge=0,
        validation_alias=AliasChoices("fixed_price", "basePrice", "price"),
        description="Flat price (₹) used when is_fixed_route is set",
    )
    fuel_charges: ChargeOption = Field(
        default_factory=ChargeOption,
        validation_alias=AliasChoices("fuel_charges", "fuelCharges"),
    )
    driver_charges: ChargeOption = Field(
        default_factory=ChargeOption,
        validation_alias=AliasChoices("driver_charges", "driverCharges"),
    )
    night_charges: ChargeOption = Field(
        default_factory=ChargeOption,
        validation_alias=AliasChoices("night_charges", "nightCharges"),
    )

    @model_validator(mode="before")
    @classmethod
    def _zero_base_price_defers_to_price(cls, data: Any) -> Any:
        """Storefront records read ``basePrice or price``: a 0 base price is unset."""
        if isinstance(data, dict) and "basePrice" in data and not data["basePrice"] and data.get("price"):
            return {k: v for k, v in data.items() if k != "basePrice"}
        return data
