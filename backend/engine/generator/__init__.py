"""Diesel engine snapshot and fuel calculators."""

from .diesel_engine import DieselEngine, running, standby
from .fuel import (
    CO2_KG_PER_LITRE_DIESEL,
    DEFAULT_FUEL_PRICE,
    carbon_emissions,
    daily_fuel_consumption,
    efficiency_ratio,
    fuel_consumption,
    fuel_cost,
    hourly_fuel_consumption,
    weekly_fuel_consumption,
)

__all__ = [
    "DieselEngine",
    "running",
    "standby",
    "CO2_KG_PER_LITRE_DIESEL",
    "DEFAULT_FUEL_PRICE",
    "carbon_emissions",
    "daily_fuel_consumption",
    "efficiency_ratio",
    "fuel_consumption",
    "fuel_cost",
    "hourly_fuel_consumption",
    "weekly_fuel_consumption",
]
