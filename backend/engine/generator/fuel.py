"""Fuel, cost and emission calculators for diesel engines.

Engine fuel efficiency is expressed directly in kWh of electrical output
per litre of diesel, so fuel burned over one hour is simply

    F = P_output / efficiency   [L]

All functions are total: zero capacities or efficiencies yield 0 rather
than raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .diesel_engine import DieselEngine

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CO2_KG_PER_LITRE_DIESEL: float = 2.7
DEFAULT_FUEL_PRICE: float = 1.5  # per litre
HOURS_PER_DAY: int = 24
DAYS_PER_WEEK: int = 7


def efficiency_ratio(output: float, max_capacity: float) -> float:
    """Engine loading as a fraction of its max capacity.

    Returns 0.0 when ``max_capacity`` is 0.
    """
    if max_capacity == 0:
        return 0.0
    return output / max_capacity


def fuel_consumption(engines: Iterable["DieselEngine"]) -> float:
    """Litres of diesel burned per hour by the running engines.

    Stopped engines contribute nothing, even when a stale
    ``current_output`` is still recorded against them.
    """
    total = 0.0
    for engine in engines:
        if not engine.is_running or engine.efficiency <= 0:
            continue
        total += engine.current_output / engine.efficiency
    return total


def hourly_fuel_consumption(engines: Iterable["DieselEngine"]) -> float:
    return fuel_consumption(engines)


def daily_fuel_consumption(engines: Iterable["DieselEngine"]) -> float:
    """Estimate for a full day at the current operating point."""
    return fuel_consumption(engines) * HOURS_PER_DAY


def weekly_fuel_consumption(engines: Iterable["DieselEngine"]) -> float:
    """Estimate for a full week at the current operating point."""
    return fuel_consumption(engines) * HOURS_PER_DAY * DAYS_PER_WEEK


def carbon_emissions(fuel_liters: float) -> float:
    """kg of CO2 released by burning ``fuel_liters`` of diesel."""
    return fuel_liters * CO2_KG_PER_LITRE_DIESEL


def fuel_cost(fuel_liters: float, price_per_liter: float = DEFAULT_FUEL_PRICE) -> float:
    return fuel_liters * price_per_liter
