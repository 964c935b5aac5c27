"""Economic and environmental impact of solar substitution.

Every kWh delivered by solar is a kWh the diesel fleet did not have to
produce.  The impact is a counterfactual computed from aggregate solar
output and the fleet's average fuel efficiency, not from any specific
engine:

    fuel_saved     = solar_kwh / avg_efficiency      [L]
    cost_reduction = fuel_saved * fuel_price         [currency]
    carbon_offset  = fuel_saved * 2.7                [kg CO2]
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

from engine.generator.diesel_engine import DieselEngine
from engine.generator.fuel import CO2_KG_PER_LITRE_DIESEL, DEFAULT_FUEL_PRICE

# Assumed fleet efficiency (kWh/L) when no engines are registered.
DEFAULT_ENGINE_EFFICIENCY: float = 4.0


@dataclass
class EconomicImpact:
    fuel_saved: float
    cost_reduction: float
    carbon_offset: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def average_engine_efficiency(
    engines: Iterable[DieselEngine],
    default: float = DEFAULT_ENGINE_EFFICIENCY,
) -> float:
    """Mean efficiency over all engines, running or not."""
    efficiencies = [e.efficiency for e in engines]
    if not efficiencies:
        return default
    return sum(efficiencies) / len(efficiencies)


def calculate_economic_impact(
    solar_output: float,
    avg_engine_efficiency: float,
    price_per_liter: float = DEFAULT_FUEL_PRICE,
) -> EconomicImpact:
    """Fuel, money and CO2 saved because solar displaced diesel.

    Parameters
    ----------
    solar_output : float
        Solar energy delivered over the period of interest (kWh).
    avg_engine_efficiency : float
        Average fleet efficiency (kWh/L).  Non-positive values yield
        zero savings.
    price_per_liter : float
        Diesel price per litre.
    """
    if avg_engine_efficiency <= 0:
        fuel_saved = 0.0
    else:
        fuel_saved = solar_output / avg_engine_efficiency

    return EconomicImpact(
        fuel_saved=fuel_saved,
        cost_reduction=fuel_saved * price_per_liter,
        carbon_offset=fuel_saved * CO2_KG_PER_LITRE_DIESEL,
    )
