"""
Optimisation suggestion generator.

Takes the fleet snapshot plus solar / demand (and optionally battery state
and a weather outlook) for one simulation hour and returns actionable
suggestions, in the order the rules below are checked.

Pure arithmetic: no DB, no web deps, no randomness.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from engine.generator.diesel_engine import DieselEngine, running, standby
from engine.generator.fuel import DEFAULT_FUEL_PRICE

OVERPRODUCTION_MARGIN_KWH: float = 20.0
BELOW_THRESHOLD_PCT: float = 10.0
MIN_REPLACEABLE_ENGINES: int = 2


class SuggestedAction(str, Enum):
    SHUT_DOWN = "shutDown"
    OPTIMIZE_OR_SHUTDOWN = "optimizeOrShutdown"
    START_ENGINE = "startEngine"
    CHARGE_STORAGE = "chargeStorage"
    USE_STORAGE = "useStorage"
    PLAN_FOR_WEATHER = "planForWeather"


class WeatherOutlook(str, Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"


@dataclass
class Suggestion:
    suggestion: str
    details: str
    suggested_action: SuggestedAction
    engine_id: int | None = None
    potential_savings: float | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["suggested_action"] = self.suggested_action.value
        return data


def generate_optimization_suggestions(
    engines: list[DieselEngine],
    solar_production: float,
    demand: float,
    storage_level: float = 0.0,
    battery_capacity: float = 0.0,
    weather_outlook: WeatherOutlook | None = None,
    fuel_price: float = DEFAULT_FUEL_PRICE,
) -> list[Suggestion]:
    """Generate suggestions for one snapshot.

    Parameters
    ----------
    engines : list[DieselEngine]
        Full fleet, running and standby.
    solar_production : float
        Solar output this hour (kWh).
    demand : float
        Load this hour (kWh).
    storage_level : float
        Battery state of charge as a fraction in [0, 1].
    battery_capacity : float
        Battery capacity (kWh).  Battery rules are skipped when 0.
    weather_outlook : WeatherOutlook or None
        Forecast signal supplied by the caller.  A clear outlook adds a
        planning suggestion; ``None`` means no forecast is available.
    fuel_price : float
        Diesel price per litre used to price the savings of a shutdown.
    """
    suggestions: list[Suggestion] = []

    online = running(engines)
    offline = standby(engines)
    engine_output = sum(e.current_output for e in online)
    overproduction = engine_output + solar_production - demand

    # ── Overproduction ────────────────────────────────────────

    if overproduction > OVERPRODUCTION_MARGIN_KWH and online:
        # min() returns the first of equal ratios, i.e. fleet order on ties.
        worst = min(online, key=lambda e: e.efficiency_ratio)
        fuel_l = worst.current_output / worst.efficiency if worst.efficiency > 0 else 0.0
        suggestions.append(Suggestion(
            suggestion="Reduce overproduction",
            details=(
                f"System is producing {overproduction:.0f} kWh more than needed. "
                f"Consider shutting down {worst.name}."
            ),
            engine_id=worst.id,
            suggested_action=SuggestedAction.SHUT_DOWN,
            potential_savings=fuel_l * fuel_price,
        ))

    # ── Engines below optimal threshold ───────────────────────

    for engine in online:
        if engine.optimal_threshold <= 0 or engine.current_output >= engine.optimal_threshold:
            continue
        pct_below = (
            (engine.optimal_threshold - engine.current_output) / engine.optimal_threshold * 100
        )
        if pct_below > BELOW_THRESHOLD_PCT:
            suggestions.append(Suggestion(
                suggestion=f"{engine.name} below optimal threshold",
                details=(
                    f"Running at {engine.current_output:.0f} kWh "
                    f"(optimal: {engine.optimal_threshold:.0f} kWh). "
                    "Increase load or shut down for better efficiency."
                ),
                engine_id=engine.id,
                suggested_action=SuggestedAction.OPTIMIZE_OR_SHUTDOWN,
            ))

    # ── Replace an inefficient cluster with one standby engine ─

    for candidate in offline:
        worse = [e for e in online if e.efficiency < candidate.efficiency]
        if len(worse) < MIN_REPLACEABLE_ENGINES:
            continue
        combined = sum(e.current_output for e in worse)
        if candidate.optimal_threshold <= combined <= candidate.max_capacity:
            suggestions.append(Suggestion(
                suggestion=f"Start more efficient engine {candidate.name}",
                details=(
                    f"Replace {len(worse)} less efficient engines with "
                    f"{candidate.name} for better fuel economy."
                ),
                engine_id=candidate.id,
                suggested_action=SuggestedAction.START_ENGINE,
            ))

    # ── Battery ───────────────────────────────────────────────

    if battery_capacity > 0:
        if solar_production > demand * 0.5 and storage_level < 0.9:
            suggestions.append(Suggestion(
                suggestion="Store excess solar energy",
                details="High solar production detected. Store excess energy in battery for later use.",
                suggested_action=SuggestedAction.CHARGE_STORAGE,
            ))

        if solar_production < demand * 0.2 and storage_level > 0.3:
            suggestions.append(Suggestion(
                suggestion="Use battery storage",
                details="Low solar production. Discharge battery to reduce engine load.",
                suggested_action=SuggestedAction.USE_STORAGE,
            ))

    # ── Weather ───────────────────────────────────────────────

    if weather_outlook == WeatherOutlook.CLEAR:
        suggestions.append(Suggestion(
            suggestion="Possible solar output increase",
            details=(
                "Weather forecast predicts clear skies tomorrow. "
                "Reduce scheduled engine usage from 8:00-16:00."
            ),
            suggested_action=SuggestedAction.PLAN_FOR_WEATHER,
        ))

    return suggestions
