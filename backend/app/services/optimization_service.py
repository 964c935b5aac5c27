"""Bridges stored microgrid state and the pure rule core.

Each function reads a snapshot through the repositories, hands plain
values to :mod:`engine`, and (where needed) writes the result back.
Nothing here commits; routers own the transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.engine import Engine
from app.models.energy import EnergyStorage
from app.models.optimization import EconomicImpactRecord, OptimizationSuggestion
from app.repositories import (
    ConsumptionRepository,
    EngineRepository,
    ImpactRepository,
    SimulationStateRepository,
    SolarRepository,
    StorageRepository,
    SuggestionRepository,
)
from engine.advisor.instructions import DEFAULT_BATTERY_LEVEL, InstructionSet, generate_instructions
from engine.advisor.suggestions import (
    SuggestedAction,
    WeatherOutlook,
    generate_optimization_suggestions,
)
from engine.dispatch import Allocation, allocate_engine_output, energy_balance, total_production
from engine.economics import average_engine_efficiency, calculate_economic_impact
from engine.generator import (
    DieselEngine,
    carbon_emissions,
    daily_fuel_consumption,
    fuel_cost,
    hourly_fuel_consumption,
    weekly_fuel_consumption,
)
from engine.simulation.clock import SimulationClock

logger = logging.getLogger(__name__)


@dataclass
class Snapshot:
    clock: SimulationClock
    engines: list[DieselEngine]
    solar: float
    demand: float
    storage: EnergyStorage | None

    @property
    def battery_level(self) -> float:
        """Battery charge in percent, default when no battery is installed."""
        if self.storage is None or self.storage.max_capacity <= 0:
            return DEFAULT_BATTERY_LEVEL
        return self.storage.level * 100


async def load_snapshot(db: AsyncSession) -> Snapshot:
    clock = await SimulationStateRepository(db).clock()
    return Snapshot(
        clock=clock,
        engines=await EngineRepository(db).snapshot(),
        solar=await SolarRepository(db).value_at(clock.day, clock.hour),
        demand=await ConsumptionRepository(db).value_at(clock.day, clock.hour),
        storage=await StorageRepository(db).get(),
    )


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


async def regenerate_suggestions(
    db: AsyncSession,
    weather_outlook: WeatherOutlook | None = None,
) -> list[OptimizationSuggestion]:
    """Replace the unapplied suggestion set with one for the current snapshot."""
    snap = await load_snapshot(db)
    suggestions = generate_optimization_suggestions(
        snap.engines,
        snap.solar,
        snap.demand,
        storage_level=snap.storage.level if snap.storage else 0.0,
        battery_capacity=snap.storage.max_capacity if snap.storage else 0.0,
        weather_outlook=weather_outlook,
        fuel_price=settings.fuel_price_per_liter,
    )

    repo = SuggestionRepository(db)
    await repo.clear_unapplied()
    for s in suggestions:
        await repo.create(
            day=snap.clock.day,
            hour=snap.clock.hour,
            suggestion=s.suggestion,
            details=s.details,
            engine_id=s.engine_id,
            suggested_action=s.suggested_action.value,
            potential_savings=s.potential_savings,
        )

    logger.info(
        "Generated %d suggestions for day %d hour %d",
        len(suggestions), snap.clock.day, snap.clock.hour,
        extra={"count": len(suggestions), "day": snap.clock.day, "hour": snap.clock.hour},
    )
    return await repo.list_active()


async def apply_suggestion(db: AsyncSession, suggestion: OptimizationSuggestion) -> Engine | None:
    """Mark a suggestion applied and carry out its engine action.

    Returns the mutated engine, or ``None`` when the suggestion targets no
    engine (storage and weather actions) or the engine no longer exists.
    """
    engines = EngineRepository(db)
    await SuggestionRepository(db).update(suggestion, applied=True)

    action = SuggestedAction(suggestion.suggested_action)
    engine = await engines.find_by_id(suggestion.engine_id) if suggestion.engine_id else None
    if engine is None:
        logger.info("Applied suggestion %d (%s), no engine change", suggestion.id, action.value)
        return None

    if action == SuggestedAction.SHUT_DOWN:
        await engines.update(engine, is_running=False, current_output=0.0)
    elif action == SuggestedAction.START_ENGINE:
        await engines.update(engine, is_running=True, current_output=engine.optimal_threshold)
    elif action == SuggestedAction.OPTIMIZE_OR_SHUTDOWN:
        if engine.optimal_threshold <= engine.max_capacity:
            await engines.update(engine, current_output=engine.optimal_threshold)
        else:
            await engines.update(engine, is_running=False, current_output=0.0)

    logger.info(
        "Applied suggestion %d (%s) to engine %d", suggestion.id, action.value, engine.id,
        extra={"engine_id": engine.id, "action": action.value},
    )
    return engine


# ---------------------------------------------------------------------------
# Economic impact
# ---------------------------------------------------------------------------


async def refresh_economic_impact(db: AsyncSession) -> EconomicImpactRecord:
    """Recompute the impact of the current day's solar and store it."""
    clock = await SimulationStateRepository(db).clock()
    engines = await EngineRepository(db).snapshot()
    daily_solar = sum(r.output for r in await SolarRepository(db).list_day(clock.day))

    impact = calculate_economic_impact(
        daily_solar,
        average_engine_efficiency(engines),
        price_per_liter=settings.fuel_price_per_liter,
    )
    return await ImpactRepository(db).upsert(clock.day, **impact.to_dict())


async def refresh_current_state(
    db: AsyncSession,
    weather_outlook: WeatherOutlook | None = None,
) -> None:
    await regenerate_suggestions(db, weather_outlook)
    await refresh_economic_impact(db)


# ---------------------------------------------------------------------------
# Instructions, dispatch and status
# ---------------------------------------------------------------------------


async def build_instructions(db: AsyncSession) -> InstructionSet:
    snap = await load_snapshot(db)
    solar_repo = SolarRepository(db)
    demand_repo = ConsumptionRepository(db)

    forecast_solar: list[float] = []
    forecast_demand: list[float] = []
    for day, hour in snap.clock.forecast_periods(settings.forecast_hours):
        forecast_solar.append(await solar_repo.value_at(day, hour))
        forecast_demand.append(await demand_repo.value_at(day, hour))

    return generate_instructions(
        snap.engines,
        snap.solar,
        snap.demand,
        forecast_solar,
        forecast_demand,
        snap.clock.day,
        snap.clock.hour,
        battery_level=snap.battery_level,
    )


async def allocate_current_demand(db: AsyncSession, apply: bool = False) -> list[Allocation]:
    """Allocate the current hour's net demand; optionally write it to the engines."""
    snap = await load_snapshot(db)
    allocations = allocate_engine_output(snap.engines, snap.demand, snap.solar)

    if apply:
        repo = EngineRepository(db)
        for allocation in allocations:
            engine = await repo.find_by_id(allocation.engine_id)
            if engine is not None:
                await repo.update(engine, current_output=allocation.output)
        logger.info("Applied allocation to %d running engines", len(allocations))

    return allocations


async def status_summary(db: AsyncSession) -> dict[str, float | int]:
    snap = await load_snapshot(db)
    production = total_production(snap.engines, snap.solar)
    fuel_hourly = hourly_fuel_consumption(snap.engines)
    return {
        "day": snap.clock.day,
        "hour": snap.clock.hour,
        "solar": snap.solar,
        "demand": snap.demand,
        "total_production": production,
        "energy_balance": energy_balance(production, snap.demand),
        "battery_level": snap.battery_level,
        "fuel_per_hour": fuel_hourly,
        "fuel_per_day": daily_fuel_consumption(snap.engines),
        "fuel_per_week": weekly_fuel_consumption(snap.engines),
        "fuel_cost_per_hour": fuel_cost(fuel_hourly, settings.fuel_price_per_liter),
        "carbon_emissions_per_hour": carbon_emissions(fuel_hourly),
    }
