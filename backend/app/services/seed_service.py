"""Sample microgrid used when the database starts empty."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.repositories import (
    ConsumptionRepository,
    EngineRepository,
    SimulationStateRepository,
    SolarRepository,
    StorageRepository,
)
from app.services.optimization_service import allocate_current_demand, refresh_current_state
from engine.load.profiles import generate_demand_week, generate_solar_week

logger = logging.getLogger(__name__)

SAMPLE_ENGINES = [
    {"name": "Engine Alpha", "max_capacity": 500.0, "efficiency": 4.2, "optimal_threshold": 150.0},
    {"name": "Engine Beta", "max_capacity": 350.0, "efficiency": 3.8, "optimal_threshold": 100.0},
    {"name": "Engine Gamma", "max_capacity": 650.0, "efficiency": 5.1, "optimal_threshold": 200.0},
]

SAMPLE_STORAGE = {
    "max_capacity": 600.0,
    "current_charge": 450.0,
    "charge_efficiency": 0.9,
    "discharge_efficiency": 0.95,
}


async def seed_sample_data(db: AsyncSession, seed: int | None = None) -> bool:
    """Populate an empty database. Returns False when data already exists."""
    engines = EngineRepository(db)
    if await engines.list_all():
        return False

    for fields in SAMPLE_ENGINES:
        await engines.create(**fields, is_running=True, current_output=0.0)

    await StorageRepository(db).create(**SAMPLE_STORAGE)
    await SimulationStateRepository(db).get_or_create()

    solar = SolarRepository(db)
    for sample in generate_solar_week(seed):
        await solar.create(
            day=sample.day, hour=sample.hour, output=sample.output, weather=sample.weather
        )

    consumption = ConsumptionRepository(db)
    for sample in generate_demand_week(seed):
        await consumption.create(
            day=sample.day, hour=sample.hour, demand=sample.demand, source=sample.source
        )

    # Match the fleet to the opening hour's demand before the first suggestions.
    allocations = await allocate_current_demand(db, apply=True)
    await refresh_current_state(db)
    await db.commit()

    logger.info(
        "Seeded %d engines, 168 solar and demand hours; opening output %.0f kWh",
        len(SAMPLE_ENGINES), sum(a.output for a in allocations),
    )
    return True


async def seed_if_enabled(db: AsyncSession) -> None:
    if settings.seed_sample_data:
        await seed_sample_data(db, settings.profile_seed)
