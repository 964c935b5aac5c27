"""Simulation clock: read, set, advance and reset the current (day, hour)."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.models.simulation import SimulationState
from app.repositories import SimulationStateRepository
from app.schemas.simulation import SimulationStateResponse, SimulationStateUpdate
from app.services.optimization_service import refresh_current_state
from engine.simulation.clock import SimulationClock

router = APIRouter()
logger = logging.getLogger(__name__)


async def _move_clock(db: AsyncSession, state: SimulationState, clock: SimulationClock) -> SimulationState:
    moved = (clock.day, clock.hour) != (state.current_day, state.current_hour)
    await SimulationStateRepository(db).update(
        state, current_day=clock.day, current_hour=clock.hour
    )
    if moved:
        logger.info("Simulation clock moved to day %d hour %d", clock.day, clock.hour)
        await refresh_current_state(db)
    await db.commit()
    await db.refresh(state)
    return state


@router.get("/", response_model=SimulationStateResponse)
async def get_simulation_state(db: AsyncSession = Depends(get_db)):
    state = await SimulationStateRepository(db).get_or_create()
    await db.commit()
    return state


@router.patch("/", response_model=SimulationStateResponse)
async def update_simulation_state(body: SimulationStateUpdate, db: AsyncSession = Depends(get_db)):
    repo = SimulationStateRepository(db)
    state = await repo.get_or_create()
    if body.is_running is not None:
        await repo.update(state, is_running=body.is_running)
    clock = SimulationClock(
        day=body.current_day if body.current_day is not None else state.current_day,
        hour=body.current_hour if body.current_hour is not None else state.current_hour,
    )
    return await _move_clock(db, state, clock)


@router.post("/advance-hour", response_model=SimulationStateResponse)
async def advance_hour(db: AsyncSession = Depends(get_db)):
    repo = SimulationStateRepository(db)
    state = await repo.get_or_create()
    return await _move_clock(db, state, (await repo.clock()).advance_hour())


@router.post("/advance-day", response_model=SimulationStateResponse)
async def advance_day(db: AsyncSession = Depends(get_db)):
    repo = SimulationStateRepository(db)
    state = await repo.get_or_create()
    return await _move_clock(db, state, (await repo.clock()).advance_day())


@router.post("/reset", response_model=SimulationStateResponse)
async def reset_simulation(db: AsyncSession = Depends(get_db)):
    state = await SimulationStateRepository(db).get_or_create()
    return await _move_clock(db, state, SimulationClock.reset())
