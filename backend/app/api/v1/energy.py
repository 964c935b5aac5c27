"""Solar production and energy consumption signals, keyed by (day, hour)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.repositories import ConsumptionRepository, SimulationStateRepository, SolarRepository
from app.schemas.energy import (
    ConsumptionCreate,
    ConsumptionDemandUpdate,
    ConsumptionResponse,
    SolarOutputUpdate,
    SolarProductionCreate,
    SolarProductionResponse,
)
from app.services.optimization_service import refresh_current_state

solar_router = APIRouter()
consumption_router = APIRouter()

Day = Annotated[int, Path(ge=1, le=7)]


# ======================================================================
# Solar
# ======================================================================


@solar_router.get("/current", response_model=SolarProductionResponse | dict)
async def current_solar(db: AsyncSession = Depends(get_db)):
    clock = await SimulationStateRepository(db).clock()
    record = await SolarRepository(db).find_by_period(clock.day, clock.hour)
    if record is None:
        return {"output": 0}
    return SolarProductionResponse.model_validate(record)


@solar_router.get("/day/{day}", response_model=list[SolarProductionResponse])
async def daily_solar(day: Day, db: AsyncSession = Depends(get_db)):
    return await SolarRepository(db).list_day(day)


@solar_router.get("/week", response_model=list[SolarProductionResponse])
async def weekly_solar(db: AsyncSession = Depends(get_db)):
    return await SolarRepository(db).list_week()


@solar_router.post("/", response_model=SolarProductionResponse)
async def upsert_solar(
    body: SolarProductionCreate, response: Response, db: AsyncSession = Depends(get_db)
):
    record, created = await SolarRepository(db).upsert(
        body.day, body.hour, output=body.output, weather=body.weather
    )
    await refresh_current_state(db)
    await db.commit()
    await db.refresh(record)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return record


@solar_router.patch("/{record_id}", response_model=SolarProductionResponse)
async def update_solar_output(
    record_id: int, body: SolarOutputUpdate, db: AsyncSession = Depends(get_db)
):
    repo = SolarRepository(db)
    record = await repo.find_by_id(record_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Solar production data not found"
        )
    await repo.update(record, output=body.output)
    await refresh_current_state(db)
    await db.commit()
    await db.refresh(record)
    return record


# ======================================================================
# Consumption
# ======================================================================


@consumption_router.get("/current", response_model=ConsumptionResponse | dict)
async def current_consumption(db: AsyncSession = Depends(get_db)):
    clock = await SimulationStateRepository(db).clock()
    record = await ConsumptionRepository(db).find_by_period(clock.day, clock.hour)
    if record is None:
        return {"demand": 0}
    return ConsumptionResponse.model_validate(record)


@consumption_router.get("/day/{day}", response_model=list[ConsumptionResponse])
async def daily_consumption(day: Day, db: AsyncSession = Depends(get_db)):
    return await ConsumptionRepository(db).list_day(day)


@consumption_router.get("/week", response_model=list[ConsumptionResponse])
async def weekly_consumption(db: AsyncSession = Depends(get_db)):
    return await ConsumptionRepository(db).list_week()


@consumption_router.post("/", response_model=ConsumptionResponse)
async def upsert_consumption(
    body: ConsumptionCreate, response: Response, db: AsyncSession = Depends(get_db)
):
    record, created = await ConsumptionRepository(db).upsert(
        body.day, body.hour, demand=body.demand, source=body.source
    )
    await refresh_current_state(db)
    await db.commit()
    await db.refresh(record)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return record


@consumption_router.patch("/{record_id}", response_model=ConsumptionResponse)
async def update_consumption_demand(
    record_id: int, body: ConsumptionDemandUpdate, db: AsyncSession = Depends(get_db)
):
    repo = ConsumptionRepository(db)
    record = await repo.find_by_id(record_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Consumption data not found"
        )
    await repo.update(record, demand=body.demand)
    await refresh_current_state(db)
    await db.commit()
    await db.refresh(record)
    return record
