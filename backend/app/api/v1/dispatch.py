from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.schemas.optimization import AllocationResponse
from app.schemas.simulation import StatusResponse
from app.services.optimization_service import (
    allocate_current_demand,
    regenerate_suggestions,
    status_summary,
)

router = APIRouter()


@router.post(
    "/dispatch/allocate",
    response_model=list[AllocationResponse],
    summary="Allocate engine output",
    description="Share the current hour's demand net of solar across running engines, "
    "most efficient first. With apply=true the outputs are written to the engines.",
)
async def allocate(
    apply: bool = Query(default=False),
    db: AsyncSession = Depends(get_db),
):
    allocations = await allocate_current_demand(db, apply=apply)
    if apply:
        await regenerate_suggestions(db)
        await db.commit()
    return [AllocationResponse(id=a.engine_id, output=a.output) for a in allocations]


@router.get("/status", response_model=StatusResponse)
async def get_status(db: AsyncSession = Depends(get_db)):
    return await status_summary(db)
