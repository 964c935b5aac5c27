from datetime import datetime, timezone

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.repositories import ImpactRepository, SimulationStateRepository, SuggestionRepository
from app.schemas.optimization import (
    ApplySuggestionResponse,
    EconomicImpactResponse,
    GenerateSuggestionsRequest,
    RefreshResponse,
    SuggestionResponse,
)
from app.services.optimization_service import (
    apply_suggestion,
    refresh_current_state,
    refresh_economic_impact,
    regenerate_suggestions,
)

router = APIRouter()
refresh_router = APIRouter()


@router.get("/suggestions", response_model=list[SuggestionResponse])
async def list_suggestions(db: AsyncSession = Depends(get_db)):
    return await SuggestionRepository(db).list_active()


@router.post("/suggestions/{suggestion_id}/apply", response_model=ApplySuggestionResponse)
async def apply_optimization_suggestion(suggestion_id: int, db: AsyncSession = Depends(get_db)):
    suggestion = await SuggestionRepository(db).find_by_id(suggestion_id)
    if not suggestion:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Suggestion not found")
    if suggestion.applied:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Suggestion already applied")

    engine = await apply_suggestion(db, suggestion)
    await db.commit()
    return ApplySuggestionResponse(engine_id=engine.id if engine else None)


@router.post("/generate", response_model=list[SuggestionResponse])
async def generate_suggestions(
    body: GenerateSuggestionsRequest | None = Body(default=None),
    db: AsyncSession = Depends(get_db),
):
    outlook = body.weather_outlook if body else None
    suggestions = await regenerate_suggestions(db, outlook)
    await db.commit()
    return suggestions


@router.get("/impact", response_model=EconomicImpactResponse)
async def get_economic_impact(db: AsyncSession = Depends(get_db)):
    clock = await SimulationStateRepository(db).clock()
    impact = await ImpactRepository(db).find_by_day(clock.day)
    if impact is None:
        impact = await refresh_economic_impact(db)
        await db.commit()
    return impact


@refresh_router.post("/refresh", response_model=RefreshResponse)
async def refresh(db: AsyncSession = Depends(get_db)):
    await refresh_current_state(db)
    await db.commit()
    return RefreshResponse(timestamp=datetime.now(timezone.utc))
