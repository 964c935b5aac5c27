from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.database import get_db
from app.models.engine import Engine
from app.repositories import EngineRepository
from app.schemas.engine import (
    EngineCreate,
    EngineOutputUpdate,
    EngineResponse,
    EngineToggle,
    EngineUpdate,
)
from app.services.optimization_service import regenerate_suggestions

router = APIRouter()


async def _get_engine(engine_id: int, db: AsyncSession) -> Engine:
    engine = await EngineRepository(db).find_by_id(engine_id)
    if not engine:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Engine not found")
    return engine


async def _save(db: AsyncSession, engine: Engine) -> Engine:
    await regenerate_suggestions(db)
    await db.commit()
    await db.refresh(engine)
    return engine


@router.get("/", response_model=list[EngineResponse])
async def list_engines(db: AsyncSession = Depends(get_db)):
    return await EngineRepository(db).list_all()


@router.get("/{engine_id}", response_model=EngineResponse)
async def get_engine(engine_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_engine(engine_id, db)


@router.post("/", response_model=EngineResponse, status_code=status.HTTP_201_CREATED)
async def create_engine(body: EngineCreate, db: AsyncSession = Depends(get_db)):
    fields = body.model_dump(exclude={"is_running"})
    is_running = settings.engine_default_running if body.is_running is None else body.is_running
    engine = await EngineRepository(db).create(**fields, is_running=is_running, current_output=0.0)
    return await _save(db, engine)


@router.patch("/{engine_id}", response_model=EngineResponse)
async def update_engine(engine_id: int, body: EngineUpdate, db: AsyncSession = Depends(get_db)):
    engine = await _get_engine(engine_id, db)
    await EngineRepository(db).update(engine, **body.model_dump(exclude_unset=True))
    return await _save(db, engine)


@router.patch("/{engine_id}/toggle", response_model=EngineResponse)
async def toggle_engine(engine_id: int, body: EngineToggle, db: AsyncSession = Depends(get_db)):
    engine = await _get_engine(engine_id, db)
    fields: dict = {"is_running": body.is_running}
    if not body.is_running:
        fields["current_output"] = 0.0
    await EngineRepository(db).update(engine, **fields)
    return await _save(db, engine)


@router.patch("/{engine_id}/output", response_model=EngineResponse)
async def set_engine_output(
    engine_id: int, body: EngineOutputUpdate, db: AsyncSession = Depends(get_db)
):
    engine = await _get_engine(engine_id, db)
    await EngineRepository(db).update(engine, current_output=body.current_output)
    return await _save(db, engine)


@router.delete("/{engine_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_engine(engine_id: int, db: AsyncSession = Depends(get_db)):
    engine = await _get_engine(engine_id, db)
    await EngineRepository(db).delete(engine)
    await regenerate_suggestions(db)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
