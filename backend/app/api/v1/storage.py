from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import get_db
from app.models.energy import EnergyStorage
from app.repositories import StorageRepository
from app.schemas.energy import StorageResponse, StorageUpdate
from app.services.optimization_service import regenerate_suggestions

router = APIRouter()


async def _get_storage(db: AsyncSession) -> EnergyStorage:
    storage = await StorageRepository(db).get()
    if not storage:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Energy storage not found")
    return storage


@router.get("/", response_model=StorageResponse)
async def get_storage(db: AsyncSession = Depends(get_db)):
    return await _get_storage(db)


@router.patch("/", response_model=StorageResponse)
async def update_storage(body: StorageUpdate, db: AsyncSession = Depends(get_db)):
    storage = await _get_storage(db)
    fields = body.model_dump(exclude_unset=True)
    capacity = fields.get("max_capacity", storage.max_capacity)
    charge = fields.get("current_charge", storage.current_charge)
    if charge > capacity:
        raise HTTPException(
            status_code=422,
            detail=f"current_charge ({charge}) exceeds max_capacity ({capacity})",
        )
    await StorageRepository(db).update(storage, **fields)
    await regenerate_suggestions(db)
    await db.commit()
    await db.refresh(storage)
    return storage
