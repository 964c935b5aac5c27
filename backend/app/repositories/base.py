"""Repository base over an ``AsyncSession``.

Repositories add, update and flush; committing is left to the caller so
several repository calls can share one transaction.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_by_id(self, record_id: int) -> ModelT | None:
        return await self.db.get(self.model, record_id)

    async def list_all(self) -> list[ModelT]:
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def create(self, **fields: Any) -> ModelT:
        record = self.model(**fields)
        self.db.add(record)
        await self.db.flush()
        return record

    async def update(self, record: ModelT, **fields: Any) -> ModelT:
        for key, value in fields.items():
            setattr(record, key, value)
        await self.db.flush()
        return record

    async def delete(self, record: ModelT) -> None:
        await self.db.delete(record)
        await self.db.flush()
