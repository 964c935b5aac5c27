"""Repositories for the (day, hour)-keyed solar and demand signals."""

from __future__ import annotations

from typing import TypeVar

from sqlalchemy import select

from app.models.energy import EnergyConsumption, EnergyStorage, SolarProduction
from app.repositories.base import Repository

PeriodModelT = TypeVar("PeriodModelT", SolarProduction, EnergyConsumption)


class PeriodRepository(Repository[PeriodModelT]):
    """Lookups by id or by (day, hour); the two never share a method."""

    value_field: str

    async def find_by_period(self, day: int, hour: int) -> PeriodModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.day == day, self.model.hour == hour)
        )
        return result.scalar_one_or_none()

    async def list_day(self, day: int) -> list[PeriodModelT]:
        result = await self.db.execute(
            select(self.model).where(self.model.day == day).order_by(self.model.hour)
        )
        return list(result.scalars().all())

    async def list_week(self) -> list[PeriodModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.day, self.model.hour)
        )
        return list(result.scalars().all())

    async def value_at(self, day: int, hour: int) -> float:
        """Signal value for a period, 0 when nothing is recorded."""
        record = await self.find_by_period(day, hour)
        return float(getattr(record, self.value_field)) if record else 0.0

    async def upsert(self, day: int, hour: int, **fields) -> tuple[PeriodModelT, bool]:
        """Create or update the record for a period. Returns (record, created)."""
        existing = await self.find_by_period(day, hour)
        if existing is not None:
            return await self.update(existing, **fields), False
        return await self.create(day=day, hour=hour, **fields), True


class SolarRepository(PeriodRepository[SolarProduction]):
    model = SolarProduction
    value_field = "output"


class ConsumptionRepository(PeriodRepository[EnergyConsumption]):
    model = EnergyConsumption
    value_field = "demand"


class StorageRepository(Repository[EnergyStorage]):
    model = EnergyStorage

    async def get(self) -> EnergyStorage | None:
        """The single battery instance, if one exists."""
        result = await self.db.execute(
            select(EnergyStorage).order_by(EnergyStorage.id).limit(1)
        )
        return result.scalar_one_or_none()
