from __future__ import annotations

from sqlalchemy import delete, select

from app.models.optimization import EconomicImpactRecord, OptimizationSuggestion
from app.repositories.base import Repository


class SuggestionRepository(Repository[OptimizationSuggestion]):
    model = OptimizationSuggestion

    async def list_active(self) -> list[OptimizationSuggestion]:
        """Unapplied suggestions, highest potential savings first."""
        result = await self.db.execute(
            select(OptimizationSuggestion)
            .where(OptimizationSuggestion.applied.is_(False))
            .order_by(OptimizationSuggestion.id)
        )
        # sorted() is stable: equal savings keep generation order.
        return sorted(
            result.scalars().all(),
            key=lambda s: s.potential_savings or 0.0,
            reverse=True,
        )

    async def clear_unapplied(self) -> None:
        await self.db.execute(
            delete(OptimizationSuggestion).where(OptimizationSuggestion.applied.is_(False))
        )
        await self.db.flush()


class ImpactRepository(Repository[EconomicImpactRecord]):
    model = EconomicImpactRecord

    async def find_by_day(self, day: int) -> EconomicImpactRecord | None:
        result = await self.db.execute(
            select(EconomicImpactRecord).where(EconomicImpactRecord.day == day)
        )
        return result.scalar_one_or_none()

    async def upsert(self, day: int, **fields) -> EconomicImpactRecord:
        existing = await self.find_by_day(day)
        if existing is not None:
            return await self.update(existing, **fields)
        return await self.create(day=day, **fields)
