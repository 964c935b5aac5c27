from __future__ import annotations

from app.models.engine import Engine
from app.repositories.base import Repository
from engine.generator import DieselEngine


class EngineRepository(Repository[Engine]):
    model = Engine

    async def snapshot(self) -> list[DieselEngine]:
        """Current fleet as core snapshots, in id order."""
        return [DieselEngine.from_record(e) for e in await self.list_all()]
