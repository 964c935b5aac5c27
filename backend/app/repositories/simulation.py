from __future__ import annotations

from sqlalchemy import select

from app.models.simulation import SimulationState
from app.repositories.base import Repository
from engine.simulation.clock import RESET_DAY, RESET_HOUR, SimulationClock


class SimulationStateRepository(Repository[SimulationState]):
    model = SimulationState

    async def get_or_create(self) -> SimulationState:
        result = await self.db.execute(
            select(SimulationState).order_by(SimulationState.id).limit(1)
        )
        state = result.scalar_one_or_none()
        if state is None:
            state = await self.create(
                current_day=RESET_DAY, current_hour=RESET_HOUR, is_running=False
            )
        return state

    async def clock(self) -> SimulationClock:
        state = await self.get_or_create()
        return SimulationClock(day=state.current_day, hour=state.current_hour)
