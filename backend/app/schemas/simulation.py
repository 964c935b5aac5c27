from pydantic import Field

from app.schemas.base import CamelModel


class SimulationStateUpdate(CamelModel):
    current_day: int | None = Field(default=None, ge=1, le=7)
    current_hour: int | None = Field(default=None, ge=0, le=23)
    is_running: bool | None = None


class SimulationStateResponse(CamelModel):
    current_day: int
    current_hour: int
    is_running: bool


class StatusResponse(CamelModel):
    day: int
    hour: int
    solar: float
    demand: float
    total_production: float
    energy_balance: float
    battery_level: float
    fuel_per_hour: float
    fuel_per_day: float
    fuel_per_week: float
    fuel_cost_per_hour: float
    carbon_emissions_per_hour: float
