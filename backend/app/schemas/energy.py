from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class SolarProductionCreate(CamelModel):
    day: int = Field(ge=1, le=7)
    hour: int = Field(ge=0, le=23)
    output: float = Field(ge=0)
    weather: str | None = Field(default=None, max_length=50)


class SolarOutputUpdate(CamelModel):
    output: float = Field(ge=0)


class SolarProductionResponse(CamelModel):
    id: int
    day: int
    hour: int
    output: float
    weather: str | None = None
    created_at: datetime | None = None


class ConsumptionCreate(CamelModel):
    day: int = Field(ge=1, le=7)
    hour: int = Field(ge=0, le=23)
    demand: float = Field(ge=0)
    source: str | None = Field(default=None, max_length=100)


class ConsumptionDemandUpdate(CamelModel):
    demand: float = Field(ge=0)


class ConsumptionResponse(CamelModel):
    id: int
    day: int
    hour: int
    demand: float
    source: str | None = None
    created_at: datetime | None = None


class StorageUpdate(CamelModel):
    max_capacity: float | None = Field(default=None, gt=0)
    current_charge: float | None = Field(default=None, ge=0)
    charge_efficiency: float | None = Field(default=None, ge=0, le=1)
    discharge_efficiency: float | None = Field(default=None, ge=0, le=1)


class StorageResponse(CamelModel):
    id: int
    max_capacity: float
    current_charge: float
    charge_efficiency: float
    discharge_efficiency: float
    level: float
