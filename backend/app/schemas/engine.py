from datetime import datetime

from pydantic import Field

from app.schemas.base import CamelModel


class EngineCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    max_capacity: float = Field(gt=0)
    efficiency: float = Field(gt=0)
    optimal_threshold: float = Field(gt=0)
    is_running: bool | None = None  # None -> settings.engine_default_running


class EngineUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    max_capacity: float | None = Field(default=None, gt=0)
    efficiency: float | None = Field(default=None, gt=0)
    optimal_threshold: float | None = Field(default=None, gt=0)
    is_running: bool | None = None
    current_output: float | None = Field(default=None, ge=0)


class EngineToggle(CamelModel):
    is_running: bool


class EngineOutputUpdate(CamelModel):
    current_output: float = Field(ge=0)


class EngineResponse(CamelModel):
    id: int
    name: str
    max_capacity: float
    efficiency: float
    optimal_threshold: float
    is_running: bool
    current_output: float
    created_at: datetime | None = None
