from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel
from engine.advisor.suggestions import SuggestedAction, WeatherOutlook


class SuggestionResponse(CamelModel):
    id: int
    day: int
    hour: int
    suggestion: str
    details: str
    engine_id: int | None = None
    suggested_action: SuggestedAction
    potential_savings: float | None = None
    applied: bool
    created_at: datetime | None = None


class GenerateSuggestionsRequest(CamelModel):
    weather_outlook: WeatherOutlook | None = None


class ApplySuggestionResponse(CamelModel):
    success: bool = True
    message: str = "Suggestion applied"
    engine_id: int | None = None


class EconomicImpactResponse(CamelModel):
    day: int | None = None
    fuel_saved: float = 0.0
    cost_reduction: float = 0.0
    carbon_offset: float = 0.0


class InstructionResponse(CamelModel):
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    type: Literal["immediate", "scheduled"]
    engine_id: int | None = None
    action: str | None = None


class ForecastInstructionResponse(CamelModel):
    hour: int
    day: int
    title: str
    description: str
    priority: Literal["high", "medium", "low"]
    engine_id: int | None = None
    action: str | None = None


class InstructionSetResponse(CamelModel):
    current_instructions: list[InstructionResponse]
    forecast_instructions: list[ForecastInstructionResponse]


class AllocationResponse(CamelModel):
    engine_id: int = Field(alias="id")
    output: float


class RefreshResponse(CamelModel):
    success: bool = True
    message: str = "Data refreshed successfully"
    timestamp: datetime
