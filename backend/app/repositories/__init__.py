"""Explicit data-access layer; routers and services never query models directly."""

from app.repositories.energy import ConsumptionRepository, SolarRepository, StorageRepository
from app.repositories.engines import EngineRepository
from app.repositories.optimization import ImpactRepository, SuggestionRepository
from app.repositories.simulation import SimulationStateRepository

__all__ = [
    "ConsumptionRepository",
    "EngineRepository",
    "ImpactRepository",
    "SimulationStateRepository",
    "SolarRepository",
    "StorageRepository",
    "SuggestionRepository",
]
