"""Economic analysis module."""

from .impact import (
    DEFAULT_ENGINE_EFFICIENCY,
    EconomicImpact,
    average_engine_efficiency,
    calculate_economic_impact,
)

__all__ = [
    "DEFAULT_ENGINE_EFFICIENCY",
    "EconomicImpact",
    "average_engine_efficiency",
    "calculate_economic_impact",
]
