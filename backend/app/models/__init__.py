# Import all models so Base.metadata knows every table
from app.models.database import Base  # noqa: F401
from app.models.engine import Engine  # noqa: F401
from app.models.energy import EnergyConsumption, EnergyStorage, SolarProduction  # noqa: F401
from app.models.simulation import SimulationState  # noqa: F401
from app.models.optimization import EconomicImpactRecord, OptimizationSuggestion  # noqa: F401
