from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class OptimizationSuggestion(Base):
    __tablename__ = "optimization_suggestions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    day: Mapped[int] = mapped_column(Integer, nullable=False)
    hour: Mapped[int] = mapped_column(Integer, nullable=False)
    suggestion: Mapped[str] = mapped_column(String(255), nullable=False)
    details: Mapped[str] = mapped_column(String(2000), nullable=False)
    # No FK: suggestions outlive deleted engines.
    engine_id: Mapped[int | None] = mapped_column(Integer)
    suggested_action: Mapped[str] = mapped_column(
        String(50), nullable=False
    )  # shutDown, optimizeOrShutdown, startEngine, chargeStorage, useStorage, planForWeather
    potential_savings: Mapped[float | None] = mapped_column(Float)
    applied: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class EconomicImpactRecord(Base):
    __tablename__ = "economic_impact"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    day: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    fuel_saved: Mapped[float] = mapped_column(Float, nullable=False)  # L
    cost_reduction: Mapped[float] = mapped_column(Float, nullable=False)  # currency
    carbon_offset: Mapped[float] = mapped_column(Float, nullable=False)  # kg CO2
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
