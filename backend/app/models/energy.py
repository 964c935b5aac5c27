from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class SolarProduction(Base):
    __tablename__ = "solar_production"
    __table_args__ = (UniqueConstraint("day", "hour", name="uq_solar_period"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    day: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-7
    hour: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-23
    output: Mapped[float] = mapped_column(Float, nullable=False)  # kWh
    weather: Mapped[str | None] = mapped_column(String(50))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class EnergyConsumption(Base):
    __tablename__ = "energy_consumption"
    __table_args__ = (UniqueConstraint("day", "hour", name="uq_consumption_period"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    day: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-7
    hour: Mapped[int] = mapped_column(Integer, nullable=False)  # 0-23
    demand: Mapped[float] = mapped_column(Float, nullable=False)  # kWh
    source: Mapped[str | None] = mapped_column(String(100))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class EnergyStorage(Base):
    __tablename__ = "energy_storage"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    max_capacity: Mapped[float] = mapped_column(Float, nullable=False)  # kWh
    current_charge: Mapped[float] = mapped_column(Float, nullable=False)  # kWh
    charge_efficiency: Mapped[float] = mapped_column(Float, nullable=False)  # 0-1
    discharge_efficiency: Mapped[float] = mapped_column(Float, nullable=False)  # 0-1
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    @property
    def level(self) -> float:
        """State of charge as a fraction in [0, 1]."""
        if self.max_capacity <= 0:
            return 0.0
        return self.current_charge / self.max_capacity
