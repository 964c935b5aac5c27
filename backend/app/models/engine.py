from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class Engine(Base):
    __tablename__ = "engines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    max_capacity: Mapped[float] = mapped_column(Float, nullable=False)  # kWh/h
    efficiency: Mapped[float] = mapped_column(Float, nullable=False)  # kWh/L
    optimal_threshold: Mapped[float] = mapped_column(Float, nullable=False)  # kWh
    is_running: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    current_output: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
