from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from app.models.database import Base


class SimulationState(Base):
    __tablename__ = "simulation_state"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    current_day: Mapped[int] = mapped_column(Integer, nullable=False, default=1)  # 1-7
    current_hour: Mapped[int] = mapped_column(Integer, nullable=False, default=8)  # 0-23
    is_running: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
