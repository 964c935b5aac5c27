"""Discrete day / hour clock for the one-week simulation.

Days run 1--7 and hours 0--23.  Advancing past hour 23 rolls over to
hour 0 of the next day, and advancing past day 7 wraps back to day 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24

RESET_DAY = 1
RESET_HOUR = 8


def wrap_day(day: int) -> int:
    """Map any day number onto the 1--7 week."""
    return (day - 1) % DAYS_PER_WEEK + 1


@dataclass(frozen=True)
class SimulationClock:
    day: int = RESET_DAY
    hour: int = RESET_HOUR

    def __post_init__(self) -> None:
        if not 1 <= self.day <= DAYS_PER_WEEK:
            raise ValueError(f"day must be in [1, {DAYS_PER_WEEK}], got {self.day}")
        if not 0 <= self.hour < HOURS_PER_DAY:
            raise ValueError(f"hour must be in [0, {HOURS_PER_DAY - 1}], got {self.hour}")

    def advance_hour(self) -> "SimulationClock":
        if self.hour + 1 >= HOURS_PER_DAY:
            return SimulationClock(day=wrap_day(self.day + 1), hour=0)
        return SimulationClock(day=self.day, hour=self.hour + 1)

    def advance_day(self) -> "SimulationClock":
        return SimulationClock(day=wrap_day(self.day + 1), hour=self.hour)

    @staticmethod
    def reset() -> "SimulationClock":
        return SimulationClock(day=RESET_DAY, hour=RESET_HOUR)

    def forecast_periods(self, steps: int = 6) -> Iterator[tuple[int, int]]:
        """Yield ``(day, hour)`` for each of the next ``steps`` hours.

        Days are wrapped into the week so the result can be used directly
        as a storage lookup key.
        """
        for i in range(1, steps + 1):
            offset = self.hour + i
            yield wrap_day(self.day + offset // HOURS_PER_DAY), offset % HOURS_PER_DAY
