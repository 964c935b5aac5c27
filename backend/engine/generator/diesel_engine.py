"""Diesel engine operating snapshot.

The rule core never talks to storage.  Callers hand it plain
:class:`DieselEngine` records describing each engine at the current
simulation hour, and the core reads them without mutating anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from .fuel import efficiency_ratio


@dataclass
class DieselEngine:
    """Dispatchable diesel engine as seen at one simulation hour.

    Parameters
    ----------
    id : int
        Identity of the engine in the caller's store.
    name : str
        Human readable label used in suggestion and instruction text.
    max_capacity : float
        Nameplate maximum output (kWh per hour).
    efficiency : float
        Fuel efficiency in kWh of electricity per litre of diesel.
    optimal_threshold : float
        Output (kWh) at or above which the engine runs efficiently.
        Conventionally <= max_capacity, not enforced.
    is_running : bool
        Whether the engine is online.
    current_output : float
        Present output (kWh).  Stale values on stopped engines are
        ignored by every calculation in :mod:`engine`.
    """

    id: int
    name: str
    max_capacity: float
    efficiency: float
    optimal_threshold: float
    is_running: bool = False
    current_output: float = 0.0

    @property
    def efficiency_ratio(self) -> float:
        """Loading as a fraction of max capacity (0 when capacity is 0)."""
        return efficiency_ratio(self.current_output, self.max_capacity)

    @property
    def production(self) -> float:
        """Output actually delivered to the bus (0 while stopped)."""
        return self.current_output if self.is_running else 0.0

    @classmethod
    def from_record(cls, record) -> "DieselEngine":
        """Build a snapshot from any object exposing the engine attributes."""
        return cls(
            id=record.id,
            name=record.name,
            max_capacity=float(record.max_capacity),
            efficiency=float(record.efficiency),
            optimal_threshold=float(record.optimal_threshold),
            is_running=bool(record.is_running),
            current_output=float(record.current_output),
        )


def running(engines: list[DieselEngine]) -> list[DieselEngine]:
    """Running engines, fleet order preserved."""
    return [e for e in engines if e.is_running]


def standby(engines: list[DieselEngine]) -> list[DieselEngine]:
    """Stopped engines, fleet order preserved."""
    return [e for e in engines if not e.is_running]
