"""
Dispatch instruction generator.

Turns the current snapshot and a short forecast window into operator
instructions:

1. *Current* instructions (type ``immediate``) for the present hour --
   start / shut down engines, use the battery, fix badly loaded engines.
2. *Forecast* instructions for each of the next hours -- prepare for
   demand swings, solar peaks and demand peaks.

Instructions are emitted in rule order, then forecast hour ascending.
No secondary sort is applied.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Literal, Sequence

from engine.advisor.suggestions import SuggestedAction
from engine.generator.diesel_engine import DieselEngine, running, standby

Priority = Literal["high", "medium", "low"]
InstructionType = Literal["immediate", "scheduled"]

MAX_FORECAST_STEPS: int = 6
DEFAULT_BATTERY_LEVEL: float = 50.0

# Action token for an overloaded engine; no suggestion counterpart.
REDUCE_LOAD = "reduceLoad"


@dataclass
class Instruction:
    title: str
    description: str
    priority: Priority
    type: InstructionType = "immediate"
    engine_id: int | None = None
    action: str | None = None


@dataclass
class ForecastInstruction:
    hour: int
    day: int
    title: str
    description: str
    priority: Priority
    engine_id: int | None = None
    action: str | None = None


@dataclass
class InstructionSet:
    current_instructions: list[Instruction] = field(default_factory=list)
    forecast_instructions: list[ForecastInstruction] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _pick_engine_to_start(candidates: list[DieselEngine], deficit: float) -> DieselEngine:
    """Most efficient standby engine sized for the deficit, else the most efficient."""
    by_efficiency = sorted(candidates, key=lambda e: e.efficiency, reverse=True)
    for engine in by_efficiency:
        if engine.optimal_threshold <= deficit <= engine.max_capacity:
            return engine
    return by_efficiency[0]


def current_instructions(
    engines: list[DieselEngine],
    current_solar: float,
    current_demand: float,
    battery_level: float = DEFAULT_BATTERY_LEVEL,
) -> list[Instruction]:
    """Immediate instructions for the present hour."""
    instructions: list[Instruction] = []

    online = running(engines)
    offline = standby(engines)
    balance = sum(e.current_output for e in online) + current_solar - current_demand

    if balance < -20:
        deficit = -balance
        if offline and deficit > 50:
            engine = _pick_engine_to_start(offline, deficit)
            instructions.append(Instruction(
                title=f"Start {engine.name}",
                description=(
                    f"Energy deficit of {deficit:.0f} kWh. Start {engine.name} "
                    f"(capacity {engine.max_capacity:.0f} kWh) to cover demand."
                ),
                priority="high",
                engine_id=engine.id,
                action=SuggestedAction.START_ENGINE.value,
            ))
        elif battery_level > 20:
            instructions.append(Instruction(
                title="Discharge battery",
                description=(
                    f"Energy deficit of {deficit:.0f} kWh. Use battery storage "
                    f"({battery_level:.0f}% charged) to cover the shortfall."
                ),
                priority="medium",
                action=SuggestedAction.USE_STORAGE.value,
            ))

    elif balance > 50:
        if online:
            engine = min(online, key=lambda e: e.efficiency_ratio)
            instructions.append(Instruction(
                title=f"Shut down {engine.name}",
                description=(
                    f"Energy surplus of {balance:.0f} kWh. Shut down {engine.name} "
                    f"(running at {engine.efficiency_ratio * 100:.0f}% of capacity)."
                ),
                priority="medium",
                engine_id=engine.id,
                action=SuggestedAction.SHUT_DOWN.value,
            ))
        elif battery_level < 90:
            instructions.append(Instruction(
                title="Charge battery",
                description=(
                    f"Energy surplus of {balance:.0f} kWh. Store it in the battery "
                    f"({battery_level:.0f}% charged)."
                ),
                priority="medium",
                action=SuggestedAction.CHARGE_STORAGE.value,
            ))

    for engine in online:
        if engine.current_output < engine.optimal_threshold * 0.8:
            instructions.append(Instruction(
                title=f"Optimize {engine.name}",
                description=(
                    f"{engine.name} is running at {engine.current_output:.0f} kWh, "
                    f"below its optimal threshold of {engine.optimal_threshold:.0f} kWh. "
                    "Increase its load or shut it down."
                ),
                priority="high" if engine.current_output < engine.optimal_threshold * 0.6 else "medium",
                engine_id=engine.id,
                action=SuggestedAction.OPTIMIZE_OR_SHUTDOWN.value,
            ))
        elif engine.current_output > engine.max_capacity * 0.95:
            instructions.append(Instruction(
                title=f"Reduce load on {engine.name}",
                description=(
                    f"{engine.name} is at {engine.efficiency_ratio * 100:.0f}% of capacity. "
                    "Shift load to another engine to avoid overload."
                ),
                priority="high",
                engine_id=engine.id,
                action=REDUCE_LOAD,
            ))

    return instructions


def forecast_instructions(
    current_solar: float,
    current_demand: float,
    forecast_solar: Sequence[float],
    forecast_demand: Sequence[float],
    current_day: int,
    current_hour: int,
) -> list[ForecastInstruction]:
    """Scheduled instructions for the next hours of the forecast window.

    The window length is the shorter of the two forecasts, capped at
    :data:`MAX_FORECAST_STEPS`.  ``day`` is not wrapped into the week.
    """
    instructions: list[ForecastInstruction] = []
    steps = min(len(forecast_solar), len(forecast_demand), MAX_FORECAST_STEPS)

    for i in range(steps):
        offset = current_hour + i + 1
        hour = offset % 24
        day = current_day + offset // 24
        solar = forecast_solar[i]
        demand = forecast_demand[i]
        hour_balance = solar - demand

        if hour_balance < -50:
            shortfall = -hour_balance
            instructions.append(ForecastInstruction(
                hour=hour,
                day=day,
                title="Prepare for increased demand",
                description=(
                    f"Expected shortfall of {shortfall:.0f} kWh at {hour}:00. "
                    "Schedule additional engine capacity."
                ),
                priority="high" if shortfall > 100 else "medium",
                action=SuggestedAction.START_ENGINE.value,
            ))
        elif hour_balance > 100:
            instructions.append(ForecastInstruction(
                hour=hour,
                day=day,
                title="Prepare for reduced engine load",
                description=(
                    f"Expected solar surplus of {hour_balance:.0f} kWh at {hour}:00. "
                    "Plan to reduce engine output."
                ),
                priority="medium",
                action=SuggestedAction.SHUT_DOWN.value,
            ))

        if solar > current_solar * 1.5 and solar > 300:
            instructions.append(ForecastInstruction(
                hour=hour,
                day=day,
                title="Solar peak predicted",
                description=(
                    f"Solar output expected to reach {solar:.0f} kWh at {hour}:00. "
                    "Prepare to reduce engine load or charge storage."
                ),
                priority="medium",
                action=SuggestedAction.CHARGE_STORAGE.value,
            ))

        if demand > current_demand * 1.3 and demand > 500:
            instructions.append(ForecastInstruction(
                hour=hour,
                day=day,
                title="Demand peak predicted",
                description=(
                    f"Demand expected to reach {demand:.0f} kWh at {hour}:00. "
                    "Ensure sufficient engine capacity is available."
                ),
                priority="high",
                action=SuggestedAction.START_ENGINE.value,
            ))

    return instructions


def generate_instructions(
    engines: list[DieselEngine],
    current_solar: float,
    current_demand: float,
    forecast_solar: Sequence[float],
    forecast_demand: Sequence[float],
    current_day: int,
    current_hour: int,
    battery_level: float = DEFAULT_BATTERY_LEVEL,
) -> InstructionSet:
    """Current and forecast instructions for one simulation hour.

    Parameters
    ----------
    engines : list[DieselEngine]
        Full fleet snapshot.
    current_solar, current_demand : float
        Solar output and load for the present hour (kWh).
    forecast_solar, forecast_demand : sequence of float
        Values for the hours following the present one, aligned by index.
    current_day, current_hour : int
        Simulation clock position.
    battery_level : float
        Battery charge in percent (0--100).
    """
    return InstructionSet(
        current_instructions=current_instructions(
            engines, current_solar, current_demand, battery_level
        ),
        forecast_instructions=forecast_instructions(
            current_solar,
            current_demand,
            forecast_solar,
            forecast_demand,
            current_day,
            current_hour,
        ),
    )
