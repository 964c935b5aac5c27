"""Merit-order allocation of net demand across running diesel engines.

Solar is taken first; whatever demand remains is shared out among the
running engines, most fuel-efficient first:

**First pass:** each engine is brought up to its optimal threshold, capped
at its max capacity (or given whatever demand is left, if less).
**Second pass:** any demand still unserved tops engines up towards their
max capacity, in the same order.

Demand beyond the fleet's combined capacity is left unallocated, so the
total allocated never exceeds the sum of running max capacities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from engine.generator.diesel_engine import DieselEngine, running


@dataclass
class Allocation:
    engine_id: int
    output: float


def total_production(engines: Iterable[DieselEngine], solar_production: float) -> float:
    """Running engine output plus solar (kWh)."""
    return sum(e.production for e in engines) + solar_production


def energy_balance(production: float, consumption: float) -> float:
    """Positive = surplus, negative = deficit."""
    return production - consumption


def allocate_engine_output(
    engines: list[DieselEngine],
    demand: float,
    solar_production: float,
) -> list[Allocation]:
    """Distribute demand net of solar across running engines.

    Parameters
    ----------
    engines : list[DieselEngine]
        Full fleet; only running engines receive an allocation.
    demand : float
        Load to be served this hour (kWh).
    solar_production : float
        Solar output available this hour (kWh).

    Returns
    -------
    list[Allocation]
        One entry per running engine, ordered by efficiency descending.
        Ties keep fleet order.
    """
    # sorted() is stable, so equal efficiencies keep fleet order.
    merit_order = sorted(running(engines), key=lambda e: e.efficiency, reverse=True)
    if not merit_order:
        return []

    unallocated = max(0.0, demand - solar_production)
    allocations: list[Allocation] = []

    # ----- First pass: optimal thresholds ------------------------------
    for engine in merit_order:
        # Thresholds above max capacity are allowed; the grant never is.
        output = max(0.0, min(engine.optimal_threshold, engine.max_capacity, unallocated))
        unallocated -= output
        allocations.append(Allocation(engine_id=engine.id, output=output))

    # ----- Second pass: top up towards max capacity --------------------
    for engine, allocation in zip(merit_order, allocations):
        if unallocated <= 0:
            break
        spare = engine.max_capacity - allocation.output
        if spare > 0:
            extra = min(spare, unallocated)
            allocation.output += extra
            unallocated -= extra

    return allocations
