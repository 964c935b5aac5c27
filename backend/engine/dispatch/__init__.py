"""Engine dispatch for the microgrid simulation.

* **allocate_engine_output** -- solar first, then running engines in merit
  order (optimal thresholds first, then top-up to max capacity).
"""

from .allocation import (
    Allocation,
    allocate_engine_output,
    energy_balance,
    total_production,
)

__all__ = [
    "Allocation",
    "allocate_engine_output",
    "energy_balance",
    "total_production",
]
