"""Shared test fixtures for GridOps engine and API tests."""

from __future__ import annotations

import pytest

from engine.generator import DieselEngine


# ======================================================================
# Engine fixtures
# ======================================================================

@pytest.fixture
def engine_a() -> DieselEngine:
    """Efficient running engine, idle."""
    return DieselEngine(
        id=1, name="Engine A", max_capacity=500.0, efficiency=5.0,
        optimal_threshold=150.0, is_running=True,
    )


@pytest.fixture
def engine_b() -> DieselEngine:
    """Less efficient running engine, idle."""
    return DieselEngine(
        id=2, name="Engine B", max_capacity=300.0, efficiency=3.0,
        optimal_threshold=100.0, is_running=True,
    )


@pytest.fixture
def sample_fleet() -> list[DieselEngine]:
    """Three-engine fleet resembling the seeded sample microgrid."""
    return [
        DieselEngine(
            id=1, name="Engine Alpha", max_capacity=500.0, efficiency=4.2,
            optimal_threshold=150.0, is_running=True, current_output=300.0,
        ),
        DieselEngine(
            id=2, name="Engine Beta", max_capacity=350.0, efficiency=3.8,
            optimal_threshold=100.0, is_running=True, current_output=150.0,
        ),
        DieselEngine(
            id=3, name="Engine Gamma", max_capacity=650.0, efficiency=5.1,
            optimal_threshold=200.0, is_running=False, current_output=0.0,
        ),
    ]
