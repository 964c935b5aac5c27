"""Tests for engine.generator -- engine snapshots, fuel and emissions."""

from __future__ import annotations

import pytest

from engine.generator import (
    CO2_KG_PER_LITRE_DIESEL,
    DieselEngine,
    carbon_emissions,
    daily_fuel_consumption,
    efficiency_ratio,
    fuel_consumption,
    fuel_cost,
    hourly_fuel_consumption,
    weekly_fuel_consumption,
)
from engine.generator.diesel_engine import running, standby


class TestEfficiencyRatio:
    @pytest.mark.parametrize("output", [0.0, 125.0, 250.0, 500.0])
    def test_within_unit_interval(self, output):
        ratio = efficiency_ratio(output, 500.0)
        assert 0.0 <= ratio <= 1.0

    def test_zero_capacity_returns_zero(self):
        assert efficiency_ratio(100.0, 0.0) == 0.0

    def test_engine_property(self, engine_a):
        engine_a.current_output = 250.0
        assert engine_a.efficiency_ratio == pytest.approx(0.5)


class TestFuelConsumption:
    def test_sums_running_engines(self, sample_fleet):
        expected = 300.0 / 4.2 + 150.0 / 3.8
        assert fuel_consumption(sample_fleet) == pytest.approx(expected)

    def test_stale_output_on_stopped_engine_ignored(self, engine_a):
        engine_a.is_running = False
        engine_a.current_output = 400.0
        assert fuel_consumption([engine_a]) == 0.0

    def test_zero_efficiency_contributes_nothing(self):
        broken = DieselEngine(
            id=9, name="Broken", max_capacity=100.0, efficiency=0.0,
            optimal_threshold=50.0, is_running=True, current_output=80.0,
        )
        assert fuel_consumption([broken]) == 0.0

    def test_empty_fleet(self):
        assert fuel_consumption([]) == 0.0

    def test_period_scaling(self, sample_fleet):
        hourly = hourly_fuel_consumption(sample_fleet)
        assert daily_fuel_consumption(sample_fleet) == pytest.approx(hourly * 24)
        assert weekly_fuel_consumption(sample_fleet) == pytest.approx(hourly * 24 * 7)


class TestEmissionsAndCost:
    def test_carbon_is_exact_multiple(self):
        assert carbon_emissions(10.0) == pytest.approx(27.0, abs=1e-9)
        assert carbon_emissions(1.0) == pytest.approx(CO2_KG_PER_LITRE_DIESEL, abs=1e-9)

    def test_fuel_cost_default_price(self):
        assert fuel_cost(10.0) == pytest.approx(15.0)

    def test_fuel_cost_custom_price(self):
        assert fuel_cost(10.0, price_per_liter=2.0) == pytest.approx(20.0)


class TestSnapshot:
    def test_running_and_standby_preserve_order(self, sample_fleet):
        assert [e.id for e in running(sample_fleet)] == [1, 2]
        assert [e.id for e in standby(sample_fleet)] == [3]

    def test_production_zero_when_stopped(self, engine_a):
        engine_a.current_output = 120.0
        assert engine_a.production == 120.0
        engine_a.is_running = False
        assert engine_a.production == 0.0

    def test_from_record(self):
        class Record:
            id = 7
            name = "Delta"
            max_capacity = 400
            efficiency = 4
            optimal_threshold = 120
            is_running = 1
            current_output = 90

        engine = DieselEngine.from_record(Record())
        assert engine.id == 7
        assert engine.is_running is True
        assert isinstance(engine.max_capacity, float)
        assert engine.current_output == 90.0
