"""Tests for engine.advisor.instructions -- current and forecast instructions."""

from __future__ import annotations

from engine.advisor.instructions import (
    MAX_FORECAST_STEPS,
    REDUCE_LOAD,
    current_instructions,
    forecast_instructions,
    generate_instructions,
)


def _titles(instructions) -> list[str]:
    return [i.title for i in instructions]


# ======================================================================
# Current instructions
# ======================================================================


class TestDeficit:
    def test_start_standby_engine(self, engine_a, engine_b):
        engine_a.current_output = 200.0
        engine_b.is_running = False
        result = current_instructions([engine_a, engine_b], current_solar=0.0, current_demand=260.0)

        assert len(result) == 1
        start = result[0]
        assert start.title == "Start Engine B"
        assert start.priority == "high"
        assert start.type == "immediate"
        assert start.engine_id == 2
        assert start.action == "startEngine"

    def test_prefers_standby_engine_sized_for_deficit(self, engine_a, engine_b):
        # A is more efficient and its threshold fits a 200 kWh deficit.
        engine_a.is_running = False
        engine_b.is_running = False
        result = current_instructions([engine_b, engine_a], 0.0, 200.0)
        assert _titles(result) == ["Start Engine A"]

    def test_battery_covers_small_deficit(self, engine_a, engine_b):
        engine_a.current_output = 200.0
        engine_b.is_running = False
        result = current_instructions([engine_a, engine_b], 0.0, 240.0, battery_level=60.0)
        assert _titles(result) == ["Discharge battery"]
        assert result[0].priority == "medium"

    def test_empty_battery_gives_nothing(self, engine_a):
        engine_a.current_output = 200.0
        assert current_instructions([engine_a], 0.0, 300.0, battery_level=15.0) == []


class TestSurplus:
    def test_shut_down_least_loaded_engine(self, engine_a, engine_b):
        engine_a.current_output = 400.0
        engine_b.current_output = 290.0  # 97 % loaded
        result = current_instructions([engine_a, engine_b], 0.0, 600.0)
        assert result[0].title == "Shut down Engine A"
        assert result[0].priority == "medium"

    def test_charge_battery_without_running_engines(self, engine_a):
        engine_a.is_running = False
        result = current_instructions([engine_a], 300.0, 100.0, battery_level=50.0)
        assert _titles(result) == ["Charge battery"]

    def test_full_battery_not_charged(self):
        assert current_instructions([], 300.0, 100.0, battery_level=95.0) == []


class TestPerEngine:
    def test_far_below_threshold_is_high(self, engine_a):
        engine_a.current_output = 80.0  # < 0.6 * 150
        result = current_instructions([engine_a], 0.0, 80.0)
        assert _titles(result) == ["Optimize Engine A"]
        assert result[0].priority == "high"

    def test_slightly_below_threshold_is_medium(self, engine_a):
        engine_a.current_output = 110.0  # between 0.6 and 0.8 of 150
        result = current_instructions([engine_a], 0.0, 110.0)
        assert result[0].priority == "medium"

    def test_near_capacity_reduce_load(self, engine_a):
        engine_a.current_output = 490.0
        result = current_instructions([engine_a], 0.0, 490.0)
        assert _titles(result) == ["Reduce load on Engine A"]
        assert result[0].priority == "high"
        assert result[0].action == REDUCE_LOAD

    def test_healthy_engine_no_instruction(self, engine_a):
        engine_a.current_output = 300.0
        assert current_instructions([engine_a], 0.0, 300.0) == []


# ======================================================================
# Forecast instructions
# ======================================================================


class TestForecast:
    def test_solar_surplus_and_peak(self):
        result = forecast_instructions(
            current_solar=100.0, current_demand=400.0,
            forecast_solar=[500.0], forecast_demand=[100.0],
            current_day=2, current_hour=10,
        )
        assert _titles(result) == ["Prepare for reduced engine load", "Solar peak predicted"]
        assert all(i.priority == "medium" for i in result)
        assert all((i.day, i.hour) == (2, 11) for i in result)

    def test_shortfall_and_demand_peak(self):
        result = forecast_instructions(400.0, 400.0, [0.0], [700.0], 1, 8)
        assert _titles(result) == ["Prepare for increased demand", "Demand peak predicted"]
        assert [i.priority for i in result] == ["high", "high"]

    def test_moderate_shortfall_is_medium(self):
        result = forecast_instructions(0.0, 100.0, [0.0], [80.0], 1, 0)
        assert _titles(result) == ["Prepare for increased demand"]
        assert result[0].priority == "medium"

    def test_day_rollover_not_wrapped(self):
        result = forecast_instructions(0.0, 100.0, [0.0, 0.0], [200.0, 200.0], 7, 23)
        assert [(i.day, i.hour) for i in result] == [(8, 0), (8, 1)]

    def test_window_capped(self):
        result = forecast_instructions(0.0, 100.0, [0.0] * 10, [200.0] * 10, 1, 0)
        assert len(result) == MAX_FORECAST_STEPS
        assert [i.hour for i in result] == [1, 2, 3, 4, 5, 6]

    def test_window_uses_shorter_forecast(self):
        result = forecast_instructions(0.0, 100.0, [0.0] * 5, [200.0] * 2, 1, 0)
        assert len(result) == 2


def test_generate_instructions_combines_both(engine_a):
    engine_a.current_output = 300.0
    result = generate_instructions(
        [engine_a], 100.0, 400.0, [500.0], [100.0], current_day=3, current_hour=12,
    )
    assert result.current_instructions == []
    assert len(result.forecast_instructions) == 2

    data = result.to_dict()
    assert set(data) == {"current_instructions", "forecast_instructions"}
    assert data["forecast_instructions"][0]["hour"] == 13
