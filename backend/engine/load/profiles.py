"""Synthetic solar and demand week for the microgrid simulation.

Creates 7 x 24 (one week, hourly resolution) solar-output and demand
samples from built-in daily templates, with random day-to-day and
hour-to-hour variation.  Pass ``seed`` for a reproducible week.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24


# ======================================================================
# Built-in hourly templates (kWh)
# ======================================================================

# Clear-sky solar output of the site array.
_SOLAR_HOURLY = np.array(
    [
        0, 0, 0, 0, 0, 10,          # 00-05
        45, 120, 280, 410, 520, 590,  # 06-11
        620, 580, 510, 390, 240, 90,  # 12-17
        20, 0, 0, 0, 0, 0,          # 18-23
    ],
    dtype=np.float64,
)

# Industrial facility with daytime working hours.
_DEMAND_HOURLY = np.array(
    [
        120, 110, 100, 90, 95, 150,   # 00-05
        280, 450, 600, 680, 720, 750,  # 06-11
        720, 700, 680, 650, 550, 420,  # 12-17
        350, 300, 250, 180, 150, 130,  # 18-23
    ],
    dtype=np.float64,
)

# Days 6 and 7 are the weekend.
_WEEKEND_DAYS = (6, 7)
_WEEKEND_MULTIPLIER = 0.6


@dataclass
class SolarSample:
    day: int
    hour: int
    output: float
    weather: str


@dataclass
class DemandSample:
    day: int
    hour: int
    demand: float
    source: str


def weather_condition(actual: float, expected: float) -> str:
    """Label an hour by how its output compares to the clear-sky template."""
    if expected == 0:
        return "Night"
    ratio = actual / expected
    if ratio > 0.9:
        return "Sunny"
    if ratio > 0.7:
        return "Partly Cloudy"
    if ratio > 0.4:
        return "Cloudy"
    return "Overcast"


def consumption_source(hour: int) -> str:
    """Dominant consumer for the given hour of day."""
    if 8 <= hour <= 17:
        return "Production Line"
    if 6 <= hour < 8:
        return "Startup Procedures"
    if 17 < hour <= 20:
        return "Maintenance"
    return "Base Facilities"


def generate_solar_week(seed: int | None = None) -> list[SolarSample]:
    """Generate one week of hourly solar output.

    Each day gets a multiplier in U(0.8, 1.2) (sunny vs. hazy day) and each
    hour a further U(0.9, 1.1) jitter.  Outputs are rounded to whole kWh.
    """
    rng = np.random.default_rng(seed)
    samples: list[SolarSample] = []

    for day in range(1, DAYS_PER_WEEK + 1):
        daily_multiplier = rng.uniform(0.8, 1.2)
        jitter = rng.uniform(0.9, 1.1, HOURS_PER_DAY)
        outputs = np.round(_SOLAR_HOURLY * daily_multiplier * jitter)

        for hour in range(HOURS_PER_DAY):
            output = float(outputs[hour])
            samples.append(SolarSample(
                day=day,
                hour=hour,
                output=output,
                weather=weather_condition(output, float(_SOLAR_HOURLY[hour])),
            ))

    return samples


def generate_demand_week(seed: int | None = None) -> list[DemandSample]:
    """Generate one week of hourly demand.

    Weekend days run at 60 % of the weekday pattern; every hour gets a
    U(0.95, 1.05) jitter.  Demands are rounded to whole kWh.
    """
    rng = np.random.default_rng(seed)
    samples: list[DemandSample] = []

    for day in range(1, DAYS_PER_WEEK + 1):
        day_multiplier = _WEEKEND_MULTIPLIER if day in _WEEKEND_DAYS else 1.0
        jitter = rng.uniform(0.95, 1.05, HOURS_PER_DAY)
        demands = np.round(_DEMAND_HOURLY * day_multiplier * jitter)

        for hour in range(HOURS_PER_DAY):
            samples.append(DemandSample(
                day=day,
                hour=hour,
                demand=float(demands[hour]),
                source=consumption_source(hour),
            ))

    return samples
