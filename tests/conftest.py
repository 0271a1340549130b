"""Shared builders for pipeline value objects."""

from datetime import date, timedelta

import pytest

from planner.catalog import LAUNCH_SITES, LAUNCH_VEHICLES
from planner.models import (
    Azimuth,
    Cost,
    DailyWindow,
    Feasibility,
    LaunchRequirements,
    RankedWindow,
    Trajectory,
    TrajectoryCandidate,
)
from planner.requirements import daily_window


def make_trajectory(
    delta_v: float = 5.0,
    flight_time: float = 259.0,
    alignment: float = 50.0,
    launch: date = date(2025, 1, 1),
) -> Trajectory:
    return Trajectory(
        type="hohmann_transfer",
        flight_time=flight_time,
        delta_v=delta_v,
        arrival_date=launch + timedelta(days=int(flight_time)),
        semi_major_axis=1.26,
        alignment_score=alignment,
        efficiency=max(0.0, min(100.0, 100.0 - (delta_v - 3.0) * 10.0)),
    )


def make_requirements(
    weather: float = 85.0,
    seasonal: float = 75.0,
    delta_v: float = 5.0,
    launch: date = date(2025, 1, 1),
) -> LaunchRequirements:
    return LaunchRequirements(
        site=LAUNCH_SITES["KSC"],
        azimuth=Azimuth(optimal=90.0, range=(75.0, 105.0), inclination=28.6084),
        window=daily_window(launch),
        weather_probability=weather,
        seasonal_score=seasonal,
        c3_energy=delta_v**2,
        earth_departure_v=delta_v * 0.6,
    )


def make_candidate(
    score: int,
    launch: date = date(2025, 1, 1),
    delta_v: float = 5.0,
    flight_time: float = 259.0,
) -> TrajectoryCandidate:
    return TrajectoryCandidate(
        launch_date=launch,
        trajectory=make_trajectory(delta_v=delta_v, flight_time=flight_time, launch=launch),
        requirements=make_requirements(delta_v=delta_v, launch=launch),
        score=score,
    )


def make_window(score: int, overall: int, category: str = "Medium") -> RankedWindow:
    return RankedWindow(
        candidate=make_candidate(score),
        cost=Cost(launch=1_400_000.0, total=1_680_000.0, per_kg=1400.0),
        payload_margin=62_800.0,
        feasibility=Feasibility(
            technical=float(score), economic=100.0, schedule=100.0, risk=50.0,
            overall=overall, category=category,
        ),
    )


@pytest.fixture
def falcon_heavy():
    return LAUNCH_VEHICLES["Falcon Heavy"]


@pytest.fixture
def falcon_9():
    return LAUNCH_VEHICLES["Falcon 9"]
