"""Launch-site requirements for a candidate trajectory.

Weather, exact azimuth and seasonal jitter stand in for conditions that
cannot be known in advance, so they are sampled from an injected
``numpy.random.Generator``.  Pass a seeded generator for reproducible runs.
Draw order is fixed: azimuth, weather, seasonal.
"""

from __future__ import annotations

from datetime import date, timedelta

import numpy as np

from mechanics.transforms import utc_at
from planner.catalog import LaunchSite, get_launch_site, seasonal_preference
from planner.models import Azimuth, DailyWindow, LaunchRequirements, Trajectory

# Daily window: typical morning launch, 2 hours long
WINDOW_START_HOUR = 6
WINDOW_DURATION_MIN = 120

AZIMUTH_CENTER_DEG = 90.0
AZIMUTH_SPREAD_DEG = 60.0
AZIMUTH_HALF_RANGE_DEG = 15.0

DEPARTURE_V_FACTOR = 0.6


def launch_azimuth(site: LaunchSite, rng: np.random.Generator) -> Azimuth:
    """Placeholder azimuth estimate around due east, not a real solver."""
    optimal = AZIMUTH_CENTER_DEG + (rng.random() - 0.5) * AZIMUTH_SPREAD_DEG
    return Azimuth(
        optimal=optimal,
        range=(optimal - AZIMUTH_HALF_RANGE_DEG, optimal + AZIMUTH_HALF_RANGE_DEG),
        inclination=abs(site.lat),
    )


def daily_window(launch_date: date) -> DailyWindow:
    start = utc_at(launch_date, WINDOW_START_HOUR)
    return DailyWindow(
        start=start,
        end=start + timedelta(minutes=WINDOW_DURATION_MIN),
        duration=WINDOW_DURATION_MIN,
        instantaneous=False,
    )


def weather_probability(rng: np.random.Generator) -> float:
    return 70.0 + rng.random() * 30.0


def seasonal_score(launch_date: date, site: LaunchSite, rng: np.random.Generator) -> float:
    prefs = seasonal_preference(site)
    month = launch_date.month
    if month in prefs.best:
        return 90.0 + rng.random() * 10.0
    if month in prefs.worst:
        return 20.0 + rng.random() * 30.0
    return 60.0 + rng.random() * 30.0


def compute_launch_requirements(
    trajectory: Trajectory,
    launch_site: str | LaunchSite,
    launch_date: date,
    rng: np.random.Generator,
) -> LaunchRequirements:
    """Compute site, timing and environmental requirements for one launch date."""
    site = launch_site if isinstance(launch_site, LaunchSite) else get_launch_site(launch_site)

    azimuth = launch_azimuth(site, rng)
    weather = weather_probability(rng)
    seasonal = seasonal_score(launch_date, site, rng)

    return LaunchRequirements(
        site=site,
        azimuth=azimuth,
        window=daily_window(launch_date),
        weather_probability=weather,
        seasonal_score=seasonal,
        c3_energy=trajectory.delta_v**2,
        earth_departure_v=trajectory.delta_v * DEPARTURE_V_FACTOR,
    )
