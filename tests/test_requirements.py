"""Tests for launch-site requirements with an injected RNG."""

from datetime import date, datetime, timezone

import numpy as np
import pytest

from mechanics.hohmann import compute_transfer
from planner.catalog import LAUNCH_SITES
from planner.errors import UnknownLaunchSiteError
from planner.requirements import (
    compute_launch_requirements,
    daily_window,
    launch_azimuth,
    seasonal_score,
    weather_probability,
)

LAUNCH = date(2025, 4, 1)


@pytest.fixture
def trajectory():
    return compute_transfer("earth", "mars", LAUNCH)


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


class TestComputeLaunchRequirements:

    def test_derived_energy_terms(self, trajectory):
        req = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng())
        assert req.c3_energy == pytest.approx(trajectory.delta_v**2)
        assert req.earth_departure_v == pytest.approx(trajectory.delta_v * 0.6)

    def test_site_resolved(self, trajectory):
        req = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng())
        assert req.site is LAUNCH_SITES["KSC"]
        assert req.site.name == "Kennedy Space Center"

    def test_site_code_case_insensitive(self, trajectory):
        req = compute_launch_requirements(trajectory, "kourou", LAUNCH, _rng())
        assert req.site.code == "Kourou"

    def test_unknown_site(self, trajectory):
        with pytest.raises(UnknownLaunchSiteError):
            compute_launch_requirements(trajectory, "Cape Nowhere", LAUNCH, _rng())

    def test_seeded_rng_is_reproducible(self, trajectory):
        a = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng(7))
        b = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng(7))
        assert a == b

    def test_different_seeds_differ(self, trajectory):
        a = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng(1))
        b = compute_launch_requirements(trajectory, "KSC", LAUNCH, _rng(2))
        assert a.weather_probability != b.weather_probability

    def test_sampled_values_in_bounds(self, trajectory):
        rng = _rng(3)
        for _ in range(200):
            req = compute_launch_requirements(trajectory, "VAFB", LAUNCH, rng)
            assert 70.0 <= req.weather_probability <= 100.0
            assert 0.0 <= req.seasonal_score <= 100.0
            assert 60.0 <= req.azimuth.optimal <= 120.0


class TestAzimuth:

    def test_range_and_inclination(self):
        site = LAUNCH_SITES["Baikonur"]
        az = launch_azimuth(site, _rng())
        assert az.range == (pytest.approx(az.optimal - 15.0), pytest.approx(az.optimal + 15.0))
        assert az.inclination == pytest.approx(45.92)

    def test_southern_site_inclination_positive(self):
        assert launch_azimuth(LAUNCH_SITES["Kourou"], _rng()).inclination > 0


class TestDailyWindow:

    def test_two_hour_morning_window(self):
        w = daily_window(LAUNCH)
        assert w.start == datetime(2025, 4, 1, 6, 0, tzinfo=timezone.utc)
        assert w.end == datetime(2025, 4, 1, 8, 0, tzinfo=timezone.utc)
        assert w.duration == 120
        assert w.instantaneous is False


class TestWeather:

    def test_bounds(self):
        rng = _rng(11)
        values = [weather_probability(rng) for _ in range(500)]
        assert min(values) >= 70.0
        assert max(values) <= 100.0


class TestSeasonalScore:

    @pytest.mark.parametrize("month,low,high", [
        (4, 90.0, 100.0),   # best
        (7, 20.0, 50.0),    # worst (hurricane season)
        (1, 60.0, 90.0),    # neutral
    ])
    def test_ksc_months(self, month, low, high):
        site = LAUNCH_SITES["KSC"]
        rng = _rng(5)
        for _ in range(50):
            score = seasonal_score(date(2025, month, 15), site, rng)
            assert low <= score <= high

    def test_vafb_winter_is_worst(self):
        score = seasonal_score(date(2025, 1, 15), LAUNCH_SITES["VAFB"], _rng())
        assert 20.0 <= score <= 50.0

    def test_site_without_table_uses_ksc(self):
        """Plesetsk has no entry and falls back to KSC preferences."""
        score = seasonal_score(date(2025, 7, 15), LAUNCH_SITES["Plesetsk"], _rng())
        assert 20.0 <= score <= 50.0
