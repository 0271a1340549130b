"""Tests for the simplified Hohmann transfer and alignment scoring."""

import math
from datetime import date

import pytest

from mechanics.hohmann import (
    TRANSFER_TYPE,
    alignment_score,
    compute_transfer,
    efficiency,
    hohmann_kernel,
    phase_angle,
    synodic_period,
)
from ephemeris.bodies import AU_KM, GM_SUN
from planner.errors import UnknownBodyError, UnknownReferenceError

LAUNCH = date(2025, 1, 1)


# --------------------------------------------------------------------------- #
#  Transfer computation
# --------------------------------------------------------------------------- #

class TestComputeTransfer:

    def test_deterministic(self):
        """Repeated calls return identical physics."""
        a = compute_transfer("earth", "mars", LAUNCH)
        b = compute_transfer("earth", "mars", LAUNCH)
        assert a.flight_time == b.flight_time
        assert a.delta_v == b.delta_v
        assert a.semi_major_axis == b.semi_major_axis
        assert a == b

    def test_earth_mars_values(self):
        """Earth-Mars transfer lands in the textbook ballpark."""
        t = compute_transfer("earth", "mars", LAUNCH)
        assert t.type == TRANSFER_TYPE
        assert t.semi_major_axis == pytest.approx(1.26)
        assert 250.0 < t.flight_time < 270.0
        assert 5.3 < t.delta_v < 5.8

    def test_efficiency_matches_delta_v(self):
        t = compute_transfer("earth", "mars", LAUNCH)
        assert t.efficiency == pytest.approx(100.0 - (t.delta_v - 3.0) * 10.0)

    def test_arrival_date_is_launch_plus_flight_time(self):
        t = compute_transfer("earth", "mars", LAUNCH)
        assert (t.arrival_date - LAUNCH).days == int(t.flight_time)

    def test_case_insensitive_names(self):
        assert compute_transfer("Earth", "MARS", LAUNCH) == compute_transfer("earth", "mars", LAUNCH)

    def test_outer_planet_takes_longer(self):
        mars = compute_transfer("earth", "mars", LAUNCH)
        jupiter = compute_transfer("earth", "jupiter", LAUNCH)
        assert jupiter.flight_time > mars.flight_time
        assert jupiter.semi_major_axis == pytest.approx(3.1)

    def test_inward_transfer(self):
        t = compute_transfer("earth", "venus", LAUNCH)
        assert t.flight_time < 200.0
        assert t.delta_v > 0.0

    def test_unknown_body(self):
        with pytest.raises(UnknownBodyError):
            compute_transfer("earth", "pluto", LAUNCH)

    def test_unknown_body_is_reference_error(self):
        with pytest.raises(UnknownReferenceError):
            compute_transfer("vulcan", "mars", LAUNCH)

    def test_moon_has_no_mean_orbit(self):
        """Moons are catalogued bodies but not heliocentric transfer endpoints."""
        with pytest.raises(UnknownBodyError):
            compute_transfer("earth", "europa", LAUNCH)


class TestHohmannKernel:

    def test_equal_radii_need_no_burns(self):
        r = AU_KM
        a, dv1, dv2, tof = hohmann_kernel(r, r, GM_SUN)
        assert a == pytest.approx(r)
        assert dv1 == pytest.approx(0.0, abs=1e-9)
        assert dv2 == pytest.approx(0.0, abs=1e-9)

    def test_half_period_time_of_flight(self):
        r1, r2 = AU_KM, 1.52 * AU_KM
        a, _, _, tof = hohmann_kernel(r1, r2, GM_SUN)
        assert tof == pytest.approx(math.pi * math.sqrt(a**3 / GM_SUN))


# --------------------------------------------------------------------------- #
#  Alignment
# --------------------------------------------------------------------------- #

class TestAlignment:

    def test_synodic_period_earth_mars(self):
        assert synodic_period(365.25, 687.0) == pytest.approx(779.9, abs=0.5)

    def test_synodic_period_symmetric(self):
        assert synodic_period(687.0, 365.25) == synodic_period(365.25, 687.0)

    def test_equal_periods_give_infinite_synodic(self):
        assert math.isinf(synodic_period(365.25, 365.25))
        assert phase_angle(LAUNCH, math.inf) == 0.0

    def test_epoch_is_perfect_alignment(self):
        assert alignment_score("earth", "mars", date(2000, 1, 1)) == pytest.approx(100.0)

    def test_half_synodic_is_worst(self):
        assert alignment_score("earth", "mars", date(2001, 1, 25)) < 1.0

    def test_dates_before_epoch_stay_in_range(self):
        score = alignment_score("earth", "mars", date(1999, 6, 1))
        assert 0.0 <= score <= 100.0

    def test_bounded_over_many_dates(self):
        for offset in range(0, 3000, 13):
            d = date.fromordinal(LAUNCH.toordinal() + offset)
            assert 0.0 <= alignment_score("earth", "jupiter", d) <= 100.0


class TestEfficiency:

    def test_baseline(self):
        assert efficiency(3.0) == 100.0

    def test_linear_penalty(self):
        assert efficiency(5.5) == pytest.approx(75.0)

    def test_floor(self):
        assert efficiency(20.0) == 0.0

    def test_capped_below_baseline(self):
        assert efficiency(1.0) == 100.0
