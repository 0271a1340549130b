"""Simplified Hohmann transfer between circular, coplanar mean orbits.

Uses the coarse mean-orbit table rather than ephemerides: the transfer only
depends on the two bodies, and the alignment score only on the launch date.
Lengths are in km, velocities in km/s, times in seconds unless noted.
The scalar kernel is JIT-compiled with Numba.
"""

from __future__ import annotations

import math
from datetime import date

from numba import njit

from ephemeris.bodies import GM_SUN, get_body
from mechanics.transforms import (
    add_days,
    au_to_km,
    days_since_epoch,
    km_to_au,
    seconds_to_days,
)
from planner.catalog import get_mean_orbit
from planner.models import Trajectory

TRANSFER_TYPE = "hohmann_transfer"

# Efficiency baseline: 3 km/s is treated as a "good" transfer
EFFICIENCY_BASELINE_DV = 3.0
EFFICIENCY_SLOPE = 10.0


@njit(cache=True)
def vis_viva(mu: float, r: float, a: float) -> float:
    """Orbital speed at radius r on an orbit of semi-major axis a."""
    return math.sqrt(mu * (2.0 / r - 1.0 / a))


@njit(cache=True)
def hohmann_kernel(r1: float, r2: float, mu: float) -> tuple:
    """Two-burn Hohmann transfer between circular orbits of radius r1 and r2.

    Returns
    -------
    (a, dv_departure, dv_arrival, tof)
        a            — transfer semi-major axis (km)
        dv_departure — circular-to-transfer burn at r1 (km/s)
        dv_arrival   — transfer-to-circular burn at r2 (km/s)
        tof          — time of flight, half the transfer period (s)
    """
    a = 0.5 * (r1 + r2)
    period = 2.0 * math.pi * math.sqrt(a**3 / mu)

    dv1 = abs(vis_viva(mu, r1, a) - math.sqrt(mu / r1))
    dv2 = abs(math.sqrt(mu / r2) - vis_viva(mu, r2, a))
    return a, dv1, dv2, 0.5 * period


def synodic_period(period1: float, period2: float) -> float:
    """Synodic period in the units of the inputs (inf for equal periods)."""
    if period1 == period2:
        return math.inf
    return abs(1.0 / (1.0 / period1 - 1.0 / period2))


def phase_angle(launch_date: date, synodic: float) -> float:
    """Phase of the launch date within the synodic cycle, in degrees [0, 360)."""
    if math.isinf(synodic):
        return 0.0
    days = days_since_epoch(launch_date)
    return (days % synodic) / synodic * 360.0


def alignment_score(origin: str, destination: str, launch_date: date) -> float:
    """Planetary alignment score (0-100), best near 0°/360°, worst at 180°."""
    synodic = synodic_period(
        get_mean_orbit(origin).period_days,
        get_mean_orbit(destination).period_days,
    )
    angle = phase_angle(launch_date, synodic)
    offset = min(angle, 360.0 - angle)
    return _clamp_score(100.0 * (1.0 - offset / 180.0))


def efficiency(delta_v: float) -> float:
    return _clamp_score(100.0 - (delta_v - EFFICIENCY_BASELINE_DV) * EFFICIENCY_SLOPE)


def compute_transfer(origin: str, destination: str, launch_date: date) -> Trajectory:
    """Compute the simplified Hohmann transfer for one launch date.

    Raises UnknownBodyError if either name is missing from the body table
    or has no heliocentric mean orbit.
    """
    get_body(origin)
    get_body(destination)
    r1 = au_to_km(get_mean_orbit(origin).radius_au)
    r2 = au_to_km(get_mean_orbit(destination).radius_au)

    a, dv1, dv2, tof = hohmann_kernel(r1, r2, GM_SUN)
    flight_time = seconds_to_days(tof)
    delta_v = dv1 + dv2

    return Trajectory(
        type=TRANSFER_TYPE,
        flight_time=flight_time,
        delta_v=delta_v,
        arrival_date=add_days(launch_date, flight_time),
        semi_major_axis=km_to_au(a),
        alignment_score=alignment_score(origin, destination, launch_date),
        efficiency=efficiency(delta_v),
    )


def _clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))
