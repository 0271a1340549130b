"""Scoring, feasibility filtering, cost and feasibility assessment.

All thresholds and weights here are fixed policy constants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from planner.catalog import LaunchVehicle
from planner.models import (
    Cost,
    Feasibility,
    LaunchRequirements,
    MissionConstraints,
    RankedWindow,
    Trajectory,
    TrajectoryCandidate,
)

# Composite score weights (sum to 1.0)
WEIGHT_DELTA_V = 0.30
WEIGHT_ALIGNMENT = 0.25
WEIGHT_FLIGHT_TIME = 0.20
WEIGHT_WEATHER = 0.15
WEIGHT_SEASONAL = 0.10

OPTIMAL_COUNT = 10
ALTERNATIVE_COUNT = 10

CURRENCY = "USD"


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# --------------------------------------------------------------------------- #
#  Trajectory scoring
# --------------------------------------------------------------------------- #

def delta_v_score(delta_v: float) -> float:
    return max(0.0, 100.0 - (delta_v - 3.0) * 20.0)


def flight_time_score(flight_time_days: float) -> float:
    return max(0.0, 100.0 - (flight_time_days - 250.0) / 10.0)


def score_trajectory(trajectory: Trajectory, requirements: LaunchRequirements) -> int:
    """Weighted composite score, rounded to the nearest integer in [0, 100]."""
    total = (
        delta_v_score(trajectory.delta_v) * WEIGHT_DELTA_V
        + trajectory.alignment_score * WEIGHT_ALIGNMENT
        + flight_time_score(trajectory.flight_time) * WEIGHT_FLIGHT_TIME
        + requirements.weather_probability * WEIGHT_WEATHER
        + requirements.seasonal_score * WEIGHT_SEASONAL
    )
    return int(clamp_score(round_half_up(total)))


# --------------------------------------------------------------------------- #
#  Filtering
# --------------------------------------------------------------------------- #

def required_capability(payload_mass: float, delta_v: float) -> float:
    """Linear capability proxy: payload kg plus 1000 per km/s of delta-v."""
    return payload_mass + delta_v * 1000.0


def within_vehicle_capability(
    candidate: TrajectoryCandidate, payload_mass: float, vehicle: LaunchVehicle,
) -> bool:
    return required_capability(payload_mass, candidate.trajectory.delta_v) <= vehicle.payload_leo


def satisfies_constraints(candidate: TrajectoryCandidate, constraints: MissionConstraints) -> bool:
    traj = candidate.trajectory
    if constraints.max_flight_time is not None and traj.flight_time > constraints.max_flight_time:
        return False
    if constraints.max_delta_v is not None and traj.delta_v > constraints.max_delta_v:
        return False
    if constraints.min_score is not None and candidate.score < constraints.min_score:
        return False
    return True


def filter_and_rank(
    candidates: list[TrajectoryCandidate | None],
    payload_mass: float,
    vehicle: LaunchVehicle,
    constraints: MissionConstraints,
) -> list[RankedWindow]:
    """Drop infeasible candidates, sort by score (stable) and attach cost/feasibility."""
    feasible = [
        c for c in candidates
        if c is not None
        and within_vehicle_capability(c, payload_mass, vehicle)
        and satisfies_constraints(c, constraints)
    ]
    # list.sort is stable: equal scores keep date order
    feasible.sort(key=lambda c: c.score, reverse=True)

    ranked = []
    for c in feasible:
        cost = mission_cost(c.trajectory, payload_mass, vehicle)
        ranked.append(RankedWindow(
            candidate=c,
            cost=cost,
            payload_margin=vehicle.payload_leo - payload_mass,
            feasibility=assess_feasibility(c, cost),
        ))
    return ranked


@dataclass(frozen=True)
class WindowSplit:
    optimal: list[RankedWindow]
    alternative: list[RankedWindow]


def split_windows(ranked: list[RankedWindow]) -> WindowSplit:
    return WindowSplit(
        optimal=ranked[:OPTIMAL_COUNT],
        alternative=ranked[OPTIMAL_COUNT:OPTIMAL_COUNT + ALTERNATIVE_COUNT],
    )


# --------------------------------------------------------------------------- #
#  Cost & feasibility
# --------------------------------------------------------------------------- #

def mission_cost(trajectory: Trajectory, payload_mass: float, vehicle: LaunchVehicle) -> Cost:
    """Launch cost scaled by a delta-v complexity factor.

    Delta-v below 3 km/s lowers the factor below 1 (not clamped).
    """
    launch = payload_mass * vehicle.cost_per_kg
    complexity = 1.0 + (trajectory.delta_v - 3.0) * 0.1
    return Cost(launch=launch, total=launch * complexity, per_kg=vehicle.cost_per_kg, currency=CURRENCY)


def feasibility_category(overall: float) -> str:
    if overall > 80:
        return "High"
    if overall > 60:
        return "Medium"
    return "Low"


def assess_feasibility(candidate: TrajectoryCandidate, cost: Cost) -> Feasibility:
    traj = candidate.trajectory
    technical = clamp_score(min(100.0, candidate.score))
    economic = clamp_score(100.0 - (cost.total / 1e6 - 100.0) * 2.0)
    schedule = clamp_score(100.0 - (traj.flight_time - 300.0) / 10.0)
    risk = clamp_score(max(20.0, 100.0 - traj.delta_v * 10.0))

    overall = (technical + economic + schedule + risk) / 4.0
    return Feasibility(
        technical=technical,
        economic=economic,
        schedule=schedule,
        risk=risk,
        overall=round_half_up(overall),
        category=feasibility_category(overall),
    )
