"""JSON encoder — converts pipeline value objects to JSON-safe dicts.

Dates and datetimes become ISO strings; nested dataclasses become dicts.
Keys are snake_case, matching the rest of the HTTP API.
"""

from __future__ import annotations

from planner.catalog import LaunchSite, LaunchVehicle
from planner.models import (
    LaunchRequirements,
    MissionConstraints,
    OptimizationResult,
    RankedWindow,
    RealLaunch,
    Trajectory,
)


def site_to_dict(site: LaunchSite) -> dict:
    return {
        "code": site.code,
        "name": site.name,
        "lat": site.lat,
        "lon": site.lon,
        "country": site.country,
    }


def vehicle_to_dict(vehicle: LaunchVehicle) -> dict:
    return {
        "name": vehicle.name,
        "payload_leo": vehicle.payload_leo,
        "payload_gto": vehicle.payload_gto,
        "cost_per_kg": vehicle.cost_per_kg,
    }


def trajectory_to_dict(traj: Trajectory) -> dict:
    return {
        "type": traj.type,
        "flight_time_days": traj.flight_time,
        "delta_v_km_s": traj.delta_v,
        "arrival_date": traj.arrival_date.isoformat(),
        "semi_major_axis_au": traj.semi_major_axis,
        "alignment_score": traj.alignment_score,
        "efficiency": traj.efficiency,
    }


def requirements_to_dict(req: LaunchRequirements) -> dict:
    return {
        "site": site_to_dict(req.site),
        "azimuth": {
            "optimal": req.azimuth.optimal,
            "range": list(req.azimuth.range),
            "inclination": req.azimuth.inclination,
        },
        "window": {
            "start": req.window.start.isoformat(),
            "end": req.window.end.isoformat(),
            "duration": req.window.duration,
            "instantaneous": req.window.instantaneous,
        },
        "weather_probability": req.weather_probability,
        "seasonal_score": req.seasonal_score,
        "c3_energy": req.c3_energy,
        "earth_departure_v": req.earth_departure_v,
    }


def window_to_dict(window: RankedWindow) -> dict:
    f = window.feasibility
    return {
        "launch_date": window.launch_date.isoformat(),
        "trajectory": trajectory_to_dict(window.trajectory),
        "requirements": requirements_to_dict(window.requirements),
        "score": window.score,
        "cost": {
            "launch": window.cost.launch,
            "total": window.cost.total,
            "per_kg": window.cost.per_kg,
            "currency": window.cost.currency,
        },
        "payload_margin": window.payload_margin,
        "feasibility": {
            "technical": f.technical,
            "economic": f.economic,
            "schedule": f.schedule,
            "risk": f.risk,
            "overall": f.overall,
            "category": f.category,
        },
    }


def constraints_to_dict(constraints: MissionConstraints) -> dict:
    return {
        "max_flight_time": constraints.max_flight_time,
        "max_delta_v": constraints.max_delta_v,
        "min_score": constraints.min_score,
    }


def launch_to_dict(launch: RealLaunch) -> dict:
    return {
        "name": launch.name,
        "scheduled_date": launch.scheduled_date.isoformat(),
        "rocket": launch.rocket,
        "mission": launch.mission,
        "pad": launch.pad,
        "agency": launch.agency,
        "status": launch.status,
    }


def result_to_dict(result: OptimizationResult) -> dict:
    return {
        "optimal_windows": [window_to_dict(w) for w in result.optimal_windows],
        "alternative_windows": [window_to_dict(w) for w in result.alternative_windows],
        "constraints": constraints_to_dict(result.constraints),
        "vehicle_capability": vehicle_to_dict(result.vehicle_capability),
        "real_launches": [launch_to_dict(l) for l in result.real_launches],
        "candidates_evaluated": result.candidates_evaluated,
    }
