"""Mission manifest, recommendation and summary generation.

Pure formatting over already-ranked windows; no new computation.
"""

from __future__ import annotations

from planner.catalog import mission_objectives
from planner.models import MissionParameters, OptimizationResult, RankedWindow
from planner.scoring import round_half_up

RECOMMEND_EXCELLENT = "Excellent launch opportunity - proceed with mission planning"
RECOMMEND_GOOD = "Good launch opportunity - minor optimizations recommended"
RECOMMEND_ACCEPTABLE = "Acceptable launch opportunity - consider alternatives"
RECOMMEND_SUBOPTIMAL = "Suboptimal window - recommend mission parameter adjustment"

STATUS_COMPLETE = "Optimization complete"
STATUS_NO_WINDOWS = "No viable windows found"
RECOMMEND_RELAX = "Consider adjusting mission parameters"


def _millions(amount: float) -> str:
    return f"${amount / 1_000_000:.1f}M"


def generate_recommendation(window: RankedWindow) -> str:
    score = window.score
    feasibility = window.feasibility.overall

    if score > 85 and feasibility > 80:
        return RECOMMEND_EXCELLENT
    if score > 70 and feasibility > 60:
        return RECOMMEND_GOOD
    if score > 50:
        return RECOMMEND_ACCEPTABLE
    return RECOMMEND_SUBOPTIMAL


def generate_manifest(window: RankedWindow, params: MissionParameters) -> dict:
    """Build a human-readable launch manifest for one ranked window."""
    traj = window.trajectory
    req = window.requirements

    return {
        "mission": {
            "name": f"{params.origin.title()} to {params.destination.title()} Mission",
            "type": params.mission_type,
            "destination": params.destination,
            "objectives": mission_objectives(params.destination),
        },
        "launch": {
            "date": window.launch_date.isoformat(),
            "site": req.site.name,
            "vehicle": params.launch_vehicle,
            "azimuth": req.azimuth.optimal,
            "window": {
                "start": req.window.start.isoformat(),
                "end": req.window.end.isoformat(),
                "duration": req.window.duration,
                "instantaneous": req.window.instantaneous,
            },
        },
        "trajectory": {
            "type": traj.type,
            "flight_time": f"{round_half_up(traj.flight_time)} days",
            "arrival_date": traj.arrival_date.isoformat(),
            "delta_v": f"{traj.delta_v:.2f} km/s",
            "efficiency": f"{traj.efficiency:.1f}%",
        },
        "payload": {
            "mass": f"{params.payload_mass:g} kg",
            "margin": f"{window.payload_margin:g} kg",
            "cost": _millions(window.cost.total),
        },
        "risks": {
            "weather": f"{round_half_up(100 - req.weather_probability)}%",
            "technical": window.feasibility.risk,
            "seasonal": req.seasonal_score,
        },
    }


def summarize(result: OptimizationResult) -> dict:
    """Condense an optimization result into a one-screen summary."""
    if not result.optimal_windows:
        return {
            "status": STATUS_NO_WINDOWS,
            "recommendation": RECOMMEND_RELAX,
        }

    best = result.optimal_windows[0]
    return {
        "status": STATUS_COMPLETE,
        "best_launch_date": best.launch_date.isoformat(),
        "flight_time": f"{round_half_up(best.trajectory.flight_time)} days",
        "total_cost": _millions(best.cost.total),
        "feasibility": best.feasibility.category,
        "score": best.score,
        "windows_analyzed": len(result.optimal_windows) + len(result.alternative_windows),
        "recommendation": generate_recommendation(best),
    }
