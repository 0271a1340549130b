"""HTTP REST endpoints for the Perihelion API.

- /health        — Health check
- /bodies        — List supported celestial bodies
- /launch-sites  — List launch sites
- /vehicles      — List launch vehicles
- /transfer      — Single Hohmann transfer for one launch date
- /optimize      — Ranked launch windows + summary + manifest
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field, field_validator

from ephemeris.bodies import ALL_BODIES
from mechanics.hohmann import compute_transfer
from mechanics.transforms import parse_iso_date
from planner.catalog import LAUNCH_SITES, LAUNCH_VEHICLES, MEAN_ORBITS
from planner.engine import TransferWindowEngine
from planner.errors import InvalidMissionError, UnknownReferenceError
from planner.models import MissionConstraints, MissionParameters
from serialization.encoder import (
    result_to_dict,
    site_to_dict,
    trajectory_to_dict,
    vehicle_to_dict,
)

logger = logging.getLogger("perihelion.api")
router = APIRouter()


# --------------------------------------------------------------------------- #
#  Shared validators
# --------------------------------------------------------------------------- #

def _validate_iso_date(v: str) -> str:
    """Validate that a string is a parseable ISO date."""
    parse_iso_date(v)
    return v


# --------------------------------------------------------------------------- #
#  Pydantic models for request/response
# --------------------------------------------------------------------------- #

class BodyOut(BaseModel):
    naif_id: int
    name: str
    gm: float
    radius: float
    parent_id: int | None = None
    transferable: bool


class ConstraintsIn(BaseModel):
    max_flight_time: float | None = Field(default=None, gt=0, description="Max flight time, days")
    max_delta_v: float | None = Field(default=None, gt=0, description="Max delta-v, km/s")
    min_score: float | None = Field(default=None, ge=0, le=100)


class TransferRequest(BaseModel):
    origin: str = "earth"
    destination: str
    launch_date: str = Field(description="Launch date ISO, e.g. 2026-11-01")

    @field_validator("launch_date")
    @classmethod
    def check_iso_date(cls, v: str) -> str:
        return _validate_iso_date(v)


class OptimizeRequest(BaseModel):
    origin: str = Field(default="earth", description="Origin body name, e.g. 'earth'")
    destination: str = Field(description="Destination body name, e.g. 'mars'")
    launch_site: str = Field(default="KSC", description="Launch site code, e.g. 'KSC'")
    start_date: str = Field(description="Window start, ISO date")
    end_date: str = Field(description="Window end, ISO date")
    mission_type: str = "interplanetary"
    payload_mass: float = Field(default=1000.0, gt=0, description="Payload mass, kg")
    launch_vehicle: str = "Falcon Heavy"
    constraints: ConstraintsIn = Field(default_factory=ConstraintsIn)

    @field_validator("start_date", "end_date")
    @classmethod
    def check_iso_date(cls, v: str) -> str:
        return _validate_iso_date(v)

    def to_params(self) -> MissionParameters:
        return MissionParameters(
            origin=self.origin,
            destination=self.destination,
            launch_site=self.launch_site,
            start_date=parse_iso_date(self.start_date),
            end_date=parse_iso_date(self.end_date),
            mission_type=self.mission_type,
            payload_mass=self.payload_mass,
            launch_vehicle=self.launch_vehicle,
            constraints=MissionConstraints(
                max_flight_time=self.constraints.max_flight_time,
                max_delta_v=self.constraints.max_delta_v,
                min_score=self.constraints.min_score,
            ),
        )


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _get_engine(request: Request) -> TransferWindowEngine:
    """Get the window engine from the app state."""
    engine: TransferWindowEngine = request.app.state.engine
    return engine


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, UnknownReferenceError):
        return HTTPException(status_code=404, detail=str(e))
    return HTTPException(status_code=422, detail=str(e))


# --------------------------------------------------------------------------- #
#  Endpoints
# --------------------------------------------------------------------------- #

@router.get("/health")
async def health():
    return {"status": "ok", "service": "perihelion"}


@router.get("/bodies", response_model=list[BodyOut])
async def list_bodies():
    """List all supported celestial bodies."""
    return [
        BodyOut(
            naif_id=b.naif_id,
            name=b.name,
            gm=b.gm,
            radius=b.radius,
            parent_id=b.parent_id,
            transferable=b.name.lower() in MEAN_ORBITS,
        )
        for b in ALL_BODIES
    ]


@router.get("/launch-sites")
async def list_launch_sites():
    return [site_to_dict(s) for s in LAUNCH_SITES.values()]


@router.get("/vehicles")
async def list_vehicles():
    return [vehicle_to_dict(v) for v in LAUNCH_VEHICLES.values()]


@router.post("/transfer")
async def hohmann_transfer(req: TransferRequest):
    """Compute the simplified Hohmann transfer for a single launch date."""
    if req.origin.lower() == req.destination.lower():
        raise HTTPException(status_code=422, detail="Origin and destination must be different bodies")

    launch_date = parse_iso_date(req.launch_date)
    try:
        traj = compute_transfer(req.origin, req.destination, launch_date)
    except UnknownReferenceError as e:
        raise _http_error(e)

    return {
        "origin": req.origin.lower(),
        "destination": req.destination.lower(),
        "launch_date": launch_date.isoformat(),
        **trajectory_to_dict(traj),
    }


@router.post("/optimize")
async def optimize_windows(req: OptimizeRequest, request: Request):
    """Rank launch windows for a mission.

    Returns the optimization result, a summary, and a manifest for the best
    window (null when no window survives filtering).
    """
    engine = _get_engine(request)
    params = req.to_params()

    try:
        result = await engine.optimize(params)
    except (UnknownReferenceError, InvalidMissionError) as e:
        raise _http_error(e)

    manifest = None
    if result.optimal_windows:
        manifest = engine.generate_manifest(result.optimal_windows[0], params)

    return {
        "origin": params.origin,
        "destination": params.destination,
        "result": result_to_dict(result),
        "summary": engine.summarize(result),
        "manifest": manifest,
    }
