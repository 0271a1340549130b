"""Value objects flowing through the launch window pipeline.

Every stage derives a new frozen object instead of mutating its input:
Trajectory + LaunchRequirements -> TrajectoryCandidate -> RankedWindow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from planner.catalog import LaunchSite, LaunchVehicle


@dataclass(frozen=True)
class MissionConstraints:
    """Optional user constraints. ``None`` imposes no filter."""
    max_flight_time: float | None = None  # days
    max_delta_v: float | None = None  # km/s
    min_score: float | None = None


@dataclass(frozen=True)
class MissionParameters:
    """Input parameters for one optimization request."""
    destination: str
    start_date: date
    end_date: date
    origin: str = "earth"
    launch_site: str = "KSC"
    mission_type: str = "interplanetary"  # accepted but not used by enumeration or scoring
    payload_mass: float = 1000.0  # kg
    launch_vehicle: str = "Falcon Heavy"
    constraints: MissionConstraints = field(default_factory=MissionConstraints)

    def cache_key(self) -> tuple:
        return (
            self.origin.lower(),
            self.destination.lower(),
            self.launch_site,
            self.start_date,
            self.end_date,
            self.mission_type,
            self.payload_mass,
            self.launch_vehicle,
            self.constraints.max_flight_time,
            self.constraints.max_delta_v,
            self.constraints.min_score,
        )


@dataclass(frozen=True)
class Trajectory:
    """Simplified Hohmann transfer for one launch date."""
    type: str
    flight_time: float  # days
    delta_v: float  # km/s
    arrival_date: date
    semi_major_axis: float  # AU
    alignment_score: float  # 0-100
    efficiency: float  # 0-100


@dataclass(frozen=True)
class Azimuth:
    optimal: float  # deg
    range: tuple[float, float]
    inclination: float  # deg


@dataclass(frozen=True)
class DailyWindow:
    start: datetime
    end: datetime
    duration: int  # minutes
    instantaneous: bool = False


@dataclass(frozen=True)
class LaunchRequirements:
    site: LaunchSite
    azimuth: Azimuth
    window: DailyWindow
    weather_probability: float  # 70-100
    seasonal_score: float  # 0-100
    c3_energy: float  # km^2/s^2
    earth_departure_v: float  # km/s


@dataclass(frozen=True)
class TrajectoryCandidate:
    launch_date: date
    trajectory: Trajectory
    requirements: LaunchRequirements
    score: int


@dataclass(frozen=True)
class Cost:
    launch: float
    total: float
    per_kg: float
    currency: str = "USD"


@dataclass(frozen=True)
class Feasibility:
    technical: float
    economic: float
    schedule: float
    risk: float
    overall: int
    category: str  # "High" | "Medium" | "Low"


@dataclass(frozen=True)
class RankedWindow:
    """A feasible candidate with cost and feasibility attached."""
    candidate: TrajectoryCandidate
    cost: Cost
    payload_margin: float  # kg
    feasibility: Feasibility

    @property
    def launch_date(self) -> date:
        return self.candidate.launch_date

    @property
    def trajectory(self) -> Trajectory:
        return self.candidate.trajectory

    @property
    def requirements(self) -> LaunchRequirements:
        return self.candidate.requirements

    @property
    def score(self) -> int:
        return self.candidate.score


@dataclass(frozen=True)
class RealLaunch:
    """One record of the external upcoming-launch schedule."""
    name: str
    scheduled_date: datetime
    rocket: str = "Unknown"
    mission: str = "Unknown"
    pad: str = "Unknown"
    agency: str = "Unknown"
    status: str = "Unknown"


@dataclass(frozen=True)
class OptimizationResult:
    optimal_windows: list[RankedWindow]
    alternative_windows: list[RankedWindow]
    constraints: MissionConstraints
    vehicle_capability: LaunchVehicle
    real_launches: list[RealLaunch]
    candidates_evaluated: int = 0
