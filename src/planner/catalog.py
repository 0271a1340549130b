"""Static reference tables for mission planning.

Mean orbits are deliberately coarse (AU-scale constants, not ephemerides);
launch sites, vehicles, seasonal preferences and canned mission objectives
are plain lookup data.
"""

from __future__ import annotations

from dataclasses import dataclass

from planner.errors import UnknownBodyError, UnknownLaunchSiteError, UnknownVehicleError


@dataclass(frozen=True, slots=True)
class MeanOrbit:
    radius_au: float
    period_days: float


@dataclass(frozen=True, slots=True)
class LaunchSite:
    code: str
    name: str
    lat: float  # deg
    lon: float  # deg
    country: str


@dataclass(frozen=True, slots=True)
class LaunchVehicle:
    name: str
    payload_leo: float  # kg
    payload_gto: float  # kg
    cost_per_kg: float  # USD


@dataclass(frozen=True, slots=True)
class SeasonalPreference:
    best: tuple[int, ...]
    worst: tuple[int, ...]


# Approximate heliocentric mean orbits (independent of true ephemeris)
MEAN_ORBITS: dict[str, MeanOrbit] = {
    "mercury": MeanOrbit(0.39, 88.0),
    "venus": MeanOrbit(0.72, 225.0),
    "earth": MeanOrbit(1.0, 365.25),
    "mars": MeanOrbit(1.52, 687.0),
    "jupiter": MeanOrbit(5.2, 4333.0),
    "saturn": MeanOrbit(9.5, 10759.0),
    "uranus": MeanOrbit(19.2, 30687.0),
    "neptune": MeanOrbit(30.1, 60190.0),
}

LAUNCH_SITES: dict[str, LaunchSite] = {
    s.code: s
    for s in (
        LaunchSite("KSC", "Kennedy Space Center", 28.6084, -80.6043, "USA"),
        LaunchSite("VAFB", "Vandenberg AFB", 34.7420, -120.5724, "USA"),
        LaunchSite("Baikonur", "Baikonur Cosmodrome", 45.9200, 63.3420, "Kazakhstan"),
        LaunchSite("Kourou", "Kourou", 5.2389, -52.7683, "French Guiana"),
        LaunchSite("Plesetsk", "Plesetsk", 62.9572, 40.5792, "Russia"),
        LaunchSite("Jiuquan", "Jiuquan", 40.9580, 100.2900, "China"),
        LaunchSite("Tanegashima", "Tanegashima", 30.3911, 130.9681, "Japan"),
    )
}

LAUNCH_VEHICLES: dict[str, LaunchVehicle] = {
    v.name: v
    for v in (
        LaunchVehicle("Falcon Heavy", 63_800, 26_700, 1_400),
        LaunchVehicle("Falcon 9", 22_800, 8_300, 2_720),
        LaunchVehicle("Atlas V", 18_850, 8_900, 13_000),
        LaunchVehicle("Delta IV Heavy", 28_790, 14_220, 14_000),
        LaunchVehicle("Ariane 5", 21_000, 10_500, 10_000),
        LaunchVehicle("SLS", 95_000, 45_000, 18_000),
        LaunchVehicle("Starship", 150_000, 100_000, 400),
    )
}

# Calendar months (1-12) with the best / worst launch conditions per site.
# Sites without an entry use KSC's preferences.
SEASONAL_PREFERENCES: dict[str, SeasonalPreference] = {
    "KSC": SeasonalPreference(best=(3, 4, 5, 10, 11), worst=(6, 7, 8, 9)),  # hurricane season
    "VAFB": SeasonalPreference(best=(4, 5, 6, 9, 10), worst=(12, 1, 2)),  # winter fog
    "Kourou": SeasonalPreference(best=(2, 3, 4, 9, 10, 11), worst=(5, 6, 7, 8)),  # wet season
    "Baikonur": SeasonalPreference(best=(4, 5, 6, 7, 8, 9), worst=(11, 12, 1, 2, 3)),
}
DEFAULT_SEASONAL_SITE = "KSC"

MISSION_OBJECTIVES: dict[str, list[str]] = {
    "mars": ["Search for signs of past life", "Study Martian geology", "Analyze atmosphere composition"],
    "europa": ["Study subsurface ocean", "Analyze ice composition", "Search for biosignatures"],
    "titan": ["Study methane cycle", "Analyze organic compounds", "Map surface features"],
    "venus": ["Study atmospheric dynamics", "Analyze volcanic activity", "Study greenhouse effect"],
    "jupiter": ["Study atmospheric composition", "Analyze radiation environment", "Study magnetosphere"],
    "saturn": ["Study ring system", "Analyze atmospheric dynamics", "Study moons"],
    "moon": ["Establish lunar base", "Mine resources", "Study lunar geology"],
}
DEFAULT_OBJECTIVES: list[str] = ["Explore and study", "Collect scientific data", "Technology demonstration"]

_SITE_BY_CODE = {code.lower(): site for code, site in LAUNCH_SITES.items()}
_VEHICLE_BY_NAME = {name.lower(): v for name, v in LAUNCH_VEHICLES.items()}


def get_mean_orbit(name: str) -> MeanOrbit:
    try:
        return MEAN_ORBITS[name.lower().strip()]
    except (KeyError, AttributeError):
        raise UnknownBodyError(str(name), list(MEAN_ORBITS)) from None


def get_launch_site(code: str) -> LaunchSite:
    """Resolve a launch site by short code (case-insensitive)."""
    try:
        return _SITE_BY_CODE[code.lower().strip()]
    except (KeyError, AttributeError):
        raise UnknownLaunchSiteError(str(code), list(LAUNCH_SITES)) from None


def get_vehicle(name: str) -> LaunchVehicle:
    """Resolve a launch vehicle by name (case-insensitive)."""
    try:
        return _VEHICLE_BY_NAME[name.lower().strip()]
    except (KeyError, AttributeError):
        raise UnknownVehicleError(str(name), list(LAUNCH_VEHICLES)) from None


def seasonal_preference(site: LaunchSite) -> SeasonalPreference:
    return SEASONAL_PREFERENCES.get(site.code, SEASONAL_PREFERENCES[DEFAULT_SEASONAL_SITE])


def mission_objectives(destination: str) -> list[str]:
    return list(MISSION_OBJECTIVES.get(destination.lower(), DEFAULT_OBJECTIVES))
