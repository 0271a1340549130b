"""Celestial body catalog with NAIF IDs and physical parameters.

GM values (gravitational parameter, km^3/s^2) and equatorial radii (km).
Only bodies that also appear in the mean-orbit table
(``planner.catalog.MEAN_ORBITS``) can be used as transfer endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from planner.errors import UnknownBodyError


@dataclass(frozen=True, slots=True)
class CelestialBody:
    naif_id: int
    name: str
    gm: float  # km^3 / s^2
    radius: float  # km
    parent_id: int | None = None  # NAIF ID of parent body (None = Sun-orbiting)


# --------------------------------------------------------------------------- #
#  Sun
# --------------------------------------------------------------------------- #
SUN = CelestialBody(naif_id=10, name="Sun", gm=1.32712442018e11, radius=695_700.0)

# --------------------------------------------------------------------------- #
#  Planets
# --------------------------------------------------------------------------- #
MERCURY = CelestialBody(naif_id=199, name="Mercury", gm=22_032.1, radius=2_439.7)
VENUS = CelestialBody(naif_id=299, name="Venus", gm=324_858.8, radius=6_051.8)
EARTH = CelestialBody(naif_id=399, name="Earth", gm=398_600.4, radius=6_378.1)
MARS = CelestialBody(naif_id=499, name="Mars", gm=42_828.3, radius=3_396.2)
JUPITER = CelestialBody(naif_id=599, name="Jupiter", gm=126_686_534.0, radius=71_492.0)
SATURN = CelestialBody(naif_id=699, name="Saturn", gm=37_931_187.0, radius=60_268.0)
URANUS = CelestialBody(naif_id=799, name="Uranus", gm=5_793_939.0, radius=25_559.0)
NEPTUNE = CelestialBody(naif_id=899, name="Neptune", gm=6_836_529.0, radius=24_764.0)

# --------------------------------------------------------------------------- #
#  Moons (mission destinations, no heliocentric mean orbit)
# --------------------------------------------------------------------------- #
MOON = CelestialBody(naif_id=301, name="Moon", gm=4_902.8, radius=1_737.4, parent_id=399)
EUROPA = CelestialBody(naif_id=502, name="Europa", gm=3_202.7, radius=1_560.8, parent_id=599)
ENCELADUS = CelestialBody(naif_id=602, name="Enceladus", gm=7.2, radius=252.1, parent_id=699)
TITAN = CelestialBody(naif_id=606, name="Titan", gm=8_978.1, radius=2_574.0, parent_id=699)

# --------------------------------------------------------------------------- #
#  Lookup tables
# --------------------------------------------------------------------------- #
ALL_BODIES: list[CelestialBody] = [
    MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE,
    MOON, EUROPA, ENCELADUS, TITAN,
]

BODY_BY_NAME: dict[str, CelestialBody] = {b.name.lower(): b for b in ALL_BODIES}

# Sun GM, central body for heliocentric transfers
GM_SUN: float = SUN.gm  # km^3/s^2

# 1 AU in km
AU_KM: float = 1.495978707e8


def get_body(name: str) -> CelestialBody:
    """Resolve a body by case-insensitive name."""
    try:
        return BODY_BY_NAME[name.lower().strip()]
    except (KeyError, AttributeError):
        raise UnknownBodyError(str(name), list(BODY_BY_NAME)) from None
