"""Error taxonomy for the launch window planner.

Lookup failures against the static tables are ``UnknownReferenceError``
subclasses.  Whether they abort a whole request or only a single candidate
depends on where they are raised: body lookups happen per candidate date,
site and vehicle lookups happen once per request.
"""

from __future__ import annotations


class UnknownReferenceError(LookupError):
    """Raised when a name is not present in one of the static reference tables."""

    kind = "reference"

    def __init__(self, name: str, known: list[str] | None = None):
        self.name = name
        self.known = sorted(known) if known else []
        message = f"Unknown {self.kind}: '{name}'"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class UnknownBodyError(UnknownReferenceError):
    kind = "celestial body"


class UnknownLaunchSiteError(UnknownReferenceError):
    kind = "launch site"


class UnknownVehicleError(UnknownReferenceError):
    kind = "launch vehicle"


class InvalidMissionError(ValueError):
    """Raised for malformed mission requests (bad dates, bad payload, ...)."""


class ExternalFetchFailure(RuntimeError):
    """Raised when the real-world launch schedule cannot be fetched or parsed."""
