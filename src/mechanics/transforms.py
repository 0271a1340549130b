"""Unit conversions and calendar helpers.

Handles:
- AU <-> km, seconds <-> days
- ISO date parsing for mission requests
- Day counts from the alignment epoch (2000-01-01)
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

from ephemeris.bodies import AU_KM

SECONDS_PER_DAY = 86400.0

# Epoch for planetary phase-angle bookkeeping
ALIGNMENT_EPOCH = date(2000, 1, 1)


# --------------------------------------------------------------------------- #
#  Unit conversions
# --------------------------------------------------------------------------- #

def au_to_km(au: float) -> float:
    return au * AU_KM


def km_to_au(km: float) -> float:
    return km / AU_KM


def seconds_to_days(seconds: float) -> float:
    return seconds / SECONDS_PER_DAY


# --------------------------------------------------------------------------- #
#  Calendar helpers
# --------------------------------------------------------------------------- #

def parse_iso_date(value: str | date | datetime) -> date:
    """Parse 'YYYY-MM-DD' (or a full ISO timestamp) into a date.

    Raises ValueError on malformed input.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid ISO date: {value!r}")
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        raise ValueError(
            f"Invalid ISO date: '{value}'. Expected format: YYYY-MM-DD"
        ) from None


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO timestamp (a trailing 'Z' is accepted) as an aware UTC datetime."""
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def days_since_epoch(d: date) -> int:
    return (d - ALIGNMENT_EPOCH).days


def add_days(d: date, days: float) -> date:
    """Shift a date by a fractional number of days, truncated to the calendar date."""
    return (datetime.combine(d, time()) + timedelta(days=days)).date()


def utc_at(d: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(d, time(hour, minute), tzinfo=timezone.utc)
