"""Async client for The Space Devs Launch Library 2 API.

Fetches the upcoming-launch schedule that gets merged (unmodified, filtered
to the requested date range) into optimization results.  Any transport
error, HTTP error status or malformed payload surfaces as
``ExternalFetchFailure``; the engine decides how to degrade.

API docs: https://ll.thespacedevs.com/docs/
"""

from __future__ import annotations

import logging
from datetime import date, timezone
from typing import Any

import httpx

from mechanics.transforms import parse_iso_datetime
from planner.errors import ExternalFetchFailure
from planner.models import RealLaunch

logger = logging.getLogger("perihelion.feeds")

DEFAULT_BASE_URL = "https://lldev.thespacedevs.com/2.2.0"
UNKNOWN = "Unknown"


async def fetch_upcoming_launches(
    base_url: str = DEFAULT_BASE_URL,
    limit: int = 20,
    timeout: float = 10.0,
    client: httpx.AsyncClient | None = None,
) -> list[RealLaunch]:
    """Fetch upcoming launches from Launch Library 2.

    Parameters
    ----------
    base_url : str
        API root, e.g. "https://lldev.thespacedevs.com/2.2.0".
    limit : int
        Maximum number of launches to request.
    timeout : float
        Per-request timeout in seconds.
    client : httpx.AsyncClient, optional
        Reuse an existing client (its own timeout applies).

    Returns
    -------
    list of RealLaunch, in feed order.
    """
    url = f"{base_url.rstrip('/')}/launch/upcoming/"
    params = {"limit": limit}

    logger.info("Fetching upcoming launches from %s (limit=%d)", url, limit)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, params=params)
        else:
            resp = await client.get(url, params=params)
        resp.raise_for_status()
        payload = resp.json()
    except httpx.HTTPError as e:
        raise ExternalFetchFailure(f"Launch schedule request failed: {e}") from e
    except ValueError as e:
        raise ExternalFetchFailure(f"Launch schedule response is not JSON: {e}") from e

    return parse_launch_response(payload)


def parse_launch_response(payload: Any) -> list[RealLaunch]:
    """Map the Launch Library JSON payload onto RealLaunch records.

    Records without a parseable ``net`` date are skipped.
    """
    if not isinstance(payload, dict):
        raise ExternalFetchFailure("Launch schedule payload is not a JSON object")

    results = payload.get("results") or []
    if not isinstance(results, list):
        raise ExternalFetchFailure("Launch schedule \"results\" is not a JSON array")

    launches = []
    for item in results:
        if not isinstance(item, dict):
            continue
        try:
            scheduled = parse_iso_datetime(item["net"])
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Skipping launch without a valid NET date: %s", item.get("name"))
            continue

        launches.append(RealLaunch(
            name=item.get("name") or UNKNOWN,
            scheduled_date=scheduled,
            rocket=_nested(item, "rocket", "configuration", "name"),
            mission=_nested(item, "mission", "name"),
            pad=_nested(item, "pad", "name"),
            agency=_nested(item, "launch_service_provider", "name"),
            status=_nested(item, "status", "name"),
        ))

    logger.info("Parsed %d upcoming launches", len(launches))
    return launches


def filter_launches(launches: list[RealLaunch], start: date, end: date) -> list[RealLaunch]:
    """Keep launches whose scheduled UTC calendar date is within [start, end]."""
    return [l for l in launches if start <= l.scheduled_date.astimezone(timezone.utc).date() <= end]


def _nested(item: dict, *keys: str) -> str:
    value: Any = item
    for key in keys:
        if not isinstance(value, dict):
            return UNKNOWN
        value = value.get(key)
    return value if isinstance(value, str) and value else UNKNOWN
