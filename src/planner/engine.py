"""Launch window engine — scores weekly candidate dates for a transfer.

Pipeline for one request:
  1. validate site / vehicle / dates (request-level, raises)
  2. enumerate candidate dates at a fixed 7-day cadence (capped)
  3. evaluate candidates concurrently (transfer -> requirements -> score);
     a candidate whose bodies cannot be resolved is skipped, not fatal
  4. fetch the real launch schedule alongside; failure degrades to []
  5. filter, stable-sort by score, split into optimal / alternative windows
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Awaitable, Callable

import numpy as np

from feeds.launch_library import filter_launches
from mechanics.hohmann import compute_transfer
from mechanics.transforms import parse_iso_date
from planner.cache import ResultCache
from planner.catalog import LaunchSite, get_launch_site, get_vehicle
from planner.errors import ExternalFetchFailure, InvalidMissionError, UnknownBodyError
from planner.manifest import generate_manifest, summarize
from planner.models import (
    MissionParameters,
    OptimizationResult,
    RankedWindow,
    RealLaunch,
    TrajectoryCandidate,
)
from planner.requirements import compute_launch_requirements
from planner.scoring import filter_and_rank, score_trajectory, split_windows

logger = logging.getLogger("perihelion.engine")

LAUNCH_DATE_STEP_DAYS = 7
DEFAULT_MAX_CANDIDATES = 50
DEFAULT_MAX_CONCURRENCY = 8
DEFAULT_FETCH_TIMEOUT_S = 10.0

LaunchFeed = Callable[[], Awaitable[list[RealLaunch]]]


def enumerate_launch_dates(start: str | date, end: str | date) -> list[date]:
    """Candidate launch dates from start to end (inclusive), 7 days apart."""
    start_d = parse_iso_date(start)
    end_d = parse_iso_date(end)

    dates = []
    d = start_d
    step = timedelta(days=LAUNCH_DATE_STEP_DAYS)
    while d <= end_d:
        dates.append(d)
        d += step
    return dates


def evaluate_candidate(
    origin: str,
    destination: str,
    site: str | LaunchSite,
    launch_date: date,
    rng: np.random.Generator,
) -> TrajectoryCandidate:
    """Transfer, requirements and composite score for one launch date."""
    trajectory = compute_transfer(origin, destination, launch_date)
    requirements = compute_launch_requirements(trajectory, site, launch_date, rng)
    return TrajectoryCandidate(
        launch_date=launch_date,
        trajectory=trajectory,
        requirements=requirements,
        score=score_trajectory(trajectory, requirements),
    )


class TransferWindowEngine:
    """Finds and ranks launch windows for a mission request.

    Parameters
    ----------
    cache : ResultCache, optional
        Result store keyed by the full mission-parameter tuple. None disables caching.
    rng : numpy.random.Generator, optional
        Entropy for weather / azimuth / seasonal sampling. Each candidate gets
        its own child generator, so a seeded engine is reproducible.
    launch_feed : async callable, optional
        Returns the real-world launch schedule. None means no feed.
    """

    def __init__(
        self,
        cache: ResultCache | None = None,
        rng: np.random.Generator | None = None,
        launch_feed: LaunchFeed | None = None,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        fetch_timeout_s: float = DEFAULT_FETCH_TIMEOUT_S,
    ) -> None:
        self.cache = cache
        self.rng = rng if rng is not None else np.random.default_rng()
        self.launch_feed = launch_feed
        self.max_candidates = max_candidates
        self.max_concurrency = max(1, max_concurrency)
        self.fetch_timeout_s = fetch_timeout_s

    # ----- Public API ----- #

    async def optimize(self, params: MissionParameters) -> OptimizationResult:
        """Compute optimal and alternative launch windows for a mission."""
        params, site, vehicle = self._validate(params)

        key = params.cache_key()
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        logger.info(
            "Calculating windows for %s -> %s from %s [%s .. %s]",
            params.origin, params.destination, site.code, params.start_date, params.end_date,
        )

        dates = enumerate_launch_dates(params.start_date, params.end_date)
        if len(dates) > self.max_candidates:
            logger.info("Capping %d candidate dates to %d", len(dates), self.max_candidates)
            dates = dates[: self.max_candidates]
        candidates, fetched = await asyncio.gather(
            self._evaluate_all(params, site, dates),
            self._fetch_real_launches(),
        )

        evaluated = [c for c in candidates if c is not None]
        ranked = filter_and_rank(evaluated, params.payload_mass, vehicle, params.constraints)
        split = split_windows(ranked)

        logger.info(
            "%d/%d candidates evaluated, %d feasible",
            len(evaluated), len(dates), len(ranked),
        )

        result = OptimizationResult(
            optimal_windows=split.optimal,
            alternative_windows=split.alternative,
            constraints=params.constraints,
            vehicle_capability=vehicle,
            real_launches=filter_launches(fetched or [], params.start_date, params.end_date),
            candidates_evaluated=len(evaluated),
        )

        # Degraded fetches are not cached
        if self.cache is not None and fetched is not None:
            self.cache.put(key, result)
        return result

    def generate_manifest(self, window: RankedWindow, params: MissionParameters) -> dict:
        return generate_manifest(window, params)

    def summarize(self, result: OptimizationResult) -> dict:
        return summarize(result)

    # ----- Internals ----- #

    def _validate(self, params: MissionParameters):
        """Request-level checks. Raises UnknownReferenceError / InvalidMissionError.

        Returns the parameters with parsed dates and canonical site / vehicle
        names, plus the resolved site and vehicle.
        """
        if params.origin.lower().strip() == params.destination.lower().strip():
            raise InvalidMissionError("Origin and destination must be different bodies")
        if params.payload_mass <= 0:
            raise InvalidMissionError(f"Payload mass must be positive, got {params.payload_mass}")
        try:
            start = parse_iso_date(params.start_date)
            end = parse_iso_date(params.end_date)
        except (TypeError, ValueError) as e:
            raise InvalidMissionError(f"Invalid mission date range: {e}") from e
        site = get_launch_site(params.launch_site)
        vehicle = get_vehicle(params.launch_vehicle)
        normalized = replace(
            params,
            start_date=start,
            end_date=end,
            launch_site=site.code,
            launch_vehicle=vehicle.name,
        )
        return normalized, site, vehicle

    async def _evaluate_all(
        self, params: MissionParameters, site: LaunchSite, dates: list[date],
    ) -> list[TrajectoryCandidate | None]:
        """Bounded fan-out over candidate dates; results stay in date order."""
        if not dates:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)
        child_rngs = self.rng.spawn(len(dates))

        async def run(launch_date: date, rng: np.random.Generator) -> TrajectoryCandidate | None:
            async with semaphore:
                try:
                    return await asyncio.to_thread(
                        evaluate_candidate,
                        params.origin, params.destination, site, launch_date, rng,
                    )
                except UnknownBodyError as e:
                    logger.warning("Skipping candidate %s: %s", launch_date.isoformat(), e)
                    return None

        return await asyncio.gather(*(run(d, r) for d, r in zip(dates, child_rngs)))

    async def _fetch_real_launches(self) -> list[RealLaunch] | None:
        """Single fail-soft attempt at the external launch schedule.

        Returns None when the fetch failed or timed out.
        """
        if self.launch_feed is None:
            return []
        try:
            return await asyncio.wait_for(self.launch_feed(), timeout=self.fetch_timeout_s)
        except ExternalFetchFailure as e:
            logger.warning("Could not fetch real launch data: %s", e)
        except asyncio.TimeoutError:
            logger.warning("Real launch data fetch timed out after %.1fs", self.fetch_timeout_s)
        except Exception as e:
            logger.warning("Real launch feed error: %s", e)
        return None
