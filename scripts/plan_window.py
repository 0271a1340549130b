#!/usr/bin/env python3
"""Plan launch windows for one mission from the command line.

Run from the repository root (src/ is put on the import path).

Usage:
    python scripts/plan_window.py --destination mars
    python scripts/plan_window.py --destination jupiter --start 2026-01-01 --end 2027-01-01 \
        --vehicle "Falcon 9" --payload 2500 --seed 42 --no-feed
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time
from functools import partial

import numpy as np

sys.path.insert(0, "src")

from config import settings
from feeds.launch_library import fetch_upcoming_launches
from mechanics.transforms import parse_iso_date
from planner.engine import TransferWindowEngine
from planner.models import MissionConstraints, MissionParameters


async def main(args: argparse.Namespace) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logger = logging.getLogger("plan_window")

    feed = None
    if not args.no_feed:
        feed = partial(
            fetch_upcoming_launches,
            base_url=settings.launch_api_url,
            limit=settings.launch_fetch_limit,
            timeout=settings.launch_fetch_timeout_s,
        )

    engine = TransferWindowEngine(
        rng=np.random.default_rng(args.seed),
        launch_feed=feed,
        max_candidates=settings.max_candidates,
        max_concurrency=settings.max_concurrency,
        fetch_timeout_s=settings.launch_fetch_timeout_s,
    )
    params = MissionParameters(
        origin=args.origin,
        destination=args.destination,
        launch_site=args.site,
        start_date=parse_iso_date(args.start),
        end_date=parse_iso_date(args.end),
        payload_mass=args.payload,
        launch_vehicle=args.vehicle,
        constraints=MissionConstraints(
            max_flight_time=args.max_flight_time,
            max_delta_v=args.max_delta_v,
            min_score=args.min_score,
        ),
    )

    t0 = time.time()
    result = await engine.optimize(params)
    elapsed = time.time() - t0

    logger.info("Done. %d candidates evaluated in %.2f seconds.", result.candidates_evaluated, elapsed)
    print(json.dumps(engine.summarize(result), indent=2))
    if result.optimal_windows:
        print(json.dumps(engine.generate_manifest(result.optimal_windows[0], params), indent=2))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plan interplanetary launch windows")
    parser.add_argument("--origin", default="earth", help="Origin body")
    parser.add_argument("--destination", required=True, help="Destination body")
    parser.add_argument("--site", default="KSC", help="Launch site code")
    parser.add_argument("--start", default="2026-01-01", help="Window start (ISO)")
    parser.add_argument("--end", default="2026-12-31", help="Window end (ISO)")
    parser.add_argument("--vehicle", default="Falcon Heavy", help="Launch vehicle name")
    parser.add_argument("--payload", type=float, default=1000.0, help="Payload mass in kg")
    parser.add_argument("--max-flight-time", type=float, default=None, help="Max flight time in days")
    parser.add_argument("--max-delta-v", type=float, default=None, help="Max delta-v in km/s")
    parser.add_argument("--min-score", type=float, default=None, help="Minimum composite score")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible runs")
    parser.add_argument("--no-feed", action="store_true",
                        help="Skip the real launch schedule fetch")
    args = parser.parse_args()

    asyncio.run(main(args))
