from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

import numpy as np
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from api.routes_http import router as http_router
from feeds.launch_library import fetch_upcoming_launches
from planner.cache import ResultCache
from planner.engine import TransferWindowEngine

logger = logging.getLogger("perihelion")
logging.basicConfig(level=settings.log_level, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")


def build_engine() -> TransferWindowEngine:
    """Wire the engine from settings."""
    launch_feed = None
    if settings.fetch_real_launches:
        launch_feed = partial(
            fetch_upcoming_launches,
            base_url=settings.launch_api_url,
            limit=settings.launch_fetch_limit,
            timeout=settings.launch_fetch_timeout_s,
        )

    return TransferWindowEngine(
        cache=ResultCache() if settings.result_cache_enabled else None,
        rng=np.random.default_rng(settings.rng_seed),
        launch_feed=launch_feed,
        max_candidates=settings.max_candidates,
        max_concurrency=settings.max_concurrency,
        fetch_timeout_s=settings.launch_fetch_timeout_s,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the window engine. Shutdown: cleanup."""
    app.state.engine = build_engine()
    logger.info(
        "Window engine ready — cache=%s, launch feed=%s",
        settings.result_cache_enabled, settings.fetch_real_launches,
    )
    yield
    logger.info("Shutting down Perihelion")


app = FastAPI(
    title="Perihelion — Interplanetary Launch Window Optimizer",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(http_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)
