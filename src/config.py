from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Launch Library feed (real-world launch schedule)
    launch_api_url: str = "https://lldev.thespacedevs.com/2.2.0"
    launch_fetch_limit: int = 20
    launch_fetch_timeout_s: float = 10.0
    fetch_real_launches: bool = True

    # Engine
    max_candidates: int = 50
    max_concurrency: int = 8
    result_cache_enabled: bool = True
    rng_seed: int | None = None

    # Server
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
