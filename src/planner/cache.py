"""In-memory optimization result cache.

Keyed by ``MissionParameters.cache_key()``.  Unbounded, no eviction:
construct the engine without a cache to disable it.
"""

from __future__ import annotations

import logging
from typing import Hashable

from planner.models import OptimizationResult

logger = logging.getLogger("perihelion.cache")


class ResultCache:
    def __init__(self) -> None:
        self._results: dict[Hashable, OptimizationResult] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._results

    def get(self, key: Hashable) -> OptimizationResult | None:
        result = self._results.get(key)
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
            logger.debug("Result cache hit (%d entries)", len(self._results))
        return result

    def put(self, key: Hashable, result: OptimizationResult) -> None:
        self._results[key] = result

    def clear(self) -> None:
        self._results.clear()
