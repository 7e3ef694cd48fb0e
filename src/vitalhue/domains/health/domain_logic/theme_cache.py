"""Memoization wrapper for health evaluation, keyed by a snapshot fingerprint.

Evaluation is pure, so caching only saves work; cached and fresh results are
always equal.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections import OrderedDict

from vitalhue.domains.health.domain_logic.score_models import (
    HealthMetrics,
    HealthScoreResult,
)
from vitalhue.domains.health.domain_logic.theme_mapper import evaluate_health

logger = logging.getLogger(__name__)

_NO_PATIENT_KEY = "no-patient"


def metrics_fingerprint(metrics: HealthMetrics | None) -> str:
    """SHA-256 of the canonical JSON of the present fields."""
    if metrics is None:
        return _NO_PATIENT_KEY
    canonical = json.dumps(metrics.as_dict(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


class ThemeCache:
    """Bounded LRU cache of :func:`evaluate_health` results.

    Safe to share between concurrent callers.

    Usage::

        cache = ThemeCache(maxsize=128)
        result = cache.evaluate(metrics)
    """

    def __init__(self, maxsize: int = 128) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._maxsize = maxsize
        self._entries: OrderedDict[str, HealthScoreResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int:
        return self._maxsize

    def evaluate(self, metrics: HealthMetrics | None) -> HealthScoreResult:
        """Return the cached result for this snapshot, computing it on a miss."""
        key = metrics_fingerprint(metrics)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return cached

        result = evaluate_health(metrics)

        with self._lock:
            self.misses += 1
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self._maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted theme cache entry %s", evicted[:12])
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "size": len(self._entries),
                "maxsize": self._maxsize,
                "hits": self.hits,
                "misses": self.misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
