import threading
import time
from typing import Any, Callable, Optional

from flask import current_app


class TtlCache:
    """A single cached value with an explicit freshness rule.

    ``ttl`` is in seconds; ``None`` means the value never goes stale once
    loaded. ``is_stale`` is a pure function of ``now`` so callers and tests
    can pass any timestamp.
    """

    def __init__(self, ttl: Optional[float], clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.value: Any = None
        self.fetched_at: Optional[float] = None
        self._clock = clock
        self._lock = threading.Lock()

    def is_stale(self, now: float) -> bool:
        if self.fetched_at is None:
            return True
        if self.ttl is None:
            return False
        return now - self.fetched_at > self.ttl

    def get(self, loader: Callable[[], Any], now: Optional[float] = None) -> Any:
        now = self._clock() if now is None else now
        with self._lock:
            if self.is_stale(now):
                self.value = loader()
                self.fetched_at = now
            return self.value

    def invalidate(self) -> None:
        with self._lock:
            self.value = None
            self.fetched_at = None


def build_caches(config) -> dict:
    return {
        'images': TtlCache(float(config.get('IMAGE_POOL_CACHE_TTL_SEC', 60))),
        'leaderboard': TtlCache(float(config.get('LEADERBOARD_CACHE_TTL_SEC', 3))),
        # Countries only change through db-reset; keep them until restart.
        'countries': TtlCache(None),
    }


def get_cache(name: str) -> TtlCache:
    return current_app.extensions['aioreal_caches'][name]
