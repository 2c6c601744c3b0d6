import threading
import time
from typing import Callable, Optional


class RoundTimer:
    """Per-image countdown clock.

    Remaining time is always derived from the captured start timestamp, never
    from accumulated tick deltas. ``start`` and ``cancel`` bump a generation
    counter; a tick or expiry carrying an older generation is dropped, so a
    cancelled round can never be resolved by its own timer.

    The timer does not own a thread. Whoever hosts it calls ``poll`` on an
    interval (see ``scheduler.start_round_ticker``) or on demand in tests.
    """

    def __init__(self, on_expire: Optional[Callable[[int], None]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self._on_expire = on_expire
        self._clock = clock
        self._lock = threading.Lock()
        self._duration = 0.0
        self._started_at: Optional[float] = None
        self._running = False
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def running(self) -> bool:
        return self._running

    def start(self, duration_seconds: float) -> int:
        with self._lock:
            self._generation += 1
            self._duration = max(0.0, float(duration_seconds))
            self._started_at = self._clock()
            self._running = True
            return self._generation

    def cancel(self) -> None:
        with self._lock:
            if self._running:
                self._running = False
            self._generation += 1

    def remaining(self) -> float:
        if self._started_at is None:
            return self._duration
        elapsed = self._clock() - self._started_at
        return max(0.0, min(self._duration, self._duration - elapsed))

    def poll(self, generation: Optional[int] = None) -> Optional[float]:
        """Compute one tick.

        Returns the time left, or None when the timer is stopped or the
        caller's generation is stale. Reaching zero stops the timer and
        fires the expiry callback exactly once, outside the lock.
        """
        with self._lock:
            if not self._running:
                return None
            if generation is not None and generation != self._generation:
                return None
            left = self.remaining()
            expired_generation = None
            if left <= 0:
                self._running = False
                expired_generation = self._generation
        if expired_generation is not None and self._on_expire is not None:
            self._on_expire(expired_generation)
        return left
