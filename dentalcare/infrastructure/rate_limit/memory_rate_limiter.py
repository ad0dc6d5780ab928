import time
from collections import deque
from typing import Callable, Deque, Dict

from ...application.ports.rate_limiter import RateLimiter


class InMemoryRateLimiter(RateLimiter):
    """Per-process sliding window keyed by client.

    Keys whose window has emptied are dropped, both when they come back and
    by a sweep over the whole store every ``sweep_interval`` seconds, so idle
    clients do not accumulate.
    """

    def __init__(self, sweep_interval: float = 60.0, clock: Callable[[], float] = time.monotonic) -> None:
        self._hits: Dict[str, Deque[float]] = {}
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._last_sweep = clock()
        self._longest_window = 0.0

    def __len__(self) -> int:
        return len(self._hits)

    def allow(self, key: str, max_requests: int, window_seconds: int) -> bool:
        now = self._clock()
        self._longest_window = max(self._longest_window, float(window_seconds))
        if now - self._last_sweep >= self._sweep_interval:
            self._sweep(now)

        hits = self._hits.get(key)
        if hits is None:
            hits = self._hits[key] = deque()
        window_start = now - window_seconds
        while hits and hits[0] <= window_start:
            hits.popleft()

        if len(hits) >= max_requests:
            return False
        hits.append(now)
        return True

    def _sweep(self, now: float) -> None:
        cutoff = now - self._longest_window
        stale = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in stale:
            del self._hits[key]
        self._last_sweep = now
