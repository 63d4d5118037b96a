"""In-process memory fixed-window rate limiter.
Single-process only: each worker keeps its own counters."""
from __future__ import annotations

import threading
import time

from .rate_limiter import RateLimiter, window_start


class MemoryRateLimiter(RateLimiter):  # type: ignore[misc]
    def __init__(self) -> None:
        # key -> (window_start, count)
        self._buckets: dict[str, tuple[int, int]] = {}
        self._lock = threading.Lock()
        self._swept_ws = 0

    def allow(self, key: str, quota: int, per_seconds: int) -> bool:
        ws = window_start(size=per_seconds)
        with self._lock:
            cur = self._buckets.get(key)
            if ws > self._swept_ws:
                self._sweep(ws)
            if cur is None or cur[0] != ws:
                self._buckets[key] = (ws, 1)
                return 1 <= quota
            new_count = cur[1] + 1
            self._buckets[key] = (ws, new_count)
            return new_count <= quota

    def _sweep(self, current_ws: int) -> None:
        # Drop buckets from ended windows once per new window; caller holds the lock
        self._swept_ws = current_ws
        stale = [k for k, (ws, _) in self._buckets.items() if ws < current_ws]
        for k in stale:
            del self._buckets[k]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buckets)

    def retry_after(self, key: str, per_seconds: int) -> int:
        with self._lock:
            cur = self._buckets.get(key)
        if not cur:
            return 0
        ws, _ = cur
        now = int(time.time())
        end = ws + per_seconds
        if now >= end:
            return 0
        return end - now


__all__ = ["MemoryRateLimiter"]
