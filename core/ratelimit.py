from __future__ import annotations

import threading
import time
from collections import deque
from typing import Callable


class RateLimiter:
    """Per-user request limiter over a sliding window.

    Safe to call from many update handlers at once; all counters are guarded
    by a single lock.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._requests: dict[int, deque[float]] = {}
        self._lock = threading.Lock()

    def allow(self, user_id: int) -> bool:
        with self._lock:
            now = self._clock()
            recent = self._requests.setdefault(user_id, deque())
            self._evict(recent, now)
            if len(recent) >= self.max_requests:
                return False
            recent.append(now)
            return True

    def cleanup(self) -> int:
        """Drop users with no requests inside the window. Returns how many were removed."""
        with self._lock:
            now = self._clock()
            idle: list[int] = []
            for user_id, recent in self._requests.items():
                self._evict(recent, now)
                if not recent:
                    idle.append(user_id)
            for user_id in idle:
                del self._requests[user_id]
            return len(idle)

    def tracked_users(self) -> int:
        with self._lock:
            return len(self._requests)

    def _evict(self, recent: deque[float], now: float) -> None:
        window_start = now - self.window_seconds
        while recent and recent[0] <= window_start:
            recent.popleft()


__all__ = ["RateLimiter"]
