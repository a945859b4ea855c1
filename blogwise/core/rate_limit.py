"""Fixed-window, in-memory request rate limiting."""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

PRUNE_EVERY_CALLS = 256


def _now_ms() -> float:
    return time.time() * 1000


@dataclass(slots=True)
class RateWindowEntry:
    count: int
    reset_at: float


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    allowed: bool
    retry_after_seconds: int = 0


class RateLimiter:
    """Counts requests per (endpoint, client) within fixed windows."""

    def __init__(self, clock: Callable[[], float] = _now_ms) -> None:
        self.clock = clock
        self._entries: dict[tuple[str, str], RateWindowEntry] = {}
        self._lock = threading.Lock()
        self._calls = 0

    def allow(
        self,
        client_key: str,
        endpoint_key: str,
        max_requests: int,
        window_ms: int,
    ) -> RateLimitDecision:
        now = self.clock()
        key = (endpoint_key, client_key)

        with self._lock:
            self._calls += 1
            if self._calls % PRUNE_EVERY_CALLS == 0:
                self._prune(now)

            entry = self._entries.get(key)
            if entry is None or now >= entry.reset_at:
                self._entries[key] = RateWindowEntry(count=1, reset_at=now + window_ms)
                return RateLimitDecision(allowed=True)

            if entry.count >= max_requests:
                retry_after = math.ceil((entry.reset_at - now) / 1000)
                return RateLimitDecision(allowed=False, retry_after_seconds=retry_after)

            entry.count += 1
            return RateLimitDecision(allowed=True)

    def _prune(self, now: float) -> None:
        stale = [key for key, entry in self._entries.items() if now >= entry.reset_at]
        for key in stale:
            del self._entries[key]

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()
            self._calls = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_rate_limiter: RateLimiter | None = None


def get_rate_limiter() -> RateLimiter:
    """Get singleton process-wide rate limiter."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter
