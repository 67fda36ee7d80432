"""
Fixed-window rate limiting.

Every client address gets a counter that starts with its first request
and lasts ``window_seconds``.  Up to ``limit`` requests are admitted in
that window; further requests are answered with HTTP 429 until the
window expires, at which point the counter starts afresh.  Counters are
kept in memory and are per process.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Dict, Tuple

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class FixedWindowRateLimiter:
    """Counts hits per key within fixed time windows."""

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock
        # key -> (window start, hits in window)
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> bool:
        """Record a request for ``key``; return ``False`` if it exceeds the limit."""
        now = self._clock()
        with self._lock:
            start, count = self._windows.get(key, (now, 0))
            if now - start >= self.window_seconds:
                start, count = now, 0
            if count >= self.limit:
                self._windows[key] = (start, count)
                return False
            self._windows[key] = (start, count + 1)
            self._prune(now)
            return True

    def _prune(self, now: float) -> None:
        # Caller holds the lock.  Drop expired windows once the table grows.
        if len(self._windows) < 10_000:
            return
        expired = [k for k, (start, _) in self._windows.items() if now - start >= self.window_seconds]
        for key in expired:
            del self._windows[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests over the limit with 429 Too Many Requests."""

    def __init__(self, app, limiter: FixedWindowRateLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next):
        client = request.client.host if request.client else "unknown"
        if not self.limiter.hit(client):
            logger.warning("Rate limit exceeded for %s on %s %s", client, request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": "Too many requests"},
                headers={"Retry-After": str(int(self.limiter.window_seconds))},
            )
        return await call_next(request)
