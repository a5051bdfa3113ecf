# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass

from flask import Flask, Request, request

from empdir.shared.config import SecurityConfig
from empdir.shared.errors import RateLimitedError
from empdir.shared.logging import logger


@dataclass
class Bucket:
    timestamps: deque[float]


class InMemoryRateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._lock = threading.Lock()
        self._buckets: dict[str, Bucket] = defaultdict(lambda: Bucket(deque(maxlen=self._limit)))
        self._last_sweep = self._clock()

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _sweep(self, now: float) -> None:
        # At most once per window; caller holds the lock.
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        stale = [
            key
            for key, bucket in self._buckets.items()
            if not bucket.timestamps or (now - bucket.timestamps[-1]) > self._window
        ]
        for key in stale:
            del self._buckets[key]

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            self._sweep(now)
            bucket = self._buckets[key]
            # Drop old
            while bucket.timestamps and (now - bucket.timestamps[0]) > self._window:
                bucket.timestamps.popleft()
            if len(bucket.timestamps) >= self._limit:
                return False
            bucket.timestamps.append(now)
            return True


def _client_key(req: Request) -> str:
    # Forwarded headers are only honoured through ProxyFix (TRUST_PROXY).
    return req.remote_addr or "unknown"


def configure_rate_limiting(app: Flask, security: SecurityConfig) -> None:
    if not security.enable_rate_limit:
        return

    limiter = InMemoryRateLimiter(security.rate_limit_requests, security.rate_limit_window)

    @app.before_request
    def _throttle() -> None:
        if request.method == "OPTIONS":
            return
        key = _client_key(request)
        if not limiter.allow(key):
            logger.warning(f"rate_limit: rejected {request.method} {request.path} from {key}")
            raise RateLimitedError()


__all__ = ["InMemoryRateLimiter", "configure_rate_limiting"]
