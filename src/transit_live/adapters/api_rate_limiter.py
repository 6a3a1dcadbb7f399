"""Spacing of outgoing requests to upstream APIs.

The carrier endpoints are unofficial and undocumented, so all requests to them
share one limiter that keeps a minimum gap between consecutive calls. A gap of
zero disables waiting entirely.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Enforces a minimum delay between requests to one upstream API."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, min_delay_seconds: float = 0.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = max(min_delay_seconds, 0.0)
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def for_api(cls, api_name: str, min_delay_seconds: float = 0.0) -> ApiRateLimiter:
        """Shared limiter for an API, created on first use.

        The delay of an existing limiter is kept; later callers cannot loosen it.
        """
        limiter = cls._instances.get(api_name)
        if limiter is None:
            limiter = cls(api_name, min_delay_seconds)
            cls._instances[api_name] = limiter
            if limiter.min_delay_seconds:
                logger.info(
                    f"Spacing {api_name} requests by at least {limiter.min_delay_seconds}s"
                )
        return limiter

    @classmethod
    def reset(cls) -> None:
        """Forget all shared limiters."""
        cls._instances.clear()

    def _wait_time(self, now: float) -> float:
        if self._last_request_time is None:
            return 0.0
        return self.min_delay_seconds - (now - self._last_request_time)

    async def acquire(self) -> None:
        """Wait until a request to the API is allowed."""
        if not self.min_delay_seconds:
            return

        async with self._lock:
            wait_time = self._wait_time(time.monotonic())
            if wait_time > 0:
                logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                await asyncio.sleep(wait_time)
            self._last_request_time = time.monotonic()
