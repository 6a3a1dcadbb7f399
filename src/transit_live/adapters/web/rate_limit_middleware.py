"""Per-client rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"
DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Client address, preferring the first hop of X-Forwarded-For.

    The service is usually deployed behind a proxy, where the direct peer is
    the proxy itself.
    """
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    first_hop = forwarded_for.split(",")[0].strip()
    if first_hop:
        return first_hop

    client = request.client
    if client and client.host:
        return client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return UNKNOWN_CLIENT


def retry_after_seconds(result: Any) -> float:
    """Seconds a limited client should wait, read from a throttled-py result."""
    state = getattr(result, "state", None)
    retry_after = getattr(state, "retry_after", None)
    if retry_after is None:
        retry_after = getattr(result, "retry_after", None)
    return float(retry_after) if retry_after else DEFAULT_RETRY_AFTER_SECONDS


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token bucket per client IP; limited clients get 429 with Retry-After."""

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per IP per minute, also the burst size.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self._quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self._store = store.MemoryStore()
        logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")

    def _throttle_for(self, client_ip: str) -> Throttled:
        return Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self._quota,
            store=self._store,
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        client_ip = extract_client_ip(request)
        result = self._throttle_for(client_ip).limit()
        if not result.limited:
            return await call_next(request)

        retry_after = retry_after_seconds(result)
        logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after}s")
        return JSONResponse(
            {"error": "Rate limit exceeded. Please try again later."},
            status_code=429,
            headers={"Retry-After": str(int(retry_after))},
        )
