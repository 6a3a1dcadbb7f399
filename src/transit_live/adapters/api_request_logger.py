"""Logging of outgoing API requests when TRANSIT_LIVE_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "TRANSIT_LIVE_LOG_REQUESTS"
REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset({"apikey", "api_key", "authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via the environment."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def redact(values: dict[str, Any]) -> dict[str, Any]:
    """Replace credentials in query parameters or headers."""
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in values.items()}


def build_logged_url(url: str, params: dict[str, Any] | None) -> str:
    """URL with redacted, sorted query parameters."""
    if not params:
        return url
    query = urlencode(sorted(redact(params).items()), safe="*,:")
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request if TRANSIT_LIVE_LOG_REQUESTS is enabled.

    The HERE API key travels as a query parameter, so parameters are redacted
    as well as headers.
    """
    if not should_log_requests():
        return

    message = f"API Request: {method} {build_logged_url(url, params)}"
    if headers:
        message += f" headers={redact(headers)}"
    logger.info(message)
