"""HTTP client for ViaggiaTreno requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from transit_live.adapters.api_rate_limiter import ApiRateLimiter
from transit_live.adapters.api_request_logger import log_api_request
from transit_live.adapters.viaggiatreno_api.constants import API_NAME
from transit_live.domain.models import FetchResult

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_BASE_URL = "http://www.viaggiatreno.it/infomobilita/resteasy/viaggiatreno"


class ViaggiatrenoHttpClient:
    """HTTP client for the ViaggiaTreno REST endpoints.

    Every endpoint takes its arguments as path segments. Each segment is
    percent-encoded on its own, so station names containing slashes and the
    spaces of the textual dates survive the trip.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        min_delay_seconds: float = 0.0,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession used for all requests.
            base_url: Base URL of the endpoints, without trailing slash.
            timeout_seconds: Total timeout of a single request.
            min_delay_seconds: Minimum delay between two requests to the carrier.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = ApiRateLimiter.for_api(API_NAME, min_delay_seconds)

    def build_url(self, *segments: str) -> str:
        """Absolute URL for the given path segments."""
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self._base_url}/{path}"

    async def fetch_text(self, *segments: str) -> FetchResult[str]:
        """GET a text endpoint."""
        return await self._get(segments, as_json=False)

    async def fetch_json(self, *segments: str) -> FetchResult[Any]:
        """GET a JSON endpoint."""
        return await self._get(segments, as_json=True)

    async def _get(self, segments: tuple[str, ...], as_json: bool) -> FetchResult[Any]:
        if not self._session:
            return FetchResult.failed("no aiohttp session", upstream=API_NAME)

        url = self.build_url(*segments)
        await self._rate_limiter.acquire()
        log_api_request("GET", url)

        try:
            async with self._session.get(url, timeout=self._timeout) as response:
                return await self._handle_response(response, url, as_json)
        except asyncio.TimeoutError:
            logger.warning(f"Timeout fetching {url}")
            return FetchResult.failed(f"timeout fetching {url}", upstream=API_NAME)
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Error fetching {url}: {e}")
            return FetchResult.failed(str(e), upstream=API_NAME)

    async def _handle_response(
        self, response: "ClientResponse", url: str, as_json: bool
    ) -> FetchResult[Any]:
        if response.status != 200:
            body = await response.text()
            logger.error(f"ViaggiaTreno returned status {response.status} for {url}: {body[:200]}")
            return FetchResult.failed(
                f"unexpected status {response.status}",
                status_code=response.status,
                upstream=API_NAME,
            )

        if as_json:
            # The carrier does not always label JSON bodies as such
            return FetchResult.ok(await response.json(content_type=None))
        return FetchResult.ok(await response.text())
