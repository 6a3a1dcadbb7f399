"""HERE routing provider adapter."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from transit_live.adapters.api_request_logger import log_api_request
from transit_live.adapters.here_api.constants import (
    API_NAME,
    DEFAULT_AUTOSUGGEST_URL,
    DEFAULT_TRANSIT_URL,
    RETURN_INTERMEDIATE,
    RETURN_POLYLINE,
)
from transit_live.domain.models import FetchResult
from transit_live.domain.ports.routing_provider import RoutingProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class HereRoutingProvider(RoutingProvider):
    """Adapter for the HERE autosuggest and public transit routing APIs."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        default_params: dict[str, Any] | None = None,
        autosuggest_url: str = DEFAULT_AUTOSUGGEST_URL,
        transit_url: str = DEFAULT_TRANSIT_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession used for all requests.
            default_params: Parameters added to every request (``lang``, ``apikey``).
            autosuggest_url: HERE autosuggest endpoint.
            transit_url: HERE public transit routes endpoint.
            timeout_seconds: Total timeout of a single request.
        """
        self._session = session
        self._default_params = dict(default_params or {})
        self._autosuggest_url = autosuggest_url
        self._transit_url = transit_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def autosuggest(self, query: str, latitude: float, longitude: float) -> FetchResult[Any]:
        """Search places near a position."""
        params = {"q": query, "at": f"{latitude},{longitude}"}
        return await self._get(self._autosuggest_url, params)

    async def transit_routes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        """Compute transit routes with intermediate stops."""
        return await self._get(
            self._transit_url,
            self._route_params(origin, destination, departure_time, RETURN_INTERMEDIATE),
        )

    async def route_shapes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        """Compute transit routes with section polylines."""
        return await self._get(
            self._transit_url,
            self._route_params(origin, destination, departure_time, RETURN_POLYLINE),
        )

    @staticmethod
    def _route_params(
        origin: str, destination: str, departure_time: str, return_value: str
    ) -> dict[str, Any]:
        return {
            "origin": origin,
            "destination": destination,
            "departureTime": departure_time,
            "return": return_value,
        }

    async def _get(self, url: str, params: dict[str, Any]) -> FetchResult[Any]:
        if not self._session:
            return FetchResult.failed("no aiohttp session", upstream=API_NAME)

        all_params = {**params, **self._default_params}
        log_api_request("GET", url, params=all_params)

        try:
            async with self._session.get(url, params=all_params, timeout=self._timeout) as response:
                return await self._handle_response(response, url)
        except asyncio.TimeoutError:
            logger.warning(f"Timeout calling HERE API {url}")
            return FetchResult.failed(f"timeout calling {url}", upstream=API_NAME)
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Error calling HERE API {url}: {e}")
            return FetchResult.failed(str(e), upstream=API_NAME)

    async def _handle_response(self, response: "ClientResponse", url: str) -> FetchResult[Any]:
        """Decode a HERE response.

        HERE reports request errors as JSON bodies with a non-200 status. Those
        bodies are returned as data, so clients see the provider's explanation.
        """
        data = await response.json(content_type=None)
        if response.status != 200:
            logger.warning(f"HERE API returned status {response.status} for {url}: {data!r:.200}")
        if data is None:
            return FetchResult.empty()
        return FetchResult.ok(data)
