"""Routing provider port."""

from typing import Any, Protocol

from transit_live.domain.models.fetch_result import FetchResult


class RoutingProvider(Protocol):
    """Port for the geo search and transit routing API."""

    async def autosuggest(self, query: str, latitude: float, longitude: float) -> FetchResult[Any]:
        """Search places near a position."""
        ...

    async def transit_routes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        """Compute transit routes including intermediate stops."""
        ...

    async def route_shapes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        """Compute transit routes including section polylines."""
        ...
