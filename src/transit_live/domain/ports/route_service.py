"""Route service port."""

from typing import Any, Protocol


class RouteService(Protocol):
    """Port for place search and transit routing use cases."""

    async def autosuggest(
        self, query: str, latitude: float = 0.0, longitude: float = 0.0
    ) -> list[dict[str, Any]]:
        """Search places near a position."""
        ...

    async def get_enriched_transit(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> Any:
        """Transit routes with live delays on the first route."""
        ...

    async def get_route_polylines(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> list[str]:
        """Polylines of every section of every route."""
        ...
