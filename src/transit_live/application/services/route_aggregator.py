"""Use cases combining the routing provider with carrier delay enrichment."""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from transit_live.domain.models import Itinerary, PlaceSuggestion

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from transit_live.application.services.leg_enricher import LegEnricher
    from transit_live.domain.ports import RoutingProvider


def default_departure_time() -> str:
    """Current instant in ISO 8601, used when a client gives no departure time."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RouteAggregator:
    """Service answering place search and transit routing requests."""

    def __init__(self, routing_provider: "RoutingProvider", leg_enricher: "LegEnricher") -> None:
        """Initialize with the routing provider and the leg enricher."""
        self._routing_provider = routing_provider
        self._leg_enricher = leg_enricher

    async def autosuggest(
        self, query: str, latitude: float = 0.0, longitude: float = 0.0
    ) -> list[dict[str, Any]]:
        """Search places, keeping only results that have an address."""
        result = await self._routing_provider.autosuggest(query, latitude, longitude)
        if not result.is_ok or not isinstance(result.value, dict):
            return []

        items = result.value.get("items")
        if not isinstance(items, list):
            return []

        suggestions = []
        for item in items:
            suggestion = self._build_suggestion(item)
            if suggestion:
                suggestions.append(suggestion.to_dict())
        return suggestions

    @staticmethod
    def _build_suggestion(item: Any) -> PlaceSuggestion | None:
        address = item.get("address") if isinstance(item, dict) else None
        if not isinstance(address, dict) or not address:
            return None

        position = item.get("position")
        if not isinstance(position, dict):
            position = {}
        categories = item.get("categories")
        if not isinstance(categories, list):
            categories = []
        primary = next((c for c in categories if isinstance(c, dict) and c.get("primary")), None)

        return PlaceSuggestion(
            id=item.get("id", ""),
            type=item.get("resultType", ""),
            title=item.get("title", ""),
            address=address.get("label", ""),
            latitude=position.get("lat"),
            longitude=position.get("lng"),
            category=primary.get("id") if primary else None,
        )

    async def get_enriched_transit(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> Any:
        """Compute transit routes and attach live delays to the first route.

        Alternative routes are returned as computed. When the routing provider
        cannot be reached an empty list is returned; any payload without a
        usable route list is passed through untouched.
        """
        result = await self._routing_provider.transit_routes(
            origin, destination, departure_time or default_departure_time()
        )
        if not result.is_ok:
            return []

        payload = result.value
        routes = payload.get("routes") if isinstance(payload, dict) else None
        if not isinstance(routes, list) or not routes or not isinstance(routes[0], dict):
            logger.info("Routing response has no routes to enrich")
            return payload

        itinerary = await self._leg_enricher.enrich(Itinerary.from_dict(routes[0]))
        routes[0] = itinerary.to_dict()
        return payload

    async def get_route_polylines(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> list[str]:
        """Flexible polylines of every section of every computed route."""
        result = await self._routing_provider.route_shapes(
            origin, destination, departure_time or default_departure_time()
        )
        payload = result.value if result.is_ok else None
        routes = payload.get("routes") if isinstance(payload, dict) else None
        if not isinstance(routes, list):
            return []

        polylines = []
        for route in routes:
            sections = route.get("sections") if isinstance(route, dict) else None
            if not isinstance(sections, list):
                continue
            polylines.extend(s.get("polyline") for s in sections if isinstance(s, dict))
        return polylines
