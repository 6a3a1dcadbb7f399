"""Domain models for transit enrichment."""

from transit_live.domain.models.departure_board_entry import DepartureBoardEntry
from transit_live.domain.models.error_details import ErrorDetails
from transit_live.domain.models.fetch_result import FetchResult, FetchStatus
from transit_live.domain.models.itinerary import Itinerary, Section
from transit_live.domain.models.place_suggestion import PlaceSuggestion

__all__ = [
    "DepartureBoardEntry",
    "ErrorDetails",
    "FetchResult",
    "FetchStatus",
    "Itinerary",
    "PlaceSuggestion",
    "Section",
]
