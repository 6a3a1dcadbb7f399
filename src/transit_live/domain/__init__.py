"""Domain layer - core business logic and models."""

from transit_live.domain.models import (
    DepartureBoardEntry,
    FetchResult,
    Itinerary,
    Section,
)
from transit_live.domain.ports import (
    DepartureBoardRepository,
    RoutingProvider,
    StationRepository,
    TrainProgressRepository,
)

__all__ = [
    "DepartureBoardEntry",
    "DepartureBoardRepository",
    "FetchResult",
    "Itinerary",
    "RoutingProvider",
    "Section",
    "StationRepository",
    "TrainProgressRepository",
]
