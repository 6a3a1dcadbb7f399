"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_live.domain.ports.departure_board_repository import DepartureBoardRepository
from transit_live.domain.ports.route_service import RouteService
from transit_live.domain.ports.routing_provider import RoutingProvider
from transit_live.domain.ports.station_repository import StationRepository
from transit_live.domain.ports.train_lookup import TrainLookup
from transit_live.domain.ports.train_progress_repository import TrainProgressRepository

__all__ = [
    "DepartureBoardRepository",
    "RouteService",
    "RoutingProvider",
    "StationRepository",
    "TrainLookup",
    "TrainProgressRepository",
]
