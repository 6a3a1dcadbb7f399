"""Adapters layer - external system integrations."""

from transit_live.adapters.config import AppConfig
from transit_live.adapters.here_api import HereRoutingProvider
from transit_live.adapters.viaggiatreno_api import (
    ViaggiatrenoDepartureRepository,
    ViaggiatrenoHttpClient,
    ViaggiatrenoStationRepository,
    ViaggiatrenoTrainProgressRepository,
)

__all__ = [
    "AppConfig",
    "HereRoutingProvider",
    "ViaggiatrenoDepartureRepository",
    "ViaggiatrenoHttpClient",
    "ViaggiatrenoStationRepository",
    "ViaggiatrenoTrainProgressRepository",
]
