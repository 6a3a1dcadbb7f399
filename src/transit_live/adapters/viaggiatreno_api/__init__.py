"""ViaggiaTreno adapters for Trenitalia real-time data."""

from transit_live.adapters.viaggiatreno_api.http_client import ViaggiatrenoHttpClient
from transit_live.adapters.viaggiatreno_api.viaggiatreno_departure_repository import (
    ViaggiatrenoDepartureRepository,
)
from transit_live.adapters.viaggiatreno_api.viaggiatreno_station_repository import (
    ViaggiatrenoStationRepository,
)
from transit_live.adapters.viaggiatreno_api.viaggiatreno_train_progress_repository import (
    ViaggiatrenoTrainProgressRepository,
)

__all__ = [
    "ViaggiatrenoDepartureRepository",
    "ViaggiatrenoHttpClient",
    "ViaggiatrenoStationRepository",
    "ViaggiatrenoTrainProgressRepository",
]
