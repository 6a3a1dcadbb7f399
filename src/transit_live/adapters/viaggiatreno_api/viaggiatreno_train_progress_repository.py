"""ViaggiaTreno train progress repository adapter."""

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from transit_live.adapters.viaggiatreno_api.constants import TRAIN_PROGRESS_PATH
from transit_live.adapters.viaggiatreno_api.http_client import ViaggiatrenoHttpClient
from transit_live.domain.models import FetchResult
from transit_live.domain.ports.train_progress_repository import TrainProgressRepository


def departure_day_ms(date: datetime, timezone: str) -> int:
    """Epoch milliseconds of local midnight of the day ``date`` falls on."""
    zone = ZoneInfo(timezone)
    local = date.astimezone(zone) if date.tzinfo else date.replace(tzinfo=zone)
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


class ViaggiatrenoTrainProgressRepository(TrainProgressRepository):
    """Fetches the live progress of a train, passed through unmodified."""

    def __init__(self, http_client: ViaggiatrenoHttpClient, timezone: str = "Europe/Rome") -> None:
        self._http_client = http_client
        self._timezone = timezone

    async def get_train_progress(
        self, origin_code: str, train_number: str, date: datetime
    ) -> FetchResult[Any]:
        # A run is identified by origin, train number and departure day
        response = await self._http_client.fetch_json(
            TRAIN_PROGRESS_PATH,
            origin_code,
            train_number,
            str(departure_day_ms(date, self._timezone)),
        )
        if response.is_ok and response.value is None:
            return FetchResult.empty()
        return response
