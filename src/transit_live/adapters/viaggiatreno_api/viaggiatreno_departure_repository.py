"""ViaggiaTreno departure board repository adapter."""

import logging
from datetime import datetime

from transit_live.adapters.viaggiatreno_api.constants import API_NAME, DEPARTURES_PATH
from transit_live.adapters.viaggiatreno_api.date_format import format_carrier_date
from transit_live.adapters.viaggiatreno_api.departure_board_parser import DepartureBoardParser
from transit_live.adapters.viaggiatreno_api.http_client import ViaggiatrenoHttpClient
from transit_live.domain.models import DepartureBoardEntry, FetchResult
from transit_live.domain.ports.departure_board_repository import DepartureBoardRepository

logger = logging.getLogger(__name__)


class ViaggiatrenoDepartureRepository(DepartureBoardRepository):
    """Fetches live departure boards from ViaggiaTreno."""

    def __init__(self, http_client: ViaggiatrenoHttpClient, timezone: str = "Europe/Rome") -> None:
        """Initialize with the carrier HTTP client.

        Args:
            http_client: Client for the ViaggiaTreno endpoints.
            timezone: Timezone the carrier expects dates to be written in.
        """
        self._http_client = http_client
        self._timezone = timezone

    async def get_departure_board(
        self, station_code: str, date: datetime
    ) -> FetchResult[list[DepartureBoardEntry]]:
        """Get the trains leaving a station from the given instant on.

        Args:
            station_code: Carrier station code (e.g. "S01700").
            date: Instant the board should start at.

        Returns:
            ok with the entries, empty when no train is listed, failed when the
            board could not be fetched or was not a list.
        """
        response = await self._http_client.fetch_json(
            DEPARTURES_PATH, station_code, format_carrier_date(date, self._timezone)
        )
        if not response.is_ok:
            return FetchResult.failed_from(response, "departure board fetch failed")

        if response.value is None:
            return FetchResult.empty()
        if not isinstance(response.value, list):
            logger.warning(f"Unexpected departure board for {station_code}: {response.value!r:.200}")
            return FetchResult.failed("departure board is not a list", upstream=API_NAME)

        entries = DepartureBoardParser.parse_board(response.value)
        if not entries:
            return FetchResult.empty()
        return FetchResult.ok(entries)
