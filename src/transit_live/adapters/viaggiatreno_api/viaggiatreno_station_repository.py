"""ViaggiaTreno station repository adapter."""

import logging

from transit_live.adapters.viaggiatreno_api.constants import AUTOCOMPLETE_STATION_PATH
from transit_live.adapters.viaggiatreno_api.http_client import ViaggiatrenoHttpClient
from transit_live.adapters.viaggiatreno_api.station_code_parser import parse_station_codes
from transit_live.domain.models import FetchResult
from transit_live.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class ViaggiatrenoStationRepository(StationRepository):
    """Resolves station names through the carrier's autocomplete endpoint."""

    def __init__(self, http_client: ViaggiatrenoHttpClient) -> None:
        self._http_client = http_client

    async def resolve_station_codes(self, station_name: str) -> FetchResult[list[str]]:
        """Resolve a station name to carrier codes, best match first.

        Args:
            station_name: Station name as shown to travellers (e.g. "Torino Porta Nuova").

        Returns:
            ok with the codes, empty if the carrier knows no such station,
            failed if the carrier could not be queried.
        """
        response = await self._http_client.fetch_text(AUTOCOMPLETE_STATION_PATH, station_name)
        if not response.is_ok:
            return FetchResult.failed_from(response, "station lookup failed")

        codes = parse_station_codes(response.value or "")
        if not codes:
            logger.debug(f"No station matches '{station_name}'")
            return FetchResult.empty()

        return FetchResult.ok(codes)
