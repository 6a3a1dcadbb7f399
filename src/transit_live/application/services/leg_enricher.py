"""Attaches live carrier delays to the legs of an itinerary."""

import asyncio
import logging
from typing import TYPE_CHECKING

from transit_live.application.services.train_matcher import match_train
from transit_live.domain.models import FetchResult, Itinerary, Section

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from transit_live.domain.ports import DepartureBoardRepository, StationRepository

DEFAULT_CARRIER_AGENCY = "TRENITALIA"


class LegEnricher:
    """Best-effort enrichment of itinerary sections with live train delays.

    Only transit sections operated by the carrier are looked up. For each of
    them the departure place is resolved to station codes, the board of the
    best-ranked code is fetched for the leg's departure time, and the train
    leaving at exactly that instant provides the delay.

    A failed upstream call stops enrichment at that leg: earlier legs keep
    their delays, that leg and every later one are returned as they came in.
    """

    def __init__(
        self,
        station_repository: "StationRepository",
        departure_board_repository: "DepartureBoardRepository",
        carrier_agency_name: str = DEFAULT_CARRIER_AGENCY,
        concurrent: bool = True,
    ) -> None:
        """Initialize with the carrier repositories.

        Args:
            station_repository: Resolves station names to carrier codes.
            departure_board_repository: Fetches departure boards by code.
            carrier_agency_name: Agency name identifying carrier-operated legs.
            concurrent: Look up all legs at once instead of one after another.
        """
        self._station_repository = station_repository
        self._departure_board_repository = departure_board_repository
        self._carrier_agency_name = carrier_agency_name
        self._concurrent = concurrent

    async def enrich(self, itinerary: Itinerary) -> Itinerary:
        """Return the itinerary with delays set on every resolvable carrier leg."""
        sections = list(itinerary.sections)
        if not any(s.is_operated_by(self._carrier_agency_name) for s in sections):
            return itinerary

        if self._concurrent:
            results = list(await asyncio.gather(*(self._enrich_section(s) for s in sections)))
        else:
            results = []
            for section in sections:
                result = await self._enrich_section(section)
                results.append(result)
                if result.is_failed:
                    break

        enriched: list[Section] = []
        for index, result in enumerate(results):
            if result.is_failed or result.value is None:
                logger.warning(
                    f"Delay enrichment aborted at section {index} "
                    f"of {len(sections)}: {result.describe_error()}"
                )
                break
            enriched.append(result.value)

        enriched.extend(sections[len(enriched) :])
        return itinerary.with_sections(enriched)

    async def _enrich_section(self, section: Section) -> FetchResult[Section]:
        """Enrich one section, turning unexpected errors into a failed result."""
        try:
            return await self._lookup_delay(section)
        except Exception as e:
            logger.exception(f"Unexpected error enriching section at {section.departure_place_name}")
            return FetchResult.failed(f"{type(e).__name__}: {e}")

    async def _lookup_delay(self, section: Section) -> FetchResult[Section]:
        if not section.is_operated_by(self._carrier_agency_name):
            return FetchResult.ok(section)

        station_name = section.departure_place_name
        departure_time = section.departure_time
        if not station_name or departure_time is None:
            logger.debug("Carrier section without departure place or time, skipping")
            return FetchResult.ok(section)

        codes = await self._station_repository.resolve_station_codes(station_name)
        if codes.is_failed:
            return FetchResult.failed_from(codes)
        if not codes.value:
            logger.debug(f"No station code for '{station_name}'")
            return FetchResult.ok(section)

        # Only the best-ranked code is tried here, unlike the direct train lookup
        station_code = codes.value[0]
        board = await self._departure_board_repository.get_departure_board(
            station_code, departure_time
        )
        if board.is_failed:
            return FetchResult.failed_from(board)
        if not board.value:
            logger.debug(f"Empty departure board for {station_code}")
            return FetchResult.ok(section)

        train = match_train(board.value, departure_time)
        if train is None:
            logger.debug(
                f"No train leaving {station_code} at {departure_time.isoformat()}"
            )
            return FetchResult.ok(section)

        return FetchResult.ok(section.with_delay(train.delay_minutes))
