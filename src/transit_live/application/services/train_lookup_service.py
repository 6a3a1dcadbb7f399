"""Direct station and train lookups against the carrier."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from transit_live.application.services.train_matcher import match_train

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from transit_live.domain.ports import (
        DepartureBoardRepository,
        StationRepository,
        TrainProgressRepository,
    )


class TrainLookupService:
    """Looks up trains by station name without an itinerary."""

    def __init__(
        self,
        station_repository: "StationRepository",
        departure_board_repository: "DepartureBoardRepository",
        train_progress_repository: "TrainProgressRepository",
    ) -> None:
        self._station_repository = station_repository
        self._departure_board_repository = departure_board_repository
        self._train_progress_repository = train_progress_repository

    async def find_train_info(self, station_name: str, date: datetime) -> dict[str, Any]:
        """Find the train leaving a station at exactly ``date``.

        Every resolved station code is tried in ranking order until one has a
        non-empty departure board; that board alone is searched.

        Args:
            station_name: Human-readable station name.
            date: Aware datetime of the scheduled departure.

        Returns:
            The carrier's entry for the matching train, or an empty dict.
        """
        codes = await self._station_repository.resolve_station_codes(station_name)
        if not codes.value:
            return {}

        for station_code in codes.value:
            board = await self._departure_board_repository.get_departure_board(
                station_code, date
            )
            if board.is_failed:
                logger.warning(f"Skipping station {station_code}: {board.describe_error()}")
                continue
            if not board.value:
                continue

            train = match_train(board.value, date)
            return train.to_dict() if train else {}

        return {}

    async def get_train_progress(self, station_name: str, train_number: str, date: datetime) -> Any:
        """Raw progress of a train departing from the given station."""
        codes = await self._station_repository.resolve_station_codes(station_name)
        if not codes.value:
            return {}

        progress = await self._train_progress_repository.get_train_progress(
            codes.value[0], train_number, date
        )
        if not progress.is_ok:
            return {}
        return progress.value
