"""Departure board repository port."""

from datetime import datetime
from typing import Protocol

from transit_live.domain.models.departure_board_entry import DepartureBoardEntry
from transit_live.domain.models.fetch_result import FetchResult


class DepartureBoardRepository(Protocol):
    """Port for retrieving a station's departure board."""

    async def get_departure_board(
        self, station_code: str, date: datetime
    ) -> FetchResult[list[DepartureBoardEntry]]:
        """Get the trains leaving a station around the given instant."""
        ...
