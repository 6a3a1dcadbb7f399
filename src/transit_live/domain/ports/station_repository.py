"""Station repository port."""

from typing import Protocol

from transit_live.domain.models.fetch_result import FetchResult


class StationRepository(Protocol):
    """Port for resolving station names to carrier station codes."""

    async def resolve_station_codes(self, station_name: str) -> FetchResult[list[str]]:
        """Resolve a station name to candidate codes, best match first."""
        ...
