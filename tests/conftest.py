"""Shared fixtures: fake carrier repositories and mocked aiohttp sessions."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from transit_live.adapters.api_rate_limiter import ApiRateLimiter
from transit_live.domain.models import DepartureBoardEntry, FetchResult


class FakeRoutingProvider:
    """Routing provider returning canned results and recording calls."""

    def __init__(
        self,
        suggestions: FetchResult[Any] | None = None,
        transit: FetchResult[Any] | None = None,
        shapes: FetchResult[Any] | None = None,
    ) -> None:
        self.suggestions = suggestions or FetchResult.empty()
        self.transit = transit or FetchResult.empty()
        self.shapes = shapes or FetchResult.empty()
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def autosuggest(self, query: str, latitude: float, longitude: float) -> FetchResult[Any]:
        self.calls.append(("autosuggest", (query, latitude, longitude)))
        return self.suggestions

    async def transit_routes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        self.calls.append(("transit", (origin, destination, departure_time)))
        return self.transit

    async def route_shapes(
        self, origin: str, destination: str, departure_time: str
    ) -> FetchResult[Any]:
        self.calls.append(("shapes", (origin, destination, departure_time)))
        return self.shapes


class FakeStationRepository:
    """Station repository returning canned results per station name."""

    def __init__(self, results: dict[str, FetchResult[list[str]]]) -> None:
        self.results = results
        self.calls: list[str] = []

    async def resolve_station_codes(self, station_name: str) -> FetchResult[list[str]]:
        self.calls.append(station_name)
        return self.results.get(station_name, FetchResult.empty())


class FakeDepartureRepository:
    """Departure repository returning canned boards per station code."""

    def __init__(self, boards: dict[str, FetchResult[list[DepartureBoardEntry]]]) -> None:
        self.boards = boards
        self.calls: list[tuple[str, datetime]] = []

    async def get_departure_board(
        self, station_code: str, date: datetime
    ) -> FetchResult[list[DepartureBoardEntry]]:
        self.calls.append((station_code, date))
        return self.boards.get(station_code, FetchResult.empty())


class FakeTrainProgressRepository:
    """Train progress repository returning one canned result."""

    def __init__(self, result: FetchResult[Any]) -> None:
        self.result = result
        self.calls: list[tuple[str, str, datetime]] = []

    async def get_train_progress(
        self, origin_code: str, train_number: str, date: datetime
    ) -> FetchResult[Any]:
        self.calls.append((origin_code, train_number, date))
        return self.result


def board_entry(scheduled_ms: int, delay: int | None, train: str = "2019") -> DepartureBoardEntry:
    raw = {"orarioPartenza": scheduled_ms, "numeroTreno": int(train), "ritardo": delay}
    return DepartureBoardEntry(
        scheduled_departure_ms=scheduled_ms, train_number=train, delay_minutes=delay, raw=raw
    )


def make_response(status: int = 200, text: str = "", json_data: Any = None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.headers = {}
    response.text = AsyncMock(return_value=text)
    response.json = AsyncMock(return_value=json_data)
    return response


def make_session(*responses: MagicMock) -> MagicMock:
    """aiohttp-like session whose successive ``get`` calls yield ``responses``."""
    contexts = []
    for response in responses:
        context = MagicMock()
        context.__aenter__.return_value = response
        context.__aexit__.return_value = False
        contexts.append(context)

    session = MagicMock()
    session.get.side_effect = contexts
    return session


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Each test starts without shared rate limiters."""
    ApiRateLimiter.reset()
