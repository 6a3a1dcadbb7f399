"""Tests for the JSON API handlers."""

from datetime import UTC, datetime
from typing import Any

import pytest
from conftest import FakeDepartureRepository, FakeRoutingProvider, FakeStationRepository
from starlette.testclient import TestClient

from transit_live.adapters.config import AppConfig
from transit_live.adapters.web import create_app
from transit_live.application.services import LegEnricher, RouteAggregator
from transit_live.domain.models import FetchResult


class StubRouteService:
    """Route service returning fixed payloads and recording calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def autosuggest(
        self, query: str, latitude: float = 0.0, longitude: float = 0.0
    ) -> list[dict[str, Any]]:
        self.calls.append(("autosuggest", (query, latitude, longitude)))
        return [{"id": "1", "title": query}]

    async def get_enriched_transit(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> Any:
        self.calls.append(("transit", (origin, destination, departure_time)))
        return {"routes": [{"sections": [{"type": "transit", "delay": 5}]}]}

    async def get_route_polylines(
        self, origin: str, destination: str, departure_time: str | None = None
    ) -> list[str]:
        self.calls.append(("route", (origin, destination, departure_time)))
        return ["poly-a", "poly-b"]


class StubTrainLookup:
    """Train lookup returning fixed payloads and recording calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def find_train_info(self, station_name: str, date: datetime) -> dict[str, Any]:
        self.calls.append(("info", (station_name, date)))
        return {"numeroTreno": 2019, "ritardo": 5}

    async def get_train_progress(self, station_name: str, train_number: str, date: datetime) -> Any:
        self.calls.append(("progress", (station_name, train_number, date)))
        return {"fermate": []}


@pytest.fixture
def route_service() -> StubRouteService:
    return StubRouteService()


@pytest.fixture
def train_lookup() -> StubTrainLookup:
    return StubTrainLookup()


@pytest.fixture
def client(route_service: StubRouteService, train_lookup: StubTrainLookup) -> TestClient:
    config = AppConfig(rate_limit_per_minute=1000)
    return TestClient(create_app(route_service, train_lookup, config))


def test_root_reports_status(client: TestClient) -> None:
    """Given the app, when calling /, then a liveness payload is returned."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": 200}


class TestAutosuggest:
    """Tests for /autosuggest."""

    def test_when_q_missing_then_error_body_with_200(self, client: TestClient) -> None:
        """Given no q, when searching, then an error body is returned with status 200."""
        response = client.get("/autosuggest")

        assert response.status_code == 200
        assert response.json() == {"error": "'q' parameter is mandatory"}

    def test_when_q_given_then_forwards_coordinates(
        self, client: TestClient, route_service: StubRouteService
    ) -> None:
        """Given q and coordinates, when searching, then they reach the service."""
        response = client.get("/autosuggest", params={"q": "torino", "lat": "45.1", "lon": "7.6"})

        assert response.json() == [{"id": "1", "title": "torino"}]
        assert route_service.calls == [("autosuggest", ("torino", 45.1, 7.6))]

    def test_when_coordinates_invalid_then_defaults_to_zero(
        self, client: TestClient, route_service: StubRouteService
    ) -> None:
        """Given unparseable coordinates, when searching, then 0,0 is used."""
        client.get("/autosuggest", params={"q": "torino", "lat": "north"})

        assert route_service.calls == [("autosuggest", ("torino", 0.0, 0.0))]


class TestTransit:
    """Tests for /transit and /route."""

    def test_when_destination_missing_then_origin_error_is_reported(self, client: TestClient) -> None:
        """Given only origin, when routing, then the generic 'origin' error is returned."""
        response = client.get("/transit", params={"origin": "A"})

        assert response.status_code == 200
        assert response.json() == {"error": "'origin' parameter is mandatory"}

    def test_when_origin_missing_then_origin_error_is_reported(self, client: TestClient) -> None:
        """Given only destination, when routing, then the 'origin' error is returned."""
        response = client.get("/transit", params={"destination": "B"})

        assert response.json() == {"error": "'origin' parameter is mandatory"}

    def test_when_parameters_given_then_returns_enriched_payload(
        self, client: TestClient, route_service: StubRouteService
    ) -> None:
        """Given origin, destination and time, when routing, then the service payload is returned."""
        response = client.get(
            "/transit",
            params={"origin": "A", "destination": "B", "departureTime": "2023-10-19T09:00:00"},
        )

        assert response.json()["routes"][0]["sections"][0]["delay"] == 5
        assert route_service.calls == [("transit", ("A", "B", "2023-10-19T09:00:00"))]

    def test_route_returns_polylines(
        self, client: TestClient, route_service: StubRouteService
    ) -> None:
        """Given origin and destination, when asking for shapes, then polylines are returned."""
        response = client.get("/route", params={"origin": "A", "destination": "B"})

        assert response.json() == ["poly-a", "poly-b"]
        assert route_service.calls == [("route", ("A", "B", None))]

    def test_route_reports_missing_destination(self, client: TestClient) -> None:
        """Given no destination, when asking for shapes, then the 'origin' error is returned."""
        response = client.get("/route", params={"origin": "A"})

        assert response.json() == {"error": "'origin' parameter is mandatory"}


class TestTrainEndpoints:
    """Tests for /trainInfos and /trainRoute."""

    def test_train_infos_parses_epoch_millis(
        self, client: TestClient, train_lookup: StubTrainLookup
    ) -> None:
        """Given a date in epoch ms, when looking up, then the instant reaches the service."""
        response = client.get("/trainInfos", params={"station": "Avio", "date": "1697700600000"})

        assert response.json() == {"numeroTreno": 2019, "ritardo": 5}
        assert train_lookup.calls == [
            ("info", ("Avio", datetime(2023, 10, 19, 7, 30, tzinfo=UTC)))
        ]

    def test_train_infos_reads_naive_dates_in_carrier_zone(
        self, client: TestClient, train_lookup: StubTrainLookup
    ) -> None:
        """Given a naive ISO date, when looking up, then it is read as Rome time."""
        client.get("/trainInfos", params={"station": "Avio", "date": "2023-10-19T09:30:00"})

        _, (_, date) = train_lookup.calls[0]
        assert date.astimezone(UTC) == datetime(2023, 10, 19, 7, 30, tzinfo=UTC)

    def test_train_infos_requires_station(self, client: TestClient) -> None:
        """Given no station, when looking up, then an error body is returned."""
        response = client.get("/trainInfos")

        assert response.json() == {"error": "'station' parameter is mandatory"}

    def test_train_route_passes_progress_through(
        self, client: TestClient, train_lookup: StubTrainLookup
    ) -> None:
        """Given station and train, when asking for progress, then the payload is returned."""
        response = client.get(
            "/trainRoute", params={"station": "Avio", "train": "2019", "date": "1697700600000"}
        )

        assert response.json() == {"fermate": []}
        assert train_lookup.calls[0][1][:2] == ("Avio", "2019")

    def test_train_route_requires_train(self, client: TestClient) -> None:
        """Given no train number, when asking for progress, then an error body is returned."""
        response = client.get("/trainRoute", params={"station": "Avio"})

        assert response.json() == {"error": "'train' parameter is mandatory"}


def test_cors_allows_any_origin(client: TestClient) -> None:
    """Given a browser origin, when calling the API, then CORS headers allow it."""
    response = client.get("/", headers={"Origin": "https://example.org"})

    assert response.headers["access-control-allow-origin"] == "*"


class TestMalformedUpstreamPayloads:
    """Routing endpoints answer 200 whatever shape the routing provider returns."""

    @staticmethod
    def client_for(provider: FakeRoutingProvider) -> TestClient:
        enricher = LegEnricher(FakeStationRepository({}), FakeDepartureRepository({}))
        app = create_app(
            RouteAggregator(provider, enricher),
            StubTrainLookup(),
            AppConfig(rate_limit_per_minute=1000),
        )
        return TestClient(app)

    def test_transit_passes_string_departure_through(self) -> None:
        """Given a section whose departure is a string, when routing, then the payload is echoed."""
        payload = {"routes": [{"sections": [{"type": "pedestrian", "departure": "x"}]}]}
        client = self.client_for(FakeRoutingProvider(transit=FetchResult.ok(payload)))

        response = client.get("/transit", params={"origin": "a", "destination": "b"})

        assert response.status_code == 200
        assert response.json() == payload

    def test_route_skips_string_sections(self) -> None:
        """Given sections that are strings, when fetching polylines, then [] is returned."""
        payload = {"routes": [{"sections": ["x"]}]}
        client = self.client_for(FakeRoutingProvider(shapes=FetchResult.ok(payload)))

        response = client.get("/route", params={"origin": "a", "destination": "b"})

        assert response.status_code == 200
        assert response.json() == []

    def test_autosuggest_skips_string_addresses(self) -> None:
        """Given an item whose address is a string, when searching, then it is dropped."""
        payload = {"items": [{"id": "1", "title": "Avio", "address": "Avio"}]}
        client = self.client_for(FakeRoutingProvider(suggestions=FetchResult.ok(payload)))

        response = client.get("/autosuggest", params={"q": "avio"})

        assert response.status_code == 200
        assert response.json() == []
