"""Tests for application wiring."""

from unittest.mock import MagicMock

from starlette.testclient import TestClient

from transit_live.adapters.config import AppConfig
from transit_live.main import build_app


def test_build_app_serves_health_check() -> None:
    """Given a configuration, when wiring the app, then the liveness route answers."""
    app = build_app(AppConfig(_env_file=None), session=MagicMock())

    response = TestClient(app).get("/")

    assert response.json() == {"status": 200}


def test_build_app_without_session_degrades_to_empty_results() -> None:
    """Given no HTTP session, when routing, then upstream failures yield empty results."""
    app = build_app(AppConfig(_env_file=None), session=None)
    client = TestClient(app)

    assert client.get("/route", params={"origin": "a", "destination": "b"}).json() == []
    assert client.get("/transit", params={"origin": "a", "destination": "b"}).json() == []
    assert client.get("/trainInfos", params={"station": "Avio"}).json() == {}
