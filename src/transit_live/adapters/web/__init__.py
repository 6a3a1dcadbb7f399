"""Web adapter exposing the JSON API."""

from transit_live.adapters.web.app import TransitApi, create_app

__all__ = ["TransitApi", "create_app"]
