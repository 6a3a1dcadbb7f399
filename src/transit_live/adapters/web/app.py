"""Starlette JSON API.

Every handler answers 200. Missing mandatory query parameters are reported as
``{"error": "..."}`` bodies, upstream problems as empty results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from transit_live.adapters.config import AppConfig
from transit_live.adapters.web.query_params import parse_date, parse_float
from transit_live.adapters.web.rate_limit_middleware import RateLimitMiddleware

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from starlette.requests import Request

    from transit_live.domain.ports import RouteService, TrainLookup


def mandatory_parameter_error(name: str) -> JSONResponse:
    return JSONResponse({"error": f"'{name}' parameter is mandatory"})


class TransitApi:
    """Request handlers of the JSON API."""

    def __init__(
        self, route_service: RouteService, train_lookup: TrainLookup, config: AppConfig
    ) -> None:
        """Initialize the handlers.

        Args:
            route_service: Place search and transit routing use cases.
            train_lookup: Direct train lookups.
            config: Application configuration.
        """
        self.route_service = route_service
        self.train_lookup = train_lookup
        self.config = config
        self._carrier_zone = ZoneInfo(config.carrier_timezone)

    async def health(self, _request: Request) -> JSONResponse:
        return JSONResponse({"status": 200})

    async def autosuggest(self, request: Request) -> JSONResponse:
        params = request.query_params
        query = params.get("q")
        if not query:
            return mandatory_parameter_error("q")

        suggestions = await self.route_service.autosuggest(
            query, parse_float(params.get("lat")), parse_float(params.get("lon"))
        )
        return JSONResponse(suggestions)

    def _missing_route_endpoints(self, request: Request) -> JSONResponse | None:
        # Both endpoints name 'origin' in the message, whichever one is missing
        params = request.query_params
        if not params.get("origin") or not params.get("destination"):
            return mandatory_parameter_error("origin")
        return None

    async def transit(self, request: Request) -> JSONResponse:
        error = self._missing_route_endpoints(request)
        if error:
            return error

        params = request.query_params
        payload = await self.route_service.get_enriched_transit(
            params["origin"], params["destination"], params.get("departureTime")
        )
        return JSONResponse(payload)

    async def route(self, request: Request) -> JSONResponse:
        error = self._missing_route_endpoints(request)
        if error:
            return error

        params = request.query_params
        polylines = await self.route_service.get_route_polylines(
            params["origin"], params["destination"], params.get("departureTime")
        )
        return JSONResponse(polylines)

    async def train_infos(self, request: Request) -> JSONResponse:
        params = request.query_params
        station = params.get("station")
        if not station:
            return mandatory_parameter_error("station")

        date = parse_date(params.get("date"), self._carrier_zone)
        return JSONResponse(await self.train_lookup.find_train_info(station, date))

    async def train_route(self, request: Request) -> JSONResponse:
        params = request.query_params
        station = params.get("station")
        if not station:
            return mandatory_parameter_error("station")
        train = params.get("train")
        if not train:
            return mandatory_parameter_error("train")

        date = parse_date(params.get("date"), self._carrier_zone)
        progress: Any = await self.train_lookup.get_train_progress(station, train, date)
        return JSONResponse(progress)

    def routes(self) -> Sequence[Route]:
        return [
            Route("/", self.health, methods=["GET"]),
            Route("/autosuggest", self.autosuggest, methods=["GET"]),
            Route("/transit", self.transit, methods=["GET"]),
            Route("/route", self.route, methods=["GET"]),
            Route("/trainInfos", self.train_infos, methods=["GET"]),
            Route("/trainRoute", self.train_route, methods=["GET"]),
        ]


def create_app(
    route_service: RouteService, train_lookup: TrainLookup, config: AppConfig
) -> Starlette:
    """Build the Starlette application with CORS and rate limiting."""
    api = TransitApi(route_service, train_lookup, config)
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=config.cors_allow_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        ),
        Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute),
    ]
    logger.info(f"Serving {len(api.routes())} routes")
    return Starlette(routes=list(api.routes()), middleware=middleware)
