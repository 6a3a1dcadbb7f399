"""Main entry point for the transit-live API."""

import asyncio
import logging
import sys

import aiohttp
from starlette.applications import Starlette

from transit_live.adapters.config import AppConfig
from transit_live.adapters.here_api import HereRoutingProvider
from transit_live.adapters.viaggiatreno_api import (
    ViaggiatrenoDepartureRepository,
    ViaggiatrenoHttpClient,
    ViaggiatrenoStationRepository,
    ViaggiatrenoTrainProgressRepository,
)
from transit_live.adapters.web import create_app
from transit_live.application.services import LegEnricher, RouteAggregator, TrainLookupService

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_app(config: AppConfig, session: aiohttp.ClientSession | None) -> Starlette:
    """Wire adapters and services into the web application."""
    carrier_client = ViaggiatrenoHttpClient(
        session=session,
        base_url=config.viaggiatreno_base_url,
        timeout_seconds=config.upstream_timeout_seconds,
        min_delay_seconds=config.carrier_min_delay_seconds,
    )
    station_repo = ViaggiatrenoStationRepository(carrier_client)
    departure_repo = ViaggiatrenoDepartureRepository(carrier_client, config.carrier_timezone)
    progress_repo = ViaggiatrenoTrainProgressRepository(carrier_client, config.carrier_timezone)

    routing_provider = HereRoutingProvider(
        session=session,
        default_params=config.here_params(),
        autosuggest_url=config.here_autosuggest_url,
        transit_url=config.here_transit_url,
        timeout_seconds=config.upstream_timeout_seconds,
    )

    leg_enricher = LegEnricher(
        station_repo,
        departure_repo,
        carrier_agency_name=config.carrier_agency_name,
        concurrent=config.enrich_legs_concurrently,
    )
    route_service = RouteAggregator(routing_provider, leg_enricher)
    train_lookup = TrainLookupService(station_repo, departure_repo, progress_repo)

    return create_app(route_service, train_lookup, config)


async def main() -> None:
    """Main application entry point."""
    import uvicorn

    config = AppConfig()
    if not config.here_api_key:
        logger.warning("HERE_API_KEY is not set, place search and routing will fail")

    async with aiohttp.ClientSession() as session:
        app = build_app(config, session)
        server = uvicorn.Server(
            uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
        )
        logger.info(f"Listening on {config.host}:{config.port}")
        await server.serve()


def run() -> None:
    """Console script entry point."""
    configure_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
