"""Application services (use cases) for transit enrichment."""

from transit_live.application.services.leg_enricher import LegEnricher
from transit_live.application.services.route_aggregator import RouteAggregator
from transit_live.application.services.train_lookup_service import TrainLookupService
from transit_live.application.services.train_matcher import match_train

__all__ = ["LegEnricher", "RouteAggregator", "TrainLookupService", "match_train"]
