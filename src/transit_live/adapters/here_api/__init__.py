"""HERE API adapters for place search and transit routing."""

from transit_live.adapters.here_api.here_routing_provider import HereRoutingProvider

__all__ = ["HereRoutingProvider"]
