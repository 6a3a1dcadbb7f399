"""Matching of a scheduled itinerary leg to a train on a departure board."""

from collections.abc import Iterable
from datetime import datetime

from transit_live.domain.models import DepartureBoardEntry


def to_epoch_ms(instant: datetime) -> int:
    """Convert an aware datetime to epoch milliseconds."""
    return int(round(instant.timestamp() * 1000))


def match_train(
    board: Iterable[DepartureBoardEntry], scheduled_departure: datetime
) -> DepartureBoardEntry | None:
    """Return the first entry scheduled to leave at exactly ``scheduled_departure``.

    The scheduled departure instant is the only join key: the routing provider
    does not expose the carrier's train number at this point.

    Args:
        board: Departure board entries in carrier order.
        scheduled_departure: Aware datetime of the leg's scheduled departure.

    Returns:
        The matching entry, or None when no train leaves at that instant.
    """
    target_ms = to_epoch_ms(scheduled_departure)
    for entry in board:
        if entry.scheduled_departure_ms == target_ms:
            return entry
    return None
