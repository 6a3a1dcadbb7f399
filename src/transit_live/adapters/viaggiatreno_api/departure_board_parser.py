"""Parser for ViaggiaTreno departure board responses."""

import logging
from typing import Any

from transit_live.adapters.viaggiatreno_api.constants import (
    FIELD_DELAY,
    FIELD_SCHEDULED_DEPARTURE,
    FIELD_TRAIN_NUMBER,
)
from transit_live.domain.models import DepartureBoardEntry

logger = logging.getLogger(__name__)


class DepartureBoardParser:
    """Parses ``partenze`` responses into DepartureBoardEntry objects."""

    @staticmethod
    def parse_board(entries: list[Any]) -> list[DepartureBoardEntry]:
        """Parse a departure board, skipping entries without a scheduled departure.

        Args:
            entries: JSON array returned by the departures endpoint.

        Returns:
            Entries in carrier order.
        """
        results = []
        for raw in entries:
            entry = DepartureBoardParser._parse_entry(raw)
            if entry:
                results.append(entry)
        return results

    @staticmethod
    def _parse_entry(raw: Any) -> DepartureBoardEntry | None:
        if not isinstance(raw, dict):
            return None

        scheduled = DepartureBoardParser._parse_int(raw.get(FIELD_SCHEDULED_DEPARTURE))
        if scheduled is None:
            logger.warning(f"Skipping departure without {FIELD_SCHEDULED_DEPARTURE}: {raw}")
            return None

        return DepartureBoardEntry(
            scheduled_departure_ms=scheduled,
            train_number=str(raw.get(FIELD_TRAIN_NUMBER, "")),
            delay_minutes=DepartureBoardParser._parse_int(raw.get(FIELD_DELAY)),
            raw=raw,
        )

    @staticmethod
    def _parse_int(value: Any) -> int | None:
        # bool is an int subclass but never a valid timestamp or delay
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
