"""Departure board entry domain model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DepartureBoardEntry:
    """One train scheduled to leave a station, as reported by the carrier."""

    scheduled_departure_ms: int
    train_number: str
    delay_minutes: int | None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Carrier payload for this entry, as returned to API clients."""
        if self.raw:
            return dict(self.raw)
        return {
            "orarioPartenza": self.scheduled_departure_ms,
            "numeroTreno": self.train_number,
            "ritardo": self.delay_minutes,
        }
