"""Place suggestion domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlaceSuggestion:
    """A place returned by the autosuggest search."""

    id: str
    type: str
    title: str
    address: str
    latitude: float
    longitude: float
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "address": self.address,
            "position": {"latitude": self.latitude, "longitude": self.longitude},
            "category": self.category,
        }
