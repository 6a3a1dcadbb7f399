"""Itinerary and section domain models.

Both wrap the routing provider's JSON objects: only the fields the enrichment
pipeline reads are modelled, everything else is carried in ``raw`` and written
back unchanged by ``to_dict``.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

TRANSIT_KIND = "transit"


def parse_instant(value: Any) -> datetime | None:
    """Parse an ISO 8601 instant, returning None for anything unusable."""
    if not isinstance(value, str) or not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    # Naive instants cannot be compared to the carrier's epoch timestamps
    return parsed if parsed.tzinfo else None


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Section:
    """One leg of an itinerary.

    ``delay_reported`` tells a leg whose train was found on the board apart from
    one that was never matched; a matched but untracked train reports a null delay.
    """

    kind: str
    agency_name: str | None
    departure_place_name: str | None
    departure_latitude: float | None
    departure_longitude: float | None
    departure_time: datetime | None
    delay: int | None = None
    delay_reported: bool = False
    raw: Any = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> "Section":
        # Anything that is not an object is carried through untouched
        section = _as_dict(data)
        departure = _as_dict(section.get("departure"))
        place = _as_dict(departure.get("place"))
        location = _as_dict(place.get("location"))

        return cls(
            kind=str(section.get("type", "")),
            agency_name=_as_dict(section.get("agency")).get("name"),
            departure_place_name=place.get("name"),
            departure_latitude=location.get("lat"),
            departure_longitude=location.get("lng"),
            departure_time=parse_instant(departure.get("time")),
            delay=section.get("delay"),
            delay_reported="delay" in section,
            raw=data,
        )

    def is_operated_by(self, agency_name: str) -> bool:
        """Whether this is a transit leg run by the given agency."""
        return self.kind == TRANSIT_KIND and self.agency_name == agency_name

    def with_delay(self, delay: int | None) -> "Section":
        return replace(self, delay=delay, delay_reported=True)

    def to_dict(self) -> Any:
        if not isinstance(self.raw, dict):
            return self.raw
        data = dict(self.raw)
        if self.delay_reported:
            data["delay"] = self.delay
        return data


@dataclass(frozen=True)
class Itinerary:
    """An ordered sequence of sections, built from one upstream route."""

    sections: tuple[Section, ...]
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Itinerary":
        sections = data.get("sections")
        if not isinstance(sections, list):
            sections = []
        return cls(sections=tuple(Section.from_dict(s) for s in sections), raw=data)

    def with_sections(self, sections: list[Section]) -> "Itinerary":
        return replace(self, sections=tuple(sections))

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.raw)
        if isinstance(data.get("sections"), list):
            data["sections"] = [section.to_dict() for section in self.sections]
        return data
