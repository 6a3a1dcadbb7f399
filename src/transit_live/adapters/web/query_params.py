"""Parsing of optional query parameters."""

from datetime import UTC, datetime, tzinfo


def parse_float(value: str | None, default: float = 0.0) -> float:
    """Parse a coordinate, falling back to ``default`` for missing or invalid input."""
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def parse_date(value: str | None, naive_tz: tzinfo = UTC) -> datetime:
    """Parse an ISO 8601 instant or epoch milliseconds.

    Missing or unreadable values mean "now". Naive ISO values are read in
    ``naive_tz``.
    """
    if value:
        value = value.strip()
        if value.lstrip("-").isdigit():
            return datetime.fromtimestamp(int(value) / 1000, tz=UTC)
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=naive_tz)
    return datetime.now(UTC)
