"""Rendering of dates in the textual form the departure board endpoint expects.

The endpoint parses the output of JavaScript's ``Date.prototype.toString()``,
for example ``Sun Oct 19 2025 10:33:45 GMT+0200 (Ora legale dell’Europa centrale)``.
A date in any other shape is not rejected: the board silently comes back empty
or for the wrong day, so the format is reproduced exactly here.
"""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

# JavaScript always uses English abbreviations, whatever the process locale
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Long zone names as printed by an Italian-locale Node.js process
CENTRAL_EUROPE_SUMMER = "Ora legale dell’Europa centrale"
CENTRAL_EUROPE_STANDARD = "Ora standard dell’Europa centrale"
CENTRAL_EUROPE_ABBREVIATIONS = {"CEST": CENTRAL_EUROPE_SUMMER, "CET": CENTRAL_EUROPE_STANDARD}


def _gmt_offset(local: datetime) -> str:
    offset = local.utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "+" if total_minutes >= 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"GMT{sign}{hours:02d}{minutes:02d}"


def _zone_label(local: datetime) -> str:
    abbreviation = local.tzname() or ""
    return CENTRAL_EUROPE_ABBREVIATIONS.get(abbreviation, abbreviation)


def format_carrier_date(instant: datetime, timezone: str | tzinfo = "Europe/Rome") -> str:
    """Render an instant like JavaScript's ``Date.toString()`` in the carrier's zone.

    Args:
        instant: Datetime to render. Naive values are read as wall time in
            the target zone.
        timezone: IANA zone name or tzinfo of the carrier's servers.

    Returns:
        The date string, e.g. ``Thu Oct 19 2023 09:30:00 GMT+0200 (Ora legale dell’Europa centrale)``.
    """
    zone = ZoneInfo(timezone) if isinstance(timezone, str) else timezone
    local = instant.astimezone(zone) if instant.tzinfo else instant.replace(tzinfo=zone)

    return (
        f"{WEEKDAYS[local.weekday()]} {MONTHS[local.month - 1]} {local.day:02d} {local.year:04d} "
        f"{local.hour:02d}:{local.minute:02d}:{local.second:02d} "
        f"{_gmt_offset(local)} ({_zone_label(local)})"
    )
