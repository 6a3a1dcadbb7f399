"""Parser for the station autocomplete text format."""

from transit_live.adapters.viaggiatreno_api.constants import STATION_FIELD_SEPARATOR


def parse_station_codes(text: str) -> list[str]:
    """Extract station codes from ``NAME|CODE`` lines, keeping the carrier's order.

    Lines without a code (blank lines, stray text) are skipped.

    Args:
        text: Raw autocomplete response body.

    Returns:
        Station codes, best match first. Empty if no line carries a code.
    """
    codes = []
    for line in text.splitlines():
        fields = line.split(STATION_FIELD_SEPARATOR)
        if len(fields) < 2:
            continue
        code = fields[1].strip()
        if code:
            codes.append(code)
    return codes
