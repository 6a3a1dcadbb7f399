"""Constants for the HERE API adapter.

Autosuggest: https://www.here.com/docs/bundle/geocoding-and-search-api-developer-guide/
Public transit routing v8: https://www.here.com/docs/bundle/public-transit-api-developer-guide/

Both APIs authenticate with an ``apikey`` query parameter.
"""

DEFAULT_AUTOSUGGEST_URL = "https://autosuggest.search.hereapi.com/v1/autosuggest"
DEFAULT_TRANSIT_URL = "https://transit.router.hereapi.com/v8/routes"

# Values of the transit router's "return" parameter
RETURN_INTERMEDIATE = "intermediate"
RETURN_POLYLINE = "polyline"

API_NAME = "here"
