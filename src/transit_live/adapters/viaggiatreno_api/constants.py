"""Constants for the ViaggiaTreno adapter.

ViaggiaTreno is Trenitalia's public real-time information site. Its REST
endpoints are unofficial: no documentation, no authentication, and a mix of
plain text and JSON responses.
"""

# Path segments below the configured base URL
AUTOCOMPLETE_STATION_PATH = "autocompletaStazione"  # text: "NAME|CODE" per line
DEPARTURES_PATH = "partenze"  # JSON: /partenze/{code}/{date}
TRAIN_PROGRESS_PATH = "andamentoTreno"  # JSON: /andamentoTreno/{code}/{train}/{epoch ms}

# Separator between station name and code in autocomplete lines
STATION_FIELD_SEPARATOR = "|"

# Departure board field names
FIELD_SCHEDULED_DEPARTURE = "orarioPartenza"
FIELD_TRAIN_NUMBER = "numeroTreno"
FIELD_DELAY = "ritardo"

API_NAME = "viaggiatreno"
