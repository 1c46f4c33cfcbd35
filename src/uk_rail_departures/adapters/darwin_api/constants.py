"""Constants for the Darwin gateway adapter.

Talks to a Huxley2-compatible JSON gateway in front of the National Rail
OpenLDBWS service. Documentation: https://huxley2.azurewebsites.net
"""

DEFAULT_BASE_URL = "https://huxley2.azurewebsites.net"

# GET /departures/{crs}/{rows} and /departures/{crs}/to/{filterCrs}/{rows}
DEPARTURES_PATH = "/departures/{crs}/{rows}"
DEPARTURES_TO_PATH = "/departures/{crs}/to/{filter_crs}/{rows}"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# OpenLDBWS returns at most this many services per board
MAX_ROWS = 150

TRAIN_SERVICES_KEY = "trainServices"
