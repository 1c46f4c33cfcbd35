"""Darwin (National Rail) gateway adapter."""

from uk_rail_departures.adapters.darwin_api.departure_parser import DepartureParser
from uk_rail_departures.adapters.darwin_api.huxley_departure_board_source import (
    DarwinApiError,
    HuxleyDepartureBoardSource,
    create_source_factory,
)

__all__ = [
    "DarwinApiError",
    "DepartureParser",
    "HuxleyDepartureBoardSource",
    "create_source_factory",
]
