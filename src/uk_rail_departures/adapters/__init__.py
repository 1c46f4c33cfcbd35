"""Adapters layer - external system integrations."""

from uk_rail_departures.adapters.config import AppConfig, WidgetConfigurationLoader
from uk_rail_departures.adapters.darwin_api import (
    DepartureParser,
    HuxleyDepartureBoardSource,
)

__all__ = [
    "AppConfig",
    "DepartureParser",
    "HuxleyDepartureBoardSource",
    "WidgetConfigurationLoader",
]
