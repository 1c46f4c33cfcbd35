"""Configuration adapters."""

from uk_rail_departures.adapters.config.app_config import AppConfig
from uk_rail_departures.adapters.config.widget_configuration_loader import (
    WidgetConfigurationLoader,
)

__all__ = ["AppConfig", "WidgetConfigurationLoader"]
