"""Widget adapters: presentation component, fetch helper and their wiring."""

from uk_rail_departures.adapters.widget.fetch_helper import FetchHelper, HelperContext
from uk_rail_departures.adapters.widget.rail_departure_widget import RailDepartureWidget
from uk_rail_departures.adapters.widget.view_builder import WidgetViewBuilder
from uk_rail_departures.adapters.widget.widget_runtime import WidgetRuntime

__all__ = [
    "FetchHelper",
    "HelperContext",
    "RailDepartureWidget",
    "WidgetRuntime",
    "WidgetViewBuilder",
]
