"""Protocols for widget components."""

from uk_rail_departures.domain.contracts.widget_poller import WidgetPollerProtocol
from uk_rail_departures.domain.contracts.widget_renderer import WidgetRendererProtocol

__all__ = ["WidgetPollerProtocol", "WidgetRendererProtocol"]
