"""Web adapters."""

from .html_renderer import WidgetHtmlRenderer
from .starlette_app import create_app, widget_payload
from .web_adapter import StarletteWebAdapter

__all__ = ["StarletteWebAdapter", "WidgetHtmlRenderer", "create_app", "widget_payload"]
