"""Starlette application exposing widget boards as HTML and JSON."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from uk_rail_departures.adapters.web.html_renderer import WidgetHtmlRenderer

if TYPE_CHECKING:
    from starlette.requests import Request

    from uk_rail_departures.adapters.config import AppConfig
    from uk_rail_departures.adapters.widget import RailDepartureWidget, WidgetRuntime

logger = logging.getLogger(__name__)


def widget_payload(widget: RailDepartureWidget) -> dict[str, Any]:
    """JSON body describing a widget's current state."""
    return {
        "id": widget.identifier,
        "header": widget.config.header,
        "loaded": widget.loaded,
        "last_update": widget.last_update.isoformat() if widget.last_update else None,
        "rows": [row.to_dict() for row in widget.trains],
    }


def create_app(
    runtime: WidgetRuntime,
    config: AppConfig,
    renderer: WidgetHtmlRenderer | None = None,
) -> Starlette:
    """Build the ASGI app serving every widget of a runtime."""
    renderer = renderer or WidgetHtmlRenderer()

    async def index(_request: Request) -> Response:
        views = [widget.get_dom() for widget in runtime.widgets.values()]
        return HTMLResponse(renderer.render_page(config.title, views, config.page_refresh_seconds))

    async def widget_fragment(request: Request) -> Response:
        widget = runtime.get_widget(request.path_params["widget_id"])
        if widget is None:
            return PlainTextResponse("Widget not found", status_code=404)
        return HTMLResponse(renderer.render(widget.get_dom()))

    async def widget_json(request: Request) -> Response:
        widget = runtime.get_widget(request.path_params["widget_id"])
        if widget is None:
            return JSONResponse({"error": "Widget not found"}, status_code=404)
        return JSONResponse(widget_payload(widget))

    async def healthz(_request: Request) -> Response:
        return PlainTextResponse("Ok")

    routes = [
        Route("/", index),
        Route("/widgets/{widget_id}", widget_fragment),
        Route("/api/widgets/{widget_id}", widget_json),
        Route("/healthz", healthz),
    ]
    logger.info(f"Serving {len(runtime.widgets)} widget(s)")
    return Starlette(routes=routes)
