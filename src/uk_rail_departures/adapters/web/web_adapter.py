"""Web adapter running the widget runtime behind a uvicorn server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

from uk_rail_departures.adapters.web.html_renderer import WidgetHtmlRenderer
from uk_rail_departures.adapters.web.starlette_app import create_app

if TYPE_CHECKING:
    from uk_rail_departures.adapters.config import AppConfig
    from uk_rail_departures.adapters.widget import WidgetRuntime

logger = logging.getLogger(__name__)


class StarletteWebAdapter:
    """Starts the widgets and serves them until the server exits."""

    def __init__(self, runtime: WidgetRuntime, config: AppConfig) -> None:
        self.runtime = runtime
        self.config = config
        self._server: uvicorn.Server | None = None

    async def start(self) -> None:
        """Start the widgets, then serve HTTP until shutdown."""
        await self.runtime.start()

        app = create_app(self.runtime, self.config, WidgetHtmlRenderer())
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Listening on http://{self.config.host}:{self.config.port}")

        try:
            await self._server.serve()
        finally:
            await self.runtime.stop()

    async def stop(self) -> None:
        """Ask the server to exit and stop the widgets."""
        if self._server:
            self._server.should_exit = True
        await self.runtime.stop()
