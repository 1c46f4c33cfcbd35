"""Fetch helper: performs departure board requests on behalf of widgets."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import aiohttp

from uk_rail_departures.adapters.darwin_api.huxley_departure_board_source import DarwinApiError
from uk_rail_departures.domain.models import (
    ConfigMessage,
    DeparturesResultMessage,
    RequestDeparturesMessage,
    StartedMessage,
)

if TYPE_CHECKING:
    from uk_rail_departures.domain.models import WidgetConfiguration, WidgetMessage
    from uk_rail_departures.domain.ports import DepartureBoardSource, MessageChannel

logger = logging.getLogger(__name__)

SourceFactory = Callable[[str], "DepartureBoardSource"]


@dataclass(frozen=True)
class HelperContext:
    """Per-widget state held by the helper."""

    config: WidgetConfiguration
    source: DepartureBoardSource


class FetchHelper:
    """Answers widget requests by fetching boards from the Darwin source.

    Errors are logged and dropped: the widget keeps what it has until a
    later request succeeds.
    """

    def __init__(
        self,
        inbox: MessageChannel,
        outbox: MessageChannel,
        source_factory: SourceFactory,
    ) -> None:
        """Initialize the helper.

        Args:
            inbox: Channel carrying messages from widgets.
            outbox: Channel carrying messages to widgets.
            source_factory: Builds a board source from an access token.
        """
        self.outbox = outbox
        self.source_factory = source_factory
        self.contexts: dict[str, HelperContext] = {}
        self._fetches: set[asyncio.Task] = set()
        inbox.subscribe(self.handle_message)
        logger.info("UK National Rail fetch helper started")

    async def handle_message(self, message: WidgetMessage) -> None:
        if isinstance(message, ConfigMessage):
            await self._configure(message)
        elif isinstance(message, RequestDeparturesMessage):
            self._schedule_fetch(message.widget_id)

    async def _configure(self, message: ConfigMessage) -> None:
        logger.info(f"Received configuration for widget {message.widget_id}")
        self.contexts[message.widget_id] = HelperContext(
            config=message.config,
            source=self.source_factory(message.config.token),
        )
        await self.outbox.publish(StartedMessage(widget_id=message.widget_id, started=True))
        self._schedule_fetch(message.widget_id)

    def _schedule_fetch(self, widget_id: str) -> None:
        # Fetches for different widgets run concurrently
        task = asyncio.create_task(self.get_timetable(widget_id))
        self._fetches.add(task)
        task.add_done_callback(self._fetches.discard)

    async def get_timetable(self, widget_id: str) -> None:
        """Fetch the board for one widget and relay it, or drop it on error."""
        context = self.contexts.get(widget_id)
        if context is None:
            logger.warning(f"Departures requested for unconfigured widget {widget_id}")
            return

        config = context.config
        try:
            result = await context.source.get_departure_board(
                config.station,
                rows=config.fetch_rows,
                destination=config.destination_hint,
            )
        except (DarwinApiError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to fetch departures for {config.station} ({widget_id}): {e}")
            return
        except Exception as e:
            logger.error(
                f"Unexpected error fetching departures for {config.station} ({widget_id}): {e}",
                exc_info=True,
            )
            return

        services = result.get("trainServices")
        count = len(services) if isinstance(services, list) else 0
        logger.info(f"Received {count} services for {config.station} ({widget_id})")
        await self.outbox.publish(DeparturesResultMessage(widget_id=widget_id, result=result))

    async def stop(self) -> None:
        """Wait for in-flight fetches to complete."""
        if self._fetches:
            await asyncio.gather(*self._fetches, return_exceptions=True)
