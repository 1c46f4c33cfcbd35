"""Departure board widget: polls the fetch helper and renders a table."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from uk_rail_departures.adapters.darwin_api.departure_parser import DepartureParser
from uk_rail_departures.adapters.widget.view_builder import WidgetViewBuilder
from uk_rail_departures.domain.contracts.widget_poller import WidgetPollerProtocol
from uk_rail_departures.domain.models import (
    ConfigMessage,
    DeparturesResultMessage,
    RequestDeparturesMessage,
    StartedMessage,
)

if TYPE_CHECKING:
    from uk_rail_departures.domain.models import (
        DepartureRecord,
        DisplayRow,
        WidgetConfiguration,
        WidgetMessage,
        WidgetView,
    )
    from uk_rail_departures.domain.ports import MessageChannel, TrainProcessingService

logger = logging.getLogger(__name__)

UpdateListener = Callable[["RailDepartureWidget"], None]


class RailDepartureWidget(WidgetPollerProtocol):
    """Presentation side of a departure board.

    Sends a request on every timer tick (unless hidden), and rebuilds its
    rows from whatever board arrives. The latest board always wins.
    """

    def __init__(
        self,
        config: WidgetConfiguration,
        processing_service: TrainProcessingService,
        outbox: MessageChannel,
        inbox: MessageChannel,
    ) -> None:
        """Initialize the widget.

        Args:
            config: Configuration of this widget instance.
            processing_service: Filters and formats departures.
            outbox: Channel carrying messages to the fetch helper.
            inbox: Channel carrying messages from the fetch helper.
        """
        self.config = config
        self.identifier = config.widget_id
        self.processing_service = processing_service
        self.outbox = outbox
        self.trains: list[DisplayRow] = []
        self.loaded = False
        self.hidden = False
        self.helper_started = False
        self.last_update: datetime | None = None
        self.view_builder = WidgetViewBuilder(config)
        self._listeners: list[UpdateListener] = []
        self._task: asyncio.Task | None = None
        inbox.subscribe(self.handle_message)

    def add_update_listener(self, listener: UpdateListener) -> None:
        """Register a callback run after every successful update."""
        self._listeners.append(listener)

    async def start(self) -> None:
        """Send the configuration to the helper and start the update timer."""
        logger.info(f"Starting widget: {self.identifier}")

        if not self.config.is_complete:
            logger.warning(
                f"Widget {self.identifier} is missing its station or token, not fetching"
            )
            return

        if self._task is not None and not self._task.done():
            logger.warning(f"Widget {self.identifier} already running")
            return

        await self.outbox.publish(ConfigMessage(widget_id=self.identifier, config=self.config))
        self._task = asyncio.create_task(self._update_loop())

    async def stop(self) -> None:
        """Stop the update timer."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info(f"Widget {self.identifier} timer cancelled")
        self._task = None

    async def _update_loop(self) -> None:
        await asyncio.sleep(self.config.initial_load_delay_ms / 1000)
        await self.fetch_train_info()

        # After the initial delay, fetch at the configured interval
        while True:
            await asyncio.sleep(self.config.update_interval_ms / 1000)
            await self.fetch_train_info()

    async def fetch_train_info(self) -> None:
        """Ask the helper for fresh departures, unless the widget is hidden."""
        if self.hidden:
            logger.debug(f"Widget {self.identifier} hidden, skipping update")
            return
        await self.outbox.publish(RequestDeparturesMessage(widget_id=self.identifier))

    def suspend(self) -> None:
        self.hidden = True

    def resume(self) -> None:
        self.hidden = False

    async def handle_message(self, message: WidgetMessage) -> None:
        if message.widget_id != self.identifier:
            return

        if isinstance(message, DeparturesResultMessage):
            self.process_trains(DepartureParser.parse_board(message.result))
        elif isinstance(message, StartedMessage):
            self.helper_started = message.started

    def process_trains(self, records: list[DepartureRecord] | None) -> None:
        """Replace the displayed rows with those built from a new board."""
        if records is None:
            return

        self.trains = self.processing_service.process_trains(
            records, self.config.filter_options()
        )
        self.loaded = True
        self.last_update = datetime.now(UTC)

        if self.config.debug:
            logger.info(f"Widget {self.identifier} trains: {self.trains}")

        for listener in list(self._listeners):
            listener(self)

    def get_dom(self) -> WidgetView:
        """Build the current render model."""
        return self.view_builder.build(self.trains, self.loaded)
