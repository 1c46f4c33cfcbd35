"""Wires widgets and the fetch helper together over in-process channels."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from uk_rail_departures.adapters.messaging import InProcessChannel
from uk_rail_departures.adapters.widget.fetch_helper import FetchHelper, SourceFactory
from uk_rail_departures.adapters.widget.rail_departure_widget import RailDepartureWidget

if TYPE_CHECKING:
    from uk_rail_departures.domain.models import WidgetConfiguration
    from uk_rail_departures.domain.ports import TrainProcessingService

logger = logging.getLogger(__name__)


class WidgetRuntime:
    """Runs one fetch helper and a widget per configuration."""

    def __init__(
        self,
        widget_configs: list[WidgetConfiguration],
        processing_service: TrainProcessingService,
        source_factory: SourceFactory,
    ) -> None:
        """Initialize the runtime.

        Args:
            widget_configs: One configuration per widget instance.
            processing_service: Filters and formats departures for every widget.
            source_factory: Builds a Darwin board source from an access token.
        """
        self.to_helper = InProcessChannel("to_helper")
        self.to_widgets = InProcessChannel("to_widgets")
        self.helper = FetchHelper(
            inbox=self.to_helper, outbox=self.to_widgets, source_factory=source_factory
        )
        self.widgets: dict[str, RailDepartureWidget] = {
            config.widget_id: RailDepartureWidget(
                config,
                processing_service,
                outbox=self.to_helper,
                inbox=self.to_widgets,
            )
            for config in widget_configs
        }

    def get_widget(self, widget_id: str) -> RailDepartureWidget | None:
        return self.widgets.get(widget_id)

    async def start(self) -> None:
        """Start the channels, then every widget."""
        await self.to_helper.start()
        await self.to_widgets.start()
        for widget in self.widgets.values():
            await widget.start()
        logger.info(f"Started {len(self.widgets)} widget(s)")

    async def stop(self) -> None:
        """Stop the widgets, let in-flight fetches finish, then stop the channels."""
        for widget in self.widgets.values():
            await widget.stop()
        await self.helper.stop()
        await self.to_helper.stop()
        await self.to_widgets.stop()
        logger.info("Stopped widget runtime")
