"""Domain layer - core business logic and models."""

from uk_rail_departures.domain.models import (
    CallingPoint,
    DepartureRecord,
    DisplayRow,
    FilterOptions,
    WidgetConfiguration,
)
from uk_rail_departures.domain.ports import (
    DepartureBoardSource,
    MessageChannel,
    TrainProcessingService,
)

__all__ = [
    "CallingPoint",
    "DepartureBoardSource",
    "DepartureRecord",
    "DisplayRow",
    "FilterOptions",
    "MessageChannel",
    "TrainProcessingService",
    "WidgetConfiguration",
]
