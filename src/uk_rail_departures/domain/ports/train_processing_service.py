"""Train processing service port."""

from collections.abc import Sequence
from typing import Protocol

from uk_rail_departures.domain.models.departure_record import DepartureRecord
from uk_rail_departures.domain.models.display_row import DisplayRow
from uk_rail_departures.domain.models.filter_options import FilterOptions


class TrainProcessingService(Protocol):
    """Port for turning raw departures into display rows."""

    def process_trains(
        self, records: Sequence[DepartureRecord], options: FilterOptions
    ) -> list[DisplayRow]:
        """Filter, normalize and bound a list of departures."""
        ...
