"""Widget configuration domain model."""

from dataclasses import dataclass

from .column import DEFAULT_COLUMNS, Column
from .filter_options import FilterOptions

DEFAULT_UPDATE_INTERVAL_MS = 5 * 60 * 1000


@dataclass(frozen=True)
class WidgetConfiguration:
    """Configuration for one departure board widget instance."""

    widget_id: str
    station: str = ""  # CRS code of the board station
    token: str = ""  # OpenLDBWS access token
    header: str | None = None
    update_interval_ms: int = DEFAULT_UPDATE_INTERVAL_MS
    initial_load_delay_ms: int = 0
    filter_destination: tuple[str, ...] = ()  # only show services calling at one of these
    filter_first_stop: tuple[str, ...] = ()  # only show services whose next stop is one of these
    filter_cancelled: bool = False
    fetch_rows: int = 20  # services requested from the API, before filtering
    display_rows: int = 10  # rows shown, after filtering
    columns: tuple[Column, ...] = DEFAULT_COLUMNS
    debug: bool = False

    @property
    def has_station(self) -> bool:
        return bool(self.station)

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def is_complete(self) -> bool:
        """True if the widget has everything it needs to request data."""
        return self.has_station and self.has_token

    @property
    def destination_hint(self) -> str | None:
        """Destination passed to the API, which accepts a single filter only.

        With several destinations the filtering is done locally instead.
        """
        if len(self.filter_destination) == 1:
            return self.filter_destination[0]
        return None

    def filter_options(self) -> FilterOptions:
        """Build the options for the departure filtering routine."""
        return FilterOptions(
            filter_destination=frozenset(self.filter_destination),
            filter_first_stop=frozenset(self.filter_first_stop),
            filter_cancelled=self.filter_cancelled,
            display_rows=self.display_rows,
        )
