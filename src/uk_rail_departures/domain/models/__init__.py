"""Domain models for UK rail departures."""

from uk_rail_departures.domain.models.calling_point import CallingPoint
from uk_rail_departures.domain.models.column import DEFAULT_COLUMNS, Column
from uk_rail_departures.domain.models.departure_record import DepartureRecord
from uk_rail_departures.domain.models.display_row import (
    UNKNOWN_DURATION,
    DisplayRow,
    TrainStatus,
)
from uk_rail_departures.domain.models.estimated_time import (
    CANCELLED_TOKEN,
    ON_TIME_TOKEN,
    EstimatedTime,
    EstimateKind,
    is_clock_time,
    parse_clock_time,
)
from uk_rail_departures.domain.models.filter_options import FilterOptions
from uk_rail_departures.domain.models.messages import (
    ConfigMessage,
    DeparturesResultMessage,
    RequestDeparturesMessage,
    StartedMessage,
    WidgetMessage,
)
from uk_rail_departures.domain.models.widget_configuration import (
    DEFAULT_UPDATE_INTERVAL_MS,
    WidgetConfiguration,
)
from uk_rail_departures.domain.models.widget_view import (
    MESSAGE_CSS_CLASS,
    TABLE_CSS_CLASS,
    Table,
    TableCell,
    TableRow,
    WidgetView,
)

__all__ = [
    "CANCELLED_TOKEN",
    "DEFAULT_COLUMNS",
    "DEFAULT_UPDATE_INTERVAL_MS",
    "MESSAGE_CSS_CLASS",
    "ON_TIME_TOKEN",
    "TABLE_CSS_CLASS",
    "UNKNOWN_DURATION",
    "CallingPoint",
    "Column",
    "ConfigMessage",
    "DepartureRecord",
    "DeparturesResultMessage",
    "DisplayRow",
    "EstimateKind",
    "EstimatedTime",
    "FilterOptions",
    "RequestDeparturesMessage",
    "StartedMessage",
    "Table",
    "TableCell",
    "TableRow",
    "TrainStatus",
    "WidgetConfiguration",
    "WidgetMessage",
    "WidgetView",
    "is_clock_time",
    "parse_clock_time",
]
