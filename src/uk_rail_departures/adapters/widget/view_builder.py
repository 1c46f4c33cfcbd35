"""Builds the render model of a widget from its state."""

from collections.abc import Sequence

from uk_rail_departures.domain.models import (
    MESSAGE_CSS_CLASS,
    Column,
    DisplayRow,
    Table,
    TableCell,
    TableRow,
    WidgetConfiguration,
    WidgetView,
)

MISSING_STATION_MESSAGE = "Please set the Station Code."
MISSING_TOKEN_MESSAGE = "Please set the OpenLDBWS token"
LOADING_MESSAGE = "Loading trains ..."
NO_TRAINS_MESSAGE = "No trains found"


class WidgetViewBuilder:
    """Turns a widget's configuration and rows into a WidgetView."""

    def __init__(self, config: WidgetConfiguration) -> None:
        self.config = config

    def build(self, rows: Sequence[DisplayRow], loaded: bool) -> WidgetView:
        message = self._message_for(rows, loaded)
        if message is not None:
            return WidgetView(
                widget_id=self.config.widget_id,
                header=self.config.header,
                message=message,
                css_class=MESSAGE_CSS_CLASS,
            )

        return WidgetView(
            widget_id=self.config.widget_id,
            header=self.config.header,
            table=self.build_table(rows),
            css_class="",
        )

    def _message_for(self, rows: Sequence[DisplayRow], loaded: bool) -> str | None:
        if not self.config.has_station:
            return MISSING_STATION_MESSAGE
        if not self.config.has_token:
            return MISSING_TOKEN_MESSAGE
        if not loaded:
            return LOADING_MESSAGE
        if not rows:
            return NO_TRAINS_MESSAGE
        return None

    def build_table(self, rows: Sequence[DisplayRow]) -> Table:
        """One table row per display row, one cell per configured column."""
        return Table(
            rows=tuple(
                TableRow(cells=tuple(self._cell(row, column) for column in self.config.columns))
                for row in rows
            )
        )

    @staticmethod
    def _cell(row: DisplayRow, column: Column) -> TableCell:
        css_class = column.value
        if column is Column.STATUS and row.status.css_class:
            css_class += f" {row.status.css_class}"
        return TableCell(text=row.cell_text(column.value), css_class=css_class)
