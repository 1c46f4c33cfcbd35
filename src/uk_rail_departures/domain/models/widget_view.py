"""Render model for a widget: either a message or a table."""

from dataclasses import dataclass, field

MESSAGE_CSS_CLASS = "dimmed light small"
TABLE_CSS_CLASS = "small"


@dataclass(frozen=True)
class TableCell:
    text: str
    css_class: str


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...]


@dataclass(frozen=True)
class Table:
    rows: tuple[TableRow, ...]
    css_class: str = TABLE_CSS_CLASS


@dataclass(frozen=True)
class WidgetView:
    """What a widget shows: a message, or a table of departures."""

    widget_id: str
    header: str | None = None
    message: str | None = None
    table: Table | None = None
    css_class: str = field(default=MESSAGE_CSS_CLASS)

    @property
    def is_message(self) -> bool:
        return self.table is None
