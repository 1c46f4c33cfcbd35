"""Tests for the widget view builder."""

from uk_rail_departures.adapters.widget import WidgetViewBuilder
from uk_rail_departures.domain.models import (
    UNKNOWN_DURATION,
    Column,
    DisplayRow,
    TrainStatus,
    WidgetConfiguration,
)


def row(status: TrainStatus = TrainStatus.LATE) -> DisplayRow:
    return DisplayRow(
        platform="4",
        destination="London Waterloo",
        origin="Woking",
        dep_scheduled="10:00",
        dep_estimated="10:05",
        status=status,
        first_stop="Vauxhall",
        eta="",
        duration=UNKNOWN_DURATION,
    )


def test_table_follows_configured_column_order() -> None:
    """Given a column order, when building, then cells follow that order."""
    config = WidgetConfiguration(
        "w",
        station="CLJ",
        token="t",
        header="Commute",
        columns=(Column.DEP_ESTIMATED, Column.PLATFORM, Column.DESTINATION),
    )

    view = WidgetViewBuilder(config).build([row()], loaded=True)

    assert view.is_message is False
    assert view.header == "Commute"
    assert view.table is not None
    assert view.table.css_class == "small"
    cells = view.table.rows[0].cells
    assert [cell.text for cell in cells] == ["10:05", "4", "London Waterloo"]
    assert [cell.css_class for cell in cells] == ["dep_estimated", "platform", "destination"]


def test_status_cell_carries_status_class() -> None:
    """Given rows with each status, when building, then the status cell is classed."""
    config = WidgetConfiguration("w", station="CLJ", token="t", columns=(Column.STATUS,))
    rows = [row(TrainStatus.ON_TIME), row(TrainStatus.CANCELLED), row(TrainStatus.NONE)]

    view = WidgetViewBuilder(config).build(rows, loaded=True)

    assert view.table is not None
    classes = [table_row.cells[0].css_class for table_row in view.table.rows]
    assert classes == ["status ontime", "status cancelled", "status"]


def test_station_message_takes_priority_over_token() -> None:
    """Given neither station nor token, when building, then the station message is shown."""
    view = WidgetViewBuilder(WidgetConfiguration("w")).build([], loaded=False)

    assert view.message == "Please set the Station Code."


def test_loaded_without_rows_shows_no_trains() -> None:
    """Given a loaded widget with no rows, when building, then "No trains found" is shown."""
    config = WidgetConfiguration("w", station="CLJ", token="t")

    view = WidgetViewBuilder(config).build([], loaded=True)

    assert view.message == "No trains found"
