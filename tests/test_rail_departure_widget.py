"""Tests for the departure board widget."""

import asyncio
from typing import Any
from unittest.mock import MagicMock

import pytest

from uk_rail_departures.adapters.widget import RailDepartureWidget
from uk_rail_departures.adapters.widget.view_builder import (
    LOADING_MESSAGE,
    MISSING_STATION_MESSAGE,
    MISSING_TOKEN_MESSAGE,
    NO_TRAINS_MESSAGE,
)
from uk_rail_departures.application.services import TrainProcessingService
from uk_rail_departures.domain.models import (
    ConfigMessage,
    DepartureRecord,
    DeparturesResultMessage,
    RequestDeparturesMessage,
    StartedMessage,
    TrainStatus,
    WidgetConfiguration,
    WidgetMessage,
)

BOARD: dict[str, Any] = {
    "trainServices": [
        {
            "std": "10:00",
            "etd": "On time",
            "platform": "4",
            "origin": [{"locationName": "Woking"}],
            "destination": [{"locationName": "London Waterloo"}],
            "subsequentCallingPoints": [
                {"callingPoint": [{"locationName": "London Waterloo", "crs": "WAT", "st": "10:20"}]}
            ],
        }
    ]
}


class RecordingChannel:
    def __init__(self) -> None:
        self.published: list[WidgetMessage] = []
        self.handlers: list[Any] = []

    async def publish(self, message: WidgetMessage) -> None:
        self.published.append(message)

    def subscribe(self, handler: Any) -> None:
        self.handlers.append(handler)


def make_widget(**overrides: Any) -> tuple[RailDepartureWidget, RecordingChannel]:
    values: dict[str, Any] = {"station": "CLJ", "token": "secret"}
    values.update(overrides)
    outbox = RecordingChannel()
    widget = RailDepartureWidget(
        WidgetConfiguration(widget_id="w1", **values),
        TrainProcessingService(),
        outbox=outbox,
        inbox=RecordingChannel(),
    )
    return widget, outbox


@pytest.mark.asyncio
async def test_start_sends_config_and_fetches_after_initial_delay() -> None:
    """Given a complete config, when starting, then CONFIG is sent and a request follows."""
    widget, outbox = make_widget(initial_load_delay_ms=0)

    await widget.start()
    await asyncio.sleep(0.01)
    await widget.stop()

    assert isinstance(outbox.published[0], ConfigMessage)
    assert outbox.published[0].config is widget.config
    assert isinstance(outbox.published[1], RequestDeparturesMessage)


@pytest.mark.asyncio
async def test_timer_repeats_at_update_interval() -> None:
    """Given a short interval, when the widget runs, then requests repeat."""
    widget, outbox = make_widget(update_interval_ms=10)

    await widget.start()
    await asyncio.sleep(0.1)
    await widget.stop()

    requests = [m for m in outbox.published if isinstance(m, RequestDeparturesMessage)]
    assert len(requests) >= 3


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["station", "token"])
async def test_incomplete_config_never_fetches(missing: str) -> None:
    """Given a missing station or token, when starting, then nothing is sent."""
    widget, outbox = make_widget(**{missing: ""})

    await widget.start()
    await asyncio.sleep(0.01)
    await widget.stop()

    assert outbox.published == []


@pytest.mark.asyncio
async def test_hidden_widget_skips_requests() -> None:
    """Given a suspended widget, when the timer fires, then no request is sent."""
    widget, outbox = make_widget()
    widget.suspend()

    await widget.fetch_train_info()
    assert outbox.published == []

    widget.resume()
    await widget.fetch_train_info()
    assert len(outbox.published) == 1


@pytest.mark.asyncio
async def test_result_message_updates_rows() -> None:
    """Given a board for this widget, when handled, then rows are rebuilt."""
    widget, _ = make_widget()
    listener = MagicMock()
    widget.add_update_listener(listener)

    await widget.handle_message(DeparturesResultMessage(widget_id="w1", result=BOARD))

    assert widget.loaded is True
    assert widget.last_update is not None
    assert len(widget.trains) == 1
    assert widget.trains[0].status is TrainStatus.ON_TIME
    assert widget.trains[0].destination == "London Waterloo"
    listener.assert_called_once_with(widget)


@pytest.mark.asyncio
async def test_messages_for_other_widgets_are_ignored() -> None:
    """Given a board addressed to another widget, when handled, then nothing changes."""
    widget, _ = make_widget()

    await widget.handle_message(DeparturesResultMessage(widget_id="other", result=BOARD))

    assert widget.loaded is False
    assert widget.trains == []


@pytest.mark.asyncio
async def test_started_message_is_recorded() -> None:
    """Given a STARTED reply, when handled, then the widget notes the helper is ready."""
    widget, _ = make_widget()

    await widget.handle_message(StartedMessage(widget_id="w1", started=True))

    assert widget.helper_started is True


@pytest.mark.asyncio
async def test_latest_result_replaces_previous_rows() -> None:
    """Given two results, when handled in order, then the last one wins."""
    widget, _ = make_widget()

    await widget.handle_message(DeparturesResultMessage(widget_id="w1", result=BOARD))
    await widget.handle_message(DeparturesResultMessage(widget_id="w1", result={"trainServices": []}))

    assert widget.trains == []
    assert widget.get_dom().message == NO_TRAINS_MESSAGE


def test_process_trains_ignores_missing_board() -> None:
    """Given no records, when processing, then the widget state is unchanged."""
    widget, _ = make_widget()

    widget.process_trains(None)

    assert widget.loaded is False


def test_process_trains_respects_display_rows() -> None:
    """Given more records than display rows, when processing, then rows are capped."""
    widget, _ = make_widget(display_rows=2)
    records = [
        DepartureRecord(destination_name=str(i), origin_name="X", scheduled_departure="10:00")
        for i in range(5)
    ]

    widget.process_trains(records)

    assert [row.destination for row in widget.trains] == ["0", "1"]


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"station": ""}, MISSING_STATION_MESSAGE),
        ({"token": ""}, MISSING_TOKEN_MESSAGE),
        ({}, LOADING_MESSAGE),
    ],
)
def test_get_dom_messages(overrides: dict[str, Any], message: str) -> None:
    """Given a widget state, when building the DOM, then the matching message is shown."""
    widget, _ = make_widget(**overrides)

    view = widget.get_dom()

    assert view.is_message is True
    assert view.message == message
    assert view.css_class == "dimmed light small"
