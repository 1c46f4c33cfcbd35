"""Tests for the HTML renderer and the Starlette app."""

from unittest.mock import MagicMock

import pytest
from starlette.testclient import TestClient

from uk_rail_departures.adapters.config import AppConfig
from uk_rail_departures.adapters.web import WidgetHtmlRenderer, create_app
from uk_rail_departures.adapters.widget import WidgetRuntime
from uk_rail_departures.application.services import TrainProcessingService
from uk_rail_departures.domain.models import (
    DepartureRecord,
    EstimatedTime,
    Table,
    TableCell,
    TableRow,
    WidgetConfiguration,
    WidgetView,
)


@pytest.fixture
def runtime() -> WidgetRuntime:
    configs = [
        WidgetConfiguration("commute", station="CLJ", token="t", header="To <Waterloo>"),
        WidgetConfiguration("unset"),
    ]
    return WidgetRuntime(configs, TrainProcessingService(), MagicMock())


@pytest.fixture
def client(runtime: WidgetRuntime) -> TestClient:
    config = AppConfig.for_testing(title="My Trains", page_refresh_seconds=45)
    return TestClient(create_app(runtime, config))


def test_renderer_escapes_text() -> None:
    """Given text with markup characters, when rendering, then it is escaped."""
    view = WidgetView(
        widget_id="w",
        header="<b>Header</b>",
        table=Table(rows=(TableRow(cells=(TableCell(text="A & B", css_class="destination"),)),)),
        css_class="",
    )

    html = WidgetHtmlRenderer().render(view)

    assert "&lt;b&gt;Header&lt;/b&gt;" in html
    assert '<td class="destination">A &amp; B</td>' in html
    assert '<table class="small">' in html


def test_renderer_shows_message_with_class() -> None:
    """Given a message view, when rendering, then the message div carries its classes."""
    view = WidgetView(widget_id="w", message="Loading trains ...")

    html = WidgetHtmlRenderer().render(view)

    assert '<div class="dimmed light small">Loading trains ...</div>' in html
    assert "<table" not in html


def test_index_renders_every_widget(client: TestClient) -> None:
    """Given two widgets, when requesting the index, then both are on the page."""
    response = client.get("/")

    assert response.status_code == 200
    assert "<title>My Trains</title>" in response.text
    assert 'content="45"' in response.text
    assert 'id="widget-commute"' in response.text
    assert "Please set the Station Code." in response.text
    assert "To &lt;Waterloo&gt;" in response.text


def test_widget_fragment_shows_rows(client: TestClient, runtime: WidgetRuntime) -> None:
    """Given a loaded widget, when requesting its fragment, then the table is rendered."""
    widget = runtime.get_widget("commute")
    assert widget is not None
    widget.process_trains(
        [
            DepartureRecord(
                destination_name="London Waterloo",
                origin_name="Woking",
                scheduled_departure="10:00",
                estimated_departure=EstimatedTime.parse("10:04"),
                platform="4",
            )
        ]
    )

    response = client.get("/widgets/commute")

    assert response.status_code == 200
    assert '<td class="status late">Late</td>' in response.text
    assert '<td class="dep_estimated">10:04</td>' in response.text


def test_widget_json(client: TestClient, runtime: WidgetRuntime) -> None:
    """Given a loaded widget, when requesting its JSON, then rows are serialized."""
    widget = runtime.get_widget("commute")
    assert widget is not None
    widget.process_trains(
        [DepartureRecord(destination_name="Reading", origin_name="X", scheduled_departure="10:00")]
    )

    response = client.get("/api/widgets/commute")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "commute"
    assert data["loaded"] is True
    assert data["last_update"] is not None
    assert data["rows"][0]["destination"] == "Reading"
    assert data["rows"][0]["status"] == ""
    assert data["rows"][0]["duration"] == "?"


def test_unknown_widget_returns_404(client: TestClient) -> None:
    """Given an unknown id, when requesting a widget, then 404 is returned."""
    assert client.get("/widgets/nope").status_code == 404
    assert client.get("/api/widgets/nope").status_code == 404


def test_healthz(client: TestClient) -> None:
    """Given a running app, when probing health, then Ok is returned."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.text == "Ok"
