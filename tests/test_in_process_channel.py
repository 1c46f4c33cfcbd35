"""Tests for the in-process notification channel."""

import asyncio

import pytest

from uk_rail_departures.adapters.messaging import InProcessChannel
from uk_rail_departures.domain.models import RequestDeparturesMessage, WidgetMessage


@pytest.mark.asyncio
async def test_channel_delivers_in_publish_order() -> None:
    """Given several messages, when the channel runs, then handlers see them in order."""
    channel = InProcessChannel("test")
    received: list[str] = []

    async def handler(message: WidgetMessage) -> None:
        received.append(message.widget_id)

    channel.subscribe(handler)
    await channel.start()
    for widget_id in ("a", "b", "c"):
        await channel.publish(RequestDeparturesMessage(widget_id=widget_id))
    await channel.drain()
    await channel.stop()

    assert received == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_channel_delivers_to_every_subscriber() -> None:
    """Given two subscribers, when a message is published, then both receive it."""
    channel = InProcessChannel("test")
    first: list[WidgetMessage] = []
    second: list[WidgetMessage] = []

    async def record_first(message: WidgetMessage) -> None:
        first.append(message)

    async def record_second(message: WidgetMessage) -> None:
        second.append(message)

    channel.subscribe(record_first)
    channel.subscribe(record_second)
    await channel.start()
    await channel.publish(RequestDeparturesMessage(widget_id="w"))
    await channel.drain()
    await channel.stop()

    assert len(first) == 1
    assert len(second) == 1


@pytest.mark.asyncio
async def test_failing_handler_does_not_block_others() -> None:
    """Given a handler that raises, when delivering, then later handlers still run."""
    channel = InProcessChannel("test")
    received: list[WidgetMessage] = []

    async def broken(_message: WidgetMessage) -> None:
        raise RuntimeError("boom")

    async def working(message: WidgetMessage) -> None:
        received.append(message)

    channel.subscribe(broken)
    channel.subscribe(working)
    await channel.start()
    await channel.publish(RequestDeparturesMessage(widget_id="w"))
    await channel.publish(RequestDeparturesMessage(widget_id="w"))
    await channel.drain()
    await channel.stop()

    assert len(received) == 2


@pytest.mark.asyncio
async def test_messages_wait_until_started() -> None:
    """Given a stopped channel, when publishing, then messages are queued."""
    channel = InProcessChannel("test")

    await channel.publish(RequestDeparturesMessage(widget_id="w"))

    assert channel.pending == 1


def test_message_notification_names() -> None:
    """Given each message type, when reading the notification, then wire names match."""
    from uk_rail_departures.domain.models import (
        ConfigMessage,
        DeparturesResultMessage,
        StartedMessage,
    )

    assert ConfigMessage.notification == "UKNR_CONFIG"
    assert RequestDeparturesMessage.notification == "UKNR_TRAININFO"
    assert DeparturesResultMessage.notification == "UKNR_DATA"
    assert StartedMessage.notification == "UKNR_STARTED"


@pytest.mark.asyncio
async def test_stop_reports_undelivered_messages(caplog: pytest.LogCaptureFixture) -> None:
    """Given queued messages and a blocked handler, when stopping, then the drop is logged."""
    channel = InProcessChannel("test")
    release = asyncio.Event()

    async def blocked(_message: WidgetMessage) -> None:
        await release.wait()

    channel.subscribe(blocked)
    await channel.start()
    for _ in range(3):
        await channel.publish(RequestDeparturesMessage(widget_id="w"))
    await asyncio.sleep(0.01)
    await channel.stop()

    assert channel.pending == 2
    assert "dropped 2 undelivered message(s)" in caplog.text
