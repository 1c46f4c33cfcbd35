"""Message channel port."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from uk_rail_departures.domain.models.messages import WidgetMessage

MessageHandler = Callable[[WidgetMessage], Awaitable[None]]


class MessageChannel(Protocol):
    """Port for one direction of the widget/helper notification channel."""

    async def publish(self, message: WidgetMessage) -> None:
        """Queue a message for delivery to all subscribers."""
        ...

    def subscribe(self, handler: MessageHandler) -> None:
        """Register a handler called for every delivered message."""
        ...
