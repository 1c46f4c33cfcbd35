"""In-process notification channel between widgets and the fetch helper."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from uk_rail_departures.domain.ports.message_channel import MessageChannel

if TYPE_CHECKING:
    from uk_rail_departures.domain.models.messages import WidgetMessage
    from uk_rail_departures.domain.ports.message_channel import MessageHandler

logger = logging.getLogger(__name__)


class InProcessChannel(MessageChannel):
    """One direction of the notification channel.

    Messages are delivered in publish order by a single pump task; each
    subscriber sees every message and filters by widget id itself.
    """

    def __init__(self, name: str) -> None:
        """Initialize the channel.

        Args:
            name: Name used in log messages, e.g. "to_helper".
        """
        self.name = name
        self._queue: asyncio.Queue[WidgetMessage] = asyncio.Queue()
        self._handlers: list[MessageHandler] = []
        self._task: asyncio.Task | None = None

    def subscribe(self, handler: MessageHandler) -> None:
        self._handlers.append(handler)

    async def publish(self, message: WidgetMessage) -> None:
        logger.debug(f"[{self.name}] {message.notification} for {message.widget_id}")
        await self._queue.put(message)

    @property
    def pending(self) -> int:
        """Number of messages waiting for delivery."""
        return self._queue.qsize()

    async def start(self) -> None:
        """Start delivering messages."""
        if self._task is not None and not self._task.done():
            logger.warning(f"Channel {self.name} already running")
            return
        self._task = asyncio.create_task(self._pump())
        logger.info(f"Started channel {self.name}")

    async def stop(self) -> None:
        """Stop delivering messages. Undelivered messages are dropped."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug(f"Channel {self.name} cancelled")
            if self.pending:
                logger.warning(f"Channel {self.name} dropped {self.pending} undelivered message(s)")
            logger.info(f"Stopped channel {self.name}")
        self._task = None

    async def drain(self) -> None:
        """Wait until every queued message has been handled."""
        await self._queue.join()

    async def _pump(self) -> None:
        while True:
            message = await self._queue.get()
            try:
                await self._deliver(message)
            finally:
                self._queue.task_done()

    async def _deliver(self, message: WidgetMessage) -> None:
        for handler in list(self._handlers):
            try:
                await handler(message)
            except Exception as e:
                # A failing subscriber must not stop delivery to the others
                logger.error(
                    f"Handler failed for {message.notification} on channel {self.name}: {e}",
                    exc_info=True,
                )
