"""Protocol for widget polling."""

from typing import Protocol


class WidgetPollerProtocol(Protocol):
    """Protocol for components that poll on a timer."""

    async def start(self) -> None:
        """Start polling."""
        ...

    async def stop(self) -> None:
        """Stop polling."""
        ...
