"""Departure board source port."""

from typing import Any, Protocol


class DepartureBoardSource(Protocol):
    """Port for retrieving a raw departure board from the Darwin feed."""

    async def get_departure_board(
        self,
        station: str,
        *,
        rows: int,
        destination: str | None = None,
    ) -> dict[str, Any]:
        """Get the departure board for a station, with calling point details.

        Args:
            station: CRS code of the board station.
            rows: Maximum number of services to return.
            destination: Optional CRS code; only services calling there are returned.

        Returns:
            The raw board as returned by the source.
        """
        ...
