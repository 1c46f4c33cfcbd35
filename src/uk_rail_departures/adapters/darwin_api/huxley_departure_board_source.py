"""Darwin departure board source backed by a Huxley2-compatible JSON gateway."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from uk_rail_departures.adapters.darwin_api.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    DEPARTURES_PATH,
    DEPARTURES_TO_PATH,
    MAX_ROWS,
)
from uk_rail_departures.domain.ports.departure_board_source import DepartureBoardSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aiohttp import ClientResponse, ClientSession


class DarwinApiError(RuntimeError):
    """Raised when the Darwin gateway returns an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HuxleyDepartureBoardSource(DepartureBoardSource):
    """Adapter fetching departure boards with calling points from the Darwin gateway."""

    def __init__(
        self,
        token: str,
        session: "ClientSession",
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize the source.

        Args:
            token: OpenLDBWS access token.
            session: Shared aiohttp session.
            base_url: Gateway base URL.
            timeout_seconds: Total timeout for one request.
        """
        self._token = token
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def build_url(self, station: str, rows: int, destination: str | None = None) -> str:
        """Build the board URL for a station, optionally filtered to a destination."""
        rows = max(1, min(rows, MAX_ROWS))
        if destination:
            path = DEPARTURES_TO_PATH.format(
                crs=station.upper(), filter_crs=destination.upper(), rows=rows
            )
        else:
            path = DEPARTURES_PATH.format(crs=station.upper(), rows=rows)
        return f"{self._base_url}{path}"

    async def get_departure_board(
        self,
        station: str,
        *,
        rows: int,
        destination: str | None = None,
    ) -> dict[str, Any]:
        """Get the departure board for a station, with calling point details.

        Raises:
            DarwinApiError: If the gateway answers with an error or a non-JSON body.
            aiohttp.ClientError: On transport failures.
        """
        url = self.build_url(station, rows, destination)
        params = {"accessToken": self._token, "expand": "true"}

        logger.info(
            f"Sending request for departure board information: {station}"
            + (f" to {destination}" if destination else "")
            + f" ({rows} rows)"
        )
        async with self._session.get(
            url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
        ) as response:
            return await self._json_or_error(response, station)

    @staticmethod
    async def _json_or_error(response: "ClientResponse", station: str) -> dict[str, Any]:
        if response.status != 200:
            response_text = await response.text()
            raise DarwinApiError(
                f"Darwin gateway error {response.status} for {station}: {response_text[:200]}",
                status_code=response.status,
            )
        try:
            data = await response.json(content_type=None)
        except ValueError as exc:
            raise DarwinApiError(
                f"Darwin gateway returned a non-JSON response for {station}",
                status_code=response.status,
            ) from exc

        if not isinstance(data, dict):
            raise DarwinApiError(
                f"Darwin gateway returned an unexpected payload for {station}: "
                f"{type(data).__name__}",
                status_code=response.status,
            )
        return data


def create_source_factory(
    session: "ClientSession",
    base_url: str = DEFAULT_BASE_URL,
    timeout_seconds: int = 10,
) -> "Callable[[str], DepartureBoardSource]":
    """Return a factory building one source per access token, sharing the session."""

    def factory(token: str) -> DepartureBoardSource:
        return HuxleyDepartureBoardSource(
            token, session, base_url=base_url, timeout_seconds=timeout_seconds
        )

    return factory
