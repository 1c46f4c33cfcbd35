"""Parser for raw Darwin departure boards."""

import logging
from typing import Any

from uk_rail_departures.adapters.darwin_api.constants import TRAIN_SERVICES_KEY
from uk_rail_departures.domain.models import CallingPoint, DepartureRecord, EstimatedTime

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class DepartureParser:
    """Parses raw train services into DepartureRecord objects.

    Accepts both the flat shape (``origin: {"name": ...}``, a list of calling
    points) and the Huxley shape (``origin: [{"locationName": ...}]``, calling
    points wrapped in ``{"callingPoint": [...]}`` groups).
    """

    @staticmethod
    def parse_board(board: dict[str, Any] | None) -> list[DepartureRecord] | None:
        """Parse the services of a board. Returns None if the board is not a mapping."""
        if not isinstance(board, dict):
            return None
        # The gateway sends null or omits trainServices when nothing is running
        return DepartureParser.parse_services(board.get(TRAIN_SERVICES_KEY) or [])

    @staticmethod
    def parse_services(services: Any) -> list[DepartureRecord]:
        """Parse a list of raw train services, skipping malformed entries."""
        if not isinstance(services, list):
            return []

        records = []
        for service in services:
            if not isinstance(service, dict):
                logger.debug(f"Skipping malformed train service: {service!r}")
                continue
            records.append(DepartureParser._parse_service(service))
        return records

    @staticmethod
    def _parse_service(service: dict[str, Any]) -> DepartureRecord:
        platform = service.get("platform")
        return DepartureRecord(
            destination_name=DepartureParser._location_name(service.get("destination")),
            origin_name=DepartureParser._location_name(service.get("origin")),
            scheduled_departure=_text(service.get("std")),
            estimated_departure=EstimatedTime.parse(service.get("etd")),
            platform=_text(platform) if platform not in (None, "") else None,
            subsequent_calling_points=tuple(
                DepartureParser._parse_calling_points(service.get("subsequentCallingPoints"))
            ),
        )

    @staticmethod
    def _location_name(location: Any) -> str:
        """Name of an origin/destination, which may be one location or a list of them."""
        if isinstance(location, list):
            names = [DepartureParser._location_name(item) for item in location]
            return " & ".join(name for name in names if name)
        if isinstance(location, dict):
            return _text(location.get("name") or location.get("locationName"))
        if isinstance(location, str):
            return location
        return ""

    @staticmethod
    def _parse_calling_points(raw: Any) -> list[CallingPoint]:
        if not isinstance(raw, list):
            return []

        points: list[CallingPoint] = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            if "callingPoint" in item:
                # Huxley groups points per portion of a splitting train; take the first
                points.extend(DepartureParser._parse_calling_points(item.get("callingPoint")))
                break
            points.append(
                CallingPoint(
                    crs=_text(item.get("crs")).upper(),
                    location_name=_text(item.get("locationName")),
                    scheduled_time=_text(item.get("st")),
                    estimated_time=EstimatedTime.parse(item.get("et")),
                )
            )
        return points
