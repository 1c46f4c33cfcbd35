"""Application services (use cases) for departure processing."""

import logging
from collections.abc import Iterable, Sequence

from uk_rail_departures.domain.models import (
    UNKNOWN_DURATION,
    CallingPoint,
    DepartureRecord,
    DisplayRow,
    EstimateKind,
    FilterOptions,
    TrainStatus,
    parse_clock_time,
)

logger = logging.getLogger(__name__)


def calculate_duration(start_time: str | None, end_time: str | None) -> int | str:
    """Minutes from start_time to end_time, both ``HH:MM`` on the same day.

    Returns UNKNOWN_DURATION if either time does not parse or the end is
    before the start (there is no rollover past midnight).
    """
    start_minutes = parse_clock_time(start_time)
    end_minutes = parse_clock_time(end_time)
    if start_minutes is None or end_minutes is None:
        return UNKNOWN_DURATION

    duration = end_minutes - start_minutes
    if duration < 0:
        return UNKNOWN_DURATION
    return duration


class TrainProcessingService:
    """Service for filtering and formatting departures for display."""

    def process_trains(
        self, records: Sequence[DepartureRecord], options: FilterOptions
    ) -> list[DisplayRow]:
        """Build the list of rows to display from a departure board.

        Filters by destination and first stop, drops cancelled services if
        configured, and stops as soon as ``display_rows`` rows are built.
        """
        candidates: Iterable[DepartureRecord] = records

        if options.filter_destination:
            candidates = [r for r in candidates if r.calls_at_any(options.filter_destination)]

        if options.filter_first_stop:
            candidates = [
                r for r in candidates if self._first_stop_matches(r, options.filter_first_stop)
            ]

        rows: list[DisplayRow] = []
        for record in candidates:
            if len(rows) >= options.display_rows:
                break

            if record.estimated_departure.is_cancelled and options.filter_cancelled:
                continue

            rows.append(self._build_row(record, options))

        logger.debug(f"Processed {len(records)} departures into {len(rows)} display rows")
        return rows

    @staticmethod
    def _first_stop_matches(record: DepartureRecord, crs_codes: frozenset[str]) -> bool:
        first = record.first_calling_point
        return first is not None and first.crs in crs_codes

    def _build_row(self, record: DepartureRecord, options: FilterOptions) -> DisplayRow:
        status, dep_estimated = self._normalize_status(record)

        eta = ""
        duration: int | str = UNKNOWN_DURATION
        if options.filter_destination:
            calling_point = record.first_calling_point_in(options.filter_destination)
            if calling_point is not None:
                eta = self._arrival_estimate(calling_point)
            if eta:
                duration = calculate_duration(self._effective_departure(record), eta)

        first = record.first_calling_point
        return DisplayRow(
            platform=record.platform or "",
            destination=record.destination_name,
            origin=record.origin_name,
            dep_scheduled=record.scheduled_departure,
            dep_estimated=dep_estimated,
            status=status,
            first_stop=first.location_name if first is not None else "",
            eta=eta,
            duration=duration,
        )

    @staticmethod
    def _normalize_status(record: DepartureRecord) -> tuple[TrainStatus, str]:
        """Status label and the estimate to display for it."""
        estimate = record.estimated_departure
        if estimate.is_cancelled:
            return TrainStatus.CANCELLED, ""
        if estimate.is_on_time:
            return TrainStatus.ON_TIME, record.scheduled_departure
        if estimate.kind in (EstimateKind.EXPECTED, EstimateKind.DELAYED):
            return TrainStatus.LATE, estimate.raw
        return TrainStatus.NONE, ""

    @staticmethod
    def _arrival_estimate(calling_point: CallingPoint) -> str:
        estimate = calling_point.estimated_time
        if estimate.is_on_time:
            return calling_point.scheduled_time
        if estimate.kind is EstimateKind.EXPECTED:
            return estimate.raw
        return ""

    @staticmethod
    def _effective_departure(record: DepartureRecord) -> str:
        # Estimated time when it is a clock time, the timetable otherwise
        return record.estimated_departure.time or record.scheduled_departure
