"""Departure record domain model."""

from dataclasses import dataclass, field

from .calling_point import CallingPoint
from .estimated_time import EstimatedTime, EstimateKind


@dataclass(frozen=True)
class DepartureRecord:
    """A single train service on a departure board, as received from Darwin."""

    destination_name: str
    origin_name: str
    scheduled_departure: str
    estimated_departure: EstimatedTime = field(
        default_factory=lambda: EstimatedTime(EstimateKind.SCHEDULED)
    )
    platform: str | None = None
    subsequent_calling_points: tuple[CallingPoint, ...] = ()

    @property
    def first_calling_point(self) -> CallingPoint | None:
        """The next stop after the board station, if any."""
        if not self.subsequent_calling_points:
            return None
        return self.subsequent_calling_points[0]

    def calls_at_any(self, crs_codes: frozenset[str]) -> bool:
        """Return True if any subsequent calling point is in crs_codes."""
        return any(cp.crs in crs_codes for cp in self.subsequent_calling_points)

    def first_calling_point_in(self, crs_codes: frozenset[str]) -> CallingPoint | None:
        """Return the first subsequent calling point whose CRS is in crs_codes."""
        for calling_point in self.subsequent_calling_points:
            if calling_point.crs in crs_codes:
                return calling_point
        return None
