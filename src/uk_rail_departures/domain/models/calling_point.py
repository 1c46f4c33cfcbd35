"""Calling point domain model."""

from dataclasses import dataclass, field

from .estimated_time import EstimatedTime, EstimateKind


@dataclass(frozen=True)
class CallingPoint:
    """A station a service calls at after leaving the board station."""

    crs: str
    location_name: str
    scheduled_time: str = ""
    estimated_time: EstimatedTime = field(
        default_factory=lambda: EstimatedTime(EstimateKind.SCHEDULED)
    )
