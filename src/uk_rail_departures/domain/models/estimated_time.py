"""Estimated time token domain model."""

import re
from dataclasses import dataclass
from enum import Enum

ON_TIME_TOKEN = "On time"
CANCELLED_TOKEN = "Cancelled"

_CLOCK_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock_time(value: str | None) -> int | None:
    """Parse an ``HH:MM`` string into minutes after midnight.

    Returns None for anything that is not a valid time of day.
    """
    if not value or not isinstance(value, str):
        return None
    match = _CLOCK_TIME_PATTERN.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def is_clock_time(value: str | None) -> bool:
    """Return True if value is a valid ``HH:MM`` time of day."""
    return parse_clock_time(value) is not None


class EstimateKind(Enum):
    """Variants of the estimated time published by the Darwin feed."""

    SCHEDULED = "scheduled"  # no estimate published
    ON_TIME = "on_time"
    CANCELLED = "cancelled"
    EXPECTED = "expected"  # estimate carries a clock time
    DELAYED = "delayed"  # delayed without a clock time, e.g. "Delayed"


@dataclass(frozen=True)
class EstimatedTime:
    """Tagged estimated departure/arrival token."""

    kind: EstimateKind
    raw: str = ""

    @classmethod
    def parse(cls, token: object) -> "EstimatedTime":
        """Classify a raw token. Never raises."""
        if not isinstance(token, str) or not token.strip():
            return cls(EstimateKind.SCHEDULED, "")

        text = token.strip()
        if text == ON_TIME_TOKEN:
            return cls(EstimateKind.ON_TIME, text)
        if text == CANCELLED_TOKEN:
            return cls(EstimateKind.CANCELLED, text)
        if is_clock_time(text):
            return cls(EstimateKind.EXPECTED, text)
        return cls(EstimateKind.DELAYED, text)

    @property
    def time(self) -> str | None:
        """The clock time carried by an EXPECTED estimate."""
        return self.raw if self.kind is EstimateKind.EXPECTED else None

    @property
    def is_cancelled(self) -> bool:
        return self.kind is EstimateKind.CANCELLED

    @property
    def is_on_time(self) -> bool:
        return self.kind is EstimateKind.ON_TIME
