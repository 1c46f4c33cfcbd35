"""Display row domain model."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Final

UNKNOWN_DURATION: Final = "?"


class TrainStatus(str, Enum):
    """Normalized status label shown for a departure."""

    CANCELLED = "Cancelled"
    ON_TIME = "On time"
    LATE = "Late"
    NONE = ""

    @property
    def css_class(self) -> str:
        """Status as a CSS class name, e.g. ``ontime``."""
        return self.value.replace(" ", "").lower()


@dataclass(frozen=True)
class DisplayRow:
    """A display-ready departure, one per rendered table row."""

    platform: str
    destination: str
    origin: str
    dep_scheduled: str
    dep_estimated: str
    status: TrainStatus
    first_stop: str
    eta: str
    duration: int | str  # whole minutes, or UNKNOWN_DURATION

    def cell_text(self, column: str) -> str:
        """Text for a named column."""
        value = getattr(self, column)
        if isinstance(value, TrainStatus):
            return value.value
        return str(value)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict suitable for JSON output."""
        data = asdict(self)
        data["status"] = self.status.value
        return data
