"""Table column domain model."""

from enum import Enum


class Column(str, Enum):
    """Columns a widget can render, in no particular order."""

    PLATFORM = "platform"
    DESTINATION = "destination"
    ORIGIN = "origin"
    STATUS = "status"
    DEP_SCHEDULED = "dep_scheduled"
    DEP_ESTIMATED = "dep_estimated"
    FIRST_STOP = "first_stop"
    ETA = "eta"
    DURATION = "duration"

    @classmethod
    def names(cls) -> list[str]:
        return [column.value for column in cls]


DEFAULT_COLUMNS: tuple[Column, ...] = (
    Column.PLATFORM,
    Column.DESTINATION,
    Column.ORIGIN,
    Column.STATUS,
    Column.DEP_ESTIMATED,
)
