"""Messages exchanged between a widget and the fetch helper.

Each message is addressed by widget id; receivers ignore messages for other
widgets. ``notification`` is the name used on the wire.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from .widget_configuration import WidgetConfiguration


@dataclass(frozen=True)
class WidgetMessage:
    """Base class for all channel messages."""

    notification: ClassVar[str] = ""

    widget_id: str


@dataclass(frozen=True)
class ConfigMessage(WidgetMessage):
    notification: ClassVar[str] = "UKNR_CONFIG"

    config: WidgetConfiguration


@dataclass(frozen=True)
class RequestDeparturesMessage(WidgetMessage):
    notification: ClassVar[str] = "UKNR_TRAININFO"


@dataclass(frozen=True)
class DeparturesResultMessage(WidgetMessage):
    notification: ClassVar[str] = "UKNR_DATA"

    result: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StartedMessage(WidgetMessage):
    notification: ClassVar[str] = "UKNR_STARTED"

    started: bool = True
