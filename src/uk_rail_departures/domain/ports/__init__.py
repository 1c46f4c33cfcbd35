"""Ports (interfaces) for the ports-and-adapters architecture."""

from uk_rail_departures.domain.ports.departure_board_source import DepartureBoardSource
from uk_rail_departures.domain.ports.message_channel import MessageChannel, MessageHandler
from uk_rail_departures.domain.ports.train_processing_service import TrainProcessingService

__all__ = [
    "DepartureBoardSource",
    "MessageChannel",
    "MessageHandler",
    "TrainProcessingService",
]
