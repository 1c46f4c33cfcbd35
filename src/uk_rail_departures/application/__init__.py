"""Application layer - use cases."""

from uk_rail_departures.application.services import TrainProcessingService, calculate_duration

__all__ = ["TrainProcessingService", "calculate_duration"]
