"""Messaging adapters."""

from uk_rail_departures.adapters.messaging.in_process_channel import InProcessChannel

__all__ = ["InProcessChannel"]
