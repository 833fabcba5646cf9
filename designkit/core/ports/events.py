"""
Change notification interface.

Events carry only a name and a monotonically increasing sequence number.
Delivery is fire-and-forget.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

EventHandler = Callable[[str, int], None]

STATE_UPDATED = "state.updated"


class EventPublisherPort(Protocol):
    """Publish side of the sync channel."""

    def emit(self, event: str) -> int:
        """Publish an event; returns the sequence number assigned to it."""
        ...


class EventSubscriberPort(Protocol):
    """Subscribe side of the sync channel."""

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        """Register a handler; returns a callable that unsubscribes it."""
        ...
