# designkit: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from designkit.core.ports.events import (
    STATE_UPDATED,
    EventHandler,
    EventPublisherPort,
    EventSubscriberPort,
)
from designkit.core.ports.state import StateStoreError, StateStorePort

__all__ = [
    # Sync channel
    "STATE_UPDATED",
    "EventHandler",
    "EventPublisherPort",
    "EventSubscriberPort",
    # State store
    "StateStoreError",
    "StateStorePort",
]
