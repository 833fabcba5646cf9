"""
Sync component - state store plus change notifications.
"""

from .component import StateSyncService, run
from .models import WriteStateInput, WriteStateOutput
from .ports import EventPublisherPort, StateStorePort

__all__ = [
    # Entry points
    "run",
    "StateSyncService",
    # Models
    "WriteStateInput",
    "WriteStateOutput",
    # Ports
    "EventPublisherPort",
    "StateStorePort",
]
