"""
Sync component port definitions.
"""

from designkit.core.ports import EventPublisherPort, StateStorePort

__all__ = ["EventPublisherPort", "StateStorePort"]
