"""
In-memory state store for tests and ephemeral servers.
"""

from __future__ import annotations

import threading

from designkit.core.entities import DesignKitState
from designkit.core.ports import StateStorePort


class InMemoryStateStore:
    """StateStorePort held in process memory."""

    def __init__(self, initial: DesignKitState | None = None) -> None:
        self._state = initial
        self._lock = threading.Lock()

    def get_state(self) -> DesignKitState | None:
        with self._lock:
            return self._state

    def set_state(self, state: DesignKitState) -> None:
        with self._lock:
            self._state = state

    def clear(self) -> None:
        with self._lock:
            self._state = None


class MirroredStateStore:
    """
    Primary store whose writes are copied to a secondary (disk) store.

    Reads fall back to the mirror when the primary is empty, so a
    restarted server picks up the last state it persisted. One lock
    covers both copies, so concurrent writers leave them in agreement.
    """

    def __init__(self, primary: InMemoryStateStore, mirror: StateStorePort) -> None:
        self.primary = primary
        self.mirror = mirror
        self._lock = threading.Lock()

    def get_state(self) -> DesignKitState | None:
        with self._lock:
            state = self.primary.get_state()
            if state is None:
                state = self.mirror.get_state()
                if state is not None:
                    self.primary.set_state(state)
            return state

    def set_state(self, state: DesignKitState) -> None:
        with self._lock:
            self.mirror.set_state(state)
            self.primary.set_state(state)
