"""
State store interface.

The store owns raw DesignKitState; the resolution core only reads snapshots.

Key requirements:
- get_state returns None when nothing has ever been recorded
- set_state is a total replace (last write wins)
"""

from __future__ import annotations

from typing import Protocol

from designkit.core.entities import DesignKitState


class StateStoreError(Exception):
    """Raised when the backing store cannot be written."""


class StateStorePort(Protocol):
    """Key-value style holder of the current DesignKitState."""

    def get_state(self) -> DesignKitState | None:
        """Return the current state, or None if none has been recorded."""
        ...

    def set_state(self, state: DesignKitState) -> None:
        """Replace the whole state."""
        ...
