"""
Sync component - the authoritative holder of raw state.

Writes replace the stored state and then notify subscribers with
``state.updated``. Reads either return the raw snapshot or recompute the
resolved config from it; resolved configs are never stored.
"""

from __future__ import annotations

import logging

from designkit.components.export import ExportInput, ExportOutput, get_format, run_export
from designkit.components.resolve import CatalogPort, build_config
from designkit.components.selections import ValidateStateInput
from designkit.components.selections import run as run_validate
from designkit.core.entities import DesignConfig, DesignKitState
from designkit.core.ports import STATE_UPDATED

from .models import WriteStateInput, WriteStateOutput
from .ports import EventPublisherPort, StateStorePort

logger = logging.getLogger(__name__)


class StateSyncService:
    """
    Couples a state store with the change notification channel.

    Provides:
    - Raw state reads (None until the first write)
    - Total-replace writes followed by a ``state.updated`` event
    - Resolved config and export reads recomputed per call
    """

    def __init__(
        self,
        store: StateStorePort,
        publisher: EventPublisherPort,
        catalog: CatalogPort,
    ) -> None:
        self._store = store
        self._publisher = publisher
        self._catalog = catalog

    def get_state(self) -> DesignKitState | None:
        return self._store.get_state()

    def set_state(self, state: DesignKitState) -> int:
        """
        Replace the stored state and notify subscribers.

        Returns:
            Sequence number of the emitted ``state.updated`` event.
        """
        self._store.set_state(state)
        seq = self._publisher.emit(STATE_UPDATED)
        logger.info(
            "State updated (#%d): %d selections, mode=%s",
            seq,
            len(state.selections),
            state.color_mode,
        )
        return seq

    def write(self, payload: object) -> WriteStateOutput:
        """Validate a raw body and store it when clean."""
        validated = run_validate(ValidateStateInput(payload=payload))
        if not validated.success or validated.state is None:
            logger.debug("Rejected state write: %s", [e.field for e in validated.errors])
            return WriteStateOutput(state=None, errors=validated.errors, success=False)
        seq = self.set_state(validated.state)
        return WriteStateOutput(state=validated.state, seq=seq)

    def get_config(self) -> DesignConfig | None:
        state = self._store.get_state()
        if state is None:
            return None
        return build_config(state, self._catalog)

    def export(self, format_id: str) -> ExportOutput | None:
        """
        Render the current config in one format.

        Raises:
            UnknownFormatError: format id is not registered, checked before
                the state so a bad id is reported even with no state.
        """
        get_format(format_id)
        config = self.get_config()
        if config is None:
            return None
        return run_export(ExportInput(config=config, format=format_id))


def run(
    inp: WriteStateInput,
    *,
    store: StateStorePort,
    publisher: EventPublisherPort,
    catalog: CatalogPort,
) -> WriteStateOutput:
    """
    Main entry point for the sync component.

    Args:
        inp: Raw write payload.
        store: State store port.
        publisher: Event publisher port.
        catalog: Catalog used for later config reads.

    Returns:
        WriteStateOutput with the stored state or validation errors.
    """
    return StateSyncService(store, publisher, catalog).write(inp.payload)
