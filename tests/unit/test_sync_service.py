"""
State sync service tests: validated writes, notifications and derived reads.
"""

from __future__ import annotations

import pytest

from designkit.adapters.event_bus import EventBus
from designkit.adapters.memory import InMemoryStateStore
from designkit.catalog import Catalog
from designkit.components.export import UnknownFormatError
from designkit.components.sync import StateSyncService, WriteStateInput, run
from designkit.core.entities import DesignKitState
from designkit.core.ports import STATE_UPDATED, StateStoreError


class FailingStore:
    """Store whose writes always fail."""

    def get_state(self) -> DesignKitState | None:
        return None

    def set_state(self, state: DesignKitState) -> None:
        raise StateStoreError("disk full")


@pytest.fixture
def store() -> InMemoryStateStore:
    return InMemoryStateStore()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def service(store: InMemoryStateStore, bus: EventBus, catalog: Catalog) -> StateSyncService:
    return StateSyncService(store, bus, catalog)


class TestWrite:
    def test_valid_payload_is_stored(
        self, service: StateSyncService, store: InMemoryStateStore, state_payload: dict
    ) -> None:
        result = service.write(state_payload)

        assert result.success is True
        assert result.seq == 1
        assert store.get_state() == result.state
        assert result.state is not None
        assert result.state.selections == {"colors": "ocean", "radius": "soft"}

    def test_write_notifies_subscribers(
        self, service: StateSyncService, bus: EventBus, state_payload: dict
    ) -> None:
        seen: list[tuple[str, int]] = []
        bus.subscribe(lambda event, seq: seen.append((event, seq)))

        service.write(state_payload)
        service.write(state_payload)

        assert seen == [(STATE_UPDATED, 1), (STATE_UPDATED, 2)]

    def test_invalid_payload_is_rejected(
        self, service: StateSyncService, store: InMemoryStateStore, bus: EventBus
    ) -> None:
        result = service.write({"selections": {}})

        assert result.success is False
        assert result.seq is None
        assert {e.field for e in result.errors} == {"colorPicks", "typeScale"}
        assert store.get_state() is None
        assert bus.last_sequence == 0

    def test_store_failure_propagates(
        self, bus: EventBus, catalog: Catalog, state_payload: dict
    ) -> None:
        service = StateSyncService(FailingStore(), bus, catalog)

        with pytest.raises(StateStoreError):
            service.write(state_payload)

        assert bus.last_sequence == 0

    def test_run_entry_point(
        self, store: InMemoryStateStore, bus: EventBus, catalog: Catalog, state_payload: dict
    ) -> None:
        result = run(WriteStateInput(payload=state_payload), store=store, publisher=bus, catalog=catalog)

        assert result.success is True
        assert store.get_state() is not None


class TestReads:
    def test_no_state(self, service: StateSyncService) -> None:
        assert service.get_state() is None
        assert service.get_config() is None
        assert service.export("css") is None

    def test_config_recomputed_from_state(
        self, service: StateSyncService, full_state: DesignKitState
    ) -> None:
        service.set_state(full_state)

        config = service.get_config()

        assert config is not None
        assert config.tokens.colors.light.primary == "#0284c7"
        assert service.get_config() == config

    def test_config_follows_latest_write(
        self, service: StateSyncService, full_state: DesignKitState
    ) -> None:
        service.set_state(full_state)
        service.set_state(full_state.model_copy(update={"selections": {"colors": "forest"}}))

        config = service.get_config()

        assert config is not None
        assert config.tokens.colors.light.primary == "#15803d"
        assert config.tokens.typography is None

    def test_export(self, service: StateSyncService, full_state: DesignKitState) -> None:
        service.set_state(full_state)

        result = service.export("swift")

        assert result is not None
        assert result.filename == "Theme.swift"
        assert "extension Color {" in result.content

    def test_unknown_format_checked_before_state(self, service: StateSyncService) -> None:
        with pytest.raises(UnknownFormatError):
            service.export("pdf")
