from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from designkit.adapters.event_bus import EventBus
from designkit.adapters.memory import InMemoryStateStore, MirroredStateStore
from designkit.adapters.state_file import FileStateStore
from designkit.app_shell.config import Settings, get_settings
from designkit.catalog import Catalog, load_catalog, load_default_catalog
from designkit.components.sync import StateSyncService

__all__ = [
    "get_settings",
    "get_catalog",
    "get_store",
    "get_event_bus",
    "get_sync_service",
]


# --- Catalog ---
@lru_cache
def _catalog_from_dir(path: str) -> Catalog:
    return load_catalog(Path(path))


def get_catalog(settings: Settings = Depends(get_settings)) -> Catalog:
    if settings.catalog_dir is None:
        return load_default_catalog()
    return _catalog_from_dir(str(settings.catalog_dir))


# --- State store ---
# One store per state file for the lifetime of the process; the in-memory
# copy is authoritative and every write is mirrored to disk for the bridge.
@lru_cache
def _store_for(path: str) -> MirroredStateStore:
    return MirroredStateStore(InMemoryStateStore(), FileStateStore(path))


def get_store(settings: Settings = Depends(get_settings)) -> MirroredStateStore:
    return _store_for(str(settings.state_file))


# --- Sync channel ---
@lru_cache
def get_event_bus() -> EventBus:
    return EventBus()


# --- Component Services ---
def get_sync_service(
    store: MirroredStateStore = Depends(get_store),
    bus: EventBus = Depends(get_event_bus),
    catalog: Catalog = Depends(get_catalog),
) -> StateSyncService:
    """Get sync component service."""
    return StateSyncService(store=store, publisher=bus, catalog=catalog)
