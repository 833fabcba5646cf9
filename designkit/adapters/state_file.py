"""
File-backed state store.

Mirrors the latest DesignKitState to a JSON file so that a reader in a
different process (the tool-calling bridge) can still see the last known
state when the HTTP backend is down.

Invariants:
- Writes are atomic: a temp file is renamed over the target
- A missing or unreadable file reads as "no state", never as an error
- Write failures raise StateStoreError
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from designkit.core.entities import DesignKitState
from designkit.core.ports.state import StateStoreError

logger = logging.getLogger(__name__)

STATE_FILENAME = "state.json"


def read_state_file(path: Path) -> DesignKitState | None:
    """Parse a state mirror file; None if it is absent or unusable."""
    if not path.exists():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        return DesignKitState.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Ignoring unreadable state file %s: %s", path, e)
        return None


class FileStateStore:
    """StateStorePort backed by a single JSON file."""

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        if create_dirs:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def get_state(self) -> DesignKitState | None:
        with self._lock:
            return read_state_file(self.path)

    def set_state(self, state: DesignKitState) -> None:
        data = json.dumps(state.to_wire(), indent=2, ensure_ascii=False)
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(
                    dir=self.path.parent, prefix=".state-", suffix=".tmp"
                )
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as f:
                        f.write(data)
                    os.replace(tmp_name, self.path)
                except BaseException:
                    Path(tmp_name).unlink(missing_ok=True)
                    raise
            except OSError as e:
                raise StateStoreError(f"Could not write state to {self.path}: {e}") from e
        logger.debug("Wrote state mirror to %s", self.path)
