"""
End-to-end flow: browser write -> API -> disk mirror -> bridge reads.

Uses the real dependency wiring with the state directory pointed at a
temp dir, so the API's disk mirror is the file the bridge falls back to.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from designkit.adapters.state_file import read_state_file
from designkit.api import deps
from designkit.api.main import create_app
from designkit.bridge import DesignKitClient, RawSnapshot, Resolved
from designkit.bridge.server import FALLBACK_LABEL, dispatch

PREFIX = "/api/designkit"


def _reset_caches() -> None:
    deps.get_settings.cache_clear()
    deps._store_for.cache_clear()
    deps.get_event_bus.cache_clear()


@pytest.fixture
def state_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("DESIGNKIT_STATE_DIR", str(tmp_path))
    monkeypatch.delenv("DESIGNKIT_CATALOG_DIR", raising=False)
    _reset_caches()
    yield tmp_path
    _reset_caches()


@pytest.fixture
def api(state_dir: Path) -> Iterator[TestClient]:
    with TestClient(create_app()) as client:
        yield client


def _bridge_over(api: TestClient, state_dir: Path) -> DesignKitClient:
    """Bridge client whose HTTP calls are answered by the in-process API."""

    def forward(request: httpx.Request) -> httpx.Response:
        response = api.get(request.url.path)
        return httpx.Response(
            response.status_code,
            headers={"content-type": response.headers["content-type"]},
            content=response.content,
        )

    return DesignKitClient(
        f"http://testserver{PREFIX}",
        state_dir / "state.json",
        transport=httpx.MockTransport(forward),
    )


def _offline_bridge(state_dir: Path) -> DesignKitClient:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return DesignKitClient(
        "http://127.0.0.1:9/api/designkit",
        state_dir / "state.json",
        transport=httpx.MockTransport(refuse),
    )


class TestDesignKitFlow:
    def test_write_is_mirrored_to_disk(
        self, api: TestClient, state_dir: Path, state_payload: dict
    ) -> None:
        assert api.post(f"{PREFIX}/state", json=state_payload).status_code == 200

        mirrored = read_state_file(state_dir / "state.json")

        assert mirrored is not None
        assert mirrored.to_wire() == state_payload

    def test_bridge_reads_resolved_config(
        self, api: TestClient, state_dir: Path, state_payload: dict
    ) -> None:
        api.post(f"{PREFIX}/state", json=state_payload)

        with _bridge_over(api, state_dir) as bridge:
            result = bridge.fetch_config()
            css = bridge.fetch_export("css")

        assert isinstance(result, Resolved)
        assert result.config.tokens.colors.light.primary == "#ff0000"
        assert css == api.get(f"{PREFIX}/export/css").text

    def test_bridge_token_lookup(
        self, api: TestClient, state_dir: Path, state_payload: dict
    ) -> None:
        api.post(f"{PREFIX}/state", json=state_payload)

        with _bridge_over(api, state_dir) as bridge:
            text = dispatch(bridge, "designkit_get_token", {"path": "radius.card"})

        assert text == "12px"

    def test_bridge_falls_back_to_mirror(
        self, api: TestClient, state_dir: Path, state_payload: dict
    ) -> None:
        api.post(f"{PREFIX}/state", json=state_payload)

        with _offline_bridge(state_dir) as bridge:
            result = bridge.fetch_config()
            text = dispatch(bridge, "designkit_get_selections", {})

        assert isinstance(result, RawSnapshot)
        assert result.state.selections == state_payload["selections"]
        assert text.startswith(FALLBACK_LABEL)
        assert json.loads(text.split("\n\n", 1)[1]) == state_payload

    def test_restarted_api_recovers_mirror(
        self, state_dir: Path, state_payload: dict
    ) -> None:
        with TestClient(create_app()) as first:
            first.post(f"{PREFIX}/state", json=state_payload)

        _reset_caches()

        with TestClient(create_app()) as second:
            response = second.get(f"{PREFIX}/state")

        assert response.status_code == 200
        assert response.json() == state_payload

    def test_writes_advance_the_sequence(self, api: TestClient, state_payload: dict) -> None:
        seqs = [api.post(f"{PREFIX}/state", json=state_payload).json()["seq"] for _ in range(3)]

        assert seqs == sorted(seqs)
        assert len(set(seqs)) == 3
