"""
HTTP client for the DesignKit API with on-disk fallback.

Outcomes of a config read:
- Resolved: the backend answered with a resolved config
- RawSnapshot: the backend failed and the disk mirror held a raw state
- NoData: neither source had anything

Each call makes at most one request; there are no retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from designkit.adapters.state_file import read_state_file
from designkit.components.tokens import TokenLookupResult, lookup_token
from designkit.core.entities import DesignConfig, DesignKitState

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

NO_DATA_MESSAGE = (
    "No DesignKit state available. Open DesignKit in the browser and make "
    "some selections first."
)


class BackendError(Exception):
    """The HTTP backend could not be reached or returned an error."""


@dataclass(frozen=True)
class Resolved:
    config: DesignConfig


@dataclass(frozen=True)
class RawSnapshot:
    """
    Raw state, unresolved.

    ``fallback`` is True when it came from the disk mirror because the
    backend failed; ``reason`` then says why.
    """

    state: DesignKitState
    fallback: bool = True
    reason: str | None = None


@dataclass(frozen=True)
class NoData:
    message: str


ConfigResult = Resolved | RawSnapshot | NoData


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    detail = body.get("detail", body) if isinstance(body, dict) else body
    if isinstance(detail, dict):
        return " ".join(str(detail[k]) for k in ("error", "hint") if detail.get(k))
    return str(detail)


class DesignKitClient:
    def __init__(
        self,
        http_url: str,
        state_file: str | Path,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.http_url = http_url.rstrip("/")
        self.state_file = Path(state_file)
        self.client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> DesignKitClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- HTTP ---

    def _get(self, path: str) -> httpx.Response:
        url = f"{self.http_url}{path}"
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise BackendError(f"Backend unreachable at {self.http_url}: {e}") from e
        if response.status_code != 200:
            raise BackendError(f"HTTP {response.status_code}: {_error_detail(response)}")
        return response

    def _get_json(self, path: str) -> Any:
        response = self._get(path)
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"Backend returned invalid JSON for {path}") from e

    def _disk_fallback(self, reason: str) -> RawSnapshot | NoData:
        state = read_state_file(self.state_file)
        if state is None:
            logger.warning("Backend failed (%s) and no state at %s", reason, self.state_file)
            return NoData(f"{NO_DATA_MESSAGE} ({reason})")
        logger.warning("Backend failed (%s); using disk snapshot %s", reason, self.state_file)
        return RawSnapshot(state=state, fallback=True, reason=reason)

    # --- Reads ---

    def fetch_config(self) -> ConfigResult:
        try:
            payload = self._get_json("/config")
            return Resolved(DesignConfig.model_validate(payload))
        except PydanticValidationError as e:
            reason = f"Backend returned an unexpected config shape: {e.error_count()} errors"
        except BackendError as e:
            reason = str(e)
        return self._disk_fallback(reason)

    def fetch_state(self) -> RawSnapshot | NoData:
        try:
            payload = self._get_json("/state")
            return RawSnapshot(state=DesignKitState.model_validate(payload), fallback=False)
        except PydanticValidationError as e:
            reason = f"Backend returned an unexpected state shape: {e.error_count()} errors"
        except BackendError as e:
            reason = str(e)
        return self._disk_fallback(reason)

    def fetch_export(self, format_id: str) -> str:
        """
        Exported text for one format.

        Raises:
            BackendError: backend unreachable, no state, or unknown format.
        """
        return self._get(f"/export/{format_id}").text

    def lookup_token(self, path: str) -> TokenLookupResult | NoData:
        """Dot-path lookup in the resolved tokens; needs a reachable backend."""
        result = self.fetch_config()
        if isinstance(result, NoData):
            return result
        if isinstance(result, RawSnapshot):
            return NoData(
                "Token lookup needs the resolved config and the backend is not "
                f"reachable ({result.reason})."
            )
        return lookup_token(result.config.tokens.to_wire(), path)
