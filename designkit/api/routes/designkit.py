"""
DesignKit sync API.

The browser UI writes raw state here; tools read the resolved config,
exports and change notifications.

- GET  /config            resolved config, 404 before the first write
- GET  /state             raw state, 404 before the first write
- POST /state             full-replace write, 400 with field errors
- GET  /export/{format}   one format as text, 400 for unknown formats
- GET  /events            Server-Sent Events stream
- GET  /catalog/categories
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse, StreamingResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from designkit.adapters.event_bus import EventBus
from designkit.api.deps import get_catalog, get_event_bus, get_settings, get_sync_service
from designkit.api.sse import SSE_HEADERS, event_stream
from designkit.app_shell.config import Settings
from designkit.catalog import Catalog
from designkit.components.export import UnknownFormatError
from designkit.components.selections import ValidationError
from designkit.components.sync import StateSyncService
from designkit.core.ports import StateStoreError

logger = logging.getLogger(__name__)

router = APIRouter()

NO_STATE_ERROR = "No state available"
NO_STATE_HINT = "Open DesignKit in the browser and make a selection first."


# --- Request/Response Models ---


class ValidationErrorResponse(BaseModel):
    """Validation error response."""

    field: str
    code: str
    message: str


class WriteStateResponse(BaseModel):
    ok: bool
    seq: int


# --- Helper Functions ---


def _no_state() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": NO_STATE_ERROR, "hint": NO_STATE_HINT},
    )


def validation_errors_to_response(errors: list[ValidationError]) -> list[dict[str, str]]:
    return [
        ValidationErrorResponse(field=e.field, code=e.code, message=e.message).model_dump()
        for e in errors
    ]


# --- Endpoints ---


@router.get("/config", summary="Resolved design config")
def get_config(service: StateSyncService = Depends(get_sync_service)) -> dict[str, Any]:
    """Recompute the resolved config from the current state."""
    config = service.get_config()
    if config is None:
        raise _no_state()
    return config.to_wire()


@router.get("/state", summary="Raw selection state")
def get_state(service: StateSyncService = Depends(get_sync_service)) -> dict[str, Any]:
    state = service.get_state()
    if state is None:
        raise _no_state()
    return state.to_wire()


@router.post(
    "/state",
    response_model=WriteStateResponse,
    summary="Replace the selection state",
    responses={400: {"description": "Validation errors with actionable messages"}},
)
async def post_state(
    request: Request,
    service: StateSyncService = Depends(get_sync_service),
) -> WriteStateResponse:
    """
    Replace the whole state and notify subscribers.

    Partial updates are rejected: the body must carry selections,
    colorPicks and typeScale.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Request body is not valid JSON",
                "hint": "Send the full state as a JSON object.",
            },
        ) from None

    try:
        result = await run_in_threadpool(service.write, payload)
    except StateStoreError as e:
        logger.error("State write failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "State could not be persisted", "hint": str(e)},
        ) from e

    if not result.success or result.seq is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid state: requires selections, colorPicks, typeScale",
                "hint": "Fix the listed fields and send the full state again.",
                "errors": validation_errors_to_response(result.errors),
            },
        )
    return WriteStateResponse(ok=True, seq=result.seq)


@router.get(
    "/export/{format}",
    response_class=PlainTextResponse,
    summary="Export the config in one format",
)
def get_export(
    format: str,
    service: StateSyncService = Depends(get_sync_service),
) -> PlainTextResponse:
    try:
        output = service.export(format)
    except UnknownFormatError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": f"Unknown format: {e.format_id}",
                "hint": f"Use one of: {', '.join(e.valid_formats)}",
                "valid_formats": e.valid_formats,
            },
        ) from e
    if output is None:
        raise _no_state()
    return PlainTextResponse(
        output.content,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'inline; filename="{output.filename}"'},
    )


@router.get("/events", summary="Change notifications (SSE)")
async def stream_events(
    request: Request,
    bus: EventBus = Depends(get_event_bus),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    return StreamingResponse(
        event_stream(
            bus,
            heartbeat_interval=settings.heartbeat_interval,
            is_disconnected=request.is_disconnected,
        ),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.get("/catalog/categories", summary="Category metadata in canonical order")
def get_categories(catalog: Catalog = Depends(get_catalog)) -> dict[str, Any]:
    return {
        "version": catalog.version,
        "categories": [
            {**meta.to_wire(), "itemCount": len(catalog.items(meta.id))}
            for meta in catalog.categories()
        ],
    }
