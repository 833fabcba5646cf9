"""
DesignKit MCP server.

Exposes read-only tools over the stdio transport using the official MCP
SDK. Logging goes to stderr because stdout carries the protocol.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from designkit.components.export import valid_formats

from .client import BackendError, DesignKitClient, NoData, RawSnapshot, Resolved

logger = logging.getLogger(__name__)

SERVER_NAME = "designkit"

FALLBACK_LABEL = "[Fallback: raw state from disk, backend not reachable]"
FALLBACK_COLORS_LABEL = "[Fallback: raw color picks from disk]"

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}, "required": []}


def get_all_tools() -> list[Tool]:
    return [
        Tool(
            name="designkit_get_config",
            description=(
                "Get the full resolved DesignConfig (colors, typography, spacing, radius, "
                "shadows, component styles). Use this when building complete UI screens."
            ),
            inputSchema=_EMPTY_SCHEMA,
        ),
        Tool(
            name="designkit_get_colors",
            description=(
                "Get just the color system (light mode, dark mode, primary scale). "
                "Use when you only need colors."
            ),
            inputSchema=_EMPTY_SCHEMA,
        ),
        Tool(
            name="designkit_get_typography",
            description="Get font families and the full type scale.",
            inputSchema=_EMPTY_SCHEMA,
        ),
        Tool(
            name="designkit_get_selections",
            description=(
                "Get the raw selection ids per category without resolving tokens."
            ),
            inputSchema=_EMPTY_SCHEMA,
        ),
        Tool(
            name="designkit_get_export",
            description="Get the design tokens exported in a specific format.",
            inputSchema={
                "type": "object",
                "properties": {
                    "format": {
                        "type": "string",
                        "enum": valid_formats(),
                        "description": "Export format",
                    }
                },
                "required": ["format"],
            },
        ),
        Tool(
            name="designkit_get_token",
            description=(
                "Get a single design token by dot-path (e.g. 'colors.light.primary', "
                "'typography.headingFont', 'spacing.scale.4')."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Dot-separated token path, e.g. 'colors.light.primary'",
                    }
                },
                "required": ["path"],
            },
        ),
    ]


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


# --- Tool handlers (plain functions returning text) ---


def get_config_text(client: DesignKitClient) -> str:
    result = client.fetch_config()
    if isinstance(result, Resolved):
        return _dump(result.config.to_wire())
    if isinstance(result, RawSnapshot):
        return f"{FALLBACK_LABEL}\n\n{_dump(result.state.to_wire())}"
    return result.message


def get_colors_text(client: DesignKitClient) -> str:
    result = client.fetch_config()
    if isinstance(result, Resolved):
        return _dump(result.config.tokens.colors.to_wire())
    if isinstance(result, RawSnapshot):
        return f"{FALLBACK_COLORS_LABEL}\n\n{_dump(result.state.color_picks.to_wire())}"
    return result.message


def get_typography_text(client: DesignKitClient) -> str:
    result = client.fetch_config()
    if isinstance(result, Resolved):
        typography = result.config.tokens.typography
        if typography is None:
            return "No typography selected in DesignKit."
        return _dump(typography.to_wire())
    if isinstance(result, RawSnapshot):
        return (
            "Could not resolve typography: the backend is not reachable. "
            f"Selected typography id: {result.state.selections.get('typography', 'none')}"
        )
    return result.message


def get_selections_text(client: DesignKitClient) -> str:
    result = client.fetch_state()
    if isinstance(result, RawSnapshot):
        body = _dump(result.state.to_wire())
        return f"{FALLBACK_LABEL}\n\n{body}" if result.fallback else body
    return result.message


def get_export_text(client: DesignKitClient, format_id: str) -> str:
    try:
        return client.fetch_export(format_id)
    except BackendError as e:
        return f'Could not export format "{format_id}". {e}'


def get_token_text(client: DesignKitClient, path: str) -> str:
    result = client.lookup_token(path)
    if isinstance(result, NoData):
        return result.message
    if not result.found:
        keys = ", ".join(result.available_keys) or "none"
        return f'Token "{path}" not found. Available top-level keys: {keys}'
    if isinstance(result.value, dict | list):
        return _dump(result.value)
    return str(result.value)


def dispatch(client: DesignKitClient, name: str, arguments: dict[str, Any]) -> str:
    if name == "designkit_get_config":
        return get_config_text(client)
    if name == "designkit_get_colors":
        return get_colors_text(client)
    if name == "designkit_get_typography":
        return get_typography_text(client)
    if name == "designkit_get_selections":
        return get_selections_text(client)
    if name == "designkit_get_export":
        return get_export_text(client, str(arguments.get("format", "")))
    if name == "designkit_get_token":
        return get_token_text(client, str(arguments.get("path", "")))
    return _dump({"error": f"Unknown tool: {name}"})


async def call_tool_text(client: DesignKitClient, name: str, arguments: dict[str, Any]) -> str:
    """Run a tool in a worker thread; the client does blocking HTTP."""
    return await asyncio.to_thread(dispatch, client, name, arguments)


def create_server(client: DesignKitClient) -> Server:
    server = Server(SERVER_NAME)

    @server.list_tools()  # type: ignore[no-untyped-call]
    async def list_tools_handler() -> list[Tool]:
        return get_all_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        logger.debug("Tool call %s %s", name, arguments)
        text = await call_tool_text(client, name, arguments or {})
        return [TextContent(type="text", text=text)]

    return server


async def run_server(client: DesignKitClient) -> None:
    """Run the MCP server on stdio until the client disconnects."""
    server = create_server(client)
    logger.info("Starting DesignKit MCP server (backend %s)", client.http_url)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as e:
        logger.exception("MCP server error: %s", e)
        raise
    finally:
        client.close()
