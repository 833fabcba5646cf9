"""
Read-only bridge for coding agents: HTTP client with disk fallback, MCP server.
"""

from .client import (
    BackendError,
    ConfigResult,
    DesignKitClient,
    NoData,
    RawSnapshot,
    Resolved,
)

__all__ = [
    "DesignKitClient",
    "BackendError",
    "ConfigResult",
    "Resolved",
    "RawSnapshot",
    "NoData",
]
