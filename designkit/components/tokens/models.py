"""
Tokens component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TokenLookupInput:
    """Input for a dot-path token lookup."""

    tokens: Mapping[str, Any]
    path: str


@dataclass(frozen=True)
class TokenLookupResult:
    """Outcome of a lookup. ``available_keys`` lists top-level keys when not found."""

    path: str
    found: bool
    value: Any = None
    missing_segment: str | None = None
    available_keys: list[str] = field(default_factory=list)
