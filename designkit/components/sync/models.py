"""
Sync component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from designkit.components.selections import ValidationError
from designkit.core.entities import DesignKitState


@dataclass(frozen=True)
class WriteStateInput:
    """A raw write body, validated before it replaces the stored state."""

    payload: Any


@dataclass(frozen=True)
class WriteStateOutput:
    """Result of a write; ``seq`` is the notification sequence number."""

    state: DesignKitState | None
    seq: int | None = None
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True
