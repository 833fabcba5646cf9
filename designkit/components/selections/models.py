"""
Selections component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from designkit.core.entities import DesignKitState


class InvalidColorKeyError(ValueError):
    """Raised when a color pick targets a key outside the color model."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"Unknown color key '{key}': use a base color (e.g. 'primary') "
            "or 'semantic.<success|warning|error|info>'"
        )


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidateStateInput:
    """Input for validating an incoming state payload."""

    payload: Any


@dataclass(frozen=True)
class ValidateStateOutput:
    """Output from validating a state payload."""

    state: DesignKitState | None
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True
