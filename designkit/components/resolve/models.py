"""
Resolve component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from designkit.core.entities import DesignConfig, DesignKitState

from .ports import CatalogPort


@dataclass(frozen=True)
class BuildConfigInput:
    """Input for building the resolved config."""

    state: DesignKitState
    catalog: CatalogPort


@dataclass(frozen=True)
class DroppedSelection:
    """A selection that could not be resolved against the catalog."""

    category: str
    item_id: str
    reason: str


@dataclass(frozen=True)
class BuildConfigOutput:
    """Output from building the resolved config."""

    config: DesignConfig
    dropped: list[DroppedSelection] = field(default_factory=list)
