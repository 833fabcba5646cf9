"""
Colors component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from designkit.core.entities import ColorMode, ColorModeName, ColorPaletteData, PartialPalette


@dataclass(frozen=True)
class MergeModeInput:
    """Input for resolving one mode's colors."""

    mode: ColorModeName
    palette: ColorPaletteData | PartialPalette | None = None
    picks: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MergeModeOutput:
    """Output from resolving one mode's colors."""

    colors: ColorMode
    # Wire key -> "pick" | "palette" | "default"
    sources: dict[str, str] = field(default_factory=dict)
