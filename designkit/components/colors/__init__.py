"""
Colors component - layered color model resolution.
"""

from .component import (
    DEFAULT_DARK,
    DEFAULT_LIGHT,
    DEFAULT_PRIMARY_SCALE,
    default_mode,
    merge_mode,
    merge_mode_with_sources,
    merge_primary_scale,
    palette_to_picks,
    resolve_colors,
    run,
)
from .models import MergeModeInput, MergeModeOutput

__all__ = [
    # Entry points
    "run",
    "merge_mode",
    "merge_mode_with_sources",
    "merge_primary_scale",
    "resolve_colors",
    "palette_to_picks",
    # Defaults
    "DEFAULT_LIGHT",
    "DEFAULT_DARK",
    "DEFAULT_PRIMARY_SCALE",
    "default_mode",
    # Models
    "MergeModeInput",
    "MergeModeOutput",
]
