"""
Resolve component - raw state to canonical DesignConfig.
"""

from .component import TOKEN_GROUPS, build_config, run, run_build
from .models import BuildConfigInput, BuildConfigOutput, DroppedSelection
from .ports import CatalogPort

__all__ = [
    # Entry points
    "run",
    "run_build",
    "build_config",
    # Models
    "BuildConfigInput",
    "BuildConfigOutput",
    "DroppedSelection",
    # Ports
    "CatalogPort",
    # Constants
    "TOKEN_GROUPS",
]
