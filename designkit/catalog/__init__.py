"""
Style catalog - categories, items and type scale presets.
"""

from .catalog import Catalog, CatalogLoadError
from .loader import (
    DATA_DIR,
    load_catalog,
    load_categories,
    load_default_catalog,
    load_default_categories,
    load_items,
)
from .models import CategoriesFile, CategoryGroup, ItemsFile
from .typescale import (
    DEFAULT_PRESET_ID,
    TYPE_SCALE_PRESETS,
    TypeScalePreset,
    build_typography,
    generate_type_scale,
    get_preset,
)

__all__ = [
    # Catalog
    "Catalog",
    "CatalogLoadError",
    "DATA_DIR",
    "load_catalog",
    "load_categories",
    "load_default_catalog",
    "load_default_categories",
    "load_items",
    # Schemas
    "CategoriesFile",
    "CategoryGroup",
    "ItemsFile",
    # Type scale
    "TypeScalePreset",
    "TYPE_SCALE_PRESETS",
    "DEFAULT_PRESET_ID",
    "get_preset",
    "generate_type_scale",
    "build_typography",
]
