"""
Catalog loader - reads packaged YAML and validates it with pydantic.

Fails fast: any missing file, YAML syntax error or schema violation
raises CatalogLoadError with the offending file named.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from designkit.core.entities import CatalogItem, CategoryMeta

from .catalog import Catalog, CatalogLoadError
from .models import CategoriesFile, ItemsFile, validate_foundation_data

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
CATEGORIES_FILE = "categories.yaml"


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML syntax in {path.name}: {e}") from e


def load_categories(data_dir: Path = DATA_DIR) -> CategoriesFile:
    """Load the category index (groups, categories, item file list)."""
    path = data_dir / CATEGORIES_FILE
    try:
        return CategoriesFile.model_validate(_read_yaml(path))
    except ValidationError as e:
        raise CatalogLoadError(f"Category index validation failed:\n{e}") from e


def load_items(path: Path) -> list[CatalogItem]:
    """Load and validate one item file."""
    try:
        parsed = ItemsFile.model_validate(_read_yaml(path))
    except ValidationError as e:
        raise CatalogLoadError(f"Item file {path.name} validation failed:\n{e}") from e

    for item in parsed.items:
        try:
            validate_foundation_data(item.category, item.data)
        except ValidationError as e:
            raise CatalogLoadError(
                f"Item '{item.category}/{item.id}' in {path.name} has invalid data:\n{e}"
            ) from e

    return parsed.items


def load_catalog(data_dir: Path = DATA_DIR) -> Catalog:
    """Load the full catalog from a data directory."""
    index = load_categories(data_dir)

    items: list[CatalogItem] = []
    for name in index.item_files:
        items.extend(load_items(data_dir / name))

    catalog = Catalog(index.categories, items, version=index.version)
    logger.info(
        "Loaded catalog version %s: %d categories, %d items",
        catalog.version,
        len(catalog.categories()),
        len(catalog),
    )
    return catalog


@lru_cache
def load_default_categories() -> tuple[CategoryMeta, ...]:
    return tuple(load_categories().categories)


@lru_cache
def load_default_catalog() -> Catalog:
    """Load the packaged catalog once per process."""
    return load_catalog()
