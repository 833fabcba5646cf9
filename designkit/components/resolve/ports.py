"""
Resolve component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from designkit.core.entities import CatalogItem, CategoryMeta


class CatalogPort(Protocol):
    """Read-only view of the style catalog."""

    def categories(self) -> tuple[CategoryMeta, ...]:
        """All categories in canonical order."""
        ...

    def get_item(self, category: str, item_id: str) -> CatalogItem | None:
        """Look up an item, or None if the id is unknown."""
        ...
