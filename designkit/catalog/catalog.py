"""
Immutable, versioned catalog of style items.

Built once at startup and passed to the config builder as a read-only
dependency. Lookups are by (category, item id).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from types import MappingProxyType

from designkit.core.entities import CatalogItem, CategoryMeta


class CatalogLoadError(Exception):
    """Raised when catalog data is missing, malformed or inconsistent."""


class Catalog:
    def __init__(
        self,
        categories: Sequence[CategoryMeta],
        items: Iterable[CatalogItem],
        version: str = "0",
    ) -> None:
        self._version = version
        self._categories = tuple(categories)
        self._meta = MappingProxyType({meta.id: meta for meta in self._categories})

        index: dict[str, dict[str, CatalogItem]] = {meta.id: {} for meta in self._categories}
        for item in items:
            bucket = index.get(item.category)
            if bucket is None:
                raise CatalogLoadError(
                    f"Item '{item.id}' has unknown category '{item.category}'"
                )
            if item.id in bucket:
                raise CatalogLoadError(
                    f"Duplicate item id '{item.id}' in category '{item.category}'"
                )
            bucket[item.id] = item

        self._items = MappingProxyType(
            {category: MappingProxyType(bucket) for category, bucket in index.items()}
        )

    @classmethod
    def from_items(
        cls,
        items: Iterable[CatalogItem],
        categories: Sequence[CategoryMeta] | None = None,
        version: str = "fixture",
    ) -> Catalog:
        """Build a catalog from in-memory items, defaulting to the packaged categories."""
        if categories is None:
            from .loader import load_default_categories

            categories = load_default_categories()
        return cls(categories, items, version=version)

    @property
    def version(self) -> str:
        return self._version

    def categories(self) -> tuple[CategoryMeta, ...]:
        """All categories in canonical order."""
        return self._categories

    def category_ids(self) -> tuple[str, ...]:
        return tuple(meta.id for meta in self._categories)

    def category_meta(self, category: str) -> CategoryMeta | None:
        return self._meta.get(category)

    def items(self, category: str) -> tuple[CatalogItem, ...]:
        bucket = self._items.get(category)
        return tuple(bucket.values()) if bucket is not None else ()

    def get_item(self, category: str, item_id: str) -> CatalogItem | None:
        bucket = self._items.get(category)
        if bucket is None:
            return None
        return bucket.get(item_id)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._items.values())

    def __repr__(self) -> str:
        return f"Catalog(version={self._version!r}, items={len(self)})"
