"""
Schemas for the packaged catalog files.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from designkit.core.entities import (
    CatalogItem,
    CategoryGroupId,
    CategoryMeta,
    ColorPaletteData,
    DomainModel,
    FontPairing,
    RadiusData,
    ShadowData,
    SpacingData,
)


class CategoryGroup(DomainModel):
    id: CategoryGroupId
    label: str


class CategoriesFile(BaseModel):
    version: str
    groups: list[CategoryGroup]
    categories: list[CategoryMeta]
    item_files: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ItemsFile(BaseModel):
    items: list[CatalogItem]

    model_config = ConfigDict(extra="forbid")


# Foundation categories whose data has a fixed token shape.
FOUNDATION_SCHEMAS: dict[str, type[BaseModel]] = {
    "colors": ColorPaletteData,
    "typography": FontPairing,
    "spacing": SpacingData,
    "radius": RadiusData,
    "shadows": ShadowData,
}


def validate_foundation_data(category: str, data: dict[str, Any]) -> None:
    """Raise pydantic.ValidationError if a foundation item has the wrong shape."""
    schema = FOUNDATION_SCHEMAS.get(category)
    if schema is not None:
        schema.model_validate(data)
