"""
Resolve component - builds the canonical DesignConfig from raw state.

Pure and total: any structurally valid state yields a config, including
the empty state (all default colors, no other token groups).

Invariants:
- Selections pointing at unknown categories or item ids are dropped
- Component data is resolved against the active mode's colors
- Output order follows the catalog's category order, never insertion order
- No timestamps: equal inputs give byte-identical output
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from designkit.catalog.typescale import build_typography
from designkit.components.colors import resolve_colors
from designkit.components.placeholders import resolve_data
from designkit.core.entities import (
    ALL_COLOR_KEYS,
    CatalogItem,
    CategoryMeta,
    ColorPicks,
    DesignConfig,
    DesignKitState,
    DesignTokens,
    FontPairing,
    PartialPalette,
    RadiusData,
    SelectedItem,
    ShadowData,
    SpacingData,
)

from .models import BuildConfigInput, BuildConfigOutput, DroppedSelection
from .ports import CatalogPort

logger = logging.getLogger(__name__)

# Foundation categories copied into tokens as-is, keyed by category id.
TOKEN_GROUPS: dict[str, type[BaseModel]] = {
    "spacing": SpacingData,
    "radius": RadiusData,
    "shadows": ShadowData,
}


def _collect_selected(
    state: DesignKitState, catalog: CatalogPort
) -> tuple[list[tuple[CategoryMeta, CatalogItem]], list[DroppedSelection]]:
    selected: list[tuple[CategoryMeta, CatalogItem]] = []
    dropped: list[DroppedSelection] = []
    known: set[str] = set()

    for meta in catalog.categories():
        known.add(meta.id)
        item_id = state.selections.get(meta.id)
        if item_id is None:
            continue
        item = catalog.get_item(meta.id, item_id)
        if item is None:
            dropped.append(DroppedSelection(meta.id, item_id, "unknown_item"))
            continue
        selected.append((meta, item))

    for category, item_id in state.selections.items():
        if category not in known:
            dropped.append(DroppedSelection(category, item_id, "unknown_category"))

    for entry in dropped:
        logger.debug(
            "Dropping stale selection %s=%s (%s)", entry.category, entry.item_id, entry.reason
        )
    return selected, dropped


def _typed(item: CatalogItem, schema: type[BaseModel]) -> Any:
    """Validate foundation data, or None if the item does not fit its token shape."""
    try:
        return schema.model_validate(item.data)
    except PydanticValidationError as e:
        logger.warning(
            "Ignoring %s item '%s': data does not match token shape (%d errors)",
            item.category,
            item.id,
            e.error_count(),
        )
        return None


def _canonical_picks(picks: ColorPicks) -> ColorPicks:
    """Order pick keys by the color model so equal picks dump identically."""
    rank = {key: index for index, key in enumerate(ALL_COLOR_KEYS)}

    def ordered(mode_picks: dict[str, str]) -> dict[str, str]:
        keys = sorted(mode_picks, key=lambda k: (rank.get(k, len(rank)), k))
        return {k: mode_picks[k] for k in keys}

    return ColorPicks(light=ordered(picks.light), dark=ordered(picks.dark))


def run_build(inp: BuildConfigInput) -> BuildConfigOutput:
    """Resolve state against the catalog, reporting dropped selections."""
    state = inp.state
    selected, dropped = _collect_selected(state, inp.catalog)
    by_category = {meta.id: item for meta, item in selected}

    palette_item = by_category.get("colors")
    palette = _typed(palette_item, PartialPalette) if palette_item else None
    colors = resolve_colors(state.color_picks, palette)
    active = colors.mode(state.color_mode)

    token_groups: dict[str, Any] = {}
    typography_item = by_category.get("typography")
    if typography_item is not None:
        pairing = _typed(typography_item, FontPairing)
        if pairing is not None:
            token_groups["typography"] = build_typography(pairing, state.type_scale)
    for category, schema in TOKEN_GROUPS.items():
        item = by_category.get(category)
        if item is not None:
            token_groups[category] = _typed(item, schema)

    tokens = DesignTokens(colors=colors, **{k: v for k, v in token_groups.items() if v is not None})

    config = DesignConfig(
        color_mode=state.color_mode,
        type_scale=state.type_scale,
        selections={meta.id: item.id for meta, item in selected},
        color_picks=_canonical_picks(state.color_picks),
        tokens=tokens,
        components={meta.id: resolve_data(item.data, active) for meta, item in selected},
        selected_items={
            meta.id: SelectedItem(
                id=item.id,
                name=item.name,
                description=item.description,
                category_label=meta.label,
                category_description=meta.description,
            )
            for meta, item in selected
        },
    )
    return BuildConfigOutput(config=config, dropped=dropped)


def build_config(state: DesignKitState, catalog: CatalogPort) -> DesignConfig:
    """Build the resolved token document for a state snapshot."""
    return run_build(BuildConfigInput(state=state, catalog=catalog)).config


def run(inp: BuildConfigInput) -> BuildConfigOutput:
    """Main entry point for the resolve component."""
    return run_build(inp)
