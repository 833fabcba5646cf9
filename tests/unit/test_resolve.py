"""
Config builder tests: raw state in, canonical DesignConfig out.
"""

from __future__ import annotations

import json
import logging

import pytest

from designkit.catalog import Catalog
from designkit.components.colors import DEFAULT_DARK, DEFAULT_LIGHT, DEFAULT_PRIMARY_SCALE
from designkit.components.placeholders import resolve_data
from designkit.components.resolve import BuildConfigInput, build_config, run
from designkit.core.entities import CatalogItem, ColorPicks, DesignKitState


class TestEmptyState:
    def test_defaults_only(self, catalog: Catalog, empty_state: DesignKitState) -> None:
        config = build_config(empty_state, catalog)

        assert config.tokens.colors.light == DEFAULT_LIGHT
        assert config.tokens.colors.primary_scale == DEFAULT_PRIMARY_SCALE
        assert config.tokens.typography is None
        assert config.tokens.spacing is None
        assert config.components == {}
        assert config.selected_items == {}

    def test_wire_shape_omits_unselected_groups(
        self, catalog: Catalog, empty_state: DesignKitState
    ) -> None:
        wire = build_config(empty_state, catalog).to_wire()

        assert list(wire["tokens"]) == ["colors"]
        assert wire["name"] == "DesignKit Export"
        assert wire["colorMode"] == "light"


class TestTokenGroups:
    def test_all_groups_present(self, catalog: Catalog, full_state: DesignKitState) -> None:
        tokens = build_config(full_state, catalog).tokens

        assert tokens.colors.light.primary == "#0284c7"
        assert tokens.typography is not None
        assert tokens.typography.heading_font == "Inter"
        assert tokens.typography.scale_name == "Default"
        assert tokens.spacing is not None
        assert tokens.spacing.base_unit == 8
        assert tokens.radius is not None
        assert tokens.radius.button == "8px"
        assert tokens.shadows is not None

    def test_type_scale_preset_applied(self, catalog: Catalog, full_state: DesignKitState) -> None:
        state = full_state.model_copy(update={"type_scale": "dramatic"})

        typography = build_config(state, catalog).tokens.typography

        assert typography is not None
        assert typography.scale_ratio == 1.5

    def test_picks_override_palette(self, catalog: Catalog, full_state: DesignKitState) -> None:
        state = full_state.model_copy(
            update={"color_picks": ColorPicks(light={"primary": "#ff0000"})}
        )

        colors = build_config(state, catalog).tokens.colors

        assert colors.light.primary == "#ff0000"
        assert colors.dark.primary == "#38bdf8"


class TestComponents:
    def test_markers_resolved_against_active_mode(
        self, catalog: Catalog, full_state: DesignKitState
    ) -> None:
        light = build_config(full_state, catalog).components["buttons"]
        dark_state = full_state.model_copy(update={"color_mode": "dark"})
        dark = build_config(dark_state, catalog).components["buttons"]

        assert light["css"]["default"]["backgroundColor"] == "#0284c7"
        assert dark["css"]["default"]["backgroundColor"] == "#38bdf8"
        assert light["css"]["hover"]["backgroundColor"] == "rgba(2,132,199,0.9)"

    def test_unselected_categories_omitted(
        self, catalog: Catalog, full_state: DesignKitState
    ) -> None:
        config = build_config(full_state, catalog)

        assert "cards" not in config.components
        assert "cards" not in config.selected_items

    def test_selected_items_carry_category_labels(
        self, catalog: Catalog, full_state: DesignKitState
    ) -> None:
        selected = build_config(full_state, catalog).selected_items["inputs"]

        assert selected.id == "range-slider"
        assert selected.name == "Range Slider"
        assert selected.category_label == "Inputs & Forms"


class TestStaleSelections:
    def test_unknown_ids_dropped(self, catalog: Catalog, caplog: pytest.LogCaptureFixture) -> None:
        state = DesignKitState(
            selections={"buttons": "retired-style", "not-a-category": "x", "radius": "soft"}
        )

        with caplog.at_level(logging.DEBUG, logger="designkit.components.resolve.component"):
            result = run(BuildConfigInput(state=state, catalog=catalog))

        assert result.config.selections == {"radius": "soft"}
        assert {(d.category, d.reason) for d in result.dropped} == {
            ("buttons", "unknown_item"),
            ("not-a-category", "unknown_category"),
        }
        assert "retired-style" in caplog.text

    def test_invalid_foundation_data_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        broken = CatalogItem(
            id="broken", category="radius", name="Broken", description="", data={"sm": "2px"}
        )
        fixture = Catalog.from_items([broken])
        state = DesignKitState(selections={"radius": "broken"})

        with caplog.at_level(logging.WARNING):
            config = build_config(state, fixture)

        assert config.tokens.radius is None
        assert "broken" in caplog.text

    def test_palette_with_gaps_falls_back_per_field(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        partial = CatalogItem(
            id="partial",
            category="colors",
            name="Partial",
            description="",
            data={
                "light": {"primary": "#111111", "semantic": {"error": "#aa0000"}},
                "dark": {"accent": "#222222"},
                "primaryScale": {"500": "#333333"},
            },
        )
        fixture = Catalog.from_items([partial])
        state = DesignKitState(selections={"colors": "partial"})

        with caplog.at_level(logging.WARNING):
            colors = build_config(state, fixture).tokens.colors

        assert colors.light.primary == "#111111"
        assert colors.light.accent == DEFAULT_LIGHT.accent
        assert colors.light.semantic.error == "#aa0000"
        assert colors.light.semantic.info == DEFAULT_LIGHT.semantic.info
        assert colors.dark.accent == "#222222"
        assert colors.dark.primary == DEFAULT_DARK.primary
        assert colors.primary_scale.s500 == "#333333"
        assert colors.primary_scale.s50 == DEFAULT_PRIMARY_SCALE.s50
        assert "Ignoring" not in caplog.text


class TestDeterminism:
    def test_same_state_same_bytes(self, catalog: Catalog, full_state: DesignKitState) -> None:
        first = json.dumps(build_config(full_state, catalog).to_wire())
        second = json.dumps(build_config(full_state, catalog).to_wire())
        assert first == second

    def test_insertion_order_does_not_matter(self, catalog: Catalog) -> None:
        forward = DesignKitState(
            selections={"colors": "ocean", "buttons": "outline", "radius": "soft"},
            color_picks=ColorPicks(light={"accent": "#111111", "primary": "#222222"}),
        )
        backward = DesignKitState(
            selections={"radius": "soft", "buttons": "outline", "colors": "ocean"},
            color_picks=ColorPicks(light={"primary": "#222222", "accent": "#111111"}),
        )

        assert json.dumps(build_config(forward, catalog).to_wire()) == json.dumps(
            build_config(backward, catalog).to_wire()
        )

    def test_components_follow_category_order(
        self, catalog: Catalog, full_state: DesignKitState
    ) -> None:
        config = build_config(full_state, catalog)

        assert list(config.components) == [
            "colors",
            "typography",
            "spacing",
            "radius",
            "shadows",
            "buttons",
            "inputs",
            "button-animations",
        ]


class TestPickWithFoundation:
    def test_radius_with_primary_pick(self, catalog: Catalog) -> None:
        state = DesignKitState(
            selections={"radius": "pill"},
            color_picks=ColorPicks(light={"primary": "#ff0000"}),
            type_scale="default",
        )

        config = build_config(state, catalog)

        pill = catalog.get_item("radius", "pill")
        assert pill is not None
        assert config.tokens.colors.light.primary == "#ff0000"
        assert config.components["radius"] == resolve_data(pill.data, config.tokens.colors.light)
        assert "__" not in json.dumps(config.components["radius"])
