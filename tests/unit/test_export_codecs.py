"""
Format codec tests.

Each codec is checked for the tokens it must carry, its naming and
escaping rules, and its "not selected" output for absent groups.
"""

from __future__ import annotations

import json

import pytest

from designkit.catalog import Catalog
from designkit.components.export import (
    export_claude_md,
    export_css,
    export_flutter,
    export_json,
    export_kotlin,
    export_react_native,
    export_swift,
    export_tailwind,
)
from designkit.components.resolve import build_config
from designkit.core.entities import ColorPicks, DesignConfig, DesignKitState, SpacingData

TRICKY_FONT = 'Bob\'s "Font" $x'


@pytest.fixture
def config(catalog: Catalog, full_state: DesignKitState) -> DesignConfig:
    return build_config(full_state, catalog)


@pytest.fixture
def empty_config(catalog: Catalog, empty_state: DesignKitState) -> DesignConfig:
    return build_config(empty_state, catalog)


@pytest.fixture
def tricky_config(config: DesignConfig) -> DesignConfig:
    """Config with a font name that needs escaping and unusual values."""
    assert config.tokens.typography is not None
    typography = config.tokens.typography.model_copy(update={"heading_font": TRICKY_FONT})
    spacing = SpacingData(base_unit=4, scale={"half": "50%", "sm": "0.5rem"})
    tokens = config.tokens.model_copy(update={"typography": typography, "spacing": spacing})
    return config.model_copy(update={"tokens": tokens})


class TestJson:
    def test_round_trips_wire_shape(self, config: DesignConfig) -> None:
        output = export_json(config)

        assert json.loads(output) == config.to_wire()
        assert DesignConfig.model_validate(json.loads(output)) == config
        assert output.endswith("}\n")

    def test_camel_case_keys(self, config: DesignConfig) -> None:
        data = json.loads(export_json(config))

        assert "selectedItems" in data
        assert "surfaceAlt" in data["tokens"]["colors"]["light"]
        assert "2xl" in data["tokens"]["radius"]


class TestCss:
    def test_color_variables(self, config: DesignConfig) -> None:
        css = export_css(config)

        assert "  --color-surface-alt: #e0f2fe;" in css
        assert "@media (prefers-color-scheme: dark) {" in css
        assert "    --color-primary: #38bdf8;" in css
        assert "  --color-semantic-error: #dc2626;" in css
        assert "  --color-primary-50: #f0f9ff;" in css

    def test_token_groups(self, config: DesignConfig) -> None:
        css = export_css(config)

        assert "  --font-heading: 'Inter', sans-serif;" in css
        assert "  --font-mono: 'JetBrains Mono', monospace;" in css
        assert "  --text-h1-size: 2.5rem;" in css
        assert "--text-body-small-size:" in css
        assert "  --space-2xl: 48px;" in css
        assert "  --radius-button: 8px;" in css
        assert "--shadow-inner: inset" in css

    def test_motion(self, config: DesignConfig) -> None:
        css = export_css(config)

        assert "  --ease-button: cubic-bezier(0.25, 0.46, 0.45, 0.94);" in css
        assert "  --duration-button: 150ms;" in css
        assert "@keyframes dk-btn-scale-down {" in css

    def test_input_error_state_uses_semantic_color(
        self, catalog: Catalog, full_state: DesignKitState
    ) -> None:
        selections = {**full_state.selections, "inputs": "outlined-text"}
        state = full_state.model_copy(update={"selections": selections})

        css = export_css(build_config(state, catalog))

        assert (
            ".dk-input.error {\n"
            "  border-color: #dc2626;\n"
            "  box-shadow: 0 0 0 3px rgba(239,68,68,0.15);\n"
            "}"
        ) in css

    def test_component_classes(self, config: DesignConfig) -> None:
        css = export_css(config)

        assert ".dk-btn {\n  background-color: #0284c7;" in css
        assert ".dk-btn:hover {\n  background-color: rgba(2,132,199,0.9);\n}" in css
        assert ".dk-input {" in css

    def test_control_keys_skipped(self, config: DesignConfig) -> None:
        css = export_css(config)

        assert "thumb" not in css.lower()
        assert ".dk-input:focus" not in css

    def test_not_selected_comments(self, empty_config: DesignConfig) -> None:
        css = export_css(empty_config)

        for section in ("Typography", "Spacing", "Border Radius", "Shadows", "Animation"):
            assert f"/* {section}: not selected */" in css
        assert "/* Component Styles: not selected */" in css
        assert "--color-primary: #3b82f6;" in css


class TestTailwind:
    def test_structure(self, config: DesignConfig) -> None:
        ts = export_tailwind(config)

        assert ts.startswith('import type { Config } from "tailwindcss";')
        assert '  darkMode: "media",' in ts
        assert ts.rstrip().endswith("*/")
        assert "export default config;" in ts

    def test_quoted_keys(self, config: DesignConfig) -> None:
        ts = export_tailwind(config)

        assert '"50": "#f0f9ff",' in ts
        assert '"2xl": "24px",' in ts
        assert '"surface-alt": "#e0f2fe",' in ts

    def test_font_sizes(self, config: DesignConfig) -> None:
        assert 'h1: ["2.5rem", { lineHeight: ' in export_tailwind(config)

    def test_animation(self, config: DesignConfig) -> None:
        ts = export_tailwind(config)

        assert (
            '"button-press": "dk-btn-scale-down 150ms cubic-bezier(0.25, 0.46, 0.45, 0.94)",'
            in ts
        )
        assert " * @keyframes dk-btn-scale-down {" in ts

    def test_not_selected(self, empty_config: DesignConfig) -> None:
        ts = export_tailwind(empty_config)

        for key in ("fontFamily", "fontSize", "spacing", "borderRadius", "boxShadow", "animation"):
            assert f"      // {key}: not selected" in ts
        assert "@keyframes" not in ts


class TestSwift:
    def test_adaptive_colors(self, config: DesignConfig) -> None:
        swift = export_swift(config)

        assert "        static let Primary = Color(UIColor { tc in" in swift
        assert ": UIColor(red: 0.008, green: 0.518, blue: 0.780, alpha: 1)" in swift
        assert "static let Success = Color(" in swift

    def test_typography_and_lengths(self, config: DesignConfig) -> None:
        swift = export_swift(config)

        assert '        static let HeadingFamily = "Inter"' in swift
        assert "        static let H1 = Font.custom(HeadingFamily, size: 40)" in swift
        assert "        static let Body = Font.custom(BodyFamily, size: 16)" in swift
        assert "    static let _2xl: CGFloat = 48" in swift
        assert "    static let Full: CGFloat = 9999" in swift

    def test_escaping_and_unrepresentable(self, tricky_config: DesignConfig) -> None:
        swift = export_swift(tricky_config)

        assert 'static let HeadingFamily = "Bob\'s \\"Font\\" $x"' in swift
        assert "    // Half: 50% has no point value" in swift
        assert "    static let Sm: CGFloat = 8" in swift

    def test_unparsable_color_falls_back(self, catalog: Catalog) -> None:
        state = DesignKitState(color_picks=ColorPicks(light={"primary": "hsl(0 0% 0%)"}))

        swift = export_swift(build_config(state, catalog))

        assert "unsupported color 'hsl(0 0% 0%)', using black" in swift

    def test_not_selected(self, empty_config: DesignConfig) -> None:
        swift = export_swift(empty_config)

        assert "// Typography: not selected" in swift
        assert "// Spacing: not selected" in swift
        assert "// Shadows: not selected" in swift


class TestKotlin:
    def test_colors(self, config: DesignConfig) -> None:
        kotlin = export_kotlin(config)

        assert "object LightColors {" in kotlin
        assert "    val Primary = Color(0xFF0284C7)" in kotlin
        assert "            onPrimary = LightColors.PrimaryForeground," in kotlin
        assert "            error = DarkColors.Error," in kotlin

    def test_typography_and_dimensions(self, config: DesignConfig) -> None:
        kotlin = export_kotlin(config)

        assert '    const val HeadingFamily = "Inter"' in kotlin
        assert "    val H1 = 40.sp" in kotlin
        assert "    val _2xl = 48.dp" in kotlin

    def test_escaping(self, tricky_config: DesignConfig) -> None:
        kotlin = export_kotlin(tricky_config)

        assert 'const val HeadingFamily = "Bob\'s \\"Font\\" \\$x"' in kotlin
        assert "    // Half: 50% has no dp value" in kotlin

    def test_not_selected(self, empty_config: DesignConfig) -> None:
        kotlin = export_kotlin(empty_config)

        assert "// AppTypography: not selected" in kotlin
        assert "// AppSpacing: not selected" in kotlin
        assert "// AppShadows: not selected" in kotlin


class TestFlutter:
    def test_schemes(self, config: DesignConfig) -> None:
        dart = export_flutter(config)

        assert "  static const lightScheme = ColorScheme.light(" in dart
        assert "    primary: Color(0xFF0284C7)," in dart
        assert "  static const darkScheme = ColorScheme.dark(" in dart

    def test_text_theme(self, config: DesignConfig) -> None:
        dart = export_flutter(config)

        assert (
            "    displayLarge: TextStyle(fontFamily: headingFamily, fontSize: 40, "
            "fontWeight: FontWeight.w700" in dart
        )
        assert "    labelSmall: TextStyle(" in dart
        assert "  textTheme: AppTypography.textTheme," in dart

    def test_digit_keys_prefixed(self, config: DesignConfig) -> None:
        assert "  static const double k2xl = 48;" in export_flutter(config)

    def test_escaping(self, tricky_config: DesignConfig) -> None:
        assert "static const headingFamily = 'Bob\\'s \"Font\" \\$x';" in export_flutter(
            tricky_config
        )

    def test_not_selected(self, empty_config: DesignConfig) -> None:
        dart = export_flutter(empty_config)

        assert "// AppTypography: not selected" in dart
        assert "textTheme:" not in dart


class TestReactNative:
    def test_colors_and_numbers(self, config: DesignConfig) -> None:
        ts = export_react_native(config)

        assert "export const colors = {" in ts
        assert '    primary: "#0284c7",' in ts
        assert '  "2xl": 48,' in ts
        assert "  full: 9999," in ts

    def test_typography_in_points(self, config: DesignConfig) -> None:
        ts = export_react_native(config)

        assert "      fontSize: 40," in ts
        assert "letterSpacing" in ts

    def test_theme_lists_exported_groups(
        self, config: DesignConfig, empty_config: DesignConfig
    ) -> None:
        assert "  typography,\n  spacing,\n  radius,\n  shadows,\n" in export_react_native(config)

        empty = export_react_native(empty_config)
        assert "export const theme = {\n  colors,\n} as const;" in empty
        assert "// typography: not selected" in empty

    def test_unrepresentable(self, tricky_config: DesignConfig) -> None:
        assert "  // half: 50% has no numeric value" in export_react_native(tricky_config)


class TestClaudeMd:
    def test_selected_styles(self, config: DesignConfig) -> None:
        md = export_claude_md(config)

        assert md.startswith("# Design System: DesignKit Export\n")
        assert (
            "- **Color Palettes** (Full color systems with light and dark modes): Ocean" in md
        )
        assert "  - Calm blues with a teal accent" in md

    def test_every_selected_category_listed(self, config: DesignConfig) -> None:
        md = export_claude_md(config)

        for item in config.selected_items.values():
            assert f"**{item.category_label}**" in md
            assert item.description in md

    def test_tokens_and_components(self, config: DesignConfig) -> None:
        md = export_claude_md(config)

        assert "- Surface alt: #e0f2fe" in md
        assert "- Color strategy: solid (bg=primary, text=primaryForeground)" in md
        assert "### Buttons: Solid Rounded" in md
        assert "background-color: #0284c7;" in md

    def test_motion_section(self, config: DesignConfig) -> None:
        md = export_claude_md(config)

        assert "## Motion & Animation" in md
        assert "### Button Press: Scale Down" in md
        assert "@keyframes dk-btn-scale-down" in md

    def test_empty_config(self, empty_config: DesignConfig) -> None:
        md = export_claude_md(empty_config)

        assert "No categories selected yet." in md
        assert "Not selected. Use the platform's default fonts." in md
        assert "## Component Styles" not in md


class TestDeterminism:
    @pytest.mark.parametrize(
        "codec",
        [
            export_json,
            export_css,
            export_tailwind,
            export_swift,
            export_kotlin,
            export_flutter,
            export_react_native,
            export_claude_md,
        ],
    )
    def test_same_config_same_output(self, config: DesignConfig, codec) -> None:
        assert codec(config) == codec(config)
