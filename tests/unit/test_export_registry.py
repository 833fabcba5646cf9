"""
Export registry tests: format ids, filenames and dispatch.
"""

from __future__ import annotations

import pytest

from designkit.catalog import Catalog
from designkit.components.export import (
    EXPORT_FORMATS,
    ExportInput,
    UnknownFormatError,
    export_css,
    generate_all_exports,
    get_exporter,
    get_format,
    run,
    valid_formats,
)
from designkit.components.resolve import build_config
from designkit.core.entities import DesignKitState

EXPECTED_FORMATS = [
    "json",
    "css",
    "tailwind",
    "swift",
    "kotlin",
    "flutter",
    "react-native",
    "claude-md",
]


class TestRegistry:
    def test_format_order(self) -> None:
        assert valid_formats() == EXPECTED_FORMATS

    def test_filenames(self) -> None:
        filenames = {fmt.id: fmt.filename for fmt in EXPORT_FORMATS}

        assert filenames["json"] == "design-tokens.json"
        assert filenames["css"] == "design-tokens.css"
        assert filenames["tailwind"] == "tailwind.config.ts"
        assert filenames["swift"] == "Theme.swift"
        assert filenames["kotlin"] == "Theme.kt"
        assert filenames["flutter"] == "theme.dart"
        assert filenames["react-native"] == "theme.ts"
        assert filenames["claude-md"] == "CLAUDE.md"

    def test_get_exporter(self) -> None:
        assert get_exporter("css") is export_css

    def test_unknown_format(self) -> None:
        with pytest.raises(UnknownFormatError) as exc_info:
            get_format("pdf")

        assert exc_info.value.format_id == "pdf"
        assert exc_info.value.valid_formats == EXPECTED_FORMATS
        assert "Unknown format 'pdf'" in str(exc_info.value)
        assert "react-native" in str(exc_info.value)

    def test_unknown_format_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            get_exporter("")


class TestDispatch:
    def test_run(self, catalog: Catalog, full_state: DesignKitState) -> None:
        config = build_config(full_state, catalog)

        result = run(ExportInput(config=config, format="kotlin"))

        assert result.format == "kotlin"
        assert result.filename == "Theme.kt"
        assert "object LightColors {" in result.content

    def test_generate_all_exports(self, catalog: Catalog, empty_state: DesignKitState) -> None:
        config = build_config(empty_state, catalog)

        exports = generate_all_exports(config)

        assert list(exports) == [fmt.filename for fmt in EXPORT_FORMATS]
        assert all(content.endswith("\n") for content in exports.values())
        assert exports["CLAUDE.md"] == get_exporter("claude-md")(config)
