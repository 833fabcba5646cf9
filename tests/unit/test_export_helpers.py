"""
Tests for the codec helpers: color parsing, length conversion and names.
"""

from __future__ import annotations

import pytest

from designkit.components.export._colors import BLACK, RGBA, normalize_color, parse_color
from designkit.components.export._names import (
    camel_case,
    css_comment,
    humanize,
    js_key,
    line_comment,
    pascal_case,
)
from designkit.components.export._styles import css_declarations, get_record, keyframes_name
from designkit.components.export._ts import ts_inline, ts_object
from designkit.components.export._units import to_points


class TestParseColor:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#3b82f6", RGBA(59, 130, 246)),
            ("#FFF", RGBA(255, 255, 255)),
            ("rgb(1, 2, 3)", RGBA(1, 2, 3)),
            ("rgba(2,132,199,0.9)", RGBA(2, 132, 199, 0.9)),
        ],
    )
    def test_supported(self, value: str, expected: RGBA) -> None:
        assert parse_color(value) == expected

    def test_hex_alpha(self) -> None:
        parsed = parse_color("#00000080")

        assert parsed is not None
        assert parsed.argb_hex() == "0x80000000"

    @pytest.mark.parametrize("value", ["hsl(0 0% 0%)", "red", "#12345", "rgb(300, 0, 0)", ""])
    def test_unsupported(self, value: str) -> None:
        assert parse_color(value) is None

    def test_normalize_falls_back_to_black(self) -> None:
        assert normalize_color("transparent") == (BLACK, False)
        assert normalize_color("#ffffff") == (RGBA(255, 255, 255), True)

    def test_argb_hex(self) -> None:
        assert RGBA(2, 132, 199).argb_hex() == "0xFF0284C7"


class TestToPoints:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("16px", 16.0),
            ("1.5rem", 24.0),
            ("0", 0.0),
            ("12", 12.0),
            ("-0.02", -0.02),
            ("9999px", 9999.0),
        ],
    )
    def test_convertible(self, value: str, expected: float) -> None:
        assert to_points(value) == expected

    @pytest.mark.parametrize("value", ["50%", "1em", "none", "4px 8px", "auto"])
    def test_not_convertible(self, value: str) -> None:
        assert to_points(value) is None


class TestNames:
    def test_pascal_case(self) -> None:
        assert pascal_case("primaryForeground") == "PrimaryForeground"
        assert pascal_case("surface-alt") == "SurfaceAlt"
        assert pascal_case("2xl") == "_2xl"

    def test_camel_case(self) -> None:
        assert camel_case("body-small") == "bodySmall"
        assert camel_case("bodySmall") == "bodySmall"
        assert camel_case("2xl") == "k2xl"

    def test_humanize(self) -> None:
        assert humanize("hasFloatingLabel") == "Has floating label"
        assert humanize("surfaceAlt") == "Surface alt"

    def test_js_key(self) -> None:
        assert js_key("primary") == "primary"
        assert js_key("2xl") == '"2xl"'
        assert js_key("surface-alt") == '"surface-alt"'

    def test_comments_cannot_break_out(self) -> None:
        assert css_comment("a */ b") == "/* a * / b */"
        assert line_comment("one\ntwo") == "// one two"


class TestStyles:
    def test_get_record(self) -> None:
        data = {"css": {"default": {"color": "red"}, "flag": True}}

        assert get_record(data, "css.default") == {"color": "red"}
        assert get_record(data, "css.flag") is None
        assert get_record(data, "css.missing") is None

    def test_css_declarations_skip_control_keys(self) -> None:
        record = {"height": "4px", "__thumbBg": "#000", "nested": {"a": "b"}}

        assert css_declarations(record) == [("height", "4px")]

    def test_keyframes_name(self) -> None:
        block = "@keyframes dk-fade-in {\n  from { opacity: 0; }\n}"

        assert keyframes_name(block) == "dk-fade-in"
        assert keyframes_name("") is None


class TestTypeScriptLiterals:
    def test_inline(self) -> None:
        assert ts_inline({"a": 1.0, "b-c": [True, None]}) == '{ a: 1, "b-c": [true, null] }'

    def test_object(self) -> None:
        assert ts_object({"x": {"y": "z"}}) == '{\n  x: {\n    y: "z",\n  },\n}'
