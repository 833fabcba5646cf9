"""
Swift codec: SwiftUI/UIKit theme with adaptive light/dark colors.

Members are PascalCase static lets; lengths are CGFloat points.
"""

from __future__ import annotations

from designkit.core.entities import DesignConfig
from designkit.core.formatting import format_number

from .._colors import RGBA
from .._names import line_comment, pascal_case, swift_string
from .._units import to_points
from ._native import color_entries, length_lines, native_color

HEADER = [
    "// DesignKit: Generated Swift Theme",
    "import SwiftUI",
    "import UIKit",
    "",
]


def _uicolor(rgba: RGBA) -> str:
    red, green, blue = rgba.unit_channels()
    return (
        f"UIColor(red: {red:.3f}, green: {green:.3f}, blue: {blue:.3f}, "
        f"alpha: {format_number(round(rgba.alpha, 3))})"
    )


def _colors(lines: list[str], config: DesignConfig) -> None:
    colors = config.tokens.colors
    lines.extend(["// MARK: - Colors", "extension Color {", "    enum Theme {"])
    dark = dict(color_entries(colors.dark))
    for name, light_value in color_entries(colors.light):
        light, light_note = native_color(light_value)
        night, dark_note = native_color(dark[name])
        for note in (light_note, dark_note):
            if note:
                lines.append("        " + line_comment(f"{pascal_case(name)}: {note}"))
        lines.extend(
            [
                f"        static let {pascal_case(name)} = Color(UIColor {{ tc in",
                "            tc.userInterfaceStyle == .dark",
                f"                ? {_uicolor(night)}",
                f"                : {_uicolor(light)}",
                "        })",
            ]
        )
    lines.extend(["    }", "}", ""])


def _typography(lines: list[str], config: DesignConfig) -> None:
    lines.append("// MARK: - Typography")
    typography = config.tokens.typography
    if typography is None:
        lines.extend(["// Typography: not selected", ""])
        return

    lines.extend(["extension Font {", "    enum Theme {"])
    lines.append(f"        static let HeadingFamily = {swift_string(typography.heading_font)}")
    lines.append(f"        static let BodyFamily = {swift_string(typography.body_font)}")
    if typography.mono_font:
        lines.append(f"        static let MonoFamily = {swift_string(typography.mono_font)}")
    for key, step in typography.scale.steps():
        family = "HeadingFamily" if key.startswith("h") else "BodyFamily"
        size = to_points(step.size)
        if size is None:
            lines.append("        " + line_comment(f"{pascal_case(key)}: size {step.size} has no point value"))
            continue
        lines.append(
            f"        static let {pascal_case(key)} = Font.custom({family}, size: {format_number(size)})"
        )
    lines.extend(["    }", "}", ""])


def _lengths(lines: list[str], title: str, enum: str, values: dict[str, str] | None) -> None:
    lines.append(f"// MARK: - {title}")
    if values is None:
        lines.extend([f"// {title}: not selected", ""])
        return
    lines.append(f"enum {enum} {{")
    lines.extend(
        length_lines(
            values,
            lambda key, pts: f"    static let {pascal_case(key)}: CGFloat = {format_number(pts)}",
            lambda key, raw: "    " + line_comment(f"{pascal_case(key)}: {raw} has no point value"),
        )
    )
    lines.extend(["}", ""])


def export_swift(config: DesignConfig) -> str:
    lines = list(HEADER)
    tokens = config.tokens
    _colors(lines, config)
    _typography(lines, config)
    _lengths(lines, "Spacing", "Spacing", dict(tokens.spacing.scale) if tokens.spacing else None)
    _lengths(lines, "Corner Radius", "CornerRadius", tokens.radius.to_wire() if tokens.radius else None)

    lines.append("// MARK: - Shadows")
    if tokens.shadows is None:
        lines.extend(["// Shadows: not selected", ""])
    else:
        lines.append("enum AppShadow {")
        for key, value in tokens.shadows.to_wire().items():
            lines.append(f"    static let {pascal_case(key)} = {swift_string(value)}")
        lines.extend(["}", ""])

    return "\n".join(lines).rstrip("\n") + "\n"
