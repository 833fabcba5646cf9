"""
Flutter codec: Material 3 ``ColorScheme``s, ``TextTheme`` and dimensions.

Dart members are lowerCamelCase; keys starting with a digit get a ``k``
prefix. Strings are single-quoted with ``\\``, ``'`` and ``$`` escaped.
"""

from __future__ import annotations

from designkit.core.entities import ColorMode, DesignConfig
from designkit.core.formatting import format_number, round_half_up

from .._names import camel_case, dart_string, line_comment
from .._units import to_points
from ._native import length_lines, native_color

TEXT_THEME_SLOTS = {
    "h1": "displayLarge",
    "h2": "displayMedium",
    "h3": "displaySmall",
    "h4": "headlineMedium",
    "h5": "titleLarge",
    "h6": "titleMedium",
    "body": "bodyLarge",
    "bodySmall": "bodyMedium",
    "caption": "bodySmall",
    "overline": "labelSmall",
    "button": "labelLarge",
}

# ColorScheme argument -> color wire key.
SCHEME_SLOTS = (
    ("primary", "primary"),
    ("onPrimary", "primaryForeground"),
    ("secondary", "secondary"),
    ("onSecondary", "secondaryForeground"),
    ("tertiary", "accent"),
    ("onTertiary", "accentForeground"),
    ("surface", "surface"),
    ("onSurface", "text"),
    ("outline", "border"),
    ("error", "semantic.error"),
)


def _scheme(lines: list[str], name: str, constructor: str, colors: ColorMode) -> None:
    lines.append(f"  static const {name} = {constructor}(")
    for slot, key in SCHEME_SLOTS:
        rgba, note = native_color(colors.get(key))
        suffix = f" {line_comment(note)}" if note else ""
        lines.append(f"    {slot}: Color({rgba.argb_hex()}),{suffix}")
    lines.append("  );")


def _colors(lines: list[str], config: DesignConfig) -> None:
    colors = config.tokens.colors
    lines.append("class AppColors {")
    _scheme(lines, "lightScheme", "ColorScheme.light", colors.light)
    lines.append("")
    _scheme(lines, "darkScheme", "ColorScheme.dark", colors.dark)
    lines.extend(["}", ""])


def _typography(lines: list[str], config: DesignConfig) -> None:
    typography = config.tokens.typography
    if typography is None:
        lines.extend(["// AppTypography: not selected", ""])
        return

    lines.append("class AppTypography {")
    lines.append(f"  static const headingFamily = {dart_string(typography.heading_font)};")
    lines.append(f"  static const bodyFamily = {dart_string(typography.body_font)};")
    if typography.mono_font:
        lines.append(f"  static const monoFamily = {dart_string(typography.mono_font)};")
    lines.append("")
    lines.append("  static const textTheme = TextTheme(")
    for key, step in typography.scale.steps():
        slot = TEXT_THEME_SLOTS.get(key)
        size = to_points(step.size)
        line_height = to_points(step.line_height)
        if slot is None or size is None:
            continue
        family = "headingFamily" if key.startswith("h") else "bodyFamily"
        parts = [
            f"fontFamily: {family}",
            f"fontSize: {format_number(size)}",
            f"fontWeight: FontWeight.w{step.weight}",
        ]
        if line_height is not None and size:
            parts.append(f"height: {format_number(round_half_up(line_height / size, 2))}")
        lines.append(f"    {slot}: TextStyle({', '.join(parts)}),")
    lines.append("  );")
    lines.extend(["}", ""])


def _dimensions(lines: list[str], name: str, values: dict[str, str] | None) -> None:
    if values is None:
        lines.extend([f"// {name}: not selected", ""])
        return
    lines.append(f"class {name} {{")
    lines.extend(
        length_lines(
            values,
            lambda key, pts: f"  static const double {camel_case(key)} = {format_number(float(pts))};",
            lambda key, raw: "  " + line_comment(f"{camel_case(key)}: {raw} has no logical pixel value"),
        )
    )
    lines.extend(["}", ""])


def _theme(lines: list[str], name: str, scheme: str, has_typography: bool) -> None:
    lines.append(f"ThemeData {name}() => ThemeData(")
    lines.append("  useMaterial3: true,")
    lines.append(f"  colorScheme: AppColors.{scheme},")
    if has_typography:
        lines.append("  textTheme: AppTypography.textTheme,")
    lines.extend([");", ""])


def export_flutter(config: DesignConfig) -> str:
    lines = [
        "// DesignKit: Generated Flutter Theme",
        "import 'package:flutter/material.dart';",
        "",
    ]
    tokens = config.tokens
    _colors(lines, config)
    _typography(lines, config)
    _dimensions(lines, "AppSpacing", dict(tokens.spacing.scale) if tokens.spacing else None)
    _dimensions(lines, "AppRadius", tokens.radius.to_wire() if tokens.radius else None)
    if tokens.shadows is None:
        lines.extend(["// AppShadows: not selected", ""])
    else:
        lines.extend(
            [
                line_comment("AppShadows: CSS box-shadow values, map to BoxShadow as needed"),
                "class AppShadows {",
            ]
        )
        for key, value in tokens.shadows.to_wire().items():
            lines.append(f"  static const {camel_case(key)} = {dart_string(value)};")
        lines.extend(["}", ""])

    _theme(lines, "lightTheme", "lightScheme", tokens.typography is not None)
    _theme(lines, "darkTheme", "darkScheme", tokens.typography is not None)
    return "\n".join(lines).rstrip("\n") + "\n"
