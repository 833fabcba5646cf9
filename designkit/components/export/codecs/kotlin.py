"""
Kotlin codec: Jetpack Compose color objects, typography and dimensions.

Members are PascalCase; string literals escape ``\\``, ``"`` and ``$``.
"""

from __future__ import annotations

from designkit.core.entities import ColorMode, DesignConfig
from designkit.core.formatting import format_number

from .._names import kotlin_string, line_comment, pascal_case
from .._units import to_points
from ._native import color_entries, length_lines, native_color

HEADER = [
    "// DesignKit: Generated Kotlin Theme",
    "package com.app.theme",
    "",
    "import androidx.compose.foundation.isSystemInDarkTheme",
    "import androidx.compose.material3.ColorScheme",
    "import androidx.compose.material3.darkColorScheme",
    "import androidx.compose.material3.lightColorScheme",
    "import androidx.compose.runtime.Composable",
    "import androidx.compose.ui.graphics.Color",
    "import androidx.compose.ui.unit.dp",
    "import androidx.compose.ui.unit.sp",
    "",
]

# Material slot -> color name.
SCHEME_SLOTS = (
    ("primary", "Primary"),
    ("onPrimary", "PrimaryForeground"),
    ("secondary", "Secondary"),
    ("onSecondary", "SecondaryForeground"),
    ("tertiary", "Accent"),
    ("onTertiary", "AccentForeground"),
    ("background", "Background"),
    ("onBackground", "Text"),
    ("surface", "Surface"),
    ("onSurface", "Text"),
    ("outline", "Border"),
    ("error", "Error"),
)


def _color_object(lines: list[str], name: str, colors: ColorMode) -> None:
    lines.append(f"object {name} {{")
    for key, value in color_entries(colors):
        rgba, note = native_color(value)
        if note:
            lines.append("    " + line_comment(note))
        lines.append(f"    val {pascal_case(key)} = Color({rgba.argb_hex()})")
    lines.extend(["}", ""])


def _scheme(lines: list[str], builder: str, source: str, indent: str) -> None:
    lines.append(f"{indent}{builder}(")
    for slot, member in SCHEME_SLOTS:
        lines.append(f"{indent}    {slot} = {source}.{member},")
    lines.append(f"{indent})")


def _colors(lines: list[str], config: DesignConfig) -> None:
    colors = config.tokens.colors
    _color_object(lines, "LightColors", colors.light)
    _color_object(lines, "DarkColors", colors.dark)

    lines.append("@Composable")
    lines.append("fun appColorScheme(darkTheme: Boolean = isSystemInDarkTheme()): ColorScheme {")
    lines.append("    return if (darkTheme) {")
    _scheme(lines, "darkColorScheme", "DarkColors", "        ")
    lines.append("    } else {")
    _scheme(lines, "lightColorScheme", "LightColors", "        ")
    lines.extend(["    }", "}", ""])


def _typography(lines: list[str], config: DesignConfig) -> None:
    typography = config.tokens.typography
    if typography is None:
        lines.extend(["// AppTypography: not selected", ""])
        return

    lines.append("object AppTypography {")
    lines.append(f"    const val HeadingFamily = {kotlin_string(typography.heading_font)}")
    lines.append(f"    const val BodyFamily = {kotlin_string(typography.body_font)}")
    if typography.mono_font:
        lines.append(f"    const val MonoFamily = {kotlin_string(typography.mono_font)}")
    for key, step in typography.scale.steps():
        size = to_points(step.size)
        line_height = to_points(step.line_height)
        if size is None:
            lines.append("    " + line_comment(f"{pascal_case(key)}: size {step.size} has no sp value"))
            continue
        lines.append(f"    val {pascal_case(key)} = {format_number(size)}.sp")
        if line_height is not None:
            lines.append(f"    val {pascal_case(key)}LineHeight = {format_number(line_height)}.sp")
    lines.extend(["}", ""])


def _dimensions(lines: list[str], name: str, values: dict[str, str] | None) -> None:
    if values is None:
        lines.extend([f"// {name}: not selected", ""])
        return
    lines.append(f"object {name} {{")
    lines.extend(
        length_lines(
            values,
            lambda key, pts: f"    val {pascal_case(key)} = {format_number(pts)}.dp",
            lambda key, raw: "    " + line_comment(f"{pascal_case(key)}: {raw} has no dp value"),
        )
    )
    lines.extend(["}", ""])


def export_kotlin(config: DesignConfig) -> str:
    lines = list(HEADER)
    tokens = config.tokens
    _colors(lines, config)
    _typography(lines, config)
    _dimensions(lines, "AppSpacing", dict(tokens.spacing.scale) if tokens.spacing else None)
    _dimensions(lines, "AppRadius", tokens.radius.to_wire() if tokens.radius else None)

    if tokens.shadows is None:
        lines.extend(["// AppShadows: not selected", ""])
    else:
        lines.append("object AppShadows {")
        for key, value in tokens.shadows.to_wire().items():
            lines.append(f"    const val {pascal_case(key)} = {kotlin_string(value)}")
        lines.extend(["}", ""])

    return "\n".join(lines).rstrip("\n") + "\n"
