"""
React Native codec: ``theme.ts`` with plain numeric style values.

Colors stay as strings (RN accepts CSS color syntax); lengths become
unitless numbers. Values with no numeric form are kept as comments.
"""

from __future__ import annotations

from typing import Any

from designkit.core.entities import ColorMode, DesignConfig, TypographyData
from designkit.core.formatting import round_half_up

from .._names import js_key, line_comment
from .._ts import ts_inline, ts_object
from .._units import to_points
from ._native import color_entries


def _colors(colors: ColorMode) -> dict[str, str]:
    return dict(color_entries(colors))


def _numeric_block(lines: list[str], name: str, values: dict[str, str]) -> None:
    lines.append(f"export const {name} = {{")
    for key, raw in values.items():
        points = to_points(raw)
        if points is None:
            lines.append("  " + line_comment(f"{key}: {raw} has no numeric value"))
        else:
            lines.append(f"  {js_key(key)}: {ts_inline(points)},")
    lines.extend(["} as const;", ""])


def _type_scale(typography: TypographyData) -> dict[str, Any]:
    scale: dict[str, Any] = {}
    for key, step in typography.scale.steps():
        size = to_points(step.size)
        if size is None:
            continue
        entry: dict[str, Any] = {"fontSize": size}
        line_height = to_points(step.line_height)
        if line_height is not None:
            entry["lineHeight"] = line_height
        entry["fontWeight"] = str(step.weight)
        if step.letter_spacing and step.letter_spacing.endswith("em"):
            em = to_points(step.letter_spacing[:-2])
            if em is not None:
                entry["letterSpacing"] = round_half_up(em * size, 2)
        scale[key] = entry
    return scale


def export_react_native(config: DesignConfig) -> str:
    tokens = config.tokens
    lines = ["// DesignKit: Generated React Native Theme", ""]
    exported: list[str] = ["colors"]

    palette = {"light": _colors(tokens.colors.light), "dark": _colors(tokens.colors.dark)}
    lines.extend([f"export const colors = {ts_object(palette)} as const;", ""])

    if tokens.typography is None:
        lines.extend(["// typography: not selected", ""])
    else:
        typography: dict[str, Any] = {
            "headingFamily": tokens.typography.heading_font,
            "bodyFamily": tokens.typography.body_font,
        }
        if tokens.typography.mono_font:
            typography["monoFamily"] = tokens.typography.mono_font
        typography["scale"] = _type_scale(tokens.typography)
        lines.extend([f"export const typography = {ts_object(typography)} as const;", ""])
        exported.append("typography")

    for name, values in (
        ("spacing", dict(tokens.spacing.scale) if tokens.spacing else None),
        ("radius", tokens.radius.to_wire() if tokens.radius else None),
    ):
        if values is None:
            lines.extend([f"// {name}: not selected", ""])
        else:
            _numeric_block(lines, name, values)
            exported.append(name)

    if tokens.shadows is None:
        lines.extend(["// shadows: not selected", ""])
    else:
        lines.extend([f"export const shadows = {ts_object(tokens.shadows.to_wire())} as const;", ""])
        exported.append("shadows")

    lines.append("export const theme = {")
    lines.extend(f"  {name}," for name in exported)
    lines.extend(["} as const;", ""])
    return "\n".join(lines)
