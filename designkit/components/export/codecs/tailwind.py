"""
Tailwind codec: a ``tailwind.config.ts`` extending the default theme.

Light colors are the defaults; dark values sit under a ``dark`` color
group. Token groups that are not selected are left as comments inside
``extend`` so the object literal stays valid.
"""

from __future__ import annotations

from typing import Any

from designkit.core.entities import ColorMode, DesignConfig

from .._names import css_font_name
from .._styles import keyframes_name, selected_motion
from .._ts import ts_inline, ts_object

INDENT = "      "


def _color_group(colors: ColorMode) -> dict[str, Any]:
    return {
        "background": colors.background,
        "surface": colors.surface,
        "surface-alt": colors.surface_alt,
        "border": colors.border,
        "foreground": colors.text,
        "muted": {"DEFAULT": colors.text_muted, "foreground": colors.text_secondary},
        "primary": {"DEFAULT": colors.primary, "foreground": colors.primary_foreground},
        "secondary": {"DEFAULT": colors.secondary, "foreground": colors.secondary_foreground},
        "accent": {"DEFAULT": colors.accent, "foreground": colors.accent_foreground},
        "success": colors.semantic.success,
        "warning": colors.semantic.warning,
        "error": colors.semantic.error,
        "info": colors.semantic.info,
    }


def _theme_groups(config: DesignConfig) -> list[tuple[str, Any]]:
    """(key, value-or-None) pairs in output order; None means not selected."""
    tokens = config.tokens
    colors = _color_group(tokens.colors.light)
    colors["brand"] = tokens.colors.primary_scale.to_wire()
    colors["dark"] = _color_group(tokens.colors.dark)

    groups: list[tuple[str, Any]] = [("colors", colors)]

    typography = tokens.typography
    if typography is None:
        groups.extend([("fontFamily", None), ("fontSize", None)])
    else:
        families: dict[str, Any] = {
            "heading": [css_font_name(typography.heading_font), "sans-serif"],
            "body": [css_font_name(typography.body_font), "sans-serif"],
        }
        if typography.mono_font:
            families["mono"] = [css_font_name(typography.mono_font), "monospace"]
        sizes: dict[str, Any] = {}
        for key, step in typography.scale.steps():
            extra: dict[str, Any] = {"lineHeight": step.line_height, "fontWeight": str(step.weight)}
            if step.letter_spacing:
                extra["letterSpacing"] = step.letter_spacing
            sizes[key] = [step.size, extra]
        groups.extend([("fontFamily", families), ("fontSize", sizes)])

    groups.append(("spacing", dict(tokens.spacing.scale) if tokens.spacing else None))
    groups.append(("borderRadius", tokens.radius.to_wire() if tokens.radius else None))
    groups.append(("boxShadow", tokens.shadows.to_wire() if tokens.shadows else None))

    animation: dict[str, str] = {}
    for slot, data in selected_motion(config):
        name = keyframes_name(str(data.get("cssKeyframes") or ""))
        if name:
            animation[slot.tailwind_key] = f"{name} {data.get('duration', '')} {data.get('easing', '')}".strip()
    groups.append(("animation", animation or None))
    return groups


def _keyframes_comment(config: DesignConfig) -> list[str]:
    blocks = [
        str(data["cssKeyframes"])
        for _, data in selected_motion(config)
        if data.get("cssKeyframes")
    ]
    if not blocks:
        return []
    lines = ["", "/*", " * Add these @keyframes to your global CSS:", " *"]
    for index, block in enumerate(blocks):
        if index:
            lines.append(" *")
        lines.extend(f" * {line}".rstrip() for line in block.replace("*/", "* /").splitlines())
    lines.append(" */")
    return lines


def export_tailwind(config: DesignConfig) -> str:
    lines = [
        'import type { Config } from "tailwindcss";',
        "",
        "// DesignKit: Generated Tailwind Config",
        "const config: Config = {",
        f"  content: {ts_inline(['./src/**/*.{ts,tsx}'])},",
        '  darkMode: "media",',
        "  theme: {",
    ]

    body: list[str] = []
    for key, value in _theme_groups(config):
        if value is None:
            body.append(f"{INDENT}// {key}: not selected")
        elif isinstance(value, dict):
            body.append(f"{INDENT}{key}: {ts_object(value, len(INDENT))},")
        else:
            body.append(f"{INDENT}{key}: {ts_inline(value)},")

    lines.append("    extend: {")
    lines.extend(body)
    lines.append("    },")
    lines.extend(["  },", "  plugins: [],", "};", "", "export default config;"])
    lines.extend(_keyframes_comment(config))
    return "\n".join(lines) + "\n"
