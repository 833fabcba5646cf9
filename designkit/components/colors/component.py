"""
Colors component - merges palette, individual picks and defaults.

Precedence per field, highest first:
1. explicit pick for that key in that mode (``semantic.<name>`` for semantic colors)
2. the selected palette's value for that key in that mode
3. the built-in default

Invariants:
- Every one of the 13 base and 4 semantic fields is populated
- Removing a pick falls back to the next source, never to blank
- Blank picks are treated as absent
- A palette with gaps still supplies the keys it has
"""

from __future__ import annotations

from collections.abc import Mapping

from designkit.core.entities import (
    ALL_COLOR_KEYS,
    COLOR_MODES,
    ColorMode,
    ColorModeName,
    ColorPaletteData,
    ColorPicks,
    ColorScale,
    PartialPalette,
)

from .models import MergeModeInput, MergeModeOutput

# --- Built-in defaults ---

DEFAULT_LIGHT = ColorMode.model_validate(
    {
        "background": "#ffffff",
        "surface": "#f8fafc",
        "surfaceAlt": "#f1f5f9",
        "border": "#e2e8f0",
        "text": "#0f172a",
        "textSecondary": "#475569",
        "textMuted": "#94a3b8",
        "primary": "#3b82f6",
        "primaryForeground": "#ffffff",
        "secondary": "#64748b",
        "secondaryForeground": "#ffffff",
        "accent": "#8b5cf6",
        "accentForeground": "#ffffff",
        "semantic": {
            "success": "#22c55e",
            "warning": "#f59e0b",
            "error": "#ef4444",
            "info": "#0ea5e9",
        },
    }
)

DEFAULT_DARK = ColorMode.model_validate(
    {
        "background": "#0f172a",
        "surface": "#1e293b",
        "surfaceAlt": "#334155",
        "border": "#334155",
        "text": "#f8fafc",
        "textSecondary": "#cbd5e1",
        "textMuted": "#64748b",
        "primary": "#60a5fa",
        "primaryForeground": "#0f172a",
        "secondary": "#94a3b8",
        "secondaryForeground": "#0f172a",
        "accent": "#a78bfa",
        "accentForeground": "#0f172a",
        "semantic": {
            "success": "#4ade80",
            "warning": "#fbbf24",
            "error": "#f87171",
            "info": "#38bdf8",
        },
    }
)

DEFAULT_PRIMARY_SCALE = ColorScale.model_validate(
    {
        "50": "#eff6ff",
        "100": "#dbeafe",
        "200": "#bfdbfe",
        "300": "#93c5fd",
        "400": "#60a5fa",
        "500": "#3b82f6",
        "600": "#2563eb",
        "700": "#1d4ed8",
        "800": "#1e40af",
        "900": "#1e3a8a",
        "950": "#172554",
    }
)


def default_mode(mode: ColorModeName) -> ColorMode:
    """Built-in fallback colors for a mode."""
    return DEFAULT_DARK if mode == "dark" else DEFAULT_LIGHT


# --- Merge ---

Palette = ColorPaletteData | PartialPalette


def _present(value: str | None) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value)


def merge_mode_with_sources(
    mode: ColorModeName,
    palette: Palette | None,
    picks: Mapping[str, str],
) -> MergeModeOutput:
    """Resolve one mode, also reporting which layer supplied each key."""
    base = palette.mode(mode) if palette is not None else None
    fallback = default_mode(mode)

    values: dict[str, str] = {}
    sources: dict[str, str] = {}
    for key in ALL_COLOR_KEYS:
        picked = _present(picks.get(key))
        from_palette = _present(base.get(key)) if base is not None else None
        if picked is not None:
            values[key], sources[key] = picked, "pick"
        elif from_palette is not None:
            values[key], sources[key] = from_palette, "palette"
        else:
            values[key], sources[key] = fallback.get(key), "default"

    semantic = {
        key.split(".", 1)[1]: values.pop(key) for key in list(values) if key.startswith("semantic.")
    }
    colors = ColorMode.model_validate({**values, "semantic": semantic})
    return MergeModeOutput(colors=colors, sources=sources)


def merge_mode(
    mode: ColorModeName,
    palette: Palette | None,
    picks: Mapping[str, str],
) -> ColorMode:
    """Resolve the effective ColorMode for one mode."""
    return merge_mode_with_sources(mode, palette, picks).colors


def merge_primary_scale(palette: Palette | None) -> ColorScale:
    """The palette's primary scale, with any missing step taken from the default."""
    if palette is None:
        return DEFAULT_PRIMARY_SCALE
    return ColorScale.model_validate(
        {**DEFAULT_PRIMARY_SCALE.to_wire(), **palette.primary_scale.to_wire()}
    )


def resolve_colors(
    color_picks: ColorPicks,
    palette: Palette | None,
) -> ColorPaletteData:
    """Resolve both modes. The primary scale comes from the palette, else the default."""
    return ColorPaletteData(
        light=merge_mode("light", palette, color_picks.light),
        dark=merge_mode("dark", palette, color_picks.dark),
        primary_scale=merge_primary_scale(palette),
    )


def palette_to_picks(palette: Palette) -> ColorPicks:
    """Flatten a palette into per-key picks for both modes, skipping its gaps."""
    picks: dict[str, dict[str, str]] = {}
    for mode in COLOR_MODES:
        colors = palette.mode(mode)
        picks[mode] = {}
        for key in ALL_COLOR_KEYS:
            value = _present(colors.get(key))
            if value is not None:
                picks[mode][key] = value
    return ColorPicks.model_validate(picks)


def run(inp: MergeModeInput) -> MergeModeOutput:
    """Main entry point for the colors component."""
    return merge_mode_with_sources(inp.mode, inp.palette, inp.picks)
