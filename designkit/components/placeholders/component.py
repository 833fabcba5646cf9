"""
Placeholder resolver - substitutes color markers embedded in style values.

Marker grammar, first match wins at each position:
1. ``__primary-NN`` / ``__accent-NN`` / ``__error-NN`` (NN: 1-3 digits)
   -> ``rgba(r,g,b,NN/100)``
2. ``__<name>`` for the named colors, longest name first
3. Anything else is literal text

``error`` reads ``semantic.error``; every other name is a base color.

Invariants:
- Values without ``__`` are returned unchanged, without parsing
- NN is not clamped; ``__primary-150`` yields alpha 1.5
- Malformed hex yields ``NaN`` channels instead of raising
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from designkit.core.entities import ColorMode
from designkit.core.formatting import format_number

from .models import (
    LiteralText,
    NamedToken,
    ResolveValueInput,
    ResolveValueOutput,
    ScaledToken,
    Segment,
    Template,
)

MARKER_PREFIX = "__"

SCALED_TOKENS = ("primary", "accent", "error")

# Token name -> ColorMode wire key, where the two differ.
TOKEN_KEYS = {"error": "semantic.error"}

NAMED_TOKENS = tuple(
    sorted(
        (
            "primaryForeground",
            "secondaryForeground",
            "accentForeground",
            "textSecondary",
            "textMuted",
            "surfaceAlt",
            "primary",
            "secondary",
            "accent",
            "surface",
            "border",
            "background",
            "text",
            "error",
        ),
        key=lambda name: (-len(name), name),
    )
)

_MARKER_RE = re.compile(
    r"__(?:(?P<scaled>"
    + "|".join(SCALED_TOKENS)
    + r")-(?P<percent>\d{1,3})|(?P<named>"
    + "|".join(NAMED_TOKENS)
    + r"))"
)
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


# --- Parsing ---


@lru_cache(maxsize=4096)
def parse_template(value: str) -> Template:
    """Parse a style value into literal and token segments. Cached per value."""
    segments: list[Segment] = []
    cursor = 0

    for match in _MARKER_RE.finditer(value):
        if match.start() > cursor:
            segments.append(LiteralText(value[cursor : match.start()]))
        if match.group("scaled"):
            segments.append(ScaledToken(match.group("scaled"), int(match.group("percent"))))
        else:
            segments.append(NamedToken(match.group("named")))
        cursor = match.end()

    if cursor < len(value):
        segments.append(LiteralText(value[cursor:]))

    return tuple(segments)


# --- Rendering ---


def _parse_channel(pair: str) -> int | None:
    """Parse a hex byte leniently: leading hex digits only, None if there are none."""
    match = _HEX_DIGITS.match(pair)
    if match is None:
        return None
    return int(match.group(0), 16)


def hex_to_rgba(hex_color: str, alpha: float) -> str:
    """
    ``#3b82f6`` at 0.4 -> ``rgba(59,130,246,0.4)``.

    Assumes ``#RRGGBB``; anything else degrades to ``NaN`` channels.
    """
    clean = hex_color.replace("#", "", 1)
    channels = []
    for start in (0, 2, 4):
        channel = _parse_channel(clean[start : start + 2])
        channels.append("NaN" if channel is None else str(channel))
    return f"rgba({','.join(channels)},{format_number(alpha)})"


def _color(colors: ColorMode, name: str) -> str:
    return colors.get(TOKEN_KEYS.get(name, name))


def render(template: Template, colors: ColorMode) -> str:
    """Render a parsed template against a concrete color set."""
    parts: list[str] = []
    for segment in template:
        if isinstance(segment, LiteralText):
            parts.append(segment.text)
        elif isinstance(segment, ScaledToken):
            parts.append(hex_to_rgba(_color(colors, segment.name), segment.percent / 100))
        else:
            parts.append(_color(colors, segment.name))
    return "".join(parts)


# --- Entry points ---


def resolve_value(value: str, colors: ColorMode) -> str:
    """Resolve every marker in a single string value."""
    if MARKER_PREFIX not in value:
        return value
    return render(parse_template(value), colors)


def resolve_record(record: Mapping[str, str], colors: ColorMode) -> dict[str, str]:
    """Resolve every value of a flat style record. Keys are kept verbatim."""
    return {key: resolve_value(val, colors) for key, val in record.items()}


def resolve_data(data: Any, colors: ColorMode) -> Any:
    """
    Resolve markers anywhere inside a catalog item's data.

    Walks nested mappings and lists; non-string leaves pass through.
    """
    if isinstance(data, str):
        return resolve_value(data, colors)
    if isinstance(data, Mapping):
        return {key: resolve_data(val, colors) for key, val in data.items()}
    if isinstance(data, list | tuple):
        return [resolve_data(val, colors) for val in data]
    return data


def run(inp: ResolveValueInput) -> ResolveValueOutput:
    """
    Main entry point for the placeholder component.

    Returns the resolved value together with its parsed template.
    """
    template: Template = (
        parse_template(inp.value) if MARKER_PREFIX in inp.value else (LiteralText(inp.value),)
    )
    return ResolveValueOutput(value=resolve_value(inp.value, inp.colors), template=template)
