"""Shared walks for the Swift, Kotlin and Flutter codecs."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from designkit.core.entities import ALL_COLOR_KEYS, ColorMode

from .._colors import RGBA, normalize_color
from .._units import to_points


def color_entries(colors: ColorMode) -> list[tuple[str, str]]:
    """(name, value) for all 17 colors; semantic keys lose their prefix."""
    return [(key.split(".", 1)[-1], colors.get(key)) for key in ALL_COLOR_KEYS]


def native_color(value: str) -> tuple[RGBA, str | None]:
    """Parsed color plus a note when the value had to be replaced."""
    rgba, exact = normalize_color(value)
    note = None if exact else f"unsupported color {value!r}, using black"
    return rgba, note


def length_lines(
    values: Mapping[str, str],
    emit: Callable[[str, float], str],
    comment: Callable[[str, str], str],
) -> list[str]:
    """One line per length: converted points, or a comment when unrepresentable."""
    lines: list[str] = []
    for key, raw in values.items():
        points = to_points(raw)
        lines.append(emit(key, points) if points is not None else comment(key, raw))
    return lines
