"""
TypeScript object-literal rendering for the Tailwind and React Native codecs.

Keys that are valid identifiers stay bare; others (``"2xl"``, ``"50"``)
are quoted. Strings are JSON-escaped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from designkit.core.formatting import format_number

from ._names import js_key, js_string


def ts_inline(value: Any) -> str:
    """Render a value on a single line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value)
    if isinstance(value, str):
        return js_string(value)
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        body = ", ".join(f"{js_key(str(k))}: {ts_inline(v)}" for k, v in value.items())
        return "{ " + body + " }"
    if isinstance(value, list | tuple):
        return "[" + ", ".join(ts_inline(v) for v in value) + "]"
    if value is None:
        return "null"
    return js_string(str(value))


def ts_object(value: Mapping[str, Any], indent: int = 0, step: int = 2) -> str:
    """Render a mapping across lines; nested mappings recurse, others stay inline."""
    if not value:
        return "{}"
    pad = " " * (indent + step)
    lines = ["{"]
    for key, item in value.items():
        if isinstance(item, Mapping) and item:
            rendered = ts_object(item, indent + step, step)
        else:
            rendered = ts_inline(item)
        lines.append(f"{pad}{js_key(str(key))}: {rendered},")
    lines.append(" " * indent + "}")
    return "\n".join(lines)
