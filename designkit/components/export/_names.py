"""
Identifier and string-literal rules for each target language.
"""

from __future__ import annotations

import json
import re

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")
_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _words(key: str) -> list[str]:
    return [part for part in _WORD_SPLIT.split(key) if part]


def pascal_case(key: str, digit_prefix: str = "_") -> str:
    """``primaryForeground`` -> ``PrimaryForeground``; ``2xl`` -> ``_2xl``."""
    name = "".join(part[0].upper() + part[1:] for part in _words(key))
    if not name or name[0].isdigit():
        name = digit_prefix + name
    return name


def camel_case(key: str, digit_prefix: str = "k") -> str:
    """``body-small`` -> ``bodySmall``; ``2xl`` -> ``k2xl``."""
    parts = _words(key)
    if not parts:
        return digit_prefix
    name = parts[0] + "".join(part[0].upper() + part[1:] for part in parts[1:])
    if name[0].isdigit():
        name = digit_prefix + name
    return name


def humanize(key: str) -> str:
    """``hasFloatingLabel`` -> ``Has floating label``."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", key).replace("-", " ").replace("_", " ")
    spaced = spaced.strip().lower()
    return spaced[:1].upper() + spaced[1:]


# --- String literals ---


def swift_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def kotlin_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$").replace("\n", "\\n")
    )
    return f'"{escaped}"'


def dart_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$").replace("\n", "\\n")
    )
    return f"'{escaped}'"


def js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def js_key(key: str) -> str:
    """Object keys stay bare when they are identifiers, otherwise quoted."""
    return key if _JS_IDENTIFIER.match(key) else js_string(key)


def css_font_name(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def css_comment(text: str) -> str:
    return "/* " + text.replace("*/", "* /") + " */"


def line_comment(text: str) -> str:
    """Single-line ``//`` comment; newlines would end the comment early."""
    return "// " + " ".join(text.splitlines())
