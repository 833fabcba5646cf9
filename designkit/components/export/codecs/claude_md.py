"""
Markdown brief for coding assistants (``CLAUDE.md``).

Lists every selected category by its human label with the item's name
and one-line description, then the concrete tokens and style records a
text-only client needs to reproduce the design.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from designkit.core.entities import (
    BASE_COLOR_KEYS,
    SEMANTIC_COLOR_NAMES,
    ColorMode,
    DesignConfig,
)
from designkit.core.formatting import camel_to_kebab

from .._names import humanize
from .._styles import MOTION_SLOTS, STYLE_RULES, css_declarations, style_records

BUTTON_STRATEGIES = {
    "solid": "bg=primary, text=primaryForeground",
    "outline": "bg=transparent, text=primary, border=primary",
    "ghost": "bg=transparent, text=primary",
    "soft": "bg=primary@10%, text=primary",
    "surface": "bg=surface, text=text, border=border",
    "gradient": "bg=primary->accent, text=primaryForeground",
}

_MOTION_CATEGORIES = {slot.category for slot in MOTION_SLOTS}
_SKIPPED_ATTRIBUTES = {"cssKeyframes"}


def _yes_no(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _css_block(lines: list[str], label: str, record: Mapping[str, Any]) -> None:
    declarations = css_declarations(record)
    if not declarations:
        return
    lines.extend(["```css", f"/* {label} */"])
    lines.extend(f"{camel_to_kebab(key)}: {value};" for key, value in declarations)
    lines.extend(["```", ""])


def _overview(lines: list[str], config: DesignConfig) -> None:
    lines.extend(["## Selected Styles", ""])
    if not config.selected_items:
        lines.extend(
            ["No categories selected yet. Only the default color palette below applies.", ""]
        )
        return
    for item in config.selected_items.values():
        lines.append(f"- **{item.category_label}** ({item.category_description}): {item.name}")
        lines.append(f"  - {item.description}")
    lines.append("")


def _mode(lines: list[str], title: str, colors: ColorMode) -> None:
    lines.append(f"### {title}")
    for key in BASE_COLOR_KEYS:
        lines.append(f"- {humanize(key)}: {colors.get(key)}")
    for name in SEMANTIC_COLOR_NAMES:
        lines.append(f"- {humanize(name)}: {colors.get(f'semantic.{name}')}")
    lines.append("")


def _tokens(lines: list[str], config: DesignConfig) -> None:
    tokens = config.tokens
    lines.extend(["## Colors", ""])
    lines.append(f"Active preview mode: {config.color_mode}.")
    lines.append("")
    _mode(lines, "Light Mode", tokens.colors.light)
    _mode(lines, "Dark Mode", tokens.colors.dark)

    lines.extend(["## Typography", ""])
    if tokens.typography is None:
        lines.extend(["Not selected. Use the platform's default fonts.", ""])
    else:
        t = tokens.typography
        lines.append(f"- Heading font: {t.heading_font}")
        lines.append(f"- Body font: {t.body_font}")
        if t.mono_font:
            lines.append(f"- Mono font: {t.mono_font}")
        lines.append(f"- Scale ratio: {t.scale_ratio} ({t.scale_name})")
        for key, step in t.scale.steps():
            spacing = f", letter-spacing {step.letter_spacing}" if step.letter_spacing else ""
            lines.append(
                f"  - {key}: {step.size} / {step.line_height}, weight {step.weight}{spacing}"
            )
        lines.append("")

    lines.extend(["## Spacing", ""])
    if tokens.spacing is None:
        lines.extend(["Not selected.", ""])
    else:
        lines.append(f"- Base unit: {tokens.spacing.base_unit}px")
        lines.append("- Scale:")
        lines.extend(f"  - {k}: {v}" for k, v in tokens.spacing.scale.items())
        lines.append("")

    for title, group in (("Border Radius", tokens.radius), ("Shadows", tokens.shadows)):
        lines.extend([f"## {title}", ""])
        if group is None:
            lines.extend(["Not selected.", ""])
            continue
        lines.extend(f"- {k}: {v}" for k, v in group.to_wire().items())
        lines.append("")


def _attributes(lines: list[str], category: str, data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        if key in _SKIPPED_ATTRIBUTES or isinstance(value, Mapping | list):
            continue
        if category == "buttons" and key == "colorStrategy":
            hint = BUTTON_STRATEGIES.get(str(value), str(value))
            lines.append(f"- Color strategy: {value} ({hint})")
            continue
        lines.append(f"- {humanize(key)}: {_yes_no(value)}")


def _components(lines: list[str], config: DesignConfig) -> None:
    sections = [
        category
        for category in config.components
        if category in STYLE_RULES and category in config.selected_items
    ]
    if not sections:
        return
    lines.extend(["## Component Styles", ""])
    for category in sections:
        item = config.selected_items[category]
        data = config.components[category]
        lines.extend([f"### {item.category_label}: {item.name}", "", item.description, ""])
        _attributes(lines, category, data)
        lines.append("")
        for rule, record in style_records(category, data):
            _css_block(lines, rule.label, record)


def _motion(lines: list[str], config: DesignConfig) -> None:
    sections = [
        category
        for category in config.components
        if category in _MOTION_CATEGORIES and category in config.selected_items
    ]
    if not sections:
        return
    lines.extend(["## Motion & Animation", ""])
    for category in sections:
        item = config.selected_items[category]
        data = config.components[category]
        lines.extend([f"### {item.category_label}: {item.name}", "", item.description, ""])
        _attributes(lines, category, data)
        lines.append("")
        properties = data.get("cssProperties")
        if isinstance(properties, Mapping):
            _css_block(lines, "properties", properties)
        if data.get("cssKeyframes"):
            lines.extend(["```css", str(data["cssKeyframes"]), "```", ""])


def export_claude_md(config: DesignConfig) -> str:
    lines = [
        f"# Design System: {config.name}",
        "",
        "When generating UI for this project, follow these design rules exactly.",
        "",
    ]
    _overview(lines, config)
    _tokens(lines, config)
    _components(lines, config)
    _motion(lines, config)
    return "\n".join(lines).rstrip("\n") + "\n"
