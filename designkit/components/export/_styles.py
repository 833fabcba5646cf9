"""
Where each component category keeps its style records, and what the
records are called in CSS and in prose.

A record path is a dot path into the item's data (``css.hover``).
Keys starting with ``__`` inside a record are control values for the
preview renderer (slider thumbs and the like), not CSS properties.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from designkit.core.entities import DesignConfig

CONTROL_KEY_PREFIX = "__"


@dataclass(frozen=True)
class StyleRule:
    path: str
    selector: str
    label: str


@dataclass(frozen=True)
class MotionSlot:
    category: str
    css_key: str
    tailwind_key: str


def _rules(*rows: tuple[str, str, str]) -> tuple[StyleRule, ...]:
    return tuple(StyleRule(path, selector, label) for path, selector, label in rows)


STYLE_RULES: dict[str, tuple[StyleRule, ...]] = {
    "buttons": _rules(
        ("css.default", ".dk-btn", "default"),
        ("css.hover", ".dk-btn:hover", "hover"),
        ("css.active", ".dk-btn:active", "active"),
        ("css.disabled", ".dk-btn:disabled", "disabled"),
    ),
    "inputs": _rules(
        ("css.default", ".dk-input", "default"),
        ("css.focus", ".dk-input:focus", "focus"),
        ("css.filled", ".dk-input.filled", "filled"),
        ("css.error", ".dk-input.error", "error"),
        ("css.disabled", ".dk-input:disabled", "disabled"),
    ),
    "cards": _rules(
        ("css", ".dk-card", "default"),
        ("hoverCss", ".dk-card:hover", "hover"),
    ),
    "badges": _rules(("css", ".dk-badge", "default")),
    "avatars": _rules(("css", ".dk-avatar", "default")),
    "lists": _rules(
        ("css", ".dk-list", "container"),
        ("itemCss", ".dk-list-item", "item"),
        ("activeItemCss", ".dk-list-item.active", "active item"),
    ),
    "tables": _rules(
        ("containerCss", ".dk-table", "container"),
        ("headerCss", ".dk-table th", "header"),
        ("rowCss", ".dk-table td", "row"),
        ("altRowCss", ".dk-table tr:nth-child(even) td", "alt row"),
        ("hoverRowCss", ".dk-table tr:hover td", "hover row"),
    ),
    "pricing": _rules(
        ("css", ".dk-pricing", "container"),
        ("headerCss", ".dk-pricing-header", "header"),
        ("priceCss", ".dk-pricing-price", "price"),
    ),
    "testimonials": _rules(
        ("css", ".dk-testimonial", "container"),
        ("quoteCss", ".dk-testimonial-quote", "quote"),
    ),
    "stats": _rules(
        ("css", ".dk-stat", "container"),
        ("valueCss", ".dk-stat-value", "value"),
    ),
    "dividers": _rules(("css", ".dk-divider", "default")),
    "images": _rules(
        ("css", ".dk-image", "container"),
        ("overlayCss", ".dk-image-overlay", "overlay"),
    ),
    "navigation": _rules(
        ("css", ".dk-nav", "default"),
        ("hoverCss", ".dk-nav a:hover", "hover"),
    ),
    "tabs": _rules(
        ("containerCss", ".dk-tabs", "container"),
        ("tabCss", ".dk-tab", "tab"),
        ("activeTabCss", ".dk-tab.active", "active tab"),
        ("hoverTabCss", ".dk-tab:hover", "hover tab"),
    ),
    "sidebars": _rules(
        ("css", ".dk-sidebar", "container"),
        ("itemCss", ".dk-sidebar-item", "item"),
        ("activeItemCss", ".dk-sidebar-item.active", "active item"),
        ("hoverItemCss", ".dk-sidebar-item:hover", "hover item"),
    ),
    "modals": _rules(
        ("css", ".dk-modal-overlay", "overlay"),
        ("panelCss", ".dk-modal-panel", "panel"),
    ),
    "heroes": _rules(
        ("css", ".dk-hero", "container"),
        ("contentCss", ".dk-hero-content", "content"),
    ),
    "footers": _rules(("css", ".dk-footer", "default")),
    "empty-states": _rules(
        ("containerCss", ".dk-empty-state", "container"),
        ("illustrationCss", ".dk-empty-state-illustration", "illustration"),
    ),
    "loading": _rules(
        ("containerCss", ".dk-loading", "container"),
        ("elementCss", ".dk-loading-element", "element"),
    ),
    "onboarding": _rules(
        ("containerCss", ".dk-onboarding", "container"),
        ("stepIndicatorCss", ".dk-onboarding-steps", "step indicator"),
    ),
    "errors": _rules(
        ("containerCss", ".dk-error", "container"),
        ("iconCss", ".dk-error-icon", "icon"),
    ),
    "success": _rules(
        ("containerCss", ".dk-success", "container"),
        ("iconCss", ".dk-success-icon", "icon"),
    ),
    "notifications": _rules(
        ("containerCss", ".dk-notification", "container"),
        ("contentCss", ".dk-notification-content", "content"),
    ),
}

MOTION_SLOTS: tuple[MotionSlot, ...] = (
    MotionSlot("button-animations", "button", "button-press"),
    MotionSlot("hover-animations", "hover", "hover"),
    MotionSlot("page-transitions", "page-transition", "page-transition"),
    MotionSlot("micro-interactions", "micro-interaction", "micro-interaction"),
    MotionSlot("entrance-animations", "entrance", "entrance"),
)


def get_record(data: Mapping[str, Any], path: str) -> Mapping[str, Any] | None:
    """Follow a dot path into item data; None unless it ends at a mapping."""
    node: Any = data
    for segment in path.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node if isinstance(node, Mapping) else None


def css_declarations(record: Mapping[str, Any]) -> list[tuple[str, str]]:
    """(property, value) pairs with control keys and nested values removed."""
    return [
        (key, str(value))
        for key, value in record.items()
        if not key.startswith(CONTROL_KEY_PREFIX) and not isinstance(value, Mapping | list)
    ]


def style_records(category: str, data: Mapping[str, Any]) -> Iterator[tuple[StyleRule, Mapping[str, Any]]]:
    """Non-empty records of a component, in table order."""
    for rule in STYLE_RULES.get(category, ()):
        record = get_record(data, rule.path)
        if record and css_declarations(record):
            yield rule, record


def selected_motion(config: DesignConfig) -> list[tuple[MotionSlot, Mapping[str, Any]]]:
    """Motion slots that have a selection, in canonical order."""
    return [
        (slot, config.components[slot.category])
        for slot in MOTION_SLOTS
        if slot.category in config.components
    ]


def keyframes_name(keyframes: str) -> str | None:
    """First ``@keyframes`` name in a block."""
    for line in keyframes.splitlines():
        parts = line.strip().split()
        if len(parts) >= 2 and parts[0] == "@keyframes":
            return parts[1].rstrip("{")
    return None
