"""
CSS codec: custom properties, keyframes and ``.dk-*`` component classes.

Custom property names are kebab-case. Dark colors live in a
``prefers-color-scheme`` media block. Absent token groups leave a comment.
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

from .._names import css_comment, css_font_name
from .._styles import STYLE_RULES, css_declarations, selected_motion, style_records


def _value(value: Any) -> str:
    return " ".join(str(value).splitlines())


def _not_selected(lines: list[str], section: str) -> None:
    lines.extend([css_comment(f"{section}: not selected"), ""])


def _color_vars(lines: list[str], colors: ColorMode, indent: str) -> None:
    for key in BASE_COLOR_KEYS:
        lines.append(f"{indent}--color-{camel_to_kebab(key)}: {_value(colors.get(key))};")
    for name in SEMANTIC_COLOR_NAMES:
        lines.append(f"{indent}--color-semantic-{name}: {_value(colors.get(f'semantic.{name}'))};")


def _block(lines: list[str], title: str, declarations: list[tuple[str, Any]]) -> None:
    lines.extend([css_comment(title), ":root {"])
    for name, value in declarations:
        lines.append(f"  {name}: {_value(value)};")
    lines.extend(["}", ""])


def _rule(lines: list[str], selector: str, record: Mapping[str, Any]) -> None:
    declarations = css_declarations(record)
    if not declarations:
        return
    lines.append(f"{selector} {{")
    for key, value in declarations:
        lines.append(f"  {camel_to_kebab(key)}: {_value(value)};")
    lines.append("}")


def _colors(lines: list[str], config: DesignConfig) -> None:
    colors = config.tokens.colors
    lines.extend([css_comment("Colors: Light Mode"), ":root {"])
    _color_vars(lines, colors.light, "  ")
    lines.extend(["}", ""])

    lines.extend(
        [css_comment("Colors: Dark Mode"), "@media (prefers-color-scheme: dark) {", "  :root {"]
    )
    _color_vars(lines, colors.dark, "    ")
    lines.extend(["  }", "}", ""])

    scale = colors.primary_scale.to_wire()
    _block(lines, "Primary Scale", [(f"--color-primary-{k}", v) for k, v in scale.items()])


def _typography(lines: list[str], config: DesignConfig) -> None:
    typography = config.tokens.typography
    if typography is None:
        _not_selected(lines, "Typography")
        return

    declarations: list[tuple[str, Any]] = [
        ("--font-heading", f"{css_font_name(typography.heading_font)}, sans-serif"),
        ("--font-body", f"{css_font_name(typography.body_font)}, sans-serif"),
    ]
    if typography.mono_font:
        declarations.append(("--font-mono", f"{css_font_name(typography.mono_font)}, monospace"))
    for key, step in typography.scale.steps():
        name = camel_to_kebab(key)
        declarations.append((f"--text-{name}-size", step.size))
        declarations.append((f"--text-{name}-line-height", step.line_height))
        declarations.append((f"--text-{name}-weight", step.weight))
        if step.letter_spacing:
            declarations.append((f"--text-{name}-letter-spacing", step.letter_spacing))
    _block(lines, f"Typography ({typography.scale_name}, ratio {typography.scale_ratio})", declarations)


def _scalar_groups(lines: list[str], config: DesignConfig) -> None:
    tokens = config.tokens
    if tokens.spacing is None:
        _not_selected(lines, "Spacing")
    else:
        _block(lines, "Spacing", [(f"--space-{k}", v) for k, v in tokens.spacing.scale.items()])

    if tokens.radius is None:
        _not_selected(lines, "Border Radius")
    else:
        _block(lines, "Border Radius", [(f"--radius-{k}", v) for k, v in tokens.radius.to_wire().items()])

    if tokens.shadows is None:
        _not_selected(lines, "Shadows")
    else:
        _block(lines, "Shadows", [(f"--shadow-{k}", v) for k, v in tokens.shadows.to_wire().items()])


def _animation(lines: list[str], config: DesignConfig) -> None:
    motion = selected_motion(config)
    if not motion:
        _not_selected(lines, "Animation")
        return

    declarations: list[tuple[str, Any]] = []
    for slot, data in motion:
        if data.get("easing"):
            declarations.append((f"--ease-{slot.css_key}", data["easing"]))
        if data.get("duration"):
            declarations.append((f"--duration-{slot.css_key}", data["duration"]))
    _block(lines, "Animation", declarations)

    for _, data in motion:
        keyframes = data.get("cssKeyframes")
        if keyframes:
            lines.extend([str(keyframes), ""])


def _components(lines: list[str], config: DesignConfig) -> None:
    emitted = False
    for category, data in config.components.items():
        if category not in STYLE_RULES:
            continue
        records = list(style_records(category, data))
        if not records:
            continue
        if not emitted:
            lines.extend([css_comment("Component Styles"), ""])
            emitted = True
        for rule, record in records:
            _rule(lines, rule.selector, record)
        lines.append("")

    if not emitted:
        _not_selected(lines, "Component Styles")


def export_css(config: DesignConfig) -> str:
    lines: list[str] = [css_comment("DesignKit: Generated CSS Custom Properties"), ""]
    _colors(lines, config)
    _typography(lines, config)
    _scalar_groups(lines, config)
    _animation(lines, config)
    _components(lines, config)
    return "\n".join(lines).rstrip("\n") + "\n"
