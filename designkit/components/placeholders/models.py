"""
Placeholder grammar: a closed set of tagged segments.

A style value such as ``"1px solid __primary-40"`` parses into
``(LiteralText("1px solid "), ScaledToken("primary", 40))``.
"""

from __future__ import annotations

from dataclasses import dataclass

from designkit.core.entities import ColorMode


@dataclass(frozen=True)
class LiteralText:
    """Verbatim text, including inert ``__`` sequences."""

    text: str


@dataclass(frozen=True)
class NamedToken:
    """``__<name>``: replaced by the color of that name."""

    name: str


@dataclass(frozen=True)
class ScaledToken:
    """``__<name>-NN``: replaced by ``rgba()`` of that color at NN percent."""

    name: str
    percent: int


Segment = LiteralText | NamedToken | ScaledToken
Template = tuple[Segment, ...]


@dataclass(frozen=True)
class ResolveValueInput:
    """Input for resolving a single style value."""

    value: str
    colors: ColorMode


@dataclass(frozen=True)
class ResolveValueOutput:
    """Output from resolving a single style value."""

    value: str
    template: Template
