"""
Type scale presets and modular scale generation.

Sizes are rem, rounded half-up to one decimal. Line heights are derived
from the rounded size, so both values are stable across platforms.
"""

from __future__ import annotations

from dataclasses import dataclass

from designkit.core.entities import FontPairing, TypeScale, TypeStep, TypographyData
from designkit.core.formatting import format_number, round_half_up

ROOT_FONT_SIZE_PX = 16


@dataclass(frozen=True)
class TypeScalePreset:
    id: str
    label: str
    ratio: float


TYPE_SCALE_PRESETS: tuple[TypeScalePreset, ...] = (
    TypeScalePreset(id="compact", label="Compact", ratio=1.125),
    TypeScalePreset(id="default", label="Default", ratio=1.2),
    TypeScalePreset(id="comfortable", label="Comfortable", ratio=1.25),
    TypeScalePreset(id="expressive", label="Expressive", ratio=1.333),
    TypeScalePreset(id="dramatic", label="Dramatic", ratio=1.5),
)

DEFAULT_PRESET_ID = "default"

_PRESETS_BY_ID = {preset.id: preset for preset in TYPE_SCALE_PRESETS}


def get_preset(preset_id: str) -> TypeScalePreset:
    """Look up a preset; unknown ids fall back to the default preset."""
    return _PRESETS_BY_ID.get(preset_id, _PRESETS_BY_ID[DEFAULT_PRESET_ID])


def _step(
    base_rem: float,
    ratio: float,
    exp: int,
    weight: int,
    line_height_multiplier: float,
    letter_spacing: str | None = None,
) -> TypeStep:
    size = round_half_up(base_rem * ratio**exp, 1)
    line_height = round_half_up(size * line_height_multiplier, 1)
    return TypeStep(
        size=f"{format_number(size)}rem",
        line_height=f"{format_number(line_height)}rem",
        weight=weight,
        letter_spacing=letter_spacing,
    )


def generate_type_scale(
    base_size_px: int, ratio: float, heading_weight: int, body_weight: int
) -> TypeScale:
    """Build the eleven-step scale from a base size and modular ratio."""
    base = base_size_px / ROOT_FONT_SIZE_PX
    return TypeScale(
        h1=_step(base, ratio, 5, heading_weight, 1.2, "-0.02em"),
        h2=_step(base, ratio, 4, heading_weight, 1.25, "-0.015em"),
        h3=_step(base, ratio, 3, heading_weight, 1.3, "-0.01em"),
        h4=_step(base, ratio, 2, heading_weight, 1.35),
        h5=_step(base, ratio, 1, heading_weight, 1.4),
        h6=_step(base, ratio, 0, heading_weight, 1.4),
        body=_step(base, ratio, 0, body_weight, 1.6),
        body_small=_step(base, ratio, -1, body_weight, 1.5),
        caption=_step(base, ratio, -2, body_weight, 1.4, "0.02em"),
        overline=_step(base, ratio, -2, body_weight + 100, 1.4, "0.08em"),
        button=_step(base, ratio, 0, body_weight + 100, 1.0, "0.02em"),
    )


def build_typography(pairing: FontPairing, preset_id: str) -> TypographyData:
    """Combine a font pairing with a scale preset into typography tokens."""
    preset = get_preset(preset_id)
    return TypographyData(
        heading_font=pairing.heading_font,
        heading_font_url=pairing.heading_font_url,
        body_font=pairing.body_font,
        body_font_url=pairing.body_font_url,
        mono_font=pairing.mono_font,
        mono_font_url=pairing.mono_font_url,
        scale_ratio=preset.ratio,
        scale_name=preset.label,
        scale=generate_type_scale(
            pairing.base_size, preset.ratio, pairing.heading_weight, pairing.body_weight
        ),
    )
