"""
Domain entities for DesignKit.

Python attributes are snake_case; the wire format (JSON mirror, HTTP bodies,
disk snapshot) uses the camelCase names the browser UI speaks.

Invariants:
- ColorMode always carries all 13 base fields and 4 semantic fields
- DesignConfig holds no timestamps: equal states produce equal configs
- Field declaration order is the canonical output order for every codec
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ColorModeName = Literal["light", "dark"]
COLOR_MODES: tuple[ColorModeName, ...] = ("light", "dark")


class DomainModel(BaseModel):
    """Base for all immutable, camelCase-on-the-wire domain models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON-compatible wire shape (aliases, no nulls)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# --- Colors ---


class SemanticColors(DomainModel):
    success: str
    warning: str
    error: str
    info: str


class ColorMode(DomainModel):
    """Fully resolved color set for one mode."""

    background: str
    surface: str
    surface_alt: str
    border: str
    text: str
    text_secondary: str
    text_muted: str
    primary: str
    primary_foreground: str
    secondary: str
    secondary_foreground: str
    accent: str
    accent_foreground: str
    semantic: SemanticColors

    def get(self, key: str) -> str:
        """Look up a color by its wire key (``primary``, ``semantic.error``)."""
        if key.startswith("semantic."):
            return str(getattr(self.semantic, key.split(".", 1)[1]))
        return str(getattr(self, BASE_COLOR_ATTRS[key]))


# Wire key -> attribute name, in canonical declaration order.
BASE_COLOR_ATTRS: dict[str, str] = {
    (info.alias or name): name
    for name, info in ColorMode.model_fields.items()
    if name != "semantic"
}
BASE_COLOR_KEYS: tuple[str, ...] = tuple(BASE_COLOR_ATTRS)
SEMANTIC_COLOR_NAMES: tuple[str, ...] = tuple(SemanticColors.model_fields)
SEMANTIC_COLOR_KEYS: tuple[str, ...] = tuple(f"semantic.{n}" for n in SEMANTIC_COLOR_NAMES)
ALL_COLOR_KEYS: tuple[str, ...] = BASE_COLOR_KEYS + SEMANTIC_COLOR_KEYS


class ColorScale(DomainModel):
    s50: str = Field(alias="50")
    s100: str = Field(alias="100")
    s200: str = Field(alias="200")
    s300: str = Field(alias="300")
    s400: str = Field(alias="400")
    s500: str = Field(alias="500")
    s600: str = Field(alias="600")
    s700: str = Field(alias="700")
    s800: str = Field(alias="800")
    s900: str = Field(alias="900")
    s950: str = Field(alias="950")


class ColorPaletteData(DomainModel):
    light: ColorMode
    dark: ColorMode
    primary_scale: ColorScale

    def mode(self, name: ColorModeName) -> ColorMode:
        return self.dark if name == "dark" else self.light


# --- Partial palettes ---
# Catalog palettes are complete, but the merger also accepts palettes with
# gaps; every missing field falls back on its own.


class PartialSemanticColors(DomainModel):
    success: str | None = None
    warning: str | None = None
    error: str | None = None
    info: str | None = None


class PartialColorMode(DomainModel):
    background: str | None = None
    surface: str | None = None
    surface_alt: str | None = None
    border: str | None = None
    text: str | None = None
    text_secondary: str | None = None
    text_muted: str | None = None
    primary: str | None = None
    primary_foreground: str | None = None
    secondary: str | None = None
    secondary_foreground: str | None = None
    accent: str | None = None
    accent_foreground: str | None = None
    semantic: PartialSemanticColors = Field(default_factory=PartialSemanticColors)

    def get(self, key: str) -> str | None:
        """Look up a color by its wire key, None where the palette has a gap."""
        if key.startswith("semantic."):
            return getattr(self.semantic, key.split(".", 1)[1])
        return getattr(self, BASE_COLOR_ATTRS[key])


class PartialColorScale(DomainModel):
    s50: str | None = Field(default=None, alias="50")
    s100: str | None = Field(default=None, alias="100")
    s200: str | None = Field(default=None, alias="200")
    s300: str | None = Field(default=None, alias="300")
    s400: str | None = Field(default=None, alias="400")
    s500: str | None = Field(default=None, alias="500")
    s600: str | None = Field(default=None, alias="600")
    s700: str | None = Field(default=None, alias="700")
    s800: str | None = Field(default=None, alias="800")
    s900: str | None = Field(default=None, alias="900")
    s950: str | None = Field(default=None, alias="950")


class PartialPalette(DomainModel):
    light: PartialColorMode = Field(default_factory=PartialColorMode)
    dark: PartialColorMode = Field(default_factory=PartialColorMode)
    primary_scale: PartialColorScale = Field(default_factory=PartialColorScale)

    def mode(self, name: ColorModeName) -> PartialColorMode:
        return self.dark if name == "dark" else self.light


# --- Typography ---


class TypeStep(DomainModel):
    size: str
    line_height: str
    weight: int
    letter_spacing: str | None = None


class TypeScale(DomainModel):
    h1: TypeStep
    h2: TypeStep
    h3: TypeStep
    h4: TypeStep
    h5: TypeStep
    h6: TypeStep
    body: TypeStep
    body_small: TypeStep
    caption: TypeStep
    overline: TypeStep
    button: TypeStep

    def steps(self) -> list[tuple[str, TypeStep]]:
        """(wire key, step) pairs in canonical order."""
        return [
            (info.alias or name, getattr(self, name))
            for name, info in type(self).model_fields.items()
        ]


class FontPairing(DomainModel):
    """Catalog shape of a typography item; the scale is generated per preset."""

    heading_font: str
    heading_font_url: str | None = None
    body_font: str
    body_font_url: str | None = None
    mono_font: str | None = None
    mono_font_url: str | None = None
    base_size: int = 16
    heading_weight: int = 700
    body_weight: int = 400


class TypographyData(DomainModel):
    heading_font: str
    heading_font_url: str | None = None
    body_font: str
    body_font_url: str | None = None
    mono_font: str | None = None
    mono_font_url: str | None = None
    scale_ratio: float
    scale_name: str
    scale: TypeScale


# --- Spacing / radius / shadows ---


class SpacingData(DomainModel):
    base_unit: int
    scale: dict[str, str]


class RadiusData(DomainModel):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str = Field(alias="2xl")
    full: str
    button: str
    card: str
    input: str
    badge: str
    modal: str


class ShadowData(DomainModel):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str = Field(alias="2xl")
    inner: str


# --- Catalog ---

CategoryGroupId = Literal["foundations", "components", "content", "structure", "patterns", "motion"]


class CategoryMeta(DomainModel):
    id: str
    label: str
    group: CategoryGroupId
    description: str


class CatalogItem(DomainModel):
    """A pre-authored style variant. ``data`` holds category-specific style records."""

    id: str
    category: str
    name: str
    description: str
    data: dict[str, Any]


# --- State ---


class ColorPicks(DomainModel):
    light: dict[str, str] = Field(default_factory=dict)
    dark: dict[str, str] = Field(default_factory=dict)

    def for_mode(self, mode: ColorModeName) -> dict[str, str]:
        return self.dark if mode == "dark" else self.light

    def is_empty(self) -> bool:
        return not self.light and not self.dark


class DesignKitState(DomainModel):
    """Raw user state: the unit of persistence and network transfer."""

    selections: dict[str, str] = Field(default_factory=dict)
    color_picks: ColorPicks = Field(default_factory=ColorPicks)
    type_scale: str = "default"
    color_mode: ColorModeName = "light"


# --- Resolved config ---


class DesignTokens(DomainModel):
    colors: ColorPaletteData
    typography: TypographyData | None = None
    spacing: SpacingData | None = None
    radius: RadiusData | None = None
    shadows: ShadowData | None = None


class SelectedItem(DomainModel):
    id: str
    name: str
    description: str
    category_label: str
    category_description: str


class DesignConfig(DomainModel):
    """Canonical resolved token document. Always recomputed, never persisted."""

    name: str = "DesignKit Export"
    color_mode: ColorModeName = "light"
    type_scale: str = "default"
    selections: dict[str, str] = Field(default_factory=dict)
    color_picks: ColorPicks = Field(default_factory=ColorPicks)
    tokens: DesignTokens
    components: dict[str, dict[str, Any]] = Field(default_factory=dict)
    selected_items: dict[str, SelectedItem] = Field(default_factory=dict)
