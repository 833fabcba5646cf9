"""
Selections component - pure transitions over DesignKitState.

Every transition returns a new state; the input is never mutated.
Also validates raw write payloads before they reach the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from designkit.components.colors import palette_to_picks
from designkit.core.entities import (
    ALL_COLOR_KEYS,
    COLOR_MODES,
    CatalogItem,
    ColorModeName,
    ColorPicks,
    DesignKitState,
    PartialPalette,
)

from .models import (
    InvalidColorKeyError,
    ValidateStateInput,
    ValidateStateOutput,
    ValidationError,
)

REQUIRED_FIELDS = ("selections", "colorPicks", "typeScale")

COLOR_CATEGORY = "colors"


# --- Selection transitions ---


def select(state: DesignKitState, category: str, item_id: str) -> DesignKitState:
    """Choose one item for a category, replacing any previous choice."""
    return state.model_copy(update={"selections": {**state.selections, category: item_id}})


def deselect(state: DesignKitState, category: str) -> DesignKitState:
    """Clear a category's choice. No-op if nothing is selected."""
    selections = {k: v for k, v in state.selections.items() if k != category}
    return state.model_copy(update={"selections": selections})


def reset_all(state: DesignKitState) -> DesignKitState:
    """Clear every selection and every color pick; mode and scale survive."""
    return state.model_copy(update={"selections": {}, "color_picks": ColorPicks()})


def set_color_mode(state: DesignKitState, mode: ColorModeName) -> DesignKitState:
    if mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode '{mode}': expected one of {list(COLOR_MODES)}")
    return state.model_copy(update={"color_mode": mode})


def set_type_scale(state: DesignKitState, scale_id: str) -> DesignKitState:
    return state.model_copy(update={"type_scale": scale_id})


# --- Color pick transitions ---


def _check_key(key: str) -> None:
    if key not in ALL_COLOR_KEYS:
        raise InvalidColorKeyError(key)


def _with_mode_picks(
    state: DesignKitState, mode: ColorModeName, picks: dict[str, str]
) -> DesignKitState:
    if mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode '{mode}': expected one of {list(COLOR_MODES)}")
    color_picks = state.color_picks.model_copy(update={mode: picks})
    return state.model_copy(update={"color_picks": color_picks})


def pick_color(
    state: DesignKitState, mode: ColorModeName, key: str, value: str
) -> DesignKitState:
    """Override one color key in one mode."""
    _check_key(key)
    picks = {**state.color_picks.for_mode(mode), key: value}
    return _with_mode_picks(state, mode, picks)


def unpick_color(state: DesignKitState, mode: ColorModeName, key: str) -> DesignKitState:
    """Drop an override so the key falls back to palette or default."""
    _check_key(key)
    picks = {k: v for k, v in state.color_picks.for_mode(mode).items() if k != key}
    return _with_mode_picks(state, mode, picks)


def reset_color_picks(state: DesignKitState) -> DesignKitState:
    """Clear all picks along with the palette selection they were built from."""
    cleared = deselect(state, COLOR_CATEGORY)
    return cleared.model_copy(update={"color_picks": ColorPicks()})


def apply_palette(state: DesignKitState, item: CatalogItem) -> DesignKitState:
    """Select a palette and copy all of its colors into the picks for both modes."""
    if item.category != COLOR_CATEGORY:
        raise ValueError(f"Item '{item.id}' is a '{item.category}' item, not a color palette")
    palette = PartialPalette.model_validate(item.data)
    selected = select(state, COLOR_CATEGORY, item.id)
    return selected.model_copy(update={"color_picks": palette_to_picks(palette)})


# --- Write validation ---


def _check_string_map(value: Any, name: str) -> list[ValidationError]:
    if not isinstance(value, Mapping):
        return [
            ValidationError(
                field=name,
                code="invalid_type",
                message=f"Field '{name}' must be an object mapping keys to strings",
            )
        ]
    return [
        ValidationError(
            field=f"{name}.{key}",
            code="invalid_type",
            message=f"Value for '{name}.{key}' must be a string",
        )
        for key, val in value.items()
        if not isinstance(val, str)
    ]


def validate_state_payload(payload: Any) -> list[ValidationError]:
    """
    Check a raw write payload before it replaces the stored state.

    Returns an empty list when the payload is acceptable.
    """
    if not isinstance(payload, Mapping):
        return [
            ValidationError(
                field="body",
                code="invalid_type",
                message="Request body must be a JSON object with selections, colorPicks, typeScale",
            )
        ]

    missing = [name for name in REQUIRED_FIELDS if name not in payload]
    if missing:
        return [
            ValidationError(
                field=name,
                code="required",
                message=f"Field '{name}' is required: send the full state, not a partial update",
            )
            for name in missing
        ]

    errors = _check_string_map(payload["selections"], "selections")

    picks = payload["colorPicks"]
    if not isinstance(picks, Mapping):
        errors.append(
            ValidationError(
                field="colorPicks",
                code="invalid_type",
                message="Field 'colorPicks' must be an object with 'light' and 'dark' maps",
            )
        )
    else:
        for mode in COLOR_MODES:
            if mode in picks:
                errors.extend(_check_string_map(picks[mode], f"colorPicks.{mode}"))

    if not isinstance(payload["typeScale"], str):
        errors.append(
            ValidationError(
                field="typeScale",
                code="invalid_type",
                message="Field 'typeScale' must be a preset id string such as 'default'",
            )
        )

    mode = payload.get("colorMode", "light")
    if mode not in COLOR_MODES:
        errors.append(
            ValidationError(
                field="colorMode",
                code="invalid_value",
                message=f"Field 'colorMode' must be one of {list(COLOR_MODES)}",
            )
        )

    return errors


def run(inp: ValidateStateInput) -> ValidateStateOutput:
    """
    Main entry point for the selections component.

    Validates a raw payload and, when clean, parses it into a state.
    """
    errors = validate_state_payload(inp.payload)
    if errors:
        return ValidateStateOutput(state=None, errors=errors, success=False)

    try:
        state = DesignKitState.model_validate(inp.payload)
    except PydanticValidationError as exc:
        errors = [
            ValidationError(
                field=".".join(str(part) for part in err["loc"]) or "body",
                code="invalid",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return ValidateStateOutput(state=None, errors=errors, success=False)

    return ValidateStateOutput(state=state)
