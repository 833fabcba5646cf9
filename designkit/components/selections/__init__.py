"""
Selections component - state transitions and write validation.
"""

from .component import (
    REQUIRED_FIELDS,
    apply_palette,
    deselect,
    pick_color,
    reset_all,
    reset_color_picks,
    run,
    select,
    set_color_mode,
    set_type_scale,
    unpick_color,
    validate_state_payload,
)
from .models import (
    InvalidColorKeyError,
    ValidateStateInput,
    ValidateStateOutput,
    ValidationError,
)

__all__ = [
    # Entry point
    "run",
    "validate_state_payload",
    "REQUIRED_FIELDS",
    # Transitions
    "select",
    "deselect",
    "reset_all",
    "pick_color",
    "unpick_color",
    "reset_color_picks",
    "apply_palette",
    "set_color_mode",
    "set_type_scale",
    # Models
    "InvalidColorKeyError",
    "ValidateStateInput",
    "ValidateStateOutput",
    "ValidationError",
]
