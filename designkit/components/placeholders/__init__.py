"""
Placeholders component - resolves ``__token`` color markers in style values.
"""

from .component import (
    MARKER_PREFIX,
    NAMED_TOKENS,
    SCALED_TOKENS,
    hex_to_rgba,
    parse_template,
    render,
    resolve_data,
    resolve_record,
    resolve_value,
    run,
)
from .models import (
    LiteralText,
    NamedToken,
    ResolveValueInput,
    ResolveValueOutput,
    ScaledToken,
    Segment,
    Template,
)

__all__ = [
    # Entry points
    "run",
    "resolve_value",
    "resolve_record",
    "resolve_data",
    # Grammar
    "parse_template",
    "render",
    "hex_to_rgba",
    "MARKER_PREFIX",
    "NAMED_TOKENS",
    "SCALED_TOKENS",
    # Models
    "LiteralText",
    "NamedToken",
    "ScaledToken",
    "Segment",
    "Template",
    "ResolveValueInput",
    "ResolveValueOutput",
]
