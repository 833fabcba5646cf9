"""Number and identifier formatting shared by the resolver and the codecs."""

from __future__ import annotations

import math
import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def format_number(value: float) -> str:
    """
    Render a number the way a JavaScript runtime would print it.

    Integral floats drop the fractional part (``1.0`` -> ``"1"``),
    everything else uses the shortest round-tripping representation.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def round_half_up(value: float, places: int = 1) -> float:
    """Round like ``Math.round(x * 10**p) / 10**p``."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def camel_to_kebab(name: str) -> str:
    """``surfaceAlt`` -> ``surface-alt``."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()
