"""
CSS length conversion for the native codecs.

Native platforms work in points (dp/pt). ``px`` and unitless values map
1:1, ``rem`` scales by the 16px root size. Anything relative to a parent
(percentages, ``em``) or made of several values has no point equivalent.
"""

from __future__ import annotations

import re

from designkit.core.formatting import round_half_up

ROOT_FONT_SIZE_PX = 16

_LENGTH_RE = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+))(px|rem|pt|dp)?$")


def to_points(value: str) -> float | None:
    """``"16px"`` -> 16.0, ``"1.5rem"`` -> 24.0, ``"50%"`` -> None."""
    match = _LENGTH_RE.match(value.strip())
    if match is None:
        return None
    number = float(match.group(1))
    if match.group(2) == "rem":
        number *= ROOT_FONT_SIZE_PX
    return round_half_up(number, 2)

