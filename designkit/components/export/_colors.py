"""
Color literal parsing for the native codecs.

Web codecs pass color strings through untouched. Native codecs need
numeric channels, so they normalize here and fall back to opaque black
(flagged as inexact) when a value cannot be parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*(\d*\.?\d+)\s*)?\)$"
)


@dataclass(frozen=True)
class RGBA:
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def argb_hex(self) -> str:
        """``0xAARRGGBB`` as used by Compose and Flutter."""
        alpha = round(self.alpha * 255)
        return f"0x{alpha:02X}{self.red:02X}{self.green:02X}{self.blue:02X}"

    def unit_channels(self) -> tuple[float, float, float]:
        return (self.red / 255, self.green / 255, self.blue / 255)


BLACK = RGBA(0, 0, 0, 1.0)


def parse_color(value: str) -> RGBA | None:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``, ``rgb()`` or ``rgba()``."""
    text = value.strip()

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return RGBA(channels[0], channels[1], channels[2], alpha)

    match = _RGB_RE.match(text)
    if match:
        red, green, blue = (int(match.group(i)) for i in (1, 2, 3))
        if max(red, green, blue) > 255:
            return None
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        return RGBA(red, green, blue, min(alpha, 1.0))

    return None


def normalize_color(value: str) -> tuple[RGBA, bool]:
    """Parsed color and whether it was exact; unparsable values become black."""
    parsed = parse_color(value)
    if parsed is None:
        return BLACK, False
    return parsed, True
