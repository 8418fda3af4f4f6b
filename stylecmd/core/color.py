"""
Color helpers for HSL token values.

Token values for color categories are stored as a single string
"H S% L%" (e.g. "217 91% 60%"). These helpers parse and format that
encoding and convert the common raw color notations into it.
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import Optional, Tuple


# ============================================================
# PATTERNS
# ============================================================

HSL_TRIPLE_RE = re.compile(r'^(\d+(?:\.\d+)?)\s+(\d+(?:\.\d+)?)%\s+(\d+(?:\.\d+)?)%$')
HSL_FUNCTION_RE = re.compile(
    r'hsl\(\s*(\d+(?:\.\d+)?)\s*,?\s*(\d+(?:\.\d+)?)%\s*,?\s*(\d+(?:\.\d+)?)%\s*\)', re.I
)
RGB_FUNCTION_RE = re.compile(r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)', re.I)
RGB_FULL_RE = re.compile(
    r'^rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*(?:,\s*(?:\d+(?:\.\d+)?|\.\d+)\s*)?\)$', re.I
)
HEX_RE = re.compile(r'^#([0-9a-f]{3}|[0-9a-f]{6})$', re.I)

# Foregrounds written next to a recolored surface
DARK_FOREGROUND = "240 5.9% 10%"
LIGHT_FOREGROUND = "0 0% 98%"

# Lightness above which a surface gets the dark foreground
FOREGROUND_LIGHTNESS_THRESHOLD = 50.0


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (display rounding)."""
    return int(math.floor(value + 0.5))


def parse_hsl(value: Optional[str]) -> Optional[Tuple[float, float, float]]:
    """
    Parse an "H S% L%" string.

    Returns:
        (hue, saturation, lightness) or None when the value is not a triple
    """
    if not value:
        return None
    match = HSL_TRIPLE_RE.match(value.strip())
    if not match:
        return None
    return float(match.group(1)), float(match.group(2)), float(match.group(3))


def format_hsl(h: float, s: float, l: float) -> str:
    """Format components as "H S% L%" with whole-number rounding."""
    return f"{round_half_up(h)} {round_half_up(s)}% {round_half_up(l)}%"


def is_raw_color(value: str) -> bool:
    """True if value is a complete HSL triple, #hex, rgb(...) or hsl(...) encoding."""
    v = value.strip()
    return bool(
        HSL_TRIPLE_RE.match(v)
        or HEX_RE.match(v)
        or RGB_FULL_RE.match(v)
        or HSL_FUNCTION_RE.fullmatch(v)
    )


def _rgb_to_hsl_string(r: float, g: float, b: float) -> str:
    """r, g, b in 0..1."""
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return f"{round_half_up(h * 360)} {round_half_up(s * 100)}% {round_half_up(l * 100)}%"


def to_hsl_value(color: str) -> str:
    """
    Convert a color notation into the "H S% L%" token encoding.

    Supports raw HSL triples, hsl(...), #RGB / #RRGGBB and rgb(...).
    Anything else is returned trimmed and unchanged.
    """
    if not color:
        return color
    value = color.strip()

    if HSL_TRIPLE_RE.match(value):
        return value

    match = HSL_FUNCTION_RE.search(value)
    if match:
        return f"{match.group(1)} {match.group(2)}% {match.group(3)}%"

    match = HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        r, g, b = (int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
        return _rgb_to_hsl_string(r, g, b)

    match = RGB_FUNCTION_RE.search(value)
    if match:
        r, g, b = (min(int(x), 255) / 255.0 for x in match.groups())
        return _rgb_to_hsl_string(r, g, b)

    return value


def contrasting_foreground(
    surface: str,
    threshold: float = FOREGROUND_LIGHTNESS_THRESHOLD,
    dark: str = DARK_FOREGROUND,
    light: str = LIGHT_FOREGROUND,
) -> Optional[str]:
    """
    Pick a foreground for a surface color using a fixed lightness threshold.

    Returns:
        dark foreground for light surfaces, light foreground otherwise,
        or None if the surface is not an HSL triple
    """
    parsed = parse_hsl(surface)
    if parsed is None:
        return None
    return dark if parsed[2] > threshold else light
