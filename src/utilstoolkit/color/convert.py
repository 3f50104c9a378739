"""
Color conversion utilities - requires loguru.

Pure functions for color format conversions (hex, RGB, HSL).
Malformed input yields None; out-of-range numbers are clamped.
"""

__all__ = [
    "RGBColor",
    "HSLColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
]

import re
from typing import Any, NamedTuple, Optional

from loguru import logger

from utilstoolkit.numeric.arithmetic import clamp, round_half_up

_HEX6_PATTERN = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE | re.ASCII)
_HEX3_OR_6_PATTERN = re.compile(r"#?(?:[a-f\d]{3}|[a-f\d]{6})", re.IGNORECASE | re.ASCII)


class RGBColor(NamedTuple):
    """Red, green, blue channels in 0-255."""

    r: int
    g: int
    b: int


class HSLColor(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741


def hex_to_rgb(hex_color: Any) -> Optional[RGBColor]:
    """
    Convert a 6-digit hex color to RGB integers (0-255).

    Args:
        hex_color: Hex color string (e.g., "#77aadd" or "77AADD")

    Returns:
        RGBColor, or None for anything that is not 6 hex digits with an
        optional "#" (3-digit shorthand included)

    Example:
        >>> hex_to_rgb("#ff8000")
        RGBColor(r=255, g=128, b=0)
        >>> hex_to_rgb("#fff") is None
        True
    """
    if not isinstance(hex_color, str):
        logger.debug(f"hex_to_rgb: not a string: {hex_color!r}")
        return None
    match = _HEX6_PATTERN.fullmatch(hex_color)
    if match is None:
        logger.debug(f"hex_to_rgb: malformed hex color {hex_color!r}")
        return None
    return RGBColor(*(int(group, 16) for group in match.groups()))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB components to a lowercase "#rrggbb" string.

    Each component is clamped to [0, 255] and truncated to an integer.

    Example:
        >>> rgb_to_hex(255, 128, 0)
        '#ff8000'
        >>> rgb_to_hex(300, -10, 64.9)
        '#ff0040'
    """
    channels = (int(clamp(c, 0, 255)) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


def rgb_to_hsl(r: float, g: float, b: float) -> HSLColor:
    """
    Convert RGB (0-255) to HSL with integer degrees and percentages.

    Each component is clamped to [0, 255] first.

    Example:
        >>> rgb_to_hsl(255, 0, 0)
        HSLColor(h=0, s=100, l=50)
        >>> rgb_to_hsl(510, -20, 0)
        HSLColor(h=0, s=100, l=50)
    """
    r, g, b = (clamp(c, 0, 255) / 255 for c in (r, g, b))
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        d = high - low
        if lightness > 0.5:
            saturation = d / (2 - high - low)
        else:
            saturation = d / (high + low)

        if high == r:
            hue = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / d + 2
        else:
            hue = (r - g) / d + 4
        hue /= 6

    return HSLColor(
        round_half_up(hue * 360),
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """
    Convert HSL to a hex color string.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].

    Example:
        >>> hsl_to_hex(120, 100, 50)
        '#00ff00'
        >>> hsl_to_hex(480, 100, 50)
        '#00ff00'
    """
    h = (h % 360) / 360
    s = clamp(s / 100, 0, 1)
    l = clamp(l / 100, 0, 1)  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return rgb_to_hex(
        round_half_up(r * 255),
        round_half_up(g * 255),
        round_half_up(b * 255),
    )


def is_valid_hex(hex_color: Any) -> bool:
    """
    Check for a 3- or 6-digit hex color with optional "#".

    Looser than hex_to_rgb, which only accepts the 6-digit form.

    Example:
        >>> is_valid_hex("#fff")
        True
        >>> is_valid_hex("#ffff")
        False
    """
    if not isinstance(hex_color, str):
        return False
    return _HEX3_OR_6_PATTERN.fullmatch(hex_color) is not None
