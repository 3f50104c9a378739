"""
Palette and color manipulation - requires numpy.

All functions take hex strings and return hex strings, or an empty
sentinel ([] or None) when the input color cannot be parsed.
"""

__all__ = [
    "generate_palette",
    "invert_color",
    "get_complementary_color",
    "adjust_brightness",
]

from typing import List, Optional

from utilstoolkit.color.convert import hex_to_rgb, hsl_to_hex, rgb_to_hex, rgb_to_hsl
from utilstoolkit.numeric.arithmetic import clamp, round_half_up

# Lightness ramp: first entry sits PALETTE_OFFSET below the base, then steps up
PALETTE_OFFSET = 30
PALETTE_STEP = 15


def generate_palette(base_color: str, count: int = 5) -> List[str]:
    """
    Generate a lightness ramp around a base color.

    Hue and saturation are held fixed; lightness starts 30 points below the
    base and rises 15 points per entry, clamped to [0, 100].

    Args:
        base_color: 6-digit hex color
        count: Number of colors to produce

    Returns:
        List of exactly count hex colors, or [] if base_color is invalid

    Example:
        >>> generate_palette("#808080", 3)
        ['#333333', '#595959', '#808080']
    """
    rgb = hex_to_rgb(base_color)
    if rgb is None:
        return []

    hsl = rgb_to_hsl(*rgb)
    palette = []
    for i in range(count):
        lightness = clamp(hsl.l - PALETTE_OFFSET + i * PALETTE_STEP, 0, 100)
        palette.append(hsl_to_hex(hsl.h, hsl.s, lightness))
    return palette


def invert_color(hex_color: str) -> Optional[str]:
    """
    Invert each channel (255 - value).

    Example:
        >>> invert_color("#000000")
        '#ffffff'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hex(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)


def get_complementary_color(hex_color: str) -> Optional[str]:
    """
    Rotate the hue by 180 degrees, keeping saturation and lightness.

    Example:
        >>> get_complementary_color("#ff0000")
        '#00ffff'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    hsl = rgb_to_hsl(*rgb)
    return hsl_to_hex((hsl.h + 180) % 360, hsl.s, hsl.l)


def adjust_brightness(hex_color: str, percent: float) -> Optional[str]:
    """
    Lighten (positive percent) or darken (negative percent) a color.

    Each channel becomes channel + channel * percent / 100, clamped to
    [0, 255] and rounded.

    Example:
        >>> adjust_brightness("#804020", 50)
        '#c06030'
        >>> adjust_brightness("#804020", -100)
        '#000000'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None

    def adjust(value: int) -> int:
        return round_half_up(clamp(value + value * percent / 100, 0, 255))

    return rgb_to_hex(adjust(rgb.r), adjust(rgb.g), adjust(rgb.b))
