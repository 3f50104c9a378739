"""
Color utilities subpackage - requires loguru and numpy.

Hex/RGB/HSL conversions, palette generation, contrast and WCAG checks.
"""

from utilstoolkit.color.convert import (
    RGBColor,
    HSLColor,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_hex,
    is_valid_hex,
)

from utilstoolkit.color.palette import (
    generate_palette,
    invert_color,
    get_complementary_color,
    adjust_brightness,
)

from utilstoolkit.color.contrast import (
    WCAG_THRESHOLDS,
    relative_luminance,
    calculate_contrast,
    is_color_readable,
)

__all__ = [
    # convert
    "RGBColor",
    "HSLColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    # palette
    "generate_palette",
    "invert_color",
    "get_complementary_color",
    "adjust_brightness",
    # contrast
    "WCAG_THRESHOLDS",
    "relative_luminance",
    "calculate_contrast",
    "is_color_readable",
]
